from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from staffpay.core.schema import WorkWeek

MAX_DAILY_HOURS = Decimal("24")


class InvalidInputError(ValueError):
    """Raised when a work week fails pre-flight validation."""


def validate_work_week(week: "WorkWeek") -> None:
    for day, hours in week.hours.by_day():
        if hours < 0:
            raise InvalidInputError(f"hours for {day} cannot be negative")
        if hours > MAX_DAILY_HOURS:
            raise InvalidInputError(f"hours for {day} cannot exceed {MAX_DAILY_HOURS}")
    if week.hourly_rate < 0:
        raise InvalidInputError("hourly rate cannot be negative")
    if week.advance < 0:
        raise InvalidInputError("advance cannot be negative")
