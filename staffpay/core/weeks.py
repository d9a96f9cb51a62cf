from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import TypeVar

DateLike = TypeVar("DateLike", date, datetime)


def normalize_week_start(reference: DateLike) -> DateLike:
    """Return the Monday of the ISO week containing ``reference``.

    The calendar components of the value are used as-is: an aware datetime is
    never converted to UTC first, so a late-evening local timestamp stays in
    its own week. Datetimes come back at midnight with their ``tzinfo`` kept.
    """

    if isinstance(reference, datetime):
        midnight = reference.replace(hour=0, minute=0, second=0, microsecond=0)
        return midnight - timedelta(days=midnight.weekday())
    return reference - timedelta(days=reference.weekday())


def week_days(week_start: date) -> list[date]:
    monday = normalize_week_start(week_start)
    return [monday + timedelta(days=offset) for offset in range(7)]
