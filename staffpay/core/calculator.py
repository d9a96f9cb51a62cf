from __future__ import annotations

from staffpay.core.schema import PaySummary, WorkWeek
from staffpay.core.validation import validate_work_week
from staffpay.core.weeks import normalize_week_start


def summarize_week(week: WorkWeek) -> PaySummary:
    """Pay totals without the range pre-flight, for rows already stored."""

    total_hours = week.hours.total()
    gross_pay = total_hours * week.hourly_rate
    net_pay = gross_pay - week.advance
    return PaySummary(total_hours=total_hours, gross_pay=gross_pay, net_pay=net_pay)


def compute_summary(week: WorkWeek) -> PaySummary:
    """Total hours, gross pay and net pay for one work week.

    Hours are a plain sum with no overtime multiplier. Net pay is gross pay
    minus the advance and is reported as-is, negative included. Arithmetic is
    exact; rounding belongs to presentation.
    """

    validate_work_week(week)
    return summarize_week(week)


__all__ = ["compute_summary", "normalize_week_start", "summarize_week"]
