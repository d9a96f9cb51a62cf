from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel

from staffpay.core.money import format_ars, format_currency
from staffpay.core.schema import DAY_LABELS, PayrollRecord
from staffpay.core.weeks import week_days


class ReceiptLine(BaseModel):
    day: str
    label: str
    worked_on: date
    hours: Decimal


class Receipt(BaseModel):
    """Everything the printable weekly receipt shows, already formatted."""

    record_id: str
    employee_name: str
    date: str
    lines: list[ReceiptLine]
    total_hours: Decimal
    hourly_rate: Decimal
    advance: Decimal
    show_advance: bool
    gross_pay: Decimal
    total_pay: Decimal
    hourly_rate_display: str
    advance_display: str
    total_pay_display: str
    company_name: str = ""


def build_receipt(record: PayrollRecord, employee_name: str, *, company_name: str = "") -> Receipt:
    days = week_days(record.week_start)
    lines = [
        ReceiptLine(day=day, label=DAY_LABELS[day], worked_on=days[index], hours=hours)
        for index, (day, hours) in enumerate(record.hours.by_day())
    ]
    return Receipt(
        record_id=record.id,
        employee_name=employee_name,
        date=record.week_start.strftime("%d/%m/%Y"),
        lines=lines,
        total_hours=record.total_hours,
        hourly_rate=record.hourly_rate,
        advance=record.advance,
        show_advance=record.advance > 0,
        gross_pay=record.gross_pay,
        total_pay=record.total,
        hourly_rate_display=format_ars(record.hourly_rate),
        advance_display=f"-$ {format_currency(record.advance)}",
        total_pay_display=format_ars(record.total),
        company_name=company_name,
    )
