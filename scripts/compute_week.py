#!/usr/bin/env python
from __future__ import annotations

import argparse
import sys
from datetime import date

from staffpay.core.calculator import compute_summary
from staffpay.core.money import format_ars
from staffpay.core.schema import DAY_FIELDS, WorkWeek


def main() -> None:
    parser = argparse.ArgumentParser(description="Compute weekly pay for one staff member")
    parser.add_argument("--staff", required=True, help="staff identifier")
    parser.add_argument("--date", default=None, help="any date inside the week, YYYY-MM-DD (default: today)")
    parser.add_argument("--rate", required=True, help="hourly rate")
    parser.add_argument("--advance", default="0", help="cash advance to deduct")
    parser.add_argument(
        "--hours",
        nargs=7,
        metavar=("MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN"),
        default=["0"] * 7,
        help="hours worked each day, Monday first",
    )
    args = parser.parse_args()

    reference = date.fromisoformat(args.date) if args.date else date.today()
    try:
        week = WorkWeek(
            staff_id=args.staff,
            week_start=reference,
            hours=dict(zip(DAY_FIELDS, args.hours)),
            hourly_rate=args.rate,
            advance=args.advance,
        )
        summary = compute_summary(week)
    except ValueError as exc:
        print(f"invalid input: {exc}", file=sys.stderr)
        sys.exit(2)

    print(f"Semana del {week.week_start:%d/%m/%Y}")
    print(f"Total horas: {summary.total_hours} hs")
    print(f"Bruto: {format_ars(summary.gross_pay)}")
    print(f"Adelanto: {format_ars(week.advance)}")
    print(f"TOTAL A PAGAR: {format_ars(summary.net_pay)}")


if __name__ == "__main__":
    main()
