from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd

from staffpay.core.schema import PayrollRecord

COLUMNS = [
    "record_id",
    "staff_id",
    "week_start",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
    "total_hours",
    "hourly_rate",
    "advance",
    "gross_pay",
    "net_pay",
]


def _history_frame(records: Iterable[PayrollRecord]) -> pd.DataFrame:
    rows = []
    for record in records:
        row = {
            "record_id": record.id,
            "staff_id": record.staff_id,
            "week_start": record.week_start.isoformat(),
        }
        row.update({day: float(hours) for day, hours in record.hours.by_day()})
        row.update(
            {
                "total_hours": float(record.total_hours),
                "hourly_rate": float(record.hourly_rate),
                "advance": float(record.advance),
                "gross_pay": float(record.gross_pay),
                "net_pay": float(record.net_pay),
            }
        )
        rows.append(row)
    return pd.DataFrame(rows, columns=COLUMNS)


def export_payroll_history_csv(path: Path, records: Iterable[PayrollRecord]) -> Path:
    df = _history_frame(records)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    return path


def export_payroll_history_xlsx(path: Path, records: Iterable[PayrollRecord]) -> Path:
    df = _history_frame(records)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_excel(path, index=False, sheet_name="payroll", engine="openpyxl")
    return path
