#!/usr/bin/env python
from __future__ import annotations

import argparse
from pathlib import Path

from staffpay.core.settings import load_settings
from staffpay.exporters.payroll_history import export_payroll_history_csv, export_payroll_history_xlsx
from staffpay.infrastructure import HttpWorkRecordRepository


def main() -> None:
    parser = argparse.ArgumentParser(description="Export a worker's payroll history from the dashboard API")
    parser.add_argument("--staff", required=True, help="staff identifier")
    parser.add_argument("--output", required=True, help="output file (.csv or .xlsx)")
    parser.add_argument("--api", default=None, help="API base URL (default: STAFFPAY_API_BASE_URL)")
    args = parser.parse_args()

    settings = load_settings()
    api_base = args.api or settings.api_base_url
    if not api_base:
        parser.error("an API base URL is required (--api or STAFFPAY_API_BASE_URL)")

    repository = HttpWorkRecordRepository(api_base, timeout=settings.api_timeout)
    try:
        records = repository.list_by_staff(args.staff)
    finally:
        repository.close()

    output = Path(args.output)
    if output.suffix.lower() == ".xlsx":
        export_payroll_history_xlsx(output, records)
    else:
        export_payroll_history_csv(output, records)
    print(f"{len(records)} records exported: {output}")


if __name__ == "__main__":
    main()
