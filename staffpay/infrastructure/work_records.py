"""Persistence for submitted payroll weeks."""
from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Protocol

from staffpay.core.schema import PayrollRecord, PaySummary, WorkWeek

logger = logging.getLogger(__name__)


class PersistenceError(RuntimeError):
    """Raised when a payroll record cannot be stored or fetched."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class WorkRecordRepository(Protocol):
    """Persistence contract for payroll records."""

    def submit(self, week: WorkWeek, summary: PaySummary) -> PayrollRecord: ...

    def list_by_staff(self, staff_id: str) -> list[PayrollRecord]: ...

    def get(self, record_id: str) -> PayrollRecord | None: ...


def newest_first(records: list[PayrollRecord]) -> list[PayrollRecord]:
    return sorted(records, key=PayrollRecord.sort_key, reverse=True)


class InMemoryWorkRecordRepository:
    """Process-local record store for development and tests."""

    def __init__(self) -> None:
        self._records: dict[str, PayrollRecord] = {}
        self._counter = 0
        self._lock = threading.Lock()

    def _next_id(self) -> str:
        self._counter += 1
        return f"wr-{self._counter:05d}"

    def submit(self, week: WorkWeek, summary: PaySummary) -> PayrollRecord:
        with self._lock:
            duplicate = any(
                record.staff_id == week.staff_id and record.week_start == week.week_start
                for record in self._records.values()
            )
            if duplicate:
                logger.warning(
                    "staff %s already has a record for the week of %s; storing another",
                    week.staff_id,
                    week.week_start.isoformat(),
                )
            record = PayrollRecord.from_week(
                self._next_id(),
                week,
                summary,
                created_at=datetime.now(timezone.utc),
            )
            self._records[record.id] = record
        return record

    def list_by_staff(self, staff_id: str) -> list[PayrollRecord]:
        with self._lock:
            records = [record for record in self._records.values() if record.staff_id == staff_id]
        return newest_first(records)

    def get(self, record_id: str) -> PayrollRecord | None:
        return self._records.get(record_id)

    def reset(self) -> None:
        with self._lock:
            self._records.clear()
            self._counter = 0
