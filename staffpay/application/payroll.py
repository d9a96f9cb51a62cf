"""Application service layer for the weekly payroll workflow."""
from __future__ import annotations

import logging

from staffpay.core.calculator import compute_summary, summarize_week
from staffpay.core.receipt import Receipt, build_receipt
from staffpay.core.schema import PayrollRecord, PaySummary, StaffCreate, StaffUpdate, WorkWeek
from staffpay.domain import StaffMember
from staffpay.infrastructure import (
    InMemoryStaffRepository,
    InMemoryWorkRecordRepository,
    PersistenceError,
    StaffRepository,
    WorkRecordRepository,
)

logger = logging.getLogger(__name__)


class RecordNotFoundError(LookupError):
    """Raised when a payroll record id is unknown."""


class PayrollService:
    """Coordinates hours entry, submission and payroll history."""

    def __init__(
        self,
        records: WorkRecordRepository,
        staff: StaffRepository,
        *,
        company_name: str = "",
    ) -> None:
        self._records = records
        self._staff = staff
        self._company_name = company_name

    @property
    def records(self) -> WorkRecordRepository:
        return self._records

    # ------------------------------------------------------------------
    # hours entry
    # ------------------------------------------------------------------
    def preview(self, week: WorkWeek) -> PaySummary:
        return compute_summary(week)

    def submit(self, week: WorkWeek) -> PayrollRecord:
        summary = compute_summary(week)
        try:
            record = self._records.submit(week, summary)
        except PersistenceError:
            logger.exception("failed to store week of %s for staff %s", week.week_start, week.staff_id)
            raise
        logger.info(
            "stored record %s for staff %s: %s h, net %s",
            record.id,
            record.staff_id,
            record.total_hours,
            record.net_pay,
        )
        return record

    # ------------------------------------------------------------------
    # history
    # ------------------------------------------------------------------
    def history(self, staff_id: str) -> list[PayrollRecord]:
        """Records for one worker, newest week first, summaries recomputed."""

        refreshed: list[PayrollRecord] = []
        for record in self._records.list_by_staff(staff_id):
            summary = summarize_week(record.work_week())
            refreshed.append(
                PayrollRecord.from_week(record.id, record.work_week(), summary, created_at=record.created_at)
            )
        return refreshed

    def get_record(self, record_id: str) -> PayrollRecord:
        record = self._records.get(record_id)
        if record is None:
            raise RecordNotFoundError(record_id)
        return record

    def receipt(self, record_id: str) -> Receipt:
        record = self.get_record(record_id)
        member = self._staff.get(record.staff_id)
        employee_name = member.display_name if member else record.staff_id
        return build_receipt(record, employee_name, company_name=self._company_name)

    # ------------------------------------------------------------------
    # staff directory
    # ------------------------------------------------------------------
    def create_staff(self, payload: StaffCreate) -> StaffMember:
        member = self._staff.create(payload)
        logger.info("created staff member %s (%s)", member.id, member.display_name)
        return member

    def get_staff(self, staff_id: str) -> StaffMember | None:
        return self._staff.get(staff_id)

    def update_staff(self, staff_id: str, payload: StaffUpdate) -> StaffMember | None:
        member = self._staff.update(staff_id, payload)
        if member is not None:
            logger.info("updated staff member %s (%s)", member.id, ", ".join(sorted(payload.changes())))
        return member

    def delete_staff(self, staff_id: str) -> bool:
        deleted = self._staff.delete(staff_id)
        if deleted:
            logger.info("deleted staff member %s", staff_id)
        return deleted

    def list_staff(
        self,
        *,
        first_name: str | None = None,
        dni: str | None = None,
        cuit: str | None = None,
        page: int = 1,
        limit: int | None = None,
    ) -> list[StaffMember]:
        return self._staff.list_staff(first_name=first_name, dni=dni, cuit=cuit, page=page, limit=limit)

    # ------------------------------------------------------------------
    # testing helpers
    # ------------------------------------------------------------------
    def reset(self) -> None:
        for repository in (self._records, self._staff):
            reset = getattr(repository, "reset", None)
            if reset is not None:
                reset()


_service = PayrollService(InMemoryWorkRecordRepository(), InMemoryStaffRepository())


def get_payroll_service() -> PayrollService:
    """Return the singleton payroll service for the process."""

    return _service


def configure_payroll_service(
    records: WorkRecordRepository | None = None,
    *,
    company_name: str | None = None,
) -> PayrollService:
    """Swap the record store (e.g. for the HTTP-backed one) at start-up."""

    global _service
    _service = PayrollService(
        records or InMemoryWorkRecordRepository(),
        InMemoryStaffRepository(),
        company_name=_service._company_name if company_name is None else company_name,
    )
    return _service


def reset_payroll_state() -> None:
    """Reset the in-memory stores (used in tests)."""

    _service.reset()
