"""In-memory staff directory."""
from __future__ import annotations

import threading
from typing import Protocol

from staffpay.core.schema import StaffCreate, StaffUpdate
from staffpay.domain import StaffMember


class StaffRepository(Protocol):
    def create(self, payload: StaffCreate) -> StaffMember: ...

    def get(self, staff_id: str) -> StaffMember | None: ...

    def update(self, staff_id: str, payload: StaffUpdate) -> StaffMember | None: ...

    def delete(self, staff_id: str) -> bool: ...

    def list_staff(
        self,
        *,
        first_name: str | None = None,
        dni: str | None = None,
        cuit: str | None = None,
        page: int = 1,
        limit: int | None = None,
    ) -> list[StaffMember]: ...


class InMemoryStaffRepository:
    def __init__(self) -> None:
        self._staff: dict[str, StaffMember] = {}
        self._counter = 0
        self._lock = threading.Lock()

    def create(self, payload: StaffCreate) -> StaffMember:
        with self._lock:
            self._counter += 1
            member = StaffMember(
                id=f"staff-{self._counter:05d}",
                first_name=payload.first_name.strip(),
                last_name=payload.last_name.strip(),
                dni=payload.dni,
                cuit=payload.cuit,
                category=payload.category,
            )
            self._staff[member.id] = member
        return member

    def get(self, staff_id: str) -> StaffMember | None:
        return self._staff.get(staff_id)

    def update(self, staff_id: str, payload: StaffUpdate) -> StaffMember | None:
        with self._lock:
            member = self._staff.get(staff_id)
            if member is None:
                return None
            for name, value in payload.changes().items():
                if name in ("first_name", "last_name"):
                    if value is None:
                        continue
                    value = value.strip()
                setattr(member, name, value)
        return member

    def delete(self, staff_id: str) -> bool:
        with self._lock:
            return self._staff.pop(staff_id, None) is not None

    def list_staff(
        self,
        *,
        first_name: str | None = None,
        dni: str | None = None,
        cuit: str | None = None,
        page: int = 1,
        limit: int | None = None,
    ) -> list[StaffMember]:
        members = list(self._staff.values())
        if first_name:
            keyword = first_name.strip().lower()
            members = [member for member in members if keyword in member.first_name.lower()]
        if dni:
            members = [member for member in members if member.dni == dni.strip()]
        if cuit:
            members = [member for member in members if member.cuit == cuit.strip()]
        # ids are zero-padded counters, so they sort in creation order
        members.sort(key=lambda member: member.id, reverse=True)
        if limit:
            start = (max(page, 1) - 1) * limit
            members = members[start : start + limit]
        return members

    def reset(self) -> None:
        with self._lock:
            self._staff.clear()
            self._counter = 0
