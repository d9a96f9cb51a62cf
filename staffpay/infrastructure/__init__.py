"""Infrastructure layer exports."""

from .http_records import HttpWorkRecordRepository
from .staff import InMemoryStaffRepository, StaffRepository
from .work_records import InMemoryWorkRecordRepository, PersistenceError, WorkRecordRepository

__all__ = [
    "HttpWorkRecordRepository",
    "InMemoryStaffRepository",
    "InMemoryWorkRecordRepository",
    "PersistenceError",
    "StaffRepository",
    "WorkRecordRepository",
]
