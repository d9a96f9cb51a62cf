"""Domain layer definitions."""

from .staff import StaffMember

__all__ = [
    "StaffMember",
]
