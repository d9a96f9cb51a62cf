"""Domain entities for the staff directory."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(slots=True)
class StaffMember:
    """An internal employee whose weekly hours are paid by the hour."""

    id: str
    first_name: str
    last_name: str
    dni: str | None = None
    cuit: str | None = None
    category: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_wire(self) -> dict[str, object]:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "dni": self.dni,
            "cuit": self.cuit,
            "category": self.category,
            "createdAt": self.created_at.isoformat(),
        }
