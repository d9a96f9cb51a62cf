from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from staffpay.core.money import json_number, to_decimal
from staffpay.core.weeks import normalize_week_start

DAY_FIELDS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

DAY_LABELS: dict[str, str] = {
    "monday": "Lunes",
    "tuesday": "Martes",
    "wednesday": "Miércoles",
    "thursday": "Jueves",
    "friday": "Viernes",
    "saturday": "Sábado",
    "sunday": "Domingo",
}

# Field names used by the dashboard backend for the flat work-record payload.
WIRE_DAY_KEYS: dict[str, str] = {day: f"hours{day.capitalize()}" for day in DAY_FIELDS}


def _coerce_date(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        return value.split("T", 1)[0]
    return value


class HoursByDay(BaseModel):
    """Hours worked on each day of a Monday-starting week."""

    model_config = ConfigDict(frozen=True)

    monday: Decimal = Field(default=Decimal("0"), validation_alias=AliasChoices("monday", "lunes"))
    tuesday: Decimal = Field(default=Decimal("0"), validation_alias=AliasChoices("tuesday", "martes"))
    wednesday: Decimal = Field(default=Decimal("0"), validation_alias=AliasChoices("wednesday", "miercoles"))
    thursday: Decimal = Field(default=Decimal("0"), validation_alias=AliasChoices("thursday", "jueves"))
    friday: Decimal = Field(default=Decimal("0"), validation_alias=AliasChoices("friday", "viernes"))
    saturday: Decimal = Field(default=Decimal("0"), validation_alias=AliasChoices("saturday", "sabado"))
    sunday: Decimal = Field(default=Decimal("0"), validation_alias=AliasChoices("sunday", "domingo"))

    @field_validator(*DAY_FIELDS, mode="before")
    @classmethod
    def _blank_is_zero(cls, value: Any, info: ValidationInfo) -> Decimal:
        return to_decimal(value, field=info.field_name or "hours")

    def by_day(self) -> list[tuple[str, Decimal]]:
        return [(day, getattr(self, day)) for day in DAY_FIELDS]

    def total(self) -> Decimal:
        return sum((hours for _, hours in self.by_day()), Decimal("0"))


class WorkWeek(BaseModel):
    """Hours logged by one staff member for one week, plus rate and advance.

    Accepts snake_case names, the dashboard wire names (``staffId``,
    ``startDate``, ``valuePerHour``, ``hoursMonday`` ...) and the Spanish
    form keys for the day buckets. Range checks happen in
    :func:`staffpay.core.calculator.compute_summary`, not here.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    staff_id: str = Field(validation_alias=AliasChoices("staff_id", "staffId"))
    week_start: date = Field(
        default_factory=lambda: normalize_week_start(date.today()),
        validation_alias=AliasChoices("week_start", "weekStartDate", "startDate"),
    )
    hours: HoursByDay = Field(
        default_factory=HoursByDay,
        validation_alias=AliasChoices("hours", "hoursByDay", "weekData"),
    )
    hourly_rate: Decimal = Field(
        default=Decimal("0"),
        validation_alias=AliasChoices("hourly_rate", "hourlyRate", "valuePerHour"),
    )
    advance: Decimal = Decimal("0")

    @model_validator(mode="before")
    @classmethod
    def _collect_flat_hours(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        flat = [key for key in WIRE_DAY_KEYS.values() if key in data]
        if not flat:
            return data
        data = dict(data)
        nested = data.get("hours") or {}
        if isinstance(nested, HoursByDay):
            hours = nested.model_dump()
        elif isinstance(nested, dict):
            hours = dict(nested)
        else:
            raise ValueError("hours must be an object")
        for day, key in WIRE_DAY_KEYS.items():
            if key in data:
                hours[day] = data.pop(key)
        data["hours"] = hours
        return data

    @field_validator("staff_id", mode="before")
    @classmethod
    def _stringify_staff_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("week_start", mode="before")
    @classmethod
    def _strip_time(cls, value: Any) -> Any:
        return _coerce_date(value)

    @field_validator("week_start")
    @classmethod
    def _to_monday(cls, value: date) -> date:
        return normalize_week_start(value)

    @field_validator("hourly_rate", "advance", mode="before")
    @classmethod
    def _money(cls, value: Any, info: ValidationInfo) -> Decimal:
        return to_decimal(value, field=info.field_name or "amount")

    def to_wire(self) -> dict[str, Any]:
        """Payload expected by ``POST /staff/work-record``."""

        payload: dict[str, Any] = {
            "staffId": self.staff_id,
            "startDate": self.week_start.isoformat(),
            "valuePerHour": json_number(self.hourly_rate),
            "advance": json_number(self.advance),
        }
        for day, hours in self.hours.by_day():
            payload[WIRE_DAY_KEYS[day]] = json_number(hours)
        return payload


class PaySummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_hours: Decimal
    gross_pay: Decimal
    net_pay: Decimal


class PayrollRecord(BaseModel):
    """Persisted, immutable form of a work week and its pay summary.

    ``total`` is always the net pay (gross minus advance).
    """

    model_config = ConfigDict(frozen=True)

    id: str
    staff_id: str
    week_start: date
    hours: HoursByDay
    hourly_rate: Decimal
    advance: Decimal
    total_hours: Decimal
    gross_pay: Decimal
    net_pay: Decimal
    total: Decimal
    created_at: datetime | None = None

    @classmethod
    def from_week(
        cls,
        record_id: str,
        week: WorkWeek,
        summary: PaySummary,
        *,
        created_at: datetime | None = None,
    ) -> "PayrollRecord":
        return cls(
            id=record_id,
            staff_id=week.staff_id,
            week_start=week.week_start,
            hours=week.hours,
            hourly_rate=week.hourly_rate,
            advance=week.advance,
            total_hours=summary.total_hours,
            gross_pay=summary.gross_pay,
            net_pay=summary.net_pay,
            total=summary.net_pay,
            created_at=created_at,
        )

    def work_week(self) -> WorkWeek:
        return WorkWeek(
            staff_id=self.staff_id,
            week_start=self.week_start,
            hours=self.hours,
            hourly_rate=self.hourly_rate,
            advance=self.advance,
        )

    def sort_key(self) -> tuple[date, float, str]:
        stamp = self.created_at.timestamp() if self.created_at else 0.0
        return (self.week_start, stamp, self.id)

    def to_wire(self) -> dict[str, Any]:
        payload = self.work_week().to_wire()
        payload.update(
            {
                "id": self.id,
                "totalHours": json_number(self.total_hours),
                "grossPay": json_number(self.gross_pay),
                "netPay": json_number(self.net_pay),
                "total": json_number(self.total),
                "createdAt": self.created_at.isoformat() if self.created_at else None,
            }
        )
        return payload


class StaffCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(min_length=1, validation_alias=AliasChoices("first_name", "firstName"))
    last_name: str = Field(min_length=1, validation_alias=AliasChoices("last_name", "lastName"))
    dni: str | None = None
    cuit: str | None = None
    category: str | None = None


class StaffUpdate(BaseModel):
    """Partial staff edit; only the fields sent are changed."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str | None = Field(default=None, min_length=1, validation_alias=AliasChoices("first_name", "firstName"))
    last_name: str | None = Field(default=None, min_length=1, validation_alias=AliasChoices("last_name", "lastName"))
    dni: str | None = None
    cuit: str | None = None
    category: str | None = None

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
