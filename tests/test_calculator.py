from __future__ import annotations

import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from staffpay.core.calculator import compute_summary
from staffpay.core.schema import DAY_FIELDS, WorkWeek
from staffpay.core.validation import InvalidInputError


def _week(hours: dict, rate="0", advance="0") -> WorkWeek:
    return WorkWeek(
        staff_id="staff-1",
        week_start=date(2025, 1, 13),
        hours=hours,
        hourly_rate=rate,
        advance=advance,
    )


def test_forty_hour_week_with_advance():
    week = _week(
        {"monday": 8, "tuesday": 8, "wednesday": 8, "thursday": 8, "friday": 8, "saturday": 0, "sunday": 0},
        rate=2500,
        advance=5000,
    )
    summary = compute_summary(week)
    assert summary.total_hours == Decimal("40")
    assert summary.gross_pay == Decimal("100000")
    assert summary.net_pay == Decimal("95000")


def test_advance_larger_than_gross_is_not_clamped():
    summary = compute_summary(_week({"monday": 2}, rate=1000, advance=5000))
    assert summary.total_hours == Decimal("2")
    assert summary.gross_pay == Decimal("2000")
    assert summary.net_pay == Decimal("-3000")


@pytest.mark.parametrize(
    "hours",
    [
        {},
        {"sunday": "7.25"},
        {"monday": "1.5", "wednesday": "3", "saturday": "0.75"},
        {day: "24" for day in DAY_FIELDS},
        {day: str(index) for index, day in enumerate(DAY_FIELDS)},
    ],
)
def test_total_hours_is_plain_sum(hours):
    summary = compute_summary(_week(hours, rate="1"))
    expected = sum((Decimal(value) for value in hours.values()), Decimal("0"))
    assert summary.total_hours == expected


def test_gross_pay_is_linear_in_rate():
    hours = {"monday": "7.5", "tuesday": "8.25", "friday": "3.3333", "sunday": "1"}
    rate = Decimal("1234.57")
    single = compute_summary(_week(hours, rate=rate))
    double = compute_summary(_week(hours, rate=rate * 2))
    assert double.gross_pay == single.gross_pay * 2


@pytest.mark.parametrize("advance", ["0", "0.01", "1999.99", "2000", "10000"])
def test_net_pay_is_gross_minus_advance(advance):
    summary = compute_summary(_week({"monday": "2"}, rate="1000", advance=advance))
    assert summary.net_pay == summary.gross_pay - Decimal(advance)


def test_blank_entries_count_as_zero():
    week = _week({"monday": "", "tuesday": None, "wednesday": "4"}, rate="", advance="")
    assert week.hours.monday == Decimal("0")
    assert week.hours.tuesday == Decimal("0")
    summary = compute_summary(week)
    assert summary.total_hours == Decimal("4")
    assert summary.gross_pay == Decimal("0")


@pytest.mark.parametrize(
    "hours,rate,advance",
    [
        ({"monday": "-1"}, "100", "0"),
        ({"thursday": "24.01"}, "100", "0"),
        ({"monday": "8"}, "-1", "0"),
        ({"monday": "8"}, "100", "-0.01"),
    ],
)
def test_out_of_range_input_is_rejected(hours, rate, advance):
    with pytest.raises(InvalidInputError):
        compute_summary(_week(hours, rate=rate, advance=advance))


@pytest.mark.parametrize("value", ["0", "24"])
def test_boundary_hours_are_accepted(value):
    summary = compute_summary(_week({day: value for day in DAY_FIELDS}, rate="10"))
    assert summary.total_hours == Decimal(value) * 7


def test_spanish_form_keys_and_wire_names_are_accepted():
    from_form = WorkWeek.model_validate(
        {
            "staffId": 7,
            "startDate": "2025-01-15T14:00:00.000Z",
            "weekData": {"lunes": 8, "miercoles": "4.5", "domingo": ""},
            "hourlyRate": 2500,
        }
    )
    from_wire = WorkWeek.model_validate(
        {
            "staffId": "7",
            "startDate": "2025-01-13",
            "valuePerHour": 2500,
            "advance": 0,
            "hoursMonday": 8,
            "hoursWednesday": 4.5,
        }
    )
    assert from_form.model_dump() == from_wire.model_dump()
    assert from_form.staff_id == "7"
    assert from_form.week_start == date(2025, 1, 13)


def test_to_wire_uses_dashboard_field_names():
    week = _week({"monday": "8", "friday": "4.5"}, rate="2500", advance="1000")
    payload = week.to_wire()
    assert payload == {
        "staffId": "staff-1",
        "startDate": "2025-01-13",
        "valuePerHour": 2500,
        "advance": 1000,
        "hoursMonday": 8,
        "hoursTuesday": 0,
        "hoursWednesday": 0,
        "hoursThursday": 0,
        "hoursFriday": 4.5,
        "hoursSaturday": 0,
        "hoursSunday": 0,
    }
