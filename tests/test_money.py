from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from staffpay.core.money import format_ars, format_currency, json_number, parse_currency, to_decimal
from staffpay.core.validation import InvalidInputError


@pytest.mark.parametrize(
    "amount,expected",
    [
        (Decimal("1234567.89"), "1.234.567,89"),
        (Decimal("95000"), "95.000,00"),
        (Decimal("-3000"), "-3.000,00"),
        (Decimal("0.005"), "0,01"),
        ("abc", "0,00"),
        (12, "12,00"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_currency_without_decimals():
    assert format_currency(Decimal("1234567.89"), 0) == "1.234.568"


def test_format_ars():
    assert format_ars(Decimal("2500")) == "$ 2.500,00"
    assert format_ars(Decimal("2500"), show_symbol=False) == "2.500,00"


def test_parse_currency():
    assert parse_currency("1.234.567,89") == Decimal("1234567.89")
    assert parse_currency("$ 95.000,00") == Decimal("95000.00")
    assert parse_currency("") == Decimal("0")
    assert parse_currency("n/a") == Decimal("0")


def test_to_decimal():
    assert to_decimal("") == Decimal("0")
    assert to_decimal(None) == Decimal("0")
    assert to_decimal(" 7.5 ") == Decimal("7.5")
    assert to_decimal(0.1) == Decimal("0.1")
    with pytest.raises(InvalidInputError):
        to_decimal("eight")
    with pytest.raises(InvalidInputError):
        to_decimal("NaN")
    with pytest.raises(InvalidInputError):
        to_decimal(True)


def test_json_number():
    assert json_number(Decimal("40.00")) == 40
    assert isinstance(json_number(Decimal("40.00")), int)
    assert json_number(Decimal("7.5")) == 7.5


def test_json_number_keeps_precision_floats_cannot_carry():
    precise = Decimal("1234.5678901234567890123")
    rendered = json_number(precise)
    assert rendered == "1234.5678901234567890123"
    assert to_decimal(rendered) == precise
    assert json_number(Decimal("0.1")) == 0.1


def test_format_currency_beyond_default_precision():
    assert format_currency(Decimal("1e27")) == "1.000.000.000.000.000.000.000.000.000,00"
    assert format_currency(Decimal("-999999999999999999999900000")) == "-999.999.999.999.999.999.999.900.000,00"
