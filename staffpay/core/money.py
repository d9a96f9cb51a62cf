from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any

from staffpay.core.validation import InvalidInputError

_THOUSANDS = re.compile(r"\B(?=(\d{3})+(?!\d))")


def to_decimal(value: Any, *, field: str = "value") -> Decimal:
    """Coerce form input into a ``Decimal``; blank entries count as zero."""

    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        raise InvalidInputError(f"{field} must be numeric")
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    else:
        raw = str(value).strip()
        if not raw:
            return Decimal("0")
        try:
            result = Decimal(raw)
        except InvalidOperation as exc:
            raise InvalidInputError(f"{field} must be numeric, got {raw!r}") from exc
    if not result.is_finite():
        raise InvalidInputError(f"{field} must be a finite number")
    return result


def json_number(value: Decimal) -> int | float | str:
    """Render a decimal for JSON payloads without losing precision.

    Integral values become ``int`` and values a float carries exactly become
    ``float``; anything else is sent as a string, which
    :func:`to_decimal` reads back unchanged.
    """

    if value == value.to_integral_value():
        return int(value)
    as_float = float(value)
    if Decimal(repr(as_float)) == value:
        return as_float
    return str(value)


def quantize(value: Decimal, decimals: int = 2) -> Decimal:
    exponent = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        # room for every integer digit plus the requested decimals
        ctx.prec = max(ctx.prec, value.adjusted() + decimals + 2)
        return value.quantize(exponent, rounding=ROUND_HALF_UP)


def format_currency(amount: Any, decimals: int = 2) -> str:
    """Format ``1234567.89`` as ``"1.234.567,89"``."""

    try:
        value = to_decimal(amount)
    except InvalidInputError:
        value = Decimal("0")

    negative = value < 0
    text = f"{quantize(value.copy_abs(), decimals):f}"
    integer_part, _, decimal_part = text.partition(".")
    integer_part = _THOUSANDS.sub(".", integer_part)
    sign = "-" if negative and quantize(value, decimals) != 0 else ""
    if decimals == 0:
        return f"{sign}{integer_part}"
    return f"{sign}{integer_part},{decimal_part}"


def parse_currency(formatted: str | None) -> Decimal:
    """Inverse of :func:`format_currency`; unparseable text yields zero."""

    if not formatted:
        return Decimal("0")
    cleaned = formatted.replace("$", "").strip().replace(".", "").replace(",", ".")
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return Decimal("0")
    return value if value.is_finite() else Decimal("0")


def format_ars(amount: Any, show_symbol: bool = True) -> str:
    formatted = format_currency(amount, 2)
    return f"$ {formatted}" if show_symbol else formatted
