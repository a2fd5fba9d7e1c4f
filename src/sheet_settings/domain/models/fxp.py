"""Fixed-point numbers with four fractional digits.

Values are held as :class:`~decimal.Decimal`, truncated (not rounded) to
four places, and written to JSON as integers when they have no fractional
part.
"""

from __future__ import annotations

from decimal import ROUND_DOWN, Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

_PRECISION = Decimal("0.0001")


def to_fixed(value: Any) -> Decimal:
    """Convert *value* to a fixed-point ``Decimal``.

    Raises:
        ValueError: If *value* is not numeric or too large to hold four
            fractional digits.
    """
    if isinstance(value, bool):
        raise ValueError("boolean is not a fixed-point number")
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float, str)):
        try:
            number = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"not a fixed-point number: {value!r}") from exc
    else:
        raise ValueError(f"not a fixed-point number: {value!r}")
    if not number.is_finite():
        raise ValueError(f"not a finite number: {value!r}")
    try:
        return number.quantize(_PRECISION, rounding=ROUND_DOWN)
    except InvalidOperation as exc:
        raise ValueError(f"fixed-point number out of range: {value!r}") from exc


def to_json_number(value: Decimal) -> int | float:
    """JSON form of a fixed-point value."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


FixedPoint = Annotated[
    Decimal,
    BeforeValidator(to_fixed),
    PlainSerializer(to_json_number, when_used="json"),
]
