"""Value converters for provider payload fields.

Provider numbers arrive as strings ("0.601898"), JSON numbers or null.
Monetary and percentage values go through Decimal built from the string
form, so no precision is lost to float.
"""

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

HUNDRED = Decimal(100)


class NormalizationError(Exception):
    """Raised when a raw record cannot be normalized."""

    pass


def to_decimal(value: Any) -> Decimal:
    """Convert a provider number (str, int, float) to Decimal.

    Raises:
        ValueError: If value is not a finite number representation
    """
    if isinstance(value, Decimal):
        return value
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation as e:
        raise ValueError(f"not a decimal number: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"not a finite decimal number: {value!r}")
    return result


def to_percent(value: Any) -> Decimal:
    """Convert a percentage ("9.84") to a Decimal fraction (0.0984)."""
    return to_decimal(value) / HUNDRED


def parse_int(value: Any) -> int | None:
    """Parse the leading integer of ``value``.

    Unparseable input yields None as an invalid marker instead of raising;
    the models decide whether None is acceptable.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None
