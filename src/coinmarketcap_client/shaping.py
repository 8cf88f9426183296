"""Output shaping for consumers that do not need exact precision."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel


def to_plain(value: Any) -> Any:
    """Recursively replace Decimal values with floats.

    Pydantic models are dumped to dicts first, since their fields are typed
    Decimal; tuples become lists. The input is never mutated, so cached
    values keep their Decimal fields.
    """
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, BaseModel):
        return to_plain(value.model_dump())
    if isinstance(value, dict):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    return value
