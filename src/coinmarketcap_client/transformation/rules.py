"""Declarative field mapping from raw provider records to normalized dicts.

Each TransformRule maps one raw field to one target field, optionally
through a converter. Only declared target keys survive; everything else in
the raw record is dropped.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from coinmarketcap_client.transformation.converters import NormalizationError

Converter = Callable[[Any], Any]


@dataclass(frozen=True)
class TransformRule:
    """How one raw field becomes one normalized field."""

    source_key: str
    target_key: str
    convert: Converter | None = None


def maybe(convert: Converter) -> Converter:
    """Make ``convert`` null-tolerant: None in, None out, converter not called."""

    def convert_or_none(value: Any) -> Any:
        return None if value is None else convert(value)

    convert_or_none.__name__ = f"maybe_{getattr(convert, '__name__', 'convert')}"
    return convert_or_none


def apply_transforms(
    raw: Mapping[str, Any], rules: Iterable[TransformRule]
) -> dict[str, Any]:
    """Apply ``rules`` in order to ``raw``.

    Args:
        raw: Provider record; a missing source key reads as None
        rules: Ordered transform rules

    Returns:
        Dict holding exactly the rules' target keys

    Raises:
        NormalizationError: If a converter fails
    """
    target: dict[str, Any] = {}
    for rule in rules:
        value = raw.get(rule.source_key)
        if rule.convert is not None:
            try:
                value = rule.convert(value)
            except (ArithmeticError, TypeError, ValueError) as e:
                raise NormalizationError(
                    f"Failed to convert {rule.source_key!r} -> {rule.target_key!r}: {e}"
                ) from e
        target[rule.target_key] = value
    return target
