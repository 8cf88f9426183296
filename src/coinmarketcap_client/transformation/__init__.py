"""Transformation Layer: raw provider records -> normalized models.

```
Raw provider record (strings, JSON numbers, nulls)
    ↓
apply_transforms (rules.py)
    - One TransformRule per target field
    - maybe() makes a converter null-tolerant
    ↓
Converters (converters.py)
    - to_decimal / to_percent: Decimal, never float
    - parse_int: None as invalid marker instead of raising
    ↓
Models (shared.models)
    - pydantic validation of the "required / nullable or positive" invariants
    ↓
AssetIndex (indexes.py)
    - ticker groups sorted by rank, id lookup
```
"""

from coinmarketcap_client.transformation.adapters import (
    GLOBAL_TRANSFORMS,
    TICKER_TRANSFORMS,
    normalize_global,
    normalize_ticker,
    normalize_tickers,
)
from coinmarketcap_client.transformation.converters import (
    NormalizationError,
    parse_int,
    to_decimal,
    to_percent,
)
from coinmarketcap_client.transformation.indexes import AssetIndex, group_by_key
from coinmarketcap_client.transformation.rules import (
    TransformRule,
    apply_transforms,
    maybe,
)

__all__ = [
    # Rules
    "TransformRule",
    "apply_transforms",
    "maybe",
    # Converters
    "NormalizationError",
    "parse_int",
    "to_decimal",
    "to_percent",
    # Indexes
    "AssetIndex",
    "group_by_key",
    # Adapters
    "GLOBAL_TRANSFORMS",
    "TICKER_TRANSFORMS",
    "normalize_global",
    "normalize_ticker",
    "normalize_tickers",
]
