"""CoinMarketCap-specific normalizers for ticker and global data.

The ticker endpoint returns records like:
{
    "id": "pillar",
    "name": "Pillar",
    "symbol": "PLR",
    "rank": "100",
    "price_usd": "0.601898",
    "price_btc": "0.00006283",
    "24h_volume_usd": "167863.0",
    "market_cap_usd": "136862456.0",
    "available_supply": "227384800.0",
    "total_supply": "800000000.0",
    "max_supply": null,
    "percent_change_1h": "2.69",
    "percent_change_24h": "9.84",
    "percent_change_7d": "-22.68",
    "last_updated": "1520824152"
}

The global endpoint returns JSON numbers instead of strings:
{
    "total_market_cap_usd": 201241796675,
    "total_24h_volume_usd": 4548680009,
    "bitcoin_percentage_of_market_cap": 62.54,
    "active_currencies": 896,
    "active_assets": 360,
    "active_markets": 6439,
    "last_updated": 1520824152
}
"""

from typing import Any

from pydantic import ValidationError

from coinmarketcap_client.infrastructure.observability import get_processing_logger
from coinmarketcap_client.shared.models import Asset, GlobalStats
from coinmarketcap_client.transformation.converters import (
    NormalizationError,
    parse_int,
    to_decimal,
    to_percent,
)
from coinmarketcap_client.transformation.rules import (
    TransformRule,
    apply_transforms,
    maybe,
)

log = get_processing_logger("coinmarketcap-normalizer")

TICKER_TRANSFORMS = (
    TransformRule("id", "id"),
    TransformRule("name", "name"),
    TransformRule("symbol", "ticker"),
    TransformRule("rank", "rank", parse_int),
    TransformRule("price_usd", "price_usd", maybe(to_decimal)),
    TransformRule("price_btc", "price_btc", maybe(to_decimal)),
    TransformRule("24h_volume_usd", "volume_usd_24h", maybe(to_decimal)),
    TransformRule("market_cap_usd", "market_cap_usd", maybe(to_decimal)),
    TransformRule("available_supply", "available_supply", maybe(to_decimal)),
    TransformRule("total_supply", "total_supply", maybe(to_decimal)),
    TransformRule("max_supply", "max_supply", maybe(to_decimal)),
    TransformRule("percent_change_1h", "percent_change_1h", maybe(to_percent)),
    TransformRule("percent_change_24h", "percent_change_24h", maybe(to_percent)),
    TransformRule("percent_change_7d", "percent_change_7d", maybe(to_percent)),
    TransformRule("last_updated", "last_updated", parse_int),
)

GLOBAL_TRANSFORMS = (
    TransformRule("total_market_cap_usd", "total_market_cap_usd", to_decimal),
    TransformRule("total_24h_volume_usd", "total_volume_usd_24h", to_decimal),
    TransformRule("bitcoin_percentage_of_market_cap", "bitcoin_dominance", to_percent),
    TransformRule("active_currencies", "active_currencies", parse_int),
    TransformRule("active_assets", "active_assets", parse_int),
    TransformRule("active_markets", "active_markets", parse_int),
    TransformRule("last_updated", "last_updated", parse_int),
)


def normalize_ticker(raw: dict[str, Any]) -> Asset:
    """Normalize one ticker record.

    Raises:
        NormalizationError: If a field cannot be converted or the asset is invalid
    """
    fields = apply_transforms(raw, TICKER_TRANSFORMS)
    try:
        return Asset(**fields)
    except ValidationError as e:
        raise NormalizationError(
            f"Invalid asset {raw.get('id')!r}: {e.error_count()} error(s)"
        ) from e


def normalize_tickers(raws: list[dict[str, Any]]) -> list[Asset]:
    """Normalize a ticker list, skipping records that fail.

    Raises:
        NormalizationError: If every record fails
    """
    assets = []
    errors = []

    for i, raw in enumerate(raws):
        try:
            assets.append(normalize_ticker(raw))
        except NormalizationError as e:
            errors.append(f"Index {i}: {e}")

    if errors:
        log.warning("tickers_skipped", skipped=len(errors), sample=errors[:5])
        if len(errors) == len(raws):
            raise NormalizationError(
                f"All {len(raws)} ticker records failed normalization: {errors[:3]}"
            )

    return assets


def normalize_global(raw: dict[str, Any]) -> GlobalStats:
    """Normalize the global market snapshot.

    Raises:
        NormalizationError: If a field cannot be converted or is missing
    """
    fields = apply_transforms(raw, GLOBAL_TRANSFORMS)
    try:
        return GlobalStats(**fields)
    except ValidationError as e:
        raise NormalizationError(
            f"Invalid global stats: {e.error_count()} error(s)"
        ) from e
