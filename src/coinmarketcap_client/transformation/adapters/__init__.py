"""Source-specific normalizers."""

from coinmarketcap_client.transformation.adapters.coinmarketcap import (
    GLOBAL_TRANSFORMS,
    TICKER_TRANSFORMS,
    normalize_global,
    normalize_ticker,
    normalize_tickers,
)

__all__ = [
    "GLOBAL_TRANSFORMS",
    "TICKER_TRANSFORMS",
    "normalize_global",
    "normalize_ticker",
    "normalize_tickers",
]
