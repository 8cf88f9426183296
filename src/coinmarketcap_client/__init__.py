"""
Async client for CoinMarketCap market data.

Modules:
- cache: Cache stores and the memoizing retrieval wrapper
- transformation: Field transforms from provider payloads to models
- ingestion: Transport, scraping and data accessors
- shared: Asset, Market, Link and GlobalStats models
- config, infrastructure: Configuration and logging
"""

from coinmarketcap_client.cache import (
    ExpiringCache,
    ICacheStore,
    MemoryCache,
    default_cache,
    with_cached,
)
from coinmarketcap_client.client import CoinMarketCap
from coinmarketcap_client.config import ClientConfig, get_config
from coinmarketcap_client.ingestion import (
    CoinMarketCapError,
    UnexpectedPayloadError,
    UpstreamUnavailableError,
)
from coinmarketcap_client.shaping import to_plain
from coinmarketcap_client.shared.models import (
    Asset,
    AssetPage,
    GlobalStats,
    Link,
    Market,
    PageSection,
)

__all__ = [
    "CoinMarketCap",
    "ClientConfig",
    "get_config",
    # Cache
    "ICacheStore",
    "MemoryCache",
    "ExpiringCache",
    "default_cache",
    "with_cached",
    # Models
    "Asset",
    "AssetPage",
    "GlobalStats",
    "Link",
    "Market",
    "PageSection",
    # Errors
    "CoinMarketCapError",
    "UnexpectedPayloadError",
    "UpstreamUnavailableError",
    "to_plain",
]
