"""Cache stores and the memoizing retrieval wrapper."""

from coinmarketcap_client.cache.exceptions import (
    CacheConfigurationError,
    CacheError,
    InvalidCacheKeyError,
)
from coinmarketcap_client.cache.expiring import (
    CacheEntry,
    ExpiringCache,
    default_cache,
    get_group,
    validate_expiry,
    validate_key,
)
from coinmarketcap_client.cache.memoize import with_cached
from coinmarketcap_client.cache.memory import MemoryCache
from coinmarketcap_client.cache.ports import ICacheStore

__all__ = [
    # Ports
    "ICacheStore",
    # Stores
    "MemoryCache",
    "ExpiringCache",
    "CacheEntry",
    "default_cache",
    # Helpers
    "get_group",
    "validate_expiry",
    "validate_key",
    "with_cached",
    # Errors
    "CacheError",
    "CacheConfigurationError",
    "InvalidCacheKeyError",
]
