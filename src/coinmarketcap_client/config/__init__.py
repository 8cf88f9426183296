"""Configuration package for coinmarketcap_client."""

from .state import (
    ApiConfig,
    CacheConfig,
    ClientConfig,
    ConfigLoader,
    LoggingConfig,
    get_config,
)

__all__ = [
    "ApiConfig",
    "CacheConfig",
    "ClientConfig",
    "ConfigLoader",
    "LoggingConfig",
    "get_config",
]
