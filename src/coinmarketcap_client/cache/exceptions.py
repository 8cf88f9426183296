"""
Cache Exception Hierarchy

Configuration problems are raised when a store is built, key problems when
an entry is written. Neither is recoverable by retrying.
"""


class CacheError(Exception):
    """Base exception for all cache errors."""

    pass


class CacheConfigurationError(CacheError, ValueError):
    """Expiry specification is malformed (negative, not a number, no default)."""

    pass


class InvalidCacheKeyError(CacheError, ValueError):
    """Key is not a string of the form "group:itemKey"."""

    def __init__(self, key: object):
        super().__init__(
            f'Cache key must be a string of the form "group:itemKey", got: {key!r}'
        )
        self.key = key
