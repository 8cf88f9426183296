"""Time-expiry cache store.

Entries are written as ``CacheEntry(value, last_updated)`` into a plain
backend. Staleness is checked lazily on read: a stale entry is reported
absent by ``has`` but stays in the backend until it is overwritten.

Expiry durations are in milliseconds and may be given per group, where the
group of a key is the text before its first ``:``::

    cache = ExpiringCache(expiry={"assets": 300_000, "default": 60_000})
"""

import math
import re
import time
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from coinmarketcap_client.cache.exceptions import (
    CacheConfigurationError,
    InvalidCacheKeyError,
)
from coinmarketcap_client.cache.memory import MemoryCache
from coinmarketcap_client.cache.ports import ICacheStore
from coinmarketcap_client.infrastructure.observability import get_cache_logger

log = get_cache_logger("expiring-cache")

Expiry = float | Mapping[str, float]

_KEY_PATTERN = re.compile(r"^[^:]+:.+$", re.DOTALL)


def _wall_clock_ms() -> float:
    return time.time() * 1000


@dataclass(frozen=True)
class CacheEntry:
    """Stored value plus its write time in milliseconds."""

    value: Any
    last_updated: float


def get_group(key: str) -> str:
    """Return the group part of a ``group:itemKey`` key."""
    return key.split(":", 1)[0]


def validate_key(key: object) -> None:
    """Raise InvalidCacheKeyError unless ``key`` looks like ``group:itemKey``."""
    if not isinstance(key, str) or not _KEY_PATTERN.match(key):
        raise InvalidCacheKeyError(key)


def _validate_duration(name: str, duration: object) -> None:
    if (
        isinstance(duration, bool)
        or not isinstance(duration, (int, float))
        or math.isnan(duration)
        or duration < 0
    ):
        raise CacheConfigurationError(
            f"expiry for {name!r} must be a non-negative number of milliseconds, "
            f"got: {duration!r}"
        )


def validate_expiry(expiry: object) -> None:
    """Fail fast on a malformed expiry specification.

    Raises:
        CacheConfigurationError: If expiry is not a non-negative number, or a
            mapping of such numbers with a "default" key
    """
    if isinstance(expiry, Mapping):
        for group, duration in expiry.items():
            _validate_duration(str(group), duration)
        if "default" not in expiry:
            raise CacheConfigurationError(
                'expiry mapping must have a "default" key, '
                f"got groups: {sorted(map(str, expiry))}"
            )
        return
    _validate_duration("*", expiry)


class ExpiringCache:
    """Cache whose entries go stale after a per-group duration."""

    def __init__(
        self,
        expiry: Expiry = 0,
        store: ICacheStore | None = None,
        clock: Callable[[], float] | None = None,
        init: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
    ):
        """Initialize the cache.

        Args:
            expiry: Milliseconds before an entry is stale, globally or per group
            store: Plain backend holding the entries (default: MemoryCache)
            clock: Returns the current time in milliseconds
            init: Initial values, as a mapping or (key, value) pairs. Each is
                stored as written now and expires like any other entry.

        Raises:
            CacheConfigurationError: If ``expiry`` is malformed, or ``init``
                is given together with a custom ``store``
            InvalidCacheKeyError: If an ``init`` key is not ``group:itemKey``
        """
        validate_expiry(expiry)
        self.expiry = dict(expiry) if isinstance(expiry, Mapping) else expiry
        self._clock = clock or _wall_clock_ms
        self._store = store if store is not None else MemoryCache(self._seed(init))
        if init is not None and store is not None:
            raise CacheConfigurationError(
                "init seeds the default in-memory store and cannot be combined with store"
            )

    def _seed(
        self, init: Mapping[str, Any] | Iterable[tuple[str, Any]] | None
    ) -> dict[str, CacheEntry]:
        items = init.items() if isinstance(init, Mapping) else (init or ())
        now = self._clock()
        entries = {}
        for key, value in items:
            validate_key(key)
            entries[key] = CacheEntry(value=value, last_updated=now)
        return entries

    def expiry_for(self, key: str) -> float:
        """Return the expiry duration that applies to ``key``."""
        if isinstance(self.expiry, dict):
            return self.expiry.get(get_group(key), self.expiry["default"])
        return self.expiry

    def is_stale(self, key: str, last_updated: float) -> bool:
        return last_updated + self.expiry_for(key) < self._clock()

    async def has(self, key: str) -> bool:
        if not await self._store.has(key):
            return False
        entry: CacheEntry = await self._store.get(key)
        if self.is_stale(key, entry.last_updated):
            log.debug("entry_stale", key=key, last_updated=entry.last_updated)
            return False
        return True

    async def get(self, key: str) -> Any:
        entry = await self._store.get(key)
        return entry.value if entry is not None else None

    async def set(self, key: str, value: Any) -> Any:
        validate_key(key)
        await self._store.set(key, CacheEntry(value=value, last_updated=self._clock()))
        return value

    async def clear(self) -> None:
        await self._store.clear()


def default_cache(**kwargs: Any) -> ExpiringCache:
    """Build the default cache store, an in-memory ExpiringCache."""
    return ExpiringCache(**kwargs)
