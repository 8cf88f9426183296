"""In-process dictionary cache with no expiry."""

from collections.abc import Iterable, Mapping
from typing import Any


class MemoryCache:
    """Plain backend: ``has`` is a pure existence check."""

    def __init__(self, init: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None):
        """Initialize the store.

        Args:
            init: Initial content, as a mapping or an iterable of (key, value) pairs
        """
        self._store: dict[str, Any] = dict(init or {})

    async def has(self, key: str) -> bool:
        return key in self._store

    async def get(self, key: str) -> Any:
        return self._store.get(key)

    async def set(self, key: str, value: Any) -> Any:
        self._store[key] = value
        return value

    async def clear(self) -> None:
        self._store = {}

    def __len__(self) -> int:
        return len(self._store)
