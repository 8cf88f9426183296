"""Cache store abstraction.

Any backend (in-memory, persistent, custom) can be handed to the client as
long as it provides these four coroutines.
"""

from typing import Any, Protocol


class ICacheStore(Protocol):
    """Key-value store used by the memoizing retrieval wrapper.

    Callers must check ``has`` before ``get``: ``get`` on an absent key is not
    required to fetch anything or raise.
    """

    async def has(self, key: str) -> bool:
        """True iff a fresh entry exists for ``key``."""
        ...

    async def get(self, key: str) -> Any:
        """Return the value stored under ``key``."""
        ...

    async def set(self, key: str, value: Any) -> Any:
        """Store ``value`` under ``key``, overwriting any prior entry.

        Returns:
            The stored value
        """
        ...

    async def clear(self) -> None:
        """Remove every entry."""
        ...
