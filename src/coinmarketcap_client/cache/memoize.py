"""Memoizing retrieval wrapper.

``with_cached`` turns an async retrieval function into one that takes a cache
store as its first argument and only calls the retrieval when the store has
no fresh entry for the derived key::

    @with_cached(group="assetpage", get_key=lambda source, asset_id: asset_id)
    async def get_asset_page(source, asset_id): ...

    page = await get_asset_page(cache, source, "bitcoin")   # key "assetpage:bitcoin"

Failed retrievals are never cached. Concurrent calls for the same uncached
key are not coalesced: each one fetches and the last write wins.
"""

import functools
from collections.abc import Awaitable, Callable
from typing import Any

from coinmarketcap_client.cache.ports import ICacheStore
from coinmarketcap_client.infrastructure.observability import get_cache_logger

log = get_cache_logger("memoize")

KeyFunc = Callable[..., Any] | str
Retrieve = Callable[..., Awaitable[Any]]


def _first_argument(*args: Any, **kwargs: Any) -> Any:
    if not args:
        raise TypeError("default cache key needs at least one positional argument")
    return args[0]


def with_cached(
    group: str,
    get_key: KeyFunc | None = None,
    retrieve: Retrieve | None = None,
):
    """Wrap ``retrieve`` with cache-key derivation and lookup.

    Args:
        group: Cache key namespace, also selects the expiry duration
        get_key: Constant item key, or a function of the call arguments
            returning it (default: the first positional argument)
        retrieve: Async function doing the actual fetch. When omitted,
            ``with_cached`` returns a decorator.

    Returns:
        Coroutine function ``(cache, *args, **kwargs) -> value``
    """
    if retrieve is None:
        return functools.partial(with_cached, group, get_key)

    key_func = get_key if get_key is not None else _first_argument

    @functools.wraps(retrieve)
    async def cached(cache: ICacheStore, *args: Any, **kwargs: Any) -> Any:
        item_key = key_func if isinstance(key_func, str) else key_func(*args, **kwargs)
        key = f"{group}:{item_key}"

        if await cache.has(key):
            log.debug("cache_hit", key=key)
            return await cache.get(key)

        log.debug("cache_miss", key=key)
        result = await retrieve(*args, **kwargs)
        await cache.set(key, result)
        return result

    return cached
