"""
Tests for with_cached: key derivation, exactly-once retrieval and failures.
"""

import asyncio
import itertools
from unittest.mock import AsyncMock

import pytest

from coinmarketcap_client.cache import ExpiringCache, InvalidCacheKeyError, MemoryCache, with_cached


@pytest.fixture
def cache(clock):
    return ExpiringCache(expiry={"prices": 1000, "default": 1000}, clock=clock)


class TestKeyDerivation:
    @pytest.mark.asyncio
    async def test_default_key_is_first_positional_argument(self):
        cache = MemoryCache()
        retrieve = AsyncMock(return_value="page")
        cached = with_cached("assetpage", retrieve=retrieve)

        await cached(cache, "bitcoin", "ignored")

        assert await cache.get("assetpage:bitcoin") == "page"
        retrieve.assert_awaited_once_with("bitcoin", "ignored")

    @pytest.mark.asyncio
    async def test_constant_string_key(self):
        cache = MemoryCache()
        cached = with_cached("assets", "all", AsyncMock(return_value=[1]))

        await cached(cache, object())

        assert await cache.has("assets:all")

    @pytest.mark.asyncio
    async def test_key_function_receives_call_arguments(self):
        cache = MemoryCache()
        cached = with_cached(
            "prices",
            lambda source, asset_id, currency="usd": f"{asset_id}-{currency}",
            AsyncMock(return_value=1),
        )

        await cached(cache, "src", "bitcoin", currency="eur")

        assert await cache.has("prices:bitcoin-eur")

    @pytest.mark.asyncio
    async def test_default_key_without_arguments_fails(self):
        cached = with_cached("assets", retrieve=AsyncMock())

        with pytest.raises(TypeError):
            await cached(MemoryCache())

    @pytest.mark.asyncio
    async def test_empty_item_key_is_rejected_by_expiring_cache(self, cache):
        retrieve = AsyncMock(return_value=1)
        cached = with_cached("prices", "", retrieve)

        with pytest.raises(InvalidCacheKeyError):
            await cached(cache)


class TestDecoratorForm:
    @pytest.mark.asyncio
    async def test_decorator_keeps_function_metadata(self, cache):
        @with_cached(group="prices", get_key=lambda asset_id: asset_id)
        async def get_price(asset_id):
            """Price of one asset."""
            return len(asset_id)

        assert get_price.__name__ == "get_price"
        assert get_price.__doc__ == "Price of one asset."
        assert await get_price(cache, "bitcoin") == 7


class TestRetrieval:
    @pytest.mark.asyncio
    async def test_retrieves_once_while_fresh(self, cache, clock):
        retrieve = AsyncMock(return_value={"price": 1})
        cached = with_cached("prices", retrieve=retrieve)

        first = await cached(cache, "bitcoin")
        clock.advance(500)
        second = await cached(cache, "bitcoin")

        assert first == second == {"price": 1}
        assert retrieve.await_count == 1

    @pytest.mark.asyncio
    async def test_retrieves_again_once_stale(self, cache, clock):
        retrieve = AsyncMock(side_effect=["v1", "v2"])
        cached = with_cached("prices", retrieve=retrieve)

        assert await cached(cache, "bitcoin") == "v1"
        clock.advance(1001)
        assert await cached(cache, "bitcoin") == "v2"
        assert retrieve.await_count == 2

    @pytest.mark.asyncio
    async def test_distinct_keys_retrieve_separately(self, cache):
        retrieve = AsyncMock(side_effect=lambda asset_id: asset_id.upper())
        cached = with_cached("prices", retrieve=retrieve)

        assert await cached(cache, "bitcoin") == "BITCOIN"
        assert await cached(cache, "ethereum") == "ETHEREUM"
        assert retrieve.await_count == 2

    @pytest.mark.asyncio
    async def test_none_result_is_cached(self, cache):
        retrieve = AsyncMock(return_value=None)
        cached = with_cached("prices", retrieve=retrieve)

        assert await cached(cache, "bitcoin") is None
        assert await cached(cache, "bitcoin") is None
        assert retrieve.await_count == 1

    @pytest.mark.asyncio
    async def test_failure_is_not_cached(self, cache):
        retrieve = AsyncMock(side_effect=[RuntimeError("upstream down"), "recovered"])
        cached = with_cached("prices", retrieve=retrieve)

        with pytest.raises(RuntimeError, match="upstream down"):
            await cached(cache, "bitcoin")

        assert not await cache.has("prices:bitcoin")
        assert await cached(cache, "bitcoin") == "recovered"

    @pytest.mark.asyncio
    async def test_wrappers_sharing_a_group_share_entries(self, cache):
        first = with_cached("prices", "all", AsyncMock(return_value="from first"))
        second_retrieve = AsyncMock(return_value="from second")
        second = with_cached("prices", "all", second_retrieve)

        await first(cache)

        assert await second(cache) == "from first"
        second_retrieve.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_separate_caches_do_not_share_entries(self, clock):
        retrieve = AsyncMock(return_value=1)
        cached = with_cached("prices", retrieve=retrieve)

        await cached(ExpiringCache(expiry=1000, clock=clock), "bitcoin")
        await cached(ExpiringCache(expiry=1000, clock=clock), "bitcoin")

        assert retrieve.await_count == 2

    @pytest.mark.asyncio
    async def test_concurrent_calls_each_retrieve(self, cache):
        counter = itertools.count(1)

        async def fetch(asset_id):
            value = next(counter)
            await asyncio.sleep(0)
            return value

        retrieve = AsyncMock(side_effect=fetch)
        cached = with_cached("prices", retrieve=retrieve)

        results = await asyncio.gather(cached(cache, "bitcoin"), cached(cache, "bitcoin"))

        assert sorted(results) == [1, 2]
        assert retrieve.await_count == 2
        # last write wins
        assert await cache.get("prices:bitcoin") == 2
