"""Tests for the plain in-memory store."""

import pytest

from coinmarketcap_client.cache import MemoryCache


class TestMemoryCache:
    @pytest.mark.asyncio
    async def test_set_then_get(self):
        cache = MemoryCache()

        assert await cache.set("assets:all", 1) == 1
        assert await cache.has("assets:all")
        assert await cache.get("assets:all") == 1

    @pytest.mark.asyncio
    async def test_missing_key(self):
        cache = MemoryCache()

        assert not await cache.has("assets:all")
        assert await cache.get("assets:all") is None

    @pytest.mark.asyncio
    async def test_has_is_existence_not_truthiness(self):
        cache = MemoryCache()
        await cache.set("global:all", None)

        assert await cache.has("global:all")

    @pytest.mark.asyncio
    async def test_initial_content(self):
        from_mapping = MemoryCache({"a:1": "x"})
        from_pairs = MemoryCache([("b:2", "y")])

        assert await from_mapping.get("a:1") == "x"
        assert await from_pairs.get("b:2") == "y"
        assert len(from_mapping) == 1

    @pytest.mark.asyncio
    async def test_initial_mapping_is_copied(self):
        init = {"a:1": "x"}
        cache = MemoryCache(init)
        await cache.set("a:2", "y")

        assert "a:2" not in init

    @pytest.mark.asyncio
    async def test_clear(self):
        cache = MemoryCache({"a:1": "x", "a:2": "y"})
        await cache.clear()

        assert len(cache) == 0
        assert not await cache.has("a:1")
