"""Data accessors: memoized retrieval + normalization.

Every accessor takes the cache store first:

    index = await get_assets(cache, source)
    page = await get_asset_page(cache, source, "bitcoin")
    stats = await get_global_stats(cache, source)
"""

from coinmarketcap_client.ingestion.accessors.asset_page import get_asset_page
from coinmarketcap_client.ingestion.accessors.assets import get_assets
from coinmarketcap_client.ingestion.accessors.global_stats import get_global_stats
from coinmarketcap_client.ingestion.accessors.source import MarketDataSource

__all__ = [
    "MarketDataSource",
    "get_asset_page",
    "get_assets",
    "get_global_stats",
]
