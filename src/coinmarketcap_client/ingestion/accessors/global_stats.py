"""Global-stats accessor (``global:all``)."""

from coinmarketcap_client.cache.memoize import with_cached
from coinmarketcap_client.ingestion.accessors.source import MarketDataSource
from coinmarketcap_client.ingestion.connectors.fetch import fetch_json
from coinmarketcap_client.ingestion.exceptions import (
    UnexpectedPayloadError,
    UpstreamUnavailableError,
)
from coinmarketcap_client.shared.models import GlobalStats
from coinmarketcap_client.transformation import normalize_global


@with_cached(group="global", get_key="all")
async def get_global_stats(source: MarketDataSource) -> GlobalStats:
    url = source.global_url()
    result = await fetch_json(
        source.http_client,
        url,
        retries=source.retries,
        error_prefix="get_global_stats",
        timeout=source.timeout,
    )
    if result is None:
        raise UpstreamUnavailableError("Global stats unavailable", endpoint=url)
    if not isinstance(result, dict):
        raise UnexpectedPayloadError(
            f"Global stats must be a JSON object, got {type(result).__name__}",
            endpoint=url,
        )
    return normalize_global(result)
