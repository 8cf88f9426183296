"""Assets accessor: the full ticker list as one cache unit (``assets:all``)."""

from coinmarketcap_client.cache.memoize import with_cached
from coinmarketcap_client.infrastructure.observability import get_ingestion_logger
from coinmarketcap_client.ingestion.accessors.source import MarketDataSource
from coinmarketcap_client.ingestion.connectors.fetch import fetch_json
from coinmarketcap_client.ingestion.exceptions import (
    UnexpectedPayloadError,
    UpstreamUnavailableError,
)
from coinmarketcap_client.transformation import AssetIndex, normalize_tickers


@with_cached(group="assets", get_key="all")
async def get_assets(source: MarketDataSource) -> AssetIndex:
    """Fetch and normalize every ticker, indexed by ticker and id."""
    url = source.ticker_url()
    result = await fetch_json(
        source.http_client,
        url,
        retries=source.retries,
        error_prefix="get_assets",
        timeout=source.timeout,
    )
    if result is None:
        raise UpstreamUnavailableError("Ticker list unavailable", endpoint=url)
    if not isinstance(result, list):
        raise UnexpectedPayloadError(
            f"Ticker list must be a JSON array, got {type(result).__name__}",
            endpoint=url,
        )

    index = AssetIndex(normalize_tickers(result))
    get_ingestion_logger("assets-accessor", endpoint=url).info(
        "assets_fetched", records=len(result), assets=len(index)
    )
    return index
