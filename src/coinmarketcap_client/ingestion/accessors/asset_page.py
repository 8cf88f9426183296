"""Asset-page accessor: markets and links of one asset (``assetpage:<id>``)."""

from coinmarketcap_client.cache.memoize import with_cached
from coinmarketcap_client.ingestion.accessors.source import MarketDataSource
from coinmarketcap_client.ingestion.connectors.fetch import fetch_text
from coinmarketcap_client.ingestion.exceptions import UpstreamUnavailableError
from coinmarketcap_client.ingestion.scrapers import parse_asset_page
from coinmarketcap_client.shared.models import AssetPage


@with_cached(group="assetpage", get_key=lambda source, asset_id: asset_id)
async def get_asset_page(source: MarketDataSource, asset_id: str) -> AssetPage:
    """Fetch and scrape the detail page of ``asset_id``.

    Markup problems are reported per section in the returned AssetPage;
    only transport failures raise.
    """
    url = source.asset_page_url(asset_id)
    html = await fetch_text(
        source.http_client,
        url,
        retries=source.retries,
        error_prefix="get_asset_page",
        timeout=source.timeout,
    )
    if html is None:
        raise UpstreamUnavailableError(f"Asset page unavailable for {asset_id!r}", endpoint=url)
    return parse_asset_page(asset_id, html)
