"""HTML scrapers for data the JSON API does not expose."""

from coinmarketcap_client.ingestion.scrapers.asset_page import (
    parse_asset_page,
    parse_links,
    parse_markets,
)

__all__ = ["parse_asset_page", "parse_links", "parse_markets"]
