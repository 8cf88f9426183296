"""Asset detail page scraping.

Markets come from the ``#markets-table`` rows, one exchange listing each:

    | # | Exchange | Pair (link) | Volume (data-usd) | Price (data-usd) | Volume % |

Links come from the list items of the page's link column. Structural
selectors are provider-specific and live only in this module.

A section either parses completely or reports an error: a single broken row
fails the whole section, the other section is unaffected.
"""

import re
from collections.abc import Callable
from decimal import Decimal
from typing import TypeVar

from bs4 import BeautifulSoup, Tag

from coinmarketcap_client.infrastructure.observability import get_ingestion_logger
from coinmarketcap_client.shared.models import AssetPage, Link, Market, PageSection
from coinmarketcap_client.transformation.converters import to_decimal, to_percent

MARKET_ROWS_SELECTOR = "#markets-table > tbody tr"
LINK_LISTS_SELECTOR = "div.row.bottom-margin-2x > div.col-sm-4.col-sm-pull-8:last-child > ul"

_VOLUME_PERCENT = re.compile(r"([0-9]{0,3}\.[0-9]+)%")

# Exceptions a broken section can raise while parsing
PARSE_ERRORS = (AttributeError, IndexError, KeyError, TypeError, ValueError, ArithmeticError)

ItemT = TypeVar("ItemT")


def _usd_value(cell: Tag) -> Decimal:
    return to_decimal(cell.find("span")["data-usd"])


def _volume_percent(cell: Tag) -> Decimal:
    text = cell.get_text().strip()
    match = _VOLUME_PERCENT.search(text)
    return to_percent(match.group(1) if match else text)


def _parse_market_row(row: Tag) -> Market:
    cells = row.find_all(True, recursive=False)
    pair_cell = cells[2]
    return Market(
        exchange=cells[1].get_text().strip(),
        pair=pair_cell.get_text().strip(),
        url=pair_cell.find("a")["href"],
        volume_usd=_usd_value(cells[3]),
        price_usd=_usd_value(cells[4]),
        volume_percent=_volume_percent(cells[5]),
    )


def parse_markets(soup: BeautifulSoup) -> list[Market]:
    """Extract every market listing.

    Raises:
        One of PARSE_ERRORS if the table structure is not as expected
    """
    return [_parse_market_row(row) for row in soup.select(MARKET_ROWS_SELECTOR)]


def parse_links(soup: BeautifulSoup) -> list[Link]:
    """Extract external links; list items without an anchor are skipped.

    Raises:
        One of PARSE_ERRORS if a link is malformed
    """
    links = []
    for link_list in soup.select(LINK_LISTS_SELECTOR):
        for item in link_list.find_all(True, recursive=False):
            anchor = item.find("a")
            if anchor is None:
                continue
            links.append(Link(label=anchor.get_text().strip(), url=anchor.get("href")))
    return links


def _parse_section(
    name: str,
    section_type: type[PageSection],
    parse: Callable[[BeautifulSoup], list[ItemT]],
    soup: BeautifulSoup,
    asset_id: str,
) -> PageSection:
    try:
        return section_type(items=parse(soup))
    except PARSE_ERRORS as e:
        log = get_ingestion_logger("asset-page-scraper", asset_id=asset_id)
        log.error("section_parse_failed", section=name, error=repr(e))
        return section_type(error=f"{name}: {e!r}")


def parse_asset_page(asset_id: str, html: str) -> AssetPage:
    """Parse an asset detail page. Never raises on markup problems."""
    soup = BeautifulSoup(html, "html.parser")
    return AssetPage(
        asset_id=asset_id,
        markets=_parse_section("markets", PageSection[Market], parse_markets, soup, asset_id),
        links=_parse_section("links", PageSection[Link], parse_links, soup, asset_id),
    )
