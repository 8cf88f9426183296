"""
Shared fixtures: fake transport, controllable clock and provider payloads.
"""

import pytest

from coinmarketcap_client.ingestion.accessors import MarketDataSource
from tests.helpers import (
    API_URI,
    BITCOIN_PAGE_HTML,
    SITE_URI,
    FakeClock,
    FakeHttpClient,
    global_url,
    make_ticker,
    ok,
    page_url,
    ticker_url,
)


@pytest.fixture
def raw_tickers():
    """Bitcoin, an uncapped token, and a rank-50 asset sharing bitcoin's ticker."""
    return [
        make_ticker("bitcoin", "BTC", "1"),
        make_ticker(
            "pillar",
            "PLR",
            "100",
            price_usd="0.601898",
            max_supply=None,
            percent_change_24h="9.84",
        ),
        make_ticker("bitcoin-clone", "BTC", "50", price_usd="0.5"),
    ]


@pytest.fixture
def raw_global():
    return {
        "total_market_cap_usd": 201241796675,
        "total_24h_volume_usd": 4548680009,
        "bitcoin_percentage_of_market_cap": 62.54,
        "active_currencies": 896,
        "active_assets": 360,
        "active_markets": 6439,
        "last_updated": 1520824152,
    }


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def http_client(raw_tickers, raw_global):
    return FakeHttpClient(
        {
            ticker_url(): ok(raw_tickers),
            global_url(): ok(raw_global),
            page_url("bitcoin"): ok(BITCOIN_PAGE_HTML),
        }
    )


@pytest.fixture
def source(http_client):
    return MarketDataSource(http_client=http_client, api_uri=API_URI, site_uri=SITE_URI)
