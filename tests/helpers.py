"""
Test doubles and provider payloads shared by the test modules.
"""

from collections import defaultdict

from coinmarketcap_client.ingestion.ports import HttpResponse

API_URI = "https://api.test/v1"
SITE_URI = "https://site.test"


class FakeHttpClient:
    """In-process IHttpClient serving canned responses per URL.

    A route value may be an HttpResponse, an exception instance (raised), or a
    list of those consumed one per call (the last one repeats).
    """

    def __init__(self, routes: dict | None = None):
        self.routes = dict(routes or {})
        self.calls: dict[str, int] = defaultdict(int)
        self.closed = False

    def _respond(self, url: str) -> HttpResponse:
        self.calls[url] += 1
        if url not in self.routes:
            return HttpResponse(status_code=404, body="not found", url=url)
        route = self.routes[url]
        if isinstance(route, list):
            route = route.pop(0) if len(route) > 1 else route[0]
        if isinstance(route, Exception):
            raise route
        return route

    async def get_json(self, url: str, timeout: float | None = None) -> HttpResponse:
        return self._respond(url)

    async def get_text(self, url: str, timeout: float | None = None) -> HttpResponse:
        return self._respond(url)

    async def close(self) -> None:
        self.closed = True


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


def ok(body) -> HttpResponse:
    return HttpResponse(status_code=200, body=body)


def status(code: int) -> HttpResponse:
    return HttpResponse(status_code=code, body=f"HTTP {code}")


def ticker_url() -> str:
    return f"{API_URI}/ticker/?limit=0"


def global_url() -> str:
    return f"{API_URI}/global"


def page_url(asset_id: str) -> str:
    return f"{SITE_URI}/currencies/{asset_id}"


def make_ticker(asset_id: str, symbol: str, rank: str, **overrides) -> dict:
    raw = {
        "id": asset_id,
        "name": asset_id.title(),
        "symbol": symbol,
        "rank": rank,
        "price_usd": "9329.12",
        "price_btc": "1.0",
        "24h_volume_usd": "6127000000.0",
        "market_cap_usd": "157827486652",
        "available_supply": "16917725.0",
        "total_supply": "16917725.0",
        "max_supply": "21000000.0",
        "percent_change_1h": "1.1",
        "percent_change_24h": "1.02",
        "percent_change_7d": "-13.58",
        "last_updated": "1520989767",
    }
    raw.update(overrides)
    return raw


def market_row(exchange: str, pair: str, href: str, volume: str, price: str, percent: str) -> str:
    return f"""
    <tr>
      <td>1</td>
      <td>{exchange}</td>
      <td><a href="{href}">{pair}</a></td>
      <td><span class="volume" data-usd="{volume}">${volume}</span></td>
      <td><span class="price" data-usd="{price}">${price}</span></td>
      <td>{percent}</td>
    </tr>"""


def asset_page(market_rows: str, link_items: str) -> str:
    return f"""
<html><body>
<table id="markets-table">
  <thead><tr><th>#</th><th>Source</th><th>Pair</th><th>Volume</th><th>Price</th><th>%</th></tr></thead>
  <tbody>{market_rows}
  </tbody>
</table>
<div class="row bottom-margin-2x">
  <div class="col-sm-8 col-sm-push-4">Chart</div>
  <div class="col-sm-4 col-sm-pull-8">
    <ul class="list-unstyled">{link_items}
    </ul>
  </div>
</div>
</body></html>
"""


BITCOIN_MARKETS = market_row(
    "Binance",
    "BTC/USDT",
    "https://www.binance.com/trade.html?symbol=BTC_USDT",
    "663914000.0",
    "9331.57",
    "10.84%",
) + market_row(
    "Bitfinex",
    "BTC/USD",
    "https://www.bitfinex.com/t/BTC:USD",
    "402160000.0",
    "9329.9",
    "6.56%",
)

BITCOIN_LINKS = """
      <li><a href="https://bitcoin.org/">Website</a></li>
      <li><a href="https://blockchain.info/">Explorer</a></li>
      <li><span class="label">Rank 1</span></li>
      <li><a href="https://github.com/bitcoin/">Source Code</a></li>"""

BITCOIN_PAGE_HTML = asset_page(BITCOIN_MARKETS, BITCOIN_LINKS)
