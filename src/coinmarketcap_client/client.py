"""Public client facade.

    async with CoinMarketCap() as cmc:
        bitcoin = await cmc.coin_from_ticker("btc")
        markets = await cmc.get_markets(bitcoin.id)

Ticker-based operations resolve the id through the assets accessor first, so
they share its cache entry. Results never alias cached data: lists are fresh
copies and models are frozen. With ``plain_numbers`` enabled every result goes
through ``to_plain`` and comes back as plain dicts and lists with floats
instead of Decimal values.
"""

from collections.abc import Callable
from typing import Any

from coinmarketcap_client.cache import ICacheStore, default_cache
from coinmarketcap_client.config import ClientConfig, get_config
from coinmarketcap_client.infrastructure.observability import get_client_logger, setup_logging
from coinmarketcap_client.ingestion.accessors import (
    MarketDataSource,
    get_asset_page,
    get_assets,
    get_global_stats,
)
from coinmarketcap_client.ingestion.connectors import AiohttpClient, HttpClientConfig
from coinmarketcap_client.ingestion.ports import IHttpClient
from coinmarketcap_client.shaping import to_plain
from coinmarketcap_client.shared.models import Asset, AssetPage, GlobalStats, Link, Market

log = get_client_logger()


def _unchanged(value: Any) -> Any:
    return value


class CoinMarketCap:
    """Ticker and id lookups over the CoinMarketCap API and asset pages."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        cache: ICacheStore | None = None,
        http_client: IHttpClient | None = None,
    ):
        """Initialize the client.

        Args:
            config: Client configuration (default: ClientConfig())
            cache: Any ICacheStore; defaults to an ExpiringCache using
                ``config.cache.expiry``
            http_client: Transport; defaults to an AiohttpClient owned and
                closed by this client
        """
        self.config = config or ClientConfig()
        self.cache = (
            cache if cache is not None else default_cache(expiry=self.config.cache.expiry)
        )
        self._owns_http_client = http_client is None
        self.http_client = http_client or AiohttpClient(
            HttpClientConfig(
                timeout=self.config.api.timeout,
                user_agent=self.config.api.user_agent,
            )
        )
        self.source = MarketDataSource.from_config(self.http_client, self.config.api)
        self._shape: Callable[[Any], Any] = (
            to_plain if self.config.plain_numbers else _unchanged
        )

    @classmethod
    def from_config(
        cls, config_dir: str | None = None, configure_logging: bool = True, **kwargs: Any
    ) -> "CoinMarketCap":
        """Build a client from YAML and environment configuration.

        Args:
            config_dir: Config directory (default: $CMC_CONFIG_DIR or ./config)
            configure_logging: Apply ``config.logging`` through ``setup_logging``
            **kwargs: Passed on to the constructor (cache, http_client)
        """
        config = get_config(config_dir)
        if configure_logging:
            setup_logging(level=config.logging.level, json_logs=config.logging.json_logs)
        return cls(config=config, **kwargs)

    async def __aenter__(self) -> "CoinMarketCap":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_http_client:
            await self.http_client.close()

    # ── Assets ────────────────────────────────────────────

    async def id_from_ticker(self, ticker: str) -> str | None:
        """Id of the biggest asset listed under ``ticker`` (case-insensitive)."""
        asset = await self._biggest_for_ticker(ticker)
        return asset.id if asset else None

    async def coins(self) -> list[Asset]:
        """Every asset, in provider (rank) order."""
        return self._shape(list((await get_assets(self.cache, self.source)).assets))

    async def coin(self, asset_id: str) -> Asset | None:
        return self._shape((await get_assets(self.cache, self.source)).by_id(asset_id))

    async def coin_from_ticker(self, ticker: str) -> Asset | None:
        """The asset with the biggest market cap for ``ticker``."""
        return self._shape(await self._biggest_for_ticker(ticker))

    async def coins_from_ticker(self, ticker: str) -> list[Asset] | None:
        """All assets listed under ``ticker``, best rank first."""
        return self._shape((await get_assets(self.cache, self.source)).by_ticker(ticker))

    async def _biggest_for_ticker(self, ticker: str) -> Asset | None:
        assets = (await get_assets(self.cache, self.source)).by_ticker(ticker)
        if not assets:
            log.info("ticker_not_found", ticker=ticker)
            return None
        return assets[0]

    # ── Asset pages ───────────────────────────────────────

    async def asset_page(self, asset_id: str) -> AssetPage:
        """Markets and links of ``asset_id`` with per-section parse status."""
        return self._shape(await get_asset_page(self.cache, self.source, asset_id))

    async def get_markets(self, asset_id: str) -> list[Market] | None:
        """Market listings, or None when the markets table could not be parsed."""
        page = await get_asset_page(self.cache, self.source, asset_id)
        return self._shape(list(page.markets.items)) if page.markets.parsed else None

    async def get_markets_from_ticker(self, ticker: str) -> list[Market] | None:
        asset_id = await self.id_from_ticker(ticker)
        if asset_id is None:
            return None
        return await self.get_markets(asset_id)

    async def get_links(self, asset_id: str) -> list[Link] | None:
        """External links, or None when the links section could not be parsed."""
        page = await get_asset_page(self.cache, self.source, asset_id)
        return self._shape(list(page.links.items)) if page.links.parsed else None

    async def get_links_from_ticker(self, ticker: str) -> list[Link] | None:
        asset_id = await self.id_from_ticker(ticker)
        if asset_id is None:
            return None
        return await self.get_links(asset_id)

    # ── Global ────────────────────────────────────────────

    async def global_stats(self) -> GlobalStats:
        return self._shape(await get_global_stats(self.cache, self.source))
