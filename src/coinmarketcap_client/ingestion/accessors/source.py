"""Where and how the accessors fetch upstream data."""

from dataclasses import dataclass

from coinmarketcap_client.config import ApiConfig
from coinmarketcap_client.ingestion.ports.http import IHttpClient


@dataclass(frozen=True)
class MarketDataSource:
    """HTTP client plus endpoints and retry policy, passed to every accessor."""

    http_client: IHttpClient
    api_uri: str = "https://api.coinmarketcap.com/v1"
    site_uri: str = "https://coinmarketcap.com"
    retries: int = 0
    timeout: float | None = None

    @classmethod
    def from_config(cls, http_client: IHttpClient, config: ApiConfig) -> "MarketDataSource":
        return cls(
            http_client=http_client,
            api_uri=config.api_uri,
            site_uri=config.site_uri,
            retries=config.retries,
            timeout=config.timeout,
        )

    def ticker_url(self) -> str:
        return f"{self.api_uri}/ticker/?limit=0"

    def global_url(self) -> str:
        return f"{self.api_uri}/global"

    def asset_page_url(self, asset_id: str) -> str:
        return f"{self.site_uri}/currencies/{asset_id}"
