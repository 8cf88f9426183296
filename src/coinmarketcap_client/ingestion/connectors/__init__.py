"""Transport connectors: aiohttp client and fetch helpers."""

from coinmarketcap_client.ingestion.connectors.aiohttp_client import (
    AiohttpClient,
    HttpClientConfig,
)
from coinmarketcap_client.ingestion.connectors.fetch import fetch_json, fetch_text
from coinmarketcap_client.ingestion.connectors.retry_policy import RetryPolicy

__all__ = [
    "AiohttpClient",
    "HttpClientConfig",
    "RetryPolicy",
    "fetch_json",
    "fetch_text",
]
