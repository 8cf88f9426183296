"""Ingestion layer: transport, scraping and data accessors."""

from coinmarketcap_client.ingestion.exceptions import (
    CoinMarketCapError,
    UnexpectedPayloadError,
    UpstreamUnavailableError,
)

__all__ = [
    "CoinMarketCapError",
    "UnexpectedPayloadError",
    "UpstreamUnavailableError",
]
