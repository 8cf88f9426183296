"""Ports (protocols) of the ingestion layer."""

from coinmarketcap_client.ingestion.ports.http import HttpResponse, IHttpClient

__all__ = ["HttpResponse", "IHttpClient"]
