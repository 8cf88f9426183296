"""Fetch helpers applying the bounded retry policy.

Connection refused and temporary statuses (429, 5xx) are logged and retried
up to ``retries`` extra times. Anything still failing, and permanent non-2xx
statuses, yield None. Other transport errors propagate to the caller.
"""

from typing import Any

import aiohttp

from coinmarketcap_client.infrastructure.observability import get_ingestion_logger
from coinmarketcap_client.ingestion.connectors.retry_policy import RetryPolicy
from coinmarketcap_client.ingestion.ports.http import HttpResponse, IHttpClient


async def _fetch(
    http_client: IHttpClient,
    url: str,
    *,
    as_text: bool,
    retries: int,
    error_prefix: str,
    timeout: float | None,
) -> Any | None:
    log = get_ingestion_logger("fetch", endpoint=url, caller=error_prefix)
    attempts = retries + 1

    for attempt in range(1, attempts + 1):
        try:
            if as_text:
                response: HttpResponse = await http_client.get_text(url, timeout=timeout)
            else:
                response = await http_client.get_json(url, timeout=timeout)
        except aiohttp.ClientConnectorError as e:
            log.warning(
                "connection_refused", attempt=attempt, attempts=attempts, error=str(e)
            )
            continue

        if response.ok:
            return response.body

        if not RetryPolicy.should_retry(response.status_code):
            log.error("fetch_failed", status_code=response.status_code, attempt=attempt)
            return None

        log.warning(
            "fetch_retryable_status",
            status_code=response.status_code,
            attempt=attempt,
            attempts=attempts,
        )

    log.error("fetch_gave_up", attempts=attempts)
    return None


async def fetch_json(
    http_client: IHttpClient,
    url: str,
    *,
    retries: int = 0,
    error_prefix: str = "fetch_json",
    timeout: float | None = None,
) -> Any | None:
    """GET ``url`` and return the decoded JSON body, or None on failure."""
    return await _fetch(
        http_client,
        url,
        as_text=False,
        retries=retries,
        error_prefix=error_prefix,
        timeout=timeout,
    )


async def fetch_text(
    http_client: IHttpClient,
    url: str,
    *,
    retries: int = 0,
    error_prefix: str = "fetch_text",
    timeout: float | None = None,
) -> str | None:
    """GET ``url`` and return the body text, or None on failure."""
    return await _fetch(
        http_client,
        url,
        as_text=True,
        retries=retries,
        error_prefix=error_prefix,
        timeout=timeout,
    )
