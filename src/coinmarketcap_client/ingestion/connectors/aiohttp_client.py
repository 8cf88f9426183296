"""Concrete HTTP client implementation for async requests.

Wraps aiohttp behind the IHttpClient abstraction.
"""

from dataclasses import dataclass

import aiohttp

from coinmarketcap_client.ingestion.ports.http import HttpResponse


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuration for HTTP client."""

    timeout: float = 30.0
    user_agent: str = "coinmarketcap-client"


class AiohttpClient:
    """HTTP client implementation using aiohttp."""

    def __init__(self, config: HttpClientConfig | None = None):
        """Initialize HTTP client.

        Args:
            config: HTTP client configuration
        """
        self.config = config or HttpClientConfig()
        self._session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)
            self._session = aiohttp.ClientSession(
                timeout=timeout,
                headers={"User-Agent": self.config.user_agent},
            )
        return self._session

    async def get_json(self, url: str, timeout: float | None = None) -> HttpResponse:
        """Execute GET request, decoding JSON on 2xx.

        Raises:
            aiohttp.ClientError: On connection errors
        """
        session = await self._get_session()
        timeout_obj = aiohttp.ClientTimeout(total=timeout or self.config.timeout)

        async with session.get(url, timeout=timeout_obj) as resp:
            if 200 <= resp.status < 300:
                # Provider does not always send application/json
                body = await resp.json(content_type=None)
            else:
                body = await resp.text()
            return HttpResponse(
                status_code=resp.status,
                body=body,
                headers=dict(resp.headers),
                url=str(resp.url),
            )

    async def get_text(self, url: str, timeout: float | None = None) -> HttpResponse:
        """Execute GET request, returning the body as text.

        Raises:
            aiohttp.ClientError: On connection errors
        """
        session = await self._get_session()
        timeout_obj = aiohttp.ClientTimeout(total=timeout or self.config.timeout)

        async with session.get(url, timeout=timeout_obj) as resp:
            return HttpResponse(
                status_code=resp.status,
                body=await resp.text(),
                headers=dict(resp.headers),
                url=str(resp.url),
            )

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None
