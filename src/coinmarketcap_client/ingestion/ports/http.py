"""HTTP communication abstractions for the accessors.

Separates the HTTP transport from retry policy and payload handling, so
tests can swap in an in-process fake.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass
class HttpResponse:
    """HTTP response data container."""

    status_code: int
    body: Any  # JSON-decoded body for get_json, text for get_text
    headers: dict[str, str] = field(default_factory=dict)
    url: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class IHttpClient(Protocol):
    """Abstraction for HTTP client.

    Single Responsibility: Execute GET requests and return responses.
    Does NOT handle:
    - Status code interpretation
    - Retry logic
    """

    async def get_json(self, url: str, timeout: float | None = None) -> HttpResponse:
        """GET ``url`` and decode a JSON body on success.

        Raises:
            aiohttp.ClientError: On network or connection errors
        """
        ...

    async def get_text(self, url: str, timeout: float | None = None) -> HttpResponse:
        """GET ``url`` and return the body as text.

        Raises:
            aiohttp.ClientError: On network or connection errors
        """
        ...

    async def close(self) -> None:
        """Release the underlying session."""
        ...
