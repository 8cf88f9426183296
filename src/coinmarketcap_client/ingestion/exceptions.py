"""
Upstream Exception Hierarchy

Raised by the accessors when the provider gives nothing usable, so callers
get an explicit error instead of a failure deep inside normalization.
"""


class CoinMarketCapError(Exception):
    """Base exception for all upstream data errors."""

    def __init__(
        self, message: str, status_code: int | None = None, endpoint: str | None = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.endpoint = endpoint


class UpstreamUnavailableError(CoinMarketCapError):
    """Fetch returned nothing: connection refused or non-2xx after retries."""

    pass


class UnexpectedPayloadError(CoinMarketCapError):
    """Payload does not have the expected JSON shape."""

    pass
