"""
Retry Policy

Decides which failed responses are worth another attempt. Attempts are
bounded by the configured retry count and are not delayed.
"""


class RetryPolicy:
    """Determines retry eligibility for HTTP status codes."""

    # Temporary failures
    RETRYABLE_STATUS_CODES = (429, 500, 502, 503, 504)

    # Permanent failures
    NON_RETRYABLE_STATUS_CODES = (400, 401, 403, 404)

    @classmethod
    def should_retry(cls, status_code: int) -> bool:
        """
        Determine if a response status should be retried.

        Args:
            status_code: HTTP status code

        Returns:
            True if the failure is temporary, False otherwise
        """
        if status_code in cls.NON_RETRYABLE_STATUS_CODES:
            return False

        if status_code in cls.RETRYABLE_STATUS_CODES:
            return True

        # Unknown 5xx errors are server issues
        return status_code >= 500
