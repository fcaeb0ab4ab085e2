"""
Exceptions raised by the Steam Ladder client.

Transport failures (httpx.TransportError) are not wrapped and reach
the caller as raised by httpx.
"""

from datetime import datetime, timezone


class SteamLadderError(Exception):
    """Base exception for Steam Ladder client errors."""

    def __init__(
        self,
        message: str,
        *,
        endpoint: str | None = None,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code
        self.original_error = original_error
        self.timestamp = datetime.now(timezone.utc)


class APIError(SteamLadderError):
    """Raised when the API returns a non-2xx response."""

    # Known meanings; the client does not act on them.
    KNOWN_STATUSES = {
        401: "unauthenticated",
        404: "not found",
        429: "rate limited",
    }

    @property
    def reason(self) -> str | None:
        """Short description of a known status code."""
        if self.status_code is None:
            return None
        return self.KNOWN_STATUSES.get(self.status_code)


class RateLimitError(APIError):
    """Raised when the API answers 429."""

    def __init__(
        self,
        message: str,
        *,
        endpoint: str | None = None,
        retry_after: str | None = None,
    ) -> None:
        super().__init__(message, endpoint=endpoint, status_code=429)
        self.retry_after = retry_after


class DecodeError(SteamLadderError):
    """Raised when a successful response body does not match the expected model."""

    pass
