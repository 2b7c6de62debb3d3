"""Errors raised while talking to the NS APIs."""


class NsApiError(Exception):
    """Base class for all NS API related errors."""


class ConfigurationError(NsApiError):
    """Raised when the NS API cannot be called because configuration is missing."""


class UpstreamUnavailable(NsApiError):
    """Raised when the NS API answers with a non-2xx status."""

    def __init__(self, status: int, url: str, body: str = "") -> None:
        self.status = status
        self.url = url
        self.body = body
        super().__init__(f"NS API returned status {status} for {url}")


class UpstreamUnreachable(NsApiError):
    """Raised when the NS API could not be reached or did not answer in time."""

    def __init__(self, url: str, reason: str, timed_out: bool = False) -> None:
        self.url = url
        self.reason = reason
        self.timed_out = timed_out
        super().__init__(f"NS API request to {url} failed: {reason}")


class MalformedResponse(NsApiError):
    """Raised when an NS API response does not have the expected shape."""

    def __init__(self, url: str, reason: str, body: str = "") -> None:
        self.url = url
        self.reason = reason
        self.body = body
        super().__init__(f"Malformed NS API response from {url}: {reason}")


class JourneyFetchError(NsApiError):
    """Raised when the base journey list for a station could not be produced.

    The message is safe to show to end users; the underlying cause is chained.
    """

    def __init__(self, journey_type: str, message: str) -> None:
        self.journey_type = journey_type
        super().__init__(message)
