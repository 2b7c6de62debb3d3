"""Opt-in tracing of NS API traffic, enabled with NS_LOG_REQUESTS=true.

Each request is logged on one line, tagged with the NS endpoint family it
belongs to (station board, journey details, disruptions or composition), so
the fan-out of a single board refresh can be followed in the log.
"""

import logging
import os
from typing import Any
from urllib.parse import urlencode, urlsplit

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV = "NS_LOG_REQUESTS"
REDACTED = "***REDACTED***"
SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "ocp-apim-subscription-key"})

# (path marker, family); first match wins
ENDPOINT_FAMILIES = (
    ("/virtual-train-api/", "composition"),
    ("/disruptions/", "disruptions"),
    ("/api/v2/journey", "journey"),
    ("/api/v2/departures", "departures"),
    ("/api/v2/arrivals", "arrivals"),
)


def should_log_requests() -> bool:
    """Check if request logging is enabled via the NS_LOG_REQUESTS environment variable."""
    return os.getenv(LOG_REQUESTS_ENV, "").lower() == "true"


def endpoint_family(url: str) -> str:
    """Name the NS endpoint family a URL belongs to, or "other"."""
    path = urlsplit(url).path
    for marker, family in ENDPOINT_FAMILIES:
        if marker in path:
            return family
    return "other"


def _with_query(url: str, params: dict[str, Any] | None) -> str:
    if not params:
        return url
    query = urlencode(sorted(params.items()), safe=":")
    return f"{url}&{query}" if "?" in url else f"{url}?{query}"


def _format_headers(headers: dict[str, str]) -> str:
    return ", ".join(
        f"{name}={REDACTED if name.lower() in SENSITIVE_HEADERS else value}"
        for name, value in headers.items()
    )


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log an outbound request if NS_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method.
        url: Request URL without the query.
        params: Query parameters, logged in sorted order.
        headers: Request headers; credentials are redacted.
    """
    if not should_log_requests():
        return

    message = f"NS API request [{endpoint_family(url)}] {method} {_with_query(url, params)}"
    if headers:
        message += f" (headers: {_format_headers(headers)})"
    logger.info(message)


def log_api_response(url: str, status: int, elapsed_seconds: float) -> None:
    """Log the status and latency of an answered request if NS_LOG_REQUESTS is enabled."""
    if not should_log_requests():
        return

    logger.info(
        f"NS API response [{endpoint_family(url)}] {status} from {url} "
        f"in {elapsed_seconds * 1000:.0f} ms"
    )
