"""HTTP client for NS API requests.

Covers the reisinformatie API (station boards, journey details, disruptions)
and the virtual train API (compositions).
"""

import asyncio
import json
import logging
import time
from datetime import datetime
from typing import TYPE_CHECKING, Any

import aiohttp

from ns_departures.adapters.api_request_logger import log_api_request, log_api_response
from ns_departures.adapters.ns_api.constants import (
    COMPOSITION_PATH,
    DEFAULT_HEADERS,
    DEFAULT_LANGUAGE,
    DEFAULT_MAX_JOURNEYS,
    DISRUPTIONS_PATH,
    JOURNEY_DETAILS_PATH,
    JOURNEYS_PATH,
    MAX_LOGGED_BODY_LENGTH,
    NS_BASE_URL,
    SUBSCRIPTION_KEY_HEADER,
)
from ns_departures.domain.errors import (
    ConfigurationError,
    MalformedResponse,
    UpstreamUnavailable,
    UpstreamUnreachable,
)
from ns_departures.domain.models.journey import JourneyType
from ns_departures.domain.time_utils import format_datetime_for_api

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class NsHttpClient:
    """HTTP client returning raw (but shape-checked) NS API payloads."""

    def __init__(
        self,
        session: "ClientSession",
        api_key: str | None,
        base_url: str = NS_BASE_URL,
        language: str = DEFAULT_LANGUAGE,
        max_journeys: int = DEFAULT_MAX_JOURNEYS,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp session used for all requests.
            api_key: NS API subscription key. Requests fail with
                ConfigurationError while it is missing.
            base_url: Gateway base URL.
            language: Language for station board texts.
            max_journeys: Maximum number of journeys per station board.
        """
        self._session = session
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._language = language
        self._max_journeys = max_journeys

    def _headers(self) -> dict[str, str]:
        """Build request headers, failing when no subscription key is configured."""
        if not self._api_key:
            logger.error("NS API key is not configured (set NS_API_KEY)")
            raise ConfigurationError("NS API key is missing")
        return {**DEFAULT_HEADERS, SUBSCRIPTION_KEY_HEADER: self._api_key}

    async def _log_error_response(self, response: "ClientResponse", url: str) -> str:
        """Log error response details and return the (truncated) body."""
        error_text = await response.text()
        error_body = error_text[:MAX_LOGGED_BODY_LENGTH] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        logger.error(
            f"NS API returned status {response.status} for {url}: "
            f"{error_body} (Content-Type: {content_type})"
        )
        return error_body

    async def _get_json(
        self,
        path: str,
        params: dict[str, str] | None = None,
        not_found_is_empty: bool = False,
    ) -> Any:
        """GET a JSON document.

        Returns None for a 404 when ``not_found_is_empty`` is set.

        Raises:
            ConfigurationError: If no subscription key is configured.
            UpstreamUnavailable: On any other non-2xx status.
            UpstreamUnreachable: If the request failed or timed out before an answer.
            MalformedResponse: If the body is not valid JSON.
        """
        headers = self._headers()
        url = f"{self._base_url}{path}"
        log_api_request("GET", url, params=params, headers=headers)
        started = time.monotonic()

        try:
            async with self._session.get(url, params=params, headers=headers) as response:
                log_api_response(url, response.status, time.monotonic() - started)
                if response.status == 404 and not_found_is_empty:
                    logger.info(f"NS API returned 404 for {url}, treating as empty result")
                    return None

                if not 200 <= response.status < 300:
                    error_body = await self._log_error_response(response, url)
                    raise UpstreamUnavailable(response.status, url, error_body)

                body = await response.text()
        except asyncio.TimeoutError as e:
            logger.error(f"Request to {url} timed out")
            raise UpstreamUnreachable(url, "request timed out", timed_out=True) from e
        except aiohttp.ClientError as e:
            logger.error(f"Request to {url} failed: {e}")
            raise UpstreamUnreachable(url, str(e) or type(e).__name__) from e

        try:
            return json.loads(body)
        except ValueError as e:
            logger.error(f"Invalid JSON from {url}: {body[:MAX_LOGGED_BODY_LENGTH]}")
            raise MalformedResponse(url, "body is not valid JSON", body) from e

    def _malformed(self, path: str, reason: str, data: Any) -> MalformedResponse:
        """Log an unexpected payload shape and build the matching error."""
        url = f"{self._base_url}{path}"
        raw = json.dumps(data)[:MAX_LOGGED_BODY_LENGTH]
        logger.error(f"Unexpected response structure from {url} ({reason}): {raw}")
        return MalformedResponse(url, reason, raw)

    async def fetch_journeys(
        self,
        station_code: str,
        journey_type: JourneyType,
        date_time: datetime | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch the departures or arrivals board of a station.

        Args:
            station_code: Station code (e.g. "UT").
            journey_type: Departures or arrivals.
            date_time: Optional moment to start the board from.

        Returns:
            List of raw journey dictionaries.
        """
        path = JOURNEYS_PATH.format(journey_type=journey_type.value)
        params = {
            "lang": self._language,
            "station": station_code,
            "maxJourneys": str(self._max_journeys),
        }
        if date_time is not None:
            params["dateTime"] = format_datetime_for_api(date_time)

        data = await self._get_json(path, params=params)

        payload = data.get("payload") if isinstance(data, dict) else None
        journeys = payload.get(journey_type.value) if isinstance(payload, dict) else None
        if not isinstance(journeys, list):
            raise self._malformed(path, f"missing payload.{journey_type.value} list", data)
        return journeys

    async def fetch_composition(self, train_number: str, station_code: str) -> dict[str, Any] | None:
        """Fetch the composition of a train at a station.

        Returns:
            Raw composition dictionary, or None when the virtual train API
            does not know the train (404).
        """
        path = COMPOSITION_PATH.format(train_number=train_number, station_code=station_code)
        data = await self._get_json(path, not_found_is_empty=True)
        if data is None:
            logger.warning(
                f"Composition data not found for train {train_number} at station {station_code}"
            )
            return None

        if (
            not isinstance(data, dict)
            or not isinstance(data.get("lengte"), int)
            or not isinstance(data.get("materieeldelen"), list)
        ):
            raise self._malformed(path, "missing 'lengte' or 'materieeldelen'", data)
        return data

    async def fetch_journey_details(self, train_number: str) -> dict[str, Any] | None:
        """Fetch the journey details (stops and notes) of a train.

        Returns:
            Raw journey payload, or None when the train is not active (404).
        """
        data = await self._get_json(
            JOURNEY_DETAILS_PATH, params={"train": train_number}, not_found_is_empty=True
        )
        if data is None:
            logger.warning(f"Journey details not found for train {train_number}")
            return None

        payload = data.get("payload") if isinstance(data, dict) else None
        if not isinstance(payload, dict):
            raise self._malformed(JOURNEY_DETAILS_PATH, "missing payload", data)
        return payload

    async def fetch_station_disruptions(self, station_code: str) -> list[dict[str, Any]]:
        """Fetch the disruptions of a station.

        Returns:
            List of raw disruption dictionaries; empty when upstream answers 404.
        """
        path = DISRUPTIONS_PATH.format(station_code=station_code)
        data = await self._get_json(path, not_found_is_empty=True)
        if data is None:
            logger.info(f"No disruptions found for station {station_code}")
            return []

        if not isinstance(data, list):
            raise self._malformed(path, "expected a list of disruptions", data)
        return data
