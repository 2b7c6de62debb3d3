"""NS journey repository adapter.

API portal: https://apiportal.ns.nl/
"""

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from ns_departures.adapters.ns_api.constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_MAX_JOURNEYS,
    NS_BASE_URL,
)
from ns_departures.adapters.ns_api.http_client import NsHttpClient
from ns_departures.adapters.ns_api.response_parser import NsResponseParser
from ns_departures.domain.models.composition import Composition
from ns_departures.domain.models.disruption import Disruption
from ns_departures.domain.models.journey import Journey, JourneyType
from ns_departures.domain.models.journey_details import JourneyDetails
from ns_departures.domain.ports.journey_repository import JourneyRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from ns_departures.adapters.config.app_config import AppConfig


class NsJourneyRepository(JourneyRepository):
    """Adapter reading journeys, compositions, stops and disruptions from the NS APIs."""

    def __init__(
        self,
        session: "ClientSession",
        api_key: str | None,
        base_url: str = NS_BASE_URL,
        language: str = DEFAULT_LANGUAGE,
        max_journeys: int = DEFAULT_MAX_JOURNEYS,
    ) -> None:
        """Initialize with an aiohttp session and the NS subscription key.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            api_key: NS API subscription key.
            base_url: Gateway base URL.
            language: Language for station board texts.
            max_journeys: Maximum number of journeys per station board.
        """
        self._http_client = NsHttpClient(
            session=session,
            api_key=api_key,
            base_url=base_url,
            language=language,
            max_journeys=max_journeys,
        )

    @classmethod
    def from_config(cls, session: "ClientSession", config: "AppConfig") -> "NsJourneyRepository":
        """Create a repository from application configuration."""
        return cls(
            session=session,
            api_key=config.ns_api_key,
            base_url=config.ns_api_base_url,
            language=config.ns_api_language,
            max_journeys=config.ns_api_max_journeys,
        )

    async def fetch_journeys(
        self,
        station_code: str,
        journey_type: JourneyType,
        date_time: datetime | None = None,
    ) -> list[Journey]:
        """Get departures or arrivals for a station.

        Raises:
            ConfigurationError: If the API key is missing.
            UpstreamUnavailable: If the API answers with a non-2xx status.
            MalformedResponse: If the payload does not contain the journey list.
        """
        raw_journeys = await self._http_client.fetch_journeys(station_code, journey_type, date_time)
        journeys = NsResponseParser.parse_journeys(raw_journeys, journey_type)
        logger.debug(f"Fetched {len(journeys)} {journey_type.value} for station {station_code}")
        return journeys

    async def fetch_composition(self, train_number: str, station_code: str) -> Composition | None:
        """Get the composition of a train at a station; None when upstream does not know it."""
        data = await self._http_client.fetch_composition(train_number, station_code)
        if data is None:
            return None
        return NsResponseParser.parse_composition(data)

    async def fetch_journey_details(self, train_number: str) -> JourneyDetails | None:
        """Get the stops and notes of a train; None when the train is not active."""
        payload = await self._http_client.fetch_journey_details(train_number)
        if payload is None:
            return None
        return NsResponseParser.parse_journey_details(payload)

    async def fetch_station_disruptions(self, station_code: str) -> list[Disruption]:
        """Get all disruptions (active or not) reported for a station."""
        raw_disruptions = await self._http_client.fetch_station_disruptions(station_code)
        return NsResponseParser.parse_disruptions(raw_disruptions)
