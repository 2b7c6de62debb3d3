"""Application service building enriched station boards."""

import asyncio
import logging
from collections.abc import Awaitable
from dataclasses import replace
from datetime import datetime
from typing import TYPE_CHECKING, NoReturn, TypeVar

from ns_departures.application.services.disruption_merger import DisruptionMerger
from ns_departures.application.services.journey_details_extractors import (
    extract_final_destination,
    extract_origin_departure_time,
)
from ns_departures.domain.errors import ConfigurationError, JourneyFetchError
from ns_departures.domain.models import (
    EnrichedJourney,
    EnrichedJourneys,
    Journey,
    JourneyDetails,
    JourneyType,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ns_departures.domain.ports import JourneyRepository

T = TypeVar("T")

CONFIGURATION_ERROR_MESSAGE = "Server configuration error."


async def _isolated(call: Awaitable[T], description: str) -> T | None:
    """Await ``call``, turning any error into None so one leg never fails a batch."""
    try:
        return await call
    except Exception as e:
        logger.error(f"Failed to fetch {description}: {e}")
        return None


class JourneyEnrichmentService:
    """Fetches station boards and enriches every journey with separately fetched data.

    Compositions (and, for arrivals, final destinations) are fetched
    concurrently per journey. A failure for one journey only leaves that
    journey's enrichment empty; only the base journey list and the station's
    disruptions are required for a result.
    """

    def __init__(
        self,
        journey_repository: "JourneyRepository",
        disruption_merger: DisruptionMerger | None = None,
    ) -> None:
        """Initialize with a journey repository.

        Args:
            journey_repository: Source of journeys, compositions, stops and disruptions.
            disruption_merger: Optional merger; one over the same repository is
                created when omitted.
        """
        self._journey_repository = journey_repository
        self._disruption_merger = disruption_merger or DisruptionMerger(journey_repository)

    async def get_enriched_journeys(
        self,
        station_code: str,
        journey_type: JourneyType,
        date_time: datetime | None = None,
    ) -> EnrichedJourneys:
        """Get the enriched departures or arrivals board of a station.

        Args:
            station_code: Station code, case-insensitive (e.g. "ut").
            journey_type: Departures or arrivals.
            date_time: Optional moment the board should start at.

        Returns:
            Enriched journeys in board order plus the active disruptions.

        Raises:
            JourneyFetchError: If the journeys or the disruptions could not be fetched.
        """
        station = station_code.upper()
        logger.info(f"Fetching {journey_type.value} for {station} (dateTime: {date_time})")

        journeys_result, disruptions_result = await asyncio.gather(
            self._journey_repository.fetch_journeys(station, journey_type, date_time),
            self._disruption_merger.get_active_disruptions(station),
            return_exceptions=True,
        )
        if isinstance(journeys_result, BaseException):
            self._raise_fetch_error(journey_type, station, journeys_result)
        if isinstance(disruptions_result, BaseException):
            self._raise_fetch_error(journey_type, station, disruptions_result)

        journeys = await self._enrich(journeys_result, station, journey_type, date_time)
        return EnrichedJourneys(journeys=journeys, disruptions=disruptions_result)

    @staticmethod
    def _raise_fetch_error(
        journey_type: JourneyType, station: str, error: BaseException
    ) -> NoReturn:
        """Re-raise a fatal fetch failure with a message safe for end users."""
        if not isinstance(error, Exception):
            raise error

        logger.error(f"Failed to fetch {journey_type.value} for {station}: {error}")
        if isinstance(error, ConfigurationError):
            message = CONFIGURATION_ERROR_MESSAGE
        else:
            message = f"Failed to fetch {journey_type.value} data."
        raise JourneyFetchError(journey_type.value, message) from error

    async def _fetch_final_destination(self, train_number: str) -> str | None:
        details = await self._journey_repository.fetch_journey_details(train_number)
        return extract_final_destination(details)

    async def _fetch_origin_departure_time(self, train_number: str) -> datetime | None:
        details = await self._journey_repository.fetch_journey_details(train_number)
        return extract_origin_departure_time(details)

    async def _enrich_journey(
        self, journey: Journey, station: str, journey_type: JourneyType
    ) -> EnrichedJourney:
        """Fetch composition and, for arrivals, the final destination of one journey."""
        train_number = journey.train_number
        composition_call = _isolated(
            self._journey_repository.fetch_composition(train_number, station),
            f"composition for train {train_number}",
        )

        if journey_type is JourneyType.ARRIVALS:
            composition, final_destination = await asyncio.gather(
                composition_call,
                _isolated(
                    self._fetch_final_destination(train_number),
                    f"destination for train {train_number}",
                ),
            )
        else:
            composition, final_destination = await composition_call, None

        return EnrichedJourney(
            journey=journey,
            composition=composition,
            final_destination=final_destination,
        )

    async def _enrich(
        self,
        journeys: list[Journey],
        station: str,
        journey_type: JourneyType,
        date_time: datetime | None,
    ) -> list[EnrichedJourney]:
        """Enrich all journeys concurrently, preserving their order."""
        if not journeys:
            return []

        enrich_all = asyncio.gather(
            *(self._enrich_journey(j, station, journey_type) for j in journeys)
        )

        # The first departure of a live board also shows when it left its origin.
        if journey_type is JourneyType.DEPARTURES and date_time is None:
            first_train = journeys[0].train_number
            origin_time, enriched = await asyncio.gather(
                _isolated(
                    self._fetch_origin_departure_time(first_train),
                    f"origin time for train {first_train}",
                ),
                enrich_all,
            )
        else:
            origin_time, enriched = None, await enrich_all

        if origin_time is not None:
            first = enriched[0]
            enriched[0] = replace(
                first, journey=replace(first.journey, origin_planned_departure_time=origin_time)
            )

        missing = sum(1 for e in enriched if e.composition is None)
        logger.debug(
            f"Enriched {len(enriched)} journeys for {station}, {missing} without composition"
        )
        return enriched

    async def get_journey_stops(self, train_number: str) -> JourneyDetails | None:
        """Get the stops and notes of a train.

        Returns:
            The journey details, or None when the train is not active.
        """
        details = await self._journey_repository.fetch_journey_details(train_number)
        if details is None:
            logger.info(f"Journey details not found for train {train_number}")
        return details
