"""Journey enrichment service port."""

from datetime import datetime
from typing import Protocol

from ns_departures.domain.models.enriched_journey import EnrichedJourneys
from ns_departures.domain.models.journey import JourneyType
from ns_departures.domain.models.journey_details import JourneyDetails


class JourneyEnrichmentService(Protocol):
    """Port for querying enriched station boards and train stop lists."""

    async def get_enriched_journeys(
        self,
        station_code: str,
        journey_type: JourneyType,
        date_time: datetime | None = None,
    ) -> EnrichedJourneys:
        """Get journeys for a station with compositions and active disruptions."""
        ...

    async def get_journey_stops(self, train_number: str) -> JourneyDetails | None:
        """Get the stops and notes of a train."""
        ...
