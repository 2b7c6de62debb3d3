"""Journey repository port."""

from datetime import datetime
from typing import Protocol

from ns_departures.domain.models.composition import Composition
from ns_departures.domain.models.disruption import Disruption
from ns_departures.domain.models.journey import Journey, JourneyType
from ns_departures.domain.models.journey_details import JourneyDetails


class JourneyRepository(Protocol):
    """Port for reading journeys and related data from the rail information service."""

    async def fetch_journeys(
        self,
        station_code: str,
        journey_type: JourneyType,
        date_time: datetime | None = None,
    ) -> list[Journey]:
        """Get departures or arrivals for a station."""
        ...

    async def fetch_composition(self, train_number: str, station_code: str) -> Composition | None:
        """Get the composition of a train at a station; None when unknown."""
        ...

    async def fetch_journey_details(self, train_number: str) -> JourneyDetails | None:
        """Get the stop list of a train; None when the train is not active."""
        ...

    async def fetch_station_disruptions(self, station_code: str) -> list[Disruption]:
        """Get all disruptions reported for a station."""
        ...
