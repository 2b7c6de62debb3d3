"""Domain models for NS departures."""

from ns_departures.domain.models.composition import (
    UNKNOWN_STOCK_IDENTIFIER,
    Composition,
    TrainUnit,
)
from ns_departures.domain.models.destination_change import DestinationChange, UnitDestination
from ns_departures.domain.models.disruption import (
    Disruption,
    DisruptionTimespan,
    DisruptionType,
)
from ns_departures.domain.models.enriched_journey import EnrichedJourney, EnrichedJourneys
from ns_departures.domain.models.error_details import ErrorDetails
from ns_departures.domain.models.journey import (
    Journey,
    JourneyMessage,
    JourneyType,
    RouteStation,
    TrainProduct,
)
from ns_departures.domain.models.journey_details import JourneyDetails, JourneyStop, StopEvent
from ns_departures.domain.models.live_journey_status import (
    CycleStatus,
    LiveJourneyStatus,
    NextStopDetails,
    TrackerState,
)
from ns_departures.domain.models.pinned_journey import PinnedJourneySnapshot
from ns_departures.domain.models.station import Station
from ns_departures.domain.models.station_directory import StationDirectory

__all__ = [
    "UNKNOWN_STOCK_IDENTIFIER",
    "Composition",
    "CycleStatus",
    "DestinationChange",
    "Disruption",
    "DisruptionTimespan",
    "DisruptionType",
    "EnrichedJourney",
    "EnrichedJourneys",
    "ErrorDetails",
    "Journey",
    "JourneyDetails",
    "JourneyMessage",
    "JourneyStop",
    "JourneyType",
    "LiveJourneyStatus",
    "NextStopDetails",
    "PinnedJourneySnapshot",
    "RouteStation",
    "Station",
    "StationDirectory",
    "StopEvent",
    "TrackerState",
    "TrainProduct",
    "TrainUnit",
    "UnitDestination",
]
