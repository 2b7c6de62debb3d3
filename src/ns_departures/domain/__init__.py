"""Domain layer - core business logic and models."""

from ns_departures.domain.errors import (
    ConfigurationError,
    JourneyFetchError,
    MalformedResponse,
    NsApiError,
    UpstreamUnavailable,
    UpstreamUnreachable,
)
from ns_departures.domain.models import (
    Composition,
    Disruption,
    EnrichedJourney,
    EnrichedJourneys,
    Journey,
    JourneyDetails,
    JourneyType,
    PinnedJourneySnapshot,
    Station,
    StationDirectory,
    TrainUnit,
)
from ns_departures.domain.ports import (
    JourneyEnrichmentService,
    JourneyRepository,
    PinnedJourneyStorage,
)

__all__ = [
    "Composition",
    "ConfigurationError",
    "Disruption",
    "EnrichedJourney",
    "EnrichedJourneys",
    "Journey",
    "JourneyDetails",
    "JourneyEnrichmentService",
    "JourneyFetchError",
    "JourneyRepository",
    "JourneyType",
    "MalformedResponse",
    "NsApiError",
    "PinnedJourneySnapshot",
    "PinnedJourneyStorage",
    "Station",
    "StationDirectory",
    "TrainUnit",
    "UpstreamUnavailable",
    "UpstreamUnreachable",
]
