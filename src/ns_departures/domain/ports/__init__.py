"""Ports (interfaces) for the ports-and-adapters architecture."""

from ns_departures.domain.ports.journey_enrichment_service import JourneyEnrichmentService
from ns_departures.domain.ports.journey_repository import JourneyRepository
from ns_departures.domain.ports.pinned_journey_storage import PinnedJourneyStorage

__all__ = [
    "JourneyEnrichmentService",
    "JourneyRepository",
    "PinnedJourneyStorage",
]
