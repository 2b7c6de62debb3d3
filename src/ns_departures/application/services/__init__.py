"""Application services (use cases) for NS journeys."""

from ns_departures.application.services.destination_change_detector import (
    detect_destination_change,
    detect_for_enriched_journey,
    extract_truncated_destination,
    find_truncated_destination,
)
from ns_departures.application.services.disruption_merger import DisruptionMerger, filter_active
from ns_departures.application.services.journey_details_extractors import (
    extract_final_destination,
    extract_origin_departure_time,
)
from ns_departures.application.services.journey_enrichment_service import (
    JourneyEnrichmentService,
)

__all__ = [
    "DisruptionMerger",
    "JourneyEnrichmentService",
    "detect_destination_change",
    "detect_for_enriched_journey",
    "extract_final_destination",
    "extract_origin_departure_time",
    "extract_truncated_destination",
    "filter_active",
    "find_truncated_destination",
]
