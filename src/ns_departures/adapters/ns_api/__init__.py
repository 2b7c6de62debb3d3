"""NS API adapters (reisinformatie and virtual train APIs)."""

from ns_departures.adapters.ns_api.http_client import NsHttpClient
from ns_departures.adapters.ns_api.ns_journey_repository import NsJourneyRepository
from ns_departures.adapters.ns_api.response_parser import NsResponseParser

__all__ = ["NsHttpClient", "NsJourneyRepository", "NsResponseParser"]
