"""Adapters layer - external system integrations."""

from ns_departures.adapters.config import AppConfig, StationDirectoryLoader
from ns_departures.adapters.ns_api import NsJourneyRepository
from ns_departures.adapters.storage import JsonFilePinnedJourneyStorage, PinnedJourneyStore
from ns_departures.adapters.tracking import PinnedJourneyTracker

__all__ = [
    "AppConfig",
    "JsonFilePinnedJourneyStorage",
    "NsJourneyRepository",
    "PinnedJourneyStore",
    "PinnedJourneyTracker",
    "StationDirectoryLoader",
]
