"""Pinned journey persistence adapters."""

from ns_departures.adapters.storage.pinned_journey_storage import (
    InMemoryPinnedJourneyStorage,
    JsonFilePinnedJourneyStorage,
)
from ns_departures.adapters.storage.pinned_journey_store import (
    PINNED_JOURNEY_KEY,
    PinnedJourneyStore,
)

__all__ = [
    "PINNED_JOURNEY_KEY",
    "InMemoryPinnedJourneyStorage",
    "JsonFilePinnedJourneyStorage",
    "PinnedJourneyStore",
]
