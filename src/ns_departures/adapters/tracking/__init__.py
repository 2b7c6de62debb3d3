"""Live tracking of the pinned journey."""

from ns_departures.adapters.tracking.pinned_journey_tracker import (
    PinnedJourneyTracker,
    find_live_journey,
    find_next_stop,
)

__all__ = ["PinnedJourneyTracker", "find_live_journey", "find_next_stop"]
