"""Contracts (protocols) shared between layers."""

from ns_departures.domain.contracts.journey_tracker import JourneyTrackerProtocol
from ns_departures.domain.contracts.pinned_journey_listener import PinnedJourneyListener

__all__ = ["JourneyTrackerProtocol", "PinnedJourneyListener"]
