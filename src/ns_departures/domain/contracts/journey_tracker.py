"""Protocol for tracking a pinned journey."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ns_departures.domain.models.live_journey_status import LiveJourneyStatus, TrackerState
    from ns_departures.domain.models.pinned_journey import PinnedJourneySnapshot


class JourneyTrackerProtocol(Protocol):
    """Protocol for keeping the live status of one pinned journey current."""

    @property
    def state(self) -> "TrackerState":
        """Current tracker state."""
        ...

    @property
    def status(self) -> "LiveJourneyStatus | None":
        """Latest live status, or None when nothing is pinned."""
        ...

    async def pin(self, snapshot: "PinnedJourneySnapshot") -> None:
        """Start tracking ``snapshot``, replacing any journey tracked so far."""
        ...

    async def unpin(self) -> None:
        """Stop tracking."""
        ...
