"""Protocol for observers of the pinned journey."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ns_departures.domain.models.pinned_journey import PinnedJourneySnapshot


class PinnedJourneyListener(Protocol):
    """Callback invoked whenever the pinned journey changes."""

    def __call__(self, snapshot: "PinnedJourneySnapshot | None") -> None:
        """Receive the new pinned journey, or None when it was cleared."""
        ...
