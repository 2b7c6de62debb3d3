"""Observable store holding the single pinned journey."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from ns_departures.domain.models.pinned_journey import PinnedJourneySnapshot

if TYPE_CHECKING:
    from ns_departures.domain.contracts.pinned_journey_listener import PinnedJourneyListener
    from ns_departures.domain.ports.pinned_journey_storage import PinnedJourneyStorage

logger = logging.getLogger(__name__)

PINNED_JOURNEY_KEY = "pinnedJourney"


class PinnedJourneyStore:
    """Single-writer, multi-reader store for the pinned journey.

    The value is persisted through a PinnedJourneyStorage under
    ``PINNED_JOURNEY_KEY``. Every pin and unpin is written to storage first
    and then broadcast to all subscribed listeners.
    """

    def __init__(self, storage: PinnedJourneyStorage, key: str = PINNED_JOURNEY_KEY) -> None:
        """Initialize the store and load the persisted pinned journey.

        Args:
            storage: Durable medium holding the serialized snapshot.
            key: Storage key of the snapshot.
        """
        self._storage = storage
        self._key = key
        self._listeners: list[PinnedJourneyListener] = []
        self._current: PinnedJourneySnapshot | None = self._read()

    @property
    def current(self) -> PinnedJourneySnapshot | None:
        """The pinned journey, or None when nothing is pinned."""
        return self._current

    def _read(self) -> PinnedJourneySnapshot | None:
        """Read the snapshot from storage; unreadable data counts as nothing pinned."""
        try:
            raw = self._storage.read(self._key)
            if not raw:
                return None
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError("stored pinned journey is not a JSON object")
            return PinnedJourneySnapshot.from_dict(data)
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.error(f"Error reading pinned journey from storage: {e}")
            return None

    def subscribe(self, listener: PinnedJourneyListener) -> Callable[[], None]:
        """Register a listener for changes.

        Returns:
            Callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _broadcast(self) -> None:
        """Notify every listener of the current value."""
        for listener in list(self._listeners):
            try:
                listener(self._current)
            except Exception as e:
                logger.error(f"Pinned journey listener failed: {e}", exc_info=True)

    def pin(self, snapshot: PinnedJourneySnapshot) -> None:
        """Pin ``snapshot``, replacing any previously pinned journey."""
        self._storage.write(self._key, json.dumps(snapshot.to_dict()))
        self._current = snapshot
        logger.info(
            f"Pinned train {snapshot.train_number} from {snapshot.origin} "
            f"at {snapshot.planned_departure_time.isoformat()}"
        )
        self._broadcast()

    def unpin(self) -> None:
        """Clear the pinned journey."""
        self._storage.remove(self._key)
        self._current = None
        logger.info("Unpinned journey")
        self._broadcast()

    def reload(self) -> PinnedJourneySnapshot | None:
        """Re-read storage, e.g. after another process changed it.

        Listeners are notified only when the value actually changed.
        """
        value = self._read()
        if value != self._current:
            self._current = value
            self._broadcast()
        return self._current
