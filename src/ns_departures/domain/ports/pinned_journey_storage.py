"""Pinned journey storage port."""

from typing import Protocol


class PinnedJourneyStorage(Protocol):
    """Port for a durable key/value medium holding serialized values."""

    def read(self, key: str) -> str | None:
        """Return the stored value for ``key`` or None."""
        ...

    def write(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""
        ...

    def remove(self, key: str) -> None:
        """Remove ``key`` if present."""
        ...
