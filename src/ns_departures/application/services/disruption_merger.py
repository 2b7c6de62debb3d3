"""Service fetching the disruptions that currently affect a station."""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ns_departures.domain.models.disruption import Disruption

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ns_departures.domain.ports import JourneyRepository


def filter_active(disruptions: Iterable[Disruption]) -> list[Disruption]:
    """Keep only disruptions that are currently in effect, preserving order."""
    return [d for d in disruptions if d.is_active]


class DisruptionMerger:
    """Fetches station disruptions and exposes only the active ones."""

    def __init__(self, journey_repository: "JourneyRepository") -> None:
        """Initialize with a journey repository."""
        self._journey_repository = journey_repository

    async def get_active_disruptions(self, station_code: str) -> list[Disruption]:
        """Get active disruptions for a station.

        A station without disruptions yields an empty list. Upstream failures
        propagate to the caller.
        """
        disruptions = await self._journey_repository.fetch_station_disruptions(station_code)
        active = filter_active(disruptions)
        logger.debug(
            f"Station {station_code}: {len(active)} active of {len(disruptions)} disruption(s)"
        )
        return active
