"""Pinned journey snapshot domain model."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ns_departures.domain.models.enriched_journey import EnrichedJourney
from ns_departures.domain.models.station import Station


@dataclass(frozen=True)
class PinnedJourneySnapshot:
    """A journey the user chose to follow, as it looked when it was pinned.

    The snapshot is never updated while tracking; live status is derived by
    querying the station board again.
    """

    origin: str
    origin_uic: str
    destination: str
    train_number: str
    planned_departure_time: datetime
    platform: str | None = None
    journey_category: str | None = None
    stock_identifier: int | None = None
    next_station: str = ""

    @classmethod
    def from_enriched_journey(
        cls, enriched: EnrichedJourney, origin: Station
    ) -> "PinnedJourneySnapshot":
        """Create a snapshot for a departure shown on ``origin``'s board."""
        journey = enriched.journey
        composition = enriched.composition
        stock_identifier = None
        if composition and composition.units:
            stock_identifier = composition.units[0].stock_identifier

        next_station = journey.route_stations[0].medium_name if journey.route_stations else ""

        return cls(
            origin=origin.name_long,
            origin_uic=str(origin.uic_code),
            destination=enriched.final_destination or journey.direction or "",
            train_number=journey.train_number,
            planned_departure_time=journey.planned_date_time,
            platform=journey.track,
            journey_category=journey.product.short_category_name or journey.train_category or None,
            stock_identifier=stock_identifier,
            next_station=next_station,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the mapping stored under the pinned journey key."""
        return {
            "origin": self.origin,
            "originUic": self.origin_uic,
            "destination": self.destination,
            "trainNumber": self.train_number,
            "plannedDepartureTime": self.planned_departure_time.isoformat(),
            "platform": self.platform,
            "journeyCategory": self.journey_category,
            "materieelNummer": self.stock_identifier,
            "nextStation": self.next_station,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PinnedJourneySnapshot":
        """Deserialize from a stored mapping.

        Raises:
            KeyError: If a required field is missing.
            ValueError: If a field has an invalid value.
        """
        stock_identifier = data.get("materieelNummer")
        return cls(
            origin=str(data["origin"]),
            origin_uic=str(data["originUic"]),
            destination=str(data.get("destination") or ""),
            train_number=str(data["trainNumber"]),
            planned_departure_time=datetime.fromisoformat(data["plannedDepartureTime"]),
            platform=data.get("platform"),
            journey_category=data.get("journeyCategory"),
            stock_identifier=int(stock_identifier) if stock_identifier is not None else None,
            next_station=str(data.get("nextStation") or ""),
        )
