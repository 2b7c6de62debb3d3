"""Enriched journey domain models."""

from dataclasses import dataclass, field

from ns_departures.domain.models.composition import Composition
from ns_departures.domain.models.disruption import Disruption
from ns_departures.domain.models.journey import Journey


@dataclass(frozen=True)
class EnrichedJourney:
    """A journey together with the data fetched for it separately."""

    journey: Journey
    composition: Composition | None = None
    final_destination: str | None = None  # arrivals only


@dataclass(frozen=True)
class EnrichedJourneys:
    """Result of enriching a station board."""

    journeys: list[EnrichedJourney] = field(default_factory=list)
    disruptions: list[Disruption] = field(default_factory=list)
