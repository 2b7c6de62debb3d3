"""Destination change domain models."""

from dataclasses import dataclass, field

from ns_departures.domain.models.composition import TrainUnit


@dataclass(frozen=True)
class UnitDestination:
    """A unit carrying its own destination and whether it ends before the train does."""

    unit: TrainUnit
    destination: str
    ends_early: bool


@dataclass(frozen=True)
class DestinationChange:
    """Destinations to display for a journey after applying service messages.

    ``truncated_destination`` is set when a message announced that the service
    ends early; it then also becomes the ``effective_destination``.
    """

    effective_destination: str | None
    truncated_destination: str | None = None
    units: list[UnitDestination] = field(default_factory=list)

    @property
    def is_truncated(self) -> bool:
        """Whether the service was announced to end early."""
        return self.truncated_destination is not None

    @property
    def units_ending_early(self) -> list[UnitDestination]:
        """Units whose own destination differs from the effective destination."""
        return [u for u in self.units if u.ends_early]
