"""Rolling-stock composition domain models."""

from dataclasses import dataclass, field

# The virtual train API reports 0 for units whose identifier is not known.
# This is kept apart from a missing identifier (None).
UNKNOWN_STOCK_IDENTIFIER = 0


@dataclass(frozen=True)
class TrainUnit:
    """A single rolling-stock unit (carriage set) within a composition."""

    type: str
    stock_identifier: int | None = None
    destination: str | None = None  # per-unit override (eindbestemming)
    image_url: str | None = None

    @property
    def has_unknown_identifier(self) -> bool:
        """True when upstream reported the unknown-identifier sentinel."""
        return self.stock_identifier == UNKNOWN_STOCK_IDENTIFIER

    @property
    def display_identifier(self) -> str:
        """Identifier for display: 'N/A' when absent, 'Unknown' for the sentinel."""
        if self.stock_identifier is None:
            return "N/A"
        if self.has_unknown_identifier:
            return "Unknown"
        return str(self.stock_identifier)


@dataclass(frozen=True)
class Composition:
    """Ordered set of units forming a journey, as seen at one station."""

    length: int
    units: list[TrainUnit] = field(default_factory=list)
    destination: str | None = None  # composition-level direction (richting)
