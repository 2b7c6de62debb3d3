"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """Represents an NS station."""

    code: str
    uic_code: str
    name_long: str
    name_medium: str = ""
    name_short: str = ""

    @property
    def names(self) -> list[str]:
        """All known non-empty names of the station, longest first."""
        return [n for n in (self.name_long, self.name_medium, self.name_short) if n]
