"""Journey details (stop list) domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class StopEvent:
    """An arrival or departure event of a train at a stop."""

    planned_time: datetime | None = None
    actual_time: datetime | None = None
    delay_in_seconds: int | None = None
    cancelled: bool = False
    planned_track: str | None = None
    actual_track: str | None = None

    @property
    def time(self) -> datetime | None:
        """Actual time if known, otherwise the planned one."""
        return self.actual_time or self.planned_time

    @property
    def track(self) -> str | None:
        """Actual track if known, otherwise the planned one."""
        return self.actual_track or self.planned_track


@dataclass(frozen=True)
class JourneyStop:
    """A stop along a train's journey."""

    id: str
    name: str
    uic_code: str = ""
    destination: str | None = None
    status: str | None = None
    arrivals: list[StopEvent] = field(default_factory=list)
    departures: list[StopEvent] = field(default_factory=list)


@dataclass(frozen=True)
class JourneyDetails:
    """All stops of a train plus its journey notes."""

    stops: list[JourneyStop] = field(default_factory=list)
    notes: list[dict[str, Any]] = field(default_factory=list)
