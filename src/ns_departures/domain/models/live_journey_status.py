"""Live status of a pinned journey."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from ns_departures.domain.models.error_details import ErrorDetails
from ns_departures.domain.models.journey import Journey
from ns_departures.domain.models.pinned_journey import PinnedJourneySnapshot


class TrackerState(str, Enum):
    """States of the pinned journey tracker."""

    IDLE = "idle"
    ACTIVE = "active"


class CycleStatus(str, Enum):
    """Outcome of the most recent refresh of a pinned journey."""

    LOADING = "loading"
    LIVE = "live"
    ERROR = "error"


@dataclass(frozen=True)
class NextStopDetails:
    """The next stop a tracked train will call at."""

    name: str
    planned_arrival_time: datetime | None = None
    actual_arrival_time: datetime | None = None
    platform: str | None = None
    cancelled: bool = False


@dataclass(frozen=True)
class LiveJourneyStatus:
    """What is currently known about a pinned journey."""

    snapshot: PinnedJourneySnapshot
    status: CycleStatus = CycleStatus.LOADING
    live_journey: Journey | None = None
    delay_minutes: int = 0
    is_cancelled: bool = False
    next_stop: NextStopDetails | None = None
    error: str | None = None
    error_details: ErrorDetails | None = None
    last_update: datetime | None = None
