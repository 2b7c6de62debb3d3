"""Journey domain model (a departure or an arrival at a station)."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class JourneyType(str, Enum):
    """Which side of the station board to query."""

    DEPARTURES = "departures"
    ARRIVALS = "arrivals"


@dataclass(frozen=True)
class TrainProduct:
    """The train product operating a journey (category, operator and number)."""

    number: str
    category_code: str = ""
    short_category_name: str = ""
    long_category_name: str = ""
    operator_code: str = ""
    operator_name: str = ""
    type: str = ""


@dataclass(frozen=True)
class RouteStation:
    """An intermediate station on a journey's route."""

    uic_code: str
    medium_name: str


@dataclass(frozen=True)
class JourneyMessage:
    """A service message attached to a journey."""

    message: str
    style: str = ""


@dataclass(frozen=True)
class Journey:
    """A single departure or arrival as reported by the station board.

    ``actual_date_time`` always holds a value; it equals ``planned_date_time``
    when the train runs on time.
    """

    product: TrainProduct
    planned_date_time: datetime
    actual_date_time: datetime
    train_category: str = ""
    cancelled: bool = False
    planned_track: str | None = None
    actual_track: str | None = None
    route_stations: list[RouteStation] = field(default_factory=list)
    messages: list[JourneyMessage] = field(default_factory=list)
    origin: str | None = None  # arrivals only
    direction: str | None = None  # departures only
    origin_planned_departure_time: datetime | None = None

    @property
    def train_number(self) -> str:
        """Train number of this journey."""
        return self.product.number

    @property
    def track(self) -> str | None:
        """Actual track if known, otherwise the planned one."""
        return self.actual_track or self.planned_track
