"""Disruption domain models."""

from dataclasses import dataclass, field
from enum import Enum


class DisruptionType(str, Enum):
    """Kinds of disruption reported by the NS disruptions API."""

    CALAMITY = "CALAMITY"
    DISRUPTION = "DISRUPTION"
    MAINTENANCE = "MAINTENANCE"


@dataclass(frozen=True)
class DisruptionTimespan:
    """One period during which a disruption applies."""

    period: str | None = None
    start: str | None = None
    end: str | None = None
    situation: str | None = None
    cause: str | None = None
    advices: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Disruption:
    """A disruption, calamity or planned maintenance affecting a station."""

    id: str
    type: DisruptionType
    is_active: bool
    title: str
    topic: str | None = None
    situation: str | None = None
    additional_travel_time: str | None = None
    timespans: list[DisruptionTimespan] = field(default_factory=list)
    expected_duration: str | None = None
