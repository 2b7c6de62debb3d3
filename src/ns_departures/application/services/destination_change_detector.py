"""Detection of trains, or parts of trains, that end before their nominal destination.

Service messages announce shortened services with a fixed phrase followed by
the station the train now ends at, for example::

    Rijdt niet verder dan [Utrecht Centraal] door werkzaamheden
    Does not run further than Amersfoort Centraal via Utrecht Centraal

``extract_truncated_destination`` returns the station name from such a text:
the part after one of ``TRUNCATION_PHRASES``, with a trailing reason clause
(``door ...``, ``due to ...``), a trailing ``via ...`` clause and bracket or
annotation characters removed. Everything here is pure; the journey passed in
is never modified.
"""

import re
from collections.abc import Iterable

from ns_departures.domain.models.composition import Composition
from ns_departures.domain.models.destination_change import DestinationChange, UnitDestination
from ns_departures.domain.models.enriched_journey import EnrichedJourney
from ns_departures.domain.models.journey import Journey
from ns_departures.domain.models.station_directory import StationDirectory, normalize_station_name

TRUNCATION_PHRASES = (
    "rijdt niet verder dan",
    "rijdt alleen tot",
    "does not run further than",
    "will not run further than",
    "only runs to",
    "terminates at",
)

REASON_WORDS = (
    "door",
    "wegens",
    "vanwege",
    "als gevolg van",
    "due to",
    "because of",
)

ANNOTATION_CHARACTERS = "[](){}<>*\"“”"

_TRUNCATION_PATTERN = re.compile(
    r"\b(?:" + "|".join(re.escape(p) for p in TRUNCATION_PHRASES) + r")\s+(?P<rest>.+)",
    re.IGNORECASE | re.DOTALL,
)
_BRACKETED_NAME = re.compile(r"^\s*[\[(](?P<name>[^\])]+)[\])]")
_REASON_CLAUSE = re.compile(
    r"\s+(?:" + "|".join(re.escape(w) for w in REASON_WORDS) + r")\b.*$",
    re.IGNORECASE | re.DOTALL,
)
_SENTENCE_END = re.compile(r"[.!;](?:\s|$).*$", re.DOTALL)
_VIA_CLAUSE = re.compile(r"\s+via\s+.*$", re.IGNORECASE | re.DOTALL)
_ANNOTATIONS = str.maketrans("", "", ANNOTATION_CHARACTERS)


def extract_truncated_destination(text: str) -> str | None:
    """Extract the station a shortened service now ends at from a message text.

    Returns None when the text does not announce a shortened service.
    """
    if not text:
        return None

    match = _TRUNCATION_PATTERN.search(text)
    if not match:
        return None

    rest = match.group("rest")
    bracketed = _BRACKETED_NAME.match(rest)
    if bracketed:
        name = bracketed.group("name")
    else:
        name = _REASON_CLAUSE.sub("", rest)
        name = _SENTENCE_END.sub("", name)

    name = _VIA_CLAUSE.sub("", name.translate(_ANNOTATIONS))
    name = " ".join(name.split()).rstrip(".,;:!")
    return name or None


def find_truncated_destination(messages: Iterable[str]) -> str | None:
    """Return the destination announced by the first message describing a shortened service."""
    for message in messages:
        destination = extract_truncated_destination(message)
        if destination:
            return destination
    return None


def _resolve(name: str, station_directory: StationDirectory | None) -> str:
    """Resolve a station name to its canonical long name, keeping the literal when unknown."""
    if station_directory is None:
        return name
    return station_directory.canonical_name(name)


def detect_destination_change(
    journey: Journey,
    composition: Composition | None = None,
    station_directory: StationDirectory | None = None,
    nominal_destination: str | None = None,
) -> DestinationChange:
    """Work out which destination to display for a journey and which units end early.

    Args:
        journey: The journey whose messages are scanned.
        composition: Optional composition whose units may carry their own destination.
        station_directory: Optional lookup used to compare station names.
        nominal_destination: Destination to use when no shortened service is
            announced; defaults to the journey direction, then the composition
            direction.

    Returns:
        The effective destination and per-unit destination flags.
    """
    nominal = nominal_destination or journey.direction
    if not nominal and composition is not None:
        nominal = composition.destination

    literal = find_truncated_destination(m.message for m in journey.messages)
    truncated = _resolve(literal, station_directory) if literal else None
    effective = truncated or nominal

    effective_key = (
        normalize_station_name(_resolve(effective, station_directory)) if effective else None
    )

    units = []
    if composition is not None:
        for unit in composition.units:
            if not unit.destination:
                continue
            unit_destination = _resolve(unit.destination, station_directory)
            ends_early = (
                effective_key is not None
                and normalize_station_name(unit_destination) != effective_key
            )
            units.append(
                UnitDestination(unit=unit, destination=unit_destination, ends_early=ends_early)
            )

    return DestinationChange(
        effective_destination=effective,
        truncated_destination=truncated,
        units=units,
    )


def detect_for_enriched_journey(
    enriched: EnrichedJourney, station_directory: StationDirectory | None = None
) -> DestinationChange:
    """Detect destination changes for an enriched journey of a station board."""
    return detect_destination_change(
        enriched.journey,
        enriched.composition,
        station_directory,
        nominal_destination=enriched.final_destination,
    )
