"""Tests for the station directory."""

from ns_departures.domain.models import Station, StationDirectory
from ns_departures.domain.models.station_directory import normalize_station_name

UTRECHT = Station(
    code="UT",
    uic_code="8400621",
    name_long="Utrecht Centraal",
    name_medium="Utrecht C.",
    name_short="Utrecht C",
)
AMERSFOORT = Station(code="AMF", uic_code="8400055", name_long="Amersfoort Centraal")


def test_normalize_station_name_collapses_whitespace_and_case() -> None:
    """Given messy spacing and case, when normalizing, then names compare equal."""
    assert normalize_station_name("  Utrecht   CENTRAAL ") == normalize_station_name(
        "utrecht centraal"
    )


def test_find_by_any_name_ignoring_case() -> None:
    """Given a station with three names, when looking up any of them, then it is found."""
    directory = StationDirectory([UTRECHT, AMERSFOORT])

    assert directory.find_by_name("UTRECHT CENTRAAL") == UTRECHT
    assert directory.find_by_name("utrecht c.") == UTRECHT
    assert directory.find_by_name("Utrecht C") == UTRECHT
    assert directory.find_by_name("Zwolle") is None
    assert directory.find_by_name("") is None


def test_find_by_uic_and_code() -> None:
    """Given stations, when looking up by UIC (str or int) or code, then they are found."""
    directory = StationDirectory([UTRECHT, AMERSFOORT])

    assert directory.find_by_uic(8400621) == UTRECHT
    assert directory.find_by_uic("8400055") == AMERSFOORT
    assert directory.find_by_code("amf") == AMERSFOORT
    assert directory.find_by_code("ZL") is None


def test_canonical_name_falls_back_to_literal() -> None:
    """Given known and unknown names, when resolving, then unknown names are kept as-is."""
    directory = StationDirectory([UTRECHT])

    assert directory.canonical_name("utrecht c.") == "Utrecht Centraal"
    assert directory.canonical_name("Woerden") == "Woerden"


def test_first_station_wins_on_duplicate_names() -> None:
    """Given two stations sharing a short name, when looking up, then the first is returned."""
    other = Station(code="UTO", uic_code="1", name_long="Utrecht Overvecht", name_short="Utrecht C")
    directory = StationDirectory([UTRECHT, other])

    assert directory.find_by_name("Utrecht C") == UTRECHT
    assert len(directory) == 2
    assert list(directory) == [UTRECHT, other]
