"""Tests for destination change detection."""

import pytest

from ns_departures.application.services import (
    detect_destination_change,
    detect_for_enriched_journey,
    extract_truncated_destination,
    find_truncated_destination,
)
from ns_departures.domain.models import (
    Composition,
    EnrichedJourney,
    JourneyMessage,
    Station,
    StationDirectory,
    TrainUnit,
)
from tests.test_journey_enrichment_service import make_journey

DIRECTORY = StationDirectory(
    [
        Station(code="UT", uic_code="8400621", name_long="Utrecht Centraal", name_short="Utrecht C"),
        Station(code="AMF", uic_code="8400055", name_long="Amersfoort Centraal"),
        Station(code="ZL", uic_code="8400747", name_long="Zwolle"),
    ]
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Rijdt niet verder dan [Utrecht Centraal] door werkzaamheden", "Utrecht Centraal"),
        ("Rijdt niet verder dan Utrecht Centraal wegens een seinstoring.", "Utrecht Centraal"),
        ("Does not run further than Amersfoort Centraal via Utrecht Centraal", "Amersfoort Centraal"),
        ("Rijdt niet verder dan Utrecht Centraal (via Woerden)", "Utrecht Centraal"),
        ("This train terminates at Gouda due to a disruption.", "Gouda"),
        ("Only runs to (Zwolle).", "Zwolle"),
        ('Let op: rijdt niet verder dan "Den Haag Centraal"*. Reis verder met de Sprinter.', "Den Haag Centraal"),
        ("RIJDT NIET VERDER DAN   Amersfoort   Centraal", "Amersfoort Centraal"),
    ],
)
def test_extract_truncated_destination(text: str, expected: str) -> None:
    """Given a message announcing a shortened service, when extracting, then the station is found."""
    assert extract_truncated_destination(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "Extra trein", "Let op: andere samenstelling", "Rijdt niet verder dan"],
)
def test_extract_returns_none_without_announcement(text: str) -> None:
    """Given a message that does not announce a shortened service, when extracting, then None."""
    assert extract_truncated_destination(text) is None


def test_find_truncated_destination_uses_first_match() -> None:
    """Given several messages, when searching, then the first announcement wins."""
    messages = [
        "Extra trein",
        "Rijdt niet verder dan Zwolle",
        "Rijdt niet verder dan Utrecht Centraal",
    ]

    assert find_truncated_destination(messages) == "Zwolle"
    assert find_truncated_destination([]) is None


class TestDetectDestinationChange:
    """Tests for detect_destination_change."""

    def test_without_announcement_the_direction_is_effective(self) -> None:
        """Given no service message, when detecting, then the nominal direction is used."""
        change = detect_destination_change(make_journey("1", direction="Zwolle"))

        assert change.effective_destination == "Zwolle"
        assert change.is_truncated is False
        assert change.units == []

    def test_announced_destination_is_resolved_through_directory(self) -> None:
        """Given an announcement in lower case, when detecting, then the canonical name is used."""
        journey = make_journey(
            "1", messages=[JourneyMessage(message="Rijdt niet verder dan utrecht centraal")]
        )

        change = detect_destination_change(journey, station_directory=DIRECTORY)

        assert change.truncated_destination == "Utrecht Centraal"
        assert change.effective_destination == "Utrecht Centraal"
        assert change.is_truncated is True

    def test_unknown_station_keeps_literal_name(self) -> None:
        """Given an announced station missing from the directory, when detecting, then the literal is kept."""
        journey = make_journey(
            "1", messages=[JourneyMessage(message="Rijdt niet verder dan Driebergen-Zeist")]
        )

        change = detect_destination_change(journey, station_directory=DIRECTORY)

        assert change.effective_destination == "Driebergen-Zeist"

    def test_units_with_other_destination_are_flagged(self) -> None:
        """Given a unit heading elsewhere, when detecting, then only that unit ends early."""
        composition = Composition(
            length=3,
            units=[
                TrainUnit(type="VIRM", stock_identifier=9501, destination="ZWOLLE"),
                TrainUnit(type="VIRM", stock_identifier=9502, destination="amersfoort centraal"),
                TrainUnit(type="VIRM", stock_identifier=9503),
            ],
        )

        change = detect_destination_change(
            make_journey("1", direction="Zwolle"), composition, DIRECTORY
        )

        assert [u.unit.stock_identifier for u in change.units] == [9501, 9502]
        assert [u.ends_early for u in change.units] == [False, True]
        assert change.units[1].destination == "Amersfoort Centraal"
        assert [u.unit.stock_identifier for u in change.units_ending_early] == [9502]

    def test_composition_direction_is_fallback_nominal_destination(self) -> None:
        """Given no journey direction, when detecting, then the composition direction is used."""
        composition = Composition(length=1, units=[], destination="Zwolle")

        change = detect_destination_change(make_journey("1", direction=None), composition)

        assert change.effective_destination == "Zwolle"

    def test_without_any_destination_no_unit_ends_early(self) -> None:
        """Given no known destination at all, when detecting, then no unit is flagged."""
        composition = Composition(
            length=1, units=[TrainUnit(type="SNG", destination="Utrecht Centraal")]
        )

        change = detect_destination_change(make_journey("1", direction=None), composition)

        assert change.effective_destination is None
        assert [u.ends_early for u in change.units] == [False]

    def test_enriched_arrival_uses_final_destination(self) -> None:
        """Given an enriched arrival, when detecting, then its final destination is nominal."""
        enriched = EnrichedJourney(
            journey=make_journey("1", direction=None, origin="Den Haag Centraal"),
            final_destination="Amersfoort Centraal",
        )

        change = detect_for_enriched_journey(enriched, DIRECTORY)

        assert change.effective_destination == "Amersfoort Centraal"
        assert change.is_truncated is False
