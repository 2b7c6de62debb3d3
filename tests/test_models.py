"""Tests for domain models."""

from datetime import datetime, timedelta, timezone

import pytest

from ns_departures.domain.models import (
    UNKNOWN_STOCK_IDENTIFIER,
    Composition,
    DestinationChange,
    EnrichedJourney,
    ErrorDetails,
    Journey,
    PinnedJourneySnapshot,
    RouteStation,
    Station,
    StopEvent,
    TrainProduct,
    TrainUnit,
    UnitDestination,
)

CEST = timezone(timedelta(hours=2))
PLANNED = datetime(2024, 5, 1, 10, 30, tzinfo=CEST)
UTRECHT = Station(code="UT", uic_code="8400621", name_long="Utrecht Centraal")


def _journey(**overrides: object) -> Journey:
    values: dict[str, object] = {
        "product": TrainProduct(number="3531", short_category_name="IC"),
        "planned_date_time": PLANNED,
        "actual_date_time": PLANNED + timedelta(minutes=2),
        "planned_track": "5",
        "direction": "Amersfoort Centraal",
        "route_stations": [RouteStation(uic_code="8400055", medium_name="Amersfoort C.")],
    }
    values.update(overrides)
    return Journey(**values)  # type: ignore[arg-type]


def test_unknown_stock_identifier_is_distinct_from_absent() -> None:
    """Given identifier 0 and None, when displaying, then 'Unknown' and 'N/A' are shown."""
    unknown = TrainUnit(type="VIRM", stock_identifier=UNKNOWN_STOCK_IDENTIFIER)
    absent = TrainUnit(type="VIRM")
    known = TrainUnit(type="VIRM", stock_identifier=9501)

    assert unknown.has_unknown_identifier is True
    assert unknown.display_identifier == "Unknown"
    assert absent.has_unknown_identifier is False
    assert absent.display_identifier == "N/A"
    assert known.display_identifier == "9501"


def test_journey_track_prefers_actual_track() -> None:
    """Given planned and actual tracks, when reading track, then the actual one wins."""
    assert _journey().track == "5"
    assert _journey(actual_track="7").track == "7"
    assert _journey().train_number == "3531"


def test_stop_event_time_prefers_actual_time() -> None:
    """Given a stop event with actual time, when reading time, then actual time is used."""
    event = StopEvent(planned_time=PLANNED, actual_time=PLANNED + timedelta(minutes=1))

    assert event.time == PLANNED + timedelta(minutes=1)
    assert StopEvent(planned_time=PLANNED).time == PLANNED


def test_models_are_frozen() -> None:
    """Given a journey, when trying to modify it, then FrozenInstanceError is raised."""
    journey = _journey()

    with pytest.raises(AttributeError):
        journey.cancelled = True  # type: ignore[misc]


def test_destination_change_lists_units_ending_early() -> None:
    """Given units with and without early ends, when asking, then only early ones are listed."""
    early = UnitDestination(unit=TrainUnit(type="SNG"), destination="Utrecht Centraal", ends_early=True)
    full = UnitDestination(unit=TrainUnit(type="SNG"), destination="Zwolle", ends_early=False)
    change = DestinationChange(effective_destination="Zwolle", units=[early, full])

    assert change.is_truncated is False
    assert change.units_ending_early == [early]


def test_error_details_is_immutable() -> None:
    """Given error details, when modifying, then pydantic refuses."""
    details = ErrorDetails(status_code=503, reason="Service unavailable")

    with pytest.raises(ValueError):
        details.reason = "other"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("status_code", "reason"),
    [
        (429, "Rate limit exceeded"),
        (502, "Bad gateway (server error)"),
        (503, "Service unavailable"),
        (504, "Gateway timeout"),
        (500, "HTTP 500"),
    ],
)
def test_error_details_for_status(status_code: int, reason: str) -> None:
    """Given an HTTP status, when describing it, then the readable reason is used."""
    expected = ErrorDetails(status_code=status_code, reason=reason)

    assert ErrorDetails.for_status(status_code) == expected


def test_error_details_without_answer_have_no_status() -> None:
    """Given a request without an answer, when describing it, then only the reason is set."""
    assert ErrorDetails.unreachable(timed_out=True).reason == "Request timed out"
    assert ErrorDetails.unreachable(timed_out=False).reason == "Connection failed"
    assert ErrorDetails.unreachable(timed_out=True).status_code is None
    assert ErrorDetails.unknown().reason == "Unknown error"


class TestPinnedJourneySnapshot:
    """Tests for PinnedJourneySnapshot."""

    def test_from_enriched_journey_takes_board_data(self) -> None:
        """Given an enriched departure, when pinning, then snapshot holds what was shown."""
        enriched = EnrichedJourney(
            journey=_journey(),
            composition=Composition(length=2, units=[TrainUnit(type="VIRM", stock_identifier=9501)]),
        )

        snapshot = PinnedJourneySnapshot.from_enriched_journey(enriched, UTRECHT)

        assert snapshot.origin == "Utrecht Centraal"
        assert snapshot.origin_uic == "8400621"
        assert snapshot.destination == "Amersfoort Centraal"
        assert snapshot.train_number == "3531"
        assert snapshot.planned_departure_time == PLANNED
        assert snapshot.platform == "5"
        assert snapshot.journey_category == "IC"
        assert snapshot.stock_identifier == 9501
        assert snapshot.next_station == "Amersfoort C."

    def test_to_dict_uses_storage_field_names(self) -> None:
        """Given a snapshot, when serializing, then the stored field names are used."""
        snapshot = PinnedJourneySnapshot(
            origin="Utrecht Centraal",
            origin_uic="8400621",
            destination="Zwolle",
            train_number="3531",
            planned_departure_time=PLANNED,
            stock_identifier=0,
        )

        data = snapshot.to_dict()

        assert set(data) == {
            "origin",
            "originUic",
            "destination",
            "trainNumber",
            "plannedDepartureTime",
            "platform",
            "journeyCategory",
            "materieelNummer",
            "nextStation",
        }
        assert data["plannedDepartureTime"] == "2024-05-01T10:30:00+02:00"
        assert data["materieelNummer"] == 0
        assert PinnedJourneySnapshot.from_dict(data) == snapshot

    def test_from_dict_rejects_incomplete_data(self) -> None:
        """Given data without train number or with a bad time, when loading, then it fails."""
        with pytest.raises(KeyError):
            PinnedJourneySnapshot.from_dict({"origin": "Utrecht Centraal", "originUic": "1"})

        with pytest.raises(ValueError):
            PinnedJourneySnapshot.from_dict(
                {
                    "origin": "Utrecht Centraal",
                    "originUic": "8400621",
                    "trainNumber": "3531",
                    "plannedDepartureTime": "not a time",
                }
            )
