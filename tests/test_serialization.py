"""Tests for JSON rendering of domain objects."""

import json
from datetime import timedelta

from ns_departures.adapters.serialization import to_jsonable
from ns_departures.domain.models import (
    Composition,
    CycleStatus,
    EnrichedJourney,
    EnrichedJourneys,
    ErrorDetails,
    JourneyDetails,
    JourneyStop,
    LiveJourneyStatus,
    StopEvent,
    TrainUnit,
)
from tests.test_journey_enrichment_service import START, make_disruption, make_journey
from tests.test_pinned_journey_store import make_snapshot


def test_enriched_board_uses_upstream_field_names() -> None:
    """Given an enriched board, when rendering, then camelCase keys and ISO times are used."""
    board = EnrichedJourneys(
        journeys=[
            EnrichedJourney(
                journey=make_journey("3531"),
                composition=Composition(length=1, units=[TrainUnit(type="VIRM", stock_identifier=0)]),
            ),
            EnrichedJourney(
                journey=make_journey("3533", 5, direction=None, origin="Gouda"),
                final_destination="Zwolle",
            ),
        ],
        disruptions=[make_disruption("7001")],
    )

    data = to_jsonable(board)

    first, second = data["journeys"]
    assert first["product"]["number"] == "3531"
    assert first["plannedDateTime"] == START.isoformat()
    assert first["direction"] == "Zwolle"
    assert "origin" not in first
    assert first["composition"]["materieeldelen"][0]["materieelnummer"] == 0
    assert second["composition"] is None
    assert second["origin"] == "Gouda"
    assert second["finalDestination"] == "Zwolle"
    assert data["disruptions"][0]["isActive"] is True
    assert data["disruptions"][0]["type"] == "DISRUPTION"
    json.dumps(data)


def test_journey_details_render_as_stops_and_notes() -> None:
    """Given journey details, when rendering, then the stop name sits under 'stop'."""
    details = JourneyDetails(
        stops=[
            JourneyStop(
                id="1",
                name="Utrecht Centraal",
                uic_code="8400621",
                departures=[StopEvent(planned_time=START, delay_in_seconds=60)],
            )
        ],
        notes=[{"text": "Quiet carriage"}],
    )

    data = to_jsonable(details)

    assert data["stops"][0]["stop"] == {"name": "Utrecht Centraal", "uicCode": "8400621"}
    assert data["stops"][0]["departures"][0]["delayInSeconds"] == 60
    assert data["notes"] == [{"text": "Quiet carriage"}]


def test_live_status_rendering() -> None:
    """Given an error status, when rendering, then status, error details and times are included."""
    status = LiveJourneyStatus(
        snapshot=make_snapshot(),
        status=CycleStatus.ERROR,
        error="Failed to update status.",
        error_details=ErrorDetails(status_code=503, reason="Service unavailable"),
        last_update=START + timedelta(minutes=1),
    )

    data = to_jsonable(status)

    assert data["status"] == "error"
    assert data["pinnedJourney"]["trainNumber"] == "3531"
    assert data["errorDetails"] == {"statusCode": 503, "reason": "Service unavailable"}
    assert data["lastUpdate"] == (START + timedelta(minutes=1)).isoformat()
    assert data["nextStop"] is None
    json.dumps(data)
