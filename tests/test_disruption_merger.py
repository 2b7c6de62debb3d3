"""Tests for the disruption merger."""

import pytest

from ns_departures.application.services import DisruptionMerger, filter_active
from ns_departures.domain.errors import UpstreamUnavailable
from tests.test_journey_enrichment_service import MockJourneyRepository, make_disruption


def test_filter_active_keeps_order() -> None:
    """Given mixed disruptions, when filtering, then active ones remain in upstream order."""
    disruptions = [
        make_disruption("3"),
        make_disruption("1", is_active=False),
        make_disruption("2"),
    ]

    assert [d.id for d in filter_active(disruptions)] == ["3", "2"]


@pytest.mark.asyncio
async def test_get_active_disruptions() -> None:
    """Given a station with an inactive disruption, when merging, then only active ones remain."""
    repository = MockJourneyRepository(
        [], disruptions=[make_disruption("1", is_active=False), make_disruption("2")]
    )

    result = await DisruptionMerger(repository).get_active_disruptions("UT")

    assert [d.id for d in result] == ["2"]


@pytest.mark.asyncio
async def test_upstream_failure_propagates() -> None:
    """Given a failing disruptions fetch, when merging, then the error propagates."""
    repository = MockJourneyRepository([], disruptions=UpstreamUnavailable(500, "https://x"))

    with pytest.raises(UpstreamUnavailable):
        await DisruptionMerger(repository).get_active_disruptions("UT")
