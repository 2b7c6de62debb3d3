"""Rendering of domain objects as JSON-friendly dictionaries.

Keys follow the camelCase field names of the NS APIs so that output can be
compared with upstream responses. Timestamps are ISO 8601 strings.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any

from ns_departures.domain.models import (
    Composition,
    DestinationChange,
    Disruption,
    DisruptionTimespan,
    EnrichedJourney,
    EnrichedJourneys,
    ErrorDetails,
    Journey,
    JourneyDetails,
    JourneyMessage,
    JourneyStop,
    LiveJourneyStatus,
    NextStopDetails,
    PinnedJourneySnapshot,
    RouteStation,
    StopEvent,
    TrainProduct,
    TrainUnit,
)


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def product_to_dict(product: TrainProduct) -> dict[str, Any]:
    return {
        "number": product.number,
        "categoryCode": product.category_code,
        "shortCategoryName": product.short_category_name,
        "longCategoryName": product.long_category_name,
        "operatorCode": product.operator_code,
        "operatorName": product.operator_name,
        "type": product.type,
    }


def route_station_to_dict(station: RouteStation) -> dict[str, Any]:
    return {"uicCode": station.uic_code, "mediumName": station.medium_name}


def message_to_dict(message: JourneyMessage) -> dict[str, Any]:
    return {"message": message.message, "style": message.style}


def journey_to_dict(journey: Journey) -> dict[str, Any]:
    """Render a journey; ``origin`` and ``direction`` only appear when set."""
    data: dict[str, Any] = {
        "product": product_to_dict(journey.product),
        "plannedDateTime": _iso(journey.planned_date_time),
        "actualDateTime": _iso(journey.actual_date_time),
        "trainCategory": journey.train_category,
        "cancelled": journey.cancelled,
        "plannedTrack": journey.planned_track,
        "actualTrack": journey.actual_track,
        "routeStations": [route_station_to_dict(s) for s in journey.route_stations],
        "messages": [message_to_dict(m) for m in journey.messages],
    }
    if journey.origin is not None:
        data["origin"] = journey.origin
    if journey.direction is not None:
        data["direction"] = journey.direction
    if journey.origin_planned_departure_time is not None:
        data["originPlannedDepartureTime"] = _iso(journey.origin_planned_departure_time)
    return data


def unit_to_dict(unit: TrainUnit) -> dict[str, Any]:
    return {
        "type": unit.type,
        "materieelnummer": unit.stock_identifier,
        "eindbestemming": unit.destination,
        "afbeelding": unit.image_url,
    }


def composition_to_dict(composition: Composition) -> dict[str, Any]:
    return {
        "lengte": composition.length,
        "materieeldelen": [unit_to_dict(u) for u in composition.units],
        "richting": composition.destination,
    }


def enriched_journey_to_dict(enriched: EnrichedJourney) -> dict[str, Any]:
    """Render a journey with its composition (and final destination for arrivals)."""
    data = journey_to_dict(enriched.journey)
    data["composition"] = composition_to_dict(enriched.composition) if enriched.composition else None
    if enriched.final_destination is not None:
        data["finalDestination"] = enriched.final_destination
    return data


def timespan_to_dict(timespan: DisruptionTimespan) -> dict[str, Any]:
    return {
        "period": timespan.period,
        "start": timespan.start,
        "end": timespan.end,
        "situation": timespan.situation,
        "cause": timespan.cause,
        "advices": list(timespan.advices),
    }


def disruption_to_dict(disruption: Disruption) -> dict[str, Any]:
    return {
        "id": disruption.id,
        "type": disruption.type.value,
        "isActive": disruption.is_active,
        "title": disruption.title,
        "topic": disruption.topic,
        "situation": disruption.situation,
        "summaryAdditionalTravelTime": disruption.additional_travel_time,
        "timespans": [timespan_to_dict(t) for t in disruption.timespans],
        "expectedDuration": disruption.expected_duration,
    }


def enriched_journeys_to_dict(result: EnrichedJourneys) -> dict[str, Any]:
    return {
        "journeys": [enriched_journey_to_dict(e) for e in result.journeys],
        "disruptions": [disruption_to_dict(d) for d in result.disruptions],
    }


def stop_event_to_dict(event: StopEvent) -> dict[str, Any]:
    return {
        "plannedTime": _iso(event.planned_time),
        "actualTime": _iso(event.actual_time),
        "delayInSeconds": event.delay_in_seconds,
        "cancelled": event.cancelled,
        "plannedTrack": event.planned_track,
        "actualTrack": event.actual_track,
    }


def stop_to_dict(stop: JourneyStop) -> dict[str, Any]:
    return {
        "id": stop.id,
        "stop": {"name": stop.name, "uicCode": stop.uic_code},
        "destination": stop.destination,
        "status": stop.status,
        "arrivals": [stop_event_to_dict(e) for e in stop.arrivals],
        "departures": [stop_event_to_dict(e) for e in stop.departures],
    }


def journey_details_to_dict(details: JourneyDetails) -> dict[str, Any]:
    return {"stops": [stop_to_dict(s) for s in details.stops], "notes": list(details.notes)}


def destination_change_to_dict(change: DestinationChange) -> dict[str, Any]:
    return {
        "effectiveDestination": change.effective_destination,
        "truncatedDestination": change.truncated_destination,
        "unitsEndingEarly": [
            {"materieelnummer": u.unit.display_identifier, "destination": u.destination}
            for u in change.units_ending_early
        ],
    }


def next_stop_to_dict(next_stop: NextStopDetails) -> dict[str, Any]:
    return {
        "name": next_stop.name,
        "plannedArrivalTime": _iso(next_stop.planned_arrival_time),
        "actualArrivalTime": _iso(next_stop.actual_arrival_time),
        "platform": next_stop.platform,
        "cancelled": next_stop.cancelled,
    }


def error_details_to_dict(details: ErrorDetails) -> dict[str, Any]:
    return {"statusCode": details.status_code, "reason": details.reason}


def live_status_to_dict(status: LiveJourneyStatus) -> dict[str, Any]:
    """Render the tracker output together with the pinned snapshot it belongs to."""
    return {
        "pinnedJourney": status.snapshot.to_dict(),
        "status": status.status.value,
        "liveJourney": journey_to_dict(status.live_journey) if status.live_journey else None,
        "delayMinutes": status.delay_minutes,
        "isCancelled": status.is_cancelled,
        "nextStop": next_stop_to_dict(status.next_stop) if status.next_stop else None,
        "error": status.error,
        "errorDetails": error_details_to_dict(status.error_details) if status.error_details else None,
        "lastUpdate": _iso(status.last_update),
    }


_RENDERERS: dict[type, Callable[[Any], Any]] = {
    Journey: journey_to_dict,
    Composition: composition_to_dict,
    Disruption: disruption_to_dict,
    EnrichedJourney: enriched_journey_to_dict,
    EnrichedJourneys: enriched_journeys_to_dict,
    JourneyDetails: journey_details_to_dict,
    JourneyStop: stop_to_dict,
    DestinationChange: destination_change_to_dict,
    PinnedJourneySnapshot: PinnedJourneySnapshot.to_dict,
    LiveJourneyStatus: live_status_to_dict,
    NextStopDetails: next_stop_to_dict,
    ErrorDetails: error_details_to_dict,
}


def to_jsonable(value: Any) -> Any:
    """Convert a domain object (or a list of them) into JSON-serializable data.

    Raises:
        TypeError: If the value has no JSON rendering.
    """
    if value is None or isinstance(value, str | int | float | bool):
        return value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, list | tuple):
        return [to_jsonable(v) for v in value]

    renderer = _RENDERERS.get(type(value))
    if renderer is None:
        raise TypeError(f"Cannot render {type(value).__name__} as JSON")
    return renderer(value)
