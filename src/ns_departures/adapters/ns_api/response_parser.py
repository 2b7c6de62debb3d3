"""Parser for NS API responses."""

import logging
from typing import Any

from ns_departures.domain.models.composition import Composition, TrainUnit
from ns_departures.domain.models.disruption import (
    Disruption,
    DisruptionTimespan,
    DisruptionType,
)
from ns_departures.domain.models.journey import (
    Journey,
    JourneyMessage,
    JourneyType,
    RouteStation,
    TrainProduct,
)
from ns_departures.domain.models.journey_details import JourneyDetails, JourneyStop, StopEvent
from ns_departures.domain.time_utils import parse_ns_datetime

logger = logging.getLogger(__name__)


def _label(data: Any) -> str | None:
    """Extract the ``label`` of a nested ``{"label": ...}`` object."""
    if isinstance(data, dict):
        label = data.get("label")
        return str(label) if label else None
    return None


def _optional_str(value: Any) -> str | None:
    """Convert a value to string, keeping None and empty values as None."""
    if value is None or value == "":
        return None
    return str(value)


class NsResponseParser:
    """Parses NS API payloads into domain objects."""

    @staticmethod
    def parse_journeys(journeys: list[dict[str, Any]], journey_type: JourneyType) -> list[Journey]:
        """Parse a station board.

        Entries that cannot be parsed are skipped with a warning.

        Args:
            journeys: Raw journey dictionaries.
            journey_type: Whether the board lists departures or arrivals.

        Returns:
            List of Journey objects in upstream order.
        """
        results = []
        for raw in journeys:
            journey = NsResponseParser._parse_journey(raw, journey_type)
            if journey:
                results.append(journey)
        return results

    @staticmethod
    def _parse_product(product: Any) -> TrainProduct:
        """Parse the train product."""
        if not isinstance(product, dict):
            product = {}
        return TrainProduct(
            number=str(product.get("number", "")),
            category_code=str(product.get("categoryCode", "")),
            short_category_name=str(product.get("shortCategoryName", "")),
            long_category_name=str(product.get("longCategoryName", "")),
            operator_code=str(product.get("operatorCode", "")),
            operator_name=str(product.get("operatorName", "")),
            type=str(product.get("type", "")),
        )

    @staticmethod
    def _parse_route_stations(stations: Any) -> list[RouteStation]:
        if not isinstance(stations, list):
            return []
        return [
            RouteStation(uic_code=str(s.get("uicCode", "")), medium_name=str(s.get("mediumName", "")))
            for s in stations
            if isinstance(s, dict)
        ]

    @staticmethod
    def _parse_messages(messages: Any) -> list[JourneyMessage]:
        if not isinstance(messages, list):
            return []
        return [
            JourneyMessage(message=str(m["message"]), style=str(m.get("style", "")))
            for m in messages
            if isinstance(m, dict) and m.get("message")
        ]

    @staticmethod
    def _parse_journey(raw: dict[str, Any], journey_type: JourneyType) -> Journey | None:
        """Parse a single departure or arrival."""
        if not isinstance(raw, dict):
            logger.warning(f"Skipping non-object journey entry: {raw!r}")
            return None

        planned = parse_ns_datetime(raw.get("plannedDateTime"))
        if planned is None:
            logger.warning(f"Skipping journey without plannedDateTime: {raw.get('product')}")
            return None
        actual = parse_ns_datetime(raw.get("actualDateTime")) or planned

        is_departure = journey_type is JourneyType.DEPARTURES
        return Journey(
            product=NsResponseParser._parse_product(raw.get("product")),
            planned_date_time=planned,
            actual_date_time=actual,
            train_category=str(raw.get("trainCategory", "")),
            cancelled=bool(raw.get("cancelled", False)),
            planned_track=_optional_str(raw.get("plannedTrack")),
            actual_track=_optional_str(raw.get("actualTrack")),
            route_stations=NsResponseParser._parse_route_stations(raw.get("routeStations")),
            messages=NsResponseParser._parse_messages(raw.get("messages")),
            origin=None if is_departure else _optional_str(raw.get("origin")),
            direction=_optional_str(raw.get("direction")) if is_departure else None,
            origin_planned_departure_time=parse_ns_datetime(raw.get("originPlannedDepartureTime")),
        )

    @staticmethod
    def parse_composition(data: dict[str, Any]) -> Composition:
        """Parse a virtual train API composition."""
        units = []
        for part in data.get("materieeldelen", []):
            if not isinstance(part, dict):
                continue
            identifier = part.get("materieelnummer")
            try:
                stock_identifier = int(identifier) if identifier is not None else None
            except (TypeError, ValueError):
                logger.warning(f"Ignoring non-numeric rolling-stock identifier {identifier!r}")
                stock_identifier = None
            units.append(
                TrainUnit(
                    type=str(part.get("type", "")),
                    stock_identifier=stock_identifier,
                    destination=_optional_str(part.get("eindbestemming")),
                    image_url=_optional_str(part.get("afbeelding")),
                )
            )

        return Composition(
            length=int(data["lengte"]),
            units=units,
            destination=_optional_str(data.get("richting")),
        )

    @staticmethod
    def _parse_stop_events(events: Any) -> list[StopEvent]:
        if not isinstance(events, list):
            return []
        results = []
        for event in events:
            if not isinstance(event, dict):
                continue
            delay = event.get("delayInSeconds")
            results.append(
                StopEvent(
                    planned_time=parse_ns_datetime(event.get("plannedTime")),
                    actual_time=parse_ns_datetime(event.get("actualTime")),
                    delay_in_seconds=int(delay) if isinstance(delay, int | float) else None,
                    cancelled=bool(event.get("cancelled", False)),
                    planned_track=_optional_str(event.get("plannedTrack")),
                    actual_track=_optional_str(event.get("actualTrack")),
                )
            )
        return results

    @staticmethod
    def parse_journey_details(payload: dict[str, Any]) -> JourneyDetails:
        """Parse the payload of the journey endpoint."""
        stops = []
        for raw_stop in payload.get("stops") or []:
            if not isinstance(raw_stop, dict):
                continue
            stop_info = raw_stop.get("stop") if isinstance(raw_stop.get("stop"), dict) else {}
            stops.append(
                JourneyStop(
                    id=str(raw_stop.get("id", "")),
                    name=str(stop_info.get("name", "")),
                    uic_code=str(stop_info.get("uicCode", "")),
                    destination=_optional_str(raw_stop.get("destination")),
                    status=_optional_str(raw_stop.get("status")),
                    arrivals=NsResponseParser._parse_stop_events(raw_stop.get("arrivals")),
                    departures=NsResponseParser._parse_stop_events(raw_stop.get("departures")),
                )
            )

        notes = [n for n in payload.get("notes") or [] if isinstance(n, dict)]
        return JourneyDetails(stops=stops, notes=notes)

    @staticmethod
    def _parse_timespan(raw: dict[str, Any]) -> DisruptionTimespan:
        advices = raw.get("advices")
        return DisruptionTimespan(
            period=_optional_str(raw.get("period")),
            start=_optional_str(raw.get("start")),
            end=_optional_str(raw.get("end")),
            situation=_label(raw.get("situation")),
            cause=_label(raw.get("cause")),
            advices=[str(a) for a in advices] if isinstance(advices, list) else [],
        )

    @staticmethod
    def _parse_disruption(raw: dict[str, Any]) -> Disruption | None:
        """Parse a single disruption; unknown types are skipped."""
        try:
            disruption_type = DisruptionType(raw.get("type"))
        except ValueError:
            logger.warning(f"Skipping disruption {raw.get('id')} with unknown type {raw.get('type')!r}")
            return None

        timespans = raw.get("timespans")
        expected_duration = raw.get("expectedDuration")
        return Disruption(
            id=str(raw.get("id", "")),
            type=disruption_type,
            is_active=raw.get("isActive") is True,
            title=str(raw.get("title", "")),
            topic=_optional_str(raw.get("topic")),
            situation=_label(raw.get("situation")),
            additional_travel_time=_label(raw.get("summaryAdditionalTravelTime")),
            timespans=[
                NsResponseParser._parse_timespan(t)
                for t in (timespans if isinstance(timespans, list) else [])
                if isinstance(t, dict)
            ],
            expected_duration=(
                _optional_str(expected_duration.get("description"))
                if isinstance(expected_duration, dict)
                else None
            ),
        )

    @staticmethod
    def parse_disruptions(disruptions: list[dict[str, Any]]) -> list[Disruption]:
        """Parse the disruptions of a station, preserving upstream order."""
        results = []
        for raw in disruptions:
            if not isinstance(raw, dict):
                continue
            disruption = NsResponseParser._parse_disruption(raw)
            if disruption:
                results.append(disruption)
        return results
