"""Pure helpers deriving single values from a train's journey details."""

from datetime import datetime

from ns_departures.domain.models.journey_details import JourneyDetails


def extract_final_destination(details: JourneyDetails | None) -> str | None:
    """Return the destination a train runs to.

    Uses the last stop's destination; if that is not set, the first stop in
    the list that has one.
    """
    if details is None or not details.stops:
        return None

    last_stop = details.stops[-1]
    if last_stop.destination:
        return last_stop.destination

    for stop in details.stops:
        if stop.destination:
            return stop.destination
    return None


def extract_origin_departure_time(details: JourneyDetails | None) -> datetime | None:
    """Return the planned departure time at the train's first stop."""
    if details is None or not details.stops:
        return None

    departures = details.stops[0].departures
    if departures and departures[0].planned_time:
        return departures[0].planned_time
    return None
