"""Tracker keeping the live status of the pinned journey up to date."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from ns_departures.domain.contracts.journey_tracker import JourneyTrackerProtocol
from ns_departures.domain.errors import (
    JourneyFetchError,
    UpstreamUnavailable,
    UpstreamUnreachable,
)
from ns_departures.domain.models.error_details import ErrorDetails
from ns_departures.domain.models.journey import Journey, JourneyType
from ns_departures.domain.models.live_journey_status import (
    CycleStatus,
    LiveJourneyStatus,
    NextStopDetails,
    TrackerState,
)
from ns_departures.domain.time_utils import calculate_delay_minutes

if TYPE_CHECKING:
    from ns_departures.adapters.storage.pinned_journey_store import PinnedJourneyStore
    from ns_departures.domain.models.enriched_journey import EnrichedJourneys
    from ns_departures.domain.models.journey_details import JourneyDetails
    from ns_departures.domain.models.pinned_journey import PinnedJourneySnapshot
    from ns_departures.domain.models.station_directory import StationDirectory
    from ns_departures.domain.ports import JourneyEnrichmentService

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_INTERVAL_SECONDS = 30
BOARD_LEAD_TIME = timedelta(minutes=1)

INVALID_ORIGIN_MESSAGE = "Invalid origin station code."
DEPARTURE_NOT_FOUND_MESSAGE = "Departure not found in current schedule."
DEPARTURE_FETCH_FAILED_MESSAGE = "Departure fetch failed."
NO_FURTHER_STOPS_MESSAGE = "No further stops found."
STOPS_FETCH_FAILED_MESSAGE = "Stops fetch failed."
UPDATE_FAILED_MESSAGE = "Failed to update status."

LiveStatusListener = Callable[[LiveJourneyStatus | None], None]


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _extract_error_details(error: BaseException) -> ErrorDetails:
    """Find the upstream failure behind ``error`` and describe it."""
    cause: BaseException | None = error
    while cause is not None:
        if isinstance(cause, UpstreamUnavailable):
            return ErrorDetails.for_status(cause.status)
        if isinstance(cause, UpstreamUnreachable):
            return ErrorDetails.unreachable(cause.timed_out)
        cause = cause.__cause__
    return ErrorDetails.unknown()


def find_live_journey(
    journeys: EnrichedJourneys, snapshot: PinnedJourneySnapshot
) -> Journey | None:
    """Find the pinned journey on a departures board by train number and planned time."""
    for enriched in journeys.journeys:
        journey = enriched.journey
        if (
            journey.train_number == snapshot.train_number
            and journey.planned_date_time == snapshot.planned_departure_time
        ):
            return journey
    return None


def find_next_stop(details: JourneyDetails, now: datetime) -> NextStopDetails | None:
    """Find the first stop the train has not departed from yet.

    A stop qualifies when it has both an arrival and a departure event and its
    first departure (actual time, else planned time) lies after ``now``. The
    origin has no arrival and is never the next stop.
    """
    for stop in details.stops:
        if not stop.departures or not stop.arrivals:
            continue
        departure = stop.departures[0]
        departure_time = departure.time
        if departure_time is None or departure_time <= now:
            continue

        arrival = stop.arrivals[0]
        return NextStopDetails(
            name=stop.name,
            planned_arrival_time=arrival.planned_time,
            actual_arrival_time=arrival.actual_time,
            platform=arrival.track,
            cancelled=arrival.cancelled,
        )
    return None


class PinnedJourneyTracker(JourneyTrackerProtocol):
    """Periodically refreshes the live status of one pinned journey.

    While a journey is pinned, a refresh cycle runs immediately and then every
    ``refresh_interval_seconds``. A tick is skipped while the previous cycle
    of the same pin is still running. Results of cycles that belong to an
    earlier pin (or finish after unpinning) are discarded.
    """

    def __init__(
        self,
        enrichment_service: JourneyEnrichmentService,
        station_directory: StationDirectory,
        refresh_interval_seconds: float = DEFAULT_REFRESH_INTERVAL_SECONDS,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the tracker.

        Args:
            enrichment_service: Source of departures boards and train stops.
            station_directory: Lookup used to turn the origin UIC code into a station code.
            refresh_interval_seconds: Seconds between refresh cycles.
            clock: Returns the current (timezone-aware) time.
        """
        self._enrichment_service = enrichment_service
        self._station_directory = station_directory
        self._refresh_interval_seconds = refresh_interval_seconds
        self._clock = clock
        self._lock = asyncio.Lock()
        self._snapshot: PinnedJourneySnapshot | None = None
        self._status: LiveJourneyStatus | None = None
        self._generation = 0
        self._timer: asyncio.Task | None = None
        self._in_flight: asyncio.Task | None = None
        self._in_flight_generation = 0
        self._cycles: set[asyncio.Task] = set()
        self._pending_changes: set[asyncio.Task] = set()
        self._listeners: list[LiveStatusListener] = []

    @property
    def state(self) -> TrackerState:
        """ACTIVE while a journey is pinned, IDLE otherwise."""
        return TrackerState.ACTIVE if self._snapshot is not None else TrackerState.IDLE

    @property
    def status(self) -> LiveJourneyStatus | None:
        """Latest live status, or None when nothing is pinned."""
        return self._status

    @property
    def has_timer(self) -> bool:
        """Whether a refresh timer is currently running."""
        return self._timer is not None and not self._timer.done()

    def add_listener(self, listener: LiveStatusListener) -> Callable[[], None]:
        """Register a callback receiving every applied status change.

        Returns:
            Callable that removes the listener again.
        """
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def _set_status(self, status: LiveJourneyStatus | None) -> None:
        self._status = status
        for listener in list(self._listeners):
            try:
                listener(status)
            except Exception as e:
                logger.error(f"Live status listener failed: {e}", exc_info=True)

    async def pin(self, snapshot: PinnedJourneySnapshot) -> None:
        """Start tracking ``snapshot``, replacing the journey tracked so far."""
        async with self._lock:
            await self._stop_timer()
            self._generation += 1
            self._snapshot = snapshot
            self._set_status(LiveJourneyStatus(snapshot=snapshot))
            self._timer = asyncio.create_task(self._poll_loop(self._generation, snapshot))
            logger.info(
                f"Tracking train {snapshot.train_number} from {snapshot.origin} "
                f"every {self._refresh_interval_seconds}s"
            )

    async def unpin(self) -> None:
        """Stop tracking. Does nothing when no journey is pinned."""
        async with self._lock:
            if self._snapshot is None:
                return
            await self._stop_timer()
            self._generation += 1
            logger.info(f"Stopped tracking train {self._snapshot.train_number}")
            self._snapshot = None
            self._set_status(None)

    async def _stop_timer(self) -> None:
        """Cancel the refresh timer and wait until it is gone."""
        if self._timer and not self._timer.done():
            self._timer.cancel()
            try:
                await self._timer
            except asyncio.CancelledError:
                logger.debug("Pinned journey timer cancelled")
        self._timer = None

    def follow(self, store: PinnedJourneyStore) -> Callable[[], None]:
        """Mirror every pin and unpin of ``store`` into this tracker.

        The journey currently held by the store is tracked right away. Must be
        called from within a running event loop.

        Returns:
            Callable that stops following the store.
        """

        def on_change(snapshot: PinnedJourneySnapshot | None) -> None:
            change = self.pin(snapshot) if snapshot is not None else self.unpin()
            task = asyncio.create_task(change)
            self._pending_changes.add(task)
            task.add_done_callback(self._pending_changes.discard)

        unsubscribe = store.subscribe(on_change)
        if store.current is not None:
            on_change(store.current)
        return unsubscribe

    async def _poll_loop(self, generation: int, snapshot: PinnedJourneySnapshot) -> None:
        """Start a cycle now and then once per interval until cancelled."""
        self._start_cycle(generation, snapshot)
        try:
            while True:
                await asyncio.sleep(self._refresh_interval_seconds)
                self._start_cycle(generation, snapshot)
        except asyncio.CancelledError:
            logger.debug(f"Refresh loop for train {snapshot.train_number} cancelled")
            raise

    def _start_cycle(self, generation: int, snapshot: PinnedJourneySnapshot) -> None:
        if (
            self._in_flight is not None
            and not self._in_flight.done()
            and self._in_flight_generation == generation
        ):
            logger.debug(f"Previous refresh of train {snapshot.train_number} still running, skipping")
            return

        task = asyncio.create_task(self._run_cycle(generation, snapshot))
        self._in_flight = task
        self._in_flight_generation = generation
        self._cycles.add(task)
        task.add_done_callback(self._cycles.discard)

    async def _run_cycle(self, generation: int, snapshot: PinnedJourneySnapshot) -> None:
        try:
            status = await self.refresh(snapshot)
        except Exception as e:
            logger.error(f"Error refreshing train {snapshot.train_number}: {e}", exc_info=True)
            status = LiveJourneyStatus(
                snapshot=snapshot,
                status=CycleStatus.ERROR,
                error=UPDATE_FAILED_MESSAGE,
                error_details=_extract_error_details(e),
                last_update=self._clock(),
            )

        if generation != self._generation or self._snapshot is None:
            logger.debug(f"Discarding stale refresh result for train {snapshot.train_number}")
            return
        self._set_status(status)

    async def refresh(self, snapshot: PinnedJourneySnapshot) -> LiveJourneyStatus:
        """Query the live status of ``snapshot`` once.

        The departures board of the origin (from one minute before the planned
        departure) and the stops of the train are fetched concurrently.
        """
        station = self._station_directory.find_by_uic(snapshot.origin_uic)
        if station is None:
            logger.warning(f"No station code known for UIC {snapshot.origin_uic}")
            return LiveJourneyStatus(
                snapshot=snapshot,
                status=CycleStatus.ERROR,
                error=INVALID_ORIGIN_MESSAGE,
                last_update=self._clock(),
            )

        board_result, stops_result = await asyncio.gather(
            self._enrichment_service.get_enriched_journeys(
                station.code,
                JourneyType.DEPARTURES,
                snapshot.planned_departure_time - BOARD_LEAD_TIME,
            ),
            self._enrichment_service.get_journey_stops(snapshot.train_number),
            return_exceptions=True,
        )
        for result in (board_result, stops_result):
            if isinstance(result, BaseException) and not isinstance(result, Exception):
                raise result

        now = self._clock()
        failures: list[Exception] = []

        live_journey = None
        departure_error = None
        if isinstance(board_result, Exception):
            logger.error(f"Failed to fetch live departure status: {board_result}")
            failures.append(board_result)
            departure_error = (
                str(board_result)
                if isinstance(board_result, JourneyFetchError)
                else DEPARTURE_FETCH_FAILED_MESSAGE
            )
        else:
            live_journey = find_live_journey(board_result, snapshot)
            if live_journey is None:
                departure_error = DEPARTURE_NOT_FOUND_MESSAGE

        next_stop = None
        stops_error = None
        if isinstance(stops_result, Exception):
            logger.error(f"Failed to fetch stops list: {stops_result}")
            failures.append(stops_result)
            stops_error = STOPS_FETCH_FAILED_MESSAGE
        else:
            next_stop = find_next_stop(stops_result, now) if stops_result is not None else None
            if next_stop is None:
                stops_error = NO_FURTHER_STOPS_MESSAGE

        if departure_error and stops_error:
            error = UPDATE_FAILED_MESSAGE
        elif departure_error:
            error = departure_error
        else:
            error = stops_error

        planned = live_journey.planned_date_time if live_journey else snapshot.planned_departure_time
        actual = live_journey.actual_date_time if live_journey else planned

        return LiveJourneyStatus(
            snapshot=snapshot,
            status=CycleStatus.ERROR if error else CycleStatus.LIVE,
            live_journey=live_journey,
            delay_minutes=calculate_delay_minutes(planned, actual),
            is_cancelled=live_journey.cancelled if live_journey else False,
            next_stop=next_stop,
            error=error,
            error_details=_extract_error_details(failures[0]) if failures else None,
            last_update=now,
        )

    async def join_in_flight(self) -> None:
        """Wait until all running refresh cycles have finished."""
        while self._cycles:
            await asyncio.gather(*self._cycles, return_exceptions=True)

    async def close(self) -> None:
        """Stop tracking and wait for outstanding work."""
        if self._pending_changes:
            await asyncio.gather(*self._pending_changes, return_exceptions=True)
        await self.unpin()
        await self.join_in_flight()
