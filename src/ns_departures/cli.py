"""Command line interface for NS station boards and the pinned journey."""

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime
from typing import Any

import aiohttp

from ns_departures.adapters.config import AppConfig, StationDirectoryLoader
from ns_departures.adapters.ns_api import NsJourneyRepository
from ns_departures.adapters.serialization import to_jsonable
from ns_departures.adapters.storage import JsonFilePinnedJourneyStorage, PinnedJourneyStore
from ns_departures.adapters.tracking import PinnedJourneyTracker
from ns_departures.application.services import (
    JourneyEnrichmentService,
    detect_for_enriched_journey,
)
from ns_departures.domain.errors import NsApiError
from ns_departures.domain.models import (
    EnrichedJourneys,
    JourneyType,
    LiveJourneyStatus,
    PinnedJourneySnapshot,
    Station,
    StationDirectory,
)
from ns_departures.domain.ports import JourneyEnrichmentService as JourneyEnrichmentPort

logger = logging.getLogger(__name__)


class CliError(Exception):
    """Raised when a command cannot be completed; the message is shown to the user."""


def parse_date_time(value: str) -> datetime:
    """Parse an ISO 8601 ``--date-time`` argument."""
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid ISO date-time: {value!r}") from e


def resolve_station(station_directory: StationDirectory, query: str) -> Station | None:
    """Find a station by code, name or UIC code."""
    return (
        station_directory.find_by_code(query)
        or station_directory.find_by_name(query)
        or station_directory.find_by_uic(query)
    )


def annotate_journeys(
    result: EnrichedJourneys, station_directory: StationDirectory | None = None
) -> dict[str, Any]:
    """Render a station board, adding the detected destination change to every journey."""
    data = to_jsonable(result)
    for rendered, enriched in zip(data["journeys"], result.journeys, strict=True):
        rendered["destinationChange"] = to_jsonable(
            detect_for_enriched_journey(enriched, station_directory)
        )
    return data


async def pin_journey(
    service: JourneyEnrichmentPort,
    store: PinnedJourneyStore,
    station: Station,
    train_number: str,
    date_time: datetime | None = None,
) -> PinnedJourneySnapshot:
    """Pin a departure from ``station``'s current board.

    Raises:
        CliError: If the train does not depart from the station.
    """
    result = await service.get_enriched_journeys(station.code, JourneyType.DEPARTURES, date_time)
    for enriched in result.journeys:
        if enriched.journey.train_number == train_number:
            snapshot = PinnedJourneySnapshot.from_enriched_journey(enriched, station)
            store.pin(snapshot)
            return snapshot
    raise CliError(f"Train {train_number} not found in departures from {station.name_long}")


def describe_status(status: LiveJourneyStatus | None) -> str:
    """One-line human readable summary of a live status."""
    if status is None:
        return "No journey pinned"

    snapshot = status.snapshot
    parts = [
        f"{snapshot.journey_category or 'Train'} {snapshot.train_number}",
        f"{snapshot.origin} -> {snapshot.destination}",
        f"[{status.status.value}]",
    ]
    if status.is_cancelled:
        parts.append("CANCELLED")
    elif status.delay_minutes:
        parts.append(f"+{status.delay_minutes} min")
    if status.next_stop:
        parts.append(f"next stop: {status.next_stop.name}")
    if status.error:
        parts.append(f"error: {status.error}")
    return " | ".join(parts)


def _log_status(status: LiveJourneyStatus | None) -> None:
    logger.info(describe_status(status))


async def track(tracker: PinnedJourneyTracker, store: PinnedJourneyStore, poll_seconds: float) -> None:
    """Track the stored journey until it is unpinned (from any process)."""
    remove_listener = tracker.add_listener(_log_status)
    unfollow = tracker.follow(store)
    try:
        while store.current is not None:
            await asyncio.sleep(poll_seconds)
            store.reload()
        logger.info("Journey unpinned, stopping tracker")
    finally:
        unfollow()
        await tracker.close()
        remove_listener()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ns-departures",
        description="NS station boards with train compositions and live pinned-journey tracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Departures from Utrecht Centraal
  ns-departures journeys UT

  # Arrivals at Amsterdam Centraal from a given moment
  ns-departures journeys ASD --arrivals --date-time 2024-05-01T08:00:00+02:00

  # Stops of a train
  ns-departures stops 3531

  # Pin a departure and follow it live
  ns-departures pin UT 3531
  ns-departures track
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    journeys_parser = subparsers.add_parser("journeys", help="Show the board of a station")
    journeys_parser.add_argument("station", help="Station code (e.g. UT)")
    journeys_parser.add_argument(
        "--arrivals", action="store_true", help="Show arrivals instead of departures"
    )
    journeys_parser.add_argument(
        "--date-time", type=parse_date_time, help="ISO 8601 moment to start the board from"
    )

    stops_parser = subparsers.add_parser("stops", help="Show the stops of a train")
    stops_parser.add_argument("train_number", help="Train number (e.g. 3531)")

    pin_parser = subparsers.add_parser("pin", help="Pin a departure for live tracking")
    pin_parser.add_argument("station", help="Station code, name or UIC code")
    pin_parser.add_argument("train_number", help="Train number departing from the station")
    pin_parser.add_argument(
        "--date-time", type=parse_date_time, help="ISO 8601 moment to search the board from"
    )

    subparsers.add_parser("unpin", help="Clear the pinned journey")
    subparsers.add_parser("track", help="Follow the pinned journey until it is unpinned")

    return parser


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


async def run_command(args: argparse.Namespace, config: AppConfig) -> int:
    """Execute a parsed command and return the process exit code."""
    store = PinnedJourneyStore(JsonFilePinnedJourneyStorage(config.pinned_journey_file))

    if args.command == "unpin":
        store.unpin()
        return 0

    station_directory = StationDirectoryLoader.load(config.stations_file)

    timeout = aiohttp.ClientTimeout(total=config.ns_api_timeout_seconds)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        service = JourneyEnrichmentService(NsJourneyRepository.from_config(session, config))

        if args.command == "journeys":
            journey_type = JourneyType.ARRIVALS if args.arrivals else JourneyType.DEPARTURES
            result = await service.get_enriched_journeys(args.station, journey_type, args.date_time)
            _print_json(annotate_journeys(result, station_directory))

        elif args.command == "stops":
            details = await service.get_journey_stops(args.train_number)
            if details is None:
                print(f"Train {args.train_number} is not active.", file=sys.stderr)
                return 1
            _print_json(to_jsonable(details))

        elif args.command == "pin":
            station = resolve_station(station_directory, args.station)
            if station is None:
                raise CliError(f"Unknown station: {args.station}")
            snapshot = await pin_journey(
                service, store, station, args.train_number, args.date_time
            )
            _print_json(to_jsonable(snapshot))

        elif args.command == "track":
            if store.current is None:
                raise CliError("No journey pinned. Use 'ns-departures pin' first.")
            tracker = PinnedJourneyTracker(
                service,
                station_directory,
                refresh_interval_seconds=config.tracker_refresh_interval_seconds,
            )
            await track(tracker, store, poll_seconds=config.tracker_refresh_interval_seconds)

    return 0


async def main(argv: list[str] | None = None, config: AppConfig | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        return await run_command(args, config or AppConfig())
    except (CliError, NsApiError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        logger.error(f"Command {args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
