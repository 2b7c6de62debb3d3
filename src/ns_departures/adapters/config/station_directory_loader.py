"""Loader for the station directory from a TOML file."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from ns_departures.domain.models.station import Station
from ns_departures.domain.models.station_directory import StationDirectory

logger = logging.getLogger(__name__)


class StationDirectoryLoader:
    """Builds a StationDirectory from ``[[stations]]`` entries in a TOML file."""

    @staticmethod
    def _parse_station(entry: dict[str, Any]) -> Station | None:
        code = entry.get("code")
        uic_code = entry.get("uic")
        name_long = entry.get("name_long") or entry.get("name")
        if not code or not uic_code or not name_long:
            logger.warning(f"Skipping incomplete station entry: {entry}")
            return None

        return Station(
            code=str(code).upper(),
            uic_code=str(uic_code),
            name_long=str(name_long),
            name_medium=str(entry.get("name_medium", "")),
            name_short=str(entry.get("name_short", "")),
        )

    @staticmethod
    def from_dicts(entries: list[dict[str, Any]]) -> StationDirectory:
        """Build a directory from already parsed station entries."""
        directory = StationDirectory()
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            station = StationDirectoryLoader._parse_station(entry)
            if station:
                directory.add(station)
        return directory

    @staticmethod
    def load(path: str | Path | None) -> StationDirectory:
        """Load stations from a TOML file.

        An unset path yields an empty directory.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If 'stations' is not a list.
        """
        if not path:
            logger.info("No stations file configured, station lookups will use literal names")
            return StationDirectory()

        stations_path = Path(path)
        if not stations_path.exists():
            raise FileNotFoundError(f"Stations file not found: {stations_path}")

        with open(stations_path, "rb") as f:
            toml_data = tomllib.load(f)

        entries = toml_data.get("stations", [])
        if not isinstance(entries, list):
            raise ValueError("TOML config 'stations' must be a list")

        directory = StationDirectoryLoader.from_dicts(entries)
        logger.info(f"Loaded {len(directory)} station(s) from {stations_path}")
        return directory
