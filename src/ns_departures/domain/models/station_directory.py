"""In-memory lookup table of stations."""

from collections.abc import Iterable, Iterator

from ns_departures.domain.models.station import Station


def normalize_station_name(name: str) -> str:
    """Normalize a station name for case-insensitive comparison."""
    return " ".join(name.split()).casefold()


class StationDirectory:
    """Lookup of stations by name, UIC code or station code.

    Name lookups are case-insensitive and accept the long, medium and short
    station names. When two stations share a name the first one wins.
    """

    def __init__(self, stations: Iterable[Station] = ()) -> None:
        self._stations: list[Station] = []
        self._by_name: dict[str, Station] = {}
        self._by_uic: dict[str, Station] = {}
        self._by_code: dict[str, Station] = {}
        for station in stations:
            self.add(station)

    def add(self, station: Station) -> None:
        """Add a station to the directory."""
        self._stations.append(station)
        self._by_uic.setdefault(str(station.uic_code), station)
        self._by_code.setdefault(station.code.upper(), station)
        for name in station.names:
            self._by_name.setdefault(normalize_station_name(name), station)

    def __len__(self) -> int:
        return len(self._stations)

    def __iter__(self) -> Iterator[Station]:
        return iter(self._stations)

    def find_by_name(self, name: str) -> Station | None:
        """Find a station by any of its names, ignoring case."""
        if not name:
            return None
        return self._by_name.get(normalize_station_name(name))

    def find_by_uic(self, uic_code: str | int) -> Station | None:
        """Find a station by UIC code."""
        return self._by_uic.get(str(uic_code))

    def find_by_code(self, code: str) -> Station | None:
        """Find a station by its station code (e.g. ``UT``)."""
        return self._by_code.get(code.upper())

    def canonical_name(self, name: str) -> str:
        """Return the long name of the matching station, or ``name`` itself when unknown."""
        station = self.find_by_name(name)
        return station.name_long if station else name
