"""Storage media for the pinned journey."""

import json
import logging
import os
import tempfile
from pathlib import Path

from ns_departures.domain.ports.pinned_journey_storage import PinnedJourneyStorage

logger = logging.getLogger(__name__)


class InMemoryPinnedJourneyStorage(PinnedJourneyStorage):
    """Keeps values in a dict; nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> str | None:
        return self._values.get(key)

    def write(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)


class JsonFilePinnedJourneyStorage(PinnedJourneyStorage):
    """Keeps values in a single JSON object on disk.

    Writes go to a temporary file that replaces the target, so a crash never
    leaves a half-written file behind.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize with the path of the JSON file (created on first write)."""
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Location of the JSON file."""
        return self._path

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}

        with open(self._path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Storage file {self._path} does not contain a JSON object")
        return data

    def _save(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self._path)
        except OSError:
            Path(tmp_path).unlink(missing_ok=True)
            raise
        logger.debug(f"Saved {len(data)} key(s) to {self._path}")

    def read(self, key: str) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def _load_for_update(self) -> tuple[dict[str, str], bool]:
        """Load the file before changing it; an unreadable file is replaced by an empty object.

        Returns:
            The stored values and whether the file was unreadable.
        """
        try:
            return self._load(), False
        except ValueError as e:
            logger.warning(f"Discarding unreadable storage file {self._path}: {e}")
            return {}, True

    def write(self, key: str, value: str) -> None:
        data, _ = self._load_for_update()
        data[key] = value
        self._save(data)

    def remove(self, key: str) -> None:
        data, corrupt = self._load_for_update()
        if key in data or corrupt:
            data.pop(key, None)
            self._save(data)
