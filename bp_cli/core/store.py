"""Reading repositories: in-memory sample data and a JSON file store."""

from __future__ import annotations

import json
import logging
from datetime import date, time
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from bp_cli.core.config import resolve_store_path
from bp_cli.core.models import Reading

log = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Raised when the reading store cannot be read or written."""


def _sample(
    reading_id: str,
    systolic: int,
    diastolic: int,
    pulse: int,
    day: str,
    clock: str,
    notes: Optional[str] = None,
) -> Reading:
    hour, minute = clock.split(":")
    return Reading(
        id=reading_id,
        systolic=systolic,
        diastolic=diastolic,
        pulse=pulse,
        date=date.fromisoformat(day),
        time=time(int(hour), int(minute)),
        notes=notes,
    )


SAMPLE_READINGS: List[Reading] = [
    _sample("1", 120, 80, 72, "2024-10-01", "08:30", "After breakfast"),
    _sample("2", 125, 82, 75, "2024-09-30", "19:45", "After work"),
    _sample("3", 118, 78, 69, "2024-09-30", "07:15"),
    _sample("4", 122, 81, 73, "2024-09-29", "20:00", "Before bed"),
    _sample("5", 130, 85, 78, "2024-09-29", "08:45"),
    _sample("6", 115, 75, 68, "2024-09-28", "19:30"),
    _sample("7", 128, 84, 76, "2024-09-28", "07:00", "After exercise"),
    _sample("8", 119, 79, 71, "2024-09-27", "14:15"),
    _sample("9", 124, 83, 74, "2024-09-27", "06:45"),
    _sample("10", 117, 77, 67, "2024-09-26", "21:20"),
]


def newest_first(readings: Iterable[Reading]) -> List[Reading]:
    return sorted(readings, key=lambda item: item.taken_at, reverse=True)


class ReadingRepository:
    """Storage interface for readings."""

    def list(self) -> List[Reading]:
        """Return all readings, newest first."""
        raise NotImplementedError

    def insert(self, reading: Reading) -> Reading:
        """Store a reading and return it."""
        raise NotImplementedError


class InMemoryReadingRepository(ReadingRepository):
    """Repository that keeps readings for the life of the process."""

    def __init__(self, readings: Optional[Iterable[Reading]] = None) -> None:
        self._readings: List[Reading] = list(readings or [])

    @classmethod
    def with_sample_data(cls) -> "InMemoryReadingRepository":
        return cls(SAMPLE_READINGS)

    def list(self) -> List[Reading]:
        return newest_first(self._readings)

    def insert(self, reading: Reading) -> Reading:
        self._readings.append(reading)
        return reading


class JsonReadingRepository(ReadingRepository):
    """Repository persisted as a single JSON document."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def _load(self) -> List[Dict[str, Any]]:
        if not self.path.exists():
            return []
        try:
            payload = json.loads(self.path.read_text())
        except json.JSONDecodeError as exc:
            raise StorageError(f"Invalid JSON in reading store {self.path}: {exc}") from exc
        except OSError as exc:
            raise StorageError(f"Cannot read reading store {self.path}: {exc}") from exc

        if not isinstance(payload, dict) or not isinstance(payload.get("readings"), list):
            raise StorageError(f"Reading store {self.path} must contain a 'readings' list")
        return payload["readings"]

    def list(self) -> List[Reading]:
        rows = self._load()
        try:
            readings = [Reading.from_dict(row) for row in rows]
        except (KeyError, TypeError, ValueError) as exc:
            raise StorageError(f"Malformed reading in {self.path}: {exc}") from exc
        return newest_first(readings)

    def insert(self, reading: Reading) -> Reading:
        rows = self._load()
        rows.append(reading.to_dict())
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({"readings": rows}, indent=2) + "\n")
        except OSError as exc:
            raise StorageError(f"Cannot write reading store {self.path}: {exc}") from exc
        log.debug("Stored reading %s in %s", reading.id, self.path)
        return reading


def open_repository(config: Dict[str, Any]) -> ReadingRepository:
    """Build the repository selected by the storage config section."""
    backend = str(config.get("storage", {}).get("backend", "json")).lower()
    if backend == "memory":
        return InMemoryReadingRepository.with_sample_data()
    if backend == "json":
        return JsonReadingRepository(resolve_store_path(config))
    raise StorageError(f"Unknown storage backend '{backend}' (expected json or memory)")
