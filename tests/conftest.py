from __future__ import annotations

import json
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, List

import pytest
from typer.testing import CliRunner

from bp_cli.core.models import Reading


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ("BP_CONFIG_FILE", "BP_STORE_FILE", "BP_OUTPUT_DIR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("BP_DATA_DIR", str(tmp_path / "data"))


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def now() -> datetime:
    return datetime(2024, 10, 1, 9, 15, 42)


def make_reading(
    reading_id: str,
    systolic: int,
    diastolic: int,
    day: str = "2024-10-01",
    clock: str = "08:00",
    pulse: Any = 70,
    notes: Any = None,
) -> Reading:
    return Reading(
        id=reading_id,
        systolic=systolic,
        diastolic=diastolic,
        pulse=pulse,
        date=date.fromisoformat(day),
        time=time.fromisoformat(clock),
        notes=notes,
    )


@pytest.fixture()
def reading_factory():
    return make_reading


@pytest.fixture()
def sample_readings() -> List[Reading]:
    """Newest first, spread over several days before 2024-10-01."""
    return [
        make_reading("a", 118, 76, "2024-10-01", "08:30", 72, "After breakfast"),
        make_reading("b", 125, 78, "2024-09-30", "19:45", 75, "After work"),
        make_reading("c", 135, 85, "2024-09-28", "07:15", None),
        make_reading("d", 145, 92, "2024-09-20", "20:00", 80, "Stressful day"),
        make_reading("e", 112, 70, "2024-08-15", "08:45", 66),
    ]


@pytest.fixture()
def write_config(tmp_path: Path):
    """Write a TOML config pointing storage and exports into tmp_path."""

    def _write(backend: str = "json", extra: str = "") -> Path:
        path = tmp_path / "config.toml"
        path.write_text(
            "\n".join(
                [
                    "[storage]",
                    f'backend = "{backend}"',
                    f'path = "{(tmp_path / "readings.json").as_posix()}"',
                    "",
                    "[submission]",
                    "delay_seconds = 0",
                    "",
                    "[export]",
                    f'default_directory = "{(tmp_path / "export").as_posix()}"',
                    "",
                    extra.strip(),
                ]
            )
            + "\n"
        )
        return path

    return _write


@pytest.fixture()
def write_temp_json(tmp_path: Path):
    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, indent=2) + "\n")
        return path

    return _write
