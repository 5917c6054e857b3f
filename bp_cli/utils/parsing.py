"""Parsing helpers for bulk reading input."""

from __future__ import annotations

import json
from datetime import date, time
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


def _normalize_record(record: Dict[str, Any]) -> Dict[str, Any]:
    """Turn YAML-native scalars back into the strings intake expects."""
    normalized = dict(record)

    day = normalized.get("date")
    if isinstance(day, date):
        normalized["date"] = day.isoformat()

    clock = normalized.get("time")
    if isinstance(clock, time):
        normalized["time"] = clock.strftime("%H:%M")
    elif isinstance(clock, int) and not isinstance(clock, bool):
        # YAML 1.1 reads unquoted 19:45 as base-60 minutes.
        hours, minutes = divmod(clock, 60)
        normalized["time"] = f"{hours:02d}:{minutes:02d}"

    return normalized


def _records(raw_data: Any) -> List[Dict[str, Any]]:
    if isinstance(raw_data, dict) and isinstance(raw_data.get("readings"), list):
        raw_data = raw_data["readings"]
    if isinstance(raw_data, dict):
        return [_normalize_record(raw_data)]
    if isinstance(raw_data, list):
        return [_normalize_record(item) for item in raw_data if isinstance(item, dict)]
    return []


def load_reading_input(
    file_path: Optional[Path],
    read_stdin: bool,
    stdin_text: str = "",
) -> List[Dict[str, Any]]:
    """Load reading record(s) from a JSON/YAML file or stdin text."""
    raw_data: Any
    if file_path:
        text = file_path.read_text()
        if file_path.suffix.lower() in {".yaml", ".yml"}:
            raw_data = yaml.safe_load(text)
        else:
            raw_data = json.loads(text)
    elif read_stdin:
        text = stdin_text.strip()
        if not text:
            return []
        try:
            raw_data = json.loads(text)
        except json.JSONDecodeError:
            raw_data = yaml.safe_load(text)
    else:
        return []

    return _records(raw_data)
