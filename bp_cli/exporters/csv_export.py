"""CSV export of readings."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Dict, Iterable

from bp_cli.core.constants import EXPORT_FIELDS


def write_csv(path: Path, rows: Iterable[Dict[str, Any]]) -> Path:
    """Write reading rows with a fixed column order and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=EXPORT_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow({key: row.get(key) for key in EXPORT_FIELDS})
    return path
