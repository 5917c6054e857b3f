"""JSON export of history reports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from bp_cli.core.constants import EXPORT_FIELDS


def write_json_report(path: Path, report: Dict[str, Any]) -> Path:
    """Write filters, counts and readings (export columns only) and return path."""
    readings = [{key: row.get(key) for key in EXPORT_FIELDS} for row in report.get("readings", [])]
    document = {
        "filters": report.get("filters", {}),
        "stats": report.get("stats", {}),
        "count": len(readings),
        "readings": readings,
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path
