"""Formatting helpers used by exports and console output."""

from __future__ import annotations

from typing import Any, Dict, Optional

from bp_cli.core.classify import category_label, category_style
from bp_cli.core.constants import TREND_SYMBOLS


def format_pressure(systolic: int, diastolic: int) -> str:
    return f"{systolic}/{diastolic} mmHg"


def format_pulse(pulse: Optional[int]) -> str:
    """Format pulse in BPM, or a dash when not recorded."""
    if pulse is None:
        return "-"
    return f"{pulse} BPM"


def format_trend(trend: Optional[str]) -> str:
    return TREND_SYMBOLS.get(trend or "", "")


def styled_category(category: str) -> str:
    """Rich markup for a category badge."""
    return f"[{category_style(category)}]{category_label(category)}[/]"


def reading_line(row: Dict[str, Any]) -> str:
    """Tab-separated line for --plain output."""
    return "\t".join(
        [
            str(row.get("date") or ""),
            str(row.get("time") or ""),
            f"{row['systolic']}/{row['diastolic']}",
            str(row["pulse"]) if row.get("pulse") is not None else "-",
            str(row.get("category") or ""),
            str(row.get("trend") or "-"),
            str(row.get("notes") or "-"),
        ]
    )
