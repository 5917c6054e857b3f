"""Filtering, trend and summary logic for reading history."""

from __future__ import annotations

from collections import Counter
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, List, Optional, Sequence

from bp_cli.core.constants import (
    CATEGORY_ELEVATED,
    CATEGORY_NORMAL,
    HIGH_CATEGORIES,
    TREND_DOWN,
    TREND_UP,
)
from bp_cli.core.models import Averages, Reading
from bp_cli.utils.date_ranges import in_date_range


def matches_search(reading: Reading, term: str) -> bool:
    """Case-insensitive match on notes, or substring of the 'S/D' pressure text."""
    notes_match = reading.notes is not None and term.lower() in reading.notes.lower()
    return notes_match or term in reading.pressure


def matches_category(reading: Reading, category: str) -> bool:
    return category == "all" or reading.category == category


def filter_readings(
    readings: Sequence[Reading],
    search: str = "",
    category: str = "all",
    date_range: str = "all",
    now: Optional[datetime] = None,
) -> List[Reading]:
    """Apply search, category and date-range filters, keeping input order."""
    reference = now or datetime.now()
    return [
        reading
        for reading in readings
        if matches_search(reading, search)
        and matches_category(reading, category)
        and in_date_range(reading.date, date_range, reference)
    ]


def trend_at(readings: Sequence[Reading], index: int) -> Optional[str]:
    """Compare a reading with the next older one (readings are newest first)."""
    if index >= len(readings) - 1:
        return None
    current = readings[index].pressure_sum
    previous = readings[index + 1].pressure_sum
    if current > previous:
        return TREND_UP
    if current < previous:
        return TREND_DOWN
    return None


def trends(readings: Sequence[Reading]) -> List[Optional[str]]:
    return [trend_at(readings, index) for index in range(len(readings))]


def _round_half_up(total: int, count: int) -> int:
    return int((Decimal(total) / Decimal(count)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_averages(readings: Iterable[Reading]) -> Optional[Averages]:
    """Mean systolic/diastolic/pulse rounded half-up; None when there is nothing to average."""
    rows = list(readings)
    if not rows:
        return None

    pulses = [reading.pulse for reading in rows if reading.pulse is not None]
    return Averages(
        systolic=_round_half_up(sum(reading.systolic for reading in rows), len(rows)),
        diastolic=_round_half_up(sum(reading.diastolic for reading in rows), len(rows)),
        pulse=_round_half_up(sum(pulses), len(pulses)) if pulses else None,
        count=len(rows),
    )


def category_counts(readings: Iterable[Reading]) -> Dict[str, int]:
    """Count readings as total/normal/elevated/high."""
    counter = Counter(reading.category for reading in readings)
    return {
        "total": sum(counter.values()),
        "normal": counter[CATEGORY_NORMAL],
        "elevated": counter[CATEGORY_ELEVATED],
        "high": sum(counter[category] for category in HIGH_CATEGORIES),
    }


def reading_row(reading: Reading, trend: Optional[str] = None) -> Dict[str, Any]:
    row = reading.to_dict()
    row["label"] = reading.classification.label
    row["trend"] = trend
    return row


def build_history_report(
    readings: Sequence[Reading],
    search: str = "",
    category: str = "all",
    date_range: str = "all",
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Filter readings and attach trend and category counts."""
    filtered = filter_readings(
        readings,
        search=search,
        category=category,
        date_range=date_range,
        now=now,
    )
    return {
        "filters": {"search": search, "category": category, "date_range": date_range},
        "stats": category_counts(filtered),
        "readings": [
            reading_row(reading, trend)
            for reading, trend in zip(filtered, trends(filtered))
        ],
    }


def build_dashboard_summary(
    readings: Sequence[Reading],
    recent_count: int = 5,
    average_window: int = 7,
) -> Dict[str, Any]:
    """Latest reading, rolling averages and recent readings for the overview."""
    latest = readings[0] if readings else None
    averages = compute_averages(readings[: max(average_window, 0)])
    return {
        "latest": reading_row(latest) if latest else None,
        "averages": averages.to_dict() if averages else None,
        "average_window": average_window,
        "recent": [reading_row(reading) for reading in readings[: max(recent_count, 0)]],
        "stats": category_counts(readings),
    }
