"""Date parsing and relative date-range helpers."""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import Optional

import typer

from bp_cli.core.constants import DATE_RANGE_DAYS, DATE_RANGES

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^\d{1,2}:\d{2}$")


def validate_date_range(value: str) -> str:
    """Check a --range value, raising a usage error for unknown names."""
    if value not in DATE_RANGES:
        raise typer.BadParameter(f"range must be one of: {', '.join(DATE_RANGES)}")
    return value


def parse_date(value: str) -> date:
    """Parse YYYY-MM-DD date string."""
    if not _DATE_RE.match(value):
        raise ValueError(f"Invalid date '{value}'")
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_time(value: str) -> time:
    """Parse 24-hour HH:MM clock string."""
    if not _TIME_RE.match(value):
        raise ValueError(f"Invalid time '{value}'")
    return datetime.strptime(value, "%H:%M").time()


def range_start(date_range: str, now: datetime) -> Optional[date]:
    """First calendar day included by a relative range, or None for 'all'."""
    if date_range == "all":
        return None
    if date_range == "today":
        return now.date()
    if date_range in DATE_RANGE_DAYS:
        return (now - timedelta(days=DATE_RANGE_DAYS[date_range])).date()
    raise ValueError(f"Unknown date range '{date_range}'")


def in_date_range(day: date, date_range: str, now: datetime) -> bool:
    """Check whether a calendar day falls inside a relative range ending now."""
    start = range_start(date_range, now)
    if start is None:
        return True
    if date_range == "today":
        return day == start
    return day >= start
