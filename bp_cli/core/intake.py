"""Validation of user-entered readings."""

from __future__ import annotations

import logging
import re
import uuid
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Callable, Dict, Optional, Tuple

from bp_cli.core.constants import INTAKE_BOUNDS
from bp_cli.core.models import Reading
from bp_cli.utils.date_ranges import parse_date, parse_time

log = logging.getLogger(__name__)

_PAIR_RE = re.compile(r"^\s*(\d+)\s*/\s*(\d+)\s*$")


class ValidationError(ValueError):
    """Raised when a candidate reading fails intake checks."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


@dataclass(frozen=True)
class ReadingInput:
    """A candidate reading that passed validation."""

    systolic: int
    diastolic: int
    pulse: Optional[int]
    date: date
    time: time
    notes: Optional[str]


def new_reading_id() -> str:
    return uuid.uuid4().hex[:12]


def _blank(value: Any) -> bool:
    return value is None or str(value).strip() == ""


def _bounded_int(raw: Dict[str, Any], field: str, required: bool) -> Optional[int]:
    value = raw.get(field)
    name = field.capitalize()
    if _blank(value):
        if required:
            raise ValidationError(field, f"{name} is required")
        return None

    try:
        number = int(str(value).strip())
    except ValueError:
        raise ValidationError(field, f"{name} must be an integer")

    low, high = INTAKE_BOUNDS[field]
    if number < low or number > high:
        raise ValidationError(field, f"{name} must be between {low} and {high}")
    return number


def validate_reading_input(raw: Dict[str, Any], now: datetime) -> ReadingInput:
    """Validate a raw intake record; date and time default to ``now``."""
    systolic = _bounded_int(raw, "systolic", required=True)
    diastolic = _bounded_int(raw, "diastolic", required=True)
    pulse = _bounded_int(raw, "pulse", required=False)

    raw_date = raw.get("date")
    try:
        day = now.date() if _blank(raw_date) else parse_date(str(raw_date).strip())
    except ValueError:
        raise ValidationError("date", "Date must be in YYYY-MM-DD format")

    raw_time = raw.get("time")
    try:
        clock = (
            now.time().replace(second=0, microsecond=0)
            if _blank(raw_time)
            else parse_time(str(raw_time).strip())
        )
    except ValueError:
        raise ValidationError("time", "Time must be in HH:MM 24-hour format")

    notes = raw.get("notes")
    notes_text = str(notes).strip() if not _blank(notes) else None

    return ReadingInput(
        systolic=systolic,  # type: ignore[arg-type]
        diastolic=diastolic,  # type: ignore[arg-type]
        pulse=pulse,
        date=day,
        time=clock,
        notes=notes_text,
    )


def build_reading(
    raw: Dict[str, Any],
    now: datetime,
    id_factory: Callable[[], str] = new_reading_id,
) -> Reading:
    """Validate raw input and produce a new Reading."""
    checked = validate_reading_input(raw, now)
    reading = Reading(
        id=id_factory(),
        systolic=checked.systolic,
        diastolic=checked.diastolic,
        pulse=checked.pulse,
        date=checked.date,
        time=checked.time,
        notes=checked.notes,
    )
    log.debug("Accepted reading %s (%s)", reading.pressure, reading.category)
    return reading


def parse_pressure_pair(value: str) -> Tuple[str, str]:
    """Split shorthand like '120/80' into systolic and diastolic strings."""
    match = _PAIR_RE.match(value)
    if not match:
        raise ValidationError("pressure", "Pressure must look like SYSTOLIC/DIASTOLIC, e.g. 120/80")
    return match.group(1), match.group(2)
