"""Lightweight data models used across commands."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class BloodPressureClassification:
    """Category, label and display style for a systolic/diastolic pair."""

    category: str
    label: str
    style: str


@dataclass(frozen=True)
class Reading:
    """One recorded blood-pressure/pulse measurement.

    The category is never stored: it is derived from the pressures every time
    it is read, so a reading cannot disagree with its own values.
    """

    id: str
    systolic: int
    diastolic: int
    date: date
    time: time
    pulse: Optional[int] = None
    notes: Optional[str] = None

    @property
    def classification(self) -> BloodPressureClassification:
        from bp_cli.core.classify import classify_blood_pressure

        return classify_blood_pressure(self.systolic, self.diastolic)

    @property
    def category(self) -> str:
        return self.classification.category

    @property
    def pressure(self) -> str:
        return f"{self.systolic}/{self.diastolic}"

    @property
    def pressure_sum(self) -> int:
        return self.systolic + self.diastolic

    @property
    def taken_at(self) -> datetime:
        return datetime.combine(self.date, self.time)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "systolic": self.systolic,
            "diastolic": self.diastolic,
            "pulse": self.pulse,
            "date": self.date.isoformat(),
            "time": self.time.strftime("%H:%M"),
            "notes": self.notes,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Reading":
        """Rebuild a stored reading; any stored category is ignored."""
        pulse = data.get("pulse")
        return cls(
            id=str(data["id"]),
            systolic=int(data["systolic"]),
            diastolic=int(data["diastolic"]),
            pulse=int(pulse) if pulse is not None else None,
            date=date.fromisoformat(str(data["date"])),
            time=datetime.strptime(str(data["time"]), "%H:%M").time(),
            notes=data.get("notes") or None,
        )


@dataclass(frozen=True)
class Averages:
    """Rounded mean values over a set of readings."""

    systolic: int
    diastolic: int
    pulse: Optional[int]
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "systolic": self.systolic,
            "diastolic": self.diastolic,
            "pulse": self.pulse,
            "count": self.count,
        }
