"""Blood-pressure classification."""

from __future__ import annotations

from typing import List, Tuple

from bp_cli.core.constants import (
    CATEGORY_CRISIS,
    CATEGORY_ELEVATED,
    CATEGORY_HIGH_1,
    CATEGORY_HIGH_2,
    CATEGORY_LABELS,
    CATEGORY_NORMAL,
    CATEGORY_REFERENCE,
    CATEGORY_STYLES,
    CATEGORY_UNKNOWN,
)
from bp_cli.core.models import BloodPressureClassification


def classify_category(systolic: int, diastolic: int) -> str:
    """Map a systolic/diastolic pair to its category; first matching rule wins.

    Crisis is checked before the stage rules so that either value at or above
    its crisis threshold always yields crisis.
    """
    if systolic < 120 and diastolic < 80:
        return CATEGORY_NORMAL
    if systolic < 130 and diastolic < 80:
        return CATEGORY_ELEVATED
    if systolic >= 180 or diastolic >= 120:
        return CATEGORY_CRISIS
    if 130 <= systolic <= 139 or 80 <= diastolic <= 89:
        return CATEGORY_HIGH_1
    if 140 <= systolic <= 179 or 90 <= diastolic <= 119:
        return CATEGORY_HIGH_2
    return CATEGORY_UNKNOWN


def category_label(category: str) -> str:
    return CATEGORY_LABELS.get(category, CATEGORY_LABELS[CATEGORY_UNKNOWN])


def category_style(category: str) -> str:
    return CATEGORY_STYLES.get(category, CATEGORY_STYLES[CATEGORY_UNKNOWN])


def classify_blood_pressure(systolic: int, diastolic: int) -> BloodPressureClassification:
    """Return category, label and style for a pressure pair."""
    category = classify_category(systolic, diastolic)
    return BloodPressureClassification(
        category=category,
        label=category_label(category),
        style=category_style(category),
    )


def category_reference() -> List[Tuple[str, str, str]]:
    """Rows of (label, range, style) describing each clinical category."""
    return [
        (category_label(category), ranges, category_style(category))
        for category, ranges in CATEGORY_REFERENCE
    ]
