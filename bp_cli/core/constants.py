"""Static constants and mappings for bp-cli."""

from __future__ import annotations

CATEGORY_NORMAL = "normal"
CATEGORY_ELEVATED = "elevated"
CATEGORY_HIGH_1 = "high-stage-1"
CATEGORY_HIGH_2 = "high-stage-2"
CATEGORY_CRISIS = "crisis"
CATEGORY_UNKNOWN = "unknown"

CATEGORIES = (
    CATEGORY_NORMAL,
    CATEGORY_ELEVATED,
    CATEGORY_HIGH_1,
    CATEGORY_HIGH_2,
    CATEGORY_CRISIS,
    CATEGORY_UNKNOWN,
)

# Categories counted as "high" in history summaries.
HIGH_CATEGORIES = {CATEGORY_HIGH_1, CATEGORY_HIGH_2, CATEGORY_CRISIS}

CATEGORY_LABELS = {
    CATEGORY_NORMAL: "Normal",
    CATEGORY_ELEVATED: "Elevated",
    CATEGORY_HIGH_1: "High Stage 1",
    CATEGORY_HIGH_2: "High Stage 2",
    CATEGORY_CRISIS: "Hypertensive Crisis",
    CATEGORY_UNKNOWN: "Unknown",
}

CATEGORY_STYLES = {
    CATEGORY_NORMAL: "green",
    CATEGORY_ELEVATED: "yellow",
    CATEGORY_HIGH_1: "dark_orange",
    CATEGORY_HIGH_2: "red",
    CATEGORY_CRISIS: "bold red",
    CATEGORY_UNKNOWN: "dim",
}

CATEGORY_REFERENCE = [
    (CATEGORY_NORMAL, "<120 / <80"),
    (CATEGORY_ELEVATED, "120-129 / <80"),
    (CATEGORY_HIGH_1, "130-139 / 80-89"),
    (CATEGORY_HIGH_2, ">=140 / >=90"),
    (CATEGORY_CRISIS, ">=180 / >=120"),
]

# Inclusive intake bounds per field.
INTAKE_BOUNDS = {
    "systolic": (70, 200),
    "diastolic": (40, 130),
    "pulse": (40, 200),
}

DATE_RANGES = ("all", "today", "week", "month")
DATE_RANGE_DAYS = {"week": 7, "month": 30}

TREND_UP = "increasing"
TREND_DOWN = "decreasing"
TREND_SYMBOLS = {TREND_UP: "↑", TREND_DOWN: "↓"}

PLACEHOLDER_VIEWS = {
    "calendar": ("Calendar", "Readings laid out on a calendar."),
    "profile": ("Profile", "Personal details and blood-pressure goals."),
    "settings": ("Settings", "Application preferences."),
    "help": ("Help", "Guides and frequently asked questions."),
}

# Column order shared by CSV and JSON exports.
EXPORT_FIELDS = [
    "id",
    "date",
    "time",
    "systolic",
    "diastolic",
    "pulse",
    "category",
    "label",
    "trend",
    "notes",
]
