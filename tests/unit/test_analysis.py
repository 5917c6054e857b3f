from datetime import datetime

from bp_cli.core.analysis import (
    build_dashboard_summary,
    build_history_report,
    category_counts,
    compute_averages,
    filter_readings,
    matches_search,
    trend_at,
    trends,
)


def test_search_matches_notes_case_insensitively(sample_readings) -> None:
    result = filter_readings(sample_readings, search="AFTER")
    assert [reading.id for reading in result] == ["a", "b"]


def test_search_matches_pressure_text(sample_readings) -> None:
    result = filter_readings(sample_readings, search="135/85")
    assert [reading.id for reading in result] == ["c"]


def test_reading_without_notes_still_matches_pressure(reading_factory) -> None:
    reading = reading_factory("x", 128, 84, notes=None)
    assert matches_search(reading, "28/8")
    assert not matches_search(reading, "walk")


def test_empty_search_matches_everything(sample_readings) -> None:
    assert filter_readings(sample_readings) == sample_readings


def test_category_filter(sample_readings) -> None:
    result = filter_readings(sample_readings, category="normal")
    assert [reading.id for reading in result] == ["a", "e"]


def test_date_ranges_relative_to_now(sample_readings, now) -> None:
    def ids(date_range):
        return [reading.id for reading in filter_readings(sample_readings, date_range=date_range, now=now)]

    assert ids("today") == ["a"]
    assert ids("week") == ["a", "b", "c"]
    assert ids("month") == ["a", "b", "c", "d"]
    assert ids("all") == ["a", "b", "c", "d", "e"]


def test_filters_are_a_conjunction(sample_readings, now) -> None:
    result = filter_readings(sample_readings, category="normal", date_range="today", now=now)
    assert [reading.id for reading in result] == ["a"]
    for reading in result:
        assert reading.category == "normal"
        assert reading.date == now.date()


def test_empty_result_is_not_an_error(sample_readings) -> None:
    later = datetime(2025, 1, 1, 12, 0)
    assert filter_readings(sample_readings, category="normal", date_range="today", now=later) == []


def test_filter_is_idempotent(sample_readings, now) -> None:
    first = filter_readings(sample_readings, search="after", category="all", date_range="week", now=now)
    second = filter_readings(sample_readings, search="after", category="all", date_range="week", now=now)
    assert first == second
    assert filter_readings(first, search="after", date_range="week", now=now) == first


def test_trend_pairwise(reading_factory) -> None:
    readings = [
        reading_factory("1", 130, 85),
        reading_factory("2", 120, 80),
        reading_factory("3", 110, 75),
    ]
    assert trends(readings) == ["increasing", "increasing", None]


def test_trend_decreasing_and_equal(reading_factory) -> None:
    readings = [
        reading_factory("1", 110, 70),
        reading_factory("2", 120, 80),
        reading_factory("3", 125, 75),
    ]
    assert trend_at(readings, 0) == "decreasing"
    assert trend_at(readings, 1) is None
    assert trend_at(readings, 2) is None


def test_averages_round_half_up(reading_factory) -> None:
    systolic = [120, 125, 118, 122, 130, 115, 128]
    readings = [reading_factory(str(i), value, 80, pulse=None) for i, value in enumerate(systolic)]
    averages = compute_averages(readings)
    assert averages is not None
    assert averages.systolic == 123
    assert averages.diastolic == 80
    assert averages.pulse is None
    assert averages.count == 7


def test_averages_half_rounds_up(reading_factory) -> None:
    readings = [reading_factory("1", 120, 80, pulse=71), reading_factory("2", 121, 81, pulse=None)]
    averages = compute_averages(readings)
    assert averages.systolic == 121
    assert averages.diastolic == 81
    assert averages.pulse == 71


def test_averages_of_nothing_is_none() -> None:
    assert compute_averages([]) is None


def test_category_counts(sample_readings) -> None:
    assert category_counts(sample_readings) == {"total": 5, "normal": 2, "elevated": 1, "high": 2}


def test_history_report_payload(sample_readings, now) -> None:
    report = build_history_report(sample_readings, date_range="week", now=now)
    assert report["filters"] == {"search": "", "category": "all", "date_range": "week"}
    assert report["stats"] == {"total": 3, "normal": 1, "elevated": 1, "high": 1}
    first = report["readings"][0]
    assert first["id"] == "a"
    assert first["label"] == "Normal"
    assert first["trend"] == "decreasing"
    assert report["readings"][-1]["trend"] is None


def test_dashboard_summary(sample_readings) -> None:
    summary = build_dashboard_summary(sample_readings, recent_count=2, average_window=3)
    assert summary["latest"]["id"] == "a"
    assert [row["id"] for row in summary["recent"]] == ["a", "b"]
    assert summary["averages"] == {"systolic": 126, "diastolic": 80, "pulse": 74, "count": 3}
    assert summary["stats"]["total"] == 5


def test_dashboard_summary_empty() -> None:
    summary = build_dashboard_summary([])
    assert summary["latest"] is None
    assert summary["averages"] is None
    assert summary["recent"] == []
