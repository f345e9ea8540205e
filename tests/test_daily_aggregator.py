from datetime import date, datetime

import pytest

from scenario_modeler.analyzers.daily import (
    DailyAggregator,
    cohort_size,
    hourly_profile,
    rank_days,
)
from scenario_modeler.loaders import readings_from_records


def test_groups_by_calendar_date():
    readings = readings_from_records([
        (datetime(2025, 10, 1, 8, 0), 6.0),
        (datetime(2025, 10, 1, 14, 0), 9.0),
        (datetime(2025, 10, 2, 8, 0), 7.0),
    ])
    days = DailyAggregator(readings).daily_aggregates()

    assert [d.date for d in days] == [date(2025, 10, 1), date(2025, 10, 2)]
    assert days[0].mean == pytest.approx(7.5)
    assert days[0].readings_count == 2
    assert days[1].mean == pytest.approx(7.0)


def test_date_range_is_inclusive(daily_readings):
    aggregator = DailyAggregator(daily_readings)
    days = aggregator.daily_aggregates(date(2025, 10, 5), date(2025, 10, 7))
    assert [d.date.day for d in days] == [5, 6, 7]


def test_open_ended_range(daily_readings):
    days = DailyAggregator(daily_readings).daily_aggregates(start=date(2025, 12, 31))
    assert [d.date for d in days] == [date(2025, 12, 31), date(2026, 1, 1)]


@pytest.mark.parametrize("num_days,fraction,expected", [
    (93, 0.1, 10),
    (10, 0.1, 1),
    (5, 0.1, 1),
    (0, 0.1, 0),
    (7, 0.5, 4),
])
def test_cohort_size(num_days, fraction, expected):
    assert cohort_size(num_days, fraction) == expected


def test_best_and_worst_cohorts(daily_readings):
    result = DailyAggregator(daily_readings).run()

    assert result.num_days == 93
    assert len(result.best_days) == 10
    assert len(result.worst_days) == 10
    # Means rise with the date, so the best days are the first ten
    assert [d.date.day for d in result.best_days] == list(range(1, 11))
    assert result.worst_days[-1].date == date(2026, 1, 1)
    assert result.worst_days[0].mean < result.worst_days[-1].mean


def test_cohorts_may_overlap():
    readings = readings_from_records([
        (datetime(2025, 10, day, 8, 0), float(day)) for day in (1, 2, 3)
    ])
    cohorts = DailyAggregator(readings).cohorts(DailyAggregator(readings).daily_aggregates(), 0.6)
    assert [d.date.day for d in cohorts['best']] == [1, 2]
    assert [d.date.day for d in cohorts['worst']] == [2, 3]


def test_fraction_above_one_keeps_cohorts_equal():
    readings = readings_from_records([
        (datetime(2025, 10, day, 8, 0), float(day)) for day in range(1, 11)
    ])
    result = DailyAggregator(readings).run(fraction=1.5)

    assert len(result.best_days) == 10
    assert len(result.worst_days) == 10
    assert result.worst_days == result.best_days


def test_ties_ranked_by_date():
    readings = readings_from_records([
        (datetime(2025, 10, 3, 8, 0), 6.0),
        (datetime(2025, 10, 1, 8, 0), 6.0),
        (datetime(2025, 10, 2, 8, 0), 5.0),
    ])
    ranked = rank_days(DailyAggregator(readings).daily_aggregates())
    assert [d.date.day for d in ranked] == [2, 1, 3]


def test_hourly_profile_marks_missing_hours():
    readings = readings_from_records([
        (datetime(2025, 10, 1, 8, 10), 6.0),
        (datetime(2025, 10, 1, 8, 40), 8.0),
        (datetime(2025, 10, 2, 8, 5), 10.0),
        (datetime(2025, 10, 2, 9, 0), 5.0),
    ])
    days = DailyAggregator(readings).daily_aggregates()
    profile = hourly_profile(days, label="All")

    # Every reading in the hour counts, not the per-day means
    assert profile[8] == pytest.approx(8.0)
    assert profile[9] == pytest.approx(5.0)
    assert profile[0] is None
    assert profile.missing_hours == tuple(h for h in range(24) if h not in (8, 9))
    assert profile.label == "All"


def test_empty_input():
    result = DailyAggregator(readings_from_records([])).run()

    assert result.num_days == 0
    assert result.best_days == []
    assert result.worst_days == []
    assert result.date_range is None
    assert all(v is None for v in result.profiles['average'].values)


def test_run_profiles_and_counts():
    readings = readings_from_records([
        (datetime(2025, 9, 30, 8, 0), 20.0),
        (datetime(2025, 10, 1, 8, 0), 6.0),
        (datetime(2025, 10, 2, 8, 0), 8.0),
    ])
    result = DailyAggregator(readings).run(start=date(2025, 10, 1), fraction=0.5)

    assert result.total_readings == 3
    assert result.filtered_readings == 2
    assert result.profiles['average'][8] == pytest.approx(7.0)
    assert result.profiles['best'][8] == pytest.approx(6.0)
    assert result.profiles['worst'][8] == pytest.approx(8.0)
    assert result.profiles['best'].label == "Best 50% Days"
