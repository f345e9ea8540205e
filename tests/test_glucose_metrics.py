import numpy as np
import pytest

from scenario_modeler.analyzers.glucose import (
    GlucoseAnalyzer,
    calculate_a1c,
    calculate_gmi,
    calculate_metrics,
)
from scenario_modeler.profiles import BASELINE_PROFILES, GlucoseProfile
from scenario_modeler.utils.statistics import calculate_cv, calculate_std


def test_example_profile_metrics(example_profile):
    m = calculate_metrics(example_profile)

    assert m.mean == pytest.approx(181.9 / 24)
    assert m.mean == pytest.approx(7.6, abs=0.05)
    assert m.estimated_a1c == pytest.approx((m.mean * 18.05 + 46.7) / 28.7)
    assert m.gmi == pytest.approx(3.31 + 0.4314 * m.mean)
    # Only 10.2 at 09:00 is above 10.0
    assert m.time_above_range == pytest.approx(100 / 24)
    assert m.time_below_range == 0
    assert m.time_in_range == pytest.approx(2300 / 24)
    assert m.hours_counted == 24


def test_a1c_and_gmi_formulas():
    assert calculate_a1c(7.0) == pytest.approx((7.0 * 18.05 + 46.7) / 28.7)
    assert calculate_gmi(7.0) == pytest.approx(3.31 + 0.4314 * 7.0)


def test_range_bounds_are_inclusive():
    values = [3.9] * 12 + [10.0] * 12
    m = calculate_metrics(values)
    assert m.time_in_range == 100
    assert m.time_below_range == 0
    assert m.time_above_range == 0


def test_below_and_above():
    values = [3.8] * 6 + [10.1] * 6 + [6.0] * 12
    m = calculate_metrics(values)
    assert m.time_below_range == 25
    assert m.time_above_range == 25
    assert m.time_in_range == 50


def test_empty_input_is_all_zero():
    m = calculate_metrics([])
    assert m.mean == 0
    assert m.cv == 0
    assert m.time_in_range == 0
    assert m.hours_counted == 0
    assert m.estimated_a1c == pytest.approx(46.7 / 28.7)


def test_zero_mean_cv_is_zero():
    assert calculate_cv([0.0] * 24) == 0


def test_cv_uses_population_std():
    values = [2, 4, 4, 4, 5, 5, 7, 9]
    assert calculate_std(values) == pytest.approx(2.0)
    assert calculate_cv(values) == pytest.approx(40.0)


@pytest.mark.parametrize("key", list(BASELINE_PROFILES))
def test_range_shares_sum_to_100(key):
    m = calculate_metrics(BASELINE_PROFILES[key])
    for share in (m.time_in_range, m.time_below_range, m.time_above_range):
        assert 0 <= share <= 100
    assert m.time_in_range + m.time_below_range + m.time_above_range == pytest.approx(100)
    assert m.cv >= 0


def test_missing_hours_are_excluded():
    values = [None] * 12 + [5.0] * 6 + [11.0] * 6
    m = calculate_metrics(GlucoseProfile(values))

    assert m.hours_counted == 12
    assert m.mean == pytest.approx(8.0)
    assert m.time_in_range == 50
    assert m.time_above_range == 50


def test_analyzer_accepts_numpy_with_nan():
    values = np.full(24, 6.0)
    values[3] = np.nan
    analyzer = GlucoseAnalyzer(values)
    assert analyzer.metrics.hours_counted == 23
    assert analyzer.metrics.mean == pytest.approx(6.0)
    assert analyzer.metrics is analyzer.metrics


def test_to_dict_rounds():
    d = calculate_metrics([7.0] * 24).to_dict()
    assert d['mean_mmol_l'] == 7.0
    assert d['time_in_range_pct'] == 100
    assert d['cv_percent'] == 0
