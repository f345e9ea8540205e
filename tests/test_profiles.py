import dataclasses
import math

import numpy as np
import pytest

from scenario_modeler.config import ScenarioConfig
from scenario_modeler.profiles import BASELINE_PROFILES, CUSTOM_KEY, GlucoseProfile, build_catalog
from scenario_modeler.profiles.catalog import Q4_AVERAGE, Q4_BEST_10, improved_morning


def test_profile_requires_24_values():
    with pytest.raises(ValueError):
        GlucoseProfile((6.0,) * 23)
    with pytest.raises(ValueError):
        GlucoseProfile((6.0,) * 25)


def test_profile_rejects_negative_values():
    values = [6.0] * 24
    values[5] = -0.1
    with pytest.raises(ValueError):
        GlucoseProfile(values)


def test_profile_accepts_implausibly_high_values():
    assert GlucoseProfile([25.0] * 24)[0] == 25.0


def test_nan_becomes_missing():
    values = np.full(24, 6.0)
    values[2] = np.nan
    profile = GlucoseProfile.from_array(values)

    assert profile[2] is None
    assert profile.has_missing
    assert profile.missing_hours == (2,)
    assert math.isnan(profile.to_array()[2])


def test_profile_is_immutable(example_profile):
    with pytest.raises(dataclasses.FrozenInstanceError):
        example_profile.values = (1.0,) * 24


def test_with_values_keeps_label(example_profile):
    other = example_profile.with_values([5.0] * 24)
    assert other.label == example_profile.label
    assert other is not example_profile
    assert example_profile[8] == 9.5


def test_catalog_profiles_are_complete():
    assert set(BASELINE_PROFILES) == {
        'example', 'q4_average', 'q4_best_10', 'q4_worst_10', 'q4_improved_morning'
    }
    for profile in BASELINE_PROFILES.values():
        assert len(profile) == 24
        assert not profile.has_missing
        assert profile.label


def test_improved_morning_takes_best_morning_hours():
    profile = improved_morning(Q4_AVERAGE, Q4_BEST_10)
    assert profile[4] == Q4_AVERAGE[4]
    assert profile[5] == Q4_BEST_10[5]
    assert profile[11] == Q4_BEST_10[11]
    assert profile[12] == Q4_AVERAGE[12]


def test_build_catalog_without_custom():
    assert CUSTOM_KEY not in build_catalog(ScenarioConfig())


def test_build_catalog_with_custom_baseline():
    config = ScenarioConfig()
    config.app.custom_baseline = [6.5] * 24

    catalog = build_catalog(config)
    assert catalog[CUSTOM_KEY].values == (6.5,) * 24
    assert 'example' in catalog


def test_build_catalog_rejects_bad_custom_baseline():
    config = ScenarioConfig()
    config.app.custom_baseline = [6.5] * 10
    with pytest.raises(ValueError):
        build_catalog(config)
