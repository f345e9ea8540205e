from datetime import datetime, timedelta

import pytest

from scenario_modeler.interventions import CarbReductionParams, Intervention, InterventionType
from scenario_modeler.loaders import readings_from_records
from scenario_modeler.profiles import DEFAULT_BASELINE, GlucoseProfile


@pytest.fixture
def example_profile():
    return GlucoseProfile(DEFAULT_BASELINE, label="Example")


@pytest.fixture
def make_carb_reduction():
    counter = iter(range(1000))

    def _make(meal_time, reduction_percent, spike_duration=3, enabled=True):
        return Intervention(
            id=f"carb_{next(counter)}",
            type=InterventionType.CARB_REDUCTION,
            parameters=CarbReductionParams(meal_time, reduction_percent, spike_duration),
            enabled=enabled,
        )

    return _make


@pytest.fixture
def daily_readings():
    """One reading per day at 08:00 for 93 days, day i reading 5.0 + i/10."""
    start = datetime(2025, 10, 1, 8, 0)
    records = [
        (start + timedelta(days=i), 5.0 + i / 10)
        for i in range(93)
    ]
    return readings_from_records(records)
