"""Utility functions for glucose profile analysis."""

from scenario_modeler.utils.statistics import (
    calculate_mean,
    calculate_std,
    calculate_cv,
    calculate_time_in_range,
    calculate_time_below,
    calculate_time_above,
)
from scenario_modeler.utils.colors import (
    get_glucose_color,
    BASELINE_COLOR,
    COMPARISON_COLOR,
    SCENARIO_COLOR,
)

__all__ = [
    "calculate_mean",
    "calculate_std",
    "calculate_cv",
    "calculate_time_in_range",
    "calculate_time_below",
    "calculate_time_above",
    "get_glucose_color",
    "BASELINE_COLOR",
    "COMPARISON_COLOR",
    "SCENARIO_COLOR",
]
