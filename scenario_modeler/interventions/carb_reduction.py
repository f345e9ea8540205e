"""
Carbohydrate reduction evaluator.

Shrinks the post-meal spike proportionally. The spike at each hour of the
meal window is measured against the pre-meal value (the hour before the
meal, or the meal hour itself when the meal is at midnight):

    spike = profile[hour] - pre_meal
    new   = profile[hour] - spike × reduction_percent / 100

Hours at or below the pre-meal value are left alone, so the intervention
only ever lowers values. Parameters are not range-checked and hours may
arrive as floats (from YAML or JSON). A reduction above 100% extrapolates
the same line, floored at zero.
"""

from scenario_modeler.config import HOURS_PER_DAY
from scenario_modeler.interventions.models import CarbReductionParams
from scenario_modeler.profiles.profile import GlucoseProfile


def apply_carb_reduction(profile: GlucoseProfile, params: CarbReductionParams) -> GlucoseProfile:
    """Apply a carb reduction to a profile.

    Args:
        profile: Any 24-hour profile (not necessarily the baseline).
        params: Meal hour, reduction percentage and spike duration.

    Returns:
        New profile; the input is not modified.
    """
    meal_time = int(params.meal_time) % HOURS_PER_DAY
    pre_meal_hour = meal_time - 1 if meal_time > 0 else 0
    pre_meal_value = profile[pre_meal_hour]

    modified = list(profile.values)

    if pre_meal_value is None:
        return profile.with_values(modified)

    for offset in range(int(params.spike_duration)):
        hour = (meal_time + offset) % HOURS_PER_DAY
        value = profile[hour]
        if value is None:
            continue

        spike = value - pre_meal_value
        if spike > 0:
            # Only reachable past 100%: concentrations stop at zero
            modified[hour] = max(0.0, value - spike * (params.reduction_percent / 100))

    return profile.with_values(modified)
