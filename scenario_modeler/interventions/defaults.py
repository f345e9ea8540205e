"""Default parameters for newly added interventions."""

from typing import Optional

from scenario_modeler.config import InterventionSettings
from scenario_modeler.interventions.models import CarbReductionParams, Intervention


def default_carb_reduction_params(settings: Optional[InterventionSettings] = None) -> CarbReductionParams:
    settings = settings or InterventionSettings()
    return CarbReductionParams(
        meal_time=settings.breakfast_hour,
        reduction_percent=settings.default_reduction_percent,
        spike_duration=settings.default_spike_duration,
    )


def new_carb_reduction(settings: Optional[InterventionSettings] = None) -> Intervention:
    """Enabled carb reduction at breakfast with a fresh id."""
    return Intervention.create(default_carb_reduction_params(settings))


def describe(intervention: Intervention, settings: Optional[InterventionSettings] = None) -> str:
    """One-line summary shown under an intervention card."""
    settings = settings or InterventionSettings()
    params = intervention.parameters

    if isinstance(params, CarbReductionParams):
        meal = next(
            (name for name, hour in settings.meal_times.items() if hour == params.meal_time),
            f"{params.meal_time}:00",
        )
        return (
            f"Reducing carbs at {meal} by {params.reduction_percent:g}% "
            f"for {params.spike_duration} hours"
        )

    return f"{intervention.type.value.replace('_', ' ').capitalize()} (not modelled yet)"
