"""
Scenario composition.

Enabled interventions are applied in list order, each one receiving the
previous one's output. Kinds without an evaluator pass the profile through.
"""

from functools import reduce
from typing import Callable, Dict, Iterable

from scenario_modeler.interventions.carb_reduction import apply_carb_reduction
from scenario_modeler.interventions.models import Intervention, InterventionType
from scenario_modeler.profiles.profile import GlucoseProfile

SCENARIO_LABEL = "Scenario"

Evaluator = Callable[[GlucoseProfile, object], GlucoseProfile]


def _identity(profile: GlucoseProfile, params) -> GlucoseProfile:
    return profile


EVALUATORS: Dict[InterventionType, Evaluator] = {
    InterventionType.CARB_REDUCTION: apply_carb_reduction,
    # No evaluators yet
    InterventionType.BOLUS_TIMING: _identity,
    InterventionType.BASAL_ADJUSTMENT: _identity,
    InterventionType.MEAL_SKIP: _identity,
    InterventionType.EXERCISE: _identity,
}


def get_evaluator(kind: InterventionType) -> Evaluator:
    return EVALUATORS.get(kind, _identity)


def apply_intervention(profile: GlucoseProfile, intervention: Intervention) -> GlucoseProfile:
    """Apply a single intervention, ignoring its enabled flag."""
    return get_evaluator(intervention.type)(profile, intervention.parameters)


def compute_scenario(
    baseline: GlucoseProfile,
    interventions: Iterable[Intervention],
) -> GlucoseProfile:
    """Fold the enabled interventions over the baseline.

    Args:
        baseline: Starting profile.
        interventions: Ordered interventions; disabled ones are skipped.

    Returns:
        Scenario profile labelled "Scenario".
    """
    enabled = [intervention for intervention in interventions if intervention.enabled]
    scenario = reduce(apply_intervention, enabled, baseline)
    return scenario.relabel(SCENARIO_LABEL)
