"""Intervention model, evaluators and scenario composition."""

from scenario_modeler.interventions.models import (
    InterventionType,
    ExerciseIntensity,
    CarbReductionParams,
    BolusTimingParams,
    BasalAdjustmentParams,
    MealSkipParams,
    ExerciseParams,
    Intervention,
)
from scenario_modeler.interventions.carb_reduction import apply_carb_reduction
from scenario_modeler.interventions.scenario import apply_intervention, compute_scenario
from scenario_modeler.interventions.defaults import (
    default_carb_reduction_params,
    new_carb_reduction,
    describe,
)

__all__ = [
    "InterventionType",
    "ExerciseIntensity",
    "CarbReductionParams",
    "BolusTimingParams",
    "BasalAdjustmentParams",
    "MealSkipParams",
    "ExerciseParams",
    "Intervention",
    "apply_carb_reduction",
    "apply_intervention",
    "compute_scenario",
    "default_carb_reduction_params",
    "new_carb_reduction",
    "describe",
]
