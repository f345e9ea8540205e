"""
Intervention data model.

An intervention is a kind tag plus a parameter record whose type is fixed
by that tag. Only carbohydrate reduction has an evaluator today; the other
kinds are accepted and pass the profile through unchanged.
"""

import uuid
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Type, Union


class InterventionType(str, Enum):
    """Closed set of intervention kinds."""

    CARB_REDUCTION = "carb_reduction"
    BOLUS_TIMING = "bolus_timing"
    BASAL_ADJUSTMENT = "basal_adjustment"
    MEAL_SKIP = "meal_skip"
    EXERCISE = "exercise"


class ExerciseIntensity(str, Enum):
    LIGHT = "light"
    MODERATE = "moderate"
    VIGOROUS = "vigorous"


@dataclass(frozen=True)
class CarbReductionParams:
    meal_time: int             # hour (0-23)
    reduction_percent: float   # 0-100
    spike_duration: int = 3    # hours attributed to the meal


@dataclass(frozen=True)
class BolusTimingParams:
    meal_time: int
    pre_bolus_minutes: int     # -30 to +30


@dataclass(frozen=True)
class BasalAdjustmentParams:
    start_hour: int
    end_hour: int
    change_percent: float      # -50 to +50


@dataclass(frozen=True)
class MealSkipParams:
    meal_time: int
    spike_reduction: float     # mmol/L at peak


@dataclass(frozen=True)
class ExerciseParams:
    start_hour: int
    duration_minutes: int      # 15-120
    intensity: ExerciseIntensity = ExerciseIntensity.MODERATE


InterventionParams = Union[
    CarbReductionParams,
    BolusTimingParams,
    BasalAdjustmentParams,
    MealSkipParams,
    ExerciseParams,
]

PARAMS_BY_TYPE: Dict[InterventionType, Type] = {
    InterventionType.CARB_REDUCTION: CarbReductionParams,
    InterventionType.BOLUS_TIMING: BolusTimingParams,
    InterventionType.BASAL_ADJUSTMENT: BasalAdjustmentParams,
    InterventionType.MEAL_SKIP: MealSkipParams,
    InterventionType.EXERCISE: ExerciseParams,
}


def new_intervention_id() -> str:
    return f"int_{uuid.uuid4().hex}"


@dataclass(frozen=True)
class Intervention:
    """One step of a scenario.

    Raises:
        TypeError: If ``parameters`` is not the record type for ``type``.
    """
    id: str
    type: InterventionType
    parameters: InterventionParams
    enabled: bool = True

    def __post_init__(self):
        kind = InterventionType(self.type)
        object.__setattr__(self, 'type', kind)

        expected = PARAMS_BY_TYPE[kind]
        if not isinstance(self.parameters, expected):
            raise TypeError(
                f"{kind.value} intervention needs {expected.__name__}, "
                f"got {type(self.parameters).__name__}"
            )

    @classmethod
    def create(cls, parameters: InterventionParams, enabled: bool = True) -> 'Intervention':
        """New intervention with a fresh id; the kind is inferred from the parameters."""
        for kind, params_type in PARAMS_BY_TYPE.items():
            if isinstance(parameters, params_type):
                return cls(new_intervention_id(), kind, parameters, enabled)
        raise TypeError(f"Unknown parameter record {type(parameters).__name__}")

    def with_parameters(self, parameters: InterventionParams) -> 'Intervention':
        return replace(self, parameters=parameters)

    def with_enabled(self, enabled: bool) -> 'Intervention':
        return replace(self, enabled=enabled)
