"""
Session state for the interactive modeler.

State is an immutable AppState. Every change goes through
``transition(state, action)``, which returns a new state. The Streamlit app
keeps the current state in ``st.session_state`` and derives everything it
renders with ``build_view``.
"""

from dataclasses import dataclass, replace
from typing import Dict, Mapping, Optional, Tuple, Union

from scenario_modeler.analyzers.glucose import calculate_metrics
from scenario_modeler.interventions.models import Intervention, InterventionParams
from scenario_modeler.interventions.scenario import compute_scenario
from scenario_modeler.metrics.glucose_metrics import GlucoseMetrics
from scenario_modeler.profiles.profile import GlucoseProfile

DEFAULT_BASELINE_KEY = 'q4_average'


@dataclass(frozen=True)
class AppState:
    baseline_key: str = DEFAULT_BASELINE_KEY
    comparison_key: Optional[str] = None
    interventions: Tuple[Intervention, ...] = ()


# =============================================================================
# Actions
# =============================================================================

@dataclass(frozen=True)
class SelectBaseline:
    key: str


@dataclass(frozen=True)
class SelectComparison:
    key: Optional[str]


@dataclass(frozen=True)
class AddIntervention:
    intervention: Intervention


@dataclass(frozen=True)
class UpdateInterventionParams:
    intervention_id: str
    parameters: InterventionParams


@dataclass(frozen=True)
class ToggleIntervention:
    intervention_id: str
    enabled: bool


@dataclass(frozen=True)
class RemoveIntervention:
    intervention_id: str


@dataclass(frozen=True)
class ResetState:
    baseline_key: str = DEFAULT_BASELINE_KEY


Action = Union[
    SelectBaseline,
    SelectComparison,
    AddIntervention,
    UpdateInterventionParams,
    ToggleIntervention,
    RemoveIntervention,
    ResetState,
]


def _select_baseline(state: AppState, action: SelectBaseline) -> AppState:
    # A profile is never compared with itself
    comparison = None if state.comparison_key == action.key else state.comparison_key
    return replace(state, baseline_key=action.key, comparison_key=comparison)


def _select_comparison(state: AppState, action: SelectComparison) -> AppState:
    return replace(state, comparison_key=action.key)


def _add_intervention(state: AppState, action: AddIntervention) -> AppState:
    if any(i.id == action.intervention.id for i in state.interventions):
        raise ValueError(f"Intervention id already in use: {action.intervention.id}")
    return replace(state, interventions=state.interventions + (action.intervention,))


def _update_params(state: AppState, action: UpdateInterventionParams) -> AppState:
    return replace(state, interventions=tuple(
        i.with_parameters(action.parameters) if i.id == action.intervention_id else i
        for i in state.interventions
    ))


def _toggle(state: AppState, action: ToggleIntervention) -> AppState:
    return replace(state, interventions=tuple(
        i.with_enabled(action.enabled) if i.id == action.intervention_id else i
        for i in state.interventions
    ))


def _remove(state: AppState, action: RemoveIntervention) -> AppState:
    return replace(state, interventions=tuple(
        i for i in state.interventions if i.id != action.intervention_id
    ))


def _reset(state: AppState, action: ResetState) -> AppState:
    return AppState(baseline_key=action.baseline_key)


HANDLERS = {
    SelectBaseline: _select_baseline,
    SelectComparison: _select_comparison,
    AddIntervention: _add_intervention,
    UpdateInterventionParams: _update_params,
    ToggleIntervention: _toggle,
    RemoveIntervention: _remove,
    ResetState: _reset,
}


def transition(state: AppState, action: Action) -> AppState:
    """Return the state after applying ``action``.

    Actions naming an unknown intervention id leave the list unchanged.

    Raises:
        ValueError: When adding an intervention whose id is already present.
        TypeError: When updating parameters with a record of the wrong kind,
                   or for an unknown action type.
    """
    handler = HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"Unknown action {type(action).__name__}")
    return handler(state, action)


# =============================================================================
# Derived view
# =============================================================================

@dataclass(frozen=True)
class ScenarioView:
    """Everything the chart and metrics renderers need."""
    baseline: GlucoseProfile
    baseline_metrics: GlucoseMetrics
    comparison: Optional[GlucoseProfile] = None
    comparison_metrics: Optional[GlucoseMetrics] = None
    scenario: Optional[GlucoseProfile] = None
    scenario_metrics: Optional[GlucoseMetrics] = None


def _lookup(catalog: Mapping[str, GlucoseProfile], key: str) -> GlucoseProfile:
    try:
        return catalog[key]
    except KeyError:
        raise KeyError(f"Unknown profile: {key}") from None


def build_view(state: AppState, catalog: Mapping[str, GlucoseProfile]) -> ScenarioView:
    """Resolve profiles from the catalog and compute scenario and metrics.

    The scenario is only present while at least one intervention is enabled.

    Raises:
        KeyError: If the baseline or comparison key is not in the catalog.
    """
    baseline = _lookup(catalog, state.baseline_key)
    comparison = _lookup(catalog, state.comparison_key) if state.comparison_key else None

    scenario = None
    if any(i.enabled for i in state.interventions):
        scenario = compute_scenario(baseline, state.interventions)

    return ScenarioView(
        baseline=baseline,
        baseline_metrics=calculate_metrics(baseline),
        comparison=comparison,
        comparison_metrics=calculate_metrics(comparison) if comparison is not None else None,
        scenario=scenario,
        scenario_metrics=calculate_metrics(scenario) if scenario is not None else None,
    )


def comparison_options(catalog: Mapping[str, GlucoseProfile], baseline_key: str) -> Dict[str, str]:
    """Catalog keys (and labels) that may be compared with the baseline."""
    return {key: profile.label for key, profile in catalog.items() if key != baseline_key}
