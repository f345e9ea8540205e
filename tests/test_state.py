import pytest

from scenario_modeler.interventions import CarbReductionParams, MealSkipParams
from scenario_modeler.profiles import BASELINE_PROFILES
from scenario_modeler.state import (
    AddIntervention,
    AppState,
    RemoveIntervention,
    ResetState,
    SelectBaseline,
    SelectComparison,
    ToggleIntervention,
    UpdateInterventionParams,
    build_view,
    comparison_options,
    transition,
)


@pytest.fixture
def state_with_two(make_carb_reduction):
    state = AppState(baseline_key='example')
    state = transition(state, AddIntervention(make_carb_reduction(8, 30)))
    state = transition(state, AddIntervention(make_carb_reduction(19, 50)))
    return state


def test_default_state():
    state = AppState()
    assert state.baseline_key == 'q4_average'
    assert state.comparison_key is None
    assert state.interventions == ()


def test_add_keeps_insertion_order(state_with_two):
    assert [i.parameters.meal_time for i in state_with_two.interventions] == [8, 19]


def test_add_rejects_duplicate_id(state_with_two):
    with pytest.raises(ValueError):
        transition(state_with_two, AddIntervention(state_with_two.interventions[0]))


def test_transitions_do_not_mutate(state_with_two):
    first_id = state_with_two.interventions[0].id
    new_state = transition(state_with_two, RemoveIntervention(first_id))

    assert len(state_with_two.interventions) == 2
    assert len(new_state.interventions) == 1


def test_toggle(state_with_two):
    target = state_with_two.interventions[1].id
    state = transition(state_with_two, ToggleIntervention(target, False))

    assert state.interventions[0].enabled
    assert not state.interventions[1].enabled


def test_update_params(state_with_two):
    target = state_with_two.interventions[0].id
    params = CarbReductionParams(13, 70, 2)
    state = transition(state_with_two, UpdateInterventionParams(target, params))

    assert state.interventions[0].parameters == params
    assert state.interventions[0].id == target


def test_update_params_of_wrong_kind_fails(state_with_two):
    target = state_with_two.interventions[0].id
    with pytest.raises(TypeError):
        transition(state_with_two, UpdateInterventionParams(target, MealSkipParams(8, 1.0)))


def test_unknown_id_is_noop(state_with_two):
    assert transition(state_with_two, RemoveIntervention("missing")) == state_with_two
    assert transition(state_with_two, ToggleIntervention("missing", False)) == state_with_two


def test_select_baseline_clears_matching_comparison():
    state = AppState(baseline_key='example', comparison_key='q4_best_10')

    assert transition(state, SelectBaseline('q4_worst_10')).comparison_key == 'q4_best_10'
    cleared = transition(state, SelectBaseline('q4_best_10'))
    assert cleared.baseline_key == 'q4_best_10'
    assert cleared.comparison_key is None


def test_select_comparison_and_reset(state_with_two):
    state = transition(state_with_two, SelectComparison('q4_average'))
    assert state.comparison_key == 'q4_average'

    reset = transition(state, ResetState())
    assert reset == AppState()


def test_unknown_action():
    with pytest.raises(TypeError):
        transition(AppState(), object())


def test_view_without_enabled_interventions_has_no_scenario(state_with_two):
    for intervention in state_with_two.interventions:
        state_with_two = transition(state_with_two, ToggleIntervention(intervention.id, False))

    view = build_view(state_with_two, BASELINE_PROFILES)
    assert view.baseline is BASELINE_PROFILES['example']
    assert view.scenario is None
    assert view.scenario_metrics is None
    assert view.comparison is None


def test_view_with_scenario_and_comparison(state_with_two):
    state = transition(state_with_two, SelectComparison('q4_best_10'))
    view = build_view(state, BASELINE_PROFILES)

    assert view.comparison_metrics is not None
    assert view.scenario[8] == pytest.approx(8.99)
    assert view.scenario_metrics.mean < view.baseline_metrics.mean


def test_view_unknown_key():
    with pytest.raises(KeyError):
        build_view(AppState(baseline_key='nope'), BASELINE_PROFILES)


def test_comparison_options_exclude_baseline():
    options = comparison_options(BASELINE_PROFILES, 'example')
    assert 'example' not in options
    assert options['q4_average'] == BASELINE_PROFILES['q4_average'].label
