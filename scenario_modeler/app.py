"""
Blood Sugar Scenario Modeler - Streamlit App

Pick a baseline profile, optionally a comparison profile, and stack
interventions to see how the 24-hour profile and its metrics would change.
"""

import hmac
import sys
from pathlib import Path

import streamlit as st

# Make the package importable when launched with `streamlit run`
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from scenario_modeler.config import load_config, TARGET_LOW, TARGET_HIGH
from scenario_modeler.interventions import (
    CarbReductionParams,
    describe,
    new_carb_reduction,
)
from scenario_modeler.profiles import build_catalog
from scenario_modeler.state import (
    AppState,
    AddIntervention,
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
from scenario_modeler.visualizers import PlotlyVisualizer


# =============================================================================
# Page Config
# =============================================================================

st.set_page_config(
    page_title="Blood Sugar Scenario Modeler",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
    .block-container {
        padding-top: 2rem;
        padding-bottom: 2rem;
    }

    div[data-testid="stMetricValue"] {
        font-size: 1.4rem;
        font-weight: 700;
    }

    div[data-testid="stMetricLabel"] {
        font-size: 0.8rem;
        font-weight: 500;
        text-transform: uppercase;
        letter-spacing: 0.03em;
    }
</style>
""", unsafe_allow_html=True)


# =============================================================================
# Session State Initialization
# =============================================================================

def init_session_state():
    """Initialize session state variables."""
    if 'config' not in st.session_state:
        st.session_state.config = load_config()
    if 'catalog' not in st.session_state:
        st.session_state.catalog = build_catalog(st.session_state.config)
    if 'app_state' not in st.session_state:
        st.session_state.app_state = AppState(
            baseline_key=st.session_state.config.app.default_baseline
        )
    if 'authenticated' not in st.session_state:
        st.session_state.authenticated = False


def dispatch(action):
    """Apply an action to the session's AppState."""
    st.session_state.app_state = transition(st.session_state.app_state, action)


init_session_state()


# =============================================================================
# Access Gate
# =============================================================================

def check_access() -> bool:
    """Return True once the session may see the app."""
    password = st.session_state.config.app.access_password
    if not password or st.session_state.authenticated:
        return True

    st.title("Blood Sugar Scenario Modeler")
    with st.form("access_gate"):
        entered = st.text_input("Enter password to access", type="password")
        if st.form_submit_button("Enter"):
            if hmac.compare_digest(entered.encode(), password.encode()):
                st.session_state.authenticated = True
                st.rerun()
            else:
                st.error("Incorrect password")
    return False


# =============================================================================
# Sidebar - Profiles and Interventions
# =============================================================================

def render_sidebar():
    """Render sidebar with profile selectors and intervention controls."""
    catalog = st.session_state.catalog
    state = st.session_state.app_state
    config = st.session_state.config

    with st.sidebar:
        st.title("📈 Scenario Modeler")

        st.subheader("Profiles")
        keys = list(catalog)
        baseline_key = st.selectbox(
            "Profile",
            keys,
            index=keys.index(state.baseline_key) if state.baseline_key in keys else 0,
            format_func=lambda key: catalog[key].label,
        )
        if baseline_key != state.baseline_key:
            dispatch(SelectBaseline(baseline_key))
            state = st.session_state.app_state

        options = comparison_options(catalog, state.baseline_key)
        comparison_keys = [None] + list(options)
        comparison_key = st.selectbox(
            "Compare to",
            comparison_keys,
            index=comparison_keys.index(state.comparison_key)
            if state.comparison_key in comparison_keys else 0,
            format_func=lambda key: "None" if key is None else options[key],
        )
        if comparison_key != state.comparison_key:
            dispatch(SelectComparison(comparison_key))

        st.divider()

        st.subheader("Interventions")
        if st.button("➕ Add carb reduction", use_container_width=True):
            dispatch(AddIntervention(new_carb_reduction(config.interventions)))
            st.rerun()

        if st.button("Reset", use_container_width=True):
            dispatch(ResetState(config.app.default_baseline))
            st.rerun()


def render_carb_reduction_form(intervention) -> CarbReductionParams:
    """Widgets for a carb reduction; returns the edited parameters."""
    settings = st.session_state.config.interventions
    params = intervention.parameters
    key = intervention.id

    meals = settings.meal_times
    meal_hours = list(meals.values())
    if params.meal_time not in meal_hours:
        meal_hours.append(params.meal_time)
    hour_to_meal = {hour: name for name, hour in meals.items()}

    meal_time = st.selectbox(
        "Meal",
        meal_hours,
        index=meal_hours.index(params.meal_time),
        format_func=lambda hour: f"{hour_to_meal.get(hour, 'Meal')} ({hour}:00)",
        key=f"{key}_meal",
    )
    reduction = st.slider(
        "Carb reduction (%)",
        0, 100, int(params.reduction_percent),
        step=settings.reduction_step,
        key=f"{key}_reduction",
    )
    duration = st.slider(
        "Spike duration (hours)",
        1, settings.max_spike_duration, int(params.spike_duration),
        key=f"{key}_duration",
    )

    return CarbReductionParams(
        meal_time=meal_time,
        reduction_percent=float(reduction),
        spike_duration=duration,
    )


def render_interventions():
    """Render one card per intervention."""
    state = st.session_state.app_state
    settings = st.session_state.config.interventions

    st.subheader("Interventions")
    if not state.interventions:
        st.caption("No interventions yet. Add one from the sidebar.")
        return

    cols = st.columns(min(3, len(state.interventions)))
    for i, intervention in enumerate(state.interventions):
        with cols[i % len(cols)]:
            with st.container(border=True):
                enabled = st.toggle(
                    "Enabled", value=intervention.enabled, key=f"{intervention.id}_enabled"
                )
                if enabled != intervention.enabled:
                    dispatch(ToggleIntervention(intervention.id, enabled))

                if isinstance(intervention.parameters, CarbReductionParams):
                    params = render_carb_reduction_form(intervention)
                    if params != intervention.parameters:
                        dispatch(UpdateInterventionParams(intervention.id, params))

                current = next(
                    (x for x in st.session_state.app_state.interventions if x.id == intervention.id),
                    intervention,
                )
                st.caption(describe(current, settings))

                if st.button("Remove", key=f"{intervention.id}_remove"):
                    dispatch(RemoveIntervention(intervention.id))
                    st.rerun()


# =============================================================================
# Main Content
# =============================================================================

# (label, attribute, format, lower is better)
METRIC_ROWS = [
    ("Mean Glucose", 'mean', "{:.1f} mmol/L", True),
    ("Estimated A1c", 'estimated_a1c', "{:.1f}%", True),
    ("GMI", 'gmi', "{:.1f}%", True),
    ("Time in Range", 'time_in_range', "{:.0f}%", False),
    ("Time Below", 'time_below_range', "{:.0f}%", True),
    ("Time Above", 'time_above_range', "{:.0f}%", True),
    ("CV", 'cv', "{:.0f}%", True),
]


def render_metrics(view):
    """Metrics for baseline, comparison and scenario, with deltas vs baseline."""
    columns = [("Baseline", view.baseline.label, view.baseline_metrics)]
    if view.comparison_metrics is not None:
        columns.append(("Comparison", view.comparison.label, view.comparison_metrics))
    if view.scenario_metrics is not None:
        columns.append(("Scenario", "With interventions", view.scenario_metrics))

    st.subheader("Metrics")
    cols = st.columns(len(columns))
    for col, (title, caption, metrics) in zip(cols, columns):
        with col:
            st.markdown(f"**{title}**")
            st.caption(caption)
            for label, attr, fmt, lower_is_better in METRIC_ROWS:
                value = getattr(metrics, attr)
                delta = None
                if metrics is not view.baseline_metrics:
                    delta = fmt.format(value - getattr(view.baseline_metrics, attr))
                st.metric(
                    label,
                    fmt.format(value),
                    delta,
                    delta_color='inverse' if lower_is_better else 'normal',
                )


def render_main():
    """Render main dashboard content."""
    render_sidebar()

    st.title("Blood Sugar Scenario Modeler")

    # Interventions are edited before the chart is drawn, so reserve its slot
    top = st.container()
    st.divider()
    render_interventions()

    view = build_view(st.session_state.app_state, st.session_state.catalog)
    viz = PlotlyVisualizer(st.session_state.config)

    with top:
        chart_col, metrics_col = st.columns([2, 1])
        with chart_col:
            st.subheader("24-Hour Glucose Profile")
            fig = viz.create_profile_chart(view.baseline, view.comparison, view.scenario)
            st.plotly_chart(fig, use_container_width=True)
            st.caption(f"Shaded band: target range ({TARGET_LOW}-{TARGET_HIGH} mmol/L)")

        with metrics_col:
            render_metrics(view)


if check_access():
    render_main()
