from scenario_modeler.config import ScenarioConfig
from scenario_modeler.interventions import compute_scenario
from scenario_modeler.profiles import BASELINE_PROFILES, GlucoseProfile
from scenario_modeler.utils.colors import NEUTRAL_COLOR, get_glucose_color
from scenario_modeler.visualizers import MatplotlibVisualizer, PlotlyVisualizer


def test_profile_chart_baseline_only(example_profile):
    fig = PlotlyVisualizer().create_profile_chart(example_profile)

    assert len(fig.data) == 1
    assert fig.data[0].name == "Example"
    assert list(fig.data[0].y) == list(example_profile.values)
    assert tuple(fig.layout.yaxis.range) == (0.0, 15.0)


def test_profile_chart_all_series(example_profile, make_carb_reduction):
    scenario = compute_scenario(example_profile, [make_carb_reduction(8, 30)])
    fig = PlotlyVisualizer().create_profile_chart(
        example_profile,
        comparison=BASELINE_PROFILES['q4_best_10'],
        scenario=scenario,
    )

    assert [trace.name for trace in fig.data] == [
        "Example", BASELINE_PROFILES['q4_best_10'].label, "Scenario"
    ]
    assert fig.layout.height == 450


def test_profile_chart_uses_config_range(example_profile):
    config = ScenarioConfig()
    config.visualization.chart_y_max = 20.0
    fig = PlotlyVisualizer(config).create_profile_chart(example_profile, height=300)

    assert tuple(fig.layout.yaxis.range) == (0.0, 20.0)
    assert fig.layout.height == 300


def test_matplotlib_plot_with_gaps(tmp_path):
    values = [6.0] * 24
    values[3] = None
    profiles = {
        'average': GlucoseProfile(values, "Average"),
        'best': GlucoseProfile([5.5] * 24, "Best 10% Days"),
    }
    viz = MatplotlibVisualizer()
    fig = viz.plot_hourly_profiles(profiles, title="Profiles")

    ax = fig.axes[0]
    assert [line.get_label() for line in ax.get_lines()] == ["Average", "Best 10% Days"]
    assert ax.get_title() == "Profiles"

    path = viz.save(fig, tmp_path / "plot.png")
    assert path.stat().st_size > 0


def test_threshold_lines_follow_config(example_profile):
    config = ScenarioConfig()
    config.glucose.hyper = 12.0
    fig = PlotlyVisualizer(config).create_profile_chart(example_profile)

    line_levels = {shape.y0 for shape in fig.layout.shapes if shape.type == 'line'}
    assert line_levels == {3.9, 10.0, 3.0, 12.0}


def test_scenario_markers_colored_by_zone():
    values = [6.0] * 24
    values[0] = 2.5
    values[1] = 3.5
    values[2] = 11.0
    values[3] = 15.0
    values[4] = None
    scenario = GlucoseProfile(values, "Scenario")
    fig = PlotlyVisualizer().create_profile_chart(GlucoseProfile([6.0] * 24), scenario=scenario)

    colors = list(fig.data[-1].marker.color)
    assert colors[:6] == [
        get_glucose_color(2.5), get_glucose_color(3.5), get_glucose_color(11.0),
        get_glucose_color(15.0), NEUTRAL_COLOR, get_glucose_color(6.0),
    ]
    assert len(set(colors[:6])) == 5
    # Baseline keeps a single line color
    assert fig.data[0].marker.color == fig.data[0].line.color
