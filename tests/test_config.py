import logging

from scenario_modeler.config import ScenarioConfig, load_config, save_config


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "absent.yaml")
    assert config == ScenarioConfig()
    assert config.aggregation.cohort_fraction == 0.1
    assert config.interventions.meal_times == {'Breakfast': 8, 'Lunch': 13, 'Dinner': 19}


def test_packaged_config_matches_defaults():
    assert load_config() == ScenarioConfig()


def test_overrides_and_unknown_keys(tmp_path, caplog):
    path = tmp_path / "config.yaml"
    path.write_text(
        "aggregation:\n"
        "  cohort_fraction: 0.2\n"
        "  timezone: Europe/Oslo\n"
        "  bogus: 1\n"
        "app:\n"
        "  access_password: entropy\n"
        "extras:\n"
        "  x: 1\n"
    )
    with caplog.at_level(logging.WARNING, logger="scenario_modeler.config"):
        config = load_config(path)

    assert config.aggregation.cohort_fraction == 0.2
    assert config.aggregation.timezone == "Europe/Oslo"
    assert config.app.access_password == "entropy"
    assert config.interventions.default_spike_duration == 3
    assert "aggregation.bogus" in caplog.text
    assert "extras" in caplog.text


def test_save_then_load(tmp_path):
    config = ScenarioConfig()
    config.interventions.default_reduction_percent = 45.0
    config.app.custom_baseline = [6.0] * 24
    path = tmp_path / "saved.yaml"

    save_config(config, path)
    assert load_config(path) == config


def test_from_dict():
    config = ScenarioConfig.from_dict({'visualization': {'chart_y_max': 20.0}})
    assert config.visualization.chart_y_max == 20.0
    assert config.visualization.chart_y_min == 0.0
