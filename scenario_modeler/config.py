"""
Configuration management for the Scenario Modeler.

This module provides dataclasses for configurable defaults and settings,
with support for loading from YAML files. The target range used by the
metrics calculator is a fixed domain constant and lives here as a module
constant rather than in a dataclass.
"""

import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, Dict, Any, List
import yaml

logger = logging.getLogger(__name__)


GLUCOSE_UNIT = "mmol/L"
HOURS_PER_DAY = 24

# Consensus target range (ADA/EASD), mmol/L
TARGET_LOW = 3.9
TARGET_HIGH = 10.0


@dataclass
class GlucoseThresholds:
    """Chart reference thresholds in mmol/L.

    Display only: metrics always use TARGET_LOW / TARGET_HIGH.
    """
    hypo: float = 3.0         # Level 2 hypoglycemia
    hyper: float = 13.9       # Clinically significant hyperglycemia


@dataclass
class InterventionSettings:
    """Defaults for newly created interventions."""
    breakfast_hour: int = 8
    lunch_hour: int = 13
    dinner_hour: int = 19

    default_reduction_percent: float = 30.0
    default_spike_duration: int = 3  # hours

    # Form widget bounds
    max_spike_duration: int = 6
    reduction_step: int = 5

    @property
    def meal_times(self) -> Dict[str, int]:
        """Meal name to clock hour."""
        return {
            'Breakfast': self.breakfast_hour,
            'Lunch': self.lunch_hour,
            'Dinner': self.dinner_hour,
        }


@dataclass
class AggregationSettings:
    """Settings for the offline daily aggregator."""
    # Share of days in each of the best/worst cohorts
    cohort_fraction: float = 0.10

    # Timezone that tz-aware timestamps are converted to before the
    # calendar date and hour are read. Naive timestamps are used as-is.
    timezone: Optional[str] = None

    report_decimals: int = 2


@dataclass
class VisualizationSettings:
    """Settings for chart rendering."""
    chart_y_min: float = 0.0
    chart_y_max: float = 15.0
    chart_height: int = 450

    font_family: str = "Inter, sans-serif"
    figsize: tuple = (12, 6)


@dataclass
class AppSettings:
    """Settings for the interactive Streamlit app."""
    default_baseline: str = "q4_average"

    # Access gate is disabled when no password is set
    access_password: Optional[str] = None

    # 24 hourly values, exposed in the catalog under the "custom" key
    custom_baseline: Optional[List[float]] = None


@dataclass
class ScenarioConfig:
    """Master configuration container."""
    glucose: GlucoseThresholds = field(default_factory=GlucoseThresholds)
    interventions: InterventionSettings = field(default_factory=InterventionSettings)
    aggregation: AggregationSettings = field(default_factory=AggregationSettings)
    visualization: VisualizationSettings = field(default_factory=VisualizationSettings)
    app: AppSettings = field(default_factory=AppSettings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ScenarioConfig':
        """Create config from dictionary, ignoring unknown keys."""
        config = cls()
        _apply_sections(config, data)
        return config


SECTIONS = ('glucose', 'interventions', 'aggregation', 'visualization', 'app')


def _apply_sections(config: ScenarioConfig, data: Dict[str, Any]) -> None:
    for section in SECTIONS:
        values = data.get(section) or {}
        target = getattr(config, section)
        for key, value in values.items():
            if hasattr(target, key):
                if key == 'figsize' and value is not None:
                    value = tuple(value)
                setattr(target, key, value)
            else:
                logger.warning("Ignoring unknown config key %s.%s", section, key)

    for section in data:
        if section not in SECTIONS:
            logger.warning("Ignoring unknown config section %s", section)


def load_config(config_path: Optional[Path] = None) -> ScenarioConfig:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config.yaml. If None, looks for config.yaml
                    in the scenario_modeler package directory.

    Returns:
        ScenarioConfig with values from file merged with defaults.
    """
    if config_path is None:
        config_path = Path(__file__).parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return ScenarioConfig()

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f) or {}

    # Create config with defaults, then override with file values
    config = ScenarioConfig()
    _apply_sections(config, data)

    return config


def save_config(config: ScenarioConfig, config_path: Path) -> None:
    """Save configuration to YAML file."""
    data = config.to_dict()
    data['visualization']['figsize'] = list(config.visualization.figsize)
    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
