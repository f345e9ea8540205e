"""
Scenario Modeler - "what if" modelling of 24-hour blood glucose profiles.

This package provides modular components for:
- Deriving hourly glucose profiles from raw CGM readings
- Applying ordered chains of interventions to a baseline profile
- Computing clinical summary metrics (mean, A1c, GMI, time in range, CV)
- Visualizing baseline, comparison and scenario profiles
"""

from scenario_modeler.config import ScenarioConfig, load_config

__version__ = "1.0.0"
__all__ = ["ScenarioConfig", "load_config"]
