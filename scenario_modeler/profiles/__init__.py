"""Glucose profile value object and the named profile catalog."""

from scenario_modeler.profiles.profile import GlucoseProfile
from scenario_modeler.profiles.catalog import (
    BASELINE_PROFILES,
    CUSTOM_KEY,
    DEFAULT_BASELINE,
    build_catalog,
)

__all__ = [
    "GlucoseProfile",
    "BASELINE_PROFILES",
    "CUSTOM_KEY",
    "DEFAULT_BASELINE",
    "build_catalog",
]
