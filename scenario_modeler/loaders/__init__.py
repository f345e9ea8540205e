"""Data loaders for raw glucose readings."""

from scenario_modeler.loaders.readings import (
    GlucoseReadingsLoader,
    clean_readings,
    readings_from_records,
)

__all__ = ["GlucoseReadingsLoader", "clean_readings", "readings_from_records"]
