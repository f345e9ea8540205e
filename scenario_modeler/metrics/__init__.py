"""Metric dataclasses for analysis results."""

from scenario_modeler.metrics.glucose_metrics import GlucoseMetrics
from scenario_modeler.metrics.daily_metrics import DailyAggregate, AggregationResult

__all__ = ["GlucoseMetrics", "DailyAggregate", "AggregationResult"]
