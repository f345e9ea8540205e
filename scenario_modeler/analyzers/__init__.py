"""Glucose profile and readings analyzers."""

from scenario_modeler.analyzers.glucose import GlucoseAnalyzer, calculate_metrics
from scenario_modeler.analyzers.daily import DailyAggregator, hourly_profile, rank_days

__all__ = [
    "GlucoseAnalyzer",
    "calculate_metrics",
    "DailyAggregator",
    "hourly_profile",
    "rank_days",
]
