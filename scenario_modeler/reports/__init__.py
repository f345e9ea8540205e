"""Report generation for aggregation runs."""

from scenario_modeler.reports.generator import ReportGenerator

__all__ = ["ReportGenerator"]
