"""Visualization modules for glucose profiles."""

from scenario_modeler.visualizers.matplotlib_viz import MatplotlibVisualizer
from scenario_modeler.visualizers.plotly_viz import PlotlyVisualizer

__all__ = ["MatplotlibVisualizer", "PlotlyVisualizer"]
