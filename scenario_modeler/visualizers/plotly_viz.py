"""
Plotly Visualizer - Interactive charts for the Streamlit app.
"""

from typing import List, Optional

import plotly.graph_objects as go

from scenario_modeler.config import ScenarioConfig, TARGET_LOW, TARGET_HIGH, GLUCOSE_UNIT
from scenario_modeler.profiles.profile import GlucoseProfile
from scenario_modeler.utils.colors import (
    BASELINE_COLOR,
    COMPARISON_COLOR,
    SCENARIO_COLOR,
    TARGET_BAND_COLOR,
    TARGET_LINE_COLOR,
    THRESHOLD_LINE_COLOR,
    get_glucose_color,
)

HOUR_LABELS = [f"{hour:02d}:00" for hour in range(24)]


class PlotlyVisualizer:
    """Interactive Plotly visualizations for Streamlit.

    Provides interactive charts with consistent styling.
    """

    def __init__(self, config: Optional[ScenarioConfig] = None):
        """Initialize visualizer.

        Args:
            config: Optional configuration.
        """
        self.config = config or ScenarioConfig()
        self.font_family = self.config.visualization.font_family

    def _get_base_layout(self, height: int = 400, **kwargs) -> dict:
        """Get base layout for consistent styling."""
        return {
            'height': height,
            'margin': dict(l=50, r=30, t=50, b=30),
            'paper_bgcolor': 'rgba(0,0,0,0)',
            'plot_bgcolor': 'rgba(0,0,0,0)',
            'font': dict(family=self.font_family, size=12),
            'hoverlabel': dict(font_size=12, bordercolor='rgba(128,128,128,0.3)'),
            **kwargs
        }

    def _profile_trace(
        self,
        profile: GlucoseProfile,
        name: str,
        color: str,
        dash: Optional[str] = None,
        width: float = 2,
        marker_colors: Optional[List[str]] = None,
    ) -> go.Scatter:
        # None leaves a gap in the line for missing hours
        return go.Scatter(
            x=HOUR_LABELS,
            y=profile.to_list(),
            name=name,
            mode='lines+markers',
            line=dict(color=color, width=width, dash=dash),
            marker=dict(size=5 if marker_colors is None else 7, color=marker_colors or color),
            hovertemplate=f'%{{x}}<br><b>%{{y:.1f}}</b> {GLUCOSE_UNIT}<extra>{name}</extra>',
        )

    def _add_target_band(self, fig: go.Figure):
        """Shade the 3.9-10.0 mmol/L target range."""
        fig.add_hrect(
            y0=TARGET_LOW, y1=TARGET_HIGH,
            fillcolor=TARGET_BAND_COLOR, line_width=0, layer='below',
        )
        fig.add_hline(y=TARGET_LOW, line_dash='dot', line_color=TARGET_LINE_COLOR)
        fig.add_hline(y=TARGET_HIGH, line_dash='dot', line_color=TARGET_LINE_COLOR)

    def _add_threshold_lines(self, fig: go.Figure):
        """Level 2 hypo and significant hyper lines from config."""
        thresholds = self.config.glucose
        for level in (thresholds.hypo, thresholds.hyper):
            fig.add_hline(
                y=level, line_dash='dash', line_width=1, line_color=THRESHOLD_LINE_COLOR,
            )

    def _zone_colors(self, profile: GlucoseProfile) -> List[str]:
        """Per-hour marker colors by glucose zone."""
        return [get_glucose_color(value, self.config.glucose) for value in profile]

    def create_profile_chart(
        self,
        baseline: GlucoseProfile,
        comparison: Optional[GlucoseProfile] = None,
        scenario: Optional[GlucoseProfile] = None,
        height: Optional[int] = None,
    ) -> go.Figure:
        """Create the 24-hour chart of baseline, comparison and scenario.

        Args:
            baseline: Baseline profile (dashed gray).
            comparison: Optional comparison profile.
            scenario: Optional scenario profile.
            height: Chart height; config default if None.

        Returns:
            Plotly Figure.
        """
        viz = self.config.visualization
        fig = go.Figure()

        self._add_target_band(fig)
        self._add_threshold_lines(fig)

        fig.add_trace(self._profile_trace(
            baseline, baseline.label or 'Baseline', BASELINE_COLOR, dash='dash'
        ))

        if comparison is not None:
            fig.add_trace(self._profile_trace(
                comparison, comparison.label or 'Comparison', COMPARISON_COLOR
            ))

        if scenario is not None:
            fig.add_trace(self._profile_trace(
                scenario, scenario.label or 'Scenario', SCENARIO_COLOR, width=3,
                marker_colors=self._zone_colors(scenario),
            ))

        fig.update_layout(
            **self._get_base_layout(height=height or viz.chart_height),
            legend=dict(
                orientation='h',
                yanchor='bottom',
                y=1.02,
                xanchor='right',
                x=1
            )
        )

        fig.update_yaxes(
            title_text=f"Glucose ({GLUCOSE_UNIT})",
            range=[viz.chart_y_min, viz.chart_y_max],
        )
        fig.update_xaxes(title_text="Hour of day", tickangle=0, dtick=3)
        fig.update_xaxes(showgrid=True, gridcolor='rgba(128,128,128,0.15)')
        fig.update_yaxes(showgrid=True, gridcolor='rgba(128,128,128,0.15)')

        return fig
