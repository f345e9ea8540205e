"""
Matplotlib Visualizer - static plot of hourly profiles for offline reports.
"""

from pathlib import Path
from typing import Dict, Optional, Union

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from scenario_modeler.config import ScenarioConfig, TARGET_LOW, TARGET_HIGH, GLUCOSE_UNIT
from scenario_modeler.profiles.profile import GlucoseProfile
from scenario_modeler.utils.colors import PROFILE_COLORS, NEUTRAL_COLOR


class MatplotlibVisualizer:
    """Static matplotlib plots of hourly glucose profiles."""

    def __init__(self, config: Optional[ScenarioConfig] = None):
        self.config = config or ScenarioConfig()

    def plot_hourly_profiles(
        self,
        profiles: Dict[str, GlucoseProfile],
        title: Optional[str] = None,
    ) -> plt.Figure:
        """Plot named profiles over the 24 hours with the target band.

        Missing hours show as gaps.
        """
        viz = self.config.visualization
        fig, ax = plt.subplots(figsize=viz.figsize)

        hours = np.arange(24)
        ax.axhspan(TARGET_LOW, TARGET_HIGH, color='#22c55e', alpha=0.12, zorder=0)

        for name, profile in profiles.items():
            ax.plot(
                hours,
                profile.to_array(),
                marker='o',
                markersize=3,
                linewidth=2,
                color=PROFILE_COLORS.get(name, NEUTRAL_COLOR),
                label=profile.label or name,
            )

        ax.set_xlim(0, 23)
        ax.set_ylim(viz.chart_y_min, viz.chart_y_max)
        ax.set_xticks(range(0, 24, 3))
        ax.set_xticklabels([f"{h:02d}:00" for h in range(0, 24, 3)])
        ax.set_xlabel("Hour of day")
        ax.set_ylabel(f"Glucose ({GLUCOSE_UNIT})")
        ax.grid(alpha=0.2)
        ax.legend(loc='upper left', frameon=False)
        if title:
            ax.set_title(title)

        fig.tight_layout()
        return fig

    def save(self, fig: plt.Figure, path: Union[str, Path], dpi: int = 150) -> Path:
        path = Path(path)
        fig.savefig(path, dpi=dpi)
        plt.close(fig)
        return path
