"""
Glucose Analyzer - summary metrics for a 24-hour profile.

All calculations follow international consensus guidelines where applicable.
Missing hours are excluded from every statistic, including the time-in-range
denominators.
"""

import numpy as np
from typing import Dict, Optional, Sequence, Union

from scenario_modeler.config import TARGET_LOW, TARGET_HIGH
from scenario_modeler.metrics.glucose_metrics import GlucoseMetrics
from scenario_modeler.profiles.profile import GlucoseProfile
from scenario_modeler.utils.statistics import (
    calculate_mean,
    calculate_cv,
    calculate_time_in_range,
    calculate_time_below,
    calculate_time_above,
    count_valid,
)


def calculate_a1c(mean_glucose: float) -> float:
    """Estimated A1c (%) from mean glucose in mmol/L.

    Evidence Tier: ADAG (Nathan et al., 2008)

    A1c = (mean_mmol × 18.05 + 46.7) / 28.7, where 18.05 folds the
    mmol/L to mg/dL conversion into the ADAG regression.
    """
    return (mean_glucose * 18.05 + 46.7) / 28.7


def calculate_gmi(mean_glucose: float) -> float:
    """Glucose Management Indicator (%) from mean glucose in mmol/L.

    Evidence Tier: CONSENSUS (Bergenstal et al., 2018, Diabetes Care)
    """
    return 3.31 + 0.4314 * mean_glucose


class GlucoseAnalyzer:
    """Analyzer for an hourly glucose profile.

    Accepts a GlucoseProfile or any numeric sequence with the same meaning.
    """

    def __init__(self, profile: Union[GlucoseProfile, Sequence[Optional[float]], np.ndarray]):
        """Initialize glucose analyzer.

        Args:
            profile: Hourly glucose values in mmol/L.
        """
        if isinstance(profile, GlucoseProfile):
            self.values = profile.to_array()
        else:
            self.values = np.array(
                [np.nan if v is None else v for v in profile],
                dtype=float,
            )
        self._metrics: Optional[GlucoseMetrics] = None

    @property
    def metrics(self) -> GlucoseMetrics:
        """Get computed metrics (calculates on first access)."""
        if self._metrics is None:
            self._metrics = self.analyze()
        return self._metrics

    def calculate_time_in_ranges(self) -> Dict[str, float]:
        """Calculate time in, below and above the 3.9-10.0 mmol/L target.

        Evidence Tier: CONSENSUS (ADA/EASD, Battelino 2019)

        Both bounds count as in range.

        Returns:
            Dictionary with percentage in each range.
        """
        return {
            'in_range': calculate_time_in_range(self.values, TARGET_LOW, TARGET_HIGH),
            'below': calculate_time_below(self.values, TARGET_LOW),
            'above': calculate_time_above(self.values, TARGET_HIGH),
        }

    def analyze(self) -> GlucoseMetrics:
        """Compute all metrics."""
        mean_glucose = calculate_mean(self.values)
        ranges = self.calculate_time_in_ranges()

        return GlucoseMetrics(
            mean=mean_glucose,
            estimated_a1c=calculate_a1c(mean_glucose),
            gmi=calculate_gmi(mean_glucose),
            time_in_range=ranges['in_range'],
            time_below_range=ranges['below'],
            time_above_range=ranges['above'],
            cv=calculate_cv(self.values),
            hours_counted=count_valid(self.values),
        )


def calculate_metrics(profile) -> GlucoseMetrics:
    """Metrics for a profile or numeric sequence."""
    return GlucoseAnalyzer(profile).analyze()
