"""
Glucose metrics dataclass.

Summary metrics for a single 24-hour profile, in mmol/L.
"""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class GlucoseMetrics:
    """Clinical summary of one glucose profile.

    Evidence Tiers:
    - Consensus: mean, gmi, time_in_range, time_below_range,
                 time_above_range, cv
    - ADAG regression: estimated_a1c
    """

    mean: float               # mmol/L
    estimated_a1c: float      # % (ADAG, Nathan 2008)
    gmi: float                # % (Bergenstal 2018)

    # Time in range percentages (3.9-10.0 mmol/L)
    time_in_range: float
    time_below_range: float   # <3.9
    time_above_range: float   # >10.0

    cv: float                 # Coefficient of variation (%)

    # Hours that contributed (missing hours are excluded)
    hours_counted: int = 24

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'mean_mmol_l': round(self.mean, 2),
            'estimated_a1c_percent': round(self.estimated_a1c, 1),
            'gmi_percent': round(self.gmi, 1),
            'time_in_range_pct': round(self.time_in_range, 0),
            'time_below_range_pct': round(self.time_below_range, 0),
            'time_above_range_pct': round(self.time_above_range, 0),
            'cv_percent': round(self.cv, 0),
            'hours_counted': self.hours_counted,
        }
