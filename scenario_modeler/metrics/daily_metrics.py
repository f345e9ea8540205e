"""
Per-day aggregates and the result of an aggregation run.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Any, List, Optional, Tuple

import pandas as pd

from scenario_modeler.profiles.profile import GlucoseProfile


@dataclass(frozen=True)
class DailyAggregate:
    """Readings observed on one calendar date and their mean.

    ``readings`` holds the rows of the readings DataFrame for that date
    (columns: timestamp, glucose_mmol_l, date, hour).
    """
    date: date
    mean: float
    readings: pd.DataFrame = field(repr=False, compare=False)

    @property
    def readings_count(self) -> int:
        return len(self.readings)

    @property
    def rank_key(self) -> Tuple[float, date]:
        """Ranking key: by mean, ties broken by ascending date."""
        return (self.mean, self.date)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'date': self.date.isoformat(),
            'mean_mmol_l': round(self.mean, 2),
            'readings': self.readings_count,
        }


@dataclass
class AggregationResult:
    """Output of a DailyAggregator run."""
    total_readings: int
    filtered_readings: int
    days: List[DailyAggregate] = field(default_factory=list)        # by date
    best_days: List[DailyAggregate] = field(default_factory=list)   # ascending mean
    worst_days: List[DailyAggregate] = field(default_factory=list)  # ascending mean
    profiles: Dict[str, GlucoseProfile] = field(default_factory=dict)
    cohort_fraction: float = 0.10

    @property
    def num_days(self) -> int:
        return len(self.days)

    @property
    def date_range(self) -> Optional[Tuple[date, date]]:
        if not self.days:
            return None
        return (self.days[0].date, self.days[-1].date)
