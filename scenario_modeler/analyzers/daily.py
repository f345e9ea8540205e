"""
Daily Aggregator - per-day means, best/worst cohorts and hourly profiles.

Works on the readings DataFrame produced by the loaders (columns:
timestamp, glucose_mmol_l, date, hour). Calendar date and hour of day come
from the same local clock.
"""

import logging
import math
from datetime import date
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from scenario_modeler.config import HOURS_PER_DAY, ScenarioConfig
from scenario_modeler.metrics.daily_metrics import AggregationResult, DailyAggregate
from scenario_modeler.profiles.profile import GlucoseProfile

logger = logging.getLogger(__name__)

PROFILE_AVERAGE = 'average'
PROFILE_BEST = 'best'
PROFILE_WORST = 'worst'


def cohort_size(num_days: int, fraction: float) -> int:
    """Days per cohort: num_days × fraction, rounded up."""
    return math.ceil(num_days * fraction)


def rank_days(days: Sequence[DailyAggregate]) -> List[DailyAggregate]:
    """Days ordered by ascending mean, ties by ascending date."""
    return sorted(days, key=lambda day: day.rank_key)


def hourly_profile(days: Sequence[DailyAggregate], label: str = "") -> GlucoseProfile:
    """Mean of every reading per hour of day across a cohort.

    Hours without any reading in the cohort are None.
    """
    frames = [day.readings for day in days if len(day.readings)]

    if not frames:
        return GlucoseProfile((None,) * HOURS_PER_DAY, label=label)

    readings = pd.concat(frames, ignore_index=True)
    by_hour = (
        readings.groupby('hour')['glucose_mmol_l']
        .mean()
        .reindex(range(HOURS_PER_DAY))
    )
    return GlucoseProfile.from_array(by_hour.to_numpy(dtype=float), label=label)


class DailyAggregator:
    """Aggregates raw readings into days, cohorts and hourly profiles."""

    def __init__(
        self,
        readings: pd.DataFrame,
        config: Optional[ScenarioConfig] = None
    ):
        """Initialize aggregator.

        Args:
            readings: DataFrame with timestamp, glucose_mmol_l, date, hour.
            config: Optional configuration. Uses defaults if None.
        """
        self.readings = readings.copy()
        self.config = config or ScenarioConfig()

    def filter_date_range(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> pd.DataFrame:
        """Readings whose calendar date is within [start, end]."""
        df = self.readings
        mask = pd.Series(True, index=df.index)

        if start is not None:
            mask &= df['date'] >= start
        if end is not None:
            mask &= df['date'] <= end

        return df[mask]

    def daily_aggregates(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[DailyAggregate]:
        """One DailyAggregate per date present, in date order."""
        df = self.filter_date_range(start, end)

        days = [
            DailyAggregate(
                date=day,
                mean=float(np.mean(group['glucose_mmol_l'].to_numpy(dtype=float))),
                readings=group.reset_index(drop=True),
            )
            for day, group in df.groupby('date', sort=True)
        ]
        return days

    def cohorts(
        self,
        days: Sequence[DailyAggregate],
        fraction: Optional[float] = None,
    ) -> Dict[str, List[DailyAggregate]]:
        """Best (lowest mean) and worst (highest mean) cohorts.

        Both have ceil(num_days × fraction) days and may overlap when that
        exceeds half the days. A fraction above 1 puts every day in both.
        Each list is in ascending mean order.
        """
        if fraction is None:
            fraction = self.config.aggregation.cohort_fraction

        ranked = rank_days(days)
        size = cohort_size(len(ranked), fraction)

        best = ranked[:size]
        worst = ranked[max(0, len(ranked) - size):] if size else []

        logger.debug("Cohorts of %d from %d days (fraction %.2f)", size, len(ranked), fraction)
        return {PROFILE_BEST: best, PROFILE_WORST: worst}

    def run(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
        fraction: Optional[float] = None,
    ) -> AggregationResult:
        """Full pipeline: filter, group, rank, profile."""
        if fraction is None:
            fraction = self.config.aggregation.cohort_fraction

        days = self.daily_aggregates(start, end)
        cohorts = self.cohorts(days, fraction)

        profiles = {
            PROFILE_AVERAGE: hourly_profile(days, label="Average"),
            PROFILE_BEST: hourly_profile(
                cohorts[PROFILE_BEST], label=f"Best {fraction:.0%} Days"
            ),
            PROFILE_WORST: hourly_profile(
                cohorts[PROFILE_WORST], label=f"Worst {fraction:.0%} Days"
            ),
        }

        for name, profile in profiles.items():
            if profile.has_missing:
                logger.warning(
                    "%s profile has no readings for hours %s", name, list(profile.missing_hours)
                )

        return AggregationResult(
            total_readings=len(self.readings),
            filtered_readings=sum(day.readings_count for day in days),
            days=days,
            best_days=cohorts[PROFILE_BEST],
            worst_days=cohorts[PROFILE_WORST],
            profiles=profiles,
            cohort_fraction=fraction,
        )
