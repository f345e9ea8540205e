"""
Catalog of named baseline profiles.

The empirical profiles were produced offline by ``analyze_glucose.py``
from a quarter of CGM readings (Oct-Dec 2025) and transcribed here.
"""

from typing import Dict, Optional, Sequence, Tuple

from scenario_modeler.config import ScenarioConfig
from scenario_modeler.profiles.profile import GlucoseProfile


# Realistic type 1 pattern: dawn rise, then breakfast, lunch and dinner spikes.
# Mean ~7.6 mmol/L -> A1c ~6.4%
DEFAULT_BASELINE: Tuple[float, ...] = (
    6.2,   # 00:00
    6.0,   # 01:00
    5.8,   # 02:00
    5.7,   # 03:00
    5.9,   # 04:00 - dawn phenomenon begins
    6.4,   # 05:00
    7.0,   # 06:00
    7.8,   # 07:00 - waking, pre-breakfast rise
    9.5,   # 08:00 - breakfast spike
    10.2,  # 09:00 - peak
    8.8,   # 10:00
    7.5,   # 11:00
    7.0,   # 12:00 - pre-lunch
    8.5,   # 13:00 - lunch spike
    9.0,   # 14:00 - peak
    7.8,   # 15:00
    7.0,   # 16:00
    6.8,   # 17:00
    7.2,   # 18:00 - pre-dinner
    9.2,   # 19:00 - dinner spike
    9.8,   # 20:00 - peak
    8.5,   # 21:00
    7.5,   # 22:00
    6.8,   # 23:00
)

Q4_AVERAGE: Tuple[float, ...] = (
    7.42, 7.21, 7.05, 6.98, 7.10, 7.55, 8.12, 8.64, 9.38, 9.91, 9.47, 8.83,
    8.41, 8.96, 9.52, 9.18, 8.57, 8.22, 8.35, 9.14, 9.73, 9.41, 8.62, 7.88,
)

Q4_BEST_10: Tuple[float, ...] = (
    6.41, 6.22, 6.05, 5.96, 6.03, 6.38, 6.84, 7.12, 7.66, 7.94, 7.58, 7.11,
    6.87, 7.32, 7.69, 7.41, 7.02, 6.78, 6.91, 7.48, 7.83, 7.52, 7.04, 6.62,
)

Q4_WORST_10: Tuple[float, ...] = (
    9.12, 8.94, 8.77, 8.71, 8.89, 9.43, 10.18, 10.92, 11.86, 12.47, 11.93, 11.05,
    10.51, 11.14, 11.78, 11.36, 10.64, 10.22, 10.38, 11.29, 12.06, 11.71, 10.73, 9.65,
)

# Hours where the improved-morning variant takes the best-decile values
MORNING_HOURS = range(5, 12)


def improved_morning(
    average: Sequence[float],
    best: Sequence[float],
    hours: Sequence[int] = MORNING_HOURS,
) -> Tuple[float, ...]:
    """Average day with the morning hours replaced by the best-decile ones."""
    hours = set(hours)
    return tuple(
        best[hour] if hour in hours else value
        for hour, value in enumerate(average)
    )


BASELINE_PROFILES: Dict[str, GlucoseProfile] = {
    'example': GlucoseProfile(DEFAULT_BASELINE, label="Example (well controlled)"),
    'q4_average': GlucoseProfile(Q4_AVERAGE, label="Q4 2025 Average"),
    'q4_best_10': GlucoseProfile(Q4_BEST_10, label="Q4 2025 Best 10% Days"),
    'q4_worst_10': GlucoseProfile(Q4_WORST_10, label="Q4 2025 Worst 10% Days"),
    'q4_improved_morning': GlucoseProfile(
        improved_morning(Q4_AVERAGE, Q4_BEST_10),
        label="Q4 2025 Average, Improved Mornings",
    ),
}

CUSTOM_KEY = 'custom'


def build_catalog(config: Optional[ScenarioConfig] = None) -> Dict[str, GlucoseProfile]:
    """Return the profile catalog, adding the custom baseline when configured.

    Raises:
        ValueError: If the configured custom baseline is not 24 non-negative values.
    """
    catalog = dict(BASELINE_PROFILES)

    if config is not None and config.app.custom_baseline is not None:
        catalog[CUSTOM_KEY] = GlucoseProfile(
            tuple(config.app.custom_baseline), label="Custom Baseline"
        )

    return catalog
