"""
Statistical utilities for glucose profiles.

Every function drops missing values (NaN) before computing and returns 0.0
on empty input instead of raising.
"""

import numpy as np
import pandas as pd
from typing import Sequence, Union

ArrayLike = Union[np.ndarray, pd.Series, Sequence]


def _clean(values: ArrayLike) -> np.ndarray:
    """Convert to a float array with missing values removed."""
    values = np.array(
        [np.nan if v is None else v for v in values],
        dtype=float,
    )
    return values[~np.isnan(values)]


def calculate_mean(values: ArrayLike) -> float:
    """Arithmetic mean; 0.0 for empty input."""
    values = _clean(values)

    if len(values) == 0:
        return 0.0

    return float(np.mean(values))


def calculate_std(values: ArrayLike) -> float:
    """Population standard deviation (divide by N)."""
    values = _clean(values)

    if len(values) == 0:
        return 0.0

    return float(np.std(values, ddof=0))


def calculate_cv(values: ArrayLike) -> float:
    """Calculate coefficient of variation (CV).

    CV = (population standard deviation / mean) × 100

    Target: <36% per International Consensus (Battelino 2019).

    Args:
        values: Array of values.

    Returns:
        CV as a percentage, 0.0 when the mean is 0.
    """
    values = _clean(values)

    if len(values) == 0 or np.mean(values) == 0:
        return 0.0

    return float((np.std(values, ddof=0) / np.mean(values)) * 100)


def calculate_time_in_range(
    values: ArrayLike,
    lower: float,
    upper: float
) -> float:
    """Calculate percentage of values within a range.

    Args:
        values: Array of values.
        lower: Lower bound (inclusive).
        upper: Upper bound (inclusive).

    Returns:
        Percentage (0-100) of values within range.
    """
    values = _clean(values)

    if len(values) == 0:
        return 0.0

    in_range = np.sum((values >= lower) & (values <= upper))
    return float((in_range / len(values)) * 100)


def calculate_time_below(values: ArrayLike, threshold: float) -> float:
    """Percentage of values strictly below threshold."""
    values = _clean(values)

    if len(values) == 0:
        return 0.0

    return float((np.sum(values < threshold) / len(values)) * 100)


def calculate_time_above(values: ArrayLike, threshold: float) -> float:
    """Percentage of values strictly above threshold."""
    values = _clean(values)

    if len(values) == 0:
        return 0.0

    return float((np.sum(values > threshold) / len(values)) * 100)


def count_valid(values: ArrayLike) -> int:
    """Number of non-missing values."""
    return int(len(_clean(values)))
