"""
Glucose profile value object.

A profile is 24 hourly glucose values in mmol/L, index 0 covering
00:00-01:00 and index 23 covering 23:00-00:00.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple

import numpy as np

from scenario_modeler.config import HOURS_PER_DAY


def _normalize(value) -> Optional[float]:
    if value is None:
        return None
    value = float(value)
    if math.isnan(value):
        return None
    return value


@dataclass(frozen=True)
class GlucoseProfile:
    """Immutable 24-hour glucose profile.

    Hours without data hold ``None``. NaN inputs are normalized to ``None``
    so that a missing hour is never confused with a real reading of 0.
    """
    values: Tuple[Optional[float], ...]
    label: str = ""

    def __post_init__(self):
        values = tuple(_normalize(v) for v in self.values)

        if len(values) != HOURS_PER_DAY:
            raise ValueError(
                f"A glucose profile needs {HOURS_PER_DAY} hourly values, got {len(values)}"
            )

        negative = [hour for hour, v in enumerate(values) if v is not None and v < 0]
        if negative:
            raise ValueError(f"Negative glucose values at hours {negative}")

        object.__setattr__(self, 'values', values)

    @classmethod
    def from_array(cls, values: Iterable, label: str = "") -> 'GlucoseProfile':
        """Build a profile from any iterable (list, numpy array, pandas Series)."""
        return cls(tuple(values), label=label)

    def to_array(self) -> np.ndarray:
        """Values as a float array with NaN for missing hours."""
        return np.array(
            [np.nan if v is None else v for v in self.values],
            dtype=float,
        )

    def to_list(self, decimals: Optional[int] = None) -> list:
        """Values as a plain list, optionally rounded. Missing hours stay None."""
        if decimals is None:
            return list(self.values)
        return [None if v is None else round(v, decimals) for v in self.values]

    def with_values(self, values: Sequence[Optional[float]], label: Optional[str] = None) -> 'GlucoseProfile':
        """Return a new profile with the given values, keeping the label by default."""
        return GlucoseProfile(tuple(values), label=self.label if label is None else label)

    def relabel(self, label: str) -> 'GlucoseProfile':
        return GlucoseProfile(self.values, label=label)

    @property
    def has_missing(self) -> bool:
        return any(v is None for v in self.values)

    @property
    def missing_hours(self) -> Tuple[int, ...]:
        return tuple(hour for hour, v in enumerate(self.values) if v is None)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, hour: int) -> Optional[float]:
        return self.values[hour]

    def __iter__(self) -> Iterator[Optional[float]]:
        return iter(self.values)
