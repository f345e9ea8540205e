"""
Color utilities for glucose profile charts.
"""

from typing import Optional

from scenario_modeler.config import GlucoseThresholds, TARGET_LOW, TARGET_HIGH


# =============================================================================
# SERIES COLORS
# =============================================================================

BASELINE_COLOR = '#9ca3af'     # gray, dashed
COMPARISON_COLOR = '#9333ea'   # purple
SCENARIO_COLOR = '#3b82f6'     # blue

TARGET_BAND_COLOR = 'rgba(34, 197, 94, 0.12)'
TARGET_LINE_COLOR = 'rgba(34, 197, 94, 0.4)'
THRESHOLD_LINE_COLOR = 'rgba(220, 38, 38, 0.5)'  # hypo/hyper reference lines

# Hourly profile colors for the offline report plot
PROFILE_COLORS = {
    'average': '#6366f1',
    'best': '#10b981',
    'worst': '#ef4444',
}

# Missing hours and unnamed profiles
NEUTRAL_COLOR = '#6b7280'


def get_glucose_color(
    value: Optional[float],
    thresholds: Optional[GlucoseThresholds] = None
) -> str:
    """Get color for a glucose value (mmol/L).

    Args:
        value: Glucose value in mmol/L, or None for a missing hour.
        thresholds: Optional custom thresholds. Uses defaults if None.

    Returns:
        Hex color string.
    """
    if thresholds is None:
        thresholds = GlucoseThresholds()

    if value is None:
        return NEUTRAL_COLOR
    if value < thresholds.hypo:
        return '#8B0000'  # Dark red - level 2 hypoglycemia
    elif value < TARGET_LOW:
        return '#FF6B6B'  # Red - hypoglycemia
    elif value <= TARGET_HIGH:
        return '#6BCB77'  # Green - in range
    elif value <= thresholds.hyper:
        return '#FF8C00'  # Orange - high
    else:
        return '#8B0000'  # Dark red - very high
