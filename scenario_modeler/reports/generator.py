"""
Report Generator - text and JSON reports for an aggregation run.
"""

import json
from typing import Optional, Dict, Any, List
from datetime import datetime

from scenario_modeler.analyzers.glucose import calculate_metrics
from scenario_modeler.config import ScenarioConfig
from scenario_modeler.metrics.daily_metrics import AggregationResult, DailyAggregate
from scenario_modeler.profiles.profile import GlucoseProfile


class ReportGenerator:
    """Generate reports from a DailyAggregator result.

    The text report lists counts, the date range, best and worst days, the
    hourly profiles as JSON, metrics per profile and a Python literal export
    of the profiles ready to paste into the profile catalog.
    """

    def __init__(self, config: Optional[ScenarioConfig] = None):
        """Initialize report generator.

        Args:
            config: Optional configuration.
        """
        self.config = config or ScenarioConfig()

    @property
    def decimals(self) -> int:
        return self.config.aggregation.report_decimals

    def _day_lines(self, days: List[DailyAggregate]) -> List[str]:
        return [f"  {day.date.isoformat()}: {day.mean:.{self.decimals}f} mmol/L" for day in days]

    def _metrics_line(self, profile: GlucoseProfile) -> str:
        m = calculate_metrics(profile)
        return (
            f"mean {m.mean:.{self.decimals}f} | A1c {m.estimated_a1c:.1f}% | GMI {m.gmi:.1f}% | "
            f"TIR {m.time_in_range:.0f}% | TBR {m.time_below_range:.0f}% | "
            f"TAR {m.time_above_range:.0f}% | CV {m.cv:.0f}%"
            + (f" ({m.hours_counted} of 24 hours)" if profile.has_missing else "")
        )

    def generate_text_report(self, result: AggregationResult) -> str:
        """Generate full text report.

        Args:
            result: Aggregation result.

        Returns:
            Formatted text report.
        """
        pct = f"{result.cohort_fraction:.0%}"
        lines = []
        lines.append("=" * 60)
        lines.append("GLUCOSE PROFILE REPORT")
        lines.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
        lines.append("=" * 60)
        lines.append("")

        lines.append(f"Total readings: {result.total_readings:,}")
        lines.append(f"Readings in date range: {result.filtered_readings:,}")
        lines.append(f"Days: {result.num_days}")

        if result.date_range is None:
            lines.append("No readings in the selected date range.")
            return "\n".join(lines)

        start, end = result.date_range
        lines.append(f"Date range: {start.isoformat()} to {end.isoformat()}")
        lines.append("")

        lines.append(f"Best {pct} days ({len(result.best_days)} days):")
        lines.extend(self._day_lines(result.best_days))
        lines.append("")
        lines.append(f"Worst {pct} days ({len(result.worst_days)} days):")
        lines.extend(self._day_lines(result.worst_days))
        lines.append("")

        lines.append("-" * 60)
        lines.append("PROFILES (24 hourly values, mmol/L)")
        lines.append("-" * 60)
        for profile in result.profiles.values():
            lines.append("")
            lines.append(f"{profile.label}:")
            lines.append(json.dumps(profile.to_list(self.decimals), indent=2))
        lines.append("")

        lines.append("-" * 60)
        lines.append("METRICS")
        lines.append("-" * 60)
        for profile in result.profiles.values():
            lines.append(f"{profile.label}: {self._metrics_line(profile)}")
        lines.append("")

        lines.append("-" * 60)
        lines.append("CATALOG EXPORT")
        lines.append("-" * 60)
        lines.append(self.export_literals(result.profiles))

        lines.append("=" * 60)
        return "\n".join(lines)

    def export_literals(self, profiles: Dict[str, GlucoseProfile]) -> str:
        """Python tuple literals for the profile catalog; missing hours stay None."""
        out = []
        for name, profile in profiles.items():
            values = ", ".join(
                "None" if v is None else f"{v:.{self.decimals}f}"
                for v in profile.values
            )
            out.append(f"{name.upper()}: Tuple[Optional[float], ...] = ({values})")
        return "\n".join(out)

    def to_dict(self, result: AggregationResult) -> Dict[str, Any]:
        """Structured form of the report."""
        date_range = result.date_range
        return {
            'total_readings': result.total_readings,
            'filtered_readings': result.filtered_readings,
            'num_days': result.num_days,
            'start_date': date_range[0].isoformat() if date_range else None,
            'end_date': date_range[1].isoformat() if date_range else None,
            'cohort_fraction': result.cohort_fraction,
            'best_days': [day.to_dict() for day in result.best_days],
            'worst_days': [day.to_dict() for day in result.worst_days],
            'profiles': {
                name: {
                    'label': profile.label,
                    'values': profile.to_list(self.decimals),
                    'metrics': calculate_metrics(profile).to_dict(),
                }
                for name, profile in result.profiles.items()
            },
        }

    def to_json(self, result: AggregationResult) -> str:
        return json.dumps(self.to_dict(result), indent=2)
