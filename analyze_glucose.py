"""
Glucose Profile Analysis

Offline job that turns a CGM export into the hourly profiles used by the
scenario modeler's profile catalog:
- per-day means over a date range
- best and worst days by mean
- hourly profiles for all days, the best cohort and the worst cohort
- summary metrics for each profile
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from scenario_modeler.analyzers.daily import DailyAggregator
from scenario_modeler.config import load_config
from scenario_modeler.loaders import GlucoseReadingsLoader
from scenario_modeler.metrics.daily_metrics import AggregationResult
from scenario_modeler.reports import ReportGenerator

logger = logging.getLogger("analyze_glucose")


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected YYYY-MM-DD, got {value!r}")


def run_analysis(
    csv_path,
    start: Optional[date] = None,
    end: Optional[date] = None,
    fraction: Optional[float] = None,
    config=None,
) -> AggregationResult:
    """Load a CSV export and aggregate it."""
    config = config or load_config()

    loader = GlucoseReadingsLoader(csv_path, timezone=config.aggregation.timezone)
    readings = loader.load()
    logger.info(
        "Kept %d of %d rows from %s", len(readings), loader.raw_rows, csv_path
    )

    return DailyAggregator(readings, config).run(start, end, fraction)


# =============================================================================
# CLI Entry Point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Derive hourly glucose profiles from a CGM export'
    )
    parser.add_argument(
        'csv',
        type=str,
        help='Path to a timestamp,glucoseValue CSV export (mmol/L)'
    )
    parser.add_argument('--start', type=_parse_date, help='First date to include (YYYY-MM-DD)')
    parser.add_argument('--end', type=_parse_date, help='Last date to include (YYYY-MM-DD)')
    parser.add_argument(
        '--fraction', '-f',
        type=float,
        help='Share of days in the best/worst cohorts (default from config, 0.1)'
    )
    parser.add_argument('--config', '-c', type=str, help='Path to config.yaml')
    parser.add_argument(
        '--output', '-o',
        type=str,
        choices=['text', 'json'],
        default='text',
        help='Output format (default: text)'
    )
    parser.add_argument('--save', '-s', type=str, help='Save output to file')
    parser.add_argument('--plot', '-p', type=str, help='Save a PNG plot of the profiles')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line interface for profile analysis."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    if args.start and args.end and args.start > args.end:
        parser.error("--start must not be after --end")

    config = load_config(Path(args.config) if args.config else None)

    result = run_analysis(args.csv, args.start, args.end, args.fraction, config)

    report = ReportGenerator(config)
    if args.output == 'json':
        output_str = report.to_json(result)
    else:
        output_str = report.generate_text_report(result)

    if args.plot:
        # Imported here so text/json runs do not pay for matplotlib
        from scenario_modeler.visualizers.matplotlib_viz import MatplotlibVisualizer

        viz = MatplotlibVisualizer(config)
        fig = viz.plot_hourly_profiles(result.profiles, title="Hourly glucose profiles")
        viz.save(fig, args.plot)
        logger.info("Plot saved to %s", args.plot)

    if args.save:
        with open(args.save, 'w') as f:
            f.write(output_str)
        print(f"Output saved to {args.save}")
    else:
        print(output_str)

    return 0


if __name__ == '__main__':
    sys.exit(main())
