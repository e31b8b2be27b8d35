"""Command line entry point for printing and exporting dashboard charts."""

from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path
from typing import Iterable

from .dashboard import DEFAULT_GOAL, build_dashboard, parse_goal
from .excel import export_dashboard
from .exceptions import FinanceTrackerError
from .formatting import format_dashboard
from .loader import load_transactions
from .logger import configure_logging
from .models import TimeFilter
from .series import ChartType

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _time_filter(raw: str) -> TimeFilter:
    try:
        return TimeFilter[raw.upper()]
    except KeyError:
        choices = ", ".join(f.name.lower() for f in TimeFilter)
        raise argparse.ArgumentTypeError(f"invalid filter {raw!r} (choose from {choices})")


def _chart_type(raw: str) -> ChartType:
    try:
        return ChartType[raw.upper()]
    except KeyError:
        choices = ", ".join(c.name.lower() for c in ChartType)
        raise argparse.ArgumentTypeError(f"invalid chart {raw!r} (choose from {choices})")


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Show running balance, savings and expense series for a "
            "transactions CSV export."
        )
    )
    parser.add_argument(
        "csv_path",
        nargs="?",
        default="transactions.csv",
        help="Path to the transactions CSV (Id,Title,Amount,Type,Date).",
    )
    parser.add_argument(
        "--filter",
        dest="time_filter",
        type=_time_filter,
        default=TimeFilter.DAYS_7,
        help="Time window: days_7, months_3, year_1 or all (default: days_7).",
    )
    parser.add_argument(
        "--chart",
        dest="charts",
        type=_chart_type,
        action="append",
        help="Chart to include: balance, savings or expenses. Repeatable; defaults to all.",
    )
    parser.add_argument(
        "--as-of",
        type=date.fromisoformat,
        help="Override the date treated as today.",
    )
    parser.add_argument(
        "--goal",
        default=str(DEFAULT_GOAL),
        help=f"Saving goal used for the progress figure (default: {DEFAULT_GOAL}).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the tables to the specified file instead of printing to stdout.",
    )
    parser.add_argument(
        "--excel-output",
        type=Path,
        help="Also write the series and line charts to this .xlsx workbook.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging verbosity (default: WARNING).",
    )
    return parser.parse_args(argv)


def run(argv: Iterable[str] | None = None) -> str:
    args = parse_args(argv)
    configure_logging(args.log_level)

    csv_path = Path(args.csv_path)
    if not csv_path.exists():
        raise SystemExit(f"CSV file not found: {csv_path}")

    try:
        transactions = load_transactions(csv_path)
    except FinanceTrackerError as exc:
        raise SystemExit(f"Failed to read {csv_path}: {exc}")
    if not transactions:
        raise SystemExit(f"No transactions found in {csv_path}")

    chart_types = list(dict.fromkeys(args.charts or ChartType))
    dashboard = build_dashboard(
        transactions,
        args.time_filter,
        goal=parse_goal(args.goal),
        today=args.as_of,
        chart_types=chart_types,
    )
    output_text = format_dashboard(dashboard, chart_types) + "\n"

    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)

    if args.excel_output:
        export_dashboard(dashboard, args.excel_output)
    return output_text


def main() -> None:
    run()


if __name__ == "__main__":
    main()
