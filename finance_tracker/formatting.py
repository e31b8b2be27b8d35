"""Utility helpers for turning chart series into text tables."""

from __future__ import annotations

from typing import Iterable, Sequence

from .dashboard import Dashboard
from .models import GraphPoint
from .series import ChartType


def _column_widths(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> Sequence[int]:
    widths = [len(h) for h in headers]
    for row in rows:
        for idx, cell in enumerate(row):
            widths[idx] = max(widths[idx], len(cell))
    return widths


def _format_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    widths = _column_widths(headers, rows)

    def format_row(row: Sequence[str]) -> str:
        return " | ".join(cell.ljust(widths[idx]) for idx, cell in enumerate(row))

    lines = [format_row(headers), "-+-".join("-" * w for w in widths)]
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def format_series(points: Iterable[GraphPoint]) -> str:
    data_rows = [
        [f"{point.bucket_date:%Y-%m-%d}", point.label, f"{point.value:,.2f}"]
        for point in points
    ]
    return _format_table(["Date", "Label", "Value"], data_rows)


def format_dashboard(
    dashboard: Dashboard, chart_types: Iterable[ChartType] | None = None
) -> str:
    goal = dashboard.goal
    lines = [
        f"Balance: {dashboard.balance:,.2f}",
        f"Saving Goal: {goal.target:,.2f} ({goal.percentage}%)",
        f"Window: {dashboard.time_filter.label}",
    ]
    for chart_type in chart_types or dashboard.series.keys():
        lines.append("")
        lines.append(chart_type.title)
        lines.append(format_series(dashboard.series[chart_type]))
    return "\n".join(lines)
