from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from openpyxl import Workbook
from openpyxl.chart import LineChart, Reference
from openpyxl.worksheet.worksheet import Worksheet

from .dashboard import Dashboard
from .models import GraphPoint
from .series import ChartType

logger = logging.getLogger(__name__)

SERIES_HEADER = ["Date", "Label", "Value"]

SHEET_NAMES = {
    ChartType.BALANCE: "Balance",
    ChartType.SAVINGS: "Savings",
    ChartType.EXPENSES: "Expenses",
}


def _write_summary(ws: Worksheet, dashboard: Dashboard) -> None:
    goal = dashboard.goal
    ws.append(["Window", dashboard.time_filter.label])
    ws.append(["Balance", float(dashboard.balance)])
    ws.append(["Saving Goal", float(goal.target)])
    ws.append(["Progress", goal.progress])
    ws.append(["Percentage", goal.percentage])
    ws["B4"].number_format = "0%"
    ws.column_dimensions["A"].width = 14


def _write_series(
    ws: Worksheet, chart_type: ChartType, points: Sequence[GraphPoint], window_label: str
) -> None:
    ws.append(SERIES_HEADER)
    for point in points:
        ws.append([point.bucket_date, point.label, float(point.value)])
    for row in ws.iter_rows(min_row=2, max_col=1):
        row[0].number_format = "yyyy-mm-dd"
    ws.column_dimensions["A"].width = 12

    chart = LineChart()
    chart.title = f"{chart_type.expanded_title} ({window_label})"
    chart.y_axis.title = "Value"
    chart.legend = None
    values = Reference(ws, min_col=3, min_row=1, max_row=ws.max_row)
    labels = Reference(ws, min_col=2, min_row=2, max_row=ws.max_row)
    chart.add_data(values, titles_from_data=True)
    chart.set_categories(labels)
    ws.add_chart(chart, "E2")


def export_dashboard(dashboard: Dashboard, output_path: str | Path) -> Path:
    """Write every series of ``dashboard`` to an ``.xlsx`` workbook with line charts."""

    output_path = Path(output_path)
    wb = Workbook()
    summary = wb.active
    summary.title = "Summary"
    _write_summary(summary, dashboard)

    for chart_type, points in dashboard.series.items():
        ws = wb.create_sheet(SHEET_NAMES[chart_type])
        _write_series(ws, chart_type, points, dashboard.time_filter.label)

    wb.save(str(output_path))
    logger.info("Wrote %d chart sheets to %s", len(dashboard.series), output_path)
    return output_path
