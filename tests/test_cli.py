from decimal import Decimal

import pytest

from finance_tracker.cli import parse_args, run
from finance_tracker.models import TimeFilter
from finance_tracker.series import ChartType


CSV_TEXT = (
    "Id,Title,Amount,Type,Date\n"
    "1,Salary,200,Income,2024-01-10T08:00\n"
    "2,Groceries,75.50,Expense,2025-03-18T18:45\n"
    "3,Refund,25.50,Income,2025-03-19T09:30\n"
)


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / "transactions.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")
    return path


def test_parse_args_defaults():
    args = parse_args([])
    assert args.time_filter is TimeFilter.DAYS_7
    assert args.charts is None
    assert args.goal == "2000"
    assert args.log_level == "WARNING"


def test_parse_args_accepts_lowercase_names():
    args = parse_args(["--filter", "year_1", "--chart", "savings", "--chart", "expenses"])
    assert args.time_filter is TimeFilter.YEAR_1
    assert args.charts == [ChartType.SAVINGS, ChartType.EXPENSES]


def test_parse_args_rejects_unknown_filter():
    with pytest.raises(SystemExit):
        parse_args(["--filter", "weekly"])


def test_run_writes_output_and_workbook(tmp_path, csv_path):
    output = tmp_path / "report.txt"
    workbook = tmp_path / "report.xlsx"

    text = run(
        [
            str(csv_path),
            "--as-of",
            "2025-03-19",
            "--goal",
            "300",
            "--output",
            str(output),
            "--excel-output",
            str(workbook),
        ]
    )

    assert output.read_text(encoding="utf-8") == text
    assert "Balance: 150.00" in text
    assert "Net Balance" in text
    assert "Income & Savings" in text
    assert workbook.exists()


def test_run_prints_when_no_output(capsys, csv_path):
    run([str(csv_path), "--as-of", "2025-03-19", "--chart", "balance", "--filter", "all"])
    out = capsys.readouterr().out
    assert "Window: All" in out
    assert "Expenses" not in out


def test_run_missing_file(tmp_path):
    with pytest.raises(SystemExit, match="CSV file not found"):
        run([str(tmp_path / "missing.csv")])


def test_run_reports_invalid_csv(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("Id,Title,Amount,Type,Date\n1,Rent,abc,Expense,2025-03-01\n", encoding="utf-8")
    with pytest.raises(SystemExit, match="Failed to read"):
        run([str(path)])


def test_run_rejects_export_without_transactions(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("Id,Title,Amount,Type,Date\n", encoding="utf-8")
    with pytest.raises(SystemExit, match="No transactions found"):
        run([str(path), "--as-of", "2025-03-19"])
