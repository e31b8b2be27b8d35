from datetime import datetime
from decimal import Decimal

import pytest

from finance_tracker.exceptions import ValidationError
from finance_tracker.loader import load_transactions


def write_csv(tmp_path, text):
    path = tmp_path / "transactions.csv"
    path.write_text(text, encoding="utf-8-sig")
    return path


def test_load_transactions_parses_rows(tmp_path):
    path = write_csv(
        tmp_path,
        "Id,Title,Amount,Type,Date\n"
        "a1,Salary,2000,Income,2025-03-01\n"
        "\n"
        ",Coffee,3.20,expense,2025-03-02T08:15\n",
    )

    salary, coffee = load_transactions(path)

    assert salary.id == "a1"
    assert salary.amount == Decimal("2000")
    assert salary.is_expense is False
    assert salary.date == datetime(2025, 3, 1)
    assert coffee.id
    assert coffee.is_expense is True
    assert coffee.date == datetime(2025, 3, 2, 8, 15)


def test_load_transactions_empty_file(tmp_path):
    assert load_transactions(write_csv(tmp_path, "")) == []


def test_load_transactions_rejects_unknown_header(tmp_path):
    path = write_csv(tmp_path, "Date,Amount\n2025-03-01,10\n")
    with pytest.raises(ValidationError):
        load_transactions(path)


@pytest.mark.parametrize(
    "row",
    [
        "x,Rent,abc,Expense,2025-03-01",
        "x,Rent,10,Transfer,2025-03-01",
        "x,Rent,10,Expense,01/03/2025",
        "x,Rent,10,Expense,2025-03-01T10:00+02:00",
        "x,,10,Expense,2025-03-01",
        "x,Rent,10,Expense",
    ],
)
def test_load_transactions_reports_bad_rows(tmp_path, row):
    path = write_csv(tmp_path, "Id,Title,Amount,Type,Date\n" + row + "\n")
    with pytest.raises(ValidationError, match="Line 2"):
        load_transactions(path)


def test_load_transactions_rejects_repeated_ids(tmp_path):
    path = write_csv(
        tmp_path,
        "Id,Title,Amount,Type,Date\n"
        "1,Salary,100,Income,2025-03-01\n"
        "1,Bonus,20,Income,2025-03-02\n",
    )
    with pytest.raises(ValidationError, match="Line 3: duplicate Id '1'"):
        load_transactions(path)
