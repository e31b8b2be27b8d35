from datetime import date, datetime
from decimal import Decimal

import pytest

from finance_tracker.models import Transaction

# A Wednesday.
TODAY = date(2025, 3, 19)


def make_transaction(**kwargs):
    base = dict(
        title="Entry",
        amount=Decimal("0"),
        is_expense=False,
        date=datetime(2025, 3, 19, 12, 0),
    )
    base.update(kwargs)
    if not isinstance(base["amount"], Decimal):
        base["amount"] = Decimal(str(base["amount"]))
    return Transaction(**base)


@pytest.fixture
def sample_transactions():
    """Transactions netting to exactly 150.00."""

    return [
        make_transaction(title="Salary", amount="200", date=datetime(2024, 1, 10, 8, 0)),
        make_transaction(title="Groceries", amount="75.50", is_expense=True, date=datetime(2025, 3, 18, 18, 45)),
        make_transaction(title="Refund", amount="25.50", date=datetime(2025, 3, 19, 9, 30)),
    ]
