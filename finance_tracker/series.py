"""Turn transactions into cumulative, calendar-aligned chart series."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Callable, Iterable, List, Sequence

from .models import Granularity, GraphPoint, TimeFilter, Transaction
from .periods import build_axis, resolve_granularity, window_start

logger = logging.getLogger(__name__)

ValueSelector = Callable[[Iterable[Transaction]], Decimal]

LABEL_DENSITY_THRESHOLD = 10

ZERO = Decimal("0")


def net_balance(transactions: Iterable[Transaction]) -> Decimal:
    return sum((tx.signed_amount for tx in transactions), ZERO)


def income_only(transactions: Iterable[Transaction]) -> Decimal:
    return sum((tx.amount for tx in transactions if not tx.is_expense), ZERO)


def expense_only(transactions: Iterable[Transaction]) -> Decimal:
    return sum((tx.amount for tx in transactions if tx.is_expense), ZERO)


class ChartType(Enum):
    """The three dashboard charts and the selector each one plots."""

    BALANCE = ("Net Balance", "Balance Over Time", net_balance)
    SAVINGS = ("Income & Savings", "Savings Growth", income_only)
    EXPENSES = ("Expenses", "Expense History", expense_only)

    def __init__(self, title: str, expanded_title: str, selector: ValueSelector) -> None:
        self.title = title
        self.expanded_title = expanded_title
        self.selector = selector


def bucket_label(day: date, granularity: Granularity, axis_length: int) -> str:
    """Return the tick label for a bucket, or ``""`` when no tick is drawn."""

    if granularity is Granularity.MONTH:
        return day.strftime("%b")
    if axis_length > LABEL_DENSITY_THRESHOLD:
        # Long day axes only mark the start of each week.
        return day.strftime("%d/%m") if day.weekday() == 0 else ""
    return day.strftime("%a")


def aggregate(
    transactions: Sequence[Transaction],
    time_filter: TimeFilter,
    value_selector: ValueSelector,
    today: date | None = None,
) -> List[GraphPoint]:
    """Return one cumulative point per bucket of ``time_filter``'s axis.

    Each value is ``value_selector`` applied to every transaction from the
    beginning of time through the end of that bucket: the window opens with
    the total of everything before it and keeps adding bucket by bucket.
    """

    today = today or date.today()
    transactions = tuple(transactions)
    granularity = resolve_granularity(time_filter, transactions, today)
    axis = build_axis(time_filter, transactions, today)

    start = window_start(axis, granularity)
    prior = [tx for tx in transactions if tx.date < start]
    current = [tx for tx in transactions if tx.date >= start]
    running_total = value_selector(prior)

    # Only the ALL window can end on a bucket inside a month it already covers.
    # That trailing bucket is never generated in practice, so the cap is inert.
    cap_month_buckets = time_filter is TimeFilter.ALL

    points: List[GraphPoint] = []
    for bucket in axis:
        if granularity is Granularity.MONTH:
            members = [
                tx
                for tx in current
                if tx.date.year == bucket.year
                and tx.date.month == bucket.month
                and not (cap_month_buckets and tx.day > bucket)
            ]
        else:
            members = [tx for tx in current if tx.day == bucket]
        running_total += value_selector(members)
        points.append(
            GraphPoint(
                value=running_total,
                label=bucket_label(bucket, granularity, len(axis)),
                bucket_date=bucket,
            )
        )

    logger.debug(
        "Aggregated %d transactions into %d %s buckets for %s",
        len(transactions),
        len(points),
        granularity.value,
        time_filter.name,
    )
    return points
