"""Produce the figures shown on the finance dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Dict, Iterable, List, Sequence

from .models import GraphPoint, TimeFilter, Transaction
from .series import ChartType, aggregate, net_balance

DEFAULT_GOAL = Decimal("2000")


@dataclass(frozen=True)
class GoalProgress:
    balance: Decimal
    target: Decimal
    progress: float
    percentage: int


@dataclass(frozen=True)
class Dashboard:
    time_filter: TimeFilter
    balance: Decimal
    goal: GoalProgress
    series: Dict[ChartType, List[GraphPoint]]


def parse_goal(text: str | None) -> Decimal:
    """Parse a savings goal entered as text, falling back to ``1``."""

    try:
        goal = Decimal(str(text).strip())
    except (InvalidOperation, ValueError):
        return Decimal("1")
    return goal if goal.is_finite() else Decimal("1")


def goal_progress(balance: Decimal, target: Decimal) -> GoalProgress:
    """Return how far ``balance`` is towards ``target``.

    ``progress`` is clamped to ``[0, 1]`` for the ring; ``percentage`` is the
    truncated raw ratio and can be negative or exceed 100.
    """

    divisor = target if target else Decimal("1")
    ratio = balance / divisor
    return GoalProgress(
        balance=balance,
        target=target,
        progress=min(max(float(ratio), 0.0), 1.0),
        percentage=int(ratio * 100),
    )


def build_dashboard(
    transactions: Iterable[Transaction],
    time_filter: TimeFilter,
    goal: Decimal = DEFAULT_GOAL,
    today: date | None = None,
    chart_types: Sequence[ChartType] = tuple(ChartType),
) -> Dashboard:
    snapshot = tuple(transactions)
    today = today or date.today()
    balance = net_balance(snapshot)
    series = {
        chart_type: aggregate(snapshot, time_filter, chart_type.selector, today=today)
        for chart_type in chart_types
    }
    return Dashboard(
        time_filter=time_filter,
        balance=balance,
        goal=goal_progress(balance, goal),
        series=series,
    )
