"""Utilities for working with chart periods and their calendar axes."""

from __future__ import annotations

import calendar
import logging
from datetime import date, datetime, time, timedelta
from typing import Callable, List, NoReturn, Optional, Sequence

from .exceptions import UnknownFilterError
from .models import Granularity, TimeFilter, Transaction

logger = logging.getLogger(__name__)

ALL_MONTH_THRESHOLD_DAYS = 90


def first_day_of_month(day: date) -> date:
    return day.replace(day=1)


def last_day_of_month(day: date) -> date:
    """Return the last calendar day of the month containing ``day``."""

    return day.replace(day=calendar.monthrange(day.year, day.month)[1])


def shift_months(day: date, months: int) -> date:
    """Move ``day`` by ``months`` calendar months, clamping the day of month."""

    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    return date(year, month, min(day.day, calendar.monthrange(year, month)[1]))


def earliest_date(transactions: Sequence[Transaction]) -> Optional[date]:
    if not transactions:
        return None
    return min(tx.day for tx in transactions)


def resolve_granularity(
    time_filter: TimeFilter,
    transactions: Sequence[Transaction],
    today: date,
) -> Granularity:
    """Return the bucket size for ``time_filter``.

    Fixed filters carry their own granularity. ``ALL`` switches to months once
    the earliest transaction is more than ``ALL_MONTH_THRESHOLD_DAYS`` old.
    """

    if time_filter.granularity is not None:
        return time_filter.granularity
    first = earliest_date(transactions) or today
    if (today - first).days > ALL_MONTH_THRESHOLD_DAYS:
        return Granularity.MONTH
    return Granularity.DAY


def _trailing_days(today: date, count: int) -> List[date]:
    return [today - timedelta(days=offset) for offset in range(count - 1, -1, -1)]


def _days_7_axis(transactions: Sequence[Transaction], today: date) -> List[date]:
    return _trailing_days(today, 7)


def _months_3_axis(transactions: Sequence[Transaction], today: date) -> List[date]:
    return _trailing_days(today, 91)


def _year_1_axis(transactions: Sequence[Transaction], today: date) -> List[date]:
    this_month = first_day_of_month(today)
    return [
        last_day_of_month(shift_months(this_month, -offset))
        for offset in range(11, -1, -1)
    ]


def _all_axis(transactions: Sequence[Transaction], today: date) -> List[date]:
    first = earliest_date(transactions)
    if first is None:
        return [today]
    # Transactions dated in the future do not move the axis past today.
    first = min(first, today)

    if resolve_granularity(TimeFilter.ALL, transactions, today) is Granularity.DAY:
        return [first + timedelta(days=offset) for offset in range((today - first).days + 1)]

    axis: List[date] = []
    month = first_day_of_month(first)
    last_month = first_day_of_month(today)
    while month <= last_month:
        axis.append(last_day_of_month(month))
        month = shift_months(month, 1)
    # Unreachable in practice: the current month end is never before today.
    if axis[-1] < today:
        axis.append(today)
    return axis


AxisBuilder = Callable[[Sequence[Transaction], date], List[date]]


def _unknown_filter(time_filter: NoReturn) -> NoReturn:
    # Typed ``NoReturn`` so a type checker flags any TimeFilter left unhandled.
    raise UnknownFilterError(f"No axis defined for time filter {time_filter!r}")


def _axis_builder(time_filter: TimeFilter) -> AxisBuilder:
    if time_filter is TimeFilter.DAYS_7:
        return _days_7_axis
    if time_filter is TimeFilter.MONTHS_3:
        return _months_3_axis
    if time_filter is TimeFilter.YEAR_1:
        return _year_1_axis
    if time_filter is TimeFilter.ALL:
        return _all_axis
    _unknown_filter(time_filter)


def build_axis(
    time_filter: TimeFilter,
    transactions: Sequence[Transaction],
    today: date | None = None,
) -> List[date]:
    """Return the ascending bucket dates making up the x-axis for ``time_filter``."""

    today = today or date.today()
    axis = _axis_builder(time_filter)(transactions, today)
    logger.debug("Built %d bucket axis for %s", len(axis), time_filter.name)
    return axis


def window_start(axis: Sequence[date], granularity: Granularity) -> datetime:
    """Return the instant the first bucket of ``axis`` begins."""

    first = axis[0]
    if granularity is Granularity.MONTH:
        first = first_day_of_month(first)
    return datetime.combine(first, time.min)
