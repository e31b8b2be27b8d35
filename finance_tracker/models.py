"""Data models used by the finance tracker."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional

from .exceptions import ValidationError


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Transaction:
    """A single income or expense entry."""

    title: str
    amount: Decimal
    is_expense: bool
    date: datetime
    id: str = field(default_factory=_new_id)

    @property
    def signed_amount(self) -> Decimal:
        """Return the amount as it affects the balance."""

        return -self.amount if self.is_expense else self.amount

    @property
    def day(self) -> date:
        return self.date.date()


@dataclass(frozen=True)
class GraphPoint:
    value: Decimal
    label: str
    bucket_date: date


class Granularity(Enum):
    DAY = "day"
    MONTH = "month"


class TimeFilter(Enum):
    """Selectable chart windows.

    ``ALL`` has no fixed granularity; it is decided from the data.
    """

    DAYS_7 = ("7 Days", Granularity.DAY)
    MONTHS_3 = ("3 Months", Granularity.DAY)
    YEAR_1 = ("1 Year", Granularity.MONTH)
    ALL = ("All", None)

    def __init__(self, label: str, granularity: Optional[Granularity]) -> None:
        self.label = label
        self.granularity = granularity


def parse_amount(raw: object) -> Decimal:
    """Parse ``raw`` into a non-negative ``Decimal`` amount."""

    try:
        amount = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid amount: {raw!r}") from exc
    if not amount.is_finite():
        raise ValidationError(f"Invalid amount: {raw!r}")
    if amount < 0:
        raise ValidationError(f"Amount must not be negative: {raw!r}")
    return amount


def new_transaction(
    title: str,
    amount: object,
    is_expense: bool,
    when: datetime | None = None,
    transaction_id: str | None = None,
) -> Transaction:
    """Build a validated transaction, as submitted from an editor form."""

    title = (title or "").strip()
    if not title:
        raise ValidationError("Transaction title must not be empty")
    if not isinstance(is_expense, bool):
        raise ValidationError(f"Expense flag must be True or False: {is_expense!r}")
    return Transaction(
        title=title,
        amount=parse_amount(amount),
        is_expense=is_expense,
        date=when or datetime.now(),
        id=transaction_id or _new_id(),
    )
