"""In-memory transaction collection backing the dashboard."""

from __future__ import annotations

import dataclasses
import logging
from decimal import Decimal
from typing import Iterator, List, Tuple

from .exceptions import TransactionNotFoundError, ValidationError
from .models import Transaction, new_transaction
from .series import net_balance

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"title", "amount", "is_expense", "date"})


class TransactionStore:
    """Ordered collection of transactions, newest submission first.

    Charts are never handed the store itself, only a :meth:`snapshot`.
    """

    def __init__(self, transactions: List[Transaction] | None = None) -> None:
        self._items: List[Transaction] = []
        for transaction in transactions or []:
            self._reject_duplicate(transaction)
            self._items.append(transaction)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._items)

    def __contains__(self, transaction_id: object) -> bool:
        return any(tx.id == transaction_id for tx in self._items)

    def _reject_duplicate(self, transaction: Transaction) -> None:
        if transaction.id in self:
            raise ValidationError(f"Duplicate transaction id: {transaction.id!r}")

    def _index(self, transaction_id: str) -> int:
        for idx, tx in enumerate(self._items):
            if tx.id == transaction_id:
                return idx
        raise TransactionNotFoundError(transaction_id)

    def get(self, transaction_id: str) -> Transaction:
        return self._items[self._index(transaction_id)]

    def add(self, transaction: Transaction) -> Transaction:
        self._reject_duplicate(transaction)
        self._items.insert(0, transaction)
        logger.debug("Added transaction %s", transaction.id)
        return transaction

    def update(self, transaction_id: str, **changes) -> Transaction:
        """Replace a transaction in place, keeping its id and position."""

        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f"Cannot edit fields: {', '.join(sorted(unknown))}")
        idx = self._index(transaction_id)
        existing = self._items[idx]
        merged = dataclasses.asdict(existing)
        merged.update(changes)
        replacement = new_transaction(
            merged["title"],
            merged["amount"],
            merged["is_expense"],
            when=merged["date"],
            transaction_id=existing.id,
        )
        self._items[idx] = replacement
        logger.debug("Updated transaction %s", transaction_id)
        return replacement

    def remove(self, transaction_id: str) -> Transaction:
        removed = self._items.pop(self._index(transaction_id))
        logger.debug("Removed transaction %s", transaction_id)
        return removed

    def clear(self) -> None:
        self._items.clear()
        logger.debug("Cleared all transactions")

    def recent(self) -> List[Transaction]:
        """Return transactions by date, latest first; ties keep store order."""

        return sorted(self._items, key=lambda tx: tx.date, reverse=True)

    def snapshot(self) -> Tuple[Transaction, ...]:
        return tuple(self._items)

    def total(self) -> Decimal:
        return net_balance(self._items)
