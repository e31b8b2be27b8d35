"""Helpers for importing transactions from a CSV export."""

from __future__ import annotations

import csv
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Tuple

from .exceptions import ValidationError
from .models import Transaction, new_transaction

logger = logging.getLogger(__name__)

CSV_HEADER = ["Id", "Title", "Amount", "Type", "Date"]

TRANSACTION_TYPES = {"income": False, "expense": True}


def _iter_clean_rows(path: Path) -> Iterator[Tuple[int, List[str]]]:
    with path.open(newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.reader(csvfile)
        for row in reader:
            if not any(field.strip() for field in row):
                continue
            yield reader.line_num, [field.strip() for field in row]


def parse_timestamp(raw: str) -> datetime:
    """Parse ``YYYY-MM-DD`` or an ISO date-time into a naive ``datetime``."""

    try:
        value = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise ValidationError(f"Invalid date: {raw!r}") from exc
    if value.tzinfo is not None:
        raise ValidationError(f"Dates must be local, without a UTC offset: {raw!r}")
    return value


def _parse_row(line_num: int, raw: List[str]) -> Transaction:
    if len(raw) != len(CSV_HEADER):
        raise ValidationError(
            f"Line {line_num}: expected {len(CSV_HEADER)} fields, got {len(raw)}"
        )
    record = dict(zip(CSV_HEADER, raw))
    kind = record["Type"].lower()
    if kind not in TRANSACTION_TYPES:
        raise ValidationError(f"Line {line_num}: unknown transaction type {record['Type']!r}")
    try:
        return new_transaction(
            record["Title"],
            record["Amount"],
            TRANSACTION_TYPES[kind],
            when=parse_timestamp(record["Date"]),
            transaction_id=record["Id"] or None,
        )
    except ValidationError as exc:
        raise ValidationError(f"Line {line_num}: {exc}") from exc


def load_transactions(path: str | Path) -> List[Transaction]:
    """Load transactions from a CSV file with an ``Id,Title,Amount,Type,Date`` header."""

    path = Path(path)
    rows = list(_iter_clean_rows(path))
    if not rows:
        return []

    (_, header), *data_rows = rows
    if header != CSV_HEADER:
        raise ValidationError(f"Unexpected CSV header: {','.join(header)}")

    transactions: List[Transaction] = []
    seen_ids = set()
    for line_num, raw in data_rows:
        transaction = _parse_row(line_num, raw)
        if transaction.id in seen_ids:
            raise ValidationError(f"Line {line_num}: duplicate Id {transaction.id!r}")
        seen_ids.add(transaction.id)
        transactions.append(transaction)
    logger.info("Loaded %d transactions from %s", len(transactions), path)
    return transactions
