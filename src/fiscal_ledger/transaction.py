# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Callable, Iterable
from uuid import uuid4

from fiscal_ledger.errors import InvalidAmountError
from fiscal_ledger.types import Transaction, TransactionFilter, TransactionKind


def parse_amount(amount: Decimal | float | int | str) -> Decimal:
    """
    Convert a caller-supplied amount to an exact, finite Decimal.

    Floats go through their string form so 0.1 stays 0.1.

    Raises InvalidAmountError if the value is not a finite number.
    """
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation as exc:
        raise InvalidAmountError(amount, expectation="a number") from exc
    if not value.is_finite():
        raise InvalidAmountError(amount)
    return value


def build_transaction(
    description: str,
    amount: Decimal | float | int | str,
    category: str,
    kind: TransactionKind = "expense",
    on: date | None = None,
    *,
    clock: Callable[[], date] = date.today,
) -> Transaction:
    """
    Build a validated Transaction record with a fresh UUID.

    The date defaults to whatever ``clock`` reports, so callers that inject
    a fixed clock get reproducible records.

    Raises InvalidAmountError if amount is not positive and finite.
    """
    value = parse_amount(amount)
    if value <= 0:
        raise InvalidAmountError(amount, expectation="positive and finite")

    return Transaction(
        id=str(uuid4()),
        date=on if on is not None else clock(),
        description=description,
        amount=value,
        category=category,
        kind=kind,
    )


def filter_transactions(
    transactions: Iterable[Transaction],
    transaction_filter: TransactionFilter | None,
) -> list[Transaction]:
    """
    Apply an optional TransactionFilter to a sequence of transactions.
    All filter fields are AND-ed together.
    Returns a new list; the input is not modified.
    """
    if transaction_filter is None:
        return list(transactions)

    results: list[Transaction] = []
    for transaction in transactions:
        if (
            transaction_filter.category is not None
            and transaction.category != transaction_filter.category
        ):
            continue

        if transaction_filter.kind is not None and transaction.kind != transaction_filter.kind:
            continue

        if transaction_filter.since is not None and transaction.date < transaction_filter.since:
            continue

        if transaction_filter.until is not None and transaction.date > transaction_filter.until:
            continue

        if (
            transaction_filter.min_amount is not None
            and transaction.amount < transaction_filter.min_amount
        ):
            continue

        if (
            transaction_filter.max_amount is not None
            and transaction.amount > transaction_filter.max_amount
        ):
            continue

        results.append(transaction)

    return results
