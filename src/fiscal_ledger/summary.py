# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import Iterable

from fiscal_ledger.types import ZERO, LedgerSummary, PeriodWindow, Transaction


def expenses_by_category(transactions: Iterable[Transaction]) -> dict[str, Decimal]:
    """
    Total expense per category, largest first.
    Income entries are ignored.
    """
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for transaction in transactions:
        if transaction.kind == "expense":
            totals[transaction.category] += transaction.amount
    return dict(sorted(totals.items(), key=lambda item: item[1], reverse=True))


def summarize(
    transactions: Iterable[Transaction],
    window: PeriodWindow | None = None,
) -> LedgerSummary:
    """
    Summarise income, expenses and net balance.

    When ``window`` is given only transactions dated inside it are counted.
    """
    selected = [
        transaction
        for transaction in transactions
        if window is None or window.contains(transaction.date)
    ]
    total_income = sum((t.amount for t in selected if t.kind == "income"), ZERO)
    total_expense = sum((t.amount for t in selected if t.kind == "expense"), ZERO)

    return LedgerSummary(
        total_income=total_income,
        total_expense=total_expense,
        net=total_income - total_expense,
        transaction_count=len(selected),
        expenses_by_category=expenses_by_category(selected),
        window=window,
    )
