# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Budget reconciliation: derive spent, remaining and percent-used for a
budget from the transaction log.

Nothing here is stored. Every call resolves the current period window from
``now`` and sums the matching expenses again, so two calls with the same
arguments always agree.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable

from fiscal_ledger.period import MONDAY, resolve_period
from fiscal_ledger.types import (
    HUNDRED,
    ZERO,
    Budget,
    BudgetStatus,
    PeriodWindow,
    Transaction,
)


def period_expenses(
    budget: Budget,
    transactions: Iterable[Transaction],
    window: PeriodWindow,
) -> list[Transaction]:
    """
    Select the expenses that count against ``budget`` inside ``window``.

    Category matching is exact string equality; income entries never count.
    """
    return [
        transaction
        for transaction in transactions
        if transaction.kind == "expense"
        and transaction.category == budget.category
        and window.contains(transaction.date)
    ]


def reconcile(
    budget: Budget,
    transactions: Iterable[Transaction],
    now: date | datetime,
    *,
    week_start: int = MONDAY,
) -> BudgetStatus:
    """
    Compare a budget's limit with what was spent in its current period.

    Args:
        budget: The budget to reconcile.
        transactions: The full transaction log (any order).
        now: Reference date selecting the current period.
        week_start: Weekday that opens a weekly period.

    Returns:
        A :class:`BudgetStatus`. ``remaining`` may be negative.
        ``percent_used`` is 0 for a zero limit rather than undefined.
    """
    window = resolve_period(budget.period, now, week_start=week_start)
    matching = period_expenses(budget, transactions, window)

    spent = sum((transaction.amount for transaction in matching), ZERO)
    percent_used = spent / budget.limit * HUNDRED if budget.limit > 0 else ZERO

    return BudgetStatus(
        budget=budget,
        window=window,
        spent=spent,
        remaining=budget.limit - spent,
        percent_used=percent_used,
        is_over_budget=spent > budget.limit,
    )


def reconcile_all(
    budgets: Iterable[Budget],
    transactions: Iterable[Transaction],
    now: date | datetime,
    *,
    week_start: int = MONDAY,
) -> list[BudgetStatus]:
    """
    Reconcile every budget, sorted by ``percent_used`` descending
    (most constrained first).
    """
    log = list(transactions)
    return sorted(
        (reconcile(budget, log, now, week_start=week_start) for budget in budgets),
        key=lambda status: status.percent_used,
        reverse=True,
    )
