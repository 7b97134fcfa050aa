# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Payment admission: decide whether a proposed payment fits inside the
budget for its category.

The check is read-only. It never appends the payment to the transaction
log; callers do that themselves after an admitted result.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Sequence

from fiscal_ledger.errors import InvalidAmountError
from fiscal_ledger.period import MONDAY
from fiscal_ledger.reconcile import reconcile
from fiscal_ledger.transaction import parse_amount
from fiscal_ledger.types import (
    PERIOD_ORDER,
    AdmissionResult,
    Budget,
    ProposedPayment,
    Transaction,
)

logger = logging.getLogger("fiscal_ledger")


def matching_budgets(
    category: str,
    budgets: Iterable[Budget],
    periods: Sequence[str] = ("monthly",),
) -> list[Budget]:
    """Budgets for ``category`` whose period takes part in admission, shortest period first."""
    selected = [b for b in budgets if b.category == category and b.period in periods]
    return sorted(selected, key=lambda budget: PERIOD_ORDER.index(budget.period))


def admit(
    proposed: ProposedPayment,
    budgets: Iterable[Budget],
    transactions: Iterable[Transaction],
    now: date | datetime,
    *,
    periods: Sequence[str] = ("monthly",),
    week_start: int = MONDAY,
    currency_symbol: str = "$",
) -> AdmissionResult:
    """
    Check whether a proposed payment would push its category over budget.

    Only budgets whose period is listed in ``periods`` are consulted.
    A category with no such budget is not restricted.

    Args:
        proposed: Category and amount of the payment.
        budgets: All configured budgets.
        transactions: The transaction log the budgets reconcile against.
        now: Reference date selecting each budget's current period.
        periods: Budget periods that gate payments.
        week_start: Weekday that opens a weekly period.
        currency_symbol: Prefix for amounts in the result message.

    Returns:
        An :class:`AdmissionResult`. A rejection is a normal outcome,
        not an exception.

    Raises:
        InvalidAmountError: If the proposed amount is negative or not finite.
    """
    amount = parse_amount(proposed.amount)
    if amount < 0:
        raise InvalidAmountError(proposed.amount)

    candidates = matching_budgets(proposed.category, budgets, periods)
    if not candidates:
        logger.debug("No budget gates category %r; payment admitted.", proposed.category)
        return AdmissionResult(
            admitted=True,
            reason="no_budget",
            message=f"No budget restricts '{proposed.category}'.",
            requested=amount,
        )

    log = list(transactions)
    statuses = [reconcile(budget, log, now, week_start=week_start) for budget in candidates]
    for status in statuses:
        budget = status.budget
        projected = status.spent + amount
        if projected > budget.limit:
            message = (
                f"Your {budget.period} budget for {budget.category} is "
                f"{_money(budget.limit, currency_symbol)}. You've already spent "
                f"{_money(status.spent, currency_symbol)}. This payment of "
                f"{_money(amount, currency_symbol)} would exceed your limit by "
                f"{_money(projected - budget.limit, currency_symbol)}."
            )
            logger.debug("Payment rejected: %s", message)
            return AdmissionResult(
                admitted=False,
                reason="exceeds_budget",
                message=message,
                requested=amount,
                projected_spent=projected,
                status=status,
            )

    # Report against the shortest gating period.
    status = statuses[0]
    projected = status.spent + amount
    return AdmissionResult(
        admitted=True,
        reason="within_budget",
        message=(
            f"{_money(amount, currency_symbol)} for {proposed.category} fits the budget: "
            f"{_money(projected, currency_symbol)} of "
            f"{_money(status.budget.limit, currency_symbol)} after payment."
        ),
        requested=amount,
        projected_spent=projected,
        status=status,
    )


def _money(value: Decimal, symbol: str) -> str:
    return f"{symbol}{value:,.2f}"
