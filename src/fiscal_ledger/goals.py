# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from fiscal_ledger.errors import GoalAmountError, InvalidAmountError
from fiscal_ledger.period import as_date
from fiscal_ledger.transaction import parse_amount
from fiscal_ledger.types import HUNDRED, ZERO, FinancialGoal, GoalStatus


def evaluate_goal(goal: FinancialGoal, now: date | datetime) -> GoalStatus:
    """
    Classify a goal's progress as of ``now``.

    A goal is overdue only while it is incomplete and ``now`` is strictly
    after the deadline; a goal without a deadline is never overdue.
    The goal itself is not modified.
    """
    today = as_date(now)
    target = goal.target_amount
    current = goal.current_amount

    if target > 0:
        percent_complete = min(current / target * HUNDRED, HUNDRED)
    else:
        percent_complete = ZERO

    is_complete = current >= target
    is_overdue = goal.deadline is not None and today > goal.deadline and not is_complete
    days_remaining = (goal.deadline - today).days if goal.deadline is not None else None

    return GoalStatus(
        goal=goal,
        percent_complete=percent_complete,
        is_complete=is_complete,
        is_overdue=is_overdue,
        remaining_amount=max(target - current, ZERO),
        days_remaining=days_remaining,
    )


def contribute(goal: FinancialGoal, amount: Decimal | float | int | str) -> FinancialGoal:
    """
    Return a copy of ``goal`` with ``amount`` added to its saved total.

    Raises:
        InvalidAmountError: If ``amount`` is negative or not finite.
        GoalAmountError: If the new total would exceed the target.
    """
    value = parse_amount(amount)
    if value < 0:
        raise InvalidAmountError(amount)
    return _with_current(goal, goal.current_amount + value)


def withdraw(goal: FinancialGoal, amount: Decimal | float | int | str) -> FinancialGoal:
    """
    Return a copy of ``goal`` with ``amount`` taken out of its saved total.

    Raises:
        InvalidAmountError: If ``amount`` is negative or not finite.
        GoalAmountError: If the new total would drop below zero.
    """
    value = parse_amount(amount)
    if value < 0:
        raise InvalidAmountError(amount)
    return _with_current(goal, goal.current_amount - value)


def _with_current(goal: FinancialGoal, current: Decimal) -> FinancialGoal:
    if current < 0 or current > goal.target_amount:
        raise GoalAmountError(goal.id, attempted=current, target=goal.target_amount)
    return FinancialGoal.model_validate({**goal.model_dump(), "current_amount": current})
