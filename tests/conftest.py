# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Shared fixtures for fiscal-ledger tests."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from itertools import count

import pytest

from fiscal_ledger.ledger import Ledger
from fiscal_ledger.types import Budget, FinancialGoal, Transaction

# A Thursday; its week runs Monday 2026-10-19 to Sunday 2026-10-25.
TODAY = date(2026, 10, 22)

_ids = count(1)


def expense(
    amount: str | int,
    category: str = "Food",
    on: date = TODAY,
    description: str = "",
) -> Transaction:
    """Build an expense transaction with a unique id."""
    return Transaction(
        id=f"tx-{next(_ids)}",
        date=on,
        description=description,
        amount=Decimal(str(amount)),
        category=category,
        kind="expense",
    )


def income(amount: str | int, category: str = "Salary", on: date = TODAY) -> Transaction:
    """Build an income transaction with a unique id."""
    return Transaction(
        id=f"tx-{next(_ids)}",
        date=on,
        description="",
        amount=Decimal(str(amount)),
        category=category,
        kind="income",
    )


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def food_budget() -> Budget:
    """The monthly Food budget used throughout the admission scenarios."""
    return Budget(id="b-food", category="Food", limit=Decimal("500"), period="monthly")


@pytest.fixture
def laptop_goal() -> FinancialGoal:
    return FinancialGoal(
        id="g-laptop",
        description="Save for a new laptop",
        target_amount=Decimal("1200"),
        current_amount=Decimal("300"),
        deadline=date(2027, 1, 15),
    )


@pytest.fixture
def ledger() -> Ledger:
    """A Ledger with in-memory storage and a clock fixed at TODAY."""
    return Ledger(clock=lambda: TODAY)
