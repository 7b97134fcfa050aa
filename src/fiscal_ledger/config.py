# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

from fiscal_ledger.types import Period

DEFAULT_EXPENSE_CATEGORIES: tuple[str, ...] = (
    "Food",
    "Transport",
    "Entertainment",
    "Utilities",
    "Shopping",
    "Health",
    "Other",
)

DEFAULT_INCOME_CATEGORIES: tuple[str, ...] = (
    "Salary",
    "Freelance",
    "Investment",
    "Gift",
    "Other",
)


class LedgerConfig(BaseModel, frozen=True):
    """
    Configuration for the :class:`~fiscal_ledger.ledger.Ledger` facade.

    All fields are optional; defaults reproduce the behaviour of the
    reference personal-finance application.

    Attributes:
        admission_periods: Budget periods that take part in payment
            admission. Only monthly budgets gate payments by default;
            add ``'weekly'`` or ``'yearly'`` to widen the check.
        week_start: Weekday that opens a weekly period, using
            :meth:`datetime.date.weekday` numbering (0 is Monday).
        allow_override: When True, :meth:`Ledger.make_payment` records a
            payment even if admission rejected it, logging a warning.
        enforce_categories: When True, every transaction, budget and payment
            category must appear in the matching registry below.
        expense_categories: Registered expense category labels.
        income_categories: Registered income category labels.
        currency_symbol: Prefix used in human-readable messages.

    Example::

        config = LedgerConfig(admission_periods=("weekly", "monthly"))
        ledger = Ledger(config=config)
    """

    admission_periods: tuple[Period, ...] = ("monthly",)
    week_start: Annotated[int, Field(ge=0, le=6)] = 0
    allow_override: bool = False
    enforce_categories: bool = False
    expense_categories: tuple[str, ...] = DEFAULT_EXPENSE_CATEGORIES
    income_categories: tuple[str, ...] = DEFAULT_INCOME_CATEGORIES
    currency_symbol: str = "$"
