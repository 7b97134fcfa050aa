# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
fiscal-ledger: budget reconciliation and goal tracking for personal finance.

Quick start::

    from datetime import date
    from fiscal_ledger import Ledger

    ledger = Ledger(clock=lambda: date(2026, 10, 19))
    ledger.create_budget("Food", limit=500, period="monthly")
    ledger.record_transaction("Groceries", 480, "Food")

    result = ledger.check_payment("Food", 25)
    if result.admitted:
        ledger.record_transaction("Lunch", 25, "Food")
    else:
        print(result.message)

The pure functions underneath (``resolve_period``, ``reconcile``,
``evaluate_goal`` and ``admit``) take every input as an argument and can be
called without a Ledger.
"""

from fiscal_ledger.admission import admit, matching_budgets
from fiscal_ledger.config import (
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_INCOME_CATEGORIES,
    LedgerConfig,
)
from fiscal_ledger.errors import (
    BudgetNotFoundError,
    DuplicateBudgetError,
    DuplicateIdError,
    FiscalLedgerError,
    GoalAmountError,
    GoalNotFoundError,
    InvalidAmountError,
    InvalidPeriodError,
    TransactionNotFoundError,
    UnknownCategoryError,
)
from fiscal_ledger.goals import contribute, evaluate_goal, withdraw
from fiscal_ledger.ledger import Ledger
from fiscal_ledger.period import MONDAY, next_period_start, resolve_period
from fiscal_ledger.reconcile import period_expenses, reconcile, reconcile_all
from fiscal_ledger.storage import LedgerStorage, MemoryStorage
from fiscal_ledger.summary import expenses_by_category, summarize
from fiscal_ledger.transaction import build_transaction, filter_transactions, parse_amount
from fiscal_ledger.types import (
    PERIOD_VALUES,
    AdmissionReason,
    AdmissionResult,
    Budget,
    BudgetStatus,
    FinancialGoal,
    GoalStatus,
    LedgerSummary,
    Period,
    PeriodWindow,
    ProposedPayment,
    Transaction,
    TransactionFilter,
    TransactionKind,
)

__version__ = "0.1.0"

__all__ = [
    # Core class
    "Ledger",
    # Types
    "Period",
    "PERIOD_VALUES",
    "TransactionKind",
    "AdmissionReason",
    "Transaction",
    "TransactionFilter",
    "Budget",
    "FinancialGoal",
    "PeriodWindow",
    "BudgetStatus",
    "GoalStatus",
    "ProposedPayment",
    "AdmissionResult",
    "LedgerSummary",
    # Configuration
    "LedgerConfig",
    "DEFAULT_EXPENSE_CATEGORIES",
    "DEFAULT_INCOME_CATEGORIES",
    # Errors
    "FiscalLedgerError",
    "InvalidAmountError",
    "InvalidPeriodError",
    "DuplicateBudgetError",
    "DuplicateIdError",
    "BudgetNotFoundError",
    "GoalNotFoundError",
    "TransactionNotFoundError",
    "GoalAmountError",
    "UnknownCategoryError",
    # Storage
    "LedgerStorage",
    "MemoryStorage",
    # Pure functions
    "MONDAY",
    "resolve_period",
    "next_period_start",
    "reconcile",
    "reconcile_all",
    "period_expenses",
    "evaluate_goal",
    "contribute",
    "withdraw",
    "admit",
    "matching_budgets",
    "build_transaction",
    "filter_transactions",
    "parse_amount",
    "summarize",
    "expenses_by_category",
]
