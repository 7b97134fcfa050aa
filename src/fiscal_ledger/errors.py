# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from decimal import Decimal


class FiscalLedgerError(Exception):
    """Base class for all fiscal-ledger errors."""

    def __init__(self, message: str, code: str = "LEDGER_ERROR") -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class InvalidAmountError(FiscalLedgerError, ValueError):
    """
    Raised when a monetary amount is negative, non-finite, or otherwise
    unusable for the requested operation.

    Attributes:
        amount: The rejected amount.
    """

    def __init__(self, amount: object, expectation: str = "non-negative and finite") -> None:
        super().__init__(
            f"Amount {amount!s} is invalid: must be {expectation}.",
            code="INVALID_AMOUNT",
        )
        self.amount = amount


class InvalidPeriodError(FiscalLedgerError):
    """Raised when an invalid budget period string is provided."""

    def __init__(self, value: str) -> None:
        from fiscal_ledger.types import PERIOD_VALUES

        super().__init__(
            f"'{value}' is not a valid budget period. "
            f"Valid values: {sorted(PERIOD_VALUES)}.",
            code="INVALID_PERIOD",
        )
        self.value = value


class DuplicateBudgetError(FiscalLedgerError):
    """
    Raised when a second budget is defined for the same category and period.

    Attributes:
        category: The budget category.
        period: The budget period.
        existing_id: The id of the budget already covering the pair.
    """

    def __init__(self, category: str, period: str, existing_id: str) -> None:
        super().__init__(
            f"A {period} budget for '{category}' already exists (id {existing_id!r}).",
            code="DUPLICATE_BUDGET",
        )
        self.category = category
        self.period = period
        self.existing_id = existing_id


class BudgetNotFoundError(FiscalLedgerError):
    """Raised when a referenced budget does not exist."""

    def __init__(self, budget_id: str) -> None:
        super().__init__(
            f"Budget {budget_id!r} does not exist. "
            "Create it first with Ledger.create_budget().",
            code="BUDGET_NOT_FOUND",
        )
        self.budget_id = budget_id


class GoalNotFoundError(FiscalLedgerError):
    """Raised when a referenced financial goal does not exist."""

    def __init__(self, goal_id: str) -> None:
        super().__init__(
            f"Financial goal {goal_id!r} does not exist.",
            code="GOAL_NOT_FOUND",
        )
        self.goal_id = goal_id


class TransactionNotFoundError(FiscalLedgerError):
    """Raised when removing a transaction id that is not in the log."""

    def __init__(self, transaction_id: str) -> None:
        super().__init__(
            f"Transaction {transaction_id!r} is not in the log.",
            code="TRANSACTION_NOT_FOUND",
        )
        self.transaction_id = transaction_id


class GoalAmountError(FiscalLedgerError, ValueError):
    """
    Raised when a write would move a goal's saved amount outside
    ``[0, target_amount]``.

    Attributes:
        goal_id: The goal being written.
        attempted: The saved amount the write would have produced.
        target: The goal's target amount.
    """

    def __init__(self, goal_id: str, attempted: Decimal, target: Decimal) -> None:
        super().__init__(
            f"Goal {goal_id!r}: saved amount {attempted} must stay between "
            f"0 and the target of {target}.",
            code="GOAL_AMOUNT_INVALID",
        )
        self.goal_id = goal_id
        self.attempted = attempted
        self.target = target


class UnknownCategoryError(FiscalLedgerError):
    """Raised when a category is not registered and enforcement is enabled."""

    def __init__(self, category: str, kind: str) -> None:
        super().__init__(
            f"'{category}' is not a registered {kind} category.",
            code="UNKNOWN_CATEGORY",
        )
        self.category = category
        self.kind = kind


class DuplicateIdError(FiscalLedgerError):
    """
    Raised when a create call supplies an id that is already in use.

    Attributes:
        kind: ``"budget"`` or ``"goal"``.
        record_id: The id already in use.
    """

    def __init__(self, kind: str, record_id: str) -> None:
        super().__init__(
            f"A {kind} with id {record_id!r} already exists.",
            code="DUPLICATE_ID",
        )
        self.kind = kind
        self.record_id = record_id
