# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Callable
from uuid import uuid4

from fiscal_ledger.admission import admit
from fiscal_ledger.config import LedgerConfig
from fiscal_ledger.errors import (
    BudgetNotFoundError,
    DuplicateBudgetError,
    DuplicateIdError,
    GoalNotFoundError,
    InvalidAmountError,
    InvalidPeriodError,
    TransactionNotFoundError,
    UnknownCategoryError,
)
from fiscal_ledger.goals import contribute, evaluate_goal, withdraw
from fiscal_ledger.period import as_date, resolve_period
from fiscal_ledger.reconcile import reconcile, reconcile_all
from fiscal_ledger.storage.interface import LedgerStorage
from fiscal_ledger.storage.memory import MemoryStorage
from fiscal_ledger.summary import summarize
from fiscal_ledger.transaction import build_transaction, filter_transactions, parse_amount
from fiscal_ledger.types import (
    PERIOD_VALUES,
    AdmissionResult,
    Budget,
    BudgetStatus,
    FinancialGoal,
    GoalStatus,
    LedgerSummary,
    ProposedPayment,
    Transaction,
    TransactionFilter,
    TransactionKind,
)

logger = logging.getLogger("fiscal_ledger")

Clock = Callable[[], date]


class Ledger:
    """
    Application-facing facade over the transaction log, budgets and goals.

    Design contract
    ---------------
    - Budget spending is never stored. Every status is reconciled from the
      transaction log against the period containing ``clock()``.
    - ``check_payment()`` is read-only. ``make_payment()`` appends an expense
      only when the payment is admitted, unless the config allows override.
    - The clock and the storage are injected; nothing reads ambient state.
    - Not thread-safe. Serialising concurrent writers is the storage's job.

    Usage
    -----
    ::

        ledger = Ledger(clock=lambda: date(2026, 10, 19))
        ledger.create_budget("Food", limit=500, period="monthly")
        ledger.record_transaction("Groceries", 480, "Food")

        result = ledger.check_payment("Food", 25)
        assert result.admitted is False
    """

    def __init__(
        self,
        config: LedgerConfig | None = None,
        storage: LedgerStorage | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._config = config or LedgerConfig()
        self._storage: LedgerStorage = storage if storage is not None else MemoryStorage()
        self._clock: Clock = clock if clock is not None else date.today

    @property
    def config(self) -> LedgerConfig:
        return self._config

    def today(self) -> date:
        """The injected clock's current calendar date."""
        return as_date(self._clock())

    # ─── Transactions ─────────────────────────────────────────────────────────

    def record_transaction(
        self,
        description: str,
        amount: Decimal | float | int | str,
        category: str,
        kind: TransactionKind = "expense",
        on: date | None = None,
    ) -> Transaction:
        """
        Append a transaction to the log. The date defaults to today.

        Raises:
            InvalidAmountError: If ``amount`` is not positive.
            UnknownCategoryError: If category enforcement is on and the
                category is not registered for ``kind``.
        """
        self._require_category(category, kind)
        transaction = build_transaction(
            description=description,
            amount=amount,
            category=category,
            kind=kind,
            on=on,
            clock=self.today,
        )
        self._storage.append_transaction(transaction)
        logger.debug(
            "Recorded %s %s in %r on %s.",
            kind,
            transaction.amount,
            category,
            transaction.date.isoformat(),
        )
        return transaction

    def remove_transaction(self, transaction_id: str) -> None:
        """
        Delete a transaction from the log.

        Raises:
            TransactionNotFoundError: If no transaction has this id.
        """
        if not self._storage.remove_transaction(transaction_id):
            raise TransactionNotFoundError(transaction_id)
        logger.debug("Removed transaction %r.", transaction_id)

    def get_transactions(
        self,
        transaction_filter: TransactionFilter | None = None,
    ) -> list[Transaction]:
        """Return the transaction log, newest first, optionally filtered."""
        transactions = filter_transactions(self._storage.list_transactions(), transaction_filter)
        return sorted(transactions, key=lambda transaction: transaction.date, reverse=True)

    # ─── Budgets ──────────────────────────────────────────────────────────────

    def create_budget(
        self,
        category: str,
        limit: Decimal | float | int | str,
        period: str = "monthly",
        budget_id: str | None = None,
    ) -> Budget:
        """
        Create a budget for a category and period.

        Raises:
            DuplicateBudgetError: If a budget already covers the same
                category and period.
            DuplicateIdError: If ``budget_id`` is already in use.
            InvalidPeriodError: If ``period`` is not a recognised value.
            UnknownCategoryError: If category enforcement is on and the
                category is not a registered expense category.
            pydantic.ValidationError: If the limit is invalid.
        """
        if period not in PERIOD_VALUES:
            raise InvalidPeriodError(period)
        self._require_category(category, "expense")
        if budget_id is not None and self._storage.get_budget(budget_id) is not None:
            raise DuplicateIdError("budget", budget_id)
        budget = Budget(
            id=budget_id if budget_id is not None else str(uuid4()),
            category=category,
            limit=limit,
            period=period,
        )
        self._ensure_unique(budget)
        self._storage.save_budget(budget)
        logger.info("Created %s budget for %r with limit %s.", budget.period, category, budget.limit)
        return budget

    def update_budget(self, budget_id: str, **changes: Any) -> Budget:
        """
        Edit a budget's ``category``, ``limit`` or ``period``.

        Raises:
            BudgetNotFoundError: If ``budget_id`` does not exist.
            DuplicateBudgetError: If the edit collides with another budget.
            InvalidPeriodError: If a new ``period`` is not a recognised value.
            ValueError: If ``changes`` names any other field.
        """
        current = self._require_budget(budget_id)
        _reject_unknown_fields(changes, {"category", "limit", "period"})
        if "period" in changes and changes["period"] not in PERIOD_VALUES:
            raise InvalidPeriodError(changes["period"])
        updated = Budget.model_validate({**current.model_dump(), **changes})
        self._require_category(updated.category, "expense")
        self._ensure_unique(updated)
        self._storage.save_budget(updated)
        logger.info("Updated budget %r.", budget_id)
        return updated

    def delete_budget(self, budget_id: str) -> None:
        """Raises BudgetNotFoundError if ``budget_id`` does not exist."""
        if not self._storage.delete_budget(budget_id):
            raise BudgetNotFoundError(budget_id)
        logger.info("Deleted budget %r.", budget_id)

    def list_budgets(self) -> list[Budget]:
        return self._storage.list_budgets()

    def budget_status(self, budget_id: str) -> BudgetStatus:
        """
        Reconcile one budget against the current period.
        Raises BudgetNotFoundError if ``budget_id`` does not exist.
        """
        budget = self._require_budget(budget_id)
        return reconcile(
            budget,
            self._storage.list_transactions(),
            self.today(),
            week_start=self._config.week_start,
        )

    def budget_statuses(self) -> list[BudgetStatus]:
        """Reconcile every budget, most constrained first."""
        return reconcile_all(
            self._storage.list_budgets(),
            self._storage.list_transactions(),
            self.today(),
            week_start=self._config.week_start,
        )

    # ─── Goals ────────────────────────────────────────────────────────────────

    def create_goal(
        self,
        description: str,
        target_amount: Decimal | float | int | str,
        current_amount: Decimal | float | int | str = 0,
        deadline: date | None = None,
        goal_id: str | None = None,
    ) -> FinancialGoal:
        """
        Create a savings goal.

        Raises:
            DuplicateIdError: If ``goal_id`` is already in use.
            pydantic.ValidationError: If the description is blank, the target
                is not positive, or the saved amount is outside
                ``[0, target_amount]``.
        """
        if goal_id is not None and self._storage.get_goal(goal_id) is not None:
            raise DuplicateIdError("goal", goal_id)
        goal = FinancialGoal(
            id=goal_id if goal_id is not None else str(uuid4()),
            description=description,
            target_amount=target_amount,
            current_amount=current_amount,
            deadline=deadline,
        )
        self._storage.save_goal(goal)
        logger.info("Created goal %r with target %s.", goal.description, goal.target_amount)
        return goal

    def update_goal(self, goal_id: str, **changes: Any) -> FinancialGoal:
        """
        Edit a goal's ``description``, ``target_amount``, ``current_amount``
        or ``deadline``. Pass ``deadline=None`` to clear the deadline.

        Raises:
            GoalNotFoundError: If ``goal_id`` does not exist.
            ValueError: If ``changes`` names any other field.
            pydantic.ValidationError: If the edited goal is invalid.
        """
        current = self._require_goal(goal_id)
        _reject_unknown_fields(
            changes, {"description", "target_amount", "current_amount", "deadline"}
        )
        updated = FinancialGoal.model_validate({**current.model_dump(), **changes})
        self._storage.save_goal(updated)
        logger.info("Updated goal %r.", goal_id)
        return updated

    def contribute_to_goal(
        self,
        goal_id: str,
        amount: Decimal | float | int | str,
    ) -> FinancialGoal:
        """
        Add to a goal's saved amount. A negative amount withdraws.

        Raises:
            GoalNotFoundError: If ``goal_id`` does not exist.
            GoalAmountError: If the saved amount would leave ``[0, target]``.
        """
        goal = self._require_goal(goal_id)
        value = parse_amount(amount)
        updated = contribute(goal, value) if value >= 0 else withdraw(goal, -value)
        self._storage.save_goal(updated)
        logger.info(
            "Goal %r saved amount now %s of %s.",
            goal_id,
            updated.current_amount,
            updated.target_amount,
        )
        return updated

    def delete_goal(self, goal_id: str) -> None:
        """Raises GoalNotFoundError if ``goal_id`` does not exist."""
        if not self._storage.delete_goal(goal_id):
            raise GoalNotFoundError(goal_id)
        logger.info("Deleted goal %r.", goal_id)

    def list_goals(self) -> list[FinancialGoal]:
        return self._storage.list_goals()

    def goal_status(self, goal_id: str) -> GoalStatus:
        """Raises GoalNotFoundError if ``goal_id`` does not exist."""
        return evaluate_goal(self._require_goal(goal_id), self.today())

    def goal_statuses(self) -> list[GoalStatus]:
        today = self.today()
        return [evaluate_goal(goal, today) for goal in self._storage.list_goals()]

    # ─── Payments ─────────────────────────────────────────────────────────────

    def check_payment(
        self,
        category: str,
        amount: Decimal | float | int | str,
        description: str | None = None,
    ) -> AdmissionResult:
        """
        Check whether a payment fits the category's budget.

        This method is PURELY READ-ONLY. It does not record a transaction.

        Raises:
            InvalidAmountError: If ``amount`` is negative or not finite.
            UnknownCategoryError: If category enforcement is on and the
                category is not a registered expense category.
        """
        self._require_category(category, "expense")
        proposed = ProposedPayment(
            category=category,
            amount=parse_amount(amount),
            description=description,
        )
        result = admit(
            proposed,
            self._storage.list_budgets(),
            self._storage.list_transactions(),
            self.today(),
            periods=self._config.admission_periods,
            week_start=self._config.week_start,
            currency_symbol=self._config.currency_symbol,
        )
        logger.info(
            "Payment of %s for %r %s (%s).",
            proposed.amount,
            category,
            "admitted" if result.admitted else "rejected",
            result.reason,
        )
        return result

    def make_payment(
        self,
        category: str,
        amount: Decimal | float | int | str,
        description: str | None = None,
    ) -> tuple[AdmissionResult, Transaction | None]:
        """
        Check a payment and, when admitted, record it as an expense.

        With ``allow_override`` set in the config a rejected payment is
        recorded anyway and a warning is logged.

        Returns:
            The admission result and the recorded transaction, or ``None``
            when nothing was recorded.

        Raises:
            InvalidAmountError: If ``amount`` is not positive and finite.
        """
        if parse_amount(amount) <= 0:
            raise InvalidAmountError(amount, expectation="positive and finite")
        result = self.check_payment(category, amount, description)
        if not result.admitted:
            if not self._config.allow_override:
                return result, None
            logger.warning("Recording payment over budget: %s", result.message)

        transaction = self.record_transaction(
            description=description or f"Payment for {category}",
            amount=result.requested,
            category=category,
            kind="expense",
        )
        return result, transaction

    # ─── Overview ─────────────────────────────────────────────────────────────

    def summary(self, period: str | None = None) -> LedgerSummary:
        """
        Income, expense and net totals. With ``period`` the totals cover only
        the current weekly, monthly or yearly window; otherwise the whole log.
        """
        window = None
        if period is not None:
            window = resolve_period(period, self.today(), week_start=self._config.week_start)
        return summarize(self._storage.list_transactions(), window)

    # ─── Private helpers ──────────────────────────────────────────────────────

    def _require_budget(self, budget_id: str) -> Budget:
        budget = self._storage.get_budget(budget_id)
        if budget is None:
            raise BudgetNotFoundError(budget_id)
        return budget

    def _require_goal(self, goal_id: str) -> FinancialGoal:
        goal = self._storage.get_goal(goal_id)
        if goal is None:
            raise GoalNotFoundError(goal_id)
        return goal

    def _ensure_unique(self, budget: Budget) -> None:
        """At most one budget per (category, period)."""
        for existing in self._storage.list_budgets():
            if (
                existing.id != budget.id
                and existing.category == budget.category
                and existing.period == budget.period
            ):
                raise DuplicateBudgetError(budget.category, budget.period, existing.id)

    def _require_category(self, category: str, kind: str) -> None:
        if not self._config.enforce_categories:
            return
        registry = (
            self._config.expense_categories
            if kind == "expense"
            else self._config.income_categories
        )
        if category not in registry:
            raise UnknownCategoryError(category, kind)


def _reject_unknown_fields(changes: dict[str, Any], editable: set[str]) -> None:
    unknown = set(changes) - editable
    if unknown:
        raise ValueError(
            f"Cannot edit {sorted(unknown)}; editable fields are {sorted(editable)}."
        )
