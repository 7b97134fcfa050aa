# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from fiscal_ledger.storage.interface import LedgerStorage
from fiscal_ledger.types import Budget, FinancialGoal, Transaction


class MemoryStorage(LedgerStorage):
    """
    In-process memory store, suitable for a single user session and testing.

    All state is lost when the process exits. Transactions keep insertion
    order; budgets and goals are keyed by id.
    """

    def __init__(self) -> None:
        self._transactions: list[Transaction] = []
        self._budgets_by_id: dict[str, Budget] = {}
        self._goals_by_id: dict[str, FinancialGoal] = {}

    # ─── Transactions ─────────────────────────────────────────────────────────

    def list_transactions(self) -> list[Transaction]:
        return list(self._transactions)

    def append_transaction(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)

    def remove_transaction(self, transaction_id: str) -> bool:
        remaining = [t for t in self._transactions if t.id != transaction_id]
        removed = len(remaining) != len(self._transactions)
        self._transactions = remaining
        return removed

    # ─── Budgets ──────────────────────────────────────────────────────────────

    def get_budget(self, budget_id: str) -> Budget | None:
        budget = self._budgets_by_id.get(budget_id)
        return budget.model_copy(deep=True) if budget is not None else None

    def save_budget(self, budget: Budget) -> None:
        self._budgets_by_id[budget.id] = budget.model_copy(deep=True)

    def delete_budget(self, budget_id: str) -> bool:
        return self._budgets_by_id.pop(budget_id, None) is not None

    def list_budgets(self) -> list[Budget]:
        return [budget.model_copy(deep=True) for budget in self._budgets_by_id.values()]

    # ─── Goals ────────────────────────────────────────────────────────────────

    def get_goal(self, goal_id: str) -> FinancialGoal | None:
        goal = self._goals_by_id.get(goal_id)
        return goal.model_copy(deep=True) if goal is not None else None

    def save_goal(self, goal: FinancialGoal) -> None:
        self._goals_by_id[goal.id] = goal.model_copy(deep=True)

    def delete_goal(self, goal_id: str) -> bool:
        return self._goals_by_id.pop(goal_id, None) is not None

    def list_goals(self) -> list[FinancialGoal]:
        return [goal.model_copy(deep=True) for goal in self._goals_by_id.values()]
