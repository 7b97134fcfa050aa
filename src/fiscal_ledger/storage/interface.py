# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from abc import ABC, abstractmethod

from fiscal_ledger.types import Budget, FinancialGoal, Transaction


class LedgerStorage(ABC):
    """
    Persistence contract for the ledger facade.

    Implementors may back this with browser storage, SQLite, Postgres, or a
    hosted document store. Any locking needed for concurrent writers belongs
    to the implementation. The default MemoryStorage is suitable for
    single-process use and testing only; state is lost when the process
    exits.
    """

    # ─── Transactions ─────────────────────────────────────────────────────────

    @abstractmethod
    def list_transactions(self) -> list[Transaction]:
        ...

    @abstractmethod
    def append_transaction(self, transaction: Transaction) -> None:
        ...

    @abstractmethod
    def remove_transaction(self, transaction_id: str) -> bool:
        """Remove a transaction. Returns False when the id is unknown."""
        ...

    # ─── Budgets ──────────────────────────────────────────────────────────────

    @abstractmethod
    def get_budget(self, budget_id: str) -> Budget | None:
        ...

    @abstractmethod
    def save_budget(self, budget: Budget) -> None:
        ...

    @abstractmethod
    def delete_budget(self, budget_id: str) -> bool:
        ...

    @abstractmethod
    def list_budgets(self) -> list[Budget]:
        ...

    # ─── Goals ────────────────────────────────────────────────────────────────

    @abstractmethod
    def get_goal(self, goal_id: str) -> FinancialGoal | None:
        ...

    @abstractmethod
    def save_goal(self, goal: FinancialGoal) -> None:
        ...

    @abstractmethod
    def delete_goal(self, goal_id: str) -> bool:
        ...

    @abstractmethod
    def list_goals(self) -> list[FinancialGoal]:
        ...
