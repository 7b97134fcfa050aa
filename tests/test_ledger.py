# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Tests for the Ledger facade and its in-memory storage."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from conftest import TODAY

from fiscal_ledger.config import LedgerConfig
from fiscal_ledger.errors import (
    BudgetNotFoundError,
    DuplicateBudgetError,
    DuplicateIdError,
    GoalAmountError,
    GoalNotFoundError,
    InvalidAmountError,
    InvalidPeriodError,
    TransactionNotFoundError,
    UnknownCategoryError,
)
from fiscal_ledger.ledger import Ledger
from fiscal_ledger.storage import MemoryStorage
from fiscal_ledger.types import TransactionFilter


# ---------------------------------------------------------------------------
# TestTransactions
# ---------------------------------------------------------------------------


class TestTransactions:
    def test_record_defaults_to_clock_date(self, ledger: Ledger) -> None:
        transaction = ledger.record_transaction("Groceries", "75.50", "Food")
        assert transaction.date == TODAY
        assert ledger.get_transactions() == [transaction]

    def test_get_transactions_newest_first(self, ledger: Ledger) -> None:
        older = ledger.record_transaction("a", 1, "Food", on=date(2026, 10, 1))
        newer = ledger.record_transaction("b", 1, "Food", on=date(2026, 10, 20))
        assert ledger.get_transactions() == [newer, older]

    def test_get_transactions_with_filter(self, ledger: Ledger) -> None:
        ledger.record_transaction("Salary", 2500, "Salary", kind="income")
        food = ledger.record_transaction("Groceries", 40, "Food")
        assert ledger.get_transactions(TransactionFilter(kind="expense")) == [food]

    def test_remove_transaction(self, ledger: Ledger) -> None:
        transaction = ledger.record_transaction("Groceries", 40, "Food")
        ledger.remove_transaction(transaction.id)
        assert ledger.get_transactions() == []

    def test_remove_unknown_transaction_raises(self, ledger: Ledger) -> None:
        with pytest.raises(TransactionNotFoundError):
            ledger.remove_transaction("missing")

    def test_non_positive_amount_raises(self, ledger: Ledger) -> None:
        with pytest.raises(InvalidAmountError):
            ledger.record_transaction("Refund", -5, "Food")


# ---------------------------------------------------------------------------
# TestBudgets
# ---------------------------------------------------------------------------


class TestBudgets:
    def test_create_and_reconcile(self, ledger: Ledger) -> None:
        budget = ledger.create_budget("Food", limit=500, period="monthly")
        ledger.record_transaction("Groceries", 480, "Food")
        status = ledger.budget_status(budget.id)
        assert status.spent == Decimal("480")
        assert status.remaining == Decimal("20")

    def test_spent_is_recomputed_after_removal(self, ledger: Ledger) -> None:
        budget = ledger.create_budget("Food", limit=500)
        transaction = ledger.record_transaction("Groceries", 480, "Food")
        ledger.remove_transaction(transaction.id)
        assert ledger.budget_status(budget.id).spent == Decimal("0")

    def test_duplicate_category_and_period_raises(self, ledger: Ledger) -> None:
        ledger.create_budget("Food", limit=500, period="monthly")
        with pytest.raises(DuplicateBudgetError) as excinfo:
            ledger.create_budget("Food", limit=100, period="monthly")
        assert excinfo.value.code == "DUPLICATE_BUDGET"

    def test_same_category_different_period_is_allowed(self, ledger: Ledger) -> None:
        ledger.create_budget("Food", limit=500, period="monthly")
        ledger.create_budget("Food", limit=150, period="weekly")
        assert len(ledger.list_budgets()) == 2

    def test_invalid_period_raises(self, ledger: Ledger) -> None:
        with pytest.raises(InvalidPeriodError):
            ledger.create_budget("Food", limit=500, period="annually")

    def test_reused_budget_id_raises_and_keeps_original(self, ledger: Ledger) -> None:
        ledger.create_budget("Food", limit=500, budget_id="b1")
        with pytest.raises(DuplicateIdError) as excinfo:
            ledger.create_budget("Rent", limit=900, budget_id="b1")
        assert excinfo.value.code == "DUPLICATE_ID"
        assert [b.category for b in ledger.list_budgets()] == ["Food"]

    def test_update_with_invalid_period_raises(self, ledger: Ledger) -> None:
        budget = ledger.create_budget("Food", limit=500)
        with pytest.raises(InvalidPeriodError):
            ledger.update_budget(budget.id, period="daily")
        assert ledger.list_budgets()[0].period == "monthly"

    def test_negative_limit_raises(self, ledger: Ledger) -> None:
        with pytest.raises(ValidationError):
            ledger.create_budget("Food", limit=-1)

    def test_update_budget_limit(self, ledger: Ledger) -> None:
        budget = ledger.create_budget("Food", limit=500)
        updated = ledger.update_budget(budget.id, limit=600)
        assert updated.limit == Decimal("600")
        assert ledger.budget_status(budget.id).budget.limit == Decimal("600")

    def test_update_into_existing_pair_raises(self, ledger: Ledger) -> None:
        ledger.create_budget("Food", limit=500, period="monthly")
        weekly = ledger.create_budget("Food", limit=100, period="weekly")
        with pytest.raises(DuplicateBudgetError):
            ledger.update_budget(weekly.id, period="monthly")

    def test_update_rejects_unknown_field(self, ledger: Ledger) -> None:
        budget = ledger.create_budget("Food", limit=500)
        with pytest.raises(ValueError, match="Cannot edit"):
            ledger.update_budget(budget.id, spent=10)

    def test_delete_budget(self, ledger: Ledger) -> None:
        budget = ledger.create_budget("Food", limit=500)
        ledger.delete_budget(budget.id)
        with pytest.raises(BudgetNotFoundError):
            ledger.budget_status(budget.id)

    def test_delete_unknown_budget_raises(self, ledger: Ledger) -> None:
        with pytest.raises(BudgetNotFoundError):
            ledger.delete_budget("missing")

    def test_budget_statuses_most_constrained_first(self, ledger: Ledger) -> None:
        ledger.create_budget("Food", limit=500, budget_id="food")
        ledger.create_budget("Entertainment", limit=150, budget_id="fun")
        ledger.record_transaction("Cinema", 120, "Entertainment")
        ledger.record_transaction("Groceries", 100, "Food")
        assert [s.budget.id for s in ledger.budget_statuses()] == ["fun", "food"]

    def test_week_start_from_config(self) -> None:
        ledger = Ledger(config=LedgerConfig(week_start=6), clock=lambda: TODAY)
        budget = ledger.create_budget("Food", limit=100, period="weekly")
        ledger.record_transaction("Brunch", 30, "Food", on=date(2026, 10, 18))  # Sunday
        assert ledger.budget_status(budget.id).spent == Decimal("30")


# ---------------------------------------------------------------------------
# TestGoals
# ---------------------------------------------------------------------------


class TestGoals:
    def test_create_and_evaluate(self, ledger: Ledger) -> None:
        goal = ledger.create_goal("Laptop", target_amount=1200, current_amount=300)
        status = ledger.goal_status(goal.id)
        assert status.percent_complete == Decimal("25")

    def test_contribute_to_goal(self, ledger: Ledger) -> None:
        goal = ledger.create_goal("Laptop", target_amount=1200)
        ledger.contribute_to_goal(goal.id, 1200)
        assert ledger.goal_status(goal.id).is_complete is True

    def test_negative_contribution_withdraws(self, ledger: Ledger) -> None:
        goal = ledger.create_goal("Laptop", target_amount=1200, current_amount=300)
        updated = ledger.contribute_to_goal(goal.id, -100)
        assert updated.current_amount == Decimal("200")

    def test_contribution_past_target_leaves_goal_unchanged(self, ledger: Ledger) -> None:
        goal = ledger.create_goal("Laptop", target_amount=1200, current_amount=300)
        with pytest.raises(GoalAmountError):
            ledger.contribute_to_goal(goal.id, 1000)
        assert ledger.goal_status(goal.id).goal.current_amount == Decimal("300")

    def test_create_goal_with_current_over_target_raises(self, ledger: Ledger) -> None:
        with pytest.raises(ValidationError):
            ledger.create_goal("Laptop", target_amount=100, current_amount=101)

    def test_update_goal_clears_deadline(self, ledger: Ledger) -> None:
        goal = ledger.create_goal("Trip", target_amount=2000, deadline=date(2026, 1, 1))
        assert ledger.goal_status(goal.id).is_overdue is True
        updated = ledger.update_goal(goal.id, deadline=None)
        assert updated.deadline is None
        assert ledger.goal_status(goal.id).is_overdue is False

    def test_update_goal_cannot_lower_target_below_saved(self, ledger: Ledger) -> None:
        goal = ledger.create_goal("Trip", target_amount=2000, current_amount=1500)
        with pytest.raises(ValidationError):
            ledger.update_goal(goal.id, target_amount=1000)

    def test_goal_statuses_cover_all_goals(self, ledger: Ledger) -> None:
        ledger.create_goal("Laptop", target_amount=1200)
        ledger.create_goal("Trip", target_amount=2000)
        assert len(ledger.goal_statuses()) == 2

    def test_reused_goal_id_raises_and_keeps_original(self, ledger: Ledger) -> None:
        ledger.create_goal("Laptop", target_amount=1200, goal_id="g1")
        with pytest.raises(DuplicateIdError):
            ledger.create_goal("Trip", target_amount=800, goal_id="g1")
        assert [g.description for g in ledger.list_goals()] == ["Laptop"]

    def test_delete_goal(self, ledger: Ledger) -> None:
        goal = ledger.create_goal("Laptop", target_amount=1200)
        ledger.delete_goal(goal.id)
        assert ledger.list_goals() == []
        with pytest.raises(GoalNotFoundError):
            ledger.delete_goal(goal.id)


# ---------------------------------------------------------------------------
# TestPayments
# ---------------------------------------------------------------------------


class TestPayments:
    @pytest.fixture
    def funded(self, ledger: Ledger) -> Ledger:
        ledger.create_budget("Food", limit=500, period="monthly")
        ledger.record_transaction("Groceries", 480, "Food", on=date(2026, 10, 5))
        return ledger

    def test_check_payment_rejects_over_budget(self, funded: Ledger) -> None:
        result = funded.check_payment("Food", 25)
        assert result.admitted is False
        assert result.status is not None and result.status.spent == Decimal("480")

    def test_check_payment_is_read_only(self, funded: Ledger) -> None:
        funded.check_payment("Food", 15)
        assert len(funded.get_transactions()) == 1

    def test_make_payment_records_when_admitted(self, funded: Ledger) -> None:
        result, transaction = funded.make_payment("Food", 15, description="Lunch")
        assert result.admitted is True
        assert transaction is not None
        assert transaction.description == "Lunch"
        budget_id = funded.list_budgets()[0].id
        assert funded.budget_status(budget_id).spent == Decimal("495")

    def test_make_payment_skips_recording_when_rejected(self, funded: Ledger) -> None:
        result, transaction = funded.make_payment("Food", 25)
        assert result.admitted is False
        assert transaction is None
        assert len(funded.get_transactions()) == 1

    def test_override_records_and_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        ledger = Ledger(config=LedgerConfig(allow_override=True), clock=lambda: TODAY)
        ledger.create_budget("Food", limit=500)
        ledger.record_transaction("Groceries", 480, "Food")
        with caplog.at_level(logging.WARNING, logger="fiscal_ledger"):
            result, transaction = ledger.make_payment("Food", 25)
        assert result.admitted is False
        assert transaction is not None
        assert "over budget" in caplog.text

    def test_unbudgeted_payment_is_recorded(self, ledger: Ledger) -> None:
        result, transaction = ledger.make_payment("Travel", 1000)
        assert result.reason == "no_budget"
        assert transaction is not None
        assert transaction.description == "Payment for Travel"

    def test_admission_periods_from_config(self) -> None:
        ledger = Ledger(
            config=LedgerConfig(admission_periods=("weekly",)), clock=lambda: TODAY
        )
        ledger.create_budget("Food", limit=50, period="weekly")
        assert ledger.check_payment("Food", 60).admitted is False

    def test_negative_payment_raises(self, funded: Ledger) -> None:
        with pytest.raises(InvalidAmountError):
            funded.check_payment("Food", -1)

    def test_make_payment_rejects_zero_before_checking(self, funded: Ledger) -> None:
        with pytest.raises(InvalidAmountError):
            funded.make_payment("Food", 0)
        assert len(funded.get_transactions()) == 1

    def test_zero_payment_check_is_still_admitted(self, funded: Ledger) -> None:
        assert funded.check_payment("Food", 0).admitted is True


# ---------------------------------------------------------------------------
# TestCategoriesAndSummary
# ---------------------------------------------------------------------------


class TestCategoriesAndSummary:
    def test_unregistered_category_raises_when_enforced(self) -> None:
        ledger = Ledger(config=LedgerConfig(enforce_categories=True), clock=lambda: TODAY)
        with pytest.raises(UnknownCategoryError):
            ledger.record_transaction("Snacks", 5, "Snacks")
        with pytest.raises(UnknownCategoryError):
            ledger.create_budget("Snacks", limit=50)

    def test_income_categories_are_separate_registry(self) -> None:
        ledger = Ledger(config=LedgerConfig(enforce_categories=True), clock=lambda: TODAY)
        ledger.record_transaction("Paycheck", 2500, "Salary", kind="income")
        with pytest.raises(UnknownCategoryError):
            ledger.record_transaction("Paycheck", 2500, "Salary", kind="expense")

    def test_categories_are_free_form_by_default(self, ledger: Ledger) -> None:
        ledger.record_transaction("Snacks", 5, "Snacks")

    def test_summary_for_current_month(self, ledger: Ledger) -> None:
        ledger.record_transaction("Salary", 2500, "Salary", kind="income")
        ledger.record_transaction("Groceries", "75.50", "Food")
        ledger.record_transaction("Old", 10, "Food", on=date(2026, 9, 1))
        summary = ledger.summary("monthly")
        assert summary.total_expense == Decimal("75.50")
        assert summary.net == Decimal("2424.50")
        assert ledger.summary().transaction_count == 3


# ---------------------------------------------------------------------------
# TestMemoryStorage
# ---------------------------------------------------------------------------


class TestMemoryStorage:
    def test_shared_storage_is_visible_to_new_ledger(self) -> None:
        storage = MemoryStorage()
        Ledger(storage=storage, clock=lambda: TODAY).create_budget("Food", limit=500)
        assert len(Ledger(storage=storage).list_budgets()) == 1

    def test_returned_budgets_are_copies(self) -> None:
        storage = MemoryStorage()
        ledger = Ledger(storage=storage, clock=lambda: TODAY)
        budget = ledger.create_budget("Food", limit=500)
        copy = storage.get_budget(budget.id)
        assert copy is not None
        copy.limit = Decimal("1")
        assert storage.get_budget(budget.id).limit == Decimal("500")

    def test_remove_unknown_transaction_returns_false(self) -> None:
        assert MemoryStorage().remove_transaction("missing") is False
