# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

# ─── Literals ─────────────────────────────────────────────────────────────────

Period = Literal["weekly", "monthly", "yearly"]

PERIOD_VALUES = frozenset({"weekly", "monthly", "yearly"})

# Evaluation order when several budgets share a category.
PERIOD_ORDER: tuple[str, ...] = ("weekly", "monthly", "yearly")

TransactionKind = Literal["income", "expense"]

AdmissionReason = Literal["within_budget", "exceeds_budget", "no_budget"]

# Lets a field be named ``date`` without shadowing the type.
CalendarDate = date

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def _calendar_date(value: object) -> object:
    """Accept full ISO timestamps where a calendar date is expected."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    return value


# ─── Transaction ──────────────────────────────────────────────────────────────


class Transaction(BaseModel, frozen=True):
    """An immutable, dated entry in the transaction log."""

    id: str
    date: CalendarDate
    description: str = ""
    amount: Decimal = Field(..., gt=0, decimal_places=2)
    category: str = Field(..., min_length=1)
    kind: TransactionKind

    @field_validator("date", mode="before")
    @classmethod
    def coerce_timestamp(cls, value: object) -> object:
        return _calendar_date(value)


class TransactionFilter(BaseModel):
    """Optional filter applied to transaction queries. All fields are AND-ed."""

    category: Optional[str] = None
    kind: Optional[TransactionKind] = None
    since: Optional[date] = None
    until: Optional[date] = None
    min_amount: Optional[Decimal] = None
    max_amount: Optional[Decimal] = None


# ─── Budget ───────────────────────────────────────────────────────────────────


class Budget(BaseModel):
    """
    A spending limit for one category over a recurring period.

    Spending is never stored on the budget; it is derived from the
    transaction log on every query.
    """

    id: str
    category: str = Field(..., min_length=1)
    limit: Decimal = Field(..., ge=0, decimal_places=2)
    period: Period


# ─── Goal ─────────────────────────────────────────────────────────────────────


class FinancialGoal(BaseModel):
    """A savings objective with an optional deadline."""

    id: str
    description: str = Field(..., min_length=1)
    target_amount: Decimal = Field(..., gt=0, decimal_places=2)
    current_amount: Decimal = Field(default=ZERO, ge=0, decimal_places=2)
    deadline: Optional[date] = None

    @field_validator("description")
    @classmethod
    def description_must_not_be_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("description must not be blank")
        return value

    @field_validator("deadline", mode="before")
    @classmethod
    def coerce_deadline(cls, value: object) -> object:
        return _calendar_date(value)

    @model_validator(mode="after")
    def current_within_target(self) -> "FinancialGoal":
        if self.current_amount > self.target_amount:
            raise ValueError("current_amount cannot exceed target_amount")
        return self


# ─── Derived views ────────────────────────────────────────────────────────────


class PeriodWindow(BaseModel, frozen=True):
    """An inclusive calendar-date range for one accounting period."""

    period: Period
    start: date
    end: date

    def contains(self, day: date) -> bool:
        """Return True when ``day`` falls inside the window, both ends included."""
        return self.start <= day <= self.end


class BudgetStatus(BaseModel, frozen=True):
    """Budget consumption for the period window containing "now"."""

    budget: Budget
    window: PeriodWindow
    spent: Decimal
    remaining: Decimal
    percent_used: Decimal
    is_over_budget: bool


class GoalStatus(BaseModel, frozen=True):
    """Progress of a savings goal as of a reference date."""

    goal: FinancialGoal
    percent_complete: Decimal
    is_complete: bool
    is_overdue: bool
    remaining_amount: Decimal
    days_remaining: Optional[int] = None


# ─── Admission ────────────────────────────────────────────────────────────────


class ProposedPayment(BaseModel, frozen=True):
    """A payment the caller would like to make. Nothing is recorded by checking it."""

    category: str
    amount: Decimal = Field(..., allow_inf_nan=True)
    description: Optional[str] = None


class AdmissionResult(BaseModel, frozen=True):
    """Outcome of a payment admission check. Does not record any spending."""

    admitted: bool
    reason: AdmissionReason
    message: str
    requested: Decimal
    projected_spent: Optional[Decimal] = None
    status: Optional[BudgetStatus] = None


# ─── Summary ──────────────────────────────────────────────────────────────────


class LedgerSummary(BaseModel, frozen=True):
    """Income, expense and per-category totals over a set of transactions."""

    total_income: Decimal
    total_expense: Decimal
    net: Decimal
    transaction_count: int
    expenses_by_category: dict[str, Decimal] = Field(default_factory=dict)
    window: Optional[PeriodWindow] = None
