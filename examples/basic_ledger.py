# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
basic_ledger.py

Demonstrates the everyday loop of the personal-finance core:
  1. Create a ledger with a fixed clock and one monthly budget.
  2. Log a few transactions.
  3. Simulate payments; only admitted ones are recorded.
  4. Track a savings goal and print the overview.

Run with:  python examples/basic_ledger.py
(from the repository root with fiscal-ledger installed)
"""

import logging
from datetime import date

from fiscal_ledger import Ledger, LedgerConfig

logging.basicConfig(level=logging.INFO, format="%(levelname)-7s %(name)s: %(message)s")

# ─── Setup ────────────────────────────────────────────────────────────────────

ledger = Ledger(config=LedgerConfig(enforce_categories=True), clock=lambda: date(2026, 10, 22))
ledger.create_budget("Food", limit=500, period="monthly")
ledger.create_budget("Entertainment", limit=150, period="monthly")

ledger.record_transaction("Salary", 2500, "Salary", kind="income", on=date(2026, 10, 1))
ledger.record_transaction("Groceries", "300.00", "Food", on=date(2026, 10, 3))
ledger.record_transaction("Farmers market", "180.00", "Food", on=date(2026, 10, 20))

# ─── Simulate payments ────────────────────────────────────────────────────────

for category, amount in [("Food", "25.00"), ("Food", "15.00"), ("Transport", "1000.00")]:
    result, transaction = ledger.make_payment(category, amount)
    verdict = "RECORDED" if transaction is not None else "BLOCKED "
    print(f"{verdict} ${amount:>8}  {category:<12} {result.message}")

# ─── Budget overview ──────────────────────────────────────────────────────────

print("\n── Budgets ───────────────────────────────────────────")
for status in ledger.budget_statuses():
    budget = status.budget
    flag = "  OVER" if status.is_over_budget else ""
    print(
        f"  {budget.category:<14} ${status.spent:>8.2f} / ${budget.limit:>8.2f}"
        f"  ({status.percent_used:5.1f}%){flag}"
    )

# ─── Savings goal ─────────────────────────────────────────────────────────────

goal = ledger.create_goal("New laptop", target_amount=1200, deadline=date(2027, 1, 15))
ledger.contribute_to_goal(goal.id, 300)
goal_status = ledger.goal_status(goal.id)

print("\n── Goal ──────────────────────────────────────────────")
print(f"  {goal_status.goal.description}: {goal_status.percent_complete:.0f}% saved")
print(f"  ${goal_status.remaining_amount:.2f} to go, {goal_status.days_remaining} days left")

# ─── Month summary ────────────────────────────────────────────────────────────

summary = ledger.summary("monthly")
print("\n── This month ────────────────────────────────────────")
print(f"  Income   : ${summary.total_income:.2f}")
print(f"  Expenses : ${summary.total_expense:.2f}")
print(f"  Net      : ${summary.net:.2f}")
for category, total in summary.expenses_by_category.items():
    print(f"    {category:<12} ${total:.2f}")
