# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

from fiscal_ledger.errors import InvalidPeriodError
from fiscal_ledger.types import PERIOD_VALUES, PeriodWindow

MONDAY = 0


def as_date(now: date | datetime) -> date:
    """Truncate a datetime to its calendar date; pass dates through."""
    if isinstance(now, datetime):
        return now.date()
    return now


def resolve_period(
    period: str,
    now: date | datetime,
    *,
    week_start: int = MONDAY,
) -> PeriodWindow:
    """
    Compute the inclusive date range of the period containing ``now``.

    Args:
        period: One of ``'weekly'``, ``'monthly'`` or ``'yearly'``.
        now: Reference date. Datetimes are truncated to their date.
        week_start: Weekday that opens a week (0 is Monday, 6 is Sunday).

    Returns:
        A :class:`PeriodWindow` whose ``start`` and ``end`` are both
        part of the period.

    Raises:
        InvalidPeriodError: If ``period`` is not a recognised value.
    """
    if period not in PERIOD_VALUES:
        raise InvalidPeriodError(period)

    base = as_date(now)

    if period == "weekly":
        offset = (base.weekday() - week_start) % 7
        start = base - timedelta(days=offset)
        return PeriodWindow(period=period, start=start, end=start + timedelta(days=6))
    if period == "monthly":
        last_day = calendar.monthrange(base.year, base.month)[1]
        return PeriodWindow(
            period=period,
            start=base.replace(day=1),
            end=base.replace(day=last_day),
        )
    # yearly
    return PeriodWindow(
        period=period,
        start=date(base.year, 1, 1),
        end=date(base.year, 12, 31),
    )


def next_period_start(
    period: str,
    now: date | datetime,
    *,
    week_start: int = MONDAY,
) -> date:
    """Return the first day of the period following the one containing ``now``."""
    window = resolve_period(period, now, week_start=week_start)
    return window.end + timedelta(days=1)
