"""
Budgeteer Statistics Module

Calendar periods and windows, gap-filling of sparse aggregation results,
and the target-vs-actual series shown on the budget and person pages.
The query-backed functions live in budgeteer.statistics.service.
"""

from budgeteer.statistics.gapfill import (
    assemble_target_and_actual,
    fill_missing,
    fill_missing_cents,
    fill_missing_titled,
)
from budgeteer.statistics.models import AggregatedRecord, MoneySeries, Share, TargetAndActual
from budgeteer.statistics.periods import Day, Month, PeriodUnit, Week, build_window

__all__ = [
    "assemble_target_and_actual",
    "fill_missing",
    "fill_missing_cents",
    "fill_missing_titled",
    "AggregatedRecord",
    "MoneySeries",
    "Share",
    "TargetAndActual",
    "Day",
    "Month",
    "PeriodUnit",
    "Week",
    "build_window",
]
