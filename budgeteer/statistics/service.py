"""
Statistics Business Logic

Burned and planned budget series for charts: per project, per person and per
budget, bucketed by week or month, plus daily rate averages and distribution
shares. Every series is gap-filled so it has exactly one value per period of
the requested window; the last value belongs to the current period.

Weeks follow ISO-8601 (Monday to Sunday). No Flask imports, used by both
CLI and API layers.
"""

import sqlite3
from datetime import date
from typing import List, Optional

from budgeteer.budgets.models import BudgetTagFilter
from budgeteer.core import get_logger
from budgeteer.core.money import Money
from budgeteer.records.aggregation import (
    aggregate_plan,
    aggregate_work,
    average_daily_rates,
    budget_shares_for_person,
    person_shares_for_budget,
)
from budgeteer.statistics.gapfill import assemble_target_and_actual, fill_missing
from budgeteer.statistics.models import Share, TargetAndActual
from budgeteer.statistics.periods import PeriodUnit, build_window, window_start

logger = get_logger("budgeteer.statistics")


# ---------------------------------------------------------------------------
# Plain series (one value per period)
# ---------------------------------------------------------------------------


def _series(
    conn: sqlite3.Connection,
    aggregate,
    unit: PeriodUnit,
    count: int,
    today: Optional[date],
    **filters,
) -> List[Money]:
    window = build_window(unit, count, today)
    if not window:
        return []
    records = aggregate(conn, unit, window_start(unit, count, today), **filters)
    return fill_missing(window, records)


def get_weekly_budget_burned_for_project(
    conn: sqlite3.Connection, project_id: int, number_of_weeks: int,
    today: Optional[date] = None,
) -> List[Money]:
    """Budget burned in each of the last number_of_weeks weeks, all project budgets aggregated."""
    return _series(conn, aggregate_work, PeriodUnit.WEEK, number_of_weeks, today,
                   project_id=project_id)


def get_weekly_budget_planned_for_project(
    conn: sqlite3.Connection, project_id: int, number_of_weeks: int,
    today: Optional[date] = None,
) -> List[Money]:
    """Budget planned in each of the last number_of_weeks weeks, all project budgets aggregated."""
    return _series(conn, aggregate_plan, PeriodUnit.WEEK, number_of_weeks, today,
                   project_id=project_id)


def get_monthly_budget_burned_for_project(
    conn: sqlite3.Connection, project_id: int, number_of_months: int,
    today: Optional[date] = None,
) -> List[Money]:
    return _series(conn, aggregate_work, PeriodUnit.MONTH, number_of_months, today,
                   project_id=project_id)


def get_weekly_budget_burned_for_person(
    conn: sqlite3.Connection, person_id: int, number_of_weeks: int,
    today: Optional[date] = None,
) -> List[Money]:
    """Budget burned by a person in each of the last number_of_weeks weeks, all budgets aggregated."""
    return _series(conn, aggregate_work, PeriodUnit.WEEK, number_of_weeks, today,
                   person_id=person_id)


def get_weekly_budget_planned_for_person(
    conn: sqlite3.Connection, person_id: int, number_of_weeks: int,
    today: Optional[date] = None,
) -> List[Money]:
    """Budget planned for a person in each of the last number_of_weeks weeks, all budgets aggregated."""
    return _series(conn, aggregate_plan, PeriodUnit.WEEK, number_of_weeks, today,
                   person_id=person_id)


def get_avg_daily_rate_for_previous_days(
    conn: sqlite3.Connection, project_id: int, number_of_days: int,
    today: Optional[date] = None,
) -> List[Money]:
    """
    Average daily rate earned on each of the last number_of_days days.

    The average runs over all work records of the project on that day.
    Days without work are zero.
    """
    window = build_window(PeriodUnit.DAY, number_of_days, today)
    if not window:
        return []
    rates = average_daily_rates(
        conn, project_id, window_start(PeriodUnit.DAY, number_of_days, today)
    )
    return fill_missing(window, rates)


# ---------------------------------------------------------------------------
# Distributions
# ---------------------------------------------------------------------------


def get_budget_distribution(conn: sqlite3.Connection, person_id: int) -> List[Share]:
    """Money burned by a person on each budget they worked on."""
    return [Share(row["name"], Money.from_cents(row["value_in_cents"]))
            for row in budget_shares_for_person(conn, person_id)]


def get_people_distribution(conn: sqlite3.Connection, budget_id: int) -> List[Share]:
    """Money burned on a budget by each person that worked on it."""
    return [Share(row["name"], Money.from_cents(row["value_in_cents"]))
            for row in person_shares_for_budget(conn, budget_id)]


# ---------------------------------------------------------------------------
# Target vs. actual
# ---------------------------------------------------------------------------


def _target_and_actual(
    conn: sqlite3.Connection,
    unit: PeriodUnit,
    count: int,
    title_by: str,
    today: Optional[date],
    **filters,
) -> TargetAndActual:
    window = build_window(unit, count, today)
    if not window:
        return TargetAndActual()
    start = window_start(unit, count, today)
    burned = aggregate_work(conn, unit, start, title_by=title_by, **filters)
    planned = aggregate_plan(conn, unit, start, **filters)
    result = assemble_target_and_actual(window, planned, burned)
    logger.debug(
        "Built %s stats over %d periods with %d actual series (%s)",
        unit.value, count, len(result.actual_series), filters,
    )
    return result


def get_week_stats_for_person(
    conn: sqlite3.Connection, person_id: int, number_of_weeks: int,
    today: Optional[date] = None,
) -> TargetAndActual:
    """Planned vs. burned per week for a person; one actual series per budget."""
    return _target_and_actual(conn, PeriodUnit.WEEK, number_of_weeks, "budget", today,
                              person_id=person_id)


def get_month_stats_for_person(
    conn: sqlite3.Connection, person_id: int, number_of_months: int,
    today: Optional[date] = None,
) -> TargetAndActual:
    """Planned vs. burned per month for a person; one actual series per budget."""
    return _target_and_actual(conn, PeriodUnit.MONTH, number_of_months, "budget", today,
                              person_id=person_id)


def get_week_stats_for_budgets(
    conn: sqlite3.Connection, budget_filter: BudgetTagFilter, number_of_weeks: int,
    today: Optional[date] = None,
) -> TargetAndActual:
    """Planned vs. burned per week for the filtered budgets; one actual series per person."""
    return _target_and_actual(conn, PeriodUnit.WEEK, number_of_weeks, "person", today,
                              budget_filter=budget_filter)


def get_month_stats_for_budgets(
    conn: sqlite3.Connection, budget_filter: BudgetTagFilter, number_of_months: int,
    today: Optional[date] = None,
) -> TargetAndActual:
    """Planned vs. burned per month for the filtered budgets; one actual series per person."""
    return _target_and_actual(conn, PeriodUnit.MONTH, number_of_months, "person", today,
                              budget_filter=budget_filter)


def get_week_stats_for_budget(
    conn: sqlite3.Connection, budget_id: int, number_of_weeks: int,
    today: Optional[date] = None,
) -> TargetAndActual:
    """Planned vs. burned per week for one budget; one actual series per person."""
    return _target_and_actual(conn, PeriodUnit.WEEK, number_of_weeks, "person", today,
                              budget_id=budget_id)


def get_month_stats_for_budget(
    conn: sqlite3.Connection, budget_id: int, number_of_months: int,
    today: Optional[date] = None,
) -> TargetAndActual:
    """Planned vs. burned per month for one budget; one actual series per person."""
    return _target_and_actual(conn, PeriodUnit.MONTH, number_of_months, "person", today,
                              budget_id=budget_id)
