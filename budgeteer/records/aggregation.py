"""
Record Aggregation Queries

Sums work/plan record values per calendar period. SQLite has no ISO week
function, so values are summed per day in SQL and bucketed into periods
here. No Flask imports.
"""

import sqlite3
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from budgeteer.budgets.models import BudgetTagFilter
from budgeteer.core import get_logger
from budgeteer.records.recording import MINUTES_PER_DAY, PLAN_RECORDS, WORK_RECORDS
from budgeteer.statistics.models import AggregatedRecord
from budgeteer.statistics.periods import Period, PeriodUnit, period_of

logger = get_logger("budgeteer.records.aggregation")

# Series titles: actual values per budget (person charts) or per person (budget charts)
TITLE_COLUMNS = {
    "budget": "b.name",
    "person": "p.name",
}


def _filter_clause(
    *,
    project_id: Optional[int] = None,
    person_id: Optional[int] = None,
    budget_id: Optional[int] = None,
    budget_filter: Optional[BudgetTagFilter] = None,
) -> Tuple[List[str], list]:
    conditions: List[str] = []
    params: list = []
    if project_id is not None:
        conditions.append("b.project_id = ?")
        params.append(project_id)
    if person_id is not None:
        conditions.append("r.person_id = ?")
        params.append(person_id)
    if budget_id is not None:
        conditions.append("r.budget_id = ?")
        params.append(budget_id)
    if budget_filter is not None:
        conditions.append("b.project_id = ?")
        params.append(budget_filter.project_id)
        if budget_filter.selected_tags:
            placeholders = ",".join("?" for _ in budget_filter.selected_tags)
            conditions.append(
                f"b.id IN (SELECT budget_id FROM budget_tags WHERE tag IN ({placeholders}))"
            )
            params.extend(budget_filter.selected_tags)
    return conditions, params


def _aggregate(
    conn: sqlite3.Connection,
    table: str,
    unit: PeriodUnit,
    start_date: date,
    title_by: Optional[str],
    **filters: Any,
) -> List[AggregatedRecord]:
    title_sql = TITLE_COLUMNS[title_by] if title_by else "NULL"
    conditions, params = _filter_clause(**filters)
    conditions.insert(0, "r.date >= ?")
    params.insert(0, start_date.isoformat())

    sql = f"""
        SELECT r.date AS day,
               {title_sql} AS title,
               SUM(r.minutes * r.daily_rate_cents) AS rate_minutes
        FROM {table} r
        JOIN budgets b ON b.id = r.budget_id
        JOIN persons p ON p.id = r.person_id
        WHERE {" AND ".join(conditions)}
        GROUP BY r.date, title
        ORDER BY r.date
    """
    rows = conn.execute(sql, params).fetchall()

    totals: Dict[Tuple[Period, Optional[str]], int] = {}
    for row in rows:
        key = (period_of(unit, date.fromisoformat(row["day"])), row["title"])
        totals[key] = totals.get(key, 0) + (row["rate_minutes"] or 0)

    logger.debug(
        "Aggregated %d %s day rows into %d %s records", len(rows), table, len(totals), unit.value
    )
    return [
        AggregatedRecord(period, int(round(rate_minutes / MINUTES_PER_DAY)), title)
        for (period, title), rate_minutes in totals.items()
    ]


def aggregate_work(
    conn: sqlite3.Connection,
    unit: PeriodUnit,
    start_date: date,
    *,
    title_by: Optional[str] = None,
    project_id: Optional[int] = None,
    person_id: Optional[int] = None,
    budget_id: Optional[int] = None,
    budget_filter: Optional[BudgetTagFilter] = None,
) -> List[AggregatedRecord]:
    """
    Burned value (in cents) per period since ``start_date``.

    Args:
        conn: Database connection
        unit: Bucket size (day, week, month)
        start_date: First day to include
        title_by: None for one untitled record per period, "budget" or
            "person" for one record per period and budget/person name
        project_id, person_id, budget_id, budget_filter: Restrict the records
    """
    return _aggregate(
        conn, WORK_RECORDS, unit, start_date, title_by,
        project_id=project_id, person_id=person_id,
        budget_id=budget_id, budget_filter=budget_filter,
    )


def aggregate_plan(
    conn: sqlite3.Connection,
    unit: PeriodUnit,
    start_date: date,
    *,
    title_by: Optional[str] = None,
    project_id: Optional[int] = None,
    person_id: Optional[int] = None,
    budget_id: Optional[int] = None,
    budget_filter: Optional[BudgetTagFilter] = None,
) -> List[AggregatedRecord]:
    """Planned value (in cents) per period since ``start_date``. See aggregate_work()."""
    return _aggregate(
        conn, PLAN_RECORDS, unit, start_date, title_by,
        project_id=project_id, person_id=person_id,
        budget_id=budget_id, budget_filter=budget_filter,
    )


def average_daily_rates(
    conn: sqlite3.Connection, project_id: int, start_date: date
) -> List[AggregatedRecord]:
    """Average daily rate (in cents) of all work booked on each day of a project."""
    rows = conn.execute(
        """
        SELECT r.date AS day, AVG(r.daily_rate_cents) AS rate
        FROM work_records r
        JOIN budgets b ON b.id = r.budget_id
        WHERE b.project_id = ? AND r.date >= ?
        GROUP BY r.date
        ORDER BY r.date
        """,
        (project_id, start_date.isoformat()),
    ).fetchall()
    return [
        AggregatedRecord(period_of(PeriodUnit.DAY, date.fromisoformat(row["day"])),
                         int(round(row["rate"] or 0)))
        for row in rows
    ]


def _shares(conn: sqlite3.Connection, name_sql: str, where: str, param: int) -> List[Dict[str, Any]]:
    rows = conn.execute(
        f"""
        SELECT {name_sql} AS name,
               SUM(r.minutes * r.daily_rate_cents) AS rate_minutes
        FROM work_records r
        JOIN budgets b ON b.id = r.budget_id
        JOIN persons p ON p.id = r.person_id
        WHERE {where} = ?
        GROUP BY {name_sql}
        ORDER BY rate_minutes DESC, name
        """,
        (param,),
    ).fetchall()
    return [
        {"name": row["name"],
         "value_in_cents": int(round((row["rate_minutes"] or 0) / MINUTES_PER_DAY))}
        for row in rows
    ]


def budget_shares_for_person(conn: sqlite3.Connection, person_id: int) -> List[Dict[str, Any]]:
    """Burned value per budget a person has worked on, largest first."""
    return _shares(conn, "b.name", "r.person_id", person_id)


def person_shares_for_budget(conn: sqlite3.Connection, budget_id: int) -> List[Dict[str, Any]]:
    """Burned value per person that has worked on a budget, largest first."""
    return _shares(conn, "p.name", "r.budget_id", budget_id)
