"""
Work & Plan Record Business Logic

Inserting and counting the raw per-day records. No Flask imports.
"""

import sqlite3
from datetime import date
from typing import Optional, Union

from budgeteer.core import get_logger

logger = get_logger("budgeteer.records")

WORK_RECORDS = "work_records"
PLAN_RECORDS = "plan_records"
RECORD_TABLES = (WORK_RECORDS, PLAN_RECORDS)

MINUTES_PER_DAY = 480


def _as_iso(day: Union[date, str]) -> str:
    return day.isoformat() if isinstance(day, date) else date.fromisoformat(day).isoformat()


def create_work_record(
    conn: sqlite3.Connection,
    *,
    person_id: int,
    budget_id: int,
    day: Union[date, str],
    minutes: int,
    daily_rate_cents: int = 0,
    edited_manually: bool = False,
) -> int:
    """Record time a person worked on a budget. Returns the new record id."""
    if minutes < 0:
        raise ValueError("minutes must not be negative")
    cursor = conn.execute(
        """
        INSERT INTO work_records
            (person_id, budget_id, date, minutes, daily_rate_cents, edited_manually)
        VALUES (?, ?, ?, ?, ?, ?)
        """,
        (person_id, budget_id, _as_iso(day), minutes, daily_rate_cents,
         1 if edited_manually else 0),
    )
    conn.commit()
    return cursor.lastrowid


def create_plan_record(
    conn: sqlite3.Connection,
    *,
    person_id: int,
    budget_id: int,
    day: Union[date, str],
    minutes: int,
    daily_rate_cents: int = 0,
) -> int:
    """Record time a person is planned to work on a budget. Returns the new record id."""
    if minutes < 0:
        raise ValueError("minutes must not be negative")
    cursor = conn.execute(
        """
        INSERT INTO plan_records (person_id, budget_id, date, minutes, daily_rate_cents)
        VALUES (?, ?, ?, ?, ?)
        """,
        (person_id, budget_id, _as_iso(day), minutes, daily_rate_cents),
    )
    conn.commit()
    return cursor.lastrowid


def count_records(
    conn: sqlite3.Connection,
    table: str,
    *,
    project_id: Optional[int] = None,
    budget_id: Optional[int] = None,
) -> int:
    """Count work or plan records of a project and/or budget."""
    if table not in RECORD_TABLES:
        raise ValueError(f"Unknown record table: {table}")

    sql = f"SELECT COUNT(*) AS n FROM {table} r JOIN budgets b ON b.id = r.budget_id"
    conditions = []
    params: list = []
    if project_id is not None:
        conditions.append("b.project_id = ?")
        params.append(project_id)
    if budget_id is not None:
        conditions.append("r.budget_id = ?")
        params.append(budget_id)
    if conditions:
        sql += " WHERE " + " AND ".join(conditions)
    return conn.execute(sql, params).fetchone()["n"]
