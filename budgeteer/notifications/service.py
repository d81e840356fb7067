"""
Notification Detection

Derives notifications from the current data of a project or budget:
missing imports, work booked without a daily rate, budgets without a total
or without a contract. Nothing is stored; notifications are recomputed on
every request. No Flask imports.
"""

import sqlite3
from datetime import date
from typing import Any, Dict, List

from budgeteer.core import get_logger
from budgeteer.notifications.messages import format_notification
from budgeteer.notifications.models import (
    EmptyPlanRecordsNotification,
    EmptyWorkRecordsNotification,
    MissingBudgetTotalNotification,
    MissingContractForBudgetNotification,
    MissingDailyRateForBudgetNotification,
    MissingDailyRateNotification,
    Notification,
)
from budgeteer.records.recording import PLAN_RECORDS, WORK_RECORDS, count_records

logger = get_logger("budgeteer.notifications")


def _budget_notifications(row: sqlite3.Row) -> List[Notification]:
    found: List[Notification] = []
    if not row["total_cents"]:
        found.append(MissingBudgetTotalNotification(row["id"], row["name"]))
    if row["contract_id"] is None:
        found.append(MissingContractForBudgetNotification(row["id"], row["name"]))
    return found


def get_notifications_for_project(
    conn: sqlite3.Connection, project_id: int
) -> List[Notification]:
    """All notifications concerning a project and its budgets."""
    found: List[Notification] = []

    if count_records(conn, WORK_RECORDS, project_id=project_id) == 0:
        found.append(EmptyWorkRecordsNotification())
    if count_records(conn, PLAN_RECORDS, project_id=project_id) == 0:
        found.append(EmptyPlanRecordsNotification())

    rows = conn.execute(
        """
        SELECT p.id, p.name, MIN(w.date) AS start_date, MAX(w.date) AS end_date
        FROM work_records w
        JOIN persons p ON p.id = w.person_id
        JOIN budgets b ON b.id = w.budget_id
        WHERE b.project_id = ? AND w.daily_rate_cents = 0
        GROUP BY p.id
        ORDER BY p.name
        """,
        (project_id,),
    ).fetchall()
    for row in rows:
        found.append(MissingDailyRateNotification(
            row["id"], row["name"],
            date.fromisoformat(row["start_date"]), date.fromisoformat(row["end_date"]),
        ))

    budgets = conn.execute(
        "SELECT * FROM budgets WHERE project_id = ? ORDER BY name", (project_id,)
    ).fetchall()
    for budget in budgets:
        found.extend(_budget_notifications(budget))

    logger.debug("Project %s has %d notification(s)", project_id, len(found))
    return found


def get_notifications_for_budget(
    conn: sqlite3.Connection, budget_id: int
) -> List[Notification]:
    """Notifications concerning a single budget."""
    budget = conn.execute("SELECT * FROM budgets WHERE id = ?", (budget_id,)).fetchone()
    if not budget:
        return []

    found: List[Notification] = []
    row = conn.execute(
        """
        SELECT MIN(date) AS start_date, MAX(date) AS end_date
        FROM work_records
        WHERE budget_id = ? AND daily_rate_cents = 0
        """,
        (budget_id,),
    ).fetchone()
    if row["start_date"]:
        found.append(MissingDailyRateForBudgetNotification(
            budget["id"], budget["name"],
            date.fromisoformat(row["start_date"]), date.fromisoformat(row["end_date"]),
        ))
    found.extend(_budget_notifications(budget))
    return found


def describe(notifications: List[Notification]) -> List[Dict[str, Any]]:
    """Notifications as {type, message} dicts for pages and JSON."""
    return [
        {"type": type(n).__name__, "message": format_notification(n)}
        for n in notifications
    ]
