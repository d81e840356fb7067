"""
Budget Business Logic

Budget listing (optionally filtered by tags), budget detail with burned and
remaining values, and loading/saving the edit form.
No Flask imports; this module is used by both CLI and API layers.
"""

import sqlite3
from typing import Any, Dict, Iterable, List, Optional

from budgeteer.budgets.models import BudgetTagFilter, EditBudgetData
from budgeteer.core import get_logger
from budgeteer.core.money import Money

logger = get_logger("budgeteer.budgets")

_BUDGET_SELECT = """
    SELECT b.*,
           c.name AS contract_name,
           COALESCE(spent.cents, 0) AS spent_cents,
           COALESCE(planned.cents, 0) AS planned_cents
    FROM budgets b
    LEFT JOIN contracts c ON c.id = b.contract_id
    LEFT JOIN (
        SELECT budget_id, ROUND(SUM(minutes * daily_rate_cents) / 480.0) AS cents
        FROM work_records GROUP BY budget_id
    ) spent ON spent.budget_id = b.id
    LEFT JOIN (
        SELECT budget_id, ROUND(SUM(minutes * daily_rate_cents) / 480.0) AS cents
        FROM plan_records GROUP BY budget_id
    ) planned ON planned.budget_id = b.id
"""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _tags_for(conn: sqlite3.Connection, budget_id: int) -> List[str]:
    rows = conn.execute(
        "SELECT tag FROM budget_tags WHERE budget_id = ? ORDER BY tag", (budget_id,)
    ).fetchall()
    return [r["tag"] for r in rows]


def _replace_tags(conn: sqlite3.Connection, budget_id: int, tags: Iterable[str]) -> None:
    conn.execute("DELETE FROM budget_tags WHERE budget_id = ?", (budget_id,))
    for tag in dict.fromkeys(t.strip() for t in tags):
        if tag:
            conn.execute(
                "INSERT INTO budget_tags (budget_id, tag) VALUES (?, ?)", (budget_id, tag)
            )


def _with_money(conn: sqlite3.Connection, row: sqlite3.Row) -> Dict[str, Any]:
    budget = dict(row)
    total_cents = budget["total_cents"] or 0
    budget["tags"] = _tags_for(conn, budget["id"])
    budget["total"] = Money.from_cents(total_cents)
    budget["spent"] = Money.from_cents(budget["spent_cents"])
    budget["planned"] = Money.from_cents(budget["planned_cents"])
    budget["remaining"] = Money.from_cents(total_cents - budget["spent_cents"])
    budget["progress"] = (
        round(100.0 * budget["spent_cents"] / total_cents, 1) if total_cents else None
    )
    return budget


# ---------------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------------


def list_budgets(conn: sqlite3.Connection, project_id: int) -> List[Dict[str, Any]]:
    """List a project's budgets with tags, burned, planned and remaining values."""
    return list_budgets_by_filter(conn, BudgetTagFilter(project_id))


def list_budgets_by_filter(
    conn: sqlite3.Connection, budget_filter: BudgetTagFilter
) -> List[Dict[str, Any]]:
    """List the budgets selected by a tag filter."""
    sql = _BUDGET_SELECT + " WHERE b.project_id = ?"
    params: list = [budget_filter.project_id]
    if budget_filter.selected_tags:
        placeholders = ",".join("?" for _ in budget_filter.selected_tags)
        sql += f" AND b.id IN (SELECT budget_id FROM budget_tags WHERE tag IN ({placeholders}))"
        params.extend(budget_filter.selected_tags)
    sql += " ORDER BY b.name"
    return [_with_money(conn, r) for r in conn.execute(sql, params).fetchall()]


def list_tags(conn: sqlite3.Connection, project_id: int) -> List[str]:
    """All distinct tags used by a project's budgets."""
    rows = conn.execute(
        """
        SELECT DISTINCT t.tag FROM budget_tags t
        JOIN budgets b ON b.id = t.budget_id
        WHERE b.project_id = ?
        ORDER BY t.tag
        """,
        (project_id,),
    ).fetchall()
    return [r["tag"] for r in rows]


def get_budget_detail(conn: sqlite3.Connection, budget_id: int) -> Optional[Dict[str, Any]]:
    row = conn.execute(_BUDGET_SELECT + " WHERE b.id = ?", (budget_id,)).fetchone()
    return _with_money(conn, row) if row else None


# ---------------------------------------------------------------------------
# Create / edit
# ---------------------------------------------------------------------------


def create_budget(
    conn: sqlite3.Connection,
    *,
    project_id: int,
    name: str,
    import_key: Optional[str] = None,
    total_cents: Optional[int] = None,
    contract_id: Optional[int] = None,
    tags: Iterable[str] = (),
) -> int:
    """Create a budget. The import key defaults to the name."""
    cursor = conn.execute(
        """
        INSERT INTO budgets (project_id, contract_id, name, import_key, total_cents)
        VALUES (?, ?, ?, ?, ?)
        """,
        (project_id, contract_id, name, import_key or name, total_cents),
    )
    _replace_tags(conn, cursor.lastrowid, tags)
    conn.commit()
    return cursor.lastrowid


def assign_contract(conn: sqlite3.Connection, budget_id: int, contract_id: Optional[int]) -> None:
    conn.execute("UPDATE budgets SET contract_id = ? WHERE id = ?", (contract_id, budget_id))
    conn.commit()


def load_budget_to_edit(conn: sqlite3.Connection, budget_id: int) -> Optional[EditBudgetData]:
    row = conn.execute("SELECT * FROM budgets WHERE id = ?", (budget_id,)).fetchone()
    if not row:
        return None
    return EditBudgetData(
        id=row["id"],
        title=row["name"],
        total=Money.from_cents(row["total_cents"]),
        import_key=row["import_key"],
        tags=_tags_for(conn, budget_id),
    )


def save_budget(conn: sqlite3.Connection, project_id: int, data: EditBudgetData) -> int:
    """
    Insert or update a budget from the edit form. Returns the budget id.

    Raises:
        ValueError: if the title is empty or the import key is already used
            by another budget of the project
    """
    title = (data.title or "").strip()
    if not title:
        raise ValueError("Budget title is required")
    import_key = (data.import_key or "").strip() or title

    clash = conn.execute(
        "SELECT id FROM budgets WHERE project_id = ? AND import_key = ? AND id IS NOT ?",
        (project_id, import_key, data.id),
    ).fetchone()
    if clash:
        raise ValueError(f"Import key '{import_key}' is already used by another budget")

    if data.id is None:
        cursor = conn.execute(
            "INSERT INTO budgets (project_id, name, import_key, total_cents) VALUES (?, ?, ?, ?)",
            (project_id, title, import_key, data.total.cents),
        )
        budget_id = cursor.lastrowid
        logger.info("Created budget %s (id=%s)", title, budget_id)
    else:
        conn.execute(
            "UPDATE budgets SET name = ?, import_key = ?, total_cents = ? WHERE id = ?",
            (title, import_key, data.total.cents, data.id),
        )
        budget_id = data.id
        logger.info("Updated budget %s (id=%s)", title, budget_id)

    _replace_tags(conn, budget_id, data.tags)
    conn.commit()
    return budget_id
