"""
Project Business Logic

Project CRUD and project-level contract field definitions.
No Flask imports; this module is used by both CLI and API layers.
"""

import sqlite3
from typing import Any, Dict, List, Optional

from budgeteer.core import get_db, get_logger

logger = get_logger("budgeteer.projects")


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------


def list_projects(conn: Optional[sqlite3.Connection] = None) -> List[Dict[str, Any]]:
    """List all projects with their budget count and total budget."""
    sql = """
        SELECT p.*,
               COUNT(b.id) AS budget_count,
               COALESCE(SUM(b.total_cents), 0) AS total_cents
        FROM projects p
        LEFT JOIN budgets b ON b.project_id = p.id
        GROUP BY p.id
        ORDER BY p.name
    """

    def _run(c: sqlite3.Connection):
        return [dict(r) for r in c.execute(sql).fetchall()]

    if conn:
        return _run(conn)
    with get_db(readonly=True) as c:
        return _run(c)


def get_project(conn: sqlite3.Connection, project_id: int) -> Optional[Dict[str, Any]]:
    row = conn.execute("SELECT * FROM projects WHERE id = ?", (project_id,)).fetchone()
    return dict(row) if row else None


def create_project(
    conn: sqlite3.Connection,
    *,
    name: str,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> int:
    """Create a project. Returns the new project id."""
    name = (name or "").strip()
    if not name:
        raise ValueError("Project name is required")

    cursor = conn.execute(
        "INSERT INTO projects (name, start_date, end_date) VALUES (?, ?, ?)",
        (name, start_date, end_date),
    )
    conn.commit()
    logger.info("Created project %s (id=%s)", name, cursor.lastrowid)
    return cursor.lastrowid


def delete_project(conn: sqlite3.Connection, project_id: int) -> bool:
    """Delete a project and everything belonging to it. Returns True if found."""
    cursor = conn.execute("DELETE FROM projects WHERE id = ?", (project_id,))
    conn.commit()
    if cursor.rowcount:
        logger.info("Deleted project id=%s", project_id)
    return cursor.rowcount > 0


# ---------------------------------------------------------------------------
# Contract fields
# ---------------------------------------------------------------------------


def list_contract_fields(conn: sqlite3.Connection, project_id: int) -> List[Dict[str, Any]]:
    rows = conn.execute(
        "SELECT * FROM project_contract_fields WHERE project_id = ? ORDER BY position, id",
        (project_id,),
    ).fetchall()
    return [dict(r) for r in rows]


def add_contract_field(conn: sqlite3.Connection, project_id: int, field_name: str) -> int:
    """Define a dynamic contract attribute for every contract of the project."""
    field_name = (field_name or "").strip()
    if not field_name:
        raise ValueError("Field name is required")

    existing = conn.execute(
        "SELECT id FROM project_contract_fields WHERE project_id = ? AND field_name = ?",
        (project_id, field_name),
    ).fetchone()
    if existing:
        return existing["id"]

    position = conn.execute(
        "SELECT COALESCE(MAX(position), -1) + 1 AS pos FROM project_contract_fields "
        "WHERE project_id = ?",
        (project_id,),
    ).fetchone()["pos"]
    cursor = conn.execute(
        "INSERT INTO project_contract_fields (project_id, field_name, position) VALUES (?, ?, ?)",
        (project_id, field_name, position),
    )
    conn.commit()
    return cursor.lastrowid
