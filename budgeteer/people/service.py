"""
People Business Logic

No Flask imports, used by both CLI and API layers.
"""

import sqlite3
from typing import Any, Dict, List, Optional

from budgeteer.core import get_logger

logger = get_logger("budgeteer.people")


def list_people(conn: sqlite3.Connection, project_id: int) -> List[Dict[str, Any]]:
    """List a project's people with their average daily rate and last booked day."""
    rows = conn.execute(
        """
        SELECT p.*,
               AVG(NULLIF(w.daily_rate_cents, 0)) AS avg_daily_rate_cents,
               MAX(w.date) AS last_booked
        FROM persons p
        LEFT JOIN work_records w ON w.person_id = p.id
        WHERE p.project_id = ?
        GROUP BY p.id
        ORDER BY p.name
        """,
        (project_id,),
    ).fetchall()
    return [dict(r) for r in rows]


def get_person(conn: sqlite3.Connection, person_id: int) -> Optional[Dict[str, Any]]:
    row = conn.execute("SELECT * FROM persons WHERE id = ?", (person_id,)).fetchone()
    return dict(row) if row else None


def create_person(
    conn: sqlite3.Connection,
    *,
    project_id: int,
    name: str,
    import_key: Optional[str] = None,
    default_daily_rate_cents: Optional[int] = None,
) -> int:
    """Create a person. The import key defaults to the name."""
    name = (name or "").strip()
    if not name:
        raise ValueError("Person name is required")

    cursor = conn.execute(
        """
        INSERT INTO persons (project_id, name, import_key, default_daily_rate_cents)
        VALUES (?, ?, ?, ?)
        """,
        (project_id, name, import_key or name, default_daily_rate_cents),
    )
    conn.commit()
    return cursor.lastrowid
