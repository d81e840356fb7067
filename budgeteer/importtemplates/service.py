"""
Import Template Business Logic

Example import files (working hours, resource plans) users can download and
fill in. Every project gets a generated default template per type; uploaded
templates are stored with the column names of their header row.
No Flask imports.
"""

import io
import json
import sqlite3
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from budgeteer.core import get_logger
from budgeteer.importtemplates.excel_io import (
    default_file_name,
    generate_default_template,
    read_header,
)

logger = get_logger("budgeteer.importtemplates")

ALLOWED_EXTENSIONS = {".xlsx", ".xls", ".csv"}


class TemplateType(str, Enum):
    WORK_RECORDS = "WORK_RECORDS"
    PLAN_RECORDS = "PLAN_RECORDS"


def _with_columns(row: sqlite3.Row) -> Dict[str, Any]:
    template = dict(row)
    template["columns"] = json.loads(template["columns"]) if template.get("columns") else []
    return template


def list_templates(conn: sqlite3.Connection, project_id: int) -> List[Dict[str, Any]]:
    rows = conn.execute(
        """
        SELECT id, project_id, name, description, type, file_name, columns, created_at
        FROM import_templates
        WHERE project_id = ?
        ORDER BY name
        """,
        (project_id,),
    ).fetchall()
    return [_with_columns(r) for r in rows]


def get_template(conn: sqlite3.Connection, template_id: int) -> Optional[Dict[str, Any]]:
    row = conn.execute("SELECT * FROM import_templates WHERE id = ?", (template_id,)).fetchone()
    return _with_columns(row) if row else None


def get_default_template(template_type: TemplateType) -> Tuple[str, io.BytesIO]:
    """File name and content of the generated default template."""
    value = TemplateType(template_type).value
    return default_file_name(value), generate_default_template(value)


def _check_extension(file_name: str) -> None:
    extension = "." + file_name.rsplit(".", 1)[-1].lower() if "." in file_name else ""
    if extension not in ALLOWED_EXTENSIONS:
        raise ValueError(
            f"Unsupported file type '{extension or file_name}'. "
            f"Allowed: {', '.join(sorted(ALLOWED_EXTENSIONS))}"
        )


def create_template(
    conn: sqlite3.Connection,
    *,
    project_id: int,
    name: str,
    template_type: TemplateType = TemplateType.WORK_RECORDS,
    description: Optional[str] = None,
    file_name: Optional[str] = None,
    file: Optional[bytes] = None,
) -> int:
    """
    Store an uploaded import template. Returns the new template id.

    Raises:
        ValueError: for an empty name, an unknown template type, or a file
            that cannot be imported
    """
    name = (name or "").strip()
    if not name:
        raise ValueError("Template name is required")
    template_type = TemplateType(template_type)

    columns: List[str] = []
    if file_name:
        _check_extension(file_name)
        if file:
            columns = read_header(file_name, file)

    cursor = conn.execute(
        """
        INSERT INTO import_templates
            (project_id, name, description, type, file_name, columns, file)
        VALUES (?, ?, ?, ?, ?, ?, ?)
        """,
        (project_id, name, description, template_type.value, file_name,
         json.dumps(columns), file),
    )
    conn.commit()
    logger.info("Stored import template %s (id=%s, %d columns)", name, cursor.lastrowid, len(columns))
    return cursor.lastrowid
