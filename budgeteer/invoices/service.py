"""
Invoice Business Logic

No Flask imports, used by both CLI and API layers.
"""

import sqlite3
from typing import Any, Dict, List, Optional

from budgeteer.core import get_logger
from budgeteer.invoices.mapper import map_invoice, map_invoices
from budgeteer.invoices.models import InvoiceBaseData

logger = get_logger("budgeteer.invoices")

_INVOICE_SELECT = """
    SELECT i.*, c.name AS contract_name, c.tax_rate, c.project_id
    FROM invoices i
    JOIN contracts c ON c.id = i.contract_id
"""


def list_invoice_rows(
    conn: sqlite3.Connection,
    *,
    contract_id: Optional[int] = None,
    project_id: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """Invoice rows joined with contract name and tax rate, newest period first."""
    sql = _INVOICE_SELECT
    conditions = []
    params: list = []
    if contract_id is not None:
        conditions.append("i.contract_id = ?")
        params.append(contract_id)
    if project_id is not None:
        conditions.append("c.project_id = ?")
        params.append(project_id)
    if conditions:
        sql += " WHERE " + " AND ".join(conditions)
    sql += " ORDER BY i.year DESC, i.month DESC, i.id DESC"
    return [dict(r) for r in conn.execute(sql, params).fetchall()]


def list_invoices(
    conn: sqlite3.Connection,
    *,
    contract_id: Optional[int] = None,
    project_id: Optional[int] = None,
) -> List[InvoiceBaseData]:
    return map_invoices(list_invoice_rows(conn, contract_id=contract_id, project_id=project_id))


def get_invoice(conn: sqlite3.Connection, invoice_id: int) -> Optional[InvoiceBaseData]:
    row = conn.execute(_INVOICE_SELECT + " WHERE i.id = ?", (invoice_id,)).fetchone()
    return map_invoice(dict(row)) if row else None


def create_invoice(
    conn: sqlite3.Connection,
    *,
    contract_id: int,
    name: str,
    year: int,
    month: int,
    sum_cents: int,
    internal_number: Optional[str] = None,
    paid: bool = False,
    due_date: Optional[str] = None,
    paid_date: Optional[str] = None,
    link: Optional[str] = None,
) -> int:
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month}")
    cursor = conn.execute(
        """
        INSERT INTO invoices
            (contract_id, name, internal_number, year, month, sum_cents,
             paid, due_date, paid_date, link)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (contract_id, name, internal_number, year, month, sum_cents,
         1 if paid else 0, due_date, paid_date, link),
    )
    conn.commit()
    return cursor.lastrowid
