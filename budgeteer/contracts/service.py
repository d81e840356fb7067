"""
Contract Business Logic

Loading contract entities (with fields, budgets and invoices) and creating
contracts. No Flask imports, used by both CLI and API layers.
"""

import sqlite3
from typing import Any, Dict, List, Mapping, Optional

from budgeteer.contracts.mapper import map_contract, map_contracts
from budgeteer.contracts.models import ContractBaseData, ContractType
from budgeteer.core import get_logger
from budgeteer.invoices.service import list_invoice_rows
from budgeteer.projects.service import add_contract_field, list_contract_fields

logger = get_logger("budgeteer.contracts")


def load_contract_entity(conn: sqlite3.Connection, contract_id: int) -> Optional[Dict[str, Any]]:
    """The contract row plus everything the mapper needs, or None."""
    row = conn.execute("SELECT * FROM contracts WHERE id = ?", (contract_id,)).fetchone()
    if not row:
        return None

    entity = dict(row)
    entity["project_contract_fields"] = list_contract_fields(conn, entity["project_id"])
    entity["contract_fields"] = [
        dict(r) for r in conn.execute(
            """
            SELECT f.field_name, cf.value
            FROM contract_fields cf
            JOIN project_contract_fields f ON f.id = cf.field_id
            WHERE cf.contract_id = ?
            ORDER BY f.position, f.id
            """,
            (contract_id,),
        ).fetchall()
    ]
    entity["budgets"] = [
        dict(r) for r in conn.execute(
            "SELECT id, name FROM budgets WHERE contract_id = ? ORDER BY name", (contract_id,)
        ).fetchall()
    ]
    entity["invoices"] = list_invoice_rows(conn, contract_id=contract_id)
    return entity


def get_contract(conn: sqlite3.Connection, contract_id: int) -> Optional[ContractBaseData]:
    return map_contract(load_contract_entity(conn, contract_id))


def list_contracts(conn: sqlite3.Connection, project_id: int) -> List[ContractBaseData]:
    ids = [
        r["id"] for r in conn.execute(
            "SELECT id FROM contracts WHERE project_id = ? ORDER BY name", (project_id,)
        ).fetchall()
    ]
    return map_contracts(load_contract_entity(conn, cid) for cid in ids)


def create_contract(
    conn: sqlite3.Connection,
    *,
    project_id: int,
    name: str,
    budget_cents: int = 0,
    contract_type: ContractType = ContractType.TIME_AND_MATERIAL,
    internal_number: Optional[str] = None,
    start_date: Optional[str] = None,
    tax_rate: Optional[float] = None,
    link: Optional[str] = None,
    attributes: Optional[Mapping[str, str]] = None,
) -> int:
    """
    Create a contract. Attributes not yet defined as project contract fields
    are added to the project first. Returns the new contract id.
    """
    name = (name or "").strip()
    if not name:
        raise ValueError("Contract name is required")

    cursor = conn.execute(
        """
        INSERT INTO contracts
            (project_id, name, internal_number, type, start_date, budget_cents, tax_rate, link)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (project_id, name, internal_number, ContractType(contract_type).value,
         start_date, budget_cents, tax_rate, link),
    )
    contract_id = cursor.lastrowid

    for field_name, value in (attributes or {}).items():
        field_id = add_contract_field(conn, project_id, field_name)
        conn.execute(
            "INSERT INTO contract_fields (contract_id, field_id, value) VALUES (?, ?, ?)",
            (contract_id, field_id, value),
        )
    conn.commit()
    logger.info("Created contract %s (id=%s) in project %s", name, contract_id, project_id)
    return contract_id
