"""
Database access for Budgeteer.

Provides connection management, query execution, and schema migration.
Single source of truth for all database operations.
"""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from budgeteer.core.config import BUDGETEER_PATHS


def get_db_path() -> Path:
    """Get database path from config."""
    return BUDGETEER_PATHS.database


@contextmanager
def get_db(readonly: bool = False) -> Generator[sqlite3.Connection, None, None]:
    """
    Context manager for database connections.

    Enables foreign keys and Row factory automatically.

    Args:
        readonly: Open in read-only mode (useful for queries)

    Yields:
        sqlite3.Connection with Row factory enabled
    """
    db_path = get_db_path()

    if readonly:
        uri = f"file:{db_path}?mode=ro"
        conn = sqlite3.connect(uri, uri=True)
    else:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(db_path))

    try:
        conn.execute("PRAGMA foreign_keys = ON")
        conn.row_factory = sqlite3.Row
        yield conn
    finally:
        conn.close()


def execute_query(query: str, params: tuple = (), readonly: bool = True) -> list:
    """
    Execute a query and return results as list of Row objects.

    Args:
        query: SQL query
        params: Query parameters
        readonly: Use read-only connection

    Returns:
        List of sqlite3.Row objects
    """
    with get_db(readonly=readonly) as conn:
        cursor = conn.execute(query, params)
        return cursor.fetchall()


# Schema dependency order: foreign keys flow downhill through this list.
SCHEMA_ORDER = [
    "projects",
    "people",
    "contracts",
    "budgets",
    "invoices",
    "records",
    "importtemplates",
]


def apply_schemas(conn: sqlite3.Connection) -> int:
    """
    Apply every module's schema.sql to an open connection.

    Each schema.sql uses CREATE TABLE IF NOT EXISTS, making this safe to
    run repeatedly. Returns the number of schema files applied.
    """
    from budgeteer.core.logging import get_logger

    logger = get_logger("budgeteer.migrate")
    package_dir = Path(__file__).parent.parent

    applied = 0
    for module_name in SCHEMA_ORDER:
        schema_file = package_dir / module_name / "schema.sql"
        if schema_file.exists():
            logger.debug(f"Applying schema: {module_name}/schema.sql")
            conn.executescript(schema_file.read_text(encoding="utf-8"))
            applied += 1
        else:
            logger.debug(f"No schema for module: {module_name}")
    return applied


def migrate_all() -> int:
    """Run all module schemas against the configured database, in dependency order."""
    from budgeteer.core.logging import get_logger

    logger = get_logger("budgeteer.migrate")

    with get_db() as conn:
        try:
            count = apply_schemas(conn)
            conn.commit()
        except sqlite3.Error:
            logger.exception("Schema migration failed")
            raise
    logger.info("Applied %d schema(s) to %s", count, get_db_path())
    return count
