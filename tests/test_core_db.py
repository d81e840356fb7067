"""Tests for database connection management and schema migration."""

import sqlite3

import pytest

from budgeteer.core.db import SCHEMA_ORDER, apply_schemas, execute_query, get_db, migrate_all


def test_get_db_sets_row_factory(mock_db):
    row = mock_db.execute("SELECT 1 AS val").fetchone()
    assert row["val"] == 1


def test_get_db_enables_foreign_keys(mock_db):
    assert mock_db.execute("PRAGMA foreign_keys").fetchone()[0] == 1


def test_execute_query_returns_rows(mock_db):
    rows = execute_query("SELECT 42 AS n")
    assert rows[0]["n"] == 42


def test_schema_order_starts_with_projects():
    assert SCHEMA_ORDER[0] == "projects"
    assert SCHEMA_ORDER.index("budgets") < SCHEMA_ORDER.index("records")


def test_apply_schemas_is_idempotent():
    conn = sqlite3.connect(":memory:")
    assert apply_schemas(conn) == len(SCHEMA_ORDER)
    assert apply_schemas(conn) == len(SCHEMA_ORDER)
    tables = {r[0] for r in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}
    assert {"projects", "budgets", "work_records", "plan_records", "import_templates"} <= tables
    conn.close()


def test_migrate_all_creates_database(monkeypatch, tmp_path):
    db_file = tmp_path / "nested" / "budgeteer.db"
    monkeypatch.setenv("BUDGETEER_DATABASE", str(db_file))
    assert migrate_all() == len(SCHEMA_ORDER)
    assert db_file.exists()
    with get_db(readonly=True) as conn:
        assert conn.execute("SELECT COUNT(*) FROM projects").fetchone()[0] == 0


def test_foreign_keys_enforced(memory_db):
    with pytest.raises(sqlite3.IntegrityError):
        memory_db.execute("INSERT INTO budgets (project_id, name, import_key) VALUES (99, 'x', 'x')")
