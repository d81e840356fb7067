"""
Shared test fixtures for Budgeteer.

Provides an in-memory database with all schemas, a get_db patch, the Flask
test client, a CLI runner, and seed data fixtures for isolated testing.
"""

import sqlite3
from contextlib import ExitStack, contextmanager
from pathlib import Path
from unittest.mock import patch

import pytest

from budgeteer.core.db import SCHEMA_ORDER

# Every module that imported get_db by name
GET_DB_TARGETS = [
    "budgeteer.core.db.get_db",
    "budgeteer.core.get_db",
    "budgeteer.projects.service.get_db",
    "budgeteer.api.projects.get_db",
    "budgeteer.api.budgets.get_db",
    "budgeteer.api.people.get_db",
    "budgeteer.api.contracts.get_db",
    "budgeteer.api.invoices.get_db",
    "budgeteer.api.notifications.get_db",
    "budgeteer.api.templates.get_db",
]


@pytest.fixture
def memory_db():
    """Provide an in-memory SQLite database with ALL schemas applied in FK order."""
    conn = sqlite3.connect(":memory:")
    conn.execute("PRAGMA foreign_keys = ON")
    conn.row_factory = sqlite3.Row

    schema_dir = Path(__file__).parent.parent / "budgeteer"
    for module in SCHEMA_ORDER:
        schema_file = schema_dir / module / "schema.sql"
        if schema_file.exists():
            conn.executescript(schema_file.read_text(encoding="utf-8"))

    yield conn
    conn.close()


@pytest.fixture
def mock_db(memory_db):
    """Patch get_db everywhere to return the in-memory database."""

    @contextmanager
    def _get_db(readonly=False):
        yield memory_db

    with ExitStack() as stack:
        for target in GET_DB_TARGETS:
            stack.enter_context(patch(target, _get_db))
        yield memory_db


@pytest.fixture
def app(mock_db):
    from budgeteer.api import create_app

    return create_app({"TESTING": True, "SECRET_KEY": "test"})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()


@pytest.fixture
def seed_project(memory_db):
    """Insert a minimal project. Returns project id."""
    memory_db.execute("INSERT INTO projects (id, name) VALUES (1, 'Test Project')")
    memory_db.commit()
    return 1


@pytest.fixture
def seed_people(memory_db, seed_project):
    """Insert Alice (id 1) and Bob (id 2). Returns their ids."""
    memory_db.executemany(
        "INSERT INTO persons (id, project_id, name, import_key) VALUES (?, ?, ?, ?)",
        [(1, seed_project, "Alice", "alice"), (2, seed_project, "Bob", "bob")],
    )
    memory_db.commit()
    return 1, 2


@pytest.fixture
def seed_budgets(memory_db, seed_project):
    """Insert budgets Backend (id 1, tag 'dev') and Design (id 2, tag 'ux')."""
    memory_db.executemany(
        "INSERT INTO budgets (id, project_id, name, import_key, total_cents) VALUES (?, ?, ?, ?, ?)",
        [(1, seed_project, "Backend", "backend", 10_000_00), (2, seed_project, "Design", "design", None)],
    )
    memory_db.executemany(
        "INSERT INTO budget_tags (budget_id, tag) VALUES (?, ?)",
        [(1, "dev"), (2, "ux")],
    )
    memory_db.commit()
    return 1, 2


@pytest.fixture
def seed_records(memory_db, seed_people, seed_budgets):
    """
    Work and plan records around Wednesday 2024-03-06 (2024-W10).

    A full day (480 min) at 800.00 is worth 800.00; half a day 400.00.
    """
    alice, bob = seed_people
    backend, design = seed_budgets
    work = [
        # 2024-W09 (Feb 26 - Mar 3)
        (alice, backend, "2024-02-27", 480, 800_00),
        (bob, backend, "2024-02-28", 240, 600_00),
        # 2024-W10 (Mar 4 - Mar 10)
        (alice, design, "2024-03-05", 240, 800_00),
        (alice, backend, "2024-03-06", 480, 800_00),
        # long before every default window
        (bob, design, "2023-01-10", 480, 600_00),
    ]
    memory_db.executemany(
        "INSERT INTO work_records (person_id, budget_id, date, minutes, daily_rate_cents) "
        "VALUES (?, ?, ?, ?, ?)",
        work,
    )
    plan = [
        (alice, backend, "2024-02-26", 480, 800_00),
        (alice, backend, "2024-03-04", 960, 800_00),
    ]
    memory_db.executemany(
        "INSERT INTO plan_records (person_id, budget_id, date, minutes, daily_rate_cents) "
        "VALUES (?, ?, ?, ?, ?)",
        plan,
    )
    memory_db.commit()
