"""Tests for budget listing, tag filtering and the edit form."""

import pytest

from budgeteer.budgets import (
    BudgetTagFilter,
    EditBudgetData,
    assign_contract,
    create_budget,
    get_budget_detail,
    list_budgets,
    list_budgets_by_filter,
    list_tags,
    load_budget_to_edit,
    save_budget,
)
from budgeteer.core.money import Money


def test_tag_filter_drops_duplicates_and_blanks():
    assert BudgetTagFilter(1, ["dev", "", "dev", "ux"]).selected_tags == ["dev", "ux"]


def test_edit_data_copies_tags():
    tags = ["a"]
    data = EditBudgetData(None, "T", Money.zero(), "", tags)
    data.tags.append("b")
    assert tags == ["a"]


class TestListing:
    def test_list_budgets_with_money(self, memory_db, seed_records):
        backend, design = list_budgets(memory_db, 1)
        assert backend["name"] == "Backend"
        assert backend["tags"] == ["dev"]
        assert backend["spent"] == Money.from_cents(1900_00)
        assert backend["planned"] == Money.from_cents(2400_00)
        assert backend["remaining"] == Money.from_cents(8100_00)
        assert backend["progress"] == 19.0
        assert design["progress"] is None

    def test_filter_by_tag(self, memory_db, seed_budgets):
        rows = list_budgets_by_filter(memory_db, BudgetTagFilter(1, ["ux"]))
        assert [r["name"] for r in rows] == ["Design"]

    def test_filter_matches_any_tag(self, memory_db, seed_budgets):
        rows = list_budgets_by_filter(memory_db, BudgetTagFilter(1, ["ux", "dev"]))
        assert len(rows) == 2

    def test_list_tags(self, memory_db, seed_budgets):
        assert list_tags(memory_db, 1) == ["dev", "ux"]

    def test_detail_of_unknown_budget(self, memory_db):
        assert get_budget_detail(memory_db, 5) is None


class TestEdit:
    def test_create_and_load(self, memory_db, seed_project):
        bid = create_budget(memory_db, project_id=1, name="Ops", total_cents=500_00, tags=["run"])
        data = load_budget_to_edit(memory_db, bid)
        assert data.title == "Ops"
        assert data.import_key == "Ops"
        assert data.total == Money.from_cents(500_00)
        assert data.tags == ["run"]

    def test_save_new_budget(self, memory_db, seed_project):
        bid = save_budget(memory_db, 1, EditBudgetData(None, " QA ", Money.from_cents(100_00), "", ["test"]))
        detail = get_budget_detail(memory_db, bid)
        assert detail["name"] == "QA"
        assert detail["import_key"] == "QA"
        assert detail["tags"] == ["test"]

    def test_save_replaces_tags(self, memory_db, seed_budgets):
        data = load_budget_to_edit(memory_db, 1)
        data.tags = ["backend", "core"]
        save_budget(memory_db, 1, data)
        assert get_budget_detail(memory_db, 1)["tags"] == ["backend", "core"]

    def test_empty_title_rejected(self, memory_db, seed_project):
        with pytest.raises(ValueError):
            save_budget(memory_db, 1, EditBudgetData(None, "", Money.zero(), ""))

    def test_duplicate_import_key_rejected(self, memory_db, seed_budgets):
        with pytest.raises(ValueError, match="already used"):
            save_budget(memory_db, 1, EditBudgetData(None, "New", Money.zero(), "backend"))

    def test_assign_contract(self, memory_db, seed_budgets):
        memory_db.execute("INSERT INTO contracts (id, project_id, name) VALUES (7, 1, 'Main')")
        assign_contract(memory_db, 1, 7)
        assert get_budget_detail(memory_db, 1)["contract_name"] == "Main"
