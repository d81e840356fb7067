"""Tests for contract loading, creation and mapping to view models."""

from datetime import date

import pytest

from budgeteer.budgets.models import BudgetBaseData
from budgeteer.contracts import (
    ContractType,
    DynamicAttributeField,
    create_contract,
    get_contract,
    list_contracts,
    map_contract,
)
from budgeteer.contracts.mapper import map_contract_attributes
from budgeteer.core.money import Money
from budgeteer.invoices import create_invoice
from budgeteer.projects import add_contract_field, list_contract_fields


class TestAttributeMapping:
    def test_project_fields_without_value_are_empty(self):
        attributes = map_contract_attributes(
            [{"field_name": "Customer"}, {"field_name": "Order no."}],
            [{"field_name": "Order no.", "value": "PO-7"}],
        )
        assert attributes == [
            DynamicAttributeField("Customer", ""),
            DynamicAttributeField("Order no.", "PO-7"),
        ]

    def test_project_field_order_is_kept(self):
        attributes = map_contract_attributes(
            [{"field_name": "B"}, {"field_name": "A"}],
            [{"field_name": "A", "value": "1"}, {"field_name": "B", "value": "2"}],
        )
        assert [a.name for a in attributes] == ["B", "A"]

    def test_each_call_builds_its_own_map(self):
        first = map_contract_attributes([{"field_name": "X"}], [{"field_name": "X", "value": "1"}])
        second = map_contract_attributes([{"field_name": "Y"}], [])
        assert [a.name for a in first] == ["X"]
        assert [a.name for a in second] == ["Y"]


class TestMapContract:
    def test_none_entity(self):
        assert map_contract(None) is None

    def test_null_tax_rate_and_dates(self):
        contract = map_contract({
            "id": 3, "project_id": 1, "name": "Support", "type": "FIXED_PRICE",
            "budget_cents": 5000_00, "tax_rate": None, "start_date": "2024-01-15",
        })
        assert contract.tax_rate == 0.0
        assert contract.type is ContractType.FIXED_PRICE
        assert contract.start_date == date(2024, 1, 15)
        assert contract.budget == Money.from_cents(5000_00)
        assert contract.file_model.is_empty
        assert contract.contract_attributes == []


class TestContractService:
    def test_create_adds_project_fields(self, memory_db, seed_project):
        add_contract_field(memory_db, seed_project, "Customer")
        cid = create_contract(
            memory_db, project_id=seed_project, name="Main", budget_cents=20_000_00,
            tax_rate=19.0, attributes={"Order no.": "PO-7"},
        )
        names = [f["field_name"] for f in list_contract_fields(memory_db, seed_project)]
        assert names == ["Customer", "Order no."]

        contract = get_contract(memory_db, cid)
        assert contract.attribute("Customer") == ""
        assert contract.attribute("Order no.") == "PO-7"
        assert contract.attribute("Missing") is None

    def test_empty_name_rejected(self, memory_db, seed_project):
        with pytest.raises(ValueError):
            create_contract(memory_db, project_id=seed_project, name="  ")

    def test_budgets_and_invoices_belong_to_contract(self, memory_db, seed_budgets):
        cid = create_contract(memory_db, project_id=1, name="Main", tax_rate=19.0)
        memory_db.execute("UPDATE budgets SET contract_id = ? WHERE id = 1", (cid,))
        create_invoice(memory_db, contract_id=cid, name="Jan", year=2024, month=1, sum_cents=1000_00)

        contract = get_contract(memory_db, cid)

        assert contract.belonging_budgets == [BudgetBaseData(1, "Backend")]
        (invoice,) = contract.belonging_invoices
        assert invoice.sum_gross == Money.from_cents(1190_00)
        assert invoice.contract_name == "Main"

    def test_list_contracts_by_name(self, memory_db, seed_project):
        create_contract(memory_db, project_id=seed_project, name="Zeta")
        create_contract(memory_db, project_id=seed_project, name="Alpha")
        assert [c.contract_name for c in list_contracts(memory_db, seed_project)] == ["Alpha", "Zeta"]

    def test_unknown_contract(self, memory_db):
        assert get_contract(memory_db, 99) is None
