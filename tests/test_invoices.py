"""Tests for invoice mapping and listing."""

from datetime import date

import pytest

from budgeteer.contracts import create_contract
from budgeteer.core.money import Money
from budgeteer.invoices import create_invoice, get_invoice, list_invoices, map_invoice
from budgeteer.invoices.mapper import gross_amount


def test_gross_amount():
    assert gross_amount(Money.from_cents(100_00), 19.0) == Money.from_cents(119_00)
    assert gross_amount(Money.from_cents(100_00), 0.0) == Money.from_cents(100_00)


def test_gross_amount_rounds_half_cent_up():
    assert gross_amount(Money.from_cents(15), 10.0).cents == 17


def test_map_invoice_without_tax_rate():
    invoice = map_invoice({
        "id": 1, "contract_id": 2, "name": "March", "year": 2024, "month": 3,
        "sum_cents": 250_00, "tax_rate": None, "paid": 1, "paid_date": "2024-04-02",
    })
    assert invoice.tax_rate == 0.0
    assert invoice.sum_gross == invoice.sum
    assert invoice.paid is True
    assert invoice.paid_date == date(2024, 4, 2)
    assert invoice.due_date is None
    assert invoice.period_label == "2024-03"


class TestInvoiceService:
    @pytest.fixture
    def contract_id(self, memory_db, seed_project):
        return create_contract(memory_db, project_id=seed_project, name="Main", tax_rate=7.0)

    def test_newest_period_first(self, memory_db, contract_id):
        create_invoice(memory_db, contract_id=contract_id, name="Jan", year=2024, month=1, sum_cents=1)
        create_invoice(memory_db, contract_id=contract_id, name="Dec", year=2023, month=12, sum_cents=1)
        create_invoice(memory_db, contract_id=contract_id, name="Feb", year=2024, month=2, sum_cents=1)
        names = [i.invoice_name for i in list_invoices(memory_db, project_id=1)]
        assert names == ["Feb", "Jan", "Dec"]

    def test_invalid_month(self, memory_db, contract_id):
        with pytest.raises(ValueError):
            create_invoice(memory_db, contract_id=contract_id, name="X", year=2024, month=13, sum_cents=1)

    def test_get_invoice_uses_contract_tax(self, memory_db, contract_id):
        iid = create_invoice(memory_db, contract_id=contract_id, name="Jan", year=2024, month=1, sum_cents=100_00)
        invoice = get_invoice(memory_db, iid)
        assert invoice.tax_rate == 7.0
        assert invoice.sum_gross == Money.from_cents(107_00)

    def test_filter_by_contract(self, memory_db, contract_id):
        other = create_contract(memory_db, project_id=1, name="Other")
        create_invoice(memory_db, contract_id=contract_id, name="A", year=2024, month=1, sum_cents=1)
        create_invoice(memory_db, contract_id=other, name="B", year=2024, month=1, sum_cents=1)
        assert [i.invoice_name for i in list_invoices(memory_db, contract_id=other)] == ["B"]
