"""Maps invoice rows (joined with their contract) to InvoiceBaseData."""

from datetime import date
from decimal import Decimal
from typing import Any, Iterable, List, Mapping, Optional

from budgeteer.core.files import FileUploadModel
from budgeteer.core.money import Money
from budgeteer.invoices.models import InvoiceBaseData


def _parse_date(raw: Optional[str]) -> Optional[date]:
    return date.fromisoformat(raw) if raw else None


def gross_amount(net: Money, tax_rate: float) -> Money:
    """Net amount plus tax, tax_rate in percent."""
    factor = Decimal(1) + Decimal(str(tax_rate)) / 100
    return Money.from_cents(net.cents * factor, net.currency)


def map_invoice(entity: Mapping[str, Any]) -> InvoiceBaseData:
    tax_rate = entity.get("tax_rate")
    tax_rate = 0.0 if tax_rate is None else float(tax_rate)
    net = Money.from_cents(entity["sum_cents"])
    return InvoiceBaseData(
        invoice_id=entity["id"],
        contract_id=entity["contract_id"],
        contract_name=entity.get("contract_name") or "",
        invoice_name=entity["name"],
        internal_number=entity.get("internal_number"),
        year=entity["year"],
        month=entity["month"],
        sum=net,
        sum_gross=gross_amount(net, tax_rate),
        tax_rate=tax_rate,
        paid=bool(entity.get("paid")),
        due_date=_parse_date(entity.get("due_date")),
        paid_date=_parse_date(entity.get("paid_date")),
        file_model=FileUploadModel(entity.get("file_name"), entity.get("file"), entity.get("link")),
    )


def map_invoices(entities: Iterable[Mapping[str, Any]]) -> List[InvoiceBaseData]:
    return [map_invoice(entity) for entity in entities]
