"""
Maps a loaded contract entity to ContractBaseData.

The entity is the dict produced by contracts.service.load_contract_entity():
the contract row plus its project's contract fields, its own field values,
its budgets and its invoices.
"""

from datetime import date
from typing import Any, Dict, Iterable, List, Mapping, Optional

from budgeteer.budgets.models import BudgetBaseData
from budgeteer.contracts.models import ContractBaseData, ContractType, DynamicAttributeField
from budgeteer.core.files import FileUploadModel
from budgeteer.core.money import Money
from budgeteer.invoices.mapper import map_invoice


def map_contract_attributes(
    project_fields: Iterable[Mapping[str, Any]],
    contract_fields: Iterable[Mapping[str, Any]],
) -> List[DynamicAttributeField]:
    """
    Every field the project defines, in project order, with this contract's
    value where it has one and an empty value otherwise.
    """
    attributes: Dict[str, DynamicAttributeField] = {}
    for project_field in project_fields:
        name = project_field["field_name"]
        attributes[name] = DynamicAttributeField(name, "")
    for contract_field in contract_fields:
        name = contract_field["field_name"]
        attributes[name] = DynamicAttributeField(name, contract_field["value"] or "")
    return list(attributes.values())


def map_contract(entity: Optional[Mapping[str, Any]]) -> Optional[ContractBaseData]:
    if entity is None:
        return None

    tax_rate = entity.get("tax_rate")
    start_date = entity.get("start_date")
    return ContractBaseData(
        contract_id=entity["id"],
        project_id=entity["project_id"],
        contract_name=entity["name"],
        internal_number=entity.get("internal_number"),
        type=ContractType(entity.get("type") or ContractType.TIME_AND_MATERIAL),
        start_date=date.fromisoformat(start_date) if start_date else None,
        budget=Money.from_cents(entity.get("budget_cents")),
        tax_rate=0.0 if tax_rate is None else float(tax_rate),
        file_model=FileUploadModel(entity.get("file_name"), entity.get("file"), entity.get("link")),
        contract_attributes=map_contract_attributes(
            entity.get("project_contract_fields", []), entity.get("contract_fields", [])
        ),
        belonging_budgets=[
            BudgetBaseData(b["id"], b["name"]) for b in entity.get("budgets", [])
        ],
        belonging_invoices=[map_invoice(i) for i in entity.get("invoices", [])],
    )


def map_contracts(entities: Iterable[Mapping[str, Any]]) -> List[ContractBaseData]:
    return [map_contract(entity) for entity in entities]
