"""
Budgeteer Contracts Module

Contracts, their project-defined dynamic attributes, and the budgets and
invoices belonging to them.
"""

from budgeteer.contracts.mapper import map_contract, map_contracts
from budgeteer.contracts.models import ContractBaseData, ContractType, DynamicAttributeField
from budgeteer.contracts.service import (
    create_contract,
    get_contract,
    list_contracts,
    load_contract_entity,
)

__all__ = [
    "map_contract",
    "map_contracts",
    "ContractBaseData",
    "ContractType",
    "DynamicAttributeField",
    "create_contract",
    "get_contract",
    "list_contracts",
    "load_contract_entity",
]
