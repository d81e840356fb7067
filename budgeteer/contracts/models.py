"""Contract view models."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional

from budgeteer.budgets.models import BudgetBaseData
from budgeteer.core.files import FileUploadModel
from budgeteer.core.money import Money
from budgeteer.invoices.models import InvoiceBaseData


class ContractType(str, Enum):
    TIME_AND_MATERIAL = "TIME_AND_MATERIAL"
    FIXED_PRICE = "FIXED_PRICE"


@dataclass(frozen=True)
class DynamicAttributeField:
    """A project-defined contract field and this contract's value for it."""
    name: str
    value: str = ""


@dataclass
class ContractBaseData:
    contract_id: int
    project_id: int
    contract_name: str
    internal_number: Optional[str]
    type: ContractType
    start_date: Optional[date]
    budget: Money
    tax_rate: float
    file_model: FileUploadModel = field(default_factory=FileUploadModel)
    contract_attributes: List[DynamicAttributeField] = field(default_factory=list)
    belonging_budgets: List[BudgetBaseData] = field(default_factory=list)
    belonging_invoices: List[InvoiceBaseData] = field(default_factory=list)

    def attribute(self, name: str) -> Optional[str]:
        for attr in self.contract_attributes:
            if attr.name == name:
                return attr.value
        return None
