"""Invoice view models."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from budgeteer.core.files import FileUploadModel
from budgeteer.core.money import Money


@dataclass
class InvoiceBaseData:
    invoice_id: int
    contract_id: int
    contract_name: str
    invoice_name: str
    internal_number: Optional[str]
    year: int
    month: int
    sum: Money
    sum_gross: Money
    tax_rate: float
    paid: bool
    due_date: Optional[date] = None
    paid_date: Optional[date] = None
    file_model: FileUploadModel = field(default_factory=FileUploadModel)

    @property
    def period_label(self) -> str:
        return f"{self.year}-{self.month:02d}"
