"""
Budgeteer Invoices Module

Invoices issued against contracts.
"""

from budgeteer.invoices.mapper import map_invoice, map_invoices
from budgeteer.invoices.models import InvoiceBaseData
from budgeteer.invoices.service import create_invoice, get_invoice, list_invoices

__all__ = [
    "map_invoice",
    "map_invoices",
    "InvoiceBaseData",
    "create_invoice",
    "get_invoice",
    "list_invoices",
]
