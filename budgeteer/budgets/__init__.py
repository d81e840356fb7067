"""
Budgeteer Budgets Module

Budgets of a project, their tags, and the budget edit form model.
"""

from budgeteer.budgets.models import BudgetBaseData, BudgetTagFilter, EditBudgetData
from budgeteer.budgets.service import (
    assign_contract,
    create_budget,
    get_budget_detail,
    list_budgets,
    list_budgets_by_filter,
    list_tags,
    load_budget_to_edit,
    save_budget,
)

__all__ = [
    "BudgetBaseData",
    "BudgetTagFilter",
    "EditBudgetData",
    "assign_contract",
    "create_budget",
    "get_budget_detail",
    "list_budgets",
    "list_budgets_by_filter",
    "list_tags",
    "load_budget_to_edit",
    "save_budget",
]
