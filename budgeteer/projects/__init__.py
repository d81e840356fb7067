"""
Budgeteer Projects Module

Projects and the contract fields each project defines for its contracts.
"""

from budgeteer.projects.service import (
    add_contract_field,
    create_project,
    delete_project,
    get_project,
    list_contract_fields,
    list_projects,
)

__all__ = [
    "add_contract_field",
    "create_project",
    "delete_project",
    "get_project",
    "list_contract_fields",
    "list_projects",
]
