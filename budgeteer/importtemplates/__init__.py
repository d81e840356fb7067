"""
Budgeteer Import Templates Module

Downloadable example files for work record and plan record imports.
"""

from budgeteer.importtemplates.service import (
    TemplateType,
    create_template,
    get_default_template,
    get_template,
    list_templates,
)

__all__ = [
    "TemplateType",
    "create_template",
    "get_default_template",
    "get_template",
    "list_templates",
]
