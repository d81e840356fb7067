"""
Budgeteer People Module

People booking work and plan records on a project's budgets.
"""

from budgeteer.people.service import create_person, get_person, list_people

__all__ = ["create_person", "get_person", "list_people"]
