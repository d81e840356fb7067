"""
Budgeteer - Project Budget Tracking

Tracks project budgets against recorded work and planned effort.

Modules:
    core            - Shared services (db, config, logging, money)
    projects        - Projects
    people          - People working on a project
    budgets         - Budgets, tags, budget editing
    contracts       - Contracts and their dynamic attributes
    invoices        - Invoices belonging to contracts
    statistics      - Calendar windows, gap-filled burn/plan series, shares
    notifications   - Data quality notifications and their messages
    importtemplates - Import templates for work/plan record files
"""

__version__ = "0.1.0"
