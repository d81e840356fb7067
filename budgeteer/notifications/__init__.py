"""
Budgeteer Notifications Module

Data quality notifications shown on the project and budget pages.
"""

from budgeteer.notifications.messages import format_notification
from budgeteer.notifications.models import (
    EmptyPlanRecordsNotification,
    EmptyWorkRecordsNotification,
    MissingBudgetTotalNotification,
    MissingContractForBudgetNotification,
    MissingDailyRateForBudgetNotification,
    MissingDailyRateNotification,
    Notification,
)
from budgeteer.notifications.service import (
    describe,
    get_notifications_for_budget,
    get_notifications_for_project,
)

__all__ = [
    "format_notification",
    "EmptyPlanRecordsNotification",
    "EmptyWorkRecordsNotification",
    "MissingBudgetTotalNotification",
    "MissingContractForBudgetNotification",
    "MissingDailyRateForBudgetNotification",
    "MissingDailyRateNotification",
    "Notification",
    "describe",
    "get_notifications_for_budget",
    "get_notifications_for_project",
]
