"""
Notification message formatting.

Message templates live under ``messages:`` in config.yaml and are filled
with str.format(). Dates are rendered as DD.MM.YYYY.
"""

from datetime import date
from typing import Any, Dict, assert_never

from budgeteer.core.config import get_config_value
from budgeteer.notifications.models import (
    EmptyPlanRecordsNotification,
    EmptyWorkRecordsNotification,
    MissingBudgetTotalNotification,
    MissingContractForBudgetNotification,
    MissingDailyRateForBudgetNotification,
    MissingDailyRateNotification,
    Notification,
)

DATE_FORMAT = "%d.%m.%Y"


def _template(key: str) -> str:
    template = get_config_value("messages", key)
    if not template:
        raise KeyError(f"No message template configured for messages.{key}")
    return template


def _format(key: str, **fields: Any) -> str:
    values: Dict[str, Any] = {
        name: value.strftime(DATE_FORMAT) if isinstance(value, date) else value
        for name, value in fields.items()
    }
    return _template(key).format(**values)


def format_notification(notification: Notification) -> str:
    """
    Render the user-facing message of a notification.

    Raises:
        AssertionError: for an object that is not one of the Notification
            variants, i.e. a variant was added without a message here
    """
    if isinstance(notification, MissingDailyRateNotification):
        return _format(
            "missing_daily_rate",
            person_name=notification.person_name,
            start_date=notification.start_date,
            end_date=notification.end_date,
        )
    elif isinstance(notification, MissingBudgetTotalNotification):
        return _format("missing_budget_total", budget_name=notification.budget_name)
    elif isinstance(notification, EmptyWorkRecordsNotification):
        return _format("empty_work_records")
    elif isinstance(notification, EmptyPlanRecordsNotification):
        return _format("empty_plan_records")
    elif isinstance(notification, MissingDailyRateForBudgetNotification):
        return _format(
            "missing_daily_rate_for_budget",
            budget_name=notification.budget_name,
            start_date=notification.start_date,
            end_date=notification.end_date,
        )
    elif isinstance(notification, MissingContractForBudgetNotification):
        return _format("missing_contract", budget_name=notification.budget_name)
    else:
        assert_never(notification)
