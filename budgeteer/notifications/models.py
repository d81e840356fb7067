"""
Notification variants.

The set of variants is closed: Notification is their Union, and the message
formatter handles each one explicitly.
"""

from dataclasses import dataclass
from datetime import date
from typing import Union


@dataclass(frozen=True)
class MissingDailyRateNotification:
    """A person has booked work without a daily rate."""
    person_id: int
    person_name: str
    start_date: date
    end_date: date


@dataclass(frozen=True)
class MissingBudgetTotalNotification:
    budget_id: int
    budget_name: str


@dataclass(frozen=True)
class EmptyWorkRecordsNotification:
    """No work records have been imported for the project yet."""


@dataclass(frozen=True)
class EmptyPlanRecordsNotification:
    """No plan records have been imported for the project yet."""


@dataclass(frozen=True)
class MissingDailyRateForBudgetNotification:
    """Work has been booked on a budget without a daily rate."""
    budget_id: int
    budget_name: str
    start_date: date
    end_date: date


@dataclass(frozen=True)
class MissingContractForBudgetNotification:
    budget_id: int
    budget_name: str


Notification = Union[
    MissingDailyRateNotification,
    MissingBudgetTotalNotification,
    EmptyWorkRecordsNotification,
    EmptyPlanRecordsNotification,
    MissingDailyRateForBudgetNotification,
    MissingContractForBudgetNotification,
]
