"""
Budgeteer Records Module

Work records (time actually booked) and plan records (time planned), plus
the aggregation queries the statistics layer builds its series from.
"""

from budgeteer.records.aggregation import (
    aggregate_plan,
    aggregate_work,
    average_daily_rates,
    budget_shares_for_person,
    person_shares_for_budget,
)
from budgeteer.records.recording import (
    count_records,
    create_plan_record,
    create_work_record,
)

__all__ = [
    "aggregate_plan",
    "aggregate_work",
    "average_daily_rates",
    "budget_shares_for_person",
    "person_shares_for_budget",
    "count_records",
    "create_plan_record",
    "create_work_record",
]
