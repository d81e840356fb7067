"""Request argument helpers shared by the blueprints."""

from typing import List, Tuple

from flask import abort, request

from budgeteer.budgets.models import BudgetTagFilter
from budgeteer.core.config import get_statistics_defaults
from budgeteer.statistics.periods import PeriodUnit

# Upper bound for lookback windows requested through the web layer
MAX_PERIODS = 520

_DEFAULT_KEYS = {
    PeriodUnit.DAY: "days",
    PeriodUnit.WEEK: "weeks",
    PeriodUnit.MONTH: "months",
}


def period_args(default_unit: PeriodUnit = PeriodUnit.WEEK) -> Tuple[PeriodUnit, int]:
    """Parse ``unit`` and ``count`` query args, falling back to config defaults."""
    try:
        unit = PeriodUnit(request.args.get("unit", default_unit.value))
    except ValueError:
        abort(400, "unit must be one of: day, week, month")

    count = request.args.get("count", type=int)
    if count is None:
        count = get_statistics_defaults()[_DEFAULT_KEYS[unit]]
    if not 0 <= count <= MAX_PERIODS:
        abort(400, f"count must be between 0 and {MAX_PERIODS}")
    return unit, count


def required_project_id() -> int:
    project_id = request.args.get("project_id", type=int)
    if project_id is None:
        abort(400, "project_id is required")
    return project_id


def selected_tags() -> List[str]:
    """Tags from repeated ``tags`` args or one comma separated value."""
    tags: List[str] = []
    for raw in request.args.getlist("tags"):
        tags.extend(t.strip() for t in raw.split(","))
    return [t for t in tags if t]


def budget_filter_arg(project_id: int) -> BudgetTagFilter:
    return BudgetTagFilter(project_id, selected_tags())
