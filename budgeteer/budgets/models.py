"""Budget view models."""

from dataclasses import dataclass, field
from typing import List, Optional

from budgeteer.core.money import Money


@dataclass(frozen=True)
class BudgetBaseData:
    """Id and name of a budget, e.g. for listing the budgets of a contract."""
    id: int
    name: str


@dataclass
class BudgetTagFilter:
    """Selects budgets of a project by tag.

    No selected tags means every budget of the project; otherwise a budget
    matches when it carries at least one of the selected tags.
    """
    project_id: int
    selected_tags: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.selected_tags = [t for t in dict.fromkeys(self.selected_tags) if t]


@dataclass
class EditBudgetData:
    """Form model of the budget edit page."""
    id: Optional[int]
    title: str
    total: Money
    import_key: str
    tags: List[str] = field(default_factory=list)

    def __post_init__(self):
        # the form edits its own list, never the caller's
        self.tags = list(self.tags)
