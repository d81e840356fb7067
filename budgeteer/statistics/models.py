"""Value objects produced by the statistics layer."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from budgeteer.core.money import Money
from budgeteer.statistics.periods import Period

TARGET_SERIES_NAME = "Target"


@dataclass(frozen=True)
class AggregatedRecord:
    """Sum of record values within one period, optionally per title."""
    period: Period
    value_in_cents: int
    title: Optional[str] = None


@dataclass
class MoneySeries:
    name: str
    values: List[Money] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "values": [str(v.amount) for v in self.values]}


@dataclass
class TargetAndActual:
    """Planned values of a window paired with one actual series per title."""
    target_series: MoneySeries = field(default_factory=lambda: MoneySeries(TARGET_SERIES_NAME))
    actual_series: List[MoneySeries] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)

    def actual_by_name(self) -> Dict[str, MoneySeries]:
        return {series.name: series for series in self.actual_series}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "labels": list(self.labels),
            "target": self.target_series.to_dict(),
            "actual": [series.to_dict() for series in self.actual_series],
        }


@dataclass(frozen=True)
class Share:
    """Part of a total, e.g. the money one person burned on a budget."""
    name: str
    value: Money

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "value": str(self.value.amount)}
