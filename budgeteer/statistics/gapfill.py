"""
Gap-filling of sparse aggregation results.

The query layer only returns periods that actually contain records. Charts
need one value per period of the requested window, so every period without
a record is filled with zero. Absence of a record is valid data, never an
error.

Windows and record lists are bounded by the UI lookback ranges (a few dozen
to ~100 entries), so a linear scan per period is fine.
"""

from typing import Iterable, List, Optional, Sequence

from budgeteer.core.money import Money
from budgeteer.statistics.models import (
    TARGET_SERIES_NAME,
    AggregatedRecord,
    MoneySeries,
    TargetAndActual,
)
from budgeteer.statistics.periods import Period


def find_record(
    period: Period,
    records: Iterable[AggregatedRecord],
) -> Optional[AggregatedRecord]:
    """Return the first record in ``period``, or None."""
    for record in records:
        if record.period == period:
            return record
    return None


def fill_missing_cents(
    window: Sequence[Period],
    records: Sequence[AggregatedRecord],
) -> List[int]:
    """One amount per window period, index-aligned to the window, zero where absent."""
    result = []
    for period in window:
        record = find_record(period, records)
        result.append(record.value_in_cents if record else 0)
    return result


def fill_missing(
    window: Sequence[Period],
    records: Sequence[AggregatedRecord],
    currency: Optional[str] = None,
) -> List[Money]:
    """Same as fill_missing_cents(), converted to Money."""
    return [Money.from_cents(cents, currency) for cents in fill_missing_cents(window, records)]


def collect_titles(records: Iterable[AggregatedRecord]) -> List[str]:
    """Distinct titles in first-seen order. Untitled records are ignored."""
    return list(dict.fromkeys(r.title for r in records if r.title is not None))


def fill_missing_titled(
    window: Sequence[Period],
    records: Sequence[AggregatedRecord],
    currency: Optional[str] = None,
) -> List[MoneySeries]:
    """
    One dense series per distinct title found in ``records``.

    Titles come from the records only; a title with no record in the window
    never appears. Callers must not rely on the order of the series.
    """
    series = []
    for title in collect_titles(records):
        titled_records = [r for r in records if r.title == title]
        series.append(MoneySeries(title, fill_missing(window, titled_records, currency)))
    return series


def assemble_target_and_actual(
    window: Sequence[Period],
    planned: Sequence[AggregatedRecord],
    burned: Sequence[AggregatedRecord],
    currency: Optional[str] = None,
) -> TargetAndActual:
    """Pair the gap-filled plan ("Target") with the titled actual series."""
    return TargetAndActual(
        target_series=MoneySeries(TARGET_SERIES_NAME, fill_missing(window, planned, currency)),
        actual_series=fill_missing_titled(window, burned, currency),
        labels=[str(period) for period in window],
    )
