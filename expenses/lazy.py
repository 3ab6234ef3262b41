from typing import Callable, Iterable, Iterator

from expenses.domain import DaysPeriod, Record
from expenses.predicates import by_days_period


def iter_records(
    records: Iterable[Record], pred: Callable[[Record], bool]
) -> Iterator[Record]:
    for r in records:
        if pred(r):
            yield r


def totals_by_category(records: Iterable[Record], period: DaysPeriod) -> dict[str, float]:
    """Per-category totals of the records inside `period`.

    Keys keep the order in which categories first appear in the period;
    each total is accumulated in input order.
    """
    totals: dict[str, float] = {}
    for r in iter_records(records, by_days_period(period)):
        totals[r.category] = totals.get(r.category, 0.0) + r.amount
    return totals
