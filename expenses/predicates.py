from typing import Callable

from expenses.domain import DaysPeriod, Record

Predicate = Callable[[Record], bool]


def by_days_period(period: DaysPeriod) -> Predicate:
    def _filter(r: Record) -> bool:
        return period.from_ <= r.day <= period.to

    return _filter


def by_category(category: str) -> Predicate:
    def _filter(r: Record) -> bool:
        return r.category == category

    return _filter
