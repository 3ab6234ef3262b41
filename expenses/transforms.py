from functools import reduce
from typing import Callable, Tuple

from expenses.domain import DaysPeriod, Record, UnknownCategory
from expenses.functional import Either, Left, Right
from expenses.lazy import iter_records
from expenses.predicates import by_category, by_days_period


def filter_records(
    records: Tuple[Record, ...], pred: Callable[[Record], bool]
) -> Tuple[Record, ...]:
    return tuple(iter_records(records, pred))


def total_by_period(records: Tuple[Record, ...], period: DaysPeriod) -> float:
    in_period = by_days_period(period)
    return reduce(
        lambda acc, r: acc + r.amount if in_period(r) else acc, records, 0.0
    )


def category_expenses(
    records: Tuple[Record, ...], period: DaysPeriod, category: str
) -> Either[UnknownCategory, float]:
    """Total spent on `category` inside `period`.

    Left(UnknownCategory) when no record at all has that category, whatever
    the period. A known category with nothing in the period gives Right(0.0).
    """
    in_period = by_days_period(period)
    in_category = by_category(category)

    has_category = False
    total = 0.0
    for r in records:
        if in_category(r):
            has_category = True
            if in_period(r):
                total += r.amount

    if not has_category:
        return Left(UnknownCategory(category))
    return Right(total)


def categories(records: Tuple[Record, ...]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(r.category for r in records))
