from typing import Any, Callable, Dict, Iterable, Tuple

from expenses.domain import DaysPeriod, Record, UnknownCategory
from expenses.functional import Either, all_of
from expenses.lazy import totals_by_category
from expenses.log import get_logger
from expenses.predicates import by_category, by_days_period
from expenses.transforms import (
    categories,
    category_expenses,
    filter_records,
    total_by_period,
)

logger = get_logger(__name__)


class ExpenseLedger:
    """Read-only facade over a fixed set of expense records.

    Every query delegates to the pure functions in expenses.transforms, so
    two calls with the same arguments always give the same answer.
    """

    def __init__(self, records: Iterable[Record]):
        self._records: Tuple[Record, ...] = tuple(records)

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def filter(self, pred: Callable[[Record], bool]) -> Tuple[Record, ...]:
        return filter_records(self._records, pred)

    def by_period(self, period: DaysPeriod) -> Tuple[Record, ...]:
        return self.filter(by_days_period(period))

    def by_category(self, category: str) -> Tuple[Record, ...]:
        return self.filter(by_category(category))

    def in_period_and_category(
        self, period: DaysPeriod, category: str
    ) -> Tuple[Record, ...]:
        return self.filter(all_of(by_days_period(period), by_category(category)))

    def categories(self) -> Tuple[str, ...]:
        return categories(self._records)

    def total_by_period(self, period: DaysPeriod) -> float:
        total = total_by_period(self._records, period)
        logger.debug("total for days %s..%s: %s", period.from_, period.to, total)
        return total

    def category_expenses(
        self, period: DaysPeriod, category: str
    ) -> Either[UnknownCategory, float]:
        result = category_expenses(self._records, period, category)
        if result.is_left():
            logger.info(result.get_error().message)
        else:
            logger.debug(
                "%s for days %s..%s: %s",
                category, period.from_, period.to, result.get_or_else(0.0),
            )
        return result

    def period_report(self, period: DaysPeriod) -> Dict[str, Any]:
        selected = self.by_period(period)
        return {
            "period": {"from": period.from_, "to": period.to},
            "total": self.total_by_period(period),
            "by_category": totals_by_category(self._records, period),
            "count": len(selected),
        }
