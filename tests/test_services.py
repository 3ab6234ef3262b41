import logging

from expenses.domain import DaysPeriod, Record, UnknownCategory
from expenses.functional import Left, Right
from expenses.services import ExpenseLedger


def make_ledger():
    return ExpenseLedger([
        Record(1, 10.0, "food"),
        Record(3, 25.5, "transport"),
        Record(7, 4.5, "food"),
        Record(20, 100.0, "rent"),
    ])


def test_ledger_copies_records_into_tuple():
    source = [Record(1, 10.0, "food")]
    ledger = ExpenseLedger(source)
    source.append(Record(2, 1.0, "food"))
    assert ledger.records == (Record(1, 10.0, "food"),)
    assert len(ledger) == 1


def test_ledger_queries():
    ledger = make_ledger()
    period = DaysPeriod(1, 7)
    assert ledger.by_period(period) == ledger.records[:3]
    assert [r.day for r in ledger.by_category("food")] == [1, 7]
    assert ledger.filter(lambda r: r.amount > 50) == (Record(20, 100.0, "rent"),)
    assert ledger.total_by_period(period) == 40.0
    assert ledger.categories() == ("food", "transport", "rent")


def test_ledger_in_period_and_category():
    ledger = make_ledger()
    assert ledger.in_period_and_category(DaysPeriod(1, 5), "food") == (Record(1, 10.0, "food"),)
    assert ledger.in_period_and_category(DaysPeriod(8, 31), "food") == ()
    assert ledger.in_period_and_category(DaysPeriod(1, 31), "travel") == ()


def test_ledger_category_expenses():
    ledger = make_ledger()
    assert ledger.category_expenses(DaysPeriod(1, 7), "food") == Right(14.5)
    assert ledger.category_expenses(DaysPeriod(8, 31), "food") == Right(0.0)
    assert ledger.category_expenses(DaysPeriod(1, 31), "travel") == Left(UnknownCategory("travel"))


def test_ledger_logs_unknown_category(caplog):
    with caplog.at_level(logging.INFO, logger="expenses.services"):
        make_ledger().category_expenses(DaysPeriod(1, 31), "travel")
    assert "unknown category travel" in caplog.text


def test_period_report():
    report = make_ledger().period_report(DaysPeriod(1, 10))
    assert report == {
        "period": {"from": 1, "to": 10},
        "total": 40.0,
        "by_category": {"food": 14.5, "transport": 25.5},
        "count": 3,
    }


def test_period_report_empty_ledger():
    report = ExpenseLedger([]).period_report(DaysPeriod(1, 31))
    assert report["total"] == 0
    assert report["by_category"] == {}
    assert report["count"] == 0
