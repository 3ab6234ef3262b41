import logging

import pandas as pd

from expenses.domain import Record
from expenses.frames import records_from_frame, records_to_frame


def test_records_from_frame_converts_rows():
    df = pd.DataFrame([
        {"day": 1, "amount": 15, "category": "groceries"},
        {"day": 28.0, "amount": "1300.5", "category": " rent "},
    ])
    assert records_from_frame(df) == (
        Record(1, 15.0, "groceries"),
        Record(28, 1300.5, "rent"),
    )


def test_records_from_frame_skips_fractional_day(caplog):
    df = pd.DataFrame([
        {"day": 1.5, "amount": 10.0, "category": "food"},
        {"day": 2, "amount": 5.0, "category": "food"},
    ])
    with caplog.at_level(logging.WARNING, logger="expenses.frames"):
        records = records_from_frame(df)
    assert records == (Record(2, 5.0, "food"),)
    assert "skipped 1 incomplete row(s)" in caplog.text


def test_records_from_frame_skips_incomplete_rows():
    df = pd.DataFrame([
        {"day": None, "amount": 1.0, "category": "food"},
        {"day": 3, "amount": "abc", "category": "food"},
        {"day": 4, "amount": 2.0, "category": "   "},
        {"day": 5, "amount": 3.0, "category": None},
        {"day": 6, "amount": 4.0, "category": "rent"},
    ])
    assert records_from_frame(df) == (Record(6, 4.0, "rent"),)


def test_records_from_frame_empty():
    assert records_from_frame(pd.DataFrame(columns=["day", "amount", "category"])) == ()


def test_records_to_frame_keeps_order():
    df = records_to_frame((Record(3, 1.0, "a"), Record(1, 2.0, "b")))
    assert list(df.columns) == ["day", "amount", "category"]
    assert df["day"].tolist() == [3, 1]
    assert records_to_frame(()).empty
