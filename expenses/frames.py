from typing import Tuple

import pandas as pd

from expenses.domain import Record
from expenses.log import get_logger

logger = get_logger(__name__)

COLUMNS = ["day", "amount", "category"]


def records_from_frame(df: pd.DataFrame) -> Tuple[Record, ...]:
    """Turn edited table rows into records.

    Rows with a missing or fractional day, a missing amount or a blank
    category are skipped and counted in a warning.
    """
    if df.empty:
        return ()
    clean = df.assign(
        day=pd.to_numeric(df["day"], errors="coerce"),
        amount=pd.to_numeric(df["amount"], errors="coerce"),
        category=df["category"].astype("string").str.strip(),
    ).dropna(subset=COLUMNS)
    clean = clean[(clean["category"] != "") & (clean["day"] % 1 == 0)]
    dropped = len(df) - len(clean)
    if dropped:
        logger.warning("skipped %d incomplete row(s)", dropped)
    return tuple(
        Record(day=int(row.day), amount=float(row.amount), category=str(row.category))
        for row in clean.itertuples(index=False)
    )


def records_to_frame(records: Tuple[Record, ...]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"day": r.day, "amount": r.amount, "category": r.category} for r in records],
        columns=COLUMNS,
    )
