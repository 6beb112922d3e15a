from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, Iterator

import pandas as pd
from dateutil.relativedelta import relativedelta

SATURDAY = 5
SUNDAY = 6


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def to_date(value) -> date:
    """Coerce a date, datetime, ISO string or pd.Timestamp into a datetime.date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    ts = pd.Timestamp(value)
    if pd.isna(ts):
        raise ValueError(f"Not a date: {value!r}")
    return ts.date()


def add_days(d: date, n: int) -> date:
    return d + timedelta(days=int(n))


def add_months(d: date, n: int) -> date:
    """Calendar-month arithmetic; 31 Jan + 1 month is the last day of Feb."""
    return d + relativedelta(months=n)


def day_range(start: date, end: date) -> Iterator[date]:
    """Every calendar day from start to end, inclusive."""
    for ts in pd.date_range(start, end, freq="D"):
        yield ts.date()


def count_days(start: date, end: date) -> int:
    return max((end - start).days + 1, 0)


def random_future_business_day(d: date, draw: float, max_days: int) -> date:
    """
    Push a date 1 + floor(draw * max_days) days forward, rolling a
    Saturday to Monday (+2) and a Sunday to Monday (+1).
    """
    new_date = add_days(d, 1 + int(draw * max_days))
    if new_date.weekday() == SATURDAY:
        return add_days(new_date, 2)
    if new_date.weekday() == SUNDAY:
        return add_days(new_date, 1)
    return new_date
