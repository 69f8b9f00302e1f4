from __future__ import annotations
from datetime import date, datetime

import numpy as np
import pandas as pd

# Day-of-week convention used by the week resolver: 0=Sunday .. 6=Saturday.
# pandas counts from Monday=0, so every lookup goes through day_of_week().
SUNDAY = 0
MONDAY = 1
TUESDAY = 2
WEDNESDAY = 3
THURSDAY = 4
FRIDAY = 5
SATURDAY = 6

DateLike = str | int | float | date | datetime | np.datetime64 | pd.Timestamp


def to_date(value: DateLike) -> pd.Timestamp:
    """
    Coerce anything pandas understands into a midnight Timestamp.

    Numbers are epoch milliseconds. Timezone-aware values keep their wall date
    and lose the zone. Parse failures propagate from pandas unchanged.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        ts = pd.to_datetime(value, unit="ms")
    else:
        ts = pd.Timestamp(value)

    if pd.isna(ts):
        raise ValueError(f"Cannot resolve a calendar date from {value!r}")

    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    return ts.normalize()


def day_of_week(d: pd.Timestamp) -> int:
    # pandas: Monday=0 .. Sunday=6
    return (d.dayofweek + 1) % 7


def start_of_month(d: pd.Timestamp) -> pd.Timestamp:
    return d.replace(day=1)


def end_of_month(d: pd.Timestamp) -> pd.Timestamp:
    return d.replace(day=d.days_in_month)


def add_months(d: pd.Timestamp, n: int) -> pd.Timestamp:
    # DateOffset clamps the day, so Jan 31 + 1 month is the last day of February
    return d + pd.DateOffset(months=n)


def subtract_months(d: pd.Timestamp, n: int) -> pd.Timestamp:
    return d - pd.DateOffset(months=n)


def month_key(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}"


def parse_month_key(month_key: str) -> tuple[int, int]:
    """
    Accepts 'YYYY-MM' only. Raises ValueError with a clear message if invalid.
    """
    if not isinstance(month_key, str):
        raise ValueError("month must be a string in format YYYY-MM")

    parts = month_key.split("-")
    if len(parts) != 2:
        raise ValueError("month must be in format YYYY-MM (example: 2025-01)")

    y_s, m_s = parts
    if len(y_s) != 4 or len(m_s) != 2 or not (y_s.isdigit() and m_s.isdigit()):
        raise ValueError("month must be in format YYYY-MM (example: 2025-01)")

    y = int(y_s)
    m = int(m_s)
    if m < 1 or m > 12:
        raise ValueError("month must be in format YYYY-MM with MM from 01 to 12")

    return y, m
