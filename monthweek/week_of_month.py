from __future__ import annotations
from dataclasses import dataclass
from datetime import date, timedelta
import math

import pandas as pd
from loguru import logger

from .utils_dates import (
    DateLike,
    FRIDAY,
    MONDAY,
    SUNDAY,
    THURSDAY,
    WEDNESDAY,
    add_months,
    day_of_week,
    end_of_month,
    start_of_month,
    subtract_months,
    to_date,
)


@dataclass(frozen=True)
class WeekOfMonth:
    year: int       # year of the owning month
    month: int      # 1..12
    week: int       # 1..5


def get_week_of_month(target: DateLike) -> WeekOfMonth:
    """
    Returns the month a date's week belongs to and its week number in that month.

    Week 1 of a month is the week holding the month's first Thursday (ISO 8601),
    weeks run Monday to Sunday. A week straddling two months belongs to the one
    that has its Thursday, so the result can be the previous or the next month.

    `target` must carry year information, otherwise pandas fills in its own
    default and the answer is for that year.
    """
    d = to_date(target)
    owner = d
    target_date = d.day  # 1..31

    start_week_day = day_of_week(start_of_month(d))

    # Monday-aligned 7-day buckets counted from the 1st
    original_week = math.ceil((target_date + start_week_day - 1) / 7)
    week_correction = 0

    if MONDAY <= start_week_day <= THURSDAY:
        # Mo Tu We Th Fr Sa Su
        #        1  2  3  4  5 : 1st
        #  ...
        # 27 28 29 30 31       : 5th, or 1st of next month when it ends Mon-Wed
        if original_week == 5:
            end_week_day = day_of_week(end_of_month(d))
            if MONDAY <= end_week_day <= WEDNESDAY:
                owner = add_months(d, 1)
                week_correction = -4

    elif start_week_day == SUNDAY:
        # Mo Tu We Th Fr Sa Su
        #                    1 : (0) last week of previous month
        #  2  3  4  5  6  7  8 : (1) 1st
        #  ...
        # 30 31                : (5) 1st of next month
        if original_week == 0:
            owner = end_of_month(subtract_months(d, 1))
            week_correction = get_week_of_month(owner).week
        elif original_week == 5:
            owner = add_months(d, 1)
            week_correction = -4

    else:
        # Friday or Saturday
        # Mo Tu We Th Fr Sa Su
        #              1  2  3 : (1) last week of previous month
        #  4  5  6  7  8  9 10 : (2) 1st
        #  ...
        # 31                   : (6) 1st of next month (Saturday starts only)
        if original_week == 1:
            owner = end_of_month(subtract_months(d, 1))
            week_correction = get_week_of_month(owner).week - original_week
        elif original_week == 6:
            owner = add_months(d, 1)
            week_correction = -5
        else:
            week_correction = -1

    week = original_week + week_correction
    if owner.month != d.month:
        logger.debug(
            "{} belongs to week {} of {:04d}-{:02d}",
            d.date().isoformat(), week, owner.year, owner.month,
        )

    return WeekOfMonth(year=owner.year, month=owner.month, week=week)


def week_key(w: WeekOfMonth) -> str:
    return f"{w.year:04d}-{w.month:02d}-W{w.week}"


def _first_thursday(year: int, month: int) -> pd.Timestamp:
    first = pd.Timestamp(year=year, month=month, day=1)
    return first + pd.Timedelta(days=(THURSDAY - day_of_week(first)) % 7)


def weeks_in_month(year: int, month: int) -> int:
    """Number of weeks a month owns: one per Thursday, so 4 or 5."""
    thursday = _first_thursday(year, month)
    return (thursday.days_in_month - thursday.day) // 7 + 1


def week_bounds(year: int, month: int, week: int) -> tuple[date, date]:
    """
    Returns (monday, sunday) of the given week of month, both inclusive.
    Either end may fall outside the month itself.
    """
    n_weeks = weeks_in_month(year, month)
    if week < 1 or week > n_weeks:
        raise ValueError(f"week must be from 1 to {n_weeks} for {year:04d}-{month:02d}")

    thursday = _first_thursday(year, month).date() + timedelta(days=7 * (week - 1))
    return thursday - timedelta(days=3), thursday + timedelta(days=3)


def week_of_month_frame(start: DateLike, end: DateLike) -> pd.DataFrame:
    """
    One row per day from start to end (inclusive):
    columns date, year, month, week, key.
    """
    s = to_date(start)
    e = to_date(end)
    if e < s:
        raise ValueError("end must not be before start")

    rows = []
    for d in pd.date_range(s, e, freq="D"):
        w = get_week_of_month(d)
        rows.append({
            "date": d.date(),
            "year": w.year,
            "month": w.month,
            "week": w.week,
            "key": week_key(w),
        })

    return pd.DataFrame(rows, columns=["date", "year", "month", "week", "key"])
