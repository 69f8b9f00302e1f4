from datetime import date
from pydantic import BaseModel

class WeekOfMonthOut(BaseModel):
    date: date
    year: int
    month: int  # 1-12, month owning the week
    week: int   # 1-5
    key: str    # YYYY-MM-Wn


class WeekOfMonthRangeOut(BaseModel):
    start: date
    end: date
    items: list[WeekOfMonthOut]

class MonthWeek(BaseModel):
    week: int
    start: date  # Monday
    end: date    # Sunday
    key: str

class MonthWeeksOut(BaseModel):
    month: str
    weeks: list[MonthWeek]
