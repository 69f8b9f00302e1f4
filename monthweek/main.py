from fastapi import FastAPI, HTTPException, Query
from loguru import logger

from .log import configure_logging
from .schemas import MonthWeek, MonthWeeksOut, WeekOfMonthOut, WeekOfMonthRangeOut
from .settings import get_settings
from .utils_dates import parse_month_key, to_date
from .week_of_month import (
    get_week_of_month,
    week_bounds,
    week_key,
    week_of_month_frame,
    weeks_in_month,
)


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Week of Month API")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/week-of-month", response_model=WeekOfMonthOut)
    def week_of_month(date: str = Query(..., description="Any date pandas can parse, e.g. 2024-08-01")):
        try:
            d = to_date(date)
        except ValueError as e:
            logger.warning(f"Rejected date {date!r}: {e}")
            raise HTTPException(status_code=400, detail=str(e))

        w = get_week_of_month(d)
        logger.info(f"{d.date()} -> {week_key(w)}")
        return WeekOfMonthOut(date=d.date(), year=w.year, month=w.month, week=w.week, key=week_key(w))

    @app.get("/week-of-month/range", response_model=WeekOfMonthRangeOut)
    def week_of_month_range(start: str, end: str):
        try:
            s = to_date(start)
            e = to_date(end)
        except ValueError as err:
            logger.warning(f"Rejected range {start!r}..{end!r}: {err}")
            raise HTTPException(status_code=400, detail=str(err))

        if e < s:
            raise HTTPException(status_code=400, detail="end must not be before start")

        span = (e - s).days + 1
        if span > settings.max_range_days:
            raise HTTPException(
                status_code=400,
                detail=f"range spans {span} days, limit is {settings.max_range_days}",
            )

        df = week_of_month_frame(s, e)
        logger.info(f"Resolved {len(df)} days from {s.date()} to {e.date()}")
        items = [
            WeekOfMonthOut(date=r.date, year=int(r.year), month=int(r.month), week=int(r.week), key=r.key)
            for r in df.itertuples(index=False)
        ]
        return {"start": s.date(), "end": e.date(), "items": items}

    @app.get("/weeks", response_model=MonthWeeksOut)
    def month_weeks(month: str):
        try:
            y, m = parse_month_key(month)
            weeks = []
            for n in range(1, weeks_in_month(y, m) + 1):
                monday, sunday = week_bounds(y, m, n)
                weeks.append(MonthWeek(week=n, start=monday, end=sunday, key=f"{month}-W{n}"))
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        return {"month": month, "weeks": weeks}

    return app


app = create_app()
