# tools/print_month_weeks.py
from __future__ import annotations

import csv
from datetime import date
from pathlib import Path

from monthweek.week_of_month import week_of_month_frame

def main():
    # Adjust these
    start = date(2024, 1, 1)
    end = date(2026, 1, 31)
    out = Path("data/week_of_month.csv")
    out.parent.mkdir(parents=True, exist_ok=True)

    df = week_of_month_frame(start, end)

    # Write CSV
    with open(out, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=["date", "year", "month", "week", "key"])
        writer.writeheader()
        for r in df.itertuples(index=False):
            writer.writerow({
                "date": r.date.isoformat(),
                "year": r.year,
                "month": r.month,
                "week": r.week,
                "key": r.key,
            })

    # Quick stats
    per_month = df.groupby(["year", "month"])["week"].max()

    print(f"Wrote {len(df)} rows to {out}")
    print(f"Owning months covered: {per_month.index.min()} .. {per_month.index.max()}")
    print(f"Months with 5 weeks: {int((per_month == 5).sum())} of {len(per_month)}")

if __name__ == "__main__":
    main()
