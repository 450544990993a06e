from __future__ import annotations

import argparse
from typing import List, Optional

import kairos
from kairos.engines.calendar import coordinates
from kairos.engines.constants import (
    DAY_NAMES,
    DAYS_PER_MONTH,
    DAYS_PER_WEEK,
    DAYS_PER_YEAR,
    MONTHS_PER_YEAR,
)


def dow_header(w: int = 7) -> str:
    return " ".join(n[:w - 1].ljust(w) for n in DAY_NAMES)


def month_grid(year_index: int, month_index0: int, *, mark_day: Optional[int] = None, w: int = 7) -> List[str]:
    """Rows of a 7-week x 6-day month; mark_day (absolute day index) is starred."""
    first = year_index * DAYS_PER_YEAR + month_index0 * DAYS_PER_MONTH
    name = coordinates(first).month_name
    lines = [f"{name}  (year {year_index}, month {month_index0 + 1})", dow_header(w), "-" * len(dow_header(w))]
    for week in range(DAYS_PER_MONTH // DAYS_PER_WEEK):
        cells = []
        for dow in range(DAYS_PER_WEEK):
            d = first + week * DAYS_PER_WEEK + dow
            c = coordinates(d)
            star = "*" if d == mark_day else " "
            cells.append(f"{c.day_in_month1:2d}{star}".ljust(w))
        lines.append(" ".join(cells))
    return lines


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print Kairos months (eternal frame).")
    p.add_argument("--year", type=int, default=None, help="Year index (default: current)")
    p.add_argument("--month", type=int, default=None, help="Month 1..8 (default: all months)")
    args = p.parse_args(argv)

    today = kairos.eternal_counters()
    year = today.year_index if args.year is None else args.year
    months = range(MONTHS_PER_YEAR) if args.month is None else [args.month - 1]

    for m in months:
        if not 0 <= m < MONTHS_PER_YEAR:
            raise SystemExit(f"--month must be in 1..{MONTHS_PER_YEAR}")
        for line in month_grid(year, m, mark_day=today.day_index):
            print(line)
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
