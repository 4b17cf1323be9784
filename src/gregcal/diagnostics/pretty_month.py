from __future__ import annotations

import argparse

from gregcal.core.calendar import days_in_month
from gregcal.core.date import Date
from gregcal.formatting.parser import DateFormat

TITLE = DateFormat.parse("{:M} {:Y}")
HEADER = "Mo Tu We Th Fr Sa Su"
CELL = DateFormat.parse("{:>2D}")


def month_grid(year: int, month: int) -> list[str]:
    first = Date.ymd(year, month, 1)
    n = days_in_month(year, month)

    cells = ["  "] * (int(first.weekday) - 1)
    cells += [CELL.render(first + i) for i in range(n)]

    lines = [TITLE.render(first).center(len(HEADER)).rstrip(), HEADER]
    for i in range(0, len(cells), 7):
        lines.append(" ".join(cells[i:i + 7]))
    return lines


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a Monday-first month calendar.")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("--months", type=int, default=1, help="Number of consecutive months to print.")
    args = p.parse_args(argv)

    y, m = args.year, args.month
    for k in range(args.months):
        if k:
            print()
        for line in month_grid(y, m):
            print(line)
        y, m = (y + 1, 1) if m == 12 else (y, m + 1)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
