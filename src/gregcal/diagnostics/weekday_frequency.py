#!/usr/bin/env python3
from __future__ import annotations

import argparse

from gregcal.core.calendar import days_in_month
from gregcal.core.date import Date
from gregcal.formatting.fields import SHORT_WEEKDAY_NAMES

# The Gregorian calendar repeats exactly every 400 years (146097 days = 20871 weeks).
CYCLE_YEARS = 400


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "gregcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "gregcal[diagnostics]"') from e


def weekday_counts(np, day: int, start_year: int = 2000, month: int | None = None):
    """
    Count, over one 400-year cycle, how often day-of-month `day` falls on each weekday.
    Returns an int array of length 7 indexed Monday=0 .. Sunday=6.
    """
    counts = np.zeros(7, dtype=int)
    months = [month] if month is not None else range(1, 13)
    for y in range(start_year, start_year + CYCLE_YEARS):
        for m in months:
            if day > days_in_month(y, m):
                continue
            counts[int(Date.ymd(y, m, day).weekday) - 1] += 1
    return counts


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Weekday distribution of a day-of-month over the 400-year cycle.")
    p.add_argument("--day", type=int, default=13, help="Day of month (default 13).")
    p.add_argument("--month", type=int, default=None, help="Restrict to one month (1..12).")
    p.add_argument("--plot", action="store_true", help="Show a bar chart.")
    p.add_argument("--out", type=str, default=None, help="Save the chart to this file instead of showing it.")
    args = p.parse_args(argv)

    if not (1 <= args.day <= 31):
        raise SystemExit("--day must be in 1..31")

    np = _need_numpy()
    counts = weekday_counts(np, args.day, month=args.month)
    total = int(counts.sum())

    for name, c in zip(SHORT_WEEKDAY_NAMES[1:], counts):
        print(f"{name}  {int(c):5d}  {100.0 * c / total:6.3f}%")
    print(f"total {total}")

    if args.plot or args.out:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(figsize=(7, 4))
        ax.bar(SHORT_WEEKDAY_NAMES[1:], counts)
        ax.set_ylim(counts.min() - 5, counts.max() + 5)
        ax.set_title(f"Weekday of day {args.day} over {CYCLE_YEARS} years")
        ax.set_ylabel("occurrences")
        fig.tight_layout()
        if args.out:
            fig.savefig(args.out)
        else:
            plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
