from __future__ import annotations

import argparse
import random

from gregcal.core.calendar import from_days_since_epoch, to_days_since_epoch, year_day_to_days
from gregcal.core.date import Date


def roundtrip_test(N: int, lo: int, hi: int, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        days = random.randint(lo, hi)
        parts = from_days_since_epoch(days)

        back_ymd = to_days_since_epoch(parts.ymd)
        back_yd = year_day_to_days(parts.yd)
        back_date = Date.yd(parts.yd.year, parts.yd.yearday).days

        if not (back_ymd == back_yd == back_date == days):
            failures += 1
            print("\nFAIL")
            print("days:", days)
            print("parts:", parts)
            print("back (ymd, yd, Date.yd):", back_ymd, back_yd, back_date)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: days -> (y, m, d) / (y, yd) -> days.")
    p.add_argument("--N", type=int, default=100000, help="Trials.")
    p.add_argument("--lo", type=int, default=-1_000_000, help="Lowest day count.")
    p.add_argument("--hi", type=int, default=1_000_000, help="Highest day count.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    if args.hi < args.lo:
        raise SystemExit("--hi must be >= --lo")

    f = roundtrip_test(args.N, args.lo, args.hi, args.seed, max_failures=args.max_failures)
    if f == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {f}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
