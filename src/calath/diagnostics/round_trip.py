from __future__ import annotations

import argparse
import random
from typing import List, Optional

import calath


def parse_calendars(s: str) -> List[str]:
    # "athas,athas-ka190" -> ["athas", "athas-ka190"]
    return [x.strip() for x in s.split(",") if x.strip()]


def sample_bounds(calendar: str, start: Optional[int], end: int) -> tuple[int, int]:
    """
    (lo, hi) of the absolute days to sample. ``start=None`` means the
    calendar's first representable day, which is negative for calendars
    with an epoch offset.
    """
    first = calath.get_calendar(calendar).absolute.min_absolute
    lo = first if start is None else max(start, first)
    if end < lo:
        raise SystemExit(f"--end {end} is before the first day of {calendar} ({lo})")
    return lo, end


def roundtrip_test(
    calendar: str,
    N: int,
    start: Optional[int],
    end: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """
    absolute day -> date -> absolute day, and
    day of year -> month/intercalary position -> day of year.
    """
    random.seed(seed)
    eng = calath.get_calendar(calendar)
    lo, hi = sample_bounds(calendar, start, end)
    failures = 0

    for _ in range(N):
        n = random.randint(lo, hi)

        date = calath.from_absolute_days(n, calendar=calendar)
        back = calath.to_absolute_days(date.age, date.year_in_age, date.day_of_year, calendar=calendar)
        if back != n:
            failures += 1
            print("\nFAIL (absolute)")
            print("calendar:", calendar)
            print("n:", n)
            print("date:", date)
            print("back:", back)
            if failures >= max_failures:
                return failures

        pos = calath.resolve_month_and_day(date.day_of_year, calendar=calendar)
        doy = eng.days.to_day_of_year(pos)
        if doy != date.day_of_year:
            failures += 1
            print("\nFAIL (day of year)")
            print("calendar:", calendar)
            print("date:", date)
            print("position:", pos)
            print("back:", doy)
            print("explain:", calath.explain(date, calendar=calendar))
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: absolute day -> date -> absolute day.")
    p.add_argument("--calendars", type=str, default="athas,athas-ka190",
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start", type=int, default=None,
                   help="Lowest absolute day (default: each calendar's first day; clamped to it).")
    p.add_argument("--end", type=int, default=200 * 77 * 375, help="Highest absolute day.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    if args.start is not None and args.end < args.start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for cal in parse_calendars(args.calendars):
        print(f"Testing {cal} ...")
        f = roundtrip_test(cal, N=args.N, start=args.start, end=args.end, seed=args.seed,
                           max_failures=args.max_failures)
        total_fail += f

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
