#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

import calath


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calath[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calath[diagnostics]"') from e


def season_series(calendar: str):
    """
    Per day of year: season index (0 = none), days into season, and whether
    the day is intercalary. Returned as numpy arrays of length total_days_per_year.
    """
    np = _need_numpy()
    eng = calath.get_calendar(calendar)
    total = eng.definition.total_days_per_year

    idx = np.zeros(total, dtype=int)
    into = np.zeros(total, dtype=int)
    inter = np.zeros(total, dtype=bool)
    for doy in range(1, total + 1):
        s = eng.season_for(doy)
        if s is not None:
            idx[doy - 1] = s.index
            into[doy - 1] = s.days_into_season
        inter[doy - 1] = isinstance(eng.resolve(doy), calath.IntercalaryPosition)
    return idx, into, inter


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Chart of seasons and intercalary periods across one year.")
    p.add_argument("--calendar", default="athas")
    p.add_argument("--out", default="season_chart", help="Output path without extension.")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    eng = calath.get_calendar(args.calendar)
    idx, into, inter = season_series(args.calendar)
    days = np.arange(1, len(idx) + 1)

    fig, ax = plt.subplots(figsize=(12, 4))
    for i, s in enumerate(eng.definition.seasons, start=1):
        mask = idx == i
        ax.scatter(days[mask], into[mask], s=6, label=s.name)

    for k in range(1, len(eng.definition.intercalary) + 1):
        first, last = eng.intercalary_span(k)
        ax.axvspan(first - 0.5, last + 0.5, color="0.85", zorder=0)

    ax.set_xlim(0.5, len(idx) + 0.5)
    ax.set_xlabel("Day of year")
    ax.set_ylabel("Day into season")
    ax.set_title(f"{args.calendar}: seasons (shaded: intercalary days, {int(inter.sum())} per year)")
    ax.legend(loc="upper right", fontsize=8)
    fig.tight_layout()

    fig.savefig(args.out + ".png", dpi=200)
    print(f"Wrote {args.out}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
