from __future__ import annotations

import argparse

import calath
from calath.core.types import IntercalaryPosition

DAYS_PER_ROW = 10


def cell(top: str, bot: str, w: int = 5) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_block(title: str, cells: list[tuple[str, str]]) -> None:
    print(title)
    for i in range(0, len(cells), DAYS_PER_ROW):
        row = cells[i:i + DAYS_PER_ROW]
        print(" ".join(c[0] for c in row))
        print(" ".join(c[1] for c in row))
    print()


def year_blocks(calendar: str, age: int, year: int) -> list[tuple[str, list[tuple[str, str]]]]:
    """
    Split one year into its month / intercalary blocks.
    Each cell shows the day within the block on top and the day of year below.
    """
    total = calath.calendar_info(calendar)["total_days_per_year"]
    blocks: list[tuple[str, list[tuple[str, str]]]] = []
    current = None

    for doy in range(1, total + 1):
        info = calath.day_info(calath.CalendarDate(age, year, doy), calendar=calendar)
        pos = info.position
        if isinstance(pos, IntercalaryPosition):
            key = info.intercalary_name or f"Intercalary {pos.period}"
            top = f"*{pos.day_in_period}"
        else:
            key = info.month_name or f"Month {pos.month}"
            top = f"{pos.day_in_month:2d}"
        if key != current:
            blocks.append((key, []))
            current = key
        blocks[-1][1].append(cell(top, f"{doy:3d}"))
    return blocks


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print one year as month and intercalary blocks.")
    p.add_argument("--calendar", default="athas")
    p.add_argument("--age", type=int, default=190)
    p.add_argument("--year", type=int, default=1, help="year within the Age")
    args = p.parse_args(argv)

    name = calath.get_year_name(args.year, calendar=args.calendar)
    absolute_year = calath.to_absolute_year(args.age, args.year, calendar=args.calendar)
    free_year = calath.to_free_year(absolute_year, calendar=args.calendar)
    print(f"{args.calendar}  Age {args.age}, Year {args.year}: Year of {name}  (Free Year {free_year})")
    print()

    for title, cells in year_blocks(args.calendar, args.age, args.year):
        print_block(title, cells)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
