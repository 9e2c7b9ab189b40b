from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys
from typing import Optional

from .core.errors import CalathError
from .core.types import DayInfo, IntercalaryPosition


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _use_definition(path: Optional[str], calendar: str) -> str:
    """Register a calendar loaded from ``path`` (if given) and return the name to query."""
    if not path:
        return calendar
    import calath

    definition = calath.load_definition(path)
    calath.register_calendar(definition.name, calath.make_calendar(definition), overwrite=True)
    return definition.name


def _print_day(info: DayInfo) -> None:
    d = info.date
    print(f"Calendar      : {info.calendar}")
    print(f"Date          : {d}")
    print(f"Absolute day  : {info.absolute_day}")
    if isinstance(info.position, IntercalaryPosition):
        p = info.position
        print(f"Intercalary   : {info.intercalary_name or p.period} (day {p.day_in_period})")
        if info.intercalary_description:
            print(f"                {info.intercalary_description}")
    else:
        p = info.position
        print(f"Month         : {info.month_name} ({p.month}), day {p.day_in_month}")
    print(f"Year name     : {info.year_name}")
    print(f"Absolute year : {info.absolute_year}")
    print(f"Free Year     : {info.free_year}")
    if info.season is None:
        print("Season        : (none)")
    else:
        s = info.season
        print(f"Season        : {s.name}  day {s.days_into_season}/{s.days_in_season}, {s.days_remaining} remaining")
    for k, v in (info.attributes or {}).items():
        print(f"{k:<14}: {v}")


def cmd_day(argv: list[str]) -> int:
    import calath

    p = argparse.ArgumentParser(prog="calath day", description="Age / Year / Day-of-year -> full day record")
    p.add_argument("age", type=int)
    p.add_argument("year", type=int, help="year within the Age")
    p.add_argument("day", type=int, help="day of year")
    p.add_argument("--calendar", default="athas")
    p.add_argument("--definition", help="calendar JSON file to load instead of a built-in calendar")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    name = _use_definition(args.definition, args.calendar)
    date = calath.CalendarDate(args.age, args.year, args.day)
    if args.debug:
        print(calath.explain(date, calendar=name))
        return 0
    _print_day(calath.day_info(date, calendar=name, attributes=tuple(args.attr)))
    return 0


def cmd_abs(argv: list[str]) -> int:
    import calath

    p = argparse.ArgumentParser(prog="calath abs", description="Absolute day -> full day record")
    p.add_argument("n", type=int, help="absolute day")
    p.add_argument("--calendar", default="athas")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    date = calath.from_absolute_days(args.n, calendar=args.calendar)
    _print_day(calath.day_info(date, calendar=args.calendar, attributes=tuple(args.attr)))
    return 0


def cmd_year_name(argv: list[str]) -> int:
    import calath

    p = argparse.ArgumentParser(prog="calath year-name", description="Year name(s) for years within an Age")
    p.add_argument("years", type=int, nargs="*", help="years within the Age (default: the whole Age)")
    p.add_argument("--calendar", default="athas")
    args = p.parse_args(argv)

    years = args.years or range(1, calath.calendar_info(args.calendar)["years_per_age"] + 1)
    for y in years:
        print(f"{y:3d}  {calath.get_year_name(y, calendar=args.calendar)}")
    return 0


def cmd_free_year(argv: list[str]) -> int:
    import calath

    p = argparse.ArgumentParser(prog="calath free-year", description="Convert between Free Years and Age/Year")
    g = p.add_mutually_exclusive_group(required=True)
    g.add_argument("--free", type=int, help="Free Year -> Age/Year")
    g.add_argument("--age-year", type=int, nargs=2, metavar=("AGE", "YEAR"), help="Age/Year -> Free Year")
    p.add_argument("--calendar", default="athas")
    args = p.parse_args(argv)

    if args.free is not None:
        ay = calath.age_year_from_free_year(args.free, calendar=args.calendar)
        name = calath.get_year_name(ay.year_in_age, calendar=args.calendar)
        print(f"Free Year {args.free} = Age {ay.age}, Year {ay.year_in_age} ({name})")
    else:
        age, year = args.age_year
        y = calath.to_absolute_year(age, year, calendar=args.calendar)
        print(f"Age {age}, Year {year} = Free Year {calath.to_free_year(y, calendar=args.calendar)}")
    return 0


def cmd_season(argv: list[str]) -> int:
    import calath

    p = argparse.ArgumentParser(prog="calath season", description="Season containing a day of year")
    p.add_argument("day", type=int)
    p.add_argument("--calendar", default="athas")
    args = p.parse_args(argv)

    s = calath.season_for(args.day, calendar=args.calendar)
    if s is None:
        print(f"Day {args.day}: no season")
        return 0
    print(f"Day {args.day}: {s.name} ({s.start_day}..{s.end_day})")
    print(f"  day {s.days_into_season} of {s.days_in_season}, {s.days_remaining} remaining")
    if s.description:
        print(f"  {s.description}")
    return 0


def cmd_check(argv: list[str]) -> int:
    import calath

    p = argparse.ArgumentParser(prog="calath check", description="Run the consistency checks on a calendar")
    p.add_argument("--calendar", default="athas")
    p.add_argument("--definition", help="calendar JSON file to validate")
    args = p.parse_args(argv)

    # loading a definition builds (and therefore validates) its engine
    name = _use_definition(args.definition, args.calendar)
    info = calath.calendar_info(name)
    print(f"Calendar '{name}' OK: {info['total_days_per_year']} days/year, "
          f"{info['years_per_age']} years/age, year names repeat every {info['year_name_cycle']} years")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="calath", description="Athasian calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Age / Year / Day-of-year -> full day record")
    sub.add_parser("abs", help="Absolute day -> full day record")
    sub.add_parser("year-name", help="Print year names")
    sub.add_parser("free-year", help="Convert between Free Years and Age/Year")
    sub.add_parser("season", help="Season containing a day of year")
    sub.add_parser("check", help="Validate a calendar definition")
    sub.add_parser("pretty-year", help="Print a year grid (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "season-chart"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "day": cmd_day,
        "abs": cmd_abs,
        "year-name": cmd_year_name,
        "free-year": cmd_free_year,
        "season": cmd_season,
        "check": cmd_check,
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "pretty-year":
            return _run_module_main("calath.diagnostics.pretty_year", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "calath.diagnostics.round_trip",
                "season-chart": "calath.diagnostics.season_chart",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except CalathError as e:
        raise SystemExit(f"calath: {e}") from e

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
