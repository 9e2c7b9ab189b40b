"""
calath.engines.consistency
--------------------------
Exhaustive self-test of a calendar definition, run once when a calendar is
built. Every downstream conversion trusts these invariants, so the first
failure aborts construction with MalformedDefinitionError.
"""

from __future__ import annotations

import logging

from ..core.errors import CalathError, MalformedDefinitionError
from ..core.types import CalendarDate, CalendarDefinition, MonthPosition
from .absolute import AbsoluteDayConverter
from .day_of_year import DayOfYearResolver
from .years import AgeYearConverter, YearNamer

log = logging.getLogger(__name__)


def _representative_dates(d: CalendarDefinition) -> list[CalendarDate]:
    total = d.total_days_per_year
    return [
        CalendarDate(190, min(10, d.years_per_age), min(200, total)),
        CalendarDate(1, 1, 1),
        CalendarDate(1, d.years_per_age, total),
        CalendarDate(2, 1, 1),
    ]


def check_absolute_round_trip(d: CalendarDefinition) -> None:
    conv = AbsoluteDayConverter(d)
    for date in _representative_dates(d):
        n = conv.date_to_absolute(date)
        back = conv.from_absolute(n)
        if back != date:
            raise MalformedDefinitionError(f"Absolute-day round trip failed for {date}: {n} -> {back}")

    last = conv.to_absolute(1, d.years_per_age, d.total_days_per_year)
    first = conv.to_absolute(2, 1, 1)
    if first != last + 1:
        raise MalformedDefinitionError(f"Absolute days not contiguous across the Age boundary: {last} -> {first}")


def check_day_of_year_round_trip(d: CalendarDefinition) -> None:
    res = DayOfYearResolver(d)
    for day in range(1, d.total_days_per_year + 1):
        pos = res.resolve(day)
        if isinstance(pos, MonthPosition):
            back = res.from_month_day(pos.month, pos.day_in_month)
        else:
            back = res.from_intercalary(pos.period, pos.day_in_period)
        if back != day:
            raise MalformedDefinitionError(f"Day-of-year mismatch at day {day}: {pos} -> {back}")


def check_year_names(d: CalendarDefinition) -> None:
    namer = YearNamer(d)
    for year in range(1, d.years_per_age + 1):
        a, b = namer.words(year)
        name = namer.year_name(year)
        if not name or a not in name or b not in name:
            raise MalformedDefinitionError(f"Invalid year name for year {year}: {name!r}")


def check_free_year(d: CalendarDefinition) -> None:
    conv = AgeYearConverter(d)
    for y in {1, max(1, d.free_year_offset - 1), max(1, d.free_year_offset), d.free_year_offset + 1}:
        f = conv.to_free_year(y)
        if f == 0 or conv.from_free_year(f) != y:
            raise MalformedDefinitionError(f"Free-Year round trip failed for absolute year {y} (free year {f})")


CHECKS = (
    check_absolute_round_trip,
    check_day_of_year_round_trip,
    check_year_names,
    check_free_year,
)


def validate(definition: CalendarDefinition) -> None:
    """Run every consistency check; raise MalformedDefinitionError on the first failure."""
    for check in CHECKS:
        try:
            check(definition)
        except MalformedDefinitionError:
            raise
        except CalathError as e:
            raise MalformedDefinitionError(f"{check.__name__} failed for '{definition.name}': {e}") from e
    log.debug(
        "calendar %r verified: %d days/year, %d years/age",
        definition.name, definition.total_days_per_year, definition.years_per_age,
    )
