"""
calath.engines.calendar
-----------------------
The Orchestrator. Binds the day-of-year, absolute-day, year and season
components around one immutable CalendarDefinition and assembles full
DayInfo records from them.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, Optional, Tuple

from ..core.types import (
    AgeYear,
    CalendarDate,
    CalendarDefinition,
    DayInfo,
    IntercalaryPosition,
    MonthPosition,
    Position,
    SeasonInfo,
)
from .absolute import AbsoluteDayConverter
from .day_of_year import DayOfYearResolver
from .seasons import SeasonResolver
from .years import AgeYearConverter, YearNamer


class CalendarEngine:
    """
    Query surface over one calendar definition. Stateless apart from the
    definition it was built with; safe to share between threads.
    """
    def __init__(self, definition: CalendarDefinition):
        self.definition = definition
        self.days = DayOfYearResolver(definition)
        self.absolute = AbsoluteDayConverter(definition)
        self.years = AgeYearConverter(definition)
        self.namer = YearNamer(definition)
        self.seasons = SeasonResolver(definition)

    @property
    def name(self) -> str:
        return self.definition.name

    # ---------------------------------------------------------
    # Absolute days
    # ---------------------------------------------------------

    def to_absolute(self, age: int, year_in_age: int, day_of_year: int) -> int:
        return self.absolute.to_absolute(age, year_in_age, day_of_year)

    def from_absolute(self, n: int) -> CalendarDate:
        return self.absolute.from_absolute(n)

    def advance(self, date: CalendarDate, days: int) -> CalendarDate:
        return self.absolute.advance(date, days)

    # ---------------------------------------------------------
    # Day of year
    # ---------------------------------------------------------

    def resolve(self, day_of_year: int) -> Position:
        return self.days.resolve(day_of_year)

    def from_month_day(self, month: int, day_in_month: int) -> int:
        return self.days.from_month_day(month, day_in_month)

    def from_intercalary(self, period: int, day_in_period: int) -> int:
        return self.days.from_intercalary(period, day_in_period)

    def month_span(self, month: int) -> Tuple[int, int]:
        return self.days.month_span(month)

    def intercalary_span(self, period: int) -> Tuple[int, int]:
        return self.days.intercalary_span(period)

    # ---------------------------------------------------------
    # Years
    # ---------------------------------------------------------

    def year_name(self, year_in_age: int) -> str:
        return self.namer.year_name(year_in_age)

    def to_absolute_year(self, age: int, year_in_age: int) -> int:
        return self.years.to_absolute_year(age, year_in_age)

    def from_absolute_year(self, absolute_year: int) -> AgeYear:
        return self.years.from_absolute_year(absolute_year)

    def to_free_year(self, absolute_year: int) -> int:
        return self.years.to_free_year(absolute_year)

    def from_free_year(self, free_year: int) -> int:
        return self.years.from_free_year(free_year)

    def season_for(self, day_of_year: int) -> Optional[SeasonInfo]:
        return self.seasons.season_for(day_of_year)

    # ---------------------------------------------------------
    # High-Level API Methods (Required by CLI / api.py)
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        d = self.definition
        return {
            "name": d.name,
            "months": len(d.months),
            "intercalary_periods": len(d.intercalary),
            "seasons": len(d.seasons),
            "total_days_per_year": d.total_days_per_year,
            "years_per_age": d.years_per_age,
            "year_name_cycle": self.namer.cycle_length,
            "epoch_offset": d.epoch_offset,
            "free_year_offset": d.free_year_offset,
            **d.meta,
        }

    def day_info(self, date: CalendarDate) -> DayInfo:
        n = self.absolute.date_to_absolute(date)
        pos = self.days.resolve(date.day_of_year)

        month_name = None
        inter_name = inter_desc = None
        if isinstance(pos, MonthPosition):
            month_name = self.definition.months[pos.month - 1].name
        elif isinstance(pos, IntercalaryPosition):
            period = self.definition.intercalary[pos.period - 1]
            inter_name, inter_desc = period.name, period.description

        abs_year = self.years.to_absolute_year(date.age, date.year_in_age)
        return DayInfo(
            calendar=self.name,
            date=date,
            absolute_day=n,
            position=pos,
            month_name=month_name,
            intercalary_name=inter_name,
            intercalary_description=inter_desc,
            year_name=self.namer.year_name(date.year_in_age),
            absolute_year=abs_year,
            free_year=self.years.to_free_year(abs_year),
            season=self.seasons.season_for(date.day_of_year),
        )

    def day_info_from_absolute(self, n: int) -> DayInfo:
        return self.day_info(self.absolute.from_absolute(n))

    def explain(self, date: CalendarDate) -> Dict[str, Any]:
        out = asdict(self.day_info(date))
        out["engine"] = self.info()
        return out
