"""
calath.engines.absolute
-----------------------
Maps (Age, Year-in-Age, Day-of-Year) to a signed absolute day count and back.

Convention: raw day 0 is Age 1, Year 1, Day 1. The definition's
``epoch_offset`` names the raw day that is numbered 0 on the absolute
timeline, so ``absolute = raw - epoch_offset``. With the default offset of 0,
absolute day 0 is Age 1, Year 1, Day 1 and no absolute day is negative.
"""

from __future__ import annotations

from ..core.errors import check_range
from ..core.types import CalendarDate, CalendarDefinition


class AbsoluteDayConverter:
    def __init__(self, definition: CalendarDefinition):
        self.d = definition

    @property
    def min_absolute(self) -> int:
        """Absolute day of Age 1, Year 1, Day 1 (the first representable day)."""
        return -self.d.epoch_offset

    def to_absolute(self, age: int, year_in_age: int, day_of_year: int) -> int:
        check_range("age", age, 1)
        check_range("year_in_age", year_in_age, 1, self.d.years_per_age)
        check_range("day_of_year", day_of_year, 1, self.d.total_days_per_year)

        years = (age - 1) * self.d.years_per_age + (year_in_age - 1)
        raw = years * self.d.total_days_per_year + (day_of_year - 1)
        return raw - self.d.epoch_offset

    def from_absolute(self, n: int) -> CalendarDate:
        check_range("absolute_day", n, self.min_absolute)

        raw = n + self.d.epoch_offset
        years, day0 = divmod(raw, self.d.total_days_per_year)
        age0, year0 = divmod(years, self.d.years_per_age)
        return CalendarDate(age=age0 + 1, year_in_age=year0 + 1, day_of_year=day0 + 1)

    def date_to_absolute(self, date: CalendarDate) -> int:
        return self.to_absolute(date.age, date.year_in_age, date.day_of_year)

    def advance(self, date: CalendarDate, days: int) -> CalendarDate:
        """Shift ``date`` by a signed number of days along the absolute timeline."""
        return self.from_absolute(self.date_to_absolute(date) + days)

    def days_between(self, start: CalendarDate, end: CalendarDate) -> int:
        return self.date_to_absolute(end) - self.date_to_absolute(start)
