"""
calath.engines.years
--------------------
Year arithmetic above the day level:

* Age/Year-in-Age <-> flat absolute year (1-based, Age 1 Year 1 = 1).
* Year names built from two independent cyclic word lists.
* Free Year numbering: the absolute year shifted by a fixed offset, with no
  year zero (... -2, -1, 1, 2 ...).
"""

from __future__ import annotations

import math

from ..core.errors import OutOfRangeError, check_range
from ..core.types import AgeYear, CalendarDefinition


class AgeYearConverter:
    def __init__(self, definition: CalendarDefinition):
        self.d = definition

    def to_absolute_year(self, age: int, year_in_age: int) -> int:
        check_range("age", age, 1)
        check_range("year_in_age", year_in_age, 1, self.d.years_per_age)
        return (age - 1) * self.d.years_per_age + year_in_age

    def from_absolute_year(self, absolute_year: int) -> AgeYear:
        check_range("absolute_year", absolute_year, 1)
        age0, year0 = divmod(absolute_year - 1, self.d.years_per_age)
        return AgeYear(age=age0 + 1, year_in_age=year0 + 1)

    # ---------------------------------------------------------
    # Free Year
    # ---------------------------------------------------------

    def to_free_year(self, absolute_year: int) -> int:
        check_range("absolute_year", absolute_year, 1)
        f = absolute_year - self.d.free_year_offset
        if f < 1:
            f -= 1
        return f

    def from_free_year(self, free_year: int) -> int:
        if isinstance(free_year, bool) or not isinstance(free_year, int):
            raise TypeError(f"free_year must be an int, got {type(free_year).__name__}")
        lowest = self.to_free_year(1)
        if free_year == 0:
            raise OutOfRangeError("free_year", free_year, lowest, detail="there is no Free Year 0")
        if free_year < lowest:
            raise OutOfRangeError("free_year", free_year, lowest)
        f = free_year + 1 if free_year < 1 else free_year
        return f + self.d.free_year_offset

    def age_year_from_free_year(self, free_year: int) -> AgeYear:
        return self.from_absolute_year(self.from_free_year(free_year))

    def free_year_of(self, age: int, year_in_age: int) -> int:
        return self.to_free_year(self.to_absolute_year(age, year_in_age))


class YearNamer:
    def __init__(self, definition: CalendarDefinition):
        self.d = definition
        self.naming = definition.year_naming

    @property
    def cycle_length(self) -> int:
        """Years after which the (first, second) word pair repeats."""
        return math.lcm(len(self.naming.first_cycle), len(self.naming.second_cycle))

    def words(self, year_in_age: int) -> tuple[str, str]:
        check_range("year_in_age", year_in_age, 1, self.d.years_per_age)
        a = self.naming.first_cycle[(year_in_age - 1) % len(self.naming.first_cycle)]
        b = self.naming.second_cycle[(year_in_age - 1) % len(self.naming.second_cycle)]
        return a, b

    def year_name(self, year_in_age: int) -> str:
        a, b = self.words(year_in_age)
        return self.naming.render(a, b)
