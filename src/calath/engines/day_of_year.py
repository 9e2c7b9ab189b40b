"""
calath.engines.day_of_year
--------------------------
Bidirectional mapping between a 1-based day of year and its position inside
either a month or an intercalary period.

The year is laid out as months in definition order, each optionally followed
by the intercalary period anchored to it. Every day of the year belongs to
exactly one of the two kinds of block.
"""

from __future__ import annotations

from typing import Dict, Tuple

from ..core.errors import check_range
from ..core.types import CalendarDefinition, IntercalaryPosition, MonthPosition, Position


class DayOfYearResolver:
    def __init__(self, definition: CalendarDefinition):
        self.d = definition
        # month index (1-based) -> intercalary index (1-based)
        self._anchored: Dict[int, int] = {
            p.after_month: i for i, p in enumerate(definition.intercalary, start=1)
        }

    @property
    def total_days(self) -> int:
        return self.d.total_days_per_year

    # ---------------------------------------------------------
    # Forward: day of year -> position
    # ---------------------------------------------------------

    def resolve(self, day_of_year: int) -> Position:
        check_range("day_of_year", day_of_year, 1, self.total_days)

        cursor = 0
        for m, month in enumerate(self.d.months, start=1):
            if day_of_year <= cursor + month.days:
                return MonthPosition(month=m, day_in_month=day_of_year - cursor)
            cursor += month.days

            p = self._anchored.get(m)
            if p is not None:
                span = self.d.intercalary[p - 1].days
                if day_of_year <= cursor + span:
                    return IntercalaryPosition(period=p, day_in_period=day_of_year - cursor)
                cursor += span

        # total_days is the sum of every block walked above
        raise AssertionError(f"day_of_year={day_of_year} not covered by any block")  # pragma: no cover

    # ---------------------------------------------------------
    # Inverse: position -> day of year
    # ---------------------------------------------------------

    def _offset_before_month(self, month: int) -> int:
        """Days of the year preceding day 1 of ``month``."""
        offset = 0
        for m in range(1, month):
            offset += self.d.months[m - 1].days
            p = self._anchored.get(m)
            if p is not None:
                offset += self.d.intercalary[p - 1].days
        return offset

    def from_month_day(self, month: int, day_in_month: int) -> int:
        check_range("month", month, 1, len(self.d.months))
        check_range("day_in_month", day_in_month, 1, self.d.months[month - 1].days)
        return self._offset_before_month(month) + day_in_month

    def from_intercalary(self, period: int, day_in_period: int) -> int:
        check_range("period", period, 1, len(self.d.intercalary))
        p = self.d.intercalary[period - 1]
        check_range("day_in_period", day_in_period, 1, p.days)
        anchor = p.after_month
        return self._offset_before_month(anchor) + self.d.months[anchor - 1].days + day_in_period

    def to_day_of_year(self, position: Position) -> int:
        if isinstance(position, MonthPosition):
            return self.from_month_day(position.month, position.day_in_month)
        return self.from_intercalary(position.period, position.day_in_period)

    # ---------------------------------------------------------
    # Block bounds
    # ---------------------------------------------------------

    def month_span(self, month: int) -> Tuple[int, int]:
        """(first, last) day of year of ``month``."""
        first = self.from_month_day(month, 1)
        return first, first + self.d.months[month - 1].days - 1

    def intercalary_span(self, period: int) -> Tuple[int, int]:
        """(first, last) day of year of intercalary ``period``."""
        first = self.from_intercalary(period, 1)
        return first, first + self.d.intercalary[period - 1].days - 1
