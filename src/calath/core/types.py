from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from .errors import MalformedDefinitionError


@dataclass(frozen=True)
class Month:
    name: str
    days: int
    abbreviation: Optional[str] = None

    def __post_init__(self) -> None:
        if self.days <= 0:
            raise MalformedDefinitionError(f"Month '{self.name}' must have a positive day count, got {self.days}")


@dataclass(frozen=True)
class IntercalaryPeriod:
    """A run of days inserted after month ``after_month`` (1-based); belongs to no month."""
    after_month: int
    days: int
    name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if self.days <= 0:
            raise MalformedDefinitionError(
                f"Intercalary period after month {self.after_month} must have a positive day count, got {self.days}"
            )


@dataclass(frozen=True)
class Season:
    """Closed day-of-year range. ``start_day > end_day`` wraps across the new year."""
    name: str
    start_day: int
    end_day: int
    description: Optional[str] = None

    @property
    def wraps(self) -> bool:
        return self.start_day > self.end_day


@dataclass(frozen=True)
class YearNaming:
    first_cycle: Tuple[str, ...]
    second_cycle: Tuple[str, ...]
    template: str = "{a}'s {b}"

    def __post_init__(self) -> None:
        for label, cycle in (("first_cycle", self.first_cycle), ("second_cycle", self.second_cycle)):
            # a bare string would otherwise split into single letters
            if isinstance(cycle, str) or not isinstance(cycle, (list, tuple)):
                raise MalformedDefinitionError(
                    f"Year-name {label} must be a sequence of strings, got {type(cycle).__name__}"
                )
        object.__setattr__(self, "first_cycle", tuple(self.first_cycle))
        object.__setattr__(self, "second_cycle", tuple(self.second_cycle))
        if not self.first_cycle or not self.second_cycle:
            raise MalformedDefinitionError("Both year-name cycles must be non-empty")
        for word in self.first_cycle + self.second_cycle:
            if not isinstance(word, str) or not word.strip():
                raise MalformedDefinitionError(f"Year-name cycle entries must be non-empty strings, got {word!r}")
        if "{a}" not in self.template or "{b}" not in self.template:
            raise MalformedDefinitionError("Year-name template must contain both {a} and {b}")

    def render(self, a: str, b: str) -> str:
        return self.template.format(a=a, b=b)


@dataclass(frozen=True)
class CalendarDefinition:
    """
    Static description of one calendar. Built once, read-only afterwards.

    ``epoch_offset`` is the raw day count (days since Age 1, Year 1, Day 1)
    of the day numbered 0 on the absolute timeline.
    """
    name: str
    months: Tuple[Month, ...]
    intercalary: Tuple[IntercalaryPeriod, ...]
    seasons: Tuple[Season, ...]
    years_per_age: int
    year_naming: YearNaming
    epoch_offset: int = 0
    free_year_offset: int = 14578
    meta: Dict[str, Any] = field(default_factory=dict, compare=False)
    total_days_per_year: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "months", tuple(self.months))
        object.__setattr__(self, "intercalary", tuple(self.intercalary))
        object.__setattr__(self, "seasons", tuple(self.seasons))

        if not self.months:
            raise MalformedDefinitionError(f"Calendar '{self.name}' defines no months")
        if self.years_per_age <= 0:
            raise MalformedDefinitionError(f"years_per_age must be positive, got {self.years_per_age}")

        prev = 0
        for p in self.intercalary:
            if not (1 <= p.after_month <= len(self.months)):
                raise MalformedDefinitionError(
                    f"Intercalary period '{p.name}' anchored to month {p.after_month}; "
                    f"expected 1..{len(self.months)}"
                )
            if p.after_month <= prev:
                raise MalformedDefinitionError("Intercalary anchors must be strictly increasing")
            prev = p.after_month

        total = sum(m.days for m in self.months) + sum(p.days for p in self.intercalary)
        object.__setattr__(self, "total_days_per_year", total)

        for s in self.seasons:
            for label, d in (("start_day", s.start_day), ("end_day", s.end_day)):
                if not (1 <= d <= total):
                    raise MalformedDefinitionError(
                        f"Season '{s.name}' {label}={d} outside 1..{total}"
                    )

    @property
    def days_per_age(self) -> int:
        return self.total_days_per_year * self.years_per_age


@dataclass(frozen=True, order=True)
class CalendarDate:
    age: int
    year_in_age: int
    day_of_year: int

    def __str__(self) -> str:
        return f"KA{self.age}, Y{self.year_in_age}, D{self.day_of_year}"


@dataclass(frozen=True)
class MonthPosition:
    month: int
    day_in_month: int


@dataclass(frozen=True)
class IntercalaryPosition:
    period: int
    day_in_period: int


Position = Union[MonthPosition, IntercalaryPosition]


@dataclass(frozen=True)
class AgeYear:
    age: int
    year_in_age: int


@dataclass(frozen=True)
class SeasonInfo:
    index: int  # 1-based position in the definition
    name: str
    description: Optional[str]
    start_day: int
    end_day: int
    days_in_season: int
    days_into_season: int
    days_remaining: int
    day_of_year: int


@dataclass(frozen=True)
class DayInfo:
    calendar: str
    date: CalendarDate
    absolute_day: int
    position: Position
    month_name: Optional[str]
    intercalary_name: Optional[str]
    intercalary_description: Optional[str]
    year_name: str
    absolute_year: int
    free_year: int
    season: Optional[SeasonInfo]
    attributes: Optional[Dict[str, Any]] = None

    @property
    def is_intercalary(self) -> bool:
        return isinstance(self.position, IntercalaryPosition)
