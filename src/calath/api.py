from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .core.engine import CalendarEngine, CalendarRegistry
from .core.errors import NotInitializedError
from .core.types import AgeYear, CalendarDate, CalendarDefinition, DayInfo, Position, SeasonInfo
from .attributes.registry import compute_attributes
from .engines.factory import make_engine as _make_engine

DEFAULT_CALENDAR = "athas"
_registry: Optional[CalendarRegistry] = None

def set_registry(reg: Optional[CalendarRegistry]) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise NotInitializedError("Calendar registry not initialized")
    return _registry

def _cal(name: str) -> CalendarEngine:
    return _reg().get(name)

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: str = DEFAULT_CALENDAR) -> Dict[str, Any]:
    return _cal(calendar).info()

def get_calendar(name: str = DEFAULT_CALENDAR) -> CalendarEngine:
    return _cal(name)

def make_calendar(definition: CalendarDefinition) -> CalendarEngine:
    return _make_engine(definition)

def register_calendar(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Absolute days
# ============================================================

def to_absolute_days(age: int, year_in_age: int, day_of_year: int, *, calendar: str = DEFAULT_CALENDAR) -> int:
    return _cal(calendar).to_absolute(age, year_in_age, day_of_year)

def from_absolute_days(n: int, *, calendar: str = DEFAULT_CALENDAR) -> CalendarDate:
    return _cal(calendar).from_absolute(n)

def advance_days(date: CalendarDate, days: int, *, calendar: str = DEFAULT_CALENDAR) -> CalendarDate:
    return _cal(calendar).advance(date, days)

# ============================================================
# Day of year
# ============================================================

def resolve_month_and_day(day_of_year: int, *, calendar: str = DEFAULT_CALENDAR) -> Position:
    return _cal(calendar).resolve(day_of_year)

def month_and_day_to_day_of_year(month: int, day_in_month: int, *, calendar: str = DEFAULT_CALENDAR) -> int:
    return _cal(calendar).from_month_day(month, day_in_month)

def intercalary_to_day_of_year(period: int, day_in_period: int, *, calendar: str = DEFAULT_CALENDAR) -> int:
    return _cal(calendar).from_intercalary(period, day_in_period)

def month_bounds(month: int, *, calendar: str = DEFAULT_CALENDAR) -> Tuple[int, int]:
    return _cal(calendar).month_span(month)

def intercalary_bounds(period: int, *, calendar: str = DEFAULT_CALENDAR) -> Tuple[int, int]:
    return _cal(calendar).intercalary_span(period)

# ============================================================
# Years
# ============================================================

def get_year_name(year_in_age: int, *, calendar: str = DEFAULT_CALENDAR) -> str:
    return _cal(calendar).year_name(year_in_age)

def to_absolute_year(age: int, year_in_age: int, *, calendar: str = DEFAULT_CALENDAR) -> int:
    return _cal(calendar).to_absolute_year(age, year_in_age)

def from_absolute_year(absolute_year: int, *, calendar: str = DEFAULT_CALENDAR) -> AgeYear:
    return _cal(calendar).from_absolute_year(absolute_year)

def to_free_year(absolute_year: int, *, calendar: str = DEFAULT_CALENDAR) -> int:
    return _cal(calendar).to_free_year(absolute_year)

def from_free_year(free_year: int, *, calendar: str = DEFAULT_CALENDAR) -> int:
    return _cal(calendar).from_free_year(free_year)

def age_year_from_free_year(free_year: int, *, calendar: str = DEFAULT_CALENDAR) -> AgeYear:
    return _cal(calendar).years.age_year_from_free_year(free_year)

def year_name_from_free_year(free_year: int, *, calendar: str = DEFAULT_CALENDAR) -> str:
    ay = age_year_from_free_year(free_year, calendar=calendar)
    return _cal(calendar).year_name(ay.year_in_age)

# ============================================================
# Seasons & full records
# ============================================================

def season_for(day_of_year: int, *, calendar: str = DEFAULT_CALENDAR) -> Optional[SeasonInfo]:
    return _cal(calendar).season_for(day_of_year)

def day_info(
    date: CalendarDate,
    *,
    calendar: str = DEFAULT_CALENDAR,
    attributes: Sequence[str] = (),
) -> DayInfo:
    eng = _cal(calendar)
    info = eng.day_info(date)
    if attributes:
        attrs = compute_attributes(info, attributes, eng.definition)
        info = replace(info, attributes=attrs)
    return info

def explain(date: CalendarDate, *, calendar: str = DEFAULT_CALENDAR) -> Dict[str, Any]:
    return _cal(calendar).explain(date)
