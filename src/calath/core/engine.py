from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from .types import CalendarDate, DayInfo, Position, SeasonInfo

class CalendarEngine(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def to_absolute(self, age: int, year_in_age: int, day_of_year: int) -> int: ...
    def from_absolute(self, n: int) -> CalendarDate: ...
    def resolve(self, day_of_year: int) -> Position: ...
    def year_name(self, year_in_age: int) -> str: ...
    def season_for(self, day_of_year: int) -> Optional[SeasonInfo]: ...
    def day_info(self, date: CalendarDate) -> DayInfo: ...

@dataclass
class CalendarRegistry:
    _calendars: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._calendars:
            raise KeyError(f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}")
        return self._calendars[name]

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(self, name: str, calendar: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calendars):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._calendars[name] = calendar
