from __future__ import annotations
from typing import Any, Dict

from ..core.types import CalendarDefinition, DayInfo, IntercalaryPosition
from .registry import ordinal, register_attribute

def free_year(info: DayInfo, definition: CalendarDefinition) -> Dict[str, Any]:
    return {"free_year": info.free_year}

def absolute_year(info: DayInfo, definition: CalendarDefinition) -> Dict[str, Any]:
    return {"absolute_year": info.absolute_year}

def labels(info: DayInfo, definition: CalendarDefinition) -> Dict[str, Any]:
    age_word = definition.meta.get("age_label", "Age")
    age_abbr = definition.meta.get("age_abbreviation", "A")
    d = info.date

    pos = info.position
    if isinstance(pos, IntercalaryPosition):
        day_part = f"{ordinal(pos.day_in_period)} {info.intercalary_name or f'Intercalary {pos.period}'}"
    else:
        day_part = f"{ordinal(pos.day_in_month)} {info.month_name}"

    out = {
        "age_label": f"{ordinal(d.year_in_age)} year of {age_word} {d.age}, Year of {info.year_name}",
        "short_label": f"{age_word} {d.age}, Year {d.year_in_age}",
        "date_label": f"{day_part}, {age_abbr} {d.age}, {d.year_in_age}",
    }
    if info.season is not None:
        s = info.season
        out["season_label"] = f"{s.name} (day {s.days_into_season} of {s.days_in_season})"
    return out

register_attribute("free_year", free_year)
register_attribute("absolute_year", absolute_year)
register_attribute("labels", labels)
