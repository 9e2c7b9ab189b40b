"""
Boundary adapters.

* ``definition_from_mapping`` / ``load_definition`` turn a calendar.json style
  document into a CalendarDefinition.
* ``date_from_mapping`` turns a loose date record (as produced by UI layers
  and chat commands) into a validated CalendarDate.

Nothing inside the engines accepts these loose shapes directly.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from .core.errors import MalformedDefinitionError, OutOfRangeError
from .core.types import CalendarDate, CalendarDefinition, IntercalaryPeriod, Month, Season, YearNaming
from .engines.calendar import CalendarEngine
from .engines.day_of_year import DayOfYearResolver
from .engines.specs import ENDLEAN_CYCLE, FREE_YEAR_OFFSET, SOFEAN_CYCLE, YEARS_PER_KINGS_AGE


def _mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise MalformedDefinitionError(f"{where}: expected an object, got {type(value).__name__}")
    return value


def _list(value: Any, where: str) -> List[Any]:
    if not isinstance(value, list):
        raise MalformedDefinitionError(f"{where}: expected a list, got {type(value).__name__}")
    return value


def _require(data: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in _mapping(data, where):
        raise MalformedDefinitionError(f"{where}: missing required key '{key}'")
    return data[key]


def _as_int(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedDefinitionError(f"{where}: expected an integer, got {value!r}")
    return value


def _first(data: Mapping[str, Any], *keys: str) -> Any:
    for k in keys:
        if data.get(k) is not None:
            return data[k]
    return None


def _named_years(data: Mapping[str, Any]) -> Optional[List[str]]:
    ext = _mapping(data.get("extensions") or {}, "extensions")
    sas = _mapping(ext.get("seasons-and-stars") or {}, "extensions.seasons-and-stars")
    named = _mapping(sas.get("namedYears") or {}, "extensions.seasons-and-stars.namedYears")
    names = named.get("names")
    return None if names is None else _list(names, "namedYears.names")


def _months(data: Mapping[str, Any]) -> List[Month]:
    raw = _list(_require(data, "months", "definition"), "months")
    out = []
    for i, m in enumerate(raw, start=1):
        where = f"months[{i}]"
        m = _mapping(m, where)
        out.append(Month(
            name=str(_require(m, "name", where)),
            days=_as_int(_require(m, "days", where), f"{where}.days"),
            abbreviation=m.get("abbreviation"),
        ))
    return out


def _intercalary(data: Mapping[str, Any], months: List[Month]) -> List[IntercalaryPeriod]:
    by_name = {m.name: i for i, m in enumerate(months, start=1)}
    out = []
    for i, p in enumerate(_list(data.get("intercalary") or [], "intercalary"), start=1):
        where = f"intercalary[{i}]"
        p = _mapping(p, where)
        after = _require(p, "after", where)
        if isinstance(after, str):
            if after not in by_name:
                raise MalformedDefinitionError(f"{where}.after names unknown month '{after}'")
            after = by_name[after]
        out.append(IntercalaryPeriod(
            after_month=_as_int(after, f"{where}.after"),
            days=_as_int(_require(p, "days", where), f"{where}.days"),
            name=p.get("name"),
            description=p.get("description"),
        ))
    return out


def _seasons(data: Mapping[str, Any], months: List[Month], intercalary: List[IntercalaryPeriod]) -> List[Season]:
    raw = _list(data.get("seasons") or [], "seasons")
    resolver: Optional[DayOfYearResolver] = None
    out = []
    for i, s in enumerate(raw, start=1):
        where = f"seasons[{i}]"
        s = _mapping(s, where)
        start = _first(s, "startDay", "dayStart")
        end = _first(s, "endDay", "dayEnd")
        if start is None or end is None:
            # month-based season: expand to the days of the named months
            m0, m1 = _first(s, "monthStart", "startMonth"), _first(s, "monthEnd", "endMonth")
            if m0 is None or m1 is None:
                raise MalformedDefinitionError(f"{where}: needs startDay/endDay or monthStart/monthEnd")
            if resolver is None:
                resolver = DayOfYearResolver(_skeleton(months, intercalary))
            try:
                start = resolver.month_span(_as_int(m0, f"{where}.monthStart"))[0]
                end = resolver.month_span(_as_int(m1, f"{where}.monthEnd"))[1]
            except OutOfRangeError as e:
                raise MalformedDefinitionError(f"{where}: {e}") from e
        out.append(Season(
            name=str(_require(s, "name", where)),
            start_day=_as_int(start, f"{where}.startDay"),
            end_day=_as_int(end, f"{where}.endDay"),
            description=s.get("description"),
        ))
    return out


def _skeleton(months: List[Month], intercalary: List[IntercalaryPeriod]) -> CalendarDefinition:
    return CalendarDefinition(
        name="_layout",
        months=tuple(months),
        intercalary=tuple(intercalary),
        seasons=(),
        years_per_age=1,
        year_naming=YearNaming(ENDLEAN_CYCLE, SOFEAN_CYCLE),
    )


def _year_naming(data: Mapping[str, Any]) -> YearNaming:
    raw = data.get("yearNaming")
    if raw is None:
        return YearNaming(ENDLEAN_CYCLE, SOFEAN_CYCLE)
    first = _require(raw, "first", "yearNaming")
    second = _require(raw, "second", "yearNaming")
    template = raw.get("template", "{a}'s {b}")
    if not isinstance(template, str):
        raise MalformedDefinitionError(f"yearNaming.template: expected a string, got {template!r}")
    return YearNaming(first, second, template)


def definition_from_mapping(data: Mapping[str, Any], *, name: Optional[str] = None) -> CalendarDefinition:
    if not isinstance(data, Mapping):
        raise MalformedDefinitionError(f"definition must be a mapping, got {type(data).__name__}")

    months = _months(data)
    intercalary = _intercalary(data, months)
    seasons = _seasons(data, months, intercalary)

    years_per_age = data.get("yearsPerAge")
    if years_per_age is None:
        names = _named_years(data)
        years_per_age = len(names) if names else YEARS_PER_KINGS_AGE

    meta: Dict[str, Any] = {}
    for key, target in (("ageLabel", "age_label"), ("ageAbbreviation", "age_abbreviation")):
        if key in data:
            meta[target] = data[key]

    return CalendarDefinition(
        name=name or str(data.get("id") or data.get("name") or "custom"),
        months=tuple(months),
        intercalary=tuple(intercalary),
        seasons=tuple(seasons),
        years_per_age=_as_int(years_per_age, "yearsPerAge"),
        year_naming=_year_naming(data),
        epoch_offset=_as_int(data.get("epochOffset", 0), "epochOffset"),
        free_year_offset=_as_int(data.get("freeYearOffset", FREE_YEAR_OFFSET), "freeYearOffset"),
        meta=meta,
    )


def load_definition(path: Union[str, Path], *, name: Optional[str] = None) -> CalendarDefinition:
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise MalformedDefinitionError(f"{p}: invalid JSON ({e})") from e
    return definition_from_mapping(data, name=name)


# ============================================================
# Loose date records
# ============================================================

def _date_int(data: Mapping[str, Any], *keys: str) -> Optional[int]:
    v = _first(data, *keys)
    if v is None:
        return None
    if isinstance(v, bool) or not isinstance(v, int):
        raise TypeError(f"{keys[0]} must be an int, got {v!r}")
    return v


def date_from_mapping(data: Mapping[str, Any], engine: CalendarEngine) -> CalendarDate:
    """
    Accepted shapes (camelCase as emitted by the hosting application):

    * ``age``/``kingsAge`` + ``yearInAge``/``kingsAgeYear``, or ``absoluteYear``
    * plus one of ``dayOfYear``; ``month`` + ``day``; or
      ``intercalary`` (1-based index or name) + ``intercalaryDay``/``day``
    """
    age = _date_int(data, "age", "kingsAge")
    year = _date_int(data, "yearInAge", "kingsAgeYear")
    if age is None or year is None:
        absolute_year = _date_int(data, "absoluteYear")
        if absolute_year is None:
            raise ValueError("date needs age + yearInAge, or absoluteYear")
        ay = engine.from_absolute_year(absolute_year)
        age, year = ay.age, ay.year_in_age

    day_of_year = _date_int(data, "dayOfYear")
    if day_of_year is None:
        inter = data.get("intercalary")
        if inter is not None:
            if isinstance(inter, str):
                names = [p.name for p in engine.definition.intercalary]
                if inter not in names:
                    raise ValueError(f"unknown intercalary period '{inter}'. Available: {names}")
                inter = names.index(inter) + 1
            day = _date_int(data, "intercalaryDay", "dayInIntercalary", "day")
            if day is None:
                raise ValueError("intercalary date needs intercalaryDay")
            day_of_year = engine.from_intercalary(inter, day)
        else:
            month = _date_int(data, "month")
            day = _date_int(data, "day", "dayInMonth")
            if month is None or day is None:
                raise ValueError("date needs dayOfYear, month + day, or intercalary + intercalaryDay")
            day_of_year = engine.from_month_day(month, day)

    # round-trip through the converter so every field is range-checked
    engine.to_absolute(age, year, day_of_year)
    return CalendarDate(age, year, day_of_year)
