# tests/test_api.py

import os
import subprocess
import sys

import pytest

import calath
from calath import api
from calath.attributes.registry import available_attributes, ordinal
from calath.bootstrap import build_registry
from calath.core.types import AgeYear, CalendarDate, IntercalaryPosition, MonthPosition


@pytest.fixture
def fresh_registry(monkeypatch):
    reg = build_registry()
    monkeypatch.setattr(api, "_registry", reg)
    return reg


def test_list_calendars():
    assert calath.list_calendars() == ["athas", "athas-ka190"]


def test_calendar_info():
    info = calath.calendar_info("athas")
    assert info["total_days_per_year"] == 375
    assert info["years_per_age"] == 77
    assert info["year_name_cycle"] == 77
    assert info["age_label"] == "King's Age"


def test_unknown_calendar():
    with pytest.raises(KeyError):
        calath.to_absolute_days(1, 1, 1, calendar="nope")


def test_not_initialized(monkeypatch):
    monkeypatch.setattr(api, "_registry", None)
    with pytest.raises(calath.NotInitializedError):
        calath.to_absolute_days(1, 1, 1)
    with pytest.raises(calath.NotInitializedError):
        calath.list_calendars()


def test_absolute_day_facade():
    assert calath.to_absolute_days(1, 1, 1) == 0
    assert calath.from_absolute_days(375) == CalendarDate(1, 2, 1)
    assert calath.from_absolute_days(0, calendar="athas-ka190") == CalendarDate(190, 1, 1)
    assert calath.advance_days(CalendarDate(1, 77, 375), 1) == CalendarDate(2, 1, 1)


def test_day_of_year_facade():
    assert calath.resolve_month_and_day(121) == IntercalaryPosition(1, 1)
    assert calath.resolve_month_and_day(95) == MonthPosition(4, 5)
    assert calath.month_and_day_to_day_of_year(4, 5) == 95
    assert calath.intercalary_to_day_of_year(2, 1) == 246
    assert calath.month_bounds(12) == (341, 370)
    assert calath.intercalary_bounds(3) == (371, 375)


def test_year_facade():
    assert calath.get_year_name(1) == "Ral's Fury"
    assert calath.to_absolute_year(190, 26) == 14579
    assert calath.from_absolute_year(14579) == AgeYear(190, 26)
    assert calath.to_free_year(14579) == 1
    assert calath.from_free_year(-1) == 14578
    assert calath.age_year_from_free_year(1) == AgeYear(190, 26)
    assert calath.year_name_from_free_year(1) == "Priest's Defiance"


def test_out_of_range_propagates():
    with pytest.raises(calath.OutOfRangeError):
        calath.resolve_month_and_day(0)
    with pytest.raises(calath.OutOfRangeError):
        calath.from_free_year(0)
    # OutOfRangeError is also a ValueError
    with pytest.raises(ValueError):
        calath.get_year_name(78)


def test_day_info_month_day():
    info = calath.day_info(CalendarDate(190, 26, 95))
    assert info.calendar == "athas"
    assert info.absolute_day == calath.to_absolute_days(190, 26, 95)
    assert info.position == MonthPosition(4, 5)
    assert info.month_name == "Gather"
    assert info.intercalary_name is None
    assert not info.is_intercalary
    assert info.year_name == "Priest's Defiance"
    assert info.absolute_year == 14579
    assert info.free_year == 1
    assert info.season.name == "Sun Descending"
    assert info.attributes is None


def test_day_info_intercalary_day():
    info = calath.day_info(CalendarDate(190, 26, 248))
    assert info.is_intercalary
    assert info.month_name is None
    assert info.intercalary_name == "Soaring Sun"
    assert info.intercalary_description


def test_label_attributes():
    info = calath.day_info(CalendarDate(190, 26, 95), attributes=("labels", "free_year"))
    a = info.attributes
    assert a["age_label"] == "26th year of King's Age 190, Year of Priest's Defiance"
    assert a["short_label"] == "King's Age 190, Year 26"
    assert a["date_label"] == "5th Gather, KA 190, 26"
    assert a["season_label"] == "Sun Descending (day 35 of 125)"
    assert a["free_year"] == 1


def test_intercalary_label():
    info = calath.day_info(CalendarDate(190, 26, 123), attributes=("labels",))
    assert info.attributes["date_label"] == "3rd Cooling Sun, KA 190, 26"


def test_unknown_attribute():
    with pytest.raises(KeyError):
        calath.day_info(CalendarDate(1, 1, 1), attributes=("moon_phase",))


def test_available_attributes():
    assert {"absolute_year", "free_year", "labels"} <= set(available_attributes())


def test_available_attributes_in_fresh_interpreter():
    # no day_info call beforehand: importing the registry alone registers the built-ins
    src = os.path.dirname(os.path.dirname(calath.__file__))
    env = dict(os.environ, PYTHONPATH=os.pathsep.join(filter(None, [src, os.environ.get("PYTHONPATH")])))
    code = "from calath.attributes.registry import available_attributes; print(available_attributes())"
    out = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True, env=env, check=True)
    assert out.stdout.strip() == "['absolute_year', 'free_year', 'labels']"


@pytest.mark.parametrize("n, text", [
    (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"),
    (11, "11th"), (12, "12th"), (13, "13th"),
    (21, "21st"), (22, "22nd"), (23, "23rd"),
    (111, "111th"), (112, "112th"), (101, "101st"),
])
def test_ordinal(n, text):
    assert ordinal(n) == text


def test_explain():
    out = calath.explain(CalendarDate(190, 10, 200))
    assert out["date"] == {"age": 190, "year_in_age": 10, "day_of_year": 200}
    assert out["engine"]["name"] == "athas"
    assert out["season"]["name"] == "Sun Ascending"


def test_register_custom_calendar(fresh_registry, tiny):
    calath.register_calendar("tiny", calath.make_calendar(tiny))
    assert "tiny" in calath.list_calendars()
    assert calath.to_absolute_days(2, 1, 1, calendar="tiny") == 132
    assert calath.get_year_name(2, calendar="tiny") == "Bone's Fall"
    assert calath.season_for(22, calendar="tiny") is None

    with pytest.raises(KeyError):
        calath.register_calendar("tiny", calath.make_calendar(tiny))
    calath.register_calendar("tiny", calath.make_calendar(tiny), overwrite=True)


def test_get_calendar_components():
    eng = calath.get_calendar()
    assert eng.name == "athas"
    assert eng.day_info_from_absolute(0).date == CalendarDate(1, 1, 1)
