# tests/test_years.py

import pytest

from calath.core.errors import OutOfRangeError
from calath.core.types import AgeYear
from calath.engines.specs import ATHAS
from calath.engines.years import AgeYearConverter, YearNamer


@pytest.fixture
def namer():
    return YearNamer(ATHAS)


@pytest.fixture
def years():
    return AgeYearConverter(ATHAS)


@pytest.mark.parametrize("year, name", [
    (1, "Ral's Fury"),
    (2, "Friend's Contemplation"),
    (8, "King's Fury"),
    (12, "Ral's Defiance"),
    (26, "Priest's Defiance"),
    (77, "Guthay's Agitation"),
])
def test_year_names(namer, year, name):
    assert namer.year_name(year) == name


def test_year_names_are_stable(namer):
    assert [namer.year_name(y) for y in range(1, 78)] == [namer.year_name(y) for y in range(1, 78)]


def test_names_unique_within_an_age(namer):
    # 11 and 7 are coprime, so the pair only repeats after 77 years
    assert namer.cycle_length == 77
    assert len({namer.year_name(y) for y in range(1, 78)}) == 77


@pytest.mark.parametrize("year", [0, 78, -3])
def test_year_name_out_of_range(namer, year):
    with pytest.raises(OutOfRangeError):
        namer.year_name(year)


def test_absolute_year(years):
    assert years.to_absolute_year(1, 1) == 1
    assert years.to_absolute_year(2, 1) == 78
    assert years.to_absolute_year(190, 10) == 189 * 77 + 10
    assert years.from_absolute_year(78) == AgeYear(2, 1)
    assert years.from_absolute_year(77) == AgeYear(1, 77)
    with pytest.raises(OutOfRangeError):
        years.from_absolute_year(0)


@pytest.mark.parametrize("absolute_year, free_year", [
    (14579, 1),
    (14580, 2),
    (14578, -1),
    (14577, -2),
    (1, -14578),
])
def test_free_year(years, absolute_year, free_year):
    assert years.to_free_year(absolute_year) == free_year
    assert years.from_free_year(free_year) == absolute_year


def test_no_free_year_zero(years):
    with pytest.raises(OutOfRangeError) as ei:
        years.from_free_year(0)
    assert "no Free Year 0" in str(ei.value)


def test_free_year_lower_bound(years):
    with pytest.raises(OutOfRangeError):
        years.from_free_year(-14579)


def test_free_year_never_zero(years):
    assert 0 not in {years.to_free_year(y) for y in range(14500, 14650)}


def test_free_year_one_is_ka190_year_26(years):
    assert years.age_year_from_free_year(1) == AgeYear(190, 26)
    assert years.free_year_of(190, 26) == 1
    assert years.free_year_of(190, 25) == -1


def test_custom_naming(tiny):
    n = YearNamer(tiny)
    assert [n.year_name(y) for y in range(1, 5)] == ["Ash's Rise", "Bone's Fall", "Ash's Rest", "Bone's Rise"]
    assert n.cycle_length == 6
    with pytest.raises(OutOfRangeError):
        n.year_name(5)
