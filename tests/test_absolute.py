# tests/test_absolute.py

import random

import pytest

from calath.core.errors import OutOfRangeError
from calath.core.types import CalendarDate
from calath.engines.absolute import AbsoluteDayConverter
from calath.engines.specs import ATHAS, ATHAS_KA190

DAYS_PER_AGE = 77 * 375


@pytest.fixture
def conv():
    return AbsoluteDayConverter(ATHAS)


def test_known_values(conv):
    assert conv.to_absolute(1, 1, 1) == 0
    assert conv.to_absolute(1, 1, 375) == 374
    assert conv.to_absolute(1, 2, 1) == 375
    assert conv.to_absolute(2, 1, 1) == DAYS_PER_AGE
    assert conv.to_absolute(190, 1, 1) == 189 * DAYS_PER_AGE


def test_from_absolute_known_values(conv):
    assert conv.from_absolute(0) == CalendarDate(1, 1, 1)
    assert conv.from_absolute(374) == CalendarDate(1, 1, 375)
    assert conv.from_absolute(DAYS_PER_AGE - 1) == CalendarDate(1, 77, 375)
    assert conv.from_absolute(DAYS_PER_AGE) == CalendarDate(2, 1, 1)


def test_random_round_trip(conv):
    random.seed(123)
    for _ in range(2000):
        n = random.randint(0, 300 * DAYS_PER_AGE)
        d = conv.from_absolute(n)
        assert conv.to_absolute(d.age, d.year_in_age, d.day_of_year) == n


def test_consecutive_days_are_contiguous(conv):
    # across a year boundary and an Age boundary
    for start in (370, DAYS_PER_AGE - 3):
        dates = [conv.from_absolute(n) for n in range(start, start + 7)]
        assert dates == sorted(dates)
        assert [conv.date_to_absolute(d) for d in dates] == list(range(start, start + 7))


def test_out_of_range_inputs(conv):
    with pytest.raises(OutOfRangeError):
        conv.to_absolute(0, 1, 1)
    with pytest.raises(OutOfRangeError):
        conv.to_absolute(1, 78, 1)
    with pytest.raises(OutOfRangeError):
        conv.to_absolute(1, 1, 376)
    with pytest.raises(OutOfRangeError):
        conv.from_absolute(-1)


def test_advance_and_days_between(conv):
    end_of_age = CalendarDate(1, 77, 375)
    assert conv.advance(end_of_age, 1) == CalendarDate(2, 1, 1)
    assert conv.advance(CalendarDate(2, 1, 1), -1) == end_of_age
    assert conv.advance(CalendarDate(1, 1, 1), 0) == CalendarDate(1, 1, 1)
    assert conv.days_between(CalendarDate(1, 1, 1), CalendarDate(1, 2, 1)) == 375
    assert conv.days_between(CalendarDate(1, 2, 1), CalendarDate(1, 1, 1)) == -375
    with pytest.raises(OutOfRangeError):
        conv.advance(CalendarDate(1, 1, 1), -1)


def test_ka190_epoch():
    conv = AbsoluteDayConverter(ATHAS_KA190)
    assert conv.min_absolute == -189 * DAYS_PER_AGE
    assert conv.to_absolute(190, 1, 1) == 0
    assert conv.from_absolute(0) == CalendarDate(190, 1, 1)
    assert conv.from_absolute(-1) == CalendarDate(189, 77, 375)
    assert conv.from_absolute(conv.min_absolute) == CalendarDate(1, 1, 1)
    with pytest.raises(OutOfRangeError):
        conv.from_absolute(conv.min_absolute - 1)


def test_epochs_differ_by_constant_offset():
    a = AbsoluteDayConverter(ATHAS)
    b = AbsoluteDayConverter(ATHAS_KA190)
    for date in (CalendarDate(1, 1, 1), CalendarDate(190, 10, 200), CalendarDate(250, 77, 375)):
        assert a.date_to_absolute(date) - b.date_to_absolute(date) == 189 * DAYS_PER_AGE


def test_small_calendar(tiny):
    conv = AbsoluteDayConverter(tiny)
    assert conv.to_absolute(2, 1, 1) == 4 * 33
    assert conv.from_absolute(4 * 33 - 1) == CalendarDate(1, 4, 33)
