"""
calath.engines.seasons
----------------------
Day-of-year -> season lookup. Seasons are tested in definition order and the
first containing range wins; overlap is not checked here.
"""

from __future__ import annotations

from typing import Optional

from ..core.errors import check_range
from ..core.types import CalendarDefinition, Season, SeasonInfo


def season_length(season: Season, total_days: int) -> int:
    if season.wraps:
        return (total_days - season.start_day + 1) + season.end_day
    return season.end_day - season.start_day + 1


def season_contains(season: Season, day_of_year: int) -> bool:
    if season.wraps:
        return day_of_year >= season.start_day or day_of_year <= season.end_day
    return season.start_day <= day_of_year <= season.end_day


def days_into(season: Season, day_of_year: int, total_days: int) -> int:
    """1-based position of ``day_of_year`` inside ``season`` (assumed to contain it)."""
    if day_of_year >= season.start_day:
        return day_of_year - season.start_day + 1
    # after the wrap: the whole tail of the previous year has already elapsed
    return (total_days - season.start_day + 1) + day_of_year


class SeasonResolver:
    def __init__(self, definition: CalendarDefinition):
        self.d = definition

    def season_for(self, day_of_year: int) -> Optional[SeasonInfo]:
        total = self.d.total_days_per_year
        check_range("day_of_year", day_of_year, 1, total)

        for i, s in enumerate(self.d.seasons, start=1):
            if not season_contains(s, day_of_year):
                continue
            length = season_length(s, total)
            into = days_into(s, day_of_year, total)
            return SeasonInfo(
                index=i,
                name=s.name,
                description=s.description,
                start_day=s.start_day,
                end_day=s.end_day,
                days_in_season=length,
                days_into_season=into,
                days_remaining=length - into,
                day_of_year=day_of_year,
            )
        return None
