from __future__ import annotations

from dataclasses import replace
from typing import Dict

from ..core.types import CalendarDefinition, IntercalaryPeriod, Month, Season, YearNaming


# ============================================================
# ATHASIAN CONSTANTS
# ============================================================

DAYS_PER_MONTH = 30
INTERCALARY_DAYS = 5
YEARS_PER_KINGS_AGE = 77

# Years between Age 1 Year 1 and Free Year 1 (there is no Free Year 0)
FREE_YEAR_OFFSET = 14578

MONTH_NAMES = (
    "Scorch", "Morrow", "Rest", "Gather", "Breeze", "Mist",
    "Bloom", "Haze", "Hoard", "Wind", "Sorrow", "Smolder",
)

ENDLEAN_CYCLE = (
    "Ral", "Friend", "Desert", "Priest", "Wind", "Dragon",
    "Mountain", "King", "Silt", "Enemy", "Guthay",
)

SOFEAN_CYCLE = (
    "Fury", "Contemplation", "Vengeance", "Slumber",
    "Defiance", "Reverence", "Agitation",
)


# ============================================================
# DEFINITIONS
# ============================================================

ATHAS = CalendarDefinition(
    name="athas",
    months=tuple(Month(name, DAYS_PER_MONTH) for name in MONTH_NAMES),
    intercalary=(
        IntercalaryPeriod(4, INTERCALARY_DAYS, "Cooling Sun", "The sun's heat wanes between Gather and Breeze"),
        IntercalaryPeriod(8, INTERCALARY_DAYS, "Soaring Sun", "The sun climbs between Haze and Hoard"),
        IntercalaryPeriod(12, INTERCALARY_DAYS, "Highest Sun", "The sun stands highest as the year turns"),
    ),
    seasons=(
        Season("High Sun", 311, 60, "The hottest stretch, spanning the turn of the year"),
        Season("Sun Descending", 61, 185, "The sun falls away from its peak"),
        Season("Sun Ascending", 186, 310, "The sun climbs back toward High Sun"),
    ),
    years_per_age=YEARS_PER_KINGS_AGE,
    year_naming=YearNaming(ENDLEAN_CYCLE, SOFEAN_CYCLE),
    free_year_offset=FREE_YEAR_OFFSET,
    meta={"age_label": "King's Age", "age_abbreviation": "KA"},
)

# Same calendar with absolute day 0 on King's Age 190, Year 1, Day 1
# (the grand-eclipse epoch used by the moon tables).
ATHAS_KA190 = replace(
    ATHAS,
    name="athas-ka190",
    epoch_offset=189 * YEARS_PER_KINGS_AGE * ATHAS.total_days_per_year,
    meta=dict(ATHAS.meta),
)

ALL_SPECS: Dict[str, CalendarDefinition] = {
    ATHAS.name: ATHAS,
    ATHAS_KA190.name: ATHAS_KA190,
}
