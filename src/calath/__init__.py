"""calath public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    to_absolute_days,
    from_absolute_days,
    advance_days,
    resolve_month_and_day,
    month_and_day_to_day_of_year,
    intercalary_to_day_of_year,
    month_bounds,
    intercalary_bounds,
    get_year_name,
    to_absolute_year,
    from_absolute_year,
    to_free_year,
    from_free_year,
    age_year_from_free_year,
    year_name_from_free_year,
    season_for,
    day_info,
    explain,
    list_calendars,
    calendar_info,
    get_calendar,
    make_calendar,
    register_calendar,
)
from .core.errors import CalathError, MalformedDefinitionError, NotInitializedError, OutOfRangeError
from .core.types import (
    CalendarDate,
    CalendarDefinition,
    IntercalaryPeriod,
    IntercalaryPosition,
    Month,
    MonthPosition,
    Season,
    SeasonInfo,
    YearNaming,
)
from .loader import date_from_mapping, definition_from_mapping, load_definition

__all__ = [
    "to_absolute_days",
    "from_absolute_days",
    "advance_days",
    "resolve_month_and_day",
    "month_and_day_to_day_of_year",
    "intercalary_to_day_of_year",
    "month_bounds",
    "intercalary_bounds",
    "get_year_name",
    "to_absolute_year",
    "from_absolute_year",
    "to_free_year",
    "from_free_year",
    "age_year_from_free_year",
    "year_name_from_free_year",
    "season_for",
    "day_info",
    "explain",
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "make_calendar",
    "register_calendar",
    "CalathError",
    "MalformedDefinitionError",
    "NotInitializedError",
    "OutOfRangeError",
    "CalendarDate",
    "CalendarDefinition",
    "IntercalaryPeriod",
    "IntercalaryPosition",
    "Month",
    "MonthPosition",
    "Season",
    "SeasonInfo",
    "YearNaming",
    "date_from_mapping",
    "definition_from_mapping",
    "load_definition",
]
