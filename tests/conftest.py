import pytest

from calath.core.types import CalendarDefinition, IntercalaryPeriod, Month, Season, YearNaming


@pytest.fixture
def tiny():
    """
    33-day year: M1 (1-10), M2 (11-20), Gap (21-23), M3 (24-33).
    Days 21-24 fall outside every season.
    """
    return CalendarDefinition(
        name="tiny",
        months=(Month("M1", 10), Month("M2", 10), Month("M3", 10)),
        intercalary=(IntercalaryPeriod(2, 3, "Gap"),),
        seasons=(Season("Warm", 25, 5), Season("Cool", 6, 20)),
        years_per_age=4,
        year_naming=YearNaming(("Ash", "Bone"), ("Rise", "Fall", "Rest")),
        free_year_offset=10,
    )
