"""Pure date algorithms: computus, weekends and tabular calendar conversion."""

from .easter import (
    LAST_JULIAN_YEAR,
    easter_sunday,
    gregorian_easter_sunday,
    julian_easter_sunday,
)
from .gregorian import contains, is_weekend, julian_to_gregorian
from .tabular import (
    COPTIC,
    ISLAMIC,
    TabularCalendar,
    ethiopian_orthodox_holidays_in_gregorian_year,
    islamic_holidays_in_gregorian_year,
)

__all__ = [
    "COPTIC",
    "ISLAMIC",
    "LAST_JULIAN_YEAR",
    "TabularCalendar",
    "contains",
    "easter_sunday",
    "ethiopian_orthodox_holidays_in_gregorian_year",
    "gregorian_easter_sunday",
    "is_weekend",
    "islamic_holidays_in_gregorian_year",
    "julian_easter_sunday",
    "julian_to_gregorian",
]
