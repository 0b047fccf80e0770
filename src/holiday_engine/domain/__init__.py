"""Domain layer exports."""

from .enums import HolidayCalendar, HolidayType
from .models import CalendarHierarchy, DomainModel, Holiday, HolidaySet
from .types import Configuration, HierarchyPath, HolidayCacheKey

__all__ = [
    "CalendarHierarchy",
    "Configuration",
    "DomainModel",
    "HierarchyPath",
    "Holiday",
    "HolidayCacheKey",
    "HolidayCalendar",
    "HolidaySet",
    "HolidayType",
]
