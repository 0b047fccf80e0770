"""Holiday calendars with pluggable rule evaluators, layered configuration and caching."""

from .config import EngineSettings
from .domain import CalendarHierarchy, Holiday, HolidayCalendar, HolidaySet, HolidayType
from .exceptions import (
    ConfigurationError,
    HolidayEngineError,
    ImplementationInstantiationError,
    MissingResourceError,
)
from .managers import (
    HolidayManager,
    HolidayRuleEvaluator,
    ManagerRegistry,
    clear_manager_cache,
    get_manager,
    get_manager_for_resource,
    get_supported_calendar_codes,
    is_manager_caching_enabled,
    register_implementation,
    set_manager_caching_enabled,
)

__all__ = [
    "CalendarHierarchy",
    "ConfigurationError",
    "EngineSettings",
    "Holiday",
    "HolidayCalendar",
    "HolidayEngineError",
    "HolidayManager",
    "HolidayRuleEvaluator",
    "HolidaySet",
    "HolidayType",
    "ImplementationInstantiationError",
    "ManagerRegistry",
    "MissingResourceError",
    "clear_manager_cache",
    "get_manager",
    "get_manager_for_resource",
    "get_supported_calendar_codes",
    "is_manager_caching_enabled",
    "register_implementation",
    "set_manager_caching_enabled",
]
