"""Manager registry, manager instances and the evaluator contract."""

from .base import HolidayRuleEvaluator
from .instance import HolidayManager
from .registry import (
    MANAGER_IMPL_KEY,
    RULES_IMPLEMENTATION,
    ImplementationFactory,
    ManagerRegistry,
    clear_manager_cache,
    create_default_registry,
    get_manager,
    get_manager_for_resource,
    get_supported_calendar_codes,
    is_manager_caching_enabled,
    normalize_calendar_id,
    register_implementation,
    registry,
    resolve_implementation_name,
    set_manager_caching_enabled,
    supported_calendar_codes,
)

__all__ = [
    "MANAGER_IMPL_KEY",
    "RULES_IMPLEMENTATION",
    "HolidayManager",
    "HolidayRuleEvaluator",
    "ImplementationFactory",
    "ManagerRegistry",
    "clear_manager_cache",
    "create_default_registry",
    "get_manager",
    "get_manager_for_resource",
    "get_supported_calendar_codes",
    "is_manager_caching_enabled",
    "normalize_calendar_id",
    "register_implementation",
    "registry",
    "resolve_implementation_name",
    "set_manager_caching_enabled",
    "supported_calendar_codes",
]
