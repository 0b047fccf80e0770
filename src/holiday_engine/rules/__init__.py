"""Built-in rule evaluator and calendar definitions."""

from .catalog import DefinitionCatalog
from .definitions import GERMANY, default_catalog, register_definition
from .evaluator import CALENDAR_ID_KEY, RuleBasedEvaluator
from .models import (
    CalendarDefinition,
    EasterRelativeRule,
    EthiopianOrthodoxRule,
    FixedDateRule,
    HolidayRule,
    IslamicRule,
)

__all__ = [
    "CALENDAR_ID_KEY",
    "GERMANY",
    "CalendarDefinition",
    "DefinitionCatalog",
    "EasterRelativeRule",
    "EthiopianOrthodoxRule",
    "FixedDateRule",
    "HolidayRule",
    "IslamicRule",
    "RuleBasedEvaluator",
    "default_catalog",
    "register_definition",
]
