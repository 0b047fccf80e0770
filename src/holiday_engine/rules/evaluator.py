"""Rule evaluator backed by a :class:`DefinitionCatalog`."""

from __future__ import annotations

import logging
from datetime import date, timedelta

from holiday_engine.domain import CalendarHierarchy, Configuration, Holiday
from holiday_engine.exceptions import ConfigurationError, HolidayEngineError

from .catalog import DefinitionCatalog
from .definitions import default_catalog
from .models import CalendarDefinition

CALENDAR_ID_KEY = "calendar.id"

logger = logging.getLogger(__name__)


class RuleBasedEvaluator:
    """Evaluates the rules of a catalogued calendar definition.

    Holidays for a hierarchy path are the union of the rules of every node
    along the path, so ``("by",)`` yields the national holidays plus the
    Bavarian ones.
    """

    def __init__(self, catalog: DefinitionCatalog | None = None) -> None:
        self._catalog = catalog if catalog is not None else default_catalog
        self._definition: CalendarDefinition | None = None

    @property
    def definition(self) -> CalendarDefinition:
        if self._definition is None:
            msg = "Evaluator used before init()"
            raise HolidayEngineError(msg)
        return self._definition

    def init(self, calendar_id: str, configuration: Configuration) -> None:
        self._definition = self._catalog.require(calendar_id)
        logger.debug("Initialised rule evaluator for calendar '%s'", calendar_id)

    def init_from_resource(self, locator: str, configuration: Configuration) -> None:
        calendar_id = (configuration.get(CALENDAR_ID_KEY) or "").strip()
        if not calendar_id:
            msg = f"Resource '{locator}' does not name a calendar ('{CALENDAR_ID_KEY}' missing)"
            raise ConfigurationError(msg)
        self.init(calendar_id, configuration)

    def get_holidays(self, year: int, *hierarchy_path: str) -> set[Holiday]:
        holidays: set[Holiday] = set()
        for node in self.definition.path(*hierarchy_path):
            for rule in node.rules:
                holidays.update(rule.holidays_for(year))
        return holidays

    def get_holidays_between(self, start: date, end: date, *hierarchy_path: str) -> set[Holiday]:
        if end <= start:
            return set()
        last = end - timedelta(days=1)
        return {
            holiday
            for year in range(start.year, last.year + 1)
            for holiday in self.get_holidays(year, *hierarchy_path)
            if start <= holiday.date < end
        }

    def get_calendar_hierarchy(self) -> CalendarHierarchy:
        return self.definition.hierarchy()


__all__ = ["CALENDAR_ID_KEY", "RuleBasedEvaluator"]
