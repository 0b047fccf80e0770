"""Rule evaluator contract implemented by manager implementations."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import Protocol, runtime_checkable

from holiday_engine.domain import CalendarHierarchy, Configuration, Holiday


@runtime_checkable
class HolidayRuleEvaluator(Protocol):
    """Computes holidays for one calendar.

    ``init`` or ``init_from_resource`` is called exactly once, after
    construction and before any query.
    """

    def init(self, calendar_id: str, configuration: Configuration) -> None: ...

    def init_from_resource(self, locator: str, configuration: Configuration) -> None: ...

    def get_holidays(self, year: int, *hierarchy_path: str) -> Iterable[Holiday]: ...

    def get_holidays_between(
        self, start: date, end: date, *hierarchy_path: str
    ) -> Iterable[Holiday]: ...

    def get_calendar_hierarchy(self) -> CalendarHierarchy: ...


__all__ = ["HolidayRuleEvaluator"]
