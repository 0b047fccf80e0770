"""Holiday manager handed out by the registry."""

from __future__ import annotations

import logging
import threading
from datetime import date, datetime

from holiday_engine.chronology import contains
from holiday_engine.domain import (
    CalendarHierarchy,
    Configuration,
    HolidayCacheKey,
    HolidaySet,
)

from .base import HolidayRuleEvaluator

logger = logging.getLogger(__name__)


class HolidayManager:
    """Caching facade over a rule evaluator for one calendar.

    Holiday sets are cached per year and hierarchy path for the lifetime of
    the manager. Interval queries go straight to the evaluator.
    """

    def __init__(
        self,
        calendar_id: str,
        configuration: Configuration,
        evaluator: HolidayRuleEvaluator,
    ) -> None:
        self._calendar_id = calendar_id
        self._configuration = configuration
        self._evaluator = evaluator
        self._holidays_per_year: dict[HolidayCacheKey, HolidaySet] = {}
        self._lock = threading.Lock()

    @property
    def calendar_id(self) -> str:
        return self._calendar_id

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    @property
    def evaluator(self) -> HolidayRuleEvaluator:
        return self._evaluator

    def get_holidays(self, year: int, *hierarchy_path: str) -> HolidaySet:
        """Return the holidays of ``year`` for the region addressed by ``hierarchy_path``."""

        key: HolidayCacheKey = (year, tuple(hierarchy_path))
        with self._lock:
            cached = self._holidays_per_year.get(key)
        if cached is not None:
            return cached

        holidays = frozenset(self._evaluator.get_holidays(year, *hierarchy_path))
        with self._lock:
            # The first result stored wins if another thread computed the same key.
            stored = self._holidays_per_year.setdefault(key, holidays)
        logger.debug("Cached %d holidays for %s %s", len(stored), self._calendar_id, key)
        return stored

    def is_holiday(self, day: date, *hierarchy_path: str) -> bool:
        if isinstance(day, datetime):
            day = day.date()
        return contains(self.get_holidays(day.year, *hierarchy_path), day)

    def get_holidays_between(self, start: date, end: date, *hierarchy_path: str) -> HolidaySet:
        """Return holidays in the half-open interval ``[start, end)``."""

        return frozenset(self._evaluator.get_holidays_between(start, end, *hierarchy_path))

    def get_calendar_hierarchy(self) -> CalendarHierarchy:
        return self._evaluator.get_calendar_hierarchy()

    def clear_cache(self) -> None:
        with self._lock:
            self._holidays_per_year.clear()

    def __repr__(self) -> str:
        return f"HolidayManager(calendar_id={self._calendar_id!r}, evaluator={type(self._evaluator).__name__})"


__all__ = ["HolidayManager"]
