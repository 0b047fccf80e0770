"""Holiday rule value objects understood by the built-in evaluator."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Protocol

from holiday_engine.chronology import (
    easter_sunday,
    ethiopian_orthodox_holidays_in_gregorian_year,
    islamic_holidays_in_gregorian_year,
    julian_easter_sunday,
)
from holiday_engine.domain import CalendarHierarchy, Holiday, HolidayType


class HolidayRule(Protocol):
    """Produces the holidays a rule yields in a given Gregorian year."""

    def holidays_for(self, year: int) -> Iterable[Holiday]: ...


@dataclass(frozen=True, slots=True, kw_only=True)
class _RuleBase:
    key: str
    holiday_type: HolidayType = HolidayType.OFFICIAL_HOLIDAY
    description: str | None = None
    valid_from: int | None = None
    valid_to: int | None = None

    def is_valid(self, year: int) -> bool:
        if self.valid_from is not None and year < self.valid_from:
            return False
        return self.valid_to is None or year <= self.valid_to

    def _holiday(self, day: date) -> Holiday:
        return Holiday(
            date=day,
            properties_key=self.key,
            holiday_type=self.holiday_type,
            description=self.description,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class FixedDateRule(_RuleBase):
    """Same month and day every year; 29 February only in leap years."""

    month: int
    day: int

    def holidays_for(self, year: int) -> Iterator[Holiday]:
        if not self.is_valid(year):
            return
        try:
            day = date(year, self.month, self.day)
        except ValueError:
            return
        yield self._holiday(day)


@dataclass(frozen=True, slots=True, kw_only=True)
class EasterRelativeRule(_RuleBase):
    """Offset in days from Easter Sunday, western or orthodox."""

    offset_days: int = 0
    orthodox: bool = False

    def holidays_for(self, year: int) -> Iterator[Holiday]:
        if not self.is_valid(year):
            return
        easter = julian_easter_sunday(year) if self.orthodox else easter_sunday(year)
        yield self._holiday(easter + timedelta(days=self.offset_days))


@dataclass(frozen=True, slots=True, kw_only=True)
class IslamicRule(_RuleBase):
    """Fixed day of the Hijri calendar."""

    month: int
    day: int

    def holidays_for(self, year: int) -> Iterator[Holiday]:
        if not self.is_valid(year):
            return
        for day in sorted(islamic_holidays_in_gregorian_year(year, self.month, self.day)):
            yield self._holiday(day)


@dataclass(frozen=True, slots=True, kw_only=True)
class EthiopianOrthodoxRule(_RuleBase):
    """Fixed day of the Coptic/Ethiopian calendar."""

    month: int
    day: int

    def holidays_for(self, year: int) -> Iterator[Holiday]:
        if not self.is_valid(year):
            return
        for day in sorted(ethiopian_orthodox_holidays_in_gregorian_year(year, self.month, self.day)):
            yield self._holiday(day)


@dataclass(frozen=True, slots=True)
class CalendarDefinition:
    """Rules of a calendar node plus its sub-regions."""

    id: str
    description: str | None = None
    rules: tuple[HolidayRule, ...] = ()
    subdivisions: Mapping[str, CalendarDefinition] = field(default_factory=dict)

    def path(self, *hierarchy_path: str) -> Iterator[CalendarDefinition]:
        """Yield this node and each node along ``hierarchy_path``.

        Iteration stops at the first segment that names no sub-region.
        """

        node = self
        yield node
        for segment in hierarchy_path:
            child = node.subdivisions.get(segment.strip().lower())
            if child is None:
                return
            node = child
            yield node

    def hierarchy(self) -> CalendarHierarchy:
        return CalendarHierarchy(
            id=self.id,
            description=self.description,
            children={key: child.hierarchy() for key, child in self.subdivisions.items()},
        )


__all__ = [
    "CalendarDefinition",
    "EasterRelativeRule",
    "EthiopianOrthodoxRule",
    "FixedDateRule",
    "HolidayRule",
    "IslamicRule",
]
