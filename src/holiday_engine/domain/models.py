"""Holiday domain models."""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict

from .enums import HolidayType


class DomainModel(BaseModel):
    """Immutable, hashable model base with strict validation."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class Holiday(DomainModel):
    """A single holiday occurrence.

    ``properties_key`` identifies the holiday independent of language; turning
    it into localized text is left to callers. Instances are hashable so they
    can live in the frozen sets returned by managers.
    """

    date: dt.date
    properties_key: str
    holiday_type: HolidayType = HolidayType.OFFICIAL_HOLIDAY
    description: str | None = None

    @property
    def is_official(self) -> bool:
        return self.holiday_type.is_official


HolidaySet = frozenset[Holiday]


@dataclass(frozen=True, slots=True)
class CalendarHierarchy:
    """Tree of region codes a calendar can be queried with."""

    id: str
    description: str | None = None
    children: Mapping[str, CalendarHierarchy] = field(default_factory=dict)

    def find(self, *path: str) -> CalendarHierarchy | None:
        """Return the node addressed by ``path`` or ``None`` if it does not exist."""

        node: CalendarHierarchy = self
        for segment in path:
            child = node.children.get(segment)
            if child is None:
                return None
            node = child
        return node


__all__ = ["CalendarHierarchy", "DomainModel", "Holiday", "HolidaySet"]
