"""Catalog of calendar definitions keyed by calendar id."""

from __future__ import annotations

from dataclasses import dataclass, field

from holiday_engine.exceptions import ConfigurationError

from .models import CalendarDefinition


@dataclass(slots=True)
class DefinitionCatalog:
    """Runtime catalog mapping calendar ids to their definitions."""

    _definitions: dict[str, CalendarDefinition] = field(default_factory=dict)

    def register(self, definition: CalendarDefinition, *, override: bool = False) -> None:
        calendar_id = definition.id.strip().lower()
        if not override and calendar_id in self._definitions:
            msg = f"Calendar definition {calendar_id} already registered"
            raise ValueError(msg)
        self._definitions[calendar_id] = definition

    def get(self, calendar_id: str) -> CalendarDefinition | None:
        return self._definitions.get(calendar_id.strip().lower())

    def require(self, calendar_id: str) -> CalendarDefinition:
        definition = self.get(calendar_id)
        if definition is None:
            msg = f"No holiday definition registered for calendar '{calendar_id}'"
            raise ConfigurationError(msg)
        return definition

    def calendar_ids(self) -> tuple[str, ...]:
        return tuple(self._definitions)


__all__ = ["DefinitionCatalog"]
