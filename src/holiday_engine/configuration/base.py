"""Configuration provider contracts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from holiday_engine.config import EngineSettings


@dataclass(frozen=True, slots=True)
class ProviderContext:
    """Inputs available to providers while a configuration is assembled."""

    settings: EngineSettings = field(default_factory=EngineSettings)
    locator: str | None = None


@runtime_checkable
class ConfigurationProvider(Protocol):
    """Contributes configuration entries.

    Providers return their own partial mapping; the assembler decides
    precedence when merging.
    """

    def get_configuration(self, context: ProviderContext) -> Mapping[str, str]: ...


__all__ = ["ConfigurationProvider", "ProviderContext"]
