"""Registry of named extra configuration providers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from holiday_engine.exceptions import ProviderLoadError

from .base import ConfigurationProvider

ProviderFactory = Callable[[], object]


@dataclass(slots=True)
class ConfigurationProviderRegistry:
    """Maps provider names to factories creating them."""

    _factories: dict[str, ProviderFactory] = field(default_factory=dict)

    def register(self, name: str, factory: ProviderFactory, *, override: bool = False) -> None:
        if not override and name in self._factories:
            msg = f"Configuration provider {name} already registered"
            raise ValueError(msg)
        self._factories[name] = factory

    def create(self, name: str) -> ConfigurationProvider:
        """Instantiate the named provider or raise :class:`ProviderLoadError`."""

        try:
            factory = self._factories[name]
        except KeyError as exc:
            raise ProviderLoadError(name, "no provider registered under this name") from exc
        try:
            provider = factory()
        except Exception as exc:
            raise ProviderLoadError(name, f"factory failed ({exc})") from exc
        if not isinstance(provider, ConfigurationProvider):
            raise ProviderLoadError(name, f"{type(provider).__name__} is not a configuration provider")
        return provider


provider_registry = ConfigurationProviderRegistry()


def register_configuration_provider(
    name: str, factory: ProviderFactory, *, override: bool = False
) -> None:
    """Register a provider factory on the global registry."""

    provider_registry.register(name, factory, override=override)


__all__ = [
    "ConfigurationProviderRegistry",
    "ProviderFactory",
    "provider_registry",
    "register_configuration_provider",
]
