"""Layered configuration assembly."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from os import PathLike
from types import MappingProxyType

from holiday_engine.config import EngineSettings
from holiday_engine.domain import Configuration
from holiday_engine.exceptions import ProviderLoadError

from .base import ConfigurationProvider, ProviderContext
from .providers import DefaultConfigurationProvider, ResourceConfigurationProvider
from .registry import ConfigurationProviderRegistry, provider_registry

logger = logging.getLogger(__name__)


def merge_configurations(
    partials: Iterable[Mapping[str, str]],
    overrides: Mapping[str, str] | None = None,
) -> Configuration:
    """Merge partial configurations in order; later entries and then overrides win."""

    merged: dict[str, str] = {}
    for partial in partials:
        merged.update(partial)
    if overrides:
        merged.update(overrides)
    return MappingProxyType(merged)


class ConfigurationAssembler:
    """Builds a manager configuration from the provider chain.

    Precedence, lowest first: packaged defaults, configuration resources,
    extra providers named by the ``config_providers`` setting (in listed
    order), manual overrides.
    """

    def __init__(
        self,
        *,
        default_provider: ConfigurationProvider | None = None,
        resource_provider: ConfigurationProvider | None = None,
        providers: ConfigurationProviderRegistry | None = None,
        settings_loader: Callable[[], EngineSettings] = EngineSettings.from_env,
    ) -> None:
        self._default_provider = default_provider or DefaultConfigurationProvider()
        self._resource_provider = resource_provider or ResourceConfigurationProvider()
        self._providers = providers if providers is not None else provider_registry
        self._settings_loader = settings_loader

    def assemble(
        self,
        overrides: Mapping[str, str] | None = None,
        *,
        locator: str | PathLike[str] | None = None,
    ) -> Configuration:
        settings = self._settings_loader()
        context = ProviderContext(
            settings=settings,
            locator=str(locator) if locator is not None else None,
        )

        partials: list[Mapping[str, str]] = [self._default_provider.get_configuration(context)]
        if context.locator or settings.config_urls:
            partials.append(self._resource_provider.get_configuration(context))
        partials.extend(self._extra_configurations(settings.config_providers, context))
        return merge_configurations(partials, overrides)

    def _extra_configurations(
        self, names: Iterable[str], context: ProviderContext
    ) -> Iterator[Mapping[str, str]]:
        for name in names:
            try:
                provider = self._providers.create(name)
                yield _invoke(name, provider, context)
            except ProviderLoadError as exc:
                logger.warning("%s", exc)


def _invoke(
    name: str, provider: ConfigurationProvider, context: ProviderContext
) -> Mapping[str, str]:
    try:
        result = provider.get_configuration(context)
    except Exception as exc:
        raise ProviderLoadError(name, f"provider failed ({exc})") from exc
    if not isinstance(result, Mapping):
        raise ProviderLoadError(name, f"returned {type(result).__name__} instead of a mapping")
    partial = dict(result)
    if not all(isinstance(key, str) and isinstance(value, str) for key, value in partial.items()):
        raise ProviderLoadError(name, "returned non-string configuration entries")
    return partial


__all__ = ["ConfigurationAssembler", "merge_configurations"]
