"""Manager registry: implementation selection and the shared instance cache."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from os import PathLike

from holiday_engine.config import EngineSettings
from holiday_engine.configuration import ConfigurationAssembler
from holiday_engine.domain import Configuration, HolidayCalendar
from holiday_engine.exceptions import (
    ConfigurationError,
    ImplementationInstantiationError,
    MissingResourceError,
)
from holiday_engine.rules import RuleBasedEvaluator

from .base import HolidayRuleEvaluator
from .instance import HolidayManager

MANAGER_IMPL_KEY = "manager.impl"
RULES_IMPLEMENTATION = "rules"

ImplementationFactory = Callable[[], object]

logger = logging.getLogger(__name__)


def normalize_calendar_id(calendar: str | None, *, default_country: str) -> str:
    """Strip and lowercase ``calendar``; ``None`` or blank means ``default_country``."""

    if calendar is None or not calendar.strip():
        return default_country.strip().lower()
    return calendar.strip().lower()


def resolve_implementation_name(calendar_id: str | None, configuration: Configuration) -> str:
    """Return the implementation configured for ``calendar_id``.

    ``manager.impl.<calendar>`` takes precedence over the generic
    ``manager.impl`` entry.
    """

    candidates = [MANAGER_IMPL_KEY]
    if calendar_id:
        candidates.insert(0, f"{MANAGER_IMPL_KEY}.{calendar_id}")
    for key in candidates:
        name = (configuration.get(key) or "").strip()
        if name:
            return name
    msg = (
        f"Missing configuration '{MANAGER_IMPL_KEY}' for calendar '{calendar_id}'. "
        "Cannot create manager."
    )
    raise ConfigurationError(msg)


def supported_calendar_codes() -> set[str]:
    return {calendar.value for calendar in HolidayCalendar}


class ManagerRegistry:
    """Creates holiday managers and caches them per calendar id or resource locator."""

    def __init__(
        self,
        *,
        assembler: ConfigurationAssembler | None = None,
        settings_loader: Callable[[], EngineSettings] = EngineSettings.from_env,
        caching_enabled: bool = True,
    ) -> None:
        self._settings_loader = settings_loader
        self._assembler = assembler or ConfigurationAssembler(settings_loader=settings_loader)
        self._implementations: dict[str, ImplementationFactory] = {}
        self._managers: dict[str, HolidayManager] = {}
        self._lock = threading.Lock()
        self._caching_enabled = caching_enabled

    def register_implementation(
        self, name: str, factory: ImplementationFactory, *, override: bool = False
    ) -> None:
        if not override and name in self._implementations:
            msg = f"Manager implementation {name} already registered"
            raise ValueError(msg)
        self._implementations[name] = factory

    def implementations(self) -> tuple[str, ...]:
        return tuple(self._implementations)

    def set_manager_caching_enabled(self, enabled: bool) -> None:
        self._caching_enabled = enabled

    def is_manager_caching_enabled(self) -> bool:
        return self._caching_enabled

    def clear_manager_cache(self) -> None:
        with self._lock:
            self._managers.clear()

    def cached_keys(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._managers)

    def get_manager(
        self,
        calendar: str | None = None,
        overrides: Mapping[str, str] | None = None,
    ) -> HolidayManager:
        """Return the manager for ``calendar``; ``None`` selects the default country."""

        calendar_id = normalize_calendar_id(
            calendar, default_country=self._settings_loader().default_country
        )
        cached = self._from_cache(calendar_id)
        if cached is not None:
            return cached
        return self._create_manager(calendar_id, overrides=overrides)

    def get_manager_for_resource(
        self,
        locator: str | PathLike[str] | None,
        overrides: Mapping[str, str] | None = None,
    ) -> HolidayManager:
        """Return the manager for the calendar resource at ``locator``."""

        if locator is None or not str(locator).strip():
            msg = "Missing resource locator."
            raise MissingResourceError(msg)
        key = str(locator).strip()
        cached = self._from_cache(key)
        if cached is not None:
            return cached
        return self._create_manager(key, overrides=overrides, locator=key)

    def _create_manager(
        self,
        key: str,
        *,
        overrides: Mapping[str, str] | None,
        locator: str | None = None,
    ) -> HolidayManager:
        logger.debug(
            "Creating holiday manager for '%s'. Caching enabled: %s", key, self._caching_enabled
        )
        configuration = self._assembler.assemble(overrides, locator=locator)
        implementation = resolve_implementation_name(
            None if locator is not None else key, configuration
        )
        evaluator = self._instantiate(implementation)
        manager = HolidayManager(key, configuration, evaluator)
        if locator is not None:
            evaluator.init_from_resource(locator, configuration)
        else:
            evaluator.init(key, configuration)
        if not self._caching_enabled:
            return manager
        with self._lock:
            return self._managers.setdefault(key, manager)

    def _instantiate(self, implementation: str) -> HolidayRuleEvaluator:
        try:
            factory = self._implementations[implementation]
        except KeyError as exc:
            raise ImplementationInstantiationError(
                implementation, "no implementation registered under this name"
            ) from exc
        try:
            evaluator = factory()
        except Exception as exc:
            raise ImplementationInstantiationError(implementation, str(exc)) from exc
        if not isinstance(evaluator, HolidayRuleEvaluator):
            raise ImplementationInstantiationError(
                implementation, f"{type(evaluator).__name__} is not a holiday rule evaluator"
            )
        return evaluator

    def _from_cache(self, key: str) -> HolidayManager | None:
        if not self._caching_enabled:
            return None
        with self._lock:
            manager = self._managers.get(key)
        if manager is not None:
            logger.debug("Holiday manager cache hit for '%s'", key)
        return manager


def create_default_registry(
    *,
    assembler: ConfigurationAssembler | None = None,
    settings_loader: Callable[[], EngineSettings] = EngineSettings.from_env,
    caching_enabled: bool = True,
) -> ManagerRegistry:
    """Return a registry with the built-in rule evaluator registered."""

    manager_registry = ManagerRegistry(
        assembler=assembler,
        settings_loader=settings_loader,
        caching_enabled=caching_enabled,
    )
    manager_registry.register_implementation(RULES_IMPLEMENTATION, RuleBasedEvaluator)
    return manager_registry


registry = create_default_registry()


def get_manager(
    calendar: str | None = None, overrides: Mapping[str, str] | None = None
) -> HolidayManager:
    return registry.get_manager(calendar, overrides)


def get_manager_for_resource(
    locator: str | PathLike[str] | None, overrides: Mapping[str, str] | None = None
) -> HolidayManager:
    return registry.get_manager_for_resource(locator, overrides)


def register_implementation(
    name: str, factory: ImplementationFactory, *, override: bool = False
) -> None:
    registry.register_implementation(name, factory, override=override)


def set_manager_caching_enabled(enabled: bool) -> None:
    registry.set_manager_caching_enabled(enabled)


def is_manager_caching_enabled() -> bool:
    return registry.is_manager_caching_enabled()


def clear_manager_cache() -> None:
    registry.clear_manager_cache()


def get_supported_calendar_codes() -> set[str]:
    """Return every calendar code the engine knows about.

    Known codes are not the same set as the shipped definitions: the built-in
    ``rules`` implementation only has definitions in its catalog (``de`` by
    default), so other codes need a registered definition or implementation.
    """

    return supported_calendar_codes()


__all__ = [
    "MANAGER_IMPL_KEY",
    "RULES_IMPLEMENTATION",
    "ImplementationFactory",
    "ManagerRegistry",
    "clear_manager_cache",
    "create_default_registry",
    "get_manager",
    "get_manager_for_resource",
    "get_supported_calendar_codes",
    "is_manager_caching_enabled",
    "normalize_calendar_id",
    "register_implementation",
    "registry",
    "resolve_implementation_name",
    "set_manager_caching_enabled",
    "supported_calendar_codes",
]
