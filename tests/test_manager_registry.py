from __future__ import annotations

import threading
from collections.abc import Mapping
from datetime import date, datetime
from pathlib import Path

import pytest

from holiday_engine import (
    ConfigurationError,
    HolidayCalendar,
    ImplementationInstantiationError,
    MissingResourceError,
    clear_manager_cache,
    get_manager,
    get_supported_calendar_codes,
    is_manager_caching_enabled,
    set_manager_caching_enabled,
)
from holiday_engine.config import EngineSettings
from holiday_engine.configuration import ConfigurationAssembler, ProviderContext
from holiday_engine.domain import CalendarHierarchy, Configuration, Holiday
from holiday_engine.managers import (
    ManagerRegistry,
    create_default_registry,
    normalize_calendar_id,
    resolve_implementation_name,
)
from holiday_engine.rules import default_catalog


class RecordingEvaluator:
    def __init__(self) -> None:
        self.initialised_with: tuple[str, str] | None = None

    def init(self, calendar_id: str, configuration: Configuration) -> None:
        self.initialised_with = ("calendar", calendar_id)

    def init_from_resource(self, locator: str, configuration: Configuration) -> None:
        self.initialised_with = ("resource", locator)

    def get_holidays(self, year: int, *hierarchy_path: str) -> set[Holiday]:
        return {Holiday(date=date(year, 1, 1), properties_key="NEW_YEAR")}

    def get_holidays_between(self, start: date, end: date, *hierarchy_path: str) -> set[Holiday]:
        return set()

    def get_calendar_hierarchy(self) -> CalendarHierarchy:
        return CalendarHierarchy(id="test")


class FailingInitEvaluator(RecordingEvaluator):
    def init(self, calendar_id: str, configuration: Configuration) -> None:
        raise ConfigurationError(f"Unknown calendar {calendar_id}")


class StaticProvider:
    def __init__(self, values: Mapping[str, str]) -> None:
        self.values = dict(values)

    def get_configuration(self, context: ProviderContext) -> Mapping[str, str]:
        return dict(self.values)


def _registry(
    defaults: Mapping[str, str] | None = None,
    *,
    default_country: str = "de",
) -> ManagerRegistry:
    settings = EngineSettings(default_country=default_country)
    assembler = ConfigurationAssembler(
        default_provider=StaticProvider(defaults if defaults is not None else {"manager.impl": "recording"}),
        settings_loader=lambda: settings,
    )
    registry = ManagerRegistry(assembler=assembler, settings_loader=lambda: settings)
    registry.register_implementation("recording", RecordingEvaluator)
    registry.register_implementation("failing-init", FailingInitEvaluator)
    registry.register_implementation("not-an-evaluator", object)
    return registry


def test_caching_returns_identical_instance() -> None:
    registry = _registry()

    first = registry.get_manager("us")
    second = registry.get_manager(" US ")

    assert first is second
    assert registry.cached_keys() == ("us",)


def test_disabled_caching_returns_new_equivalent_instances() -> None:
    registry = _registry()
    registry.set_manager_caching_enabled(False)

    first = registry.get_manager("us")
    second = registry.get_manager("us")

    assert first is not second
    assert dict(first.configuration) == dict(second.configuration)
    assert registry.cached_keys() == ()
    assert not registry.is_manager_caching_enabled()


def test_disabled_caching_bypasses_existing_entries() -> None:
    registry = _registry()
    cached = registry.get_manager("us")
    registry.set_manager_caching_enabled(False)

    assert registry.get_manager("us") is not cached

    registry.set_manager_caching_enabled(True)
    assert registry.get_manager("us") is cached


def test_clear_manager_cache_keeps_returned_instances_intact() -> None:
    registry = _registry()
    manager = registry.get_manager("us")
    holidays = manager.get_holidays(2010)

    registry.clear_manager_cache()

    assert registry.get_manager("us") is not manager
    assert manager.get_holidays(2010) is holidays


def test_blank_calendar_uses_default_country() -> None:
    registry = _registry(default_country="AT")

    manager = registry.get_manager(None)

    assert manager.calendar_id == "at"
    assert registry.get_manager("   ") is manager
    assert manager.evaluator.initialised_with == ("calendar", "at")


def test_calendar_enum_is_accepted() -> None:
    registry = _registry()
    assert registry.get_manager(HolidayCalendar.AUSTRIA) is registry.get_manager("at")


def test_calendar_specific_implementation_wins() -> None:
    registry = _registry({"manager.impl": "recording", "manager.impl.xx": "failing-init"})

    assert registry.get_manager("yy").evaluator.initialised_with == ("calendar", "yy")
    with pytest.raises(ConfigurationError):
        registry.get_manager("xx")


def test_override_selects_implementation() -> None:
    registry = _registry({})

    manager = registry.get_manager("us", {"manager.impl": "recording"})

    assert manager.configuration["manager.impl"] == "recording"


def test_missing_implementation_is_fatal_and_not_cached() -> None:
    registry = _registry({})

    with pytest.raises(ConfigurationError, match="'fr'"):
        registry.get_manager("fr")
    assert registry.cached_keys() == ()


def test_unknown_implementation_is_reported_with_name() -> None:
    registry = _registry({"manager.impl": "does-not-exist"})

    with pytest.raises(ImplementationInstantiationError) as excinfo:
        registry.get_manager("fr")

    assert excinfo.value.implementation == "does-not-exist"
    assert isinstance(excinfo.value, ConfigurationError)
    assert registry.cached_keys() == ()


def test_non_conforming_implementation_is_rejected() -> None:
    registry = _registry({"manager.impl": "not-an-evaluator"})

    with pytest.raises(ImplementationInstantiationError, match="not-an-evaluator"):
        registry.get_manager("fr")


def test_failing_init_leaves_cache_untouched() -> None:
    registry = _registry({"manager.impl": "failing-init"})

    with pytest.raises(ConfigurationError):
        registry.get_manager("fr")
    assert registry.cached_keys() == ()


def test_duplicate_implementation_registration() -> None:
    registry = _registry()
    with pytest.raises(ValueError):
        registry.register_implementation("recording", RecordingEvaluator)
    registry.register_implementation("recording", FailingInitEvaluator, override=True)
    assert "recording" in registry.implementations()


@pytest.mark.parametrize("locator", [None, "", "   "])
def test_resource_manager_requires_locator(locator: str | None) -> None:
    registry = _registry()
    with pytest.raises(MissingResourceError):
        registry.get_manager_for_resource(locator)


def test_resource_manager_is_cached_by_locator(tmp_path: Path) -> None:
    resource = tmp_path / "calendar.env"
    resource.write_text("custom=yes\n", encoding="utf-8")
    registry = _registry()

    manager = registry.get_manager_for_resource(resource)

    assert manager.evaluator.initialised_with == ("resource", str(resource))
    assert manager.configuration["custom"] == "yes"
    assert registry.get_manager_for_resource(str(resource)) is manager


def test_resource_manager_ignores_calendar_specific_keys(tmp_path: Path) -> None:
    resource = tmp_path / "calendar.env"
    resource.write_text("manager.impl.de=failing-init\n", encoding="utf-8")
    registry = _registry()

    manager = registry.get_manager_for_resource(resource)

    assert isinstance(manager.evaluator, RecordingEvaluator)


def test_normalize_calendar_id() -> None:
    assert normalize_calendar_id(" De ", default_country="us") == "de"
    assert normalize_calendar_id(None, default_country="US") == "us"
    assert normalize_calendar_id("", default_country="") == ""


def test_resolve_implementation_name() -> None:
    configuration = {"manager.impl": "generic", "manager.impl.de": "german"}
    assert resolve_implementation_name("de", configuration) == "german"
    assert resolve_implementation_name("fr", configuration) == "generic"
    assert resolve_implementation_name(None, configuration) == "generic"
    with pytest.raises(ConfigurationError):
        resolve_implementation_name("de", {"manager.impl": "  "})


def test_default_registry_builds_germany() -> None:
    settings = EngineSettings(default_country="de")
    registry = create_default_registry(settings_loader=lambda: settings)

    manager = registry.get_manager(None)

    assert manager.is_holiday(date(2010, 10, 3))


def test_module_level_functions_share_default_registry() -> None:
    assert is_manager_caching_enabled()
    manager = get_manager("de")
    assert get_manager("DE") is manager

    set_manager_caching_enabled(False)
    assert not is_manager_caching_enabled()
    assert get_manager("de") is not manager

    set_manager_caching_enabled(True)
    clear_manager_cache()
    assert get_manager("de") is not manager


def test_supported_calendar_codes() -> None:
    codes = get_supported_calendar_codes()
    assert {"de", "us", "gb", "nyse"} <= codes
    assert len(codes) == len(HolidayCalendar)
    assert set(default_catalog.calendar_ids()) == {"de"}
    assert default_catalog.get("us") is None


def test_resource_manager_with_rule_evaluator(tmp_path: Path) -> None:
    resource = tmp_path / "calendar.env"
    resource.write_text("calendar.id=de\n", encoding="utf-8")
    registry = create_default_registry(settings_loader=EngineSettings)

    manager = registry.get_manager_for_resource(resource.as_uri())

    assert manager.is_holiday(date(2010, 12, 25))
    assert not manager.is_holiday(date(2010, 12, 24))
    assert manager.get_calendar_hierarchy().id == "de"


def test_concurrent_get_manager_caches_single_instance() -> None:
    registry = _registry()
    results: list[object] = []
    barrier = threading.Barrier(8)

    def worker() -> None:
        barrier.wait()
        results.append(registry.get_manager("us"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 8
    assert all(result is results[0] for result in results)
    assert registry.cached_keys() == ("us",)
    assert registry.get_manager("us") is results[0]


def test_resource_manager_reads_latin1_resource(tmp_path: Path) -> None:
    resource = tmp_path / "calendar.properties"
    resource.write_bytes("calendar.id=de\ndescription=K\xf6ln\n".encode("latin-1"))
    registry = create_default_registry(settings_loader=EngineSettings)

    manager = registry.get_manager_for_resource(resource)

    assert manager.configuration["description"] == "K\xf6ln"
    assert manager.is_holiday(datetime(2010, 12, 25, 9, 0))
