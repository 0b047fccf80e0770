"""Holiday engine exceptions."""

from __future__ import annotations


class HolidayEngineError(RuntimeError):
    """Base class for holiday engine failures."""


class ConfigurationError(HolidayEngineError):
    """Raised when a manager cannot be configured for the requested calendar."""


class ImplementationInstantiationError(ConfigurationError):
    """Raised when the configured manager implementation cannot be created."""

    def __init__(self, implementation: str, reason: str) -> None:
        super().__init__(f"Cannot create manager implementation '{implementation}': {reason}")
        self.implementation = implementation


class ProviderLoadError(HolidayEngineError):
    """Raised internally when an extra configuration provider cannot be used."""

    def __init__(self, provider_name: str, reason: str) -> None:
        super().__init__(f"Configuration provider '{provider_name}' skipped: {reason}")
        self.provider_name = provider_name


class MissingResourceError(HolidayEngineError, ValueError):
    """Raised when a resource-backed manager is requested without a locator."""


__all__ = [
    "ConfigurationError",
    "HolidayEngineError",
    "ImplementationInstantiationError",
    "MissingResourceError",
    "ProviderLoadError",
]
