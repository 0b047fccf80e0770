"""Environment-driven engine settings."""

from __future__ import annotations

import locale
import os
from dataclasses import dataclass

CONFIG_PROVIDERS_ENV = "HOLIDAY_ENGINE_CONFIG_PROVIDERS"
CONFIG_URLS_ENV = "HOLIDAY_ENGINE_CONFIG_URLS"
DEFAULT_COUNTRY_ENV = "HOLIDAY_ENGINE_DEFAULT_COUNTRY"
HTTP_TIMEOUT_ENV = "HOLIDAY_ENGINE_HTTP_TIMEOUT"


def _env_list(name: str) -> tuple[str, ...]:
    raw = os.getenv(name) or ""
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def locale_country() -> str:
    """Country part of the host locale, e.g. ``"us"`` for ``en_US``; empty if unknown."""

    language_code = locale.getlocale()[0] or ""
    _, _, country = language_code.partition("_")
    return country.lower()


@dataclass(frozen=True)
class EngineSettings:
    """Immutable configuration sourced from environment variables."""

    config_providers: tuple[str, ...] = ()
    config_urls: tuple[str, ...] = ()
    default_country: str = ""
    http_timeout: float = 10.0

    @classmethod
    def from_env(cls) -> EngineSettings:
        return cls(
            config_providers=_env_list(CONFIG_PROVIDERS_ENV),
            config_urls=_env_list(CONFIG_URLS_ENV),
            default_country=(os.getenv(DEFAULT_COUNTRY_ENV) or locale_country()).strip().lower(),
            http_timeout=_env_float(HTTP_TIMEOUT_ENV, cls.http_timeout),
        )


__all__ = [
    "CONFIG_PROVIDERS_ENV",
    "CONFIG_URLS_ENV",
    "DEFAULT_COUNTRY_ENV",
    "HTTP_TIMEOUT_ENV",
    "EngineSettings",
    "locale_country",
]
