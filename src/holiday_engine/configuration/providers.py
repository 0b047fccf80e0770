"""Built-in configuration providers."""

from __future__ import annotations

import io
import logging
from collections.abc import Mapping
from importlib import resources
from pathlib import Path
from urllib.parse import urlsplit
from urllib.request import url2pathname

import httpx
from dotenv import dotenv_values

from .base import ProviderContext

DEFAULTS_RESOURCE = "defaults.env"

logger = logging.getLogger(__name__)


def _decode(raw: bytes) -> str:
    # Java properties files default to ISO-8859-1.
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def parse_properties(text: str) -> dict[str, str]:
    """Parse ``key=value`` lines; keys without a value are ignored."""

    values = dotenv_values(stream=io.StringIO(text), interpolate=False)
    return {key: value for key, value in values.items() if value is not None}


class DefaultConfigurationProvider:
    """Provides the defaults packaged with the engine."""

    def __init__(self, resource: str = DEFAULTS_RESOURCE) -> None:
        self._resource = resource

    def get_configuration(self, context: ProviderContext) -> Mapping[str, str]:
        text = resources.files("holiday_engine").joinpath(self._resource).read_text(encoding="utf-8")
        return parse_properties(text)


class ResourceConfigurationProvider:
    """Reads configuration from files or URLs.

    Locators listed in the ``config_urls`` setting are read first, then the
    locator the manager is being built for, so the latter wins collisions.
    Resources that cannot be read are logged and skipped.
    """

    def __init__(self, *, http_client: httpx.Client | None = None) -> None:
        self._http_client = http_client

    def get_configuration(self, context: ProviderContext) -> Mapping[str, str]:
        locators = list(context.settings.config_urls)
        if context.locator:
            locators.append(context.locator)

        configuration: dict[str, str] = {}
        for locator in locators:
            try:
                text = self._read(locator, timeout=context.settings.http_timeout)
            except (OSError, httpx.HTTPError) as exc:
                logger.warning("Cannot read configuration from '%s': %s", locator, exc)
                continue
            configuration.update(parse_properties(text))
        return configuration

    def _read(self, locator: str, *, timeout: float) -> str:
        parts = urlsplit(locator)
        scheme = parts.scheme.lower()
        if scheme in {"http", "https"}:
            return self._fetch(locator, timeout=timeout)
        if scheme == "file":
            return _decode(Path(url2pathname(parts.path)).read_bytes())
        return _decode(Path(locator).expanduser().read_bytes())

    def _fetch(self, url: str, *, timeout: float) -> str:
        if self._http_client is not None:
            response = self._http_client.get(url, timeout=timeout)
        else:
            response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
        return response.text


__all__ = [
    "DEFAULTS_RESOURCE",
    "DefaultConfigurationProvider",
    "ResourceConfigurationProvider",
    "parse_properties",
]
