"""Configuration provider chain exports."""

from .assembler import ConfigurationAssembler, merge_configurations
from .base import ConfigurationProvider, ProviderContext
from .providers import (
    DefaultConfigurationProvider,
    ResourceConfigurationProvider,
    parse_properties,
)
from .registry import (
    ConfigurationProviderRegistry,
    ProviderFactory,
    provider_registry,
    register_configuration_provider,
)

__all__ = [
    "ConfigurationAssembler",
    "ConfigurationProvider",
    "ConfigurationProviderRegistry",
    "DefaultConfigurationProvider",
    "ProviderContext",
    "ProviderFactory",
    "ResourceConfigurationProvider",
    "merge_configurations",
    "parse_properties",
    "provider_registry",
    "register_configuration_provider",
]
