"""Shared type aliases for the domain layer."""

from __future__ import annotations

from collections.abc import Mapping

HierarchyPath = tuple[str, ...]
Configuration = Mapping[str, str]
HolidayCacheKey = tuple[int, HierarchyPath]

__all__ = [
    "Configuration",
    "HierarchyPath",
    "HolidayCacheKey",
]
