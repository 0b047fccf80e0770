from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Ensure the src/ directory is importable when tests run via `uv run pytest`.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from holiday_engine.managers import registry  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_default_registry() -> Iterator[None]:
    registry.set_manager_caching_enabled(True)
    registry.clear_manager_cache()
    yield
    registry.set_manager_caching_enabled(True)
    registry.clear_manager_cache()
