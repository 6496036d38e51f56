"""
Shared pytest fixtures and configuration for fallible tests.

This module provides:
- Settings cache cleanup for test isolation
- structlog reset so configure_logging() calls don't leak between tests
- A call-counting spy for exactly-once assertions
"""

from pathlib import Path
from typing import Any, Generator

import pytest
import structlog

from fallible.core.settings import clear_settings_cache


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark every test without explicit markers as a unit test."""
    for item in items:
        markers = {mark.name for mark in item.iter_markers()}
        if "unit" not in markers:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """Run each test from an empty directory with a fresh settings cache."""
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    yield
    structlog.reset_defaults()


# =============================================================================
# Helpers
# =============================================================================


class CallSpy:
    """Callable that records every call and returns a fixed value."""

    def __init__(self, returns: Any = None):
        self.returns = returns
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.returns

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def spy() -> type[CallSpy]:
    """Factory for call-counting callables: ``f = spy(returns=1)``."""
    return CallSpy
