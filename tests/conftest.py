"""Pytest configuration and shared fixtures for asyncbag tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from asyncbag import _config
from hypothesis import HealthCheck, settings

if TYPE_CHECKING:
    from collections.abc import Generator

# The autouse fixture below only resets global state, so sharing it across
# hypothesis examples is fine.
settings.register_profile(
    'asyncbag',
    suppress_health_check=[HealthCheck.function_scoped_fixture],
    deadline=None,
)
settings.load_profile('asyncbag')


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Start every test from default config and a clean environment."""
    monkeypatch.delenv('ASYNCBAG_LOG_LEVEL', raising=False)
    monkeypatch.delenv('ASYNCBAG_JSON_LOGS', raising=False)
    _config._reset()
    yield
    _config._reset()
