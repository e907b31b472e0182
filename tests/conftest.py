"""Pytest fixtures for proplist tests."""

from __future__ import annotations

import pytest

from proplist.config import get_settings
from proplist.domain.entities import Property, PropertyList


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop cached settings and PROPLIST_* overrides around each test."""
    for name in ("PROPLIST_JSON_INDENT", "PROPLIST_LOG_LEVEL", "PROPLIST_ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def env_list() -> PropertyList:
    """List holding a single env=prod entry."""
    return PropertyList([Property("env", "prod")])


@pytest.fixture
def duplicate_list() -> PropertyList:
    """List with a repeated key, built directly rather than via set_property."""
    return PropertyList(
        Property("k", "first"),
        Property("other", "x"),
        Property("k", "second"),
    )
