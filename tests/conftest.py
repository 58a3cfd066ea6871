"""Shared fixtures for humantime tests."""

from __future__ import annotations

import pytest

from humantime.cache import DEFAULT_CACHE_SIZE, clear_cache, get_default_cache


@pytest.fixture(autouse=True)
def reset_default_cache():
    """Reset the shared formatter cache before and after each test."""
    get_default_cache().resize(DEFAULT_CACHE_SIZE)
    clear_cache()
    yield
    get_default_cache().resize(DEFAULT_CACHE_SIZE)
    clear_cache()
