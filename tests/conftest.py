"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

BASE_TIME = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def at():
    """Return a factory: at(n) → BASE_TIME + n seconds."""
    return lambda seconds: BASE_TIME + timedelta(seconds=seconds)
