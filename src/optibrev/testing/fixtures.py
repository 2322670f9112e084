"""Testing fixtures – call_counter, optibrev_settings."""
from __future__ import annotations

import pytest

from optibrev.config import OptibrevSettings
from optibrev.testing.fakes import CallCounter


@pytest.fixture
def call_counter() -> CallCounter:
    """Pytest fixture: an identity ``CallCounter`` with zero recorded calls."""
    return CallCounter()


@pytest.fixture
def optibrev_settings() -> OptibrevSettings:
    """Pytest fixture: default ``OptibrevSettings`` (INFO, JSON logs)."""
    return OptibrevSettings()


__all__ = ["call_counter", "optibrev_settings"]
