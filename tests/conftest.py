"""Shared pytest fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from optibrev.testing.fixtures import call_counter, optibrev_settings  # noqa: F401


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Undo ``JsonLoggerFactory.configure`` side effects after the test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()
