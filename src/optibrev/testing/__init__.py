"""Testing – fakes, fixtures and Hypothesis strategies for Option code.

Strategies live in :mod:`optibrev.testing.strategies` and fixtures in
:mod:`optibrev.testing.fixtures`; both are imported on demand so that the
``hypothesis`` and ``pytest`` extras stay optional.
"""
from optibrev.testing.fakes import CallCounter

__all__ = ["CallCounter"]
