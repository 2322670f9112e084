"""Unit tests for optibrev.testing helpers."""

from __future__ import annotations

import builtins
from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from optibrev import Nothing, Option, Some
from optibrev.testing import CallCounter
from optibrev.testing.strategies import (
    _require_hypothesis,
    nothing_strategy,
    option_strategy,
    some_strategy,
)


class TestCallCounter:
    def test_identity_by_default(self, call_counter: CallCounter) -> None:
        assert call_counter(7) == 7
        assert call_counter.count == 1

    def test_records_args_and_kwargs(self) -> None:
        counter = CallCounter(lambda a, b=0: a + b)
        assert counter(1, b=2) == 3
        assert counter.calls == [((1,), {"b": 2})]

    def test_reset(self) -> None:
        counter = CallCounter()
        counter(1)
        counter.reset()
        assert counter.count == 0

    def test_records_call_even_when_func_raises(self) -> None:
        def boom(_: Any) -> None:
            raise RuntimeError("x")

        counter = CallCounter(boom)
        with pytest.raises(RuntimeError):
            counter(1)
        assert counter.count == 1


class TestStrategies:
    @given(some_strategy(st.integers()))
    def test_some_strategy_draws_some(self, opt: Some[int]) -> None:
        assert isinstance(opt, Some)
        assert isinstance(opt.unwrap(), int)

    @given(nothing_strategy())
    def test_nothing_strategy_draws_nothing(self, opt: Nothing[Any]) -> None:
        assert isinstance(opt, Nothing)

    @given(option_strategy(st.text()))
    def test_option_strategy_draws_either(self, opt: Option[str]) -> None:
        assert isinstance(opt, (Some, Nothing))

    def test_require_hypothesis_error_without_package(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        real_import = builtins.__import__

        def fake_import(name: str, *args: Any, **kwargs: Any) -> Any:
            if name.startswith("hypothesis"):
                raise ImportError(name)
            return real_import(name, *args, **kwargs)

        monkeypatch.setattr(builtins, "__import__", fake_import)
        with pytest.raises(ImportError, match="pip install hypothesis"):
            _require_hypothesis()
