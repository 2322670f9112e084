"""Option errors — contract violations on optional values."""

from __future__ import annotations

from typing import Any

from optibrev.errors.base import OptibrevError


class OptionError(OptibrevError):
    """Base class for errors raised by ``Option`` operations."""

    default_code = "option_error"


class EmptyUnwrapError(OptionError, ValueError):
    """``unwrap()`` was called on ``Nothing``.

    Also a :class:`ValueError`, the usual type for a caller-side contract
    violation.
    """

    default_code = "empty_unwrap"
    default_message = "Can't unwrap None"

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or self.default_message, **kwargs)


__all__ = ["EmptyUnwrapError", "OptionError"]
