"""Root error class for optibrev."""

from __future__ import annotations

import json
from typing import Any


class OptibrevError(Exception):
    """Root of the optibrev error hierarchy.

    ``message`` is the plain text; ``code`` a stable slug for log filters.
    ``str()`` renders both as one JSON line so the error drops straight into
    structured logs.
    """

    default_code: str = "optibrev_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["OptibrevError"]
