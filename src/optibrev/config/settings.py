"""Config – Settings base class and OptibrevSettings."""
from __future__ import annotations

import dataclasses

from optibrev.errors import InvalidSettingValueError

LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclasses.dataclass
class Settings:
    """Dataclass read from ``<_prefix>_<FIELD>`` environment variables."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Hook for cross-field validation; may normalise fields in place."""


@dataclasses.dataclass
class OptibrevSettings(Settings):
    _prefix: dataclasses.ClassVar[str] = "OPTIBREV"

    log_level: str = "INFO"
    json_logs: bool = True

    def _validate(self) -> None:
        level = self.log_level.upper()
        if level not in LOG_LEVELS:
            raise InvalidSettingValueError("log_level", self.log_level, LOG_LEVELS)
        self.log_level = level


__all__ = ["LOG_LEVELS", "OptibrevSettings", "Settings"]
