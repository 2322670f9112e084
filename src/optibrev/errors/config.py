"""Settings errors raised while loading ``OptibrevSettings``."""
from __future__ import annotations

from collections.abc import Iterable

from optibrev.errors.base import OptibrevError


class ConfigError(OptibrevError):
    """Settings could not be loaded."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """An environment variable backing a field without default is unset."""
    default_code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(f"Environment variable '{env_key}' is required")
        self.env_key = env_key


class InvalidSettingValueError(ConfigError):
    """A setting holds a value outside its allowed set."""
    default_code = "invalid_setting_value"

    def __init__(self, field_name: str, value: object, allowed: Iterable[str]) -> None:
        self.field_name = field_name
        self.value = value
        self.allowed = tuple(sorted(allowed))
        super().__init__(
            f"'{field_name}' must be one of {', '.join(self.allowed)}; got {value!r}"
        )


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
