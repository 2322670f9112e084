"""Config – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Callable, TypeVar

from optibrev.config.settings import Settings
from optibrev.errors import ConfigError, MissingRequiredSettingError

S = TypeVar("S", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _to_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUTHY


def _to_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


# keyed by the annotation's name; annotations arrive as strings under PEP 563
_COERCERS: dict[str, Callable[[str], Any]] = {
    "bool": _to_bool,
    "int": int,
    "float": float,
    "list": _to_list,
}


class SettingsLoader(abc.ABC):
    """Port: build a :class:`Settings` instance from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[S]) -> S: ...


class EnvSettingsLoader(SettingsLoader):
    """Read each dataclass field from ``<PREFIX>_<FIELD>`` in ``os.environ``."""

    def load(self, settings_class: type[S]) -> S:
        prefix = settings_class._prefix.upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = os.environ.get(env_key)
            if raw is not None:
                kwargs[field.name] = self._coerce(raw, field.type)
            elif (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING
            ):
                raise MissingRequiredSettingError(env_key)

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def _coerce(raw: str, type_hint: Any) -> Any:
        if isinstance(type_hint, str):
            name = type_hint.split("[", 1)[0]
        else:
            name = getattr(getattr(type_hint, "__origin__", type_hint), "__name__", "")
        coerce = _COERCERS.get(name)
        return coerce(raw) if coerce is not None else raw


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into ``os.environ`` then defer to :class:`EnvSettingsLoader`."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[S]) -> S:
        try:
            from dotenv import load_dotenv
        except ImportError as exc:
            raise ImportError("Install 'optibrev[dotenv]' to use DotenvSettingsLoader") from exc
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
