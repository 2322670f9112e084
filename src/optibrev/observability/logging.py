"""Observability – structlog configuration and get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from optibrev.config import EnvSettingsLoader, OptibrevSettings


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


class JsonLoggerFactory:
    """Configure structlog on top of the stdlib root logger."""

    @staticmethod
    def configure(level: int = logging.INFO, json: bool = True) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


def configure_logging(settings: OptibrevSettings | None = None) -> OptibrevSettings:
    """Configure logging from *settings*, loading them from the environment if omitted."""
    if settings is None:
        settings = EnvSettingsLoader().load(OptibrevSettings)
    JsonLoggerFactory.configure(
        level=logging.getLevelName(settings.log_level),
        json=settings.json_logs,
    )
    get_logger(__name__).debug(
        "logging.configured", log_level=settings.log_level, json_logs=settings.json_logs
    )
    return settings


__all__ = ["JsonLoggerFactory", "configure_logging", "get_logger"]
