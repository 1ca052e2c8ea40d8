"""
Structured logging for medialib.

Thin configuration layer over structlog. Every module obtains its logger
with ``get_logger(__name__)`` and logs snake_case events with key/value
fields::

    logger = get_logger(__name__)
    logger.info("database_attached", database="CLDB", path="/data/CLDB2.db")

Output is JSON when stdout is not a terminal (log aggregation) and a
colored console rendering otherwise. ``MEDIALIB_LOG_JSON`` or
``configure_logging(json_format=...)`` forces either.

Features:
    - ``configure_logging()``: one-time processor-chain setup
    - ``get_logger()``: cached structlog logger
    - ``bind_context()`` / ``LogContext``: contextvars propagation
      (e.g. bind ``backend="postgres"`` for the lifetime of a session)

Tags:
    logging, structlog, observability, medialib
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from medialib.core.settings import MediaLibSettings, get_settings

_SERVICE_NAME = "medialib"


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service", _SERVICE_NAME)
    return event_dict


def configure_logging(
    level: str | None = None,
    json_format: bool | None = None,
    service: str = "medialib",
    add_timestamp: bool = True,
    settings: MediaLibSettings | None = None,
) -> None:
    """Configure structured logging for the application.

    Arguments left as None are taken from ``MEDIALIB_LOG_LEVEL`` and
    ``MEDIALIB_LOG_JSON`` (via ``settings`` or ``get_settings()``).

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
        service: Service name to include in logs
        add_timestamp: Include ISO timestamp in logs
        settings: Settings to read defaults from
    """
    global _SERVICE_NAME
    _SERVICE_NAME = service

    if level is None or json_format is None:
        settings = settings or get_settings()
        level = level or settings.log_level
        if json_format is None:
            json_format = settings.log_json

    if json_format is None:
        json_format = not sys.stdout.isatty()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _add_service_metadata,
    ]

    if add_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # structlog hands rendered lines to stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger (usually ``get_logger(__name__)``)."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context to include in all subsequent logs."""
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove specific keys from logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound context."""
    structlog.contextvars.clear_contextvars()


class LogContext:
    """Context manager for scoped logging context.

    Example:
        async with LogContext(backend="cyberlink"):
            await session.init()
    """

    def __init__(self, **kwargs: Any):
        self._context = kwargs

    def __enter__(self) -> LogContext:
        bind_context(**self._context)
        return self

    def __exit__(self, *args: Any) -> None:
        unbind_context(*self._context.keys())

    async def __aenter__(self) -> LogContext:
        bind_context(**self._context)
        return self

    async def __aexit__(self, *args: Any) -> None:
        unbind_context(*self._context.keys())


__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
    "LogContext",
]
