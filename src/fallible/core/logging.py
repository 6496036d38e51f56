"""
Structured logging for code built on fallible.

The containers never log on their own: an ``Err`` is a value, and whether it
deserves a log line is the caller's call. This module gives callers the
pieces to make that call cheaply, using structlog the same way everywhere:

- :func:`configure_logging` sets up the processor chain (JSON for log
  aggregation, colored console for development).
- :func:`get_logger` returns a bound structlog logger.
- :func:`log_ok` and :func:`log_err` build callbacks for ``inspect`` /
  ``inspect_err`` so a pipeline can log as values pass through it.

Architecture:
    ::

        configure_logging(level="INFO", json_format=True)
            │
            ▼
        structlog processor chain:
          1. TimeStamper (iso)
          2. merge_contextvars
          3. add_log_level / add_logger_name
          4. add_service_metadata
          5. JSONRenderer (or ConsoleRenderer for dev)

        fetch_user(uid)
            .inspect(log_ok("user_fetched", uid=uid))
            .inspect_err(log_err("user_fetch_failed", uid=uid))

Examples:
    >>> from fallible import Err
    >>> from fallible.core.logging import configure_logging, log_err
    >>> configure_logging(level="INFO", json_format=True)
    >>> Err("timeout").inspect_err(log_err("fetch_failed", source="api"))  # doctest: +SKIP
    {"error": "timeout", "source": "api", "event": "fetch_failed", ...}
    Err('timeout')

Tags:
    logging, structlog, observability, inspect-hooks, fallible
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from fallible.core.settings import get_settings


# Store service name for metadata
_SERVICE_NAME = "fallible"


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service.name", _SERVICE_NAME)
    return event_dict


def configure_logging(
    level: str | None = None,
    json_format: bool | None = None,
    service: str | None = None,
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to
            ``FALLIBLE_LOG_LEVEL``.
        json_format: True for JSON, False for console, None for
            ``FALLIBLE_LOG_JSON`` (auto-detect when that is unset too).
        service: Service name to include in logs. Defaults to
            ``FALLIBLE_SERVICE``.
        add_timestamp: Include ISO timestamp in logs
    """
    global _SERVICE_NAME
    settings = get_settings()

    level = (level or settings.log_level).upper()
    _SERVICE_NAME = service or settings.service

    if json_format is None:
        json_format = settings.log_json
    if json_format is None:
        json_format = not sys.stdout.isatty()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _add_service_metadata,
    ]

    if add_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer(default=repr))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level)),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level),
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__)
    """
    return structlog.get_logger(name)


def _emit(
    event: str,
    key: str,
    level: str,
    logger: Any,
    fields: dict[str, Any],
) -> Callable[[Any], None]:
    method_name = level.lower()

    def hook(payload: Any) -> None:
        target = logger if logger is not None else get_logger("fallible")
        getattr(target, method_name)(event, **{key: payload}, **fields)

    return hook


def log_ok(
    event: str,
    *,
    level: str = "info",
    logger: Any = None,
    **fields: Any,
) -> Callable[[Any], None]:
    """Build an ``inspect`` hook that logs the success/present value.

    The value is logged under ``value=``; ``fields`` are added verbatim.
    """
    return _emit(event, "value", level, logger, fields)


def log_err(
    event: str,
    *,
    level: str = "warning",
    logger: Any = None,
    **fields: Any,
) -> Callable[[Any], None]:
    """Build an ``inspect_err`` hook that logs the error value under ``error=``."""
    return _emit(event, "error", level, logger, fields)


__all__ = [
    "configure_logging",
    "get_logger",
    "log_ok",
    "log_err",
]
