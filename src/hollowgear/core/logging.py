"""structlog setup for the Hollow Gear engine.

Nothing here runs on import. Engine modules only ever call
:func:`get_logger`; an application embedding the engine calls
:func:`configure_logging` once. Without arguments it follows
``HOLLOWGEAR_LOG_LEVEL`` and ``HOLLOWGEAR_JSON_LOGS``.

Example:
    >>> from hollowgear.core.logging import character_context, get_logger
    >>> logger = get_logger(__name__)
    >>> with character_context("pc-1", class_name="mindweaver"):
    ...     logger.info("Level gained", from_level=3, to_level=4)
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor

from hollowgear.core.config import get_settings


if TYPE_CHECKING:
    from collections.abc import Iterator

    from structlog.types import EventDict, WrappedLogger


APP_NAME = "hollowgear"

_STDLIB_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """structlog processor adding ``app="hollowgear"``."""
    event_dict["app"] = APP_NAME
    return event_dict


def _processors(json_format: bool) -> list[Processor]:
    shared: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if json_format:
        return [*shared, structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [
        *shared,
        structlog.dev.ConsoleRenderer(
            colors=sys.stdout.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        ),
    ]


def configure_logging(
    *,
    level: str | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
) -> None:
    """Route engine log events to stdout and, optionally, a file.

    Args:
        level: Minimum level name. Defaults to ``Settings.log_level``.
        json_format: JSON lines instead of console output. Defaults to
            ``Settings.json_logs``.
        log_file: Extra destination for standard library records.
    """
    if level is None or json_format is None:
        settings = get_settings()
        level = level or settings.log_level
        json_format = settings.json_logs if json_format is None else json_format

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=_processors(json_format),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        format=_STDLIB_FORMAT,
        level=numeric_level,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Attach key/values to every later log event in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


@contextmanager
def character_context(character_id: str, **extra: Any) -> Iterator[None]:
    """Tag log events emitted inside the block with ``character_id``.

    Keys bound here are removed again on exit; anything bound before the
    block is left alone.
    """
    with structlog.contextvars.bound_contextvars(character_id=character_id, **extra):
        yield


__all__ = [
    "APP_NAME",
    "add_app_context",
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "character_context",
]
