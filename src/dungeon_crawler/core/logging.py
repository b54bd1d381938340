"""Structured logging configuration for the dungeon crawler.

Logging goes through structlog, routed into the standard library so the
same events reach every attached handler. Log lines are written to stderr
so they never interleave with the frames the terminal collaborator draws
on stdout, and optionally to a log file as well.

Example:
    >>> from dungeon_crawler.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Player leveled up", player="Hero", level=2)
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from pathlib import Path

    from structlog.types import EventDict, WrappedLogger


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add application context to log entries.

    Args:
        logger: The wrapped logger instance.
        method_name: Name of the logging method called.
        event_dict: The event dictionary to modify.

    Returns:
        The modified event dictionary with app context.
    """
    event_dict["app"] = "dungeon_crawler"
    return event_dict


def _handler_formatter(
    renderer: Processor,
    shared_processors: list[Processor],
    *,
    json_format: bool,
) -> structlog.stdlib.ProcessorFormatter:
    """Build a stdlib formatter that renders structlog events."""
    render_chain: list[Processor] = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
    if json_format:
        render_chain.append(structlog.processors.format_exc_info)
    render_chain.append(renderer)
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=render_chain,
    )


def configure_logging(
    *,
    level: str = "WARNING",
    json_format: bool = False,
    log_file: str | Path | None = None,
) -> None:
    """Configure application-wide logging.

    structlog hands finished events to standard library loggers; the root
    logger's handlers render them, one for stderr and one for the log file
    when given. Calling this again replaces the previous handlers.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, output logs in JSON format.
        log_file: Optional path to a log file for persistent logging.

    Example:
        >>> configure_logging(level="DEBUG", json_format=False)
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if json_format:
        console_renderer: Processor = structlog.processors.JSONRenderer()
    else:
        console_renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        )

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(
        _handler_formatter(console_renderer, shared_processors, json_format=json_format)
    )
    handlers: list[logging.Handler] = [stderr_handler]

    if log_file:
        file_renderer: Processor = (
            structlog.processors.JSONRenderer()
            if json_format
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            _handler_formatter(file_renderer, shared_processors, json_format=json_format)
        )
        handlers.append(file_handler)

    # force closes handlers left over from an earlier call
    logging.basicConfig(level=numeric_level, handlers=handlers, force=True)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance.

    Args:
        name: Optional name for the logger (typically __name__).

    Returns:
        A configured structlog BoundLogger instance.
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables that will be included in all subsequent logs.

    Args:
        **kwargs: Key-value pairs to bind to the logging context.

    Example:
        >>> bind_context(run_id="abc123")
        >>> logger.info("Run started")  # Will include run_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables.

    Called when a run ends so its context does not leak into the menu.
    """
    structlog.contextvars.clear_contextvars()


__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
