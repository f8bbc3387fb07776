"""Structured logging configuration for camper-sheet.

Uses structlog for context-rich logging. Events are routed through the
standard library so a single root configuration can fan them out to
stdout (console or JSON lines) and, optionally, a JSON log file.

Example:
    >>> from camper_sheet.core.logging import configure_logging_from_settings, get_logger
    >>> configure_logging_from_settings()
    >>> logger = get_logger(__name__)
    >>> logger.info("Skill trees loaded", trees=4)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger

    from camper_sheet.core.config import Settings


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
    event_dict["app"] = "camper_sheet"
    return event_dict


def _build_handler(
    handler: logging.Handler,
    renderer: Processor,
    shared_processors: list[Processor],
) -> logging.Handler:
    """Attach a structlog ProcessorFormatter with the given renderer."""
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def configure_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | Path | None = None,
) -> None:
    """Configure application-wide logging.

    Replaces any handlers on the root logger. The log file, when given,
    always receives JSON lines regardless of ``json_format``.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, render stdout as JSON lines.
        log_file: Optional path to a log file for persistent logging.

    Example:
        >>> configure_logging(level="DEBUG", log_file="camper.log")
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    console_renderer: Processor
    if json_format:
        console_renderer = structlog.processors.JSONRenderer()
    else:
        console_renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )

    handlers = [
        _build_handler(logging.StreamHandler(sys.stdout), console_renderer, shared_processors),
    ]
    if log_file:
        handlers.append(
            _build_handler(
                logging.FileHandler(log_file, encoding="utf-8"),
                structlog.processors.JSONRenderer(),
                shared_processors,
            )
        )

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
        existing.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(numeric_level)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from_settings(settings: Settings | None = None) -> None:
    """Configure logging from application settings.

    Debug mode forces the DEBUG level.

    Args:
        settings: Settings to apply; defaults to ``get_settings()``.
    """
    if settings is None:
        from camper_sheet.core.config import get_settings

        settings = get_settings()

    configure_logging(
        level="DEBUG" if settings.debug else settings.log_level,
        json_format=settings.json_logs,
        log_file=settings.log_file,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a configured logger instance.

    Args:
        name: Optional name for the logger (typically __name__).

    Returns:
        A configured structlog BoundLogger instance.
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables included in all subsequent logs.

    Example:
        >>> bind_context(character_id="abc123")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


__all__ = [
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
