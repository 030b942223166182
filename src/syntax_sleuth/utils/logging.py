"""Structured logging for syntax-sleuth.

Library modules log through ``get_logger(__name__)``, which binds a
structlog logger to the stdlib logger of the same name. Nothing is
printed until the host application configures logging; the CLI does
that with ``configure_logging``, which renders every entry to stderr
(and optionally a file) so reports on stdout stay clean.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from enum import StrEnum
from pathlib import Path
from typing import Any

import structlog

PACKAGE_LOGGER = "syntax_sleuth"


class LogFormat(StrEnum):
    """Log output format options."""

    JSON = "json"
    CONSOLE = "console"


class LogLevel(StrEnum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def add_context_processor(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Stamp every entry with the service name and version."""
    from syntax_sleuth._version import __version__

    event_dict["service"] = "syntax-sleuth"
    event_dict["version"] = __version__
    return event_dict


def _build_processors(log_format: LogFormat) -> list[Any]:
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        add_context_processor,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if log_format == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(), exception_formatter=structlog.dev.plain_traceback
            )
        )
    return processors


def _build_handlers(level: int, file_path: Path | str | None) -> list[logging.Handler]:
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    handlers: list[logging.Handler] = [console]

    if file_path is None:
        return handlers

    path = Path(file_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path)
    except OSError as e:
        logging.getLogger(PACKAGE_LOGGER).warning("Could not open log file %s: %s", path, e)
        return handlers
    file_handler.setLevel(level)
    handlers.append(file_handler)
    return handlers


def configure_logging(
    level: LogLevel | str = LogLevel.WARNING,
    log_format: LogFormat | str = LogFormat.CONSOLE,
    file_path: Path | str | None = None,
    file_enabled: bool = False,
) -> None:
    """Route structured log entries to stderr and, optionally, a file.

    Args:
        level: Minimum level to emit (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Renderer for each entry (json or console)
        file_path: Log file, used only when ``file_enabled`` is set
        file_enabled: Whether to also write to ``file_path``

    Example:
        # Watch the block search work
        configure_logging(level="DEBUG")

        # One JSON object per line for log aggregation
        configure_logging(level="INFO", log_format="json")
    """
    level = LogLevel(level.upper())
    log_format = LogFormat(log_format.lower())
    numeric_level = logging.getLevelName(level.value)

    structlog.configure(
        processors=_build_processors(log_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        handlers=_build_handlers(numeric_level, file_path if file_enabled else None),
        force=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Structured logger writing to the stdlib logger ``name``.

    Entries follow the stdlib logger's level and handlers, so an
    unconfigured host sees only warnings and errors, on stderr.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


def bind_context(**kwargs: Any) -> None:
    """Attach key-value pairs to every following entry in this context.

    Example:
        bind_context(file="app/models/dog.rb")
        log.info("search_started")  # Includes file
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop everything attached with bind_context."""
    structlog.contextvars.clear_contextvars()


class LogEventNames:
    """Event names shared by the package's log entries."""

    # Source loading
    SOURCE_LOADING = "source_loading"
    SOURCE_LOADED = "source_loaded"
    SOURCE_READ_ERROR = "source_read_error"

    # Block search
    SEARCH_STARTED = "search_started"
    SEARCH_COMPLETE = "search_complete"
    SEARCH_EXHAUSTED = "search_exhausted"
    BLOCK_GROUP_UNRESOLVED = "block_group_unresolved"

    # Context capture
    CONTEXT_CAPTURED = "context_captured"

    # Outcome
    SYNTAX_OK = "syntax_ok"
    SYNTAX_ERROR_FOUND = "syntax_error_found"

    # Configuration
    CONFIGURATION_LOADED = "configuration_loaded"
    CONFIGURATION_INVALID = "configuration_invalid"
