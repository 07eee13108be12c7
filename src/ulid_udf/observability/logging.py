"""Structured logging configuration for the ULID function.

This module configures structlog for structured logging with support for
both development (console) and production (JSON) output formats.

Logs are written to stderr so that stdout carries only function results.
Only the CLI installs handlers; importing the package leaves the root
logger as the host configured it.

Environment Variables:
    ULID_UDF_LOG_FORMAT: Set to "json" for JSON output, "console" for colored output
    ULID_UDF_LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR)
    ULID_UDF_SERVICE_NAME: Service name to include in logs

Example:
    >>> from ulid_udf.observability.logging import get_logger, configure_logging
    >>>
    >>> configure_logging(log_format="json", log_level="INFO")
    >>> logger = get_logger("ulid_udf.udf")
    >>> logger.info("udf.init.succeeded", instant="now")
"""

import logging
import os
import sys
from typing import Any

import structlog
from structlog.typing import Processor

# Default configuration
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "console"
DEFAULT_SERVICE_NAME = "ulid-udf"

# Environment variable names
ENV_LOG_FORMAT = "ULID_UDF_LOG_FORMAT"
ENV_LOG_LEVEL = "ULID_UDF_LOG_LEVEL"
ENV_SERVICE_NAME = "ULID_UDF_SERVICE_NAME"

_VALID_FORMATS = frozenset({"json", "console"})

# Module-level flag to track if logging has been configured
_logging_configured = False


def _get_log_level() -> str:
    """Get log level from environment or use default."""
    return os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()


def _get_log_format() -> str:
    """Get log format from environment or use default."""
    return os.environ.get(ENV_LOG_FORMAT, DEFAULT_LOG_FORMAT).lower()


def _get_service_name() -> str:
    """Get service name from environment or use default."""
    return os.environ.get(ENV_SERVICE_NAME, DEFAULT_SERVICE_NAME)


def _get_shared_processors() -> list[Processor]:
    """Get shared processors for all log formats."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _get_renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stderr.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def _configure_structlog() -> None:
    """Route structlog events into stdlib logging without touching its handlers."""
    structlog.configure(
        processors=[
            *_get_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(
    log_format: str | None = None,
    log_level: str | None = None,
    service_name: str | None = None,
    force: bool = False,
) -> None:
    """Configure structured logging for the command-line entry point.

    Installs a single stderr handler on the root logger and sets its level.
    Library code never calls this; a host embedding the function keeps its
    own logging setup.

    Args:
        log_format: Output format - "json" or "console". Defaults to env var or "console"
        log_level: Minimum log level. Defaults to env var or "WARNING"
        service_name: Service name for log context. Defaults to env var or "ulid-udf"
        force: If True, reconfigure even if already configured

    Raises:
        ValueError: If the format or level is not recognised
    """
    global _logging_configured

    if _logging_configured and not force:
        return

    log_format = (log_format or _get_log_format()).lower()
    log_level = (log_level or _get_log_level()).upper()
    service_name = service_name or _get_service_name()

    if log_format not in _VALID_FORMATS:
        raise ValueError(f"Unknown log format: {log_format}")
    level = logging.getLevelName(log_level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    shared_processors = _get_shared_processors()
    _configure_structlog()

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(log_format),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    structlog.contextvars.bind_contextvars(service=service_name)

    _logging_configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for the given name.

    Events are routed through stdlib ``logging``, so the host's handlers and
    levels decide what is emitted. Handlers are only installed by
    ``configure_logging``.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Bound structlog logger
    """
    if not structlog.is_configured():
        _configure_structlog()

    return structlog.stdlib.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables that will be included in all subsequent logs.

    Example:
        >>> bind_context(query_id="q_123")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
