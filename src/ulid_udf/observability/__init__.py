"""Observability helpers for the ULID function (structured logging)."""

from ulid_udf.observability.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
]
