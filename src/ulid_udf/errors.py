"""ULID UDF Error Taxonomy.

This module defines the error hierarchy for the ULID function,
providing structured error handling with specific error codes
and context information.

Only two errors reach the host as user-facing messages
(``WrongArityError`` and ``UnparseableDateError``). The others report
decode failures or violations of the host calling convention.
"""
from __future__ import annotations

from typing import Any

WRONG_ARITY_MESSAGE = "expected 0 or 1 argument; got {got}"
UNPARSEABLE_DATE_MESSAGE = "unable to parse date format"


class UlidUdfError(Exception):
    """Base exception for all ULID function errors.

    Attributes:
        code: Error code following the ulid:<area>/<name> pattern
        message: Human-readable error message
        details: Optional additional error context
    """

    def __init__(self, code: str, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to ``{code, message, details}`` dict."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class WrongArityError(UlidUdfError):
    """Raised when the function is called with more than one argument.

    The count is checked before any argument is inspected.

    Attributes:
        got: Number of arguments actually received
    """

    def __init__(self, got: int, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="ulid:init/wrong_arity",
            message=WRONG_ARITY_MESSAGE.format(got=got),
            details={"got": got, **(details or {})},
        )
        self.got = got


class UnparseableDateError(UlidUdfError):
    """Raised when a non-null argument cannot be interpreted as a date.

    There is no recovery: the caller must fix the input or omit it.
    """

    def __init__(self, value: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="ulid:init/unparseable_date",
            message=UNPARSEABLE_DATE_MESSAGE,
            details={"value": value, **(details or {})},
        )
        self.value = value


class InvalidIdentifierError(UlidUdfError):
    """Raised when a string cannot be decoded as a ULID."""

    def __init__(self, value: str, reason: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="ulid:decode/invalid_identifier",
            message=f"Invalid ULID: {reason}",
            details={"value": value, "reason": reason, **(details or {})},
        )
        self.value = value
        self.reason = reason


class InvalidStateError(UlidUdfError):
    """Raised when the host drives an invocation out of order.

    Examples are producing a value before initialization succeeded, or
    initializing an invocation that is already ready.

    Attributes:
        state: Current invocation state
        action: The attempted action
    """

    def __init__(self, state: str, action: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="ulid:host/invalid_state",
            message=f"Cannot {action} in state '{state}'",
            details={"state": state, "action": action, **(details or {})},
        )
        self.state = state
        self.action = action


class UnknownFunctionError(UlidUdfError):
    """Raised when looking up a function name that is not registered."""

    def __init__(self, name: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="ulid:host/unknown_function",
            message=f"Unknown function: {name}",
            details={"name": name, **(details or {})},
        )
        self.name = name
