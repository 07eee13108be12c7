"""Enumerations for the ULID function.

This module defines the invocation lifecycle states.
"""

from enum import Enum


class UdfState(str, Enum):
    """Invocation lifecycle states.

    An invocation starts UNINITIALIZED and moves to READY once
    initialization succeeds. READY is terminal; a new query creates a
    new invocation.

    Example:
        >>> UdfState.READY.is_terminal()
        True
    """

    UNINITIALIZED = "uninitialized"
    READY = "ready"

    def is_terminal(self) -> bool:
        """Check if this state represents the terminal state."""
        return self is UdfState.READY
