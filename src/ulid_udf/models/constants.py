"""Constants for the ULID function.

This module defines the identifier layout and the host-facing metadata.
"""

# Registered function name
FUNCTION_NAME = "ulid"

# Identifier layout
TIMESTAMP_BITS = 48
RANDOMNESS_BITS = 80
ULID_BITS = TIMESTAMP_BITS + RANDOMNESS_BITS

ULID_LENGTH = 26
"""Length of the encoded identifier. Declared to the host as the fixed max length."""

CROCKFORD_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
"""Crockford base32 symbols in radix order (no I, L, O, U)."""

MIN_TIMESTAMP_MS = 0
MAX_TIMESTAMP_MS = (1 << TIMESTAMP_BITS) - 1
"""Largest millisecond timestamp representable in 48 bits (year 10889)."""

# Arity accepted at the call site
MAX_ARGUMENTS = 1
