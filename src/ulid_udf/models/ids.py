"""ULID generation and encoding for the ULID function.

ULIDs (Universally Unique Lexicographically Sortable Identifiers) provide:
- A 48-bit big-endian millisecond timestamp followed by 80 random bits
- Lexicographic sorting by timestamp when timestamps differ (millisecond precision)
- Canonical encoding as a 26-character string (Crockford's Base32)

Note: Order is guaranteed only across different milliseconds. Two ULIDs seeded
with the same millisecond share the timestamp prefix; their order is then
decided by the random component.

Identifiers are assembled from raw bytes rather than through python-ulid's
process-wide generator, so every identifier carries 80 bits drawn from
``os.urandom`` and no call depends on a previous one.
"""

from __future__ import annotations

import os
import time
from datetime import datetime

from ulid import ULID

from ulid_udf.errors import InvalidIdentifierError
from ulid_udf.models.constants import (
    CROCKFORD_ALPHABET,
    RANDOMNESS_BITS,
    TIMESTAMP_BITS,
    ULID_LENGTH,
)
from ulid_udf.models.instant import NowInstant, ParsedInstant, ResolvedInstant

_ALPHABET = frozenset(CROCKFORD_ALPHABET)

_TIMESTAMP_BYTES = TIMESTAMP_BITS // 8
_RANDOMNESS_BYTES = RANDOMNESS_BITS // 8

# 26 symbols carry 130 bits; a leading symbol above "7" would overflow 128 bits.
_MAX_LEADING_SYMBOL = "7"


def _from_milliseconds(milliseconds: int) -> ULID:
    return ULID.from_bytes(
        milliseconds.to_bytes(_TIMESTAMP_BYTES, "big") + os.urandom(_RANDOMNESS_BYTES)
    )


def generate(instant: ResolvedInstant) -> ULID:
    """Build a ULID whose timestamp field comes from ``instant``.

    ``NowInstant`` samples the clock exactly once, here. ``ParsedInstant``
    uses its stored milliseconds unchanged. The 80 random bits are drawn
    fresh for every call, independently of any other identifier.

    Args:
        instant: Resolved instant seeding the timestamp field

    Returns:
        A new ULID

    Example:
        >>> generate(ParsedInstant(milliseconds=0)).milliseconds
        0
    """
    if isinstance(instant, ParsedInstant):
        return _from_milliseconds(instant.milliseconds)
    if isinstance(instant, NowInstant):
        return _from_milliseconds(time.time_ns() // 1_000_000)
    raise TypeError(f"Unsupported instant: {instant!r}")


def encode(identifier: ULID) -> str:
    """Render a ULID as its 26-character uppercase string."""
    return str(identifier)


def decode(value: str) -> ULID:
    """Parse a 26-character ULID string (case-insensitive).

    Args:
        value: Encoded ULID

    Returns:
        The decoded ULID

    Raises:
        InvalidIdentifierError: If the length, symbols, or range are invalid

    Example:
        >>> encode(decode("01arz3ndektsv4rrffq69g5fav"))
        '01ARZ3NDEKTSV4RRFFQ69G5FAV'
    """
    if len(value) != ULID_LENGTH:
        raise InvalidIdentifierError(
            value, f"expected {ULID_LENGTH} characters, got {len(value)}"
        )
    normalized = value.upper()
    invalid = sorted(set(normalized) - _ALPHABET)
    if invalid:
        raise InvalidIdentifierError(value, f"invalid symbols {''.join(invalid)!r}")
    if normalized[0] > _MAX_LEADING_SYMBOL:
        raise InvalidIdentifierError(value, "value exceeds 128 bits")
    return ULID.from_str(normalized)


def generate_id() -> str:
    """Generate a new ULID string from the current time.

    Returns:
        A 26-character ULID string

    Example:
        >>> len(generate_id())
        26
    """
    return encode(generate(NowInstant()))


def extract_timestamp(ulid: str) -> datetime:
    """Extract the timestamp from a ULID string.

    Args:
        ulid: A 26-character ULID string

    Returns:
        A timezone-aware datetime in UTC for the identifier's timestamp field

    Raises:
        InvalidIdentifierError: If the ULID string is invalid
    """
    return decode(ulid).datetime


def extract_milliseconds(ulid: str) -> int:
    """Extract the raw 48-bit millisecond timestamp from a ULID string."""
    return decode(ulid).milliseconds
