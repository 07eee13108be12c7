"""Resolved instants used to seed identifier generation.

``NowInstant`` defers to the wall clock at generation time; ``ParsedInstant``
carries a fixed millisecond timestamp derived from caller input.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Annotated, Literal, Union

from pydantic import Discriminator, Field

from ulid_udf.models.base import UdfBaseModel
from ulid_udf.models.constants import MAX_TIMESTAMP_MS, MIN_TIMESTAMP_MS

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def to_milliseconds(value: datetime) -> int:
    """Convert an aware datetime to Unix milliseconds.

    Sub-millisecond parts are truncated, never rounded. The result is
    clamped to the 48-bit timestamp range, so instants before 1970 map to 0.

    Args:
        value: Timezone-aware datetime

    Returns:
        Milliseconds since the Unix epoch

    Example:
        >>> to_milliseconds(datetime(1970, 1, 1, 0, 0, 1, 999, tzinfo=timezone.utc))
        1000
    """
    milliseconds = (value - EPOCH) // _ONE_MILLISECOND
    return max(MIN_TIMESTAMP_MS, min(MAX_TIMESTAMP_MS, milliseconds))


class NowInstant(UdfBaseModel):
    """The current wall-clock time, sampled once when the identifier is built."""

    kind: Literal["now"] = "now"


class ParsedInstant(UdfBaseModel):
    """An instant parsed from caller input.

    Attributes:
        kind: Discriminator field, always "parsed"
        milliseconds: Unix milliseconds, within the 48-bit range
        source: The text the instant was parsed from
    """

    kind: Literal["parsed"] = "parsed"
    milliseconds: int = Field(..., ge=MIN_TIMESTAMP_MS, le=MAX_TIMESTAMP_MS)
    source: str = Field(default="", description="Original caller text")

    @classmethod
    def from_datetime(cls, value: datetime, source: str = "") -> ParsedInstant:
        return cls(milliseconds=to_milliseconds(value), source=source)

    def to_datetime(self) -> datetime:
        """Return the instant as a UTC datetime (millisecond precision)."""
        return EPOCH + timedelta(milliseconds=self.milliseconds)


ResolvedInstant = Annotated[Union[NowInstant, ParsedInstant], Discriminator("kind")]
