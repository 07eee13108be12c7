"""Configuration for the ULID function.

``ParserOptions`` tunes the best-effort date parser. ``UdfCfg`` carries the
metadata the function declares to its host during initialization.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo

from dateutil import tz
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParserOptions(BaseModel):
    """Options passed to the date parser.

    Naive results (no offset in the input) are interpreted in
    ``default_timezone``; UTC matches the behaviour most hosts expect.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    dayfirst: bool = Field(default=False, description="Read 01/02/2003 as 1 Feb 2003")
    yearfirst: bool = Field(default=False, description="Read 01/02/03 as 2001-02-03")
    default_timezone: str = Field(
        default="UTC", description="IANA zone applied to inputs without an offset"
    )

    @field_validator("default_timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        if tz.gettz(value) is None:
            raise ValueError(f"Unknown timezone: {value}")
        return value

    def zone(self) -> tzinfo:
        """Return the tzinfo for ``default_timezone`` (validated at construction)."""
        return tz.gettz(self.default_timezone)


DEFAULT_PARSER_OPTIONS = ParserOptions()


@dataclass
class UdfCfg:
    """Return-value metadata a function declares to the host.

    Attributes:
        max_len: Maximum length of the returned text (None = unspecified)
        maybe_null: Whether the function may return NULL
        is_const: Whether the host may fold the result across rows
    """

    max_len: int | None = None
    maybe_null: bool = True
    is_const: bool = False

    def set_max_len(self, value: int) -> None:
        self.max_len = value

    def set_maybe_null(self, value: bool) -> None:
        self.maybe_null = value

    def set_is_const(self, value: bool) -> None:
        self.is_const = value
