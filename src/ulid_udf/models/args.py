"""Call-site arguments for the ULID function.

A single argument is one of three shapes:

- ``AbsentArg``: no argument at that position;
- ``NullArg``: the argument was given but its value is SQL NULL;
- ``ValueArg``: the argument carries a text payload.

``InvocationArguments`` holds the arguments in call order, so its length is
the arity seen at the call site.

Example:
    >>> args = InvocationArguments.from_values("1983-04-13 12:09:14.274")
    >>> len(args)
    1
    >>> args.first().kind
    'value'
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, Field, TypeAdapter

from ulid_udf.models.base import UdfBaseModel


class AbsentArg(UdfBaseModel):
    """No argument at this position."""

    kind: Literal["absent"] = "absent"


class NullArg(UdfBaseModel):
    """Argument present, value NULL. Treated exactly like an absent argument."""

    kind: Literal["null"] = "null"


class ValueArg(UdfBaseModel):
    """Argument present with a text payload.

    Attributes:
        kind: Discriminator field, always "value"
        value: The text passed by the caller
    """

    kind: Literal["value"] = "value"
    value: str = Field(..., description="Text payload")


ArgumentType = Annotated[Union[AbsentArg, NullArg, ValueArg], Discriminator("kind")]

Argument: TypeAdapter[ArgumentType] = TypeAdapter(ArgumentType)
"""TypeAdapter for the Argument discriminated union.

Example:
    >>> Argument.validate_python({"kind": "null"})
    NullArg(kind='null')
"""


def coerce_argument(value: Any) -> NullArg | ValueArg:
    """Convert a raw host value into an argument.

    ``None`` becomes NULL, ``bytes`` are decoded as UTF-8 (invalid sequences
    replaced), strings are kept, any other scalar is rendered with ``str()``.
    """
    if value is None:
        return NullArg()
    if isinstance(value, (bytes, bytearray, memoryview)):
        return ValueArg(value=bytes(value).decode("utf-8", errors="replace"))
    if isinstance(value, str):
        return ValueArg(value=value)
    return ValueArg(value=str(value))


class InvocationArguments(UdfBaseModel):
    """Arguments supplied at one call site, in call order."""

    values: tuple[ArgumentType, ...] = Field(default=(), description="Arguments in call order")

    @classmethod
    def from_values(cls, *values: Any) -> InvocationArguments:
        """Build arguments from raw host values (see ``coerce_argument``)."""
        return cls(values=tuple(coerce_argument(v) for v in values))

    def __len__(self) -> int:
        return len(self.values)

    def first(self) -> ArgumentType:
        """Return the first argument, or ``AbsentArg`` when none was given."""
        if not self.values:
            return AbsentArg()
        return self.values[0]
