"""Timestamp resolution for the ULID function.

Turns the call-site arguments into the single instant that seeds the
identifier's timestamp field:

- no argument, or a NULL argument: the current time;
- one text argument: the instant parsed from it;
- more than one argument: ``WrongArityError``.

Date interpretation is delegated to ``dateutil.parser``, a best-effort parser
that accepts ISO 8601, RFC 2822 and most common human-readable layouts.

Example:
    >>> from ulid_udf.models import InvocationArguments
    >>> resolve(InvocationArguments.from_values("1983-04-13 12:09:14.274")).milliseconds
    419083754274
"""

from __future__ import annotations

from datetime import datetime, timezone

from dateutil import parser as date_parser

from ulid_udf.config import DEFAULT_PARSER_OPTIONS, ParserOptions
from ulid_udf.errors import UnparseableDateError, WrongArityError
from ulid_udf.models.args import AbsentArg, InvocationArguments, NullArg, ValueArg
from ulid_udf.models.constants import MAX_ARGUMENTS
from ulid_udf.models.instant import NowInstant, ParsedInstant, ResolvedInstant
from ulid_udf.observability.logging import get_logger

logger = get_logger(__name__)

__all__ = ["parse_date", "resolve"]


def parse_date(text: str, options: ParserOptions | None = None) -> datetime | None:
    """Interpret ``text`` as a calendar date/time.

    Args:
        text: Caller-supplied date string
        options: Parser options (defaults to UTC, month-first)

    Returns:
        A timezone-aware UTC datetime, or None when the text has no
        date interpretation
    """
    options = options or DEFAULT_PARSER_OPTIONS
    if not text.strip():
        return None
    try:
        parsed = date_parser.parse(text, dayfirst=options.dayfirst, yearfirst=options.yearfirst)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=options.zone())
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        # OverflowError: offsets can push dates at the edge of the calendar out of range.
        return None


def resolve(
    args: InvocationArguments, options: ParserOptions | None = None
) -> ResolvedInstant:
    """Resolve call-site arguments into the instant seeding the identifier.

    The arity check runs before any argument is inspected.

    Args:
        args: Arguments in call order
        options: Parser options for text arguments

    Returns:
        ``NowInstant`` for zero or NULL arguments, ``ParsedInstant`` otherwise

    Raises:
        WrongArityError: If more than one argument was given
        UnparseableDateError: If the text argument is not a date
    """
    if len(args) > MAX_ARGUMENTS:
        raise WrongArityError(len(args))

    argument = args.first()
    if isinstance(argument, (AbsentArg, NullArg)):
        return NowInstant()
    if isinstance(argument, ValueArg):
        parsed = parse_date(argument.value, options)
        if parsed is None:
            logger.debug("resolver.date.unparseable", value=argument.value)
            raise UnparseableDateError(argument.value)
        instant = ParsedInstant.from_datetime(parsed, source=argument.value)
        logger.debug(
            "resolver.date.parsed", value=argument.value, milliseconds=instant.milliseconds
        )
        return instant
    raise TypeError(f"Unsupported argument: {argument!r}")
