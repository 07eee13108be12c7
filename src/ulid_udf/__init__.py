"""ULID function for query-processing hosts.

Generates 26-character ULIDs from the current time, or from a date string
passed as the single argument.

Example:
    >>> from ulid_udf import ulid
    >>> len(ulid())
    26
    >>> ulid("1983-04-13 12:09:14.274")[:10]
    '00C69ND6S2'
"""

from ulid_udf.errors import (
    InvalidIdentifierError,
    InvalidStateError,
    UlidUdfError,
    UnknownFunctionError,
    UnparseableDateError,
    WrongArityError,
)
from ulid_udf.models import InvocationArguments, decode, encode, generate
from ulid_udf.resolver import parse_date, resolve
from ulid_udf.udf import Invocation, UlidUdf, call, get_udf, ulid

__version__ = "0.1.0"

__all__ = [
    "InvalidIdentifierError",
    "InvalidStateError",
    "Invocation",
    "InvocationArguments",
    "UlidUdf",
    "UlidUdfError",
    "UnknownFunctionError",
    "UnparseableDateError",
    "WrongArityError",
    "__version__",
    "call",
    "decode",
    "encode",
    "generate",
    "get_udf",
    "parse_date",
    "resolve",
    "ulid",
]
