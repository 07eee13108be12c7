"""ULID function models.

This module provides the argument and instant variants, enums, constants,
and the identifier generation utilities.
"""

# Base models
from ulid_udf.models.base import UdfBaseModel

# Constants
from ulid_udf.models.constants import (
    CROCKFORD_ALPHABET,
    FUNCTION_NAME,
    MAX_TIMESTAMP_MS,
    ULID_LENGTH,
)

# Enums
from ulid_udf.models.enums import UdfState

# Arguments
from ulid_udf.models.args import (
    AbsentArg,
    Argument,
    ArgumentType,
    InvocationArguments,
    NullArg,
    ValueArg,
)

# Instants
from ulid_udf.models.instant import NowInstant, ParsedInstant, ResolvedInstant, to_milliseconds

# ID utilities
from ulid_udf.models.ids import (
    decode,
    encode,
    extract_milliseconds,
    extract_timestamp,
    generate,
    generate_id,
)

__all__ = [
    "AbsentArg",
    "Argument",
    "ArgumentType",
    "CROCKFORD_ALPHABET",
    "FUNCTION_NAME",
    "InvocationArguments",
    "MAX_TIMESTAMP_MS",
    "NowInstant",
    "NullArg",
    "ParsedInstant",
    "ResolvedInstant",
    "ULID_LENGTH",
    "UdfBaseModel",
    "UdfState",
    "ValueArg",
    "decode",
    "encode",
    "extract_milliseconds",
    "extract_timestamp",
    "generate",
    "generate_id",
    "to_milliseconds",
]
