"""The ``ulid`` function and its host-facing lifecycle.

A host drives a function in two steps:

1. ``init`` once per query with the call-site arguments. It declares the
   return metadata, resolves the instant, and builds the identifier.
2. ``process`` once per row. It returns the identifier built at init; the
   same value is returned on every call.

``Invocation`` wraps one query's lifecycle as a two-state machine
(UNINITIALIZED -> READY) and converts init failures to the host's textual
error messages.

Example:
    >>> invocation = Invocation()
    >>> invocation.initialize(InvocationArguments.from_values("2001-09-09 01:46:40"))
    >>> invocation.produce()[:10]
    '00X3AAA400'
"""

from __future__ import annotations

from typing import Any

from ulid import ULID

from ulid_udf.config import ParserOptions, UdfCfg
from ulid_udf.errors import InvalidStateError, UlidUdfError, UnknownFunctionError
from ulid_udf.models.args import InvocationArguments
from ulid_udf.models.constants import FUNCTION_NAME, ULID_LENGTH
from ulid_udf.models.enums import UdfState
from ulid_udf.models.ids import encode, generate
from ulid_udf.observability.logging import get_logger
from ulid_udf.resolver import resolve

logger = get_logger(__name__)


class UlidUdf:
    """Per-query state of the ``ulid`` function.

    Holds the identifier built during ``init``. Instances are never shared
    between queries.

    Attributes:
        identifier: The ULID built at initialization
    """

    def __init__(self, identifier: ULID) -> None:
        self.identifier = identifier
        self._encoded = encode(identifier)

    @classmethod
    def init(
        cls,
        cfg: UdfCfg,
        args: InvocationArguments,
        options: ParserOptions | None = None,
    ) -> UlidUdf:
        """Declare return metadata, resolve the instant, and build the identifier.

        Raises:
            WrongArityError: If more than one argument was given
            UnparseableDateError: If the text argument is not a date
        """
        cfg.set_max_len(ULID_LENGTH)
        cfg.set_maybe_null(False)
        cfg.set_is_const(False)
        instant = resolve(args, options)
        return cls(generate(instant))

    def process(self, cfg: UdfCfg | None = None, args: InvocationArguments | None = None) -> str:
        """Return the encoded identifier. Never fails."""
        return self._encoded


class Invocation:
    """One query's use of a registered function.

    Attributes:
        cfg: Return metadata declared during initialization
        state: Current lifecycle state
    """

    def __init__(
        self,
        factory: type[UlidUdf] = UlidUdf,
        options: ParserOptions | None = None,
    ) -> None:
        self._factory = factory
        self._options = options
        self._handle: UlidUdf | None = None
        self.cfg = UdfCfg()
        self.state = UdfState.UNINITIALIZED

    def initialize(self, args: InvocationArguments) -> str | None:
        """Initialize the invocation.

        Returns:
            None on success, or the error message to report to the host.
            On failure the invocation stays UNINITIALIZED.

        Raises:
            InvalidStateError: If the invocation is already READY
        """
        if self.state.is_terminal():
            raise InvalidStateError(self.state.value, "initialize")
        try:
            self._handle = self._factory.init(self.cfg, args, self._options)
        except UlidUdfError as exc:
            logger.warning("udf.init.failed", code=exc.code, error=exc.message, arity=len(args))
            return exc.message
        self.state = UdfState.READY
        logger.debug("udf.init.succeeded", arity=len(args))
        return None

    def produce(self, args: InvocationArguments | None = None) -> str:
        """Produce the value for one row.

        Raises:
            InvalidStateError: If initialization has not succeeded
        """
        if self._handle is None:
            raise InvalidStateError(self.state.value, "produce")
        return self._handle.process(self.cfg, args)


FUNCTIONS: dict[str, type[UlidUdf]] = {FUNCTION_NAME: UlidUdf}


def get_udf(name: str) -> type[UlidUdf]:
    """Look up a registered function by name (case-insensitive).

    Raises:
        UnknownFunctionError: If no function is registered under ``name``
    """
    try:
        return FUNCTIONS[name.lower()]
    except KeyError:
        raise UnknownFunctionError(name) from None


def call(name: str, *values: Any, options: ParserOptions | None = None) -> str:
    """Run a full init/process lifecycle for one row.

    Raises:
        UnknownFunctionError: If ``name`` is not registered
        WrongArityError: If more than one argument was given
        UnparseableDateError: If the text argument is not a date
    """
    factory = get_udf(name)
    handle = factory.init(UdfCfg(), InvocationArguments.from_values(*values), options)
    return handle.process()


def ulid(*values: Any) -> str:
    """Shortcut for ``call("ulid", *values)``."""
    return call(FUNCTION_NAME, *values)

