"""Testing utilities for the ULID function.

Modules:
    fixtures: Pytest fixtures (mock_cfg, invocation).
    mocks: MockUdfCfg and mock_args for driving the init/process lifecycle.
    assertions: assert_valid_ulid, assert_same_second.

Example:
    >>> from ulid_udf.testing import MockUdfCfg, mock_args, assert_valid_ulid
"""

from ulid_udf.testing.assertions import assert_same_second, assert_valid_ulid
from ulid_udf.testing.mocks import MockUdfCfg, mock_args

__all__ = [
    "MockUdfCfg",
    "assert_same_second",
    "assert_valid_ulid",
    "mock_args",
]
