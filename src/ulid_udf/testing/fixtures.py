"""Pytest fixtures for ULID function tests.

Fixtures (use with pytest):
    mock_cfg: Fresh MockUdfCfg recording declared metadata.
    invocation: Fresh, uninitialized Invocation of the ``ulid`` function.
"""

import pytest

from ulid_udf.testing.mocks import MockUdfCfg
from ulid_udf.udf import Invocation


@pytest.fixture
def mock_cfg() -> MockUdfCfg:
    """Create a fresh MockUdfCfg for the test."""
    return MockUdfCfg()


@pytest.fixture
def invocation() -> Invocation:
    """Create a fresh, uninitialized Invocation for the test."""
    return Invocation()
