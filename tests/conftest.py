"""Shared pytest fixtures for ULID function tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from ulid_udf.observability.logging import clear_context

# Load ulid_udf.testing fixtures (mock_cfg, invocation)
pytest_plugins = ["ulid_udf.testing.fixtures"]


@pytest.fixture(autouse=True)
def _clear_log_context() -> Iterator[None]:
    """Drop structlog context bound by a test."""
    yield
    clear_context()


@pytest.fixture
def sample_date() -> str:
    """Date string with millisecond precision used across tests."""
    return "1983-04-13 12:09:14.274"
