"""Tests for ULID function enumerations."""

from ulid_udf.models.enums import UdfState


class TestUdfState:
    """Tests for UdfState."""

    def test_values(self) -> None:
        assert UdfState.UNINITIALIZED.value == "uninitialized"
        assert UdfState.READY.value == "ready"

    def test_only_ready_is_terminal(self) -> None:
        assert UdfState.READY.is_terminal()
        assert not UdfState.UNINITIALIZED.is_terminal()

    def test_string_comparison(self) -> None:
        assert UdfState.READY == "ready"
