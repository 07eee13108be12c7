"""Tests for ULID function error handling."""

from ulid_udf.errors import (
    InvalidIdentifierError,
    InvalidStateError,
    UlidUdfError,
    UnknownFunctionError,
    UnparseableDateError,
    WrongArityError,
)


class TestUlidUdfError:
    """Test UlidUdfError base class."""

    def test_basic_error_creation(self) -> None:
        """Test creating a basic UlidUdfError."""
        error = UlidUdfError(code="ulid:test/error", message="Test error message")

        assert error.code == "ulid:test/error"
        assert error.message == "Test error message"
        assert error.details == {}
        assert str(error) == "Test error message"

    def test_error_details_immutability(self) -> None:
        """Test that details dict is not shared between instances."""
        error1 = UlidUdfError("code", "msg", {"key": "value1"})
        error2 = UlidUdfError("code", "msg", {"key": "value2"})

        assert error1.details["key"] == "value1"
        assert error2.details["key"] == "value2"

    def test_to_dict(self) -> None:
        """Test serialization to dict."""
        error = UlidUdfError("ulid:test/error", "msg", {"a": 1})

        assert error.to_dict() == {"code": "ulid:test/error", "message": "msg", "details": {"a": 1}}


class TestWrongArityError:
    """Test WrongArityError class."""

    def test_message_for_two_arguments(self) -> None:
        """Test the exact host message for two arguments."""
        error = WrongArityError(2)

        assert str(error) == "expected 0 or 1 argument; got 2"
        assert error.code == "ulid:init/wrong_arity"
        assert error.got == 2
        assert error.details == {"got": 2}

    def test_message_reports_literal_count(self) -> None:
        """Test that any count is reported verbatim."""
        assert str(WrongArityError(3)) == "expected 0 or 1 argument; got 3"
        assert str(WrongArityError(17)) == "expected 0 or 1 argument; got 17"

    def test_is_ulid_udf_error(self) -> None:
        """Test inheritance from the base error."""
        assert isinstance(WrongArityError(2), UlidUdfError)


class TestUnparseableDateError:
    """Test UnparseableDateError class."""

    def test_exact_message(self) -> None:
        """Test the exact host message."""
        error = UnparseableDateError("not-a-date")

        assert str(error) == "unable to parse date format"
        assert error.code == "ulid:init/unparseable_date"
        assert error.value == "not-a-date"
        assert error.details["value"] == "not-a-date"


class TestInvalidIdentifierError:
    """Test InvalidIdentifierError class."""

    def test_message_includes_reason(self) -> None:
        """Test that the reason is part of the message."""
        error = InvalidIdentifierError("abc", "expected 26 characters, got 3")

        assert str(error) == "Invalid ULID: expected 26 characters, got 3"
        assert error.code == "ulid:decode/invalid_identifier"
        assert error.details == {"value": "abc", "reason": "expected 26 characters, got 3"}


class TestHostErrors:
    """Test host contract errors."""

    def test_invalid_state_error(self) -> None:
        """Test InvalidStateError message and attributes."""
        error = InvalidStateError("uninitialized", "produce")

        assert str(error) == "Cannot produce in state 'uninitialized'"
        assert error.code == "ulid:host/invalid_state"
        assert error.state == "uninitialized"
        assert error.action == "produce"

    def test_unknown_function_error(self) -> None:
        """Test UnknownFunctionError message and attributes."""
        error = UnknownFunctionError("uuid")

        assert str(error) == "Unknown function: uuid"
        assert error.code == "ulid:host/unknown_function"
        assert error.name == "uuid"
