"""Tests for call-site argument models."""

import pytest
from pydantic import ValidationError

from ulid_udf.models.args import (
    AbsentArg,
    Argument,
    InvocationArguments,
    NullArg,
    ValueArg,
    coerce_argument,
)


class TestArgumentVariants:
    """Tests for the three argument shapes."""

    def test_kinds(self) -> None:
        """Test each variant carries its discriminator."""
        assert AbsentArg().kind == "absent"
        assert NullArg().kind == "null"
        assert ValueArg(value="x").kind == "value"

    def test_discriminated_validation(self) -> None:
        """Test the TypeAdapter picks the variant from the kind field."""
        assert isinstance(Argument.validate_python({"kind": "absent"}), AbsentArg)
        assert isinstance(Argument.validate_python({"kind": "null"}), NullArg)
        parsed = Argument.validate_python({"kind": "value", "value": "2020-01-01"})
        assert isinstance(parsed, ValueArg)
        assert parsed.value == "2020-01-01"

    def test_unknown_kind_rejected(self) -> None:
        """Test that a fourth shape cannot be constructed."""
        with pytest.raises(ValidationError):
            Argument.validate_python({"kind": "other"})

    def test_value_arg_is_frozen(self) -> None:
        """Test that arguments are immutable."""
        arg = ValueArg(value="x")
        with pytest.raises(ValidationError):
            arg.value = "y"  # type: ignore[misc]


class TestCoerceArgument:
    """Tests for coerce_argument()."""

    def test_none_is_null(self) -> None:
        assert coerce_argument(None) == NullArg()

    def test_str_is_kept(self) -> None:
        assert coerce_argument("2020-01-01") == ValueArg(value="2020-01-01")

    def test_bytes_are_decoded(self) -> None:
        assert coerce_argument(b"2020-01-01") == ValueArg(value="2020-01-01")

    def test_invalid_utf8_is_replaced(self) -> None:
        assert coerce_argument(b"\xff") == ValueArg(value="�")

    def test_other_scalars_become_text(self) -> None:
        assert coerce_argument(2020) == ValueArg(value="2020")


class TestInvocationArguments:
    """Tests for InvocationArguments."""

    def test_empty(self) -> None:
        """Test zero arguments."""
        args = InvocationArguments()

        assert len(args) == 0
        assert args.first() == AbsentArg()

    def test_from_values_preserves_order_and_count(self) -> None:
        """Test that arity equals the number of raw values."""
        args = InvocationArguments.from_values(None, "a", None)

        assert len(args) == 3
        assert args.values == (NullArg(), ValueArg(value="a"), NullArg())
        assert args.first() == NullArg()

    def test_from_json(self) -> None:
        """Test validation from serialized data."""
        args = InvocationArguments.model_validate(
            {"values": [{"kind": "value", "value": "2020-01-01"}]}
        )

        assert args.first() == ValueArg(value="2020-01-01")
