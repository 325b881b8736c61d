"""Tests for individual wire field kinds."""

import pytest

from stream_protocol.codec.fields import (
    F64,
    I64,
    STRING,
    STRING_LIST,
    U16,
    U32,
    U64,
    EnumKind,
    StringListKind,
    join_path,
)
from stream_protocol.config.defaults import CodecOptions
from stream_protocol.errors import EncodeError, TypeMismatchError
from stream_protocol.models.payloads import MarketType

OPTIONS = CodecOptions()


class TestIntegerKinds:
    """Test integer range enforcement."""

    @pytest.mark.parametrize("kind,low,high", [
        (U16, 0, 2**16 - 1),
        (U32, 0, 2**32 - 1),
        (U64, 0, 2**64 - 1),
        (I64, -(2**63), 2**63 - 1),
    ])
    def test_bounds_inclusive(self, kind, low, high) -> None:
        """Test both bounds decode and one past each is rejected."""
        assert kind.decode(low, "f", OPTIONS) == low
        assert kind.decode(high, "f", OPTIONS) == high

        with pytest.raises(TypeMismatchError):
            kind.decode(low - 1, "f", OPTIONS)
        with pytest.raises(TypeMismatchError):
            kind.decode(high + 1, "f", OPTIONS)

    @pytest.mark.parametrize("raw", [1.0, "1", True, None, [1]])
    def test_non_integers_rejected(self, raw) -> None:
        """Test nothing is coerced into an integer."""
        with pytest.raises(TypeMismatchError):
            U64.decode(raw, "f", OPTIONS)

    def test_encode_rejects_bool(self) -> None:
        """Test True is not written as 1."""
        with pytest.raises(EncodeError):
            U64.encode(True, "f")


class TestFloatKind:
    """Test f64 handling."""

    def test_int_widened(self) -> None:
        """Test integers become floats."""
        value = F64.decode(3, "f", OPTIONS)
        assert value == 3.0 and isinstance(value, float)

    @pytest.mark.parametrize("raw", ["1.5", False, None, {}])
    def test_non_numbers_rejected(self, raw) -> None:
        """Test only JSON numbers are accepted."""
        with pytest.raises(TypeMismatchError):
            F64.decode(raw, "f", OPTIONS)

    def test_infinite_rejected_on_decode(self) -> None:
        """Test non-finite values from dict input are rejected."""
        with pytest.raises(TypeMismatchError, match="finite"):
            F64.decode(float("inf"), "f", OPTIONS)

    def test_huge_int_rejected(self) -> None:
        """Test integers past the double range fail cleanly both ways."""
        with pytest.raises(TypeMismatchError, match="finite"):
            F64.decode(10**400, "f", OPTIONS)
        with pytest.raises(EncodeError):
            F64.encode(10**400, "f")


class TestStringKinds:
    """Test string and string list kinds."""

    def test_string_requires_str(self) -> None:
        """Test numbers are not stringified."""
        with pytest.raises(TypeMismatchError):
            STRING.decode(5, "f", OPTIONS)

    def test_list_preserves_order(self) -> None:
        """Test element order survives decode."""
        assert STRING_LIST.decode(["c", "a", "b"], "f", OPTIONS) == ("c", "a", "b")

    def test_empty_list_allowed(self) -> None:
        """Test the codec does not enforce non-emptiness."""
        assert STRING_LIST.decode([], "f", OPTIONS) == ()

    def test_single_string_only_when_enabled(self) -> None:
        """Test bare strings are accepted only by lists that allow it."""
        assert StringListKind(accept_single=True).decode("a", "f", OPTIONS) == ("a",)
        with pytest.raises(TypeMismatchError):
            STRING_LIST.decode("a", "f", OPTIONS)

    def test_encode_list(self) -> None:
        """Test tuples encode as lists."""
        assert STRING_LIST.encode(("a", "b"), "f") == ["a", "b"]


class TestEnumKind:
    """Test enum kind."""

    def test_decode_by_value(self) -> None:
        """Test wire values map to enum members."""
        kind = EnumKind(MarketType)
        assert kind.decode("raydium_cpmm", "f", OPTIONS) is MarketType.RAYDIUM_CPMM

    def test_encode_requires_member(self) -> None:
        """Test raw strings are not accepted in place of members."""
        with pytest.raises(EncodeError):
            EnumKind(MarketType).encode("pump_fun", "f")


def test_join_path() -> None:
    """Test dotted path construction."""
    assert join_path(None, "a") == "a"
    assert join_path("a", "b") == "a.b"
