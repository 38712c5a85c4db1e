"""Unit tests for the Lexicoid value type."""

from datetime import datetime, timezone

import pytest

from core.errors import LexicoidDecodeError
from lexicoid.encoder import encode, encode_compact
from lexicoid.types import Lexicoid


class TestLexicoidOrdering:
    """Tests for length-then-lexical ordering."""

    def test_shorter_sorts_first(self):
        """A shorter ID sorts before a longer one regardless of symbols."""
        assert Lexicoid("zz") < Lexicoid("2222")
        assert Lexicoid("2222") > Lexicoid("zz")

    def test_same_length_is_lexical(self):
        """Equal-length IDs compare character by character."""
        assert Lexicoid("gehebv2") < Lexicoid("gei4p52")
        assert Lexicoid("gei4p52") <= Lexicoid("gei4p52")
        assert Lexicoid("gei4p52") >= Lexicoid("gei4p52")

    def test_compares_with_plain_strings(self):
        """Plain strings on either side use the same ordering."""
        assert Lexicoid("zz") < "2222"
        assert "2222" > Lexicoid("zz")
        assert "zz" < Lexicoid("2222")

    def test_fixed_ids_order_like_strings(self):
        """For fixed-length IDs the ordering equals plain string ordering."""
        a, b = encode(1550000000), encode(1674301677)
        assert (a < b) == (str(a) < str(b))

    def test_sort_compact(self):
        """Compact IDs of mixed length sort by timestamp."""
        timestamps = [1674301677, 0, 500000, 100, 28000000]
        ids = sorted(encode_compact(t) for t in timestamps)
        assert [i.timestamp for i in ids] == sorted(timestamps)

    def test_rejects_non_strings(self):
        """Comparing with non-strings raises TypeError."""
        with pytest.raises(TypeError):
            Lexicoid("22") < 5


class TestLexicoidValue:
    """Tests for value semantics."""

    def test_equality_and_hash(self):
        """Lexicoids equal and hash like their string content."""
        lexicoid = Lexicoid("gei4p52")
        assert lexicoid == "gei4p52"
        assert hash(lexicoid) == hash("gei4p52")
        assert {lexicoid: 1}["gei4p52"] == 1

    def test_str_and_repr(self):
        """str() gives the ID; repr() names the type."""
        lexicoid = Lexicoid("gei4p52")
        assert str(lexicoid) == "gei4p52"
        assert f"{lexicoid}" == "gei4p52"
        assert repr(lexicoid) == "Lexicoid('gei4p52')"

    def test_immutable(self):
        """No attributes can be attached."""
        with pytest.raises(AttributeError):
            Lexicoid("gei4p52").extra = 1

    def test_timestamp(self):
        """timestamp decodes the ID."""
        assert Lexicoid("gei4p52").timestamp == 1654401676
        assert Lexicoid("22").timestamp == 0

    def test_timestamp_invalid(self):
        """Malformed IDs raise on decode."""
        with pytest.raises(LexicoidDecodeError):
            Lexicoid("not-an-id").timestamp

    def test_to_datetime(self):
        """to_datetime gives the UTC instant."""
        assert Lexicoid("gei4p52").to_datetime() == datetime(2022, 6, 5, 4, 1, 16, tzinfo=timezone.utc)
