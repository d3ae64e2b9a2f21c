"""Tests for distinct_by, sequence_equal_by and element_at_or_default."""

from collections import namedtuple

import pytest

from seqextras import (
    ArgumentNullError,
    ArgumentOutOfRangeError,
    KeyEqualityComparer,
    distinct_by,
    element_at_or_default,
    sequence_equal_by,
)
from seqextras.testing import forbid_enumeration, forbid_multiple_enumeration

Foo = namedtuple("Foo", ["x", "y"])


class TestDistinctBy:

    def test_none_arguments_raise(self):
        with pytest.raises(ArgumentNullError) as exc_info:
            distinct_by(None, abs)
        assert exc_info.value.param_name == "source"

        with pytest.raises(ArgumentNullError) as exc_info:
            distinct_by([], None)
        assert exc_info.value.param_name == "key"

    def test_keeps_first_item_per_key(self):
        source = forbid_multiple_enumeration([
            Foo(0, 1), Foo(0, 2), Foo(1, 3), Foo(2, 5), Foo(2, 0), Foo(2, 2),
        ])
        result = distinct_by(source, lambda f: f.x)
        assert list(result) == [Foo(0, 1), Foo(1, 3), Foo(2, 5)]

    def test_uses_key_comparer(self):
        source = forbid_multiple_enumeration([
            Foo(0, 1), Foo(0, 2), Foo(1, 3), Foo(-2, 5), Foo(-2, 0), Foo(2, 2),
        ])
        result = distinct_by(source, lambda f: f.x, KeyEqualityComparer.by(abs))
        assert list(result) == [Foo(0, 1), Foo(1, 3), Foo(-2, 5)]

    def test_is_lazy(self):
        source = forbid_enumeration([Foo(0, 1)])
        distinct_by(source, lambda f: f.x)
        assert source.enumerations == 0


class TestSequenceEqualBy:

    def test_none_arguments_raise(self):
        source = forbid_enumeration([])
        other = forbid_enumeration([])
        with pytest.raises(ArgumentNullError):
            sequence_equal_by(source, other, None)
        with pytest.raises(ArgumentNullError) as exc_info:
            sequence_equal_by(source, None, len)
        assert exc_info.value.param_name == "other"

    def test_both_empty(self):
        source = forbid_multiple_enumeration([])
        other = forbid_multiple_enumeration([])
        assert sequence_equal_by(source, other, len)

    def test_different_lengths(self):
        assert not sequence_equal_by(["hello", "world"], ["world"], len)
        assert not sequence_equal_by(["world"], ["hello", "world"], len)

    def test_same_keys(self):
        source = forbid_multiple_enumeration(["hello", "!"])
        other = forbid_multiple_enumeration(["world", "!"])
        assert sequence_equal_by(source, other, len)

    def test_different_keys(self):
        assert not sequence_equal_by(["hello", "!"], ["hi", "!"], len)

    def test_key_comparer(self):
        assert sequence_equal_by([-1, 2], [1, -2], lambda n: n, KeyEqualityComparer.by(abs))


class TestElementAtOrDefault:

    def test_none_source_raises(self):
        with pytest.raises(ArgumentNullError) as exc_info:
            element_at_or_default(None, 0, 42)
        assert exc_info.value.param_name == "source"

    def test_negative_index_raises(self):
        source = forbid_enumeration([])
        with pytest.raises(ArgumentOutOfRangeError) as exc_info:
            element_at_or_default(source, -1, 42)
        assert exc_info.value.param_name == "index"

    def test_default_when_empty(self):
        assert element_at_or_default(forbid_multiple_enumeration([]), 0, 42) == 42

    def test_default_when_out_of_range(self):
        assert element_at_or_default(forbid_multiple_enumeration([1, 2, 3]), 5, 42) == 42
        assert element_at_or_default([1, 2, 3], 3) is None

    def test_element_at_index(self):
        assert element_at_or_default(forbid_multiple_enumeration([1, 2, 3]), 0, 42) == 1
        assert element_at_or_default([1, 2, 3], 2, 42) == 3

    def test_generator_source(self):
        assert element_at_or_default((n * n for n in range(5)), 3) == 9
        assert element_at_or_default((n for n in range(2)), 3, "none") == "none"
