"""Tests for linkedcontainers/sets.py — typed sets."""

import numpy as np
import pytest

from linkedcontainers import (
    ConfigError, ElementTypeError, Float32Set, Float64Set, IntSet, StringSet, TypedSet,
    Uint16Set,
)


class TestIntSet:
    def test_insert_delete_contain(self):
        s = IntSet()
        s2 = IntSet()
        assert len(s) == 0
        s.insert([1, 2])
        assert len(s) == 2
        s.insert([3])
        assert not s.contains(4)
        assert s.contains(1)
        s.delete([1])
        assert 1 not in s
        s.insert([1])
        assert not s.contains_all([1, 2, 4])
        assert s.contains_all([1, 2])
        s2.insert([1, 2, 4])
        assert not s.is_superset(s2)
        s2.delete([4])
        assert s.is_superset(s2)

    def test_delete_multiples(self):
        s = IntSet([1, 2, 3])
        s.delete([1, 3])
        assert len(s) == 1
        assert 1 not in s and 3 not in s
        assert 2 in s

    def test_sorted_list(self):
        assert IntSet([13, 12, 11, 1]).sorted_list() == [1, 11, 12, 13]

    def test_difference(self):
        a = IntSet([1, 2, 3])
        b = IntSet([1, 2, 4, 5])
        assert a.difference(b).sorted_list() == [3]
        assert b.difference(a).sorted_list() == [4, 5]
        assert a.sorted_list() == [1, 2, 3]

    def test_contains_any(self):
        a = IntSet([1, 2, 3])
        assert a.contains_any([1, 4])
        assert not a.contains_any([10, 4])

    def test_equal(self):
        assert IntSet([1, 2]).equal(IntSet([2, 1]))
        assert IntSet([1, 2]) == IntSet([2, 2, 1])
        assert IntSet() == IntSet()
        assert IntSet() != IntSet([1, 2, 3])
        b = IntSet([1, 2, 0])
        a = IntSet()
        a.insert([1])
        assert a != b
        a.insert([2])
        assert a != b
        a.insert([0])
        assert a == b
        a.delete([0])
        assert a != b

    def test_equal_builtin_set(self):
        assert IntSet([1, 2]) == {2, 1}
        assert IntSet([1, 2]) != {1, 2, "x"}

    @pytest.mark.parametrize(
        "s1, s2, expected",
        [
            ([1, 2, 3, 4], [3, 4, 5, 6], [1, 2, 3, 4, 5, 6]),
            ([1, 2, 3, 4], [], [1, 2, 3, 4]),
            ([], [1, 2, 3, 4], [1, 2, 3, 4]),
            ([], [], []),
        ],
    )
    def test_union(self, s1, s2, expected):
        a, b = IntSet(s1), IntSet(s2)
        union = a.union(b)
        assert len(union) == len(expected)
        assert union == IntSet(expected)
        assert a == IntSet(s1) and b == IntSet(s2)

    @pytest.mark.parametrize(
        "s1, s2, expected",
        [
            ([1, 2, 3, 4], [3, 4, 5, 6], [3, 4]),
            ([1, 2, 3, 4], [1, 2, 3, 4], [1, 2, 3, 4]),
            ([1, 2, 3, 4], [], []),
            ([], [1, 2, 3, 4], []),
            ([], [], []),
        ],
    )
    def test_intersection(self, s1, s2, expected):
        intersection = IntSet(s1).intersection(IntSet(s2))
        assert isinstance(intersection, IntSet)
        assert intersection == IntSet(expected)

    def test_pop_any(self):
        s = IntSet([7])
        assert s.pop_any() == (7, True)
        assert s.pop_any() == (None, False)

    def test_numpy_scalars_accepted(self):
        s = IntSet([np.int32(5), np.int64(6)])
        assert s.sorted_list() == [5, 6]
        assert all(type(x) is int for x in s)

    def test_rejects_non_integers(self):
        with pytest.raises(ElementTypeError):
            IntSet([1.5])
        with pytest.raises(ElementTypeError):
            IntSet([True])
        with pytest.raises(TypeError):
            IntSet(["1"])


class TestUint16Set:
    def test_range_check(self):
        s = Uint16Set([0, 65535])
        assert len(s) == 2
        with pytest.raises(ElementTypeError):
            s.insert([65536])
        with pytest.raises(ElementTypeError):
            s.insert([-1])

    def test_unrepresentable_is_absent(self):
        s = Uint16Set([1, 2])
        assert not s.contains(-1)
        assert s.intersection([1, -1]).sorted_list() == [1]
        assert s.difference([70000]) == s
        s.delete([70000])
        assert len(s) == 2

    def test_union_out_of_range(self):
        with pytest.raises(ElementTypeError):
            Uint16Set([1]).union(IntSet([100000]))

    def test_to_array(self):
        arr = Uint16Set([3, 1, 2]).to_array()
        assert arr.dtype == np.uint16
        np.testing.assert_array_equal(arr, [1, 2, 3])


class TestOtherDtypes:
    def test_float32_rounding(self):
        s = Float32Set([0.1])
        assert s.contains(0.1)
        assert s.to_array().dtype == np.float32

    def test_huge_int_is_absent_from_float_set(self):
        s = Float64Set([1.0])
        assert not s.contains(10**400)
        s.delete([10**400])
        assert s.sorted_list() == [1.0]
        assert s.intersection([1.0, 10**400]).sorted_list() == [1.0]
        assert not s.equal([1.0, 10**400])
        with pytest.raises(ElementTypeError):
            s.insert([10**400])

    def test_float32_range_check(self):
        s = Float32Set([1.0])
        with pytest.raises(ElementTypeError):
            s.insert([1e40])
        with pytest.raises(ElementTypeError):
            s.insert([-1e40])
        assert not s.contains(1e39)
        assert s.difference([1e39]) == s
        assert s.sorted_list() == [1.0]

    def test_float_infinity_allowed(self):
        s = Float32Set([float("inf")])
        assert s.contains(float("inf"))
        assert not s.contains(1e39)

    def test_string_set(self):
        s = StringSet(["b", "a", "c"])
        assert s.sorted_list() == ["a", "b", "c"]
        assert not s.contains(1)
        with pytest.raises(ElementTypeError):
            s.insert([1])
        np.testing.assert_array_equal(s.to_array(), np.array(["a", "b", "c"]))

    def test_explicit_dtype(self):
        s = TypedSet([1, 2], dtype=np.int8)
        assert s.element_dtype == np.int8
        with pytest.raises(ElementTypeError):
            s.insert([200])

    def test_missing_dtype(self):
        with pytest.raises(ConfigError):
            TypedSet([1])

    def test_unsupported_dtype(self):
        with pytest.raises(ConfigError):
            TypedSet(dtype=np.complex128)

    def test_repr(self):
        assert repr(IntSet([2, 1])) == "IntSet([1, 2])"
