"""
Test the binary-function input transform and comparator helpers
"""
import operator
from functools import cmp_to_key
import pytest
from hypothesis import given, strategies as st
from combinators.basetypes import fst, snd
from combinators.comparison import on, compare, comparing, sort_with


class TestOn:
    def test_subtract_lengths(self) -> None:
        assert on(operator.sub, len)("ab", "a") == 1

    @given(x=st.text(), y=st.text())
    def test_pointwise(self, x: str, y: str) -> None:
        bi = lambda a, b: (a, b)
        assert on(bi, len)(x, y) == (len(x), len(y))

    def test_projection_order(self) -> None:
        seen = []
        def key(v):
            seen.append(v)
            return v
        on(operator.eq, key)("x", "y")
        assert seen == ["x", "y"]

    def test_record_field(self) -> None:
        older = on(operator.gt, operator.itemgetter("age"))
        assert older({"name": "a", "age": 40}, {"name": "b", "age": 30})
        assert not older({"name": "a", "age": 20}, {"name": "b", "age": 30})

    def test_propagation(self, raising, boom) -> None:
        with pytest.raises(type(boom)) as info:
            on(operator.sub, raising)(1, 2)
        assert info.value is boom
        with pytest.raises(type(boom)) as info:
            on(raising, len)("a", "b")
        assert info.value is boom


class TestCompare:
    def test_compare(self) -> None:
        assert compare(1, 2) == -1
        assert compare(2, 2) == 0
        assert compare("b", "a") == 1

    def test_comparing(self) -> None:
        by_len = comparing(len)
        assert by_len("aaa", "b") == 1
        assert by_len("a", "b") == 0


class TestSorting:
    def test_sort_by_first(self, pairs) -> None:
        explicit = lambda p, q: (p[0] > q[0]) - (p[0] < q[0])
        expected = sorted(pairs, key=cmp_to_key(explicit))
        assert sort_with(on(compare, fst), pairs) == expected
        assert sorted(pairs, key=cmp_to_key(on(compare, fst))) == expected
        # stable: equal keys keep their input order
        assert expected == [(1, "a"), (1, "z"), (2, "b"), (3, "c")]

    def test_sort_by_second_descending(self, pairs) -> None:
        assert sort_with(comparing(snd), pairs, reverse=True) == [(1, "z"), (3, "c"), (2, "b"), (1, "a")]

    @given(items=st.lists(st.tuples(st.integers(), st.text(max_size=3))))
    def test_matches_key_sort(self, items) -> None:
        assert sort_with(on(compare, fst), items) == sorted(items, key=fst)

    def test_does_not_mutate(self, pairs) -> None:
        original = list(pairs)
        sort_with(comparing(fst), pairs)
        assert pairs == original
