"""
Tests for the basetypes module.
"""

import pytest
from hypothesis import given, strategies as st
from test_utils import assert_prop, same_on
from combinators.basetypes import identity, const, flip, compose, pipe, apply_to, fst, snd, swap


class TestPrimitives:
    @given(x=st.integers() | st.text() | st.none())
    def test_identity(self, x) -> None:
        assert identity(x) is x

    def test_const(self) -> None:
        always = const(7)
        assert always(1) == 7
        assert always() == 7
        assert always("a", b=2) == 7

    def test_flip(self) -> None:
        sub = lambda a, b: a - b
        assert flip(sub)(1, 10) == 9
        assert flip(flip(sub))(1, 10) == -9

    def test_compose(self, inc, double, add3) -> None:
        assert compose(inc, double)(5) == 11
        assert compose(inc, double, add3)(5) == 17
        assert compose(inc)(5) == 6
        assert compose()(5) == 5
        # only the innermost function takes several arguments
        assert compose(double, lambda a, b: a + b)(1, 2) == 6

    def test_pipe(self, inc, double, add3) -> None:
        assert pipe(inc, double)(5) == 12
        assert pipe(inc, double, add3)(5) == 15
        assert pipe()(5) == 5

    def test_pipe_reverses_compose(self, inc, double, add3) -> None:
        assert_prop(same_on(pipe(inc, double, add3), compose(add3, double, inc)), "pipe/compose")(4)

    def test_apply_to(self, inc) -> None:
        assert apply_to(4)(inc) == 5
        assert [f(3) for f in (inc, str)] == list(map(apply_to(3), (inc, str)))

    def test_pair_helpers(self) -> None:
        assert fst((1, "a")) == 1
        assert snd((1, "a")) == "a"
        assert swap((1, "a")) == ("a", 1)
        assert swap(swap((1, "a"))) == (1, "a")

    def test_compose_propagates(self, raising, boom, inc) -> None:
        with pytest.raises(type(boom)) as info:
            compose(inc, raising)(1)
        assert info.value is boom

    @given(x=st.integers())
    def test_compose_associative(self, x: int) -> None:
        f, g, h = (lambda n: n + 1), (lambda n: n * 2), (lambda n: n - 3)
        assert compose(f, compose(g, h))(x) == compose(compose(f, g), h)(x)
