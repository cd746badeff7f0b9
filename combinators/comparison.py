r"""
Transforming the inputs of binary functions, mainly to build comparators over derived keys.

Contains:
    on                      (bi: Callable[[B, B], C], f: Hom[A, B]) -> Callable[[A, A], C]
    compare                 (a: T, b: T) -> int
    comparing               (f: Hom[A, B]) -> Comparator[A]
    sort_with               (cmp: Comparator[T], items: Iterable[T], reverse: bool = False) -> list[T]
"""
from __future__ import annotations

from combinators.basetypes import *

from collections.abc import Iterable
from functools import cmp_to_key


def on(bi: Callable[[B, B], C], f: Hom[A, B]) -> Callable[[A, A], C]:
    """
    Maps both inputs of a binary function through f: on(bi, f)(x, y) == bi(f(x), f(y)).
    Ex: on(compare, len) compares strings by length; on(operator.sub, len)("ab", "a") == 1.
    :param bi: The binary function to combine the projected values with.
    :param f: The projection applied to each input, x before y.
    :returns: The transformed binary function.
    """
    def transformed(x: A, y: A) -> C:
        fx = f(x)
        return bi(fx, f(y))
    return transformed

def compare(a: T, b: T) -> int:
    """
    Three-way comparison using the operands' own ordering.
    :returns: -1 if a < b, 1 if a > b, else 0.
    """
    return (a > b) - (a < b)

def comparing(f: Hom[A, B]) -> Comparator[A]:
    return on(compare, f)

def sort_with(cmp: Comparator[T], items: Iterable[T], reverse: bool = False) -> list[T]:
    """
    Sorts items with a two-argument comparator such as one built by on or comparing.
    The sort is stable.
    :param cmp: A comparator returning a negative, zero or positive number.
    :param items: The items to sort.
    :param reverse: Whether to sort in descending order.
    :returns: A new sorted list.
    """
    return sorted(items, key=cmp_to_key(cmp), reverse=reverse)
