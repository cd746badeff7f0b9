"""
Type variables, type aliases and the primitive combinators the rest of the package is built from.

Defines types:
    Type variables
        T, X, Y          # generic type variables
        A, B, C, D, E    # result types of readers and combining functions
        X1               # a modified environment (see reader.local)
    Type aliases
        Func                Callable[..., Any]
        End[T]              Callable[[T], T]
        Hom[X, Y]           Callable[[X], Y]
        Reader[X, A]        Callable[[X], A]
        Comparator[T]       Callable[[T, T], int]
        Decorator           Callable[[Func], Func]
        Pair[T]             tuple[T, T]
        Triple, Quad, Quint tuple[A, B, C], tuple[A, B, C, D], tuple[A, B, C, D, E]

Contains:
    identity                (x: T) -> T
    const                   (c: T) -> Callable[..., T]
    flip                    (f: Callable[[A, B], C]) -> Callable[[B, A], C]
    compose                 (*fns: Func) -> Func
    pipe                    (*fns: Func) -> Func
    apply_to                (x: X) -> Callable[[Hom[X, Y]], Y]
    fst, snd                (pair: tuple[A, B]) -> A | B
    swap                    (pair: tuple[A, B]) -> tuple[B, A]
"""
from __future__ import annotations

from typing import TypeVar, TypeAlias, Any

from collections.abc import Callable

import toolz

T, X, Y, X1 = TypeVar('T'), TypeVar('X'), TypeVar('Y'), TypeVar('X1')
A, B, C, D, E = TypeVar('A'), TypeVar('B'), TypeVar('C'), TypeVar('D'), TypeVar('E')

Func = Callable[..., Any]
End = Callable[[T], T]
Hom = Callable[[X], Y]
Decorator = End[Func]

# a reader is a plain function of the environment, not a wrapper type
Reader = Callable[[X], A]
Comparator = Callable[[T, T], int]

Pair: TypeAlias = tuple[T, T]
Triple: TypeAlias = tuple[A, B, C]
Quad: TypeAlias = tuple[A, B, C, D]
Quint: TypeAlias = tuple[A, B, C, D, E]


def identity(x: T) -> T:
    """
    The identity function.
    :param x: The input value.
    :returns: The input value.
    """
    return x

def const(c: T) -> Callable[..., T]:
    """
    Builds a constant function.
    :param c: The value to return.
    :returns: A function that discards whatever it is called with and returns c.
    """
    def constant(*_: Any, **__: Any) -> T:
        return c
    return constant

def flip(f: Callable[[A, B], C]) -> Callable[[B, A], C]:
    """
    Swaps the two arguments of a binary function.
    :param f: The function to flip.
    :returns: A function g with g(b, a) == f(a, b).
    """
    def flipped(b: B, a: A) -> C:
        return f(a, b)
    return flipped

def compose(*fns: Func) -> Func:
    """
    Right-to-left composition: compose(f, g, h)(x) == f(g(h(x))).
    Only the last function may take more than one argument. compose() is the identity.
    :param fns: The functions to compose.
    :returns: The composed function.
    """
    if not fns:
        return identity
    return toolz.compose(*fns)

def pipe(*fns: Func) -> Func:
    """
    Left-to-right composition: pipe(f, g, h)(x) == h(g(f(x))).
    :param fns: The functions to chain.
    :returns: The chained function.
    """
    return compose(*reversed(fns))

def apply_to(x: X) -> Callable[[Hom[X, Y]], Y]:
    """
    Turns a value into a function that feeds it to its argument: apply_to(x)(f) == f(x).
    :param x: The value to apply functions to.
    :returns: A function of one function.
    """
    def applied(f: Hom[X, Y]) -> Y:
        return f(x)
    return applied

def fst(pair: tuple[A, B]) -> A:
    return pair[0]

def snd(pair: tuple[A, B]) -> B:
    return pair[1]

def swap(pair: tuple[A, B]) -> tuple[B, A]:
    a, b = pair
    return (b, a)
