r"""
Conversions between functions of one packed tuple and functions of separate positional arguments,
and a mapper over homogeneous pairs.

curryN unpacks: curry3(f)(a, b, c) == f((a, b, c)).
uncurryN packs: uncurry3(g)((a, b, c)) == g(a, b, c).
Each is the other's inverse. There is one implementation per arity so signatures stay exact.

Contains:
    curry3, uncurry3        (f: Callable[[Triple], T]) <-> Callable[[A, B, C], T]
    curry4, uncurry4        (f: Callable[[Quad], T]) <-> Callable[[A, B, C, D], T]
    curry5, uncurry5        (f: Callable[[Quint], T]) <-> Callable[[A, B, C, D, E], T]
    both                    (f: Hom[X, Y], pair: Pair[X]) -> Pair[Y]
"""
from __future__ import annotations

from combinators.basetypes import *


def curry3(f: Callable[[Triple[A, B, C]], T]) -> Callable[[A, B, C], T]:
    """
    Spreads the tupled argument of f over three positional parameters.
    :param f: A function of a single 3-tuple.
    :returns: A function g with g(a, b, c) == f((a, b, c)).
    """
    def curried(a: A, b: B, c: C) -> T:
        return f((a, b, c))
    return curried

def uncurry3(g: Callable[[A, B, C], T]) -> Callable[[Triple[A, B, C]], T]:
    """
    Packs the three positional parameters of g into one 3-tuple.
    :param g: A function of three arguments.
    :returns: A function f with f((a, b, c)) == g(a, b, c).
    """
    def uncurried(args: Triple[A, B, C]) -> T:
        a, b, c = args
        return g(a, b, c)
    return uncurried

def curry4(f: Callable[[Quad[A, B, C, D]], T]) -> Callable[[A, B, C, D], T]:
    """
    Four-element version of curry3.
    """
    def curried(a: A, b: B, c: C, d: D) -> T:
        return f((a, b, c, d))
    return curried

def uncurry4(g: Callable[[A, B, C, D], T]) -> Callable[[Quad[A, B, C, D]], T]:
    """
    Four-element version of uncurry3.
    """
    def uncurried(args: Quad[A, B, C, D]) -> T:
        a, b, c, d = args
        return g(a, b, c, d)
    return uncurried

def curry5(f: Callable[[Quint[A, B, C, D, E]], T]) -> Callable[[A, B, C, D, E], T]:
    def curried(a: A, b: B, c: C, d: D, e: E) -> T:
        return f((a, b, c, d, e))
    return curried

def uncurry5(g: Callable[[A, B, C, D, E], T]) -> Callable[[Quint[A, B, C, D, E]], T]:
    def uncurried(args: Quint[A, B, C, D, E]) -> T:
        a, b, c, d, e = args
        return g(a, b, c, d, e)
    return uncurried

def both(f: Hom[X, Y], pair: Pair[X]) -> Pair[Y]:
    """
    Applies one function to each element of a pair, first element first.
    :param f: The function to apply.
    :param pair: The pair of inputs.
    :returns: The pair (f(x), f(y)).
    """
    x, y = pair
    fx = f(x)
    return (fx, f(y))
