r"""
Combinators for building readers: functions of a shared environment x.

A reader is any Callable[[X], A]. Every combinator here returns a new reader that closes over its
arguments; the readers it combines all receive the same environment, and are evaluated strictly in
the order they are listed. Exceptions raised by supplied functions propagate untouched.

Contains:
    map                     (f: Hom[A, B], g: Reader[X, A]) -> Reader[X, B]
    map2                    (f: Callable[[A, B], C], ga, gb) -> Reader[X, C]
    map3                    (f: Callable[[A, B, C], D], ga, gb, gc) -> Reader[X, D]
    map4                    (f: Callable[[A, B, C, D], E], ga, gb, gc, gd) -> Reader[X, E]
    map5                    (f: Callable[[A, B, C, D, E], T], ga, gb, gc, gd, ge) -> Reader[X, T]
    and_map, apply          (f: Reader[X, Hom[A, B]], ga: Reader[X, A]) -> Reader[X, B]
    and_then                (fa: Reader[X, A], g: Callable[[A], Reader[X, B]]) -> Reader[X, B]
    pure                    (a: A) -> Reader[X, A]
    ask                     (x: X) -> X
    asks                    (f: Reader[X, A]) -> Reader[X, A]
    local                   (f: Hom[X, X1], r: Reader[X1, A]) -> Reader[X, A]
"""
from __future__ import annotations

from combinators.basetypes import *


def map(f: Hom[A, B], g: Reader[X, A]) -> Reader[X, B]:
    """
    Composes f after the reader g: map(f, g)(x) == f(g(x)).
    :param f: The function to apply to the value read by g.
    :param g: The reader.
    :returns: A reader producing f of g's result.
    """
    def mapped(x: X) -> B:
        return f(g(x))
    return mapped

def map2(
        f: Callable[[A, B], C],
        ga: Reader[X, A],
        gb: Reader[X, B]
    ) -> Reader[X, C]:
    """
    Combines two readers with a binary function: map2(f, ga, gb)(x) == f(ga(x), gb(x)).
    ga runs before gb.
    :param f: The combining function.
    :param ga: The reader for f's first argument.
    :param gb: The reader for f's second argument.
    :returns: A reader producing the combined value.
    """
    def mapped(x: X) -> C:
        a = ga(x)
        b = gb(x)
        return f(a, b)
    return mapped

def map3(
        f: Callable[[A, B, C], D],
        ga: Reader[X, A],
        gb: Reader[X, B],
        gc: Reader[X, C]
    ) -> Reader[X, D]:
    """
    Three-reader version of map2: map3(f, ga, gb, gc)(x) == f(ga(x), gb(x), gc(x)).
    """
    def mapped(x: X) -> D:
        a = ga(x)
        b = gb(x)
        c = gc(x)
        return f(a, b, c)
    return mapped

def map4(
        f: Callable[[A, B, C, D], E],
        ga: Reader[X, A],
        gb: Reader[X, B],
        gc: Reader[X, C],
        gd: Reader[X, D]
    ) -> Reader[X, E]:
    """
    Four-reader version of map2: map4(f, ga, gb, gc, gd)(x) == f(ga(x), gb(x), gc(x), gd(x)).
    """
    def mapped(x: X) -> E:
        a = ga(x)
        b = gb(x)
        c = gc(x)
        d = gd(x)
        return f(a, b, c, d)
    return mapped

def map5(
        f: Callable[[A, B, C, D, E], T],
        ga: Reader[X, A],
        gb: Reader[X, B],
        gc: Reader[X, C],
        gd: Reader[X, D],
        ge: Reader[X, E]
    ) -> Reader[X, T]:
    """
    Five-reader version of map2.
    """
    def mapped(x: X) -> T:
        a = ga(x)
        b = gb(x)
        c = gc(x)
        d = gd(x)
        e = ge(x)
        return f(a, b, c, d, e)
    return mapped

def and_map(f: Reader[X, Hom[A, B]], ga: Reader[X, A]) -> Reader[X, B]:
    """
    Applies a reader of functions to a reader of arguments: and_map(f, ga)(x) == f(x)(ga(x)).
    Chaining builds lifts of any arity from a curried function, e.g.
        and_map(and_map(and_map(f, ga), gb), gc)(x) == map4(identity, f, ga, gb, gc)(x)
    where f(x) is a curried function of three arguments.
    :param f: A reader producing a function of one argument.
    :param ga: A reader producing that argument.
    :returns: A reader producing the applied result.
    """
    def applied(x: X) -> B:
        fx = f(x)
        return fx(ga(x))
    return applied

apply = and_map

def and_then(fa: Reader[X, A], g: Callable[[A], Reader[X, B]]) -> Reader[X, B]:
    """
    Sequences two readers: and_then(fa, g)(x) == g(fa(x))(x).
    The second stage sees both the first stage's result and the same environment.
    :param fa: The first reader.
    :param g: A function from fa's result to the next reader.
    :returns: The sequenced reader.
    """
    def sequenced(x: X) -> B:
        return g(fa(x))(x)
    return sequenced

def pure(a: A) -> Reader[X, A]:
    """
    A reader that ignores its environment.
    :param a: The value to produce.
    :returns: A reader always producing a.
    """
    def constant(_: X) -> A:
        return a
    return constant

def ask(x: X) -> X:
    """
    The reader that returns its environment.
    """
    return x

def asks(f: Reader[X, A]) -> Reader[X, A]:
    # a projection of the environment is already a reader
    return f

def local(f: Hom[X, X1], r: Reader[X1, A]) -> Reader[X, A]:
    """
    Runs a reader in a modified environment: local(f, r)(x) == r(f(x)).
    :param f: The environment transformation.
    :param r: The reader to run in the transformed environment.
    :returns: A reader of the original environment.
    """
    def localized(x: X) -> A:
        return r(f(x))
    return localized
