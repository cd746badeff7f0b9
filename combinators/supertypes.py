r"""
A function wrapper exposing the package's combinators as operators and chainable methods.

Contains:
    class Fn
        check               (obj: Any) -> bool
        f * g               composition, (f * g)(x) == f(g(x))
        f >> g              left-to-right composition; x >> f applies f to x
        map                 (self: Reader[X, A], f: Hom[A, B]) -> Fn
        map2 ... map5       (self: Callable[..., T], *readers: Reader) -> Fn
        and_map, apply      (self: Reader[X, Hom[A, B]], ga: Reader[X, A]) -> Fn
        and_then            (self: Reader[X, A], g: Callable[[A], Reader[X, B]]) -> Fn
        local               (self: Reader[X1, A], f: Hom[X, X1]) -> Fn
        on                  (self: Callable[[B, B], C], f: Hom[A, B]) -> Fn
        both                (self: Hom[X, Y], pair: Pair[X]) -> Pair[Y]
        curry3 ... curry5, uncurry3 ... uncurry5   (self) -> Fn
"""
from __future__ import annotations

from combinators.basetypes import *
from combinators import reader, tuples, comparison

from pydantic_core import core_schema


class Fn:
    """
    Function wrapper for pipe-style use of the combinators.
        Calling an Fn calls the wrapped function with the same arguments.
        Notation:
            f * g is the composition f(g(x))
            f >> g is the composition g(f(x)); 3 >> f >> g is g(f(3))
        Methods put the wrapped function in the first position of the matching combinator, so
            Fn(g).map(f) == map(f, g), Fn(f).map2(ga, gb) == map2(f, ga, gb), Fn(bi).on(f) == on(bi, f)
        Fn can be used as a pydantic field type; any callable validates and is wrapped.
    """
    def __init__(self, func: Func) -> None:
        """
        Initialize a Fn object.

        :param func: The function to wrap. Wrapping an Fn wraps the function inside it instead.
        """
        while isinstance(func, Fn):
            func = func.func
        self.func: Func = func
        self.__name__: str = getattr(func, '__name__', type(func).__name__)
        self.__doc__ = getattr(func, '__doc__', None)

    def __call__(self, *args, **kwargs) -> Any:
        return self.func(*args, **kwargs)

    def __repr__(self) -> str:
        return f"Fn({self.__name__})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Callable[[Any], core_schema.CoreSchema]) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(cls._validate)

    @classmethod
    def _validate(cls, obj: Any) -> Fn:
        if isinstance(obj, Fn):
            return obj
        if not callable(obj):
            msg = f"Expected a callable, got {type(obj).__name__}"
            raise ValueError(msg)
        return cls(obj)

    @staticmethod
    def check(obj: Any) -> bool:
        """
        Checks if the given object is a function or an Fn.
        :param obj: The object to check.
        :returns: True if the object is callable, False otherwise.
        """
        return callable(obj)

    def __mul__(self, other: Func) -> Fn:
        """
        Composition of functions: (f * g)(x) = f(g(x))
        Mnemonic: closest symbol to circ
        :param other: The function to run first.
        :returns: A new Fn representing the composition.
        """
        return Fn(compose(self.func, other))

    def __rmul__(self, other: Func) -> Fn:
        return Fn(compose(other, self.func))

    def __rshift__(self, other: Func) -> Fn:
        """
        Left-to-right composition: (f >> g)(x) = g(f(x))
        :param other: The function to run second.
        :returns: A new Fn representing the chain.
        """
        return Fn(pipe(self.func, other))

    def __rrshift__(self, x: Any) -> Any:
        """
        Feeds a value into the function: 3 >> f is f(3).
        Plain functions on the left are treated as values; wrap them in Fn to compose instead.
        :param x: The value to apply the function to.
        :returns: The result of applying the function to the value.
        """
        return self.func(x)

    # reader combinators

    def map(self, f: Hom[A, B]) -> Fn:
        return Fn(reader.map(f, self.func))

    def map2(self, ga: Reader[X, A], gb: Reader[X, B]) -> Fn:
        return Fn(reader.map2(self.func, ga, gb))

    def map3(self, ga: Reader[X, A], gb: Reader[X, B], gc: Reader[X, C]) -> Fn:
        return Fn(reader.map3(self.func, ga, gb, gc))

    def map4(self, ga: Reader[X, A], gb: Reader[X, B], gc: Reader[X, C], gd: Reader[X, D]) -> Fn:
        return Fn(reader.map4(self.func, ga, gb, gc, gd))

    def map5(self, ga: Reader[X, A], gb: Reader[X, B], gc: Reader[X, C], gd: Reader[X, D], ge: Reader[X, E]) -> Fn:
        return Fn(reader.map5(self.func, ga, gb, gc, gd, ge))

    def and_map(self, ga: Reader[X, A]) -> Fn:
        """
        Applies the functions this reader produces to the values ga reads.
        Chains left to right: Fn(f).and_map(ga).and_map(gb) reads f, then ga, then gb.
        :param ga: The reader of arguments.
        :returns: A new Fn reader.
        """
        return Fn(reader.and_map(self.func, ga))

    apply = and_map

    def and_then(self, g: Callable[[A], Reader[X, B]]) -> Fn:
        return Fn(reader.and_then(self.func, g))

    def local(self, f: Hom[X, X1]) -> Fn:
        return Fn(reader.local(f, self.func))

    # binary functions and tuples

    def on(self, f: Hom[A, B]) -> Fn:
        """
        Maps both inputs of this binary function through f.
        Ex: sorted(people, key=cmp_to_key(Fn(compare).on(age)))
        :param f: The projection.
        :returns: A new binary Fn.
        """
        return Fn(comparison.on(self.func, f))

    def both(self, pair: Pair[X]) -> Pair[Y]:
        return tuples.both(self.func, pair)

    def curry3(self) -> Fn:
        return Fn(tuples.curry3(self.func))

    def uncurry3(self) -> Fn:
        return Fn(tuples.uncurry3(self.func))

    def curry4(self) -> Fn:
        return Fn(tuples.curry4(self.func))

    def uncurry4(self) -> Fn:
        return Fn(tuples.uncurry4(self.func))

    def curry5(self) -> Fn:
        return Fn(tuples.curry5(self.func))

    def uncurry5(self) -> Fn:
        return Fn(tuples.uncurry5(self.func))
