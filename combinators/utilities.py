r"""
Debugging helpers for combinator pipelines.

Contains:
    show_call               (func: Callable, view: Callable) -> Callable
"""
from __future__ import annotations

from combinators.basetypes import *

import functools
import logging

logger = logging.getLogger(__name__)


# decorator factory
def show_call(func: Func, view: Callable[[str], Any] = logger.debug) -> Func:
    """
    A decorator to report function calls and return values for debugging.

    The decorated function, when called, reports its arguments and then the resulting return value
    using the provided 'view' function (the module logger at DEBUG level by default). If the function
    raises, only the call is reported and the exception propagates unchanged.

    :param func: The function to decorate.
    :param view: The function used for reporting, e.g. print or a logger method.
    :return: A function wrapper that reports arguments and return results.
    """
    name = getattr(func, '__name__', repr(func))

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        args_str = ", ".join(repr(a) for a in args)
        kwargs_str = ", ".join(f"{k}={v!r}" for k, v in kwargs.items())
        nonempty_str = [s for s in (args_str, kwargs_str) if s.strip()]
        view(f'{name}({", ".join(nonempty_str)})')
        out = func(*args, **kwargs)
        view(f'\t = {out!r}')
        return out
    return wrapper
