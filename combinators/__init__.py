"""
Module dependencies:
    basetypes.py:
        imports typing, collections.abc
        requires toolz
    reader.py:
        depends on basetypes
    tuples.py:
        depends on basetypes
    comparison.py:
        depends on basetypes
        imports functools
    supertypes.py:
        depends on basetypes, reader, tuples, comparison
        requires pydantic_core
    utilities.py:
        depends on basetypes
        imports functools, logging

Requirements:
    pydantic
    pydantic_core
    toolz
"""
from combinators.basetypes import *
from combinators.reader import *
from combinators.tuples import *
from combinators.comparison import *
from combinators.supertypes import Fn
from combinators.utilities import show_call
