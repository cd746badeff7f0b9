"""
Test configuration and fixtures.
"""

# tests/conftest.py
import pytest
from typing import TypeVar, Callable, Any

T = TypeVar('T')

def fixture(obj: T) -> Callable[[], T]:
    @pytest.fixture
    def _fixture() -> T:
        return obj
    return _fixture

class Boom(Exception):
    """Raised by the failing readers below."""

# Common test objects that will be available to all tests
test_objects = {
    "inc": lambda x: x + 1,
    "double": lambda x: x * 2,
    "add3": lambda x: x + 3,
    "add": lambda a, b: a + b,
    "env": {"name": "ada", "age": 36, "langs": ["en", "fr"]},
    "pairs": [(3, "c"), (1, "a"), (2, "b"), (1, "z")],
}

# Register fixtures globally
globals().update({
    name: fixture(obj)
    for name, obj in test_objects.items()
})

@pytest.fixture
def boom() -> Boom:
    return Boom("raised by a supplied function")

@pytest.fixture
def raising(boom) -> Callable[..., Any]:
    def _raising(*args, **kwargs) -> Any:
        raise boom
    return _raising

@pytest.fixture
def call_log() -> list:
    return []

@pytest.fixture
def recorder(call_log) -> Callable[[str, Callable], Callable]:
    """Wraps a function so each call appends its tag to call_log."""
    def _recorder(tag: str, f: Callable = lambda x: x) -> Callable:
        def recorded(*args) -> Any:
            call_log.append(tag)
            return f(*args)
        return recorded
    return _recorder
