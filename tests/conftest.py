import math

import pytest

from parens.interpreter import Interpreter, new_root_scope


def add(a: float, b: float) -> float:
    return a + b


def sub(a: float, b: float) -> float:
    return a - b


def mul(*xs: float) -> float:
    return math.prod(xs)


@pytest.fixture
def scope():
    """Root scope with the core forms plus a few arithmetic host functions."""
    s = new_root_scope()
    s.bind("add", add, "Usage: (add a b)")
    s.bind("sub", sub)
    s.bind("*", mul)
    s.bind("two", 2.0)
    return s


@pytest.fixture
def interp(scope):
    return Interpreter(scope)
