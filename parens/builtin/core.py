"""Core bindings every root scope starts with: logical constants, special forms
and a few host functions."""

from __future__ import annotations

from parens.evaluation.special_forms import SPECIAL_FORMS
from parens.types.host_function import HostFunction
from parens.types.macro import Macro
from parens.types.scope import Scope

CONSTANTS = {
    "true": (True, "Represents logical true"),
    "false": (False, "Represents logical false"),
    "nil": (None, "Represents the unset value. Fails a cond test like false"),
}


def type_of(value):
    return type(value)


FUNCTIONS = {
    "type": (type_of, "Returns the Python type of the value.\nUsage: (type expr)"),
}


def register(scope: Scope) -> None:
    """Register the core constants, special forms and functions into the given scope."""
    for name, (value, doc) in CONSTANTS.items():
        scope.bind(name, value, doc)
    for name, (fn, doc) in SPECIAL_FORMS.items():
        scope.bind(name, Macro(fn, name), doc)
    for name, (fn, doc) in FUNCTIONS.items():
        scope.bind(name, HostFunction(fn, name=name), doc)
