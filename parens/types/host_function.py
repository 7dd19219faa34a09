"""Adapter that makes native Python callables invokable from Parens code.

A HostFunction records how many arguments the callable accepts and the type
each parameter declares, either from explicit `params` or by introspecting the
signature and type hints once. On each call it checks the argument count and
converts every Parens value (float, str, bool, list...) to the declared type,
e.g. a float argument for an `int` or `numpy.int16` parameter.
"""

from __future__ import annotations

import collections.abc
import inspect
import math
import types
import typing
from typing import Any, Callable, Optional, Sequence, Union, get_args, get_origin

import numpy as np

from parens import LispValue
from parens.types.errors import ParensArityError, ParensCallError, ParensTypeError
from parens.types.macro import Macro

EMPTY = inspect.Parameter.empty

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
_SEQUENCE_ORIGINS = (
    list,
    tuple,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Iterable,
    collections.abc.Collection,
)


def _type_name(t: Any) -> str:
    if t is EMPTY:
        return "any"
    if isinstance(t, type):
        return t.__name__
    return str(t).replace("typing.", "")


def _fail(value: LispValue, target: Any) -> ParensTypeError:
    return ParensTypeError(f"cannot convert {type(value).__name__} to {_type_name(target)}")


def _is_number(value: LispValue) -> bool:
    return isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(
        value, (bool, np.bool_)
    )


def _to_numpy_integer(value: LispValue, target: type) -> LispValue:
    if not _is_number(value):
        raise _fail(value, target)
    if isinstance(value, (float, np.floating)):
        if not float(value).is_integer():
            raise _fail(value, target)
        value = int(value)
    info = np.iinfo(target)
    if not info.min <= int(value) <= info.max:
        raise ParensTypeError(f"value {value} out of range for {target.__name__}")
    return target(value)


def _to_numpy_floating(value: LispValue, target: type) -> LispValue:
    if not _is_number(value):
        raise _fail(value, target)
    v = float(value)
    if math.isfinite(v) and abs(v) > float(np.finfo(target).max):
        raise ParensTypeError(f"value {value} out of range for {target.__name__}")
    return target(v)


def _to_sequence(value: LispValue, target: Any, origin: Any) -> LispValue:
    if not isinstance(value, (list, tuple)):
        raise _fail(value, target)
    args = get_args(target)
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(convert(v, args[0]) for v in value)
        if args:
            if len(args) != len(value):
                raise ParensTypeError(
                    f"expected {len(args)} elements for {_type_name(target)}, got {len(value)}"
                )
            return tuple(convert(v, t) for v, t in zip(value, args))
        return tuple(value)
    elem = args[0] if args else EMPTY
    return [convert(v, elem) for v in value]


def convert(value: LispValue, target: Any) -> LispValue:
    """Convert `value` to the parameter type `target`.

    Raises ParensTypeError when there is no valid conversion.
    """
    if target is EMPTY or target is Any or target is object:
        return value
    if target is None or target is type(None):
        if value is None:
            return None
        raise _fail(value, target)

    origin = get_origin(target)
    if origin is Union or origin is types.UnionType:
        for member in get_args(target):
            try:
                return convert(value, member)
            except ParensTypeError:
                continue
        raise _fail(value, target)

    if target is bool:
        if isinstance(value, (bool, np.bool_)):
            return bool(value)
        raise _fail(value, target)
    if isinstance(target, type) and issubclass(target, np.bool_):
        if isinstance(value, (bool, np.bool_)):
            return target(value)
        raise _fail(value, target)
    if isinstance(target, type) and issubclass(target, np.integer):
        return _to_numpy_integer(value, target)
    if isinstance(target, type) and issubclass(target, np.floating):
        return _to_numpy_floating(value, target)
    if target is int:
        if _is_number(value) and isinstance(value, (int, np.integer)):
            return int(value)
        if _is_number(value) and float(value).is_integer():
            return int(value)
        raise _fail(value, target)
    if target is float:
        if _is_number(value):
            return float(value)
        raise _fail(value, target)
    if target is complex:
        if _is_number(value) or isinstance(value, complex):
            return complex(value)
        raise _fail(value, target)
    if target is str:
        if isinstance(value, str):
            return value
        raise _fail(value, target)
    if target is np.ndarray:
        if isinstance(value, (list, tuple, np.ndarray)):
            return np.asarray(value)
        raise _fail(value, target)

    seq_origin = origin if origin is not None else (target if target in (list, tuple) else None)
    if seq_origin in _SEQUENCE_ORIGINS:
        return _to_sequence(value, target, seq_origin)

    if origin is collections.abc.Callable or target is collections.abc.Callable:
        if callable(value) and not isinstance(value, Macro):
            return value
        raise _fail(value, target)

    if origin is not None:
        if isinstance(origin, type) and isinstance(value, origin):
            return value
        raise _fail(value, target)
    if isinstance(target, type):
        if isinstance(value, target):
            return value
        raise _fail(value, target)
    # TypeVars and other annotation objects carry no checkable type
    return value


def _introspect(fn: Callable) -> tuple[list[Any], int, Optional[int], Any]:
    """Return (param types, min args, max args or None, *args type)."""
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        # No signature available (some C builtins): accept anything
        return [], 0, None, EMPTY
    try:
        hints = typing.get_type_hints(fn)
    except (NameError, TypeError):
        hints = {}

    params: list[Any] = []
    required = 0
    variadic = False
    rest: Any = EMPTY
    for p in sig.parameters.values():
        ann = hints.get(p.name, p.annotation)
        if isinstance(ann, str):
            ann = EMPTY
        if p.kind in _POSITIONAL:
            params.append(ann)
            if p.default is EMPTY:
                required += 1
        elif p.kind is inspect.Parameter.VAR_POSITIONAL:
            variadic = True
            rest = ann
        elif p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is EMPTY:
            raise ParensCallError(
                f"{getattr(fn, '__name__', fn)}: keyword-only parameter '{p.name}' cannot be supplied"
            )
    return params, required, (None if variadic else len(params)), rest


class HostFunction:
    """Explicit adapter describing a native callable's arguments."""

    __slots__ = ("fn", "name", "params", "min_args", "max_args", "rest")

    def __init__(
        self,
        fn: Callable,
        params: Sequence[Any] | None = None,
        *,
        name: str | None = None,
    ):
        self.fn = fn
        self.name: str = name or getattr(fn, "__name__", None) or type(fn).__name__
        if params is None:
            self.params, self.min_args, self.max_args, self.rest = _introspect(fn)
        else:
            self.params = list(params)
            self.min_args = self.max_args = len(self.params)
            self.rest = EMPTY

    def param_type(self, index: int) -> Any:
        if index < len(self.params):
            return self.params[index]
        return self.rest

    def _arity_text(self) -> str:
        if self.max_args is None:
            return f"at least {self.min_args}"
        if self.min_args == self.max_args:
            return str(self.min_args)
        return f"{self.min_args} to {self.max_args}"

    def check_arity(self, n: int) -> None:
        if n < self.min_args or (self.max_args is not None and n > self.max_args):
            raise ParensArityError(
                f"{self.name}: requires {self._arity_text()} arguments, got {n}"
            )

    def convert_args(self, args: Sequence[LispValue]) -> list[LispValue]:
        converted = []
        for i, value in enumerate(args):
            try:
                converted.append(convert(value, self.param_type(i)))
            except ParensTypeError as e:
                raise ParensTypeError(f"{self.name}: argument {i + 1}: {e}") from None
        return converted

    def call(self, args: Sequence[LispValue]) -> LispValue:
        self.check_arity(len(args))
        return self.fn(*self.convert_args(args))

    def __call__(self, *args: LispValue) -> LispValue:
        return self.call(args)

    def __repr__(self) -> str:
        return f"<host-function {self.name}>"


def host_function(
    fn: Callable | None = None,
    *,
    params: Sequence[Any] | None = None,
    name: str | None = None,
):
    """Decorator form of HostFunction: `@host_function` or `@host_function(params=[int])`."""

    def wrap(f: Callable) -> HostFunction:
        return HostFunction(f, params, name=name)

    if fn is not None:
        return wrap(fn)
    return wrap
