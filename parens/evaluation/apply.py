"""Invocation engine for Parens.

Centralizes how an evaluated head is called with evaluated arguments:
- Lambda closures: exact arity, new child of the captured scope, body run as `do`.
- HostFunction adapters and bare Python callables: arity check and argument
  conversion through the adapter.

`invoke` is the boundary where abnormal termination stops: any exception that
is not a ParensError, raised while the callee runs, is re-raised as a
ParensCallError so one misbehaving call cannot end the enclosing session.
"""

from __future__ import annotations

import logging
from typing import Sequence

from parens import LispValue
from parens.types.errors import ParensArityError, ParensCallError, ParensError
from parens.types.host_function import HostFunction
from parens.types.lambda_fn import Lambda
from parens.types.macro import Macro

logger = logging.getLogger(__name__)


def apply_lambda(fn: Lambda, args: Sequence[LispValue]) -> LispValue:
    """Apply a closure to already-evaluated arguments."""
    if len(args) != len(fn.params):
        raise ParensArityError(f"requires {len(fn.params)} arguments, got {len(args)}")
    local = fn.extend_scope(args)
    # Lazy import: do_form evaluates expressions, which invoke closures
    from parens.evaluation.special_forms.do_form import run_body
    return run_body(local, fn.body)


def is_invokable(value: LispValue) -> bool:
    return not isinstance(value, Macro) and callable(value)


def _describe(fn: LispValue) -> str:
    if isinstance(fn, Lambda):
        return "lambda"
    return getattr(fn, "name", None) or getattr(fn, "__name__", None) or type(fn).__name__


def invoke(fn: LispValue, args: Sequence[LispValue]) -> LispValue:
    """Call `fn` with `args`, returning its value or raising a ParensError."""
    if isinstance(fn, Macro):
        raise ParensCallError(f"macro '{fn.name}' cannot be called with evaluated arguments")
    if not callable(fn):
        raise ParensCallError(f"value is not callable: {fn!r}")

    try:
        if isinstance(fn, Lambda):
            return apply_lambda(fn, args)
        adapter = fn if isinstance(fn, HostFunction) else HostFunction(fn)
        return adapter.call(args)
    except ParensError:
        raise
    except Exception as e:
        logger.debug("call to %s terminated abnormally", _describe(fn), exc_info=True)
        raise ParensCallError(f"{_describe(fn)}: {type(e).__name__}: {e}") from e
