from __future__ import annotations

from typing import Sequence

from parens import LispValue
from parens.evaluation.evaluator import evaluate
from parens.reader.expressions import Expr
from parens.types.scope import Scope


def run_body(scope: Scope, exprs: Sequence[Expr]) -> LispValue:
    """Evaluate each expression in order in `scope`; value of the last, or None."""
    result: LispValue = None
    for e in exprs:
        result = evaluate(e, scope)
    return result


def do_form(scope: Scope, name: str, exprs: list[Expr]) -> LispValue:
    """(do expr1 expr2 ...)"""
    return run_body(scope, exprs)


def let_form(scope: Scope, name: str, exprs: list[Expr]) -> LispValue:
    """(let expr1 expr2 ...)

    A `do` inside one new child scope. Bindings made with `label` stay local to
    the block, but closures created inside keep seeing them.
    """
    return run_body(scope.child(), exprs)
