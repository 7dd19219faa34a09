"""Core evaluator for the Parens interpreter.

One dispatch point over the closed Expr variant set. List evaluation decides
between macro invocation (arguments passed unevaluated) and ordinary
application (arguments evaluated left to right, fail-fast).
"""

from __future__ import annotations

from parens import LispValue
from parens.evaluation.apply import invoke, is_invokable
from parens.reader.expressions import (
    Expr,
    ListExpr,
    ModuleExpr,
    NumberExpr,
    QuoteExpr,
    StringExpr,
    SymbolExpr,
    ValueExpr,
    VectorExpr,
)
from parens.types.errors import ParensCallError, ParensError
from parens.types.macro import Macro
from parens.types.scope import Scope


def evaluate(expr: Expr, scope: Scope) -> LispValue:
    match expr:
        case SymbolExpr(name=name):
            return scope.lookup(name)
        case NumberExpr():
            return expr.number()
        case StringExpr():
            return expr.string()
        case ListExpr(items=items):
            return evaluate_list(items, scope)
        case VectorExpr(items=items):
            # Always eager: no macro interception inside a vector literal
            return [evaluate(e, scope) for e in items]
        case QuoteExpr(expr=inner):
            return inner
        case ValueExpr(value=value):
            return value
        case ModuleExpr(forms=forms):
            result: LispValue = None
            for form in forms:
                result = evaluate(form, scope)
            return result
    raise ParensError(f"cannot evaluate {type(expr).__name__}")


def evaluate_list(items: tuple[Expr, ...], scope: Scope) -> LispValue:
    if not items:
        return []

    head, *rest = items
    fn = evaluate(head, scope)

    if isinstance(fn, Macro):
        name = head.name if isinstance(head, SymbolExpr) else ""
        return fn(scope, name, rest)

    if not is_invokable(fn):
        raise ParensCallError(f"value is not callable: {fn!r}")

    args = [evaluate(e, scope) for e in rest]
    return invoke(fn, args)
