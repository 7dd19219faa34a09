"""Threading macros.

    (-> x (f a) (g b))   =>  (g (f x a) b)
    (->> x (f a) (g b))  =>  (g b (f a x))

Each step's value is spliced into the next call as a ValueExpr, so the next
head still decides (macro or function) how to treat it. With no steps the
form yields nil and x is never evaluated.
"""

from parens import LispValue
from parens.evaluation.evaluator import evaluate
from parens.reader.expressions import Expr, ListExpr, ValueExpr
from parens.types.errors import ParensMacroError
from parens.types.scope import Scope


def _thread(first: bool, scope: Scope, name: str, exprs: list[Expr]) -> LispValue:
    if not exprs:
        raise ParensMacroError(f"{name or 'thread'}: at-least 1 argument required")

    for i, step in enumerate(exprs[1:], start=1):
        if not isinstance(step, ListExpr) or not step.items:
            raise ParensMacroError(
                f"{name or 'thread'}: argument {i} must be a function call, not '{step}'"
            )

    if len(exprs) == 1:
        return None

    result = evaluate(exprs[0], scope)
    for step in exprs[1:]:
        head, *args = step.items
        spliced = ValueExpr(result)
        if first:
            call = ListExpr((head, spliced, *args))
        else:
            call = ListExpr((head, *args, spliced))
        result = evaluate(call, scope)
    return result


def thread_first_form(scope: Scope, name: str, exprs: list[Expr]) -> LispValue:
    return _thread(True, scope, name, exprs)


def thread_last_form(scope: Scope, name: str, exprs: list[Expr]) -> LispValue:
    return _thread(False, scope, name, exprs)
