from parens import LispValue
from parens.evaluation.evaluator import evaluate
from parens.reader.expressions import Expr
from parens.types.errors import ParensMacroError
from parens.types.scope import Scope


def quote_form(scope: Scope, name: str, exprs: list[Expr]) -> LispValue:
    """(quote expr) returns expr itself, unevaluated."""
    if len(exprs) != 1:
        raise ParensMacroError(f"quote: exactly 1 argument required, got {len(exprs)}")
    return exprs[0]


def eval_form(scope: Scope, name: str, exprs: list[Expr]) -> LispValue:
    """(eval expr)

    Evaluates `expr`; when the result is an expression handle (from quote) it
    is evaluated once more against the current scope.
    """
    if len(exprs) != 1:
        raise ParensMacroError(f"eval: exactly 1 argument required, got {len(exprs)}")
    value = evaluate(exprs[0], scope)
    if isinstance(value, Expr):
        return evaluate(value, scope)
    return value
