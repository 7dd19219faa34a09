from parens import LispValue
from parens.evaluation.evaluator import evaluate
from parens.reader.expressions import Expr, ListExpr
from parens.types.errors import ParensMacroError
from parens.types.scope import Scope


def is_truthy(value: LispValue) -> bool:
    """Only None and the boolean False fail a test; 0 and "" pass."""
    return not (value is None or value is False)


def cond_form(scope: Scope, name: str, exprs: list[Expr]) -> LispValue:
    """(cond (test1 action1) (test2 action2) ...)

    Shapes are checked before any test runs. The first test whose value is
    truthy has its action evaluated and returned; no match yields None.
    """
    for clause in exprs:
        if not isinstance(clause, ListExpr):
            raise ParensMacroError("cond: all arguments must be lists")
        if len(clause.items) != 2:
            raise ParensMacroError("cond: each argument must be of the form (test action)")

    for clause in exprs:
        test, action = clause.items
        if is_truthy(evaluate(test, scope)):
            return evaluate(action, scope)
    return None
