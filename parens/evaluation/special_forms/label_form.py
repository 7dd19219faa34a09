from parens import LispValue
from parens.evaluation.evaluator import evaluate
from parens.reader.expressions import Expr, SymbolExpr
from parens.types.errors import ParensMacroError
from parens.types.scope import Scope


def _label_in_scope(target: Scope, scope: Scope, name: str, exprs: list[Expr]) -> LispValue:
    if len(exprs) != 2:
        raise ParensMacroError(f"{name or 'label'}: expecting symbol and a value")
    sym, val_expr = exprs
    if not isinstance(sym, SymbolExpr):
        raise ParensMacroError(
            f"{name or 'label'}: argument 1 must be a symbol, not '{type(sym).__name__}'"
        )
    value = evaluate(val_expr, scope)
    target.bind(sym.name, value)
    return value


def label_form(scope: Scope, name: str, exprs: list[Expr]) -> LispValue:
    """(label <symbol> expr) binds in the current scope and returns the value."""
    return _label_in_scope(scope, scope, name, exprs)


def global_form(scope: Scope, name: str, exprs: list[Expr]) -> LispValue:
    """(global <symbol> expr) binds in the root scope whatever the nesting depth.

    The value expression itself is still evaluated in the current scope.
    """
    return _label_in_scope(scope.root(), scope, name, exprs)
