from parens import LispValue
from parens.reader.expressions import Expr, SymbolExpr, VectorExpr
from parens.types.errors import ParensMacroError
from parens.types.lambda_fn import Lambda
from parens.types.scope import Scope


def lambda_form(scope: Scope, name: str, exprs: list[Expr]) -> LispValue:
    """(lambda [params] body...) -> closure over the current scope."""
    if len(exprs) < 2:
        raise ParensMacroError(f"lambda: at-least two arguments required, got {len(exprs)}")

    param_list = exprs[0]
    if not isinstance(param_list, VectorExpr):
        raise ParensMacroError(
            f"lambda: first argument must be a vector of symbols, not '{type(param_list).__name__}'"
        )

    params = []
    for entry in param_list.items:
        if not isinstance(entry, SymbolExpr):
            raise ParensMacroError(
                f"lambda: param list must contain symbols, not '{type(entry).__name__}'"
            )
        params.append(entry.name)

    return Lambda(params, exprs[1:], scope)


def defn_form(scope: Scope, name: str, exprs: list[Expr]) -> LispValue:
    """(defn <name> [params] body...) binds a closure in the current scope."""
    if len(exprs) < 3:
        raise ParensMacroError(f"defn: 3 or more arguments required, got {len(exprs)}")

    sym = exprs[0]
    if not isinstance(sym, SymbolExpr):
        raise ParensMacroError(
            f"defn: first argument must be a symbol, not '{type(sym).__name__}'"
        )

    fn = lambda_form(scope, name, exprs[1:])
    scope.bind(sym.name, fn)
    return sym.name
