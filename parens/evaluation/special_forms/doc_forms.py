import pprint

from parens import LispValue
from parens.evaluation.evaluator import evaluate
from parens.reader.expressions import Expr, SymbolExpr
from parens.types.errors import ParensMacroError
from parens.types.scope import Scope


def doc_form(scope: Scope, name: str, exprs: list[Expr]) -> LispValue:
    """(doc <symbol>) -> documentation and Python type of the bound value."""
    if len(exprs) != 1:
        raise ParensMacroError(f"doc: exactly 1 argument required, got {len(exprs)}")
    sym = exprs[0]
    if not isinstance(sym, SymbolExpr):
        raise ParensMacroError(f"doc: argument must be a Symbol, not '{type(sym).__name__}'")

    value = evaluate(sym, scope)
    doc = scope.doc(sym.name)
    if not doc.strip():
        doc = f"No documentation available for '{sym.name}'"
    return f"{doc}\n\nPython Type: {type(value).__name__}"


def dump_scope_form(scope: Scope, name: str, exprs: list[Expr]) -> LispValue:
    return str(scope)


def inspect_form(scope: Scope, name: str, exprs: list[Expr]) -> LispValue:
    """(inspect expr ...) prints the unevaluated expressions and returns nil."""
    pprint.pprint(exprs)
    return None
