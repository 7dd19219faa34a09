from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from parens import LispValue, MacroFn

if TYPE_CHECKING:
    from parens.reader.expressions import Expr
    from parens.types.scope import Scope


class Macro:
    """A callable that receives its argument expressions unevaluated.

    The wrapped function is called as fn(scope, name, exprs), where `name` is
    the symbol the macro was reached through ("" when the head of the call was
    not a bare symbol).
    """

    __slots__ = ("fn", "name")

    def __init__(self, fn: MacroFn, name: str | None = None):
        self.fn = fn
        self.name = name or getattr(fn, "__name__", "macro")

    def __call__(self, scope: Scope, name: str, exprs: Sequence[Expr]) -> LispValue:
        return self.fn(scope, name, list(exprs))

    def __repr__(self) -> str:
        return f"<macro {self.name}>"
