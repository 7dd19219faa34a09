"""Closure representation for functions defined with `lambda` / `defn`."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Sequence

from parens import LispValue
from parens.types.scope import Scope

if TYPE_CHECKING:
    from parens.reader.expressions import Expr


class Lambda:
    """A first-class closure with parameter names, body, and captured scope."""

    __slots__ = ("params", "body", "scope")

    def __init__(self, params: Sequence[str], body: Sequence[Expr], scope: Scope):
        self.params: tuple[str, ...] = tuple(params)
        self.body: tuple[Expr, ...] = tuple(body)
        self.scope: Scope = scope

    def extend_scope(self, args: Sequence[LispValue]) -> Scope:
        """Return a new child of the captured scope with params bound positionally.

        Duplicate parameter names are bound left to right, so the last one wins.
        The caller checks arity.
        """
        local = Scope(outer=self.scope)
        for name, value in zip(self.params, args):
            local.bind(name, value)
        return local

    def __call__(self, *args: LispValue) -> LispValue:
        # Lets host functions receive closures as ordinary Python callables
        from parens.evaluation.apply import invoke
        return invoke(self, list(args))

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(λ [")
            buffer.write(" ".join(self.params))
            buffer.write("] ")
            buffer.write(" ".join(str(e) for e in self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
