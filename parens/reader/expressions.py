"""Expression tree produced by the parser.

The variant set is closed: Symbol, Number, String, List, Vector, Quote, plus
Module (several top-level forms) and Value (an already-evaluated value, used
when a macro splices a result back into a call). The evaluator dispatches on
these with a single match statement; `Expr.eval` is a convenience entry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from parens import LispValue
from parens.types.errors import ParensSyntaxError

if TYPE_CHECKING:
    from parens.types.scope import Scope


class Expr:
    __slots__ = ()

    def eval(self, scope: Scope) -> LispValue:
        # Lazy import to avoid circular imports
        from parens.evaluation.evaluator import evaluate
        return evaluate(self, scope)


@dataclass(frozen=True, slots=True)
class SymbolExpr(Expr):
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class NumberExpr(Expr):
    raw: str
    _value: float | None = field(default=None, compare=False, repr=False)

    def number(self) -> float:
        """Parse the literal on first use and memoize it."""
        if self._value is None:
            try:
                value = float(self.raw)
            except ValueError:
                raise ParensSyntaxError(f"invalid number literal {self.raw!r}") from None
            object.__setattr__(self, "_value", value)
        return self._value

    def __str__(self) -> str:
        return self.raw


def unquote_string(raw: str) -> str:
    r"""Strip the surrounding quotes and resolve the \" and \n escapes.

    Any other backslash is kept as written.
    """
    body = raw[1:-1] if len(raw) >= 2 and raw[0] == raw[-1] == '"' else raw
    return body.replace('\\"', '"').replace("\\n", "\n")


@dataclass(frozen=True, slots=True)
class StringExpr(Expr):
    raw: str

    def string(self) -> str:
        return unquote_string(self.raw)

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True, slots=True)
class ListExpr(Expr):
    items: tuple[Expr, ...] = ()

    def __str__(self) -> str:
        return "(" + " ".join(str(e) for e in self.items) + ")"


@dataclass(frozen=True, slots=True)
class VectorExpr(Expr):
    items: tuple[Expr, ...] = ()

    def __str__(self) -> str:
        return "[" + " ".join(str(e) for e in self.items) + "]"


@dataclass(frozen=True, slots=True)
class QuoteExpr(Expr):
    expr: Expr

    def unquote_eval(self, scope: Scope) -> LispValue:
        """Evaluate the wrapped expression against `scope`."""
        return self.expr.eval(scope)

    def __str__(self) -> str:
        return f"'{self.expr}"


@dataclass(frozen=True, slots=True)
class ModuleExpr(Expr):
    forms: tuple[Expr, ...] = ()

    def __str__(self) -> str:
        return "\n".join(str(e) for e in self.forms)


@dataclass(frozen=True, slots=True, eq=False)
class ValueExpr(Expr):
    value: LispValue

    def __str__(self) -> str:
        return str(self.value)
