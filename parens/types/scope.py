"""Runtime scope for Parens.

A Scope stores bindings of names to evaluated values, each with an optional
documentation string, and links to an optional enclosing scope. Scopes are
ordinary Python objects: a closure or child scope holding a reference keeps
its ancestors alive, so a `let` block's bindings outlive the block whenever a
closure created inside it escapes.
"""

from __future__ import annotations

from typing import Optional

from parens import LispValue
from parens.types.errors import ParensUnboundSymbol


class Scope:
    """Hierarchical mapping from names to values with per-binding docs."""

    __slots__ = ("vars", "docs", "outer")

    def __init__(self, outer: Optional[Scope] = None):
        self.vars: dict[str, LispValue] = {}
        self.docs: dict[str, str] = {}
        self.outer: Scope | None = outer

    def bind(self, name: str, value: LispValue, doc: str | None = None) -> None:
        """Bind `name` to `value` in this scope only, replacing any local binding.

        A doc string, when given, replaces the recorded documentation; rebinding
        without one keeps the previous doc.
        """
        self.vars[name] = value
        if doc is not None:
            self.docs[name] = doc

    def find(self, name: str) -> Optional[Scope]:
        """Find the nearest scope in the chain that binds `name`."""
        scope: Optional[Scope] = self
        while scope is not None:
            if name in scope.vars:
                return scope
            scope = scope.outer
        return None

    def resolve(self, name: str) -> tuple[LispValue, bool]:
        """Return (value, found) without raising."""
        scope = self.find(name)
        if scope is None:
            return None, False
        return scope.vars[name], True

    def lookup(self, name: str) -> LispValue:
        """Look up the value bound to `name`, walking outward.

        Raises ParensUnboundSymbol if no scope in the chain binds it.
        """
        scope = self.find(name)
        if scope is None:
            raise ParensUnboundSymbol(f"unable to resolve symbol: {name}")
        return scope.vars[name]

    def doc(self, name: str) -> str:
        """Documentation recorded for `name`, using lookup order; empty if none."""
        scope: Optional[Scope] = self
        while scope is not None:
            if name in scope.docs:
                return scope.docs[name]
            scope = scope.outer
        return ""

    def root(self) -> Scope:
        scope = self
        while scope.outer is not None:
            scope = scope.outer
        return scope

    def child(self) -> Scope:
        return Scope(outer=self)

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def _frame(self) -> str:
        return "{" + ", ".join(f"{k}: {v!r}" for k, v in self.vars.items()) + "}"

    def __str__(self) -> str:
        """This frame only, with " -> ..." when there is a parent."""
        if self.outer is None:
            return self._frame()
        return self._frame() + " -> ..."

    def __repr__(self) -> str:
        frames = []
        scope: Optional[Scope] = self
        while scope is not None:
            frames.append(scope._frame())
            scope = scope.outer
        return f"<Scope chain: {' -> '.join(frames)}>"
