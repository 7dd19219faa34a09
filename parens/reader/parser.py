"""
  Parens Parser

Recursive descent over a TokenCursor. Each call to `parse_expr` pops one token
and dispatches on its kind:

    (        -> ListExpr, children until ')'
    [        -> VectorExpr, children until ']'
    '        -> QuoteExpr around the next expression
    number   -> NumberExpr (parsed lazily on evaluation)
    string   -> StringExpr (unescaped on evaluation)
    symbol   -> SymbolExpr
    whitespace / newline / comment -> None (nothing produced)

No semantic checks happen here; macro arity and the like are evaluation-time
failures.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from parens.reader.cursor import TokenCursor
from parens.reader.expressions import (
    Expr,
    ListExpr,
    ModuleExpr,
    NumberExpr,
    QuoteExpr,
    StringExpr,
    SymbolExpr,
    VectorExpr,
)
from parens.reader.lexer import Token, TokenKind, tokenize
from parens.types.errors import ParensSyntaxError, UNEXPECTED_EOF

_SKIPPED = (TokenKind.WHITESPACE, TokenKind.NEWLINE, TokenKind.COMMENT)
_CLOSERS = {TokenKind.LPAREN: TokenKind.RPAREN, TokenKind.LVECT: TokenKind.RVECT}


class Parser:
    def __init__(self, tokens: Iterable[Token], source_name: str | None = None):
        self.cursor = tokens if isinstance(tokens, TokenCursor) else TokenCursor(tokens)
        self.source_name = source_name

    def _error(self, message: str) -> ParensSyntaxError:
        return ParensSyntaxError(message, self.source_name)

    def parse_expr(self) -> Optional[Expr]:
        tok = self.cursor.pop()
        if tok is None:
            raise self._error(UNEXPECTED_EOF)

        kind = tok.kind
        if kind in _SKIPPED:
            return None

        if kind in _CLOSERS:
            items = self._parse_sequence(_CLOSERS[kind])
            if kind is TokenKind.LPAREN:
                return ListExpr(items)
            return VectorExpr(items)

        if kind in (TokenKind.RPAREN, TokenKind.RVECT):
            raise self._error(f"unexpected '{tok.value}'")

        if kind is TokenKind.QUOTE:
            # Skip layout between the quote mark and what it quotes
            while True:
                inner = self.parse_expr()
                if inner is not None:
                    return QuoteExpr(inner)

        if kind is TokenKind.NUMBER:
            return NumberExpr(tok.value)

        if kind is TokenKind.STRING:
            return StringExpr(tok.value)

        if kind is TokenKind.SYMBOL:
            return SymbolExpr(tok.value)

        raise self._error(f"unknown token type: {kind}")

    def _parse_sequence(self, closer: TokenKind) -> tuple[Expr, ...]:
        items: list[Expr] = []
        while True:
            nxt = self.cursor.peek()
            if nxt is None:
                raise self._error(UNEXPECTED_EOF)
            if nxt.kind is closer:
                self.cursor.pop()
                return tuple(items)
            expr = self.parse_expr()
            if expr is not None:
                items.append(expr)

    def parse_all(self) -> Iterator[Expr]:
        """Yield every top-level expression in order."""
        while not self.cursor.exhausted():
            try:
                expr = self.parse_expr()
            except RecursionError:
                raise self._error("nesting too deep") from None
            if expr is not None:
                yield expr

    def parse(self) -> Expr:
        """Parse the whole token sequence into a single root expression."""
        forms = list(self.parse_all())
        if not forms:
            raise self._error(UNEXPECTED_EOF)
        if len(forms) == 1:
            return forms[0]
        return ModuleExpr(tuple(forms))


def parse(source: str | Iterable[Token], name: str | None = None) -> Expr:
    """Lex (when given text) and parse into a root expression.

    `name` labels the source in error messages only.
    """
    if isinstance(source, str):
        tokens = tokenize(source, name)
    else:
        tokens = source
    return Parser(tokens, name).parse()
