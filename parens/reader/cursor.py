from __future__ import annotations

from typing import Iterable, Optional

from parens.reader.lexer import Token


class TokenCursor:
    """Peekable, poppable view over a token sequence."""

    __slots__ = ("tokens", "pos")

    def __init__(self, tokens: Iterable[Token]):
        self.tokens: list[Token] = list(tokens)
        self.pos = 0

    def peek(self, offset: int = 0) -> Optional[Token]:
        i = self.pos + offset
        if 0 <= i < len(self.tokens):
            return self.tokens[i]
        return None

    def pop(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def exhausted(self) -> bool:
        return self.pos >= len(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens) - self.pos
