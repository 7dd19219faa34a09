"""
  Parens Lexer

- Eager, single pass over the source text.
- Whitespace and newlines are emitted as tokens so the parser can skip them
  uniformly; bracket balance is left to the parser.

   ( )   -> LPAREN / RPAREN
   [ ]   -> LVECT / RVECT
   '     -> QUOTE (only at token start)
   ; ... -> COMMENT (to end of line)
   1 -2.5 .5 3e10 -> NUMBER (must be followed by a delimiter)
   "..." -> STRING (raw text, quotes included)
   everything else contiguous -> SYMBOL
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterator, NamedTuple

from parens.types.errors import ParensLexError


class TokenKind(str, Enum):
    LPAREN = "lparen"
    RPAREN = "rparen"
    LVECT = "lvect"
    RVECT = "rvect"
    QUOTE = "quote"
    NUMBER = "number"
    STRING = "string"
    SYMBOL = "symbol"
    COMMENT = "comment"
    WHITESPACE = "whitespace"
    NEWLINE = "newline"

    def __str__(self) -> str:
        return self.value


class Token(NamedTuple):
    kind: TokenKind
    value: str


_DELIMITER = r"(?=[\s()\[\]\";]|$)"

TOKEN_RE = re.compile(
    r"(?P<newline>\r?\n)"
    r"|(?P<whitespace>[^\S\n]+)"
    r"|(?P<comment>;[^\n]*)"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<lvect>\[)"
    r"|(?P<rvect>\])"
    r"|(?P<quote>')"
    r'|(?P<string>"(?:\\.|[^\\"])*")'
    r"|(?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?" + _DELIMITER + ")"
    r'|(?P<symbol>[^\s()\[\]";]+)',
    re.DOTALL,
)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, value) in source order."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos] == '"':
                raise ParensLexError(f"unterminated string at {pos}")
            raise ParensLexError(f"unrecognized input at {pos}: {source[pos]!r}")
        kind = m.lastgroup
        yield Token(TokenKind(kind), m.group(kind))
        pos = m.end()


def tokenize(source: str, source_name: str | None = None) -> list[Token]:
    """Lex the whole source into a list of tokens."""
    try:
        return list(lex(source))
    except ParensLexError as e:
        if source_name is None:
            raise
        raise ParensLexError(str(e), source_name) from None
