"""Reader: lexer, token cursor and recursive-descent parser."""

from parens.reader.lexer import Token, TokenKind, tokenize
from parens.reader.parser import Parser, parse

__all__ = ["Token", "TokenKind", "tokenize", "Parser", "parse"]
