import pytest
from hypothesis import given, strategies as st

from parens.reader.lexer import Token, TokenKind, tokenize
from parens.types.errors import ParensLexError


def _significant(tokens):
    skipped = (TokenKind.WHITESPACE, TokenKind.NEWLINE, TokenKind.COMMENT)
    return [(t.kind, t.value) for t in tokens if t.kind not in skipped]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("(a b)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("rparen", ")")]),
        ("[1 2]", [("lvect", "["), ("number", "1"), ("number", "2"), ("rvect", "]")]),
        ('"hello"', [("string", '"hello"')]),
        ('"say \\"hi\\""', [("string", '"say \\"hi\\""')]),
        ("-5 +3 .5 1.25 1e3", [("number", "-5"), ("number", "+3"), ("number", ".5"),
                               ("number", "1.25"), ("number", "1e3")]),
        ("- + -> ->>", [("symbol", "-"), ("symbol", "+"), ("symbol", "->"), ("symbol", "->>")]),
        ("1abc", [("symbol", "1abc")]),
        ("'x", [("quote", "'"), ("symbol", "x")]),
        ("a ; comment\nb", [("symbol", "a"), ("symbol", "b")]),
        ("(add 1(sub 2 3))", [("lparen", "("), ("symbol", "add"), ("number", "1"),
                              ("lparen", "("), ("symbol", "sub"), ("number", "2"),
                              ("number", "3"), ("rparen", ")"), ("rparen", ")")]),
    ],
)
def test_lexer_basic(source, expected):
    assert _significant(tokenize(source)) == expected


def test_whitespace_and_newlines_are_tokens():
    tokens = tokenize("a \n b")
    assert tokens == [
        Token(TokenKind.SYMBOL, "a"),
        Token(TokenKind.WHITESPACE, " "),
        Token(TokenKind.NEWLINE, "\n"),
        Token(TokenKind.WHITESPACE, " "),
        Token(TokenKind.SYMBOL, "b"),
    ]


def test_unbalanced_brackets_still_lex():
    # Balance is the parser's job
    assert [t.kind for t in tokenize(")(]")] == [TokenKind.RPAREN, TokenKind.LPAREN, TokenKind.RVECT]


def test_unterminated_string_is_lex_failure():
    with pytest.raises(ParensLexError, match="unterminated string at 3"):
        tokenize('(a "abc')


def test_lex_failure_carries_source_name():
    with pytest.raises(ParensLexError) as info:
        tokenize('"abc', "script.lisp")
    assert info.value.source_name == "script.lisp"
    assert str(info.value).startswith("script.lisp: ")


@given(st.text(alphabet="()[] \n\t\"\\;'abc-+.0123456789"))
def test_relexing_is_deterministic(source):
    try:
        first = tokenize(source)
    except ParensLexError:
        with pytest.raises(ParensLexError):
            tokenize(source)
        return
    assert tokenize(source) == first
    # Tokens cover the input exactly
    assert "".join(t.value for t in first) == source
