import pytest

from parens.evaluation.evaluator import evaluate
from parens.reader.expressions import (
    ListExpr,
    NumberExpr,
    QuoteExpr,
    StringExpr,
    SymbolExpr,
    ValueExpr,
)
from parens.reader.parser import parse
from parens.types.errors import ParensCallError, ParensUnboundSymbol
from parens.types.macro import Macro


def run(scope, source):
    return parse(source).eval(scope)


def test_self_evaluating_literals(scope):
    assert run(scope, "1") == 1.0
    assert run(scope, "-2.5") == -2.5
    assert run(scope, '"hello"') == "hello"
    assert run(scope, "true") is True
    assert run(scope, "false") is False
    assert run(scope, "nil") is None


def test_number_is_parsed_once():
    n = NumberExpr("2.5")
    assert n._value is None
    assert n.number() == 2.5
    assert n._value == 2.5
    # The cache does not take part in equality
    assert n == NumberExpr("2.5")


@pytest.mark.parametrize(
    "raw,expected",
    [
        (r'"a\nb"', "a\nb"),
        (r'"say \"hi\""', 'say "hi"'),
        (r'"tab\there"', "tab\\there"),
        (r'"back\\slash"', "back\\\\slash"),
        (r'"a\\nb"', "a\\\nb"),
        (r'"keep \q"', "keep \\q"),
    ],
)
def test_string_escapes(raw, expected):
    assert StringExpr(raw).string() == expected


def test_symbol_lookup(scope):
    assert run(scope, "two") == 2.0
    with pytest.raises(ParensUnboundSymbol):
        run(scope, "undefined-thing")


def test_empty_list_is_self_evaluating(scope):
    assert run(scope, "()") == []


def test_function_call(scope):
    assert run(scope, "(add 1 2)") == 3.0
    assert run(scope, "(add (add 1 2) (sub 10 4))") == 9.0
    assert run(scope, "(* 2 3 4)") == 24.0


def test_vector_is_eager(scope):
    assert run(scope, "[1 (add 1 2) two]") == [1.0, 3.0, 2.0]
    assert run(scope, "[]") == []


def test_vector_does_not_intercept_macros(scope):
    # `do` as a vector element is just its value, not a macro call
    result = run(scope, "[do 1]")
    assert isinstance(result[0], Macro)
    assert result[1] == 1.0


def test_quote_returns_unevaluated_expression(scope):
    assert run(scope, "'(add 1 2)") == ListExpr(
        (SymbolExpr("add"), NumberExpr("1"), NumberExpr("2"))
    )
    assert run(scope, "'undefined-thing") == SymbolExpr("undefined-thing")


def test_unquote_eval(scope):
    q = QuoteExpr(parse("(add 1 2)"))
    assert q.eval(scope) == parse("(add 1 2)")
    assert q.unquote_eval(scope) == 3.0


def test_value_expression(scope):
    assert evaluate(ValueExpr([1, 2]), scope) == [1, 2]


def test_module_evaluates_forms_in_order(scope):
    assert run(scope, "(label x 4)\n(add x 1)") == 5.0


def test_macro_receives_unevaluated_args_and_name(scope):
    seen = {}

    def capture(s, name, exprs):
        seen["scope"] = s
        seen["name"] = name
        seen["exprs"] = exprs
        return "captured"

    scope.bind("capture", Macro(capture))
    assert run(scope, "(capture undefined-thing (boom))") == "captured"
    assert seen["scope"] is scope
    assert seen["name"] == "capture"
    assert seen["exprs"] == [SymbolExpr("undefined-thing"), ListExpr((SymbolExpr("boom"),))]


def test_macro_reached_without_a_name(scope):
    names = []
    m = Macro(lambda s, name, exprs: names.append(name))
    scope.bind("get-macro", lambda: m)
    run(scope, "((get-macro) a b)")
    assert names == [""]


def test_arguments_are_evaluated_left_to_right(scope):
    order = []

    def push(x: float) -> float:
        order.append(x)
        return x

    scope.bind("push", push)
    scope.bind("list3", lambda a, b, c: [a, b, c])
    assert run(scope, "(list3 (push 1) (push 2) (push 3))") == [1.0, 2.0, 3.0]
    assert order == [1.0, 2.0, 3.0]


def test_argument_failure_is_fail_fast(scope):
    calls = []
    scope.bind("record", lambda *xs: calls.append(xs))
    with pytest.raises(ParensUnboundSymbol):
        run(scope, "(record (record 1) undefined-thing (record 2))")
    # First argument ran, the one after the failure did not, the call never happened
    assert calls == [(1.0,)]


@pytest.mark.parametrize("source", ["(1 2)", '("s")', "(two)", "((add 1 2))"])
def test_value_is_not_callable(scope, source):
    with pytest.raises(ParensCallError, match="not callable"):
        run(scope, source)
