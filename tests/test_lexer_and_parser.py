import pytest
from hypothesis import given, strategies as st

from teddy.reader.node import BracketStyle, NodeKind
from teddy.reader.parser import TokenStream, lex, parse
from teddy.reader.reader import read
from teddy.types.error import Error
from teddy.types.errors import TeddySyntaxError
from teddy.types.expr import QExpr, SExpr, qexpr, sexpr
from teddy.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("42", [("number", "42")]),
        ("-42", [("number", "-42")]),
        ("3.25", [("number", "3.25")]),
        ("-", [("symbol", "-")]),
        ("1a", [("symbol", "1a")]),
        ("(+ 1 2)", [("lparen", "("), ("symbol", "+"), ("number", "1"), ("number", "2"), ("rparen", ")")]),
        ("{a b}", [("lbrace", "{"), ("symbol", "a"), ("symbol", "b"), ("rbrace", "}")]),
        ("(1)", [("lparen", "("), ("number", "1"), ("rparen", ")")]),
        ("\\ & == != <= >= % ^", [("symbol", s) for s in ["\\", "&", "==", "!=", "<=", ">=", "%", "^"]]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("a ; trailing", [("symbol", "a")]),
        ("add-together my_var", [("symbol", "add-together"), ("symbol", "my_var")]),
        ("", []),
    ],
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize("source", ["\"string\"", "a.b", "#t", "1.", "[1]"])
def test_lexer_rejects_characters_outside_grammar(source):
    with pytest.raises(TeddySyntaxError):
        list(lex(source))


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", sexpr(123)),
        ("-45", sexpr(-45)),
        ("3.14", sexpr(3.14)),
        ("+ 1 2", sexpr(Symbol("+"), 1, 2)),
        ("(+ 1 2)", sexpr(sexpr(Symbol("+"), 1, 2))),
        ("{1 {2 3}}", sexpr(qexpr(1, qexpr(2, 3)))),
        ("(head {1 2}) 3", sexpr(sexpr(Symbol("head"), qexpr(1, 2)), 3)),
        ("", SExpr()),
        ("()", sexpr(SExpr())),
        ("{}", sexpr(QExpr())),
    ],
)
def test_parse_and_read(source, expected):
    assert read(parse(source)) == expected


def test_parse_keeps_bracket_markers():
    root = parse("(a)")
    assert root.kind is NodeKind.GROUP
    assert root.bracket_style is None
    group = root.children[0]
    assert group.bracket_style is BracketStyle.ROUND
    assert [c.kind for c in group.children] == [NodeKind.PUNCT, NodeKind.SYMBOL, NodeKind.PUNCT]
    assert [c.text for c in group.children] == ["(", "a", ")"]


def test_parse_all_yields_top_level_expressions():
    stream = TokenStream(lex("(def {x} 1) x {y}"))
    values = [read(node) for node in stream.parse_all()]
    assert values == [sexpr(Symbol("def"), qexpr(Symbol("x")), 1), Symbol("x"), qexpr(Symbol("y"))]


def test_overflowing_literal_reads_as_error():
    assert read(parse("99999999999999999999")) == sexpr(Error("bad number"))


@pytest.mark.parametrize("source", ["(", "(a", "{a b", ")", "(a}", "{a)", "a )"])
def test_parser_rejects_unbalanced_brackets(source):
    with pytest.raises(TeddySyntaxError):
        parse(source)


# -------------------------------
# Strategies
# -------------------------------
symbol_strat = st.text(
    st.sampled_from("abcxyz_+-*/\\=<>!&%^"), min_size=1, max_size=8
).filter(lambda s: not s.lstrip("-").isdigit())

number_strat = st.one_of(
    st.integers(min_value=-1000, max_value=1000).map(str),
    st.tuples(st.integers(min_value=-1000, max_value=1000), st.integers(min_value=0, max_value=999)).map(
        lambda t: f"{t[0]}.{t[1]}"
    ),
)

atom_strat = st.one_of(symbol_strat, number_strat)

expr_strat = st.recursive(
    atom_strat,
    lambda children: st.one_of(
        st.lists(children, max_size=4).map(lambda xs: "(" + " ".join(xs) + ")"),
        st.lists(children, max_size=4).map(lambda xs: "{" + " ".join(xs) + "}"),
    ),
    max_leaves=12,
)

# -------------------------------
# Hypothesis tests
# -------------------------------
@given(st.lists(expr_strat, max_size=4).map(" ".join))
def test_parser_no_crash(source):
    value = read(parse(source))
    assert isinstance(value, SExpr)


@given(expr_strat)
def test_top_level_expression_count(source):
    assert len(list(TokenStream(lex(source)).parse_all())) == 1
