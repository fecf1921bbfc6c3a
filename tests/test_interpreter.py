import pytest

from teddy.interpreter import Interpreter
from teddy.reader.node import BracketStyle, Node, NodeKind
from teddy.types.error import Error
from teddy.types.errors import TeddySyntaxError
from teddy.types.expr import SExpr, qexpr
from teddy.types.symbol import Symbol


def test_eval_root_is_one_sexpr(interp):
    assert interp.eval("+ 1 2") == 3
    assert interp.eval("(+ 1 2)") == 3
    assert interp.eval("") == SExpr()


def test_state_persists_between_calls(interp):
    interp.eval("def {x} 10")
    assert interp.eval("* x 2") == 20


def test_run_evaluates_each_expression(interp):
    results = interp.run("(def {x} 1) (+ x 1) {a b} 5")
    assert results == [SExpr(), 2, qexpr(Symbol("a"), Symbol("b")), 5]


def test_run_continues_after_error_value(interp):
    results = interp.run("(/ 1 0) (+ 1 1)")
    assert results == [Error("Division By Zero!"), 2]


def test_eval_node_from_external_tree(interp):
    node = Node.group(
        [
            Node(NodeKind.PUNCT, "("),
            Node.symbol("head"),
            Node.group(
                [Node(NodeKind.PUNCT, "{"), Node.number("1"), Node.number("2"), Node(NodeKind.PUNCT, "}")],
                BracketStyle.CURLY,
            ),
            Node(NodeKind.PUNCT, ")"),
        ],
        BracketStyle.ROUND,
    )
    assert interp.eval_node(node) == qexpr(1)


def test_syntax_errors_are_raised(interp):
    with pytest.raises(TeddySyntaxError):
        interp.eval("(+ 1 2")


def test_render(interp):
    assert interp.render(interp.eval("list 1 2.5 {x}")) == "{1 2.500000 {x}}"
    assert interp.render(interp.eval("/ 1 0")) == "Error: Division By Zero!"


def test_runaway_recursion_becomes_error(interp):
    interp.eval("def {loop} (\\ {n} {loop n})")
    assert interp.eval("loop 1") == Error("Maximum recursion depth exceeded.")
    # The interpreter is still usable afterwards
    assert interp.eval("+ 1 1") == 2


def test_interpreters_are_isolated():
    first, second = Interpreter(prelude=None), Interpreter(prelude=None)
    first.eval("def {x} 1")
    assert second.eval("x") == Error("Unbound Symbol 'x'")
