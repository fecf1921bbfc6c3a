"""List builtins operating on Q-Expressions."""

from __future__ import annotations

from teddy import LispValue
from teddy.builtin.validate import (
    expect_at_least,
    expect_count,
    expect_nonempty,
    expect_qexpr,
    expect_type,
)
from teddy.evaluation.evaluator import evaluate
from teddy.types.environment import Environment
from teddy.types.expr import QExpr, SExpr


def list_builtin(env: Environment, args: list[LispValue]) -> QExpr:
    """(list a b c) => {a b c}"""
    return QExpr(args)


def head(env: Environment, args: list[LispValue]) -> QExpr:
    """First element, still wrapped: (head {1 2 3}) => {1}"""
    expect_count("head", args, 1)
    xs = expect_qexpr("head", args, 0)
    expect_nonempty("head", args, 0)
    return QExpr(xs[:1])


def tail(env: Environment, args: list[LispValue]) -> QExpr:
    """All but the first element: (tail {1 2 3}) => {2 3}"""
    expect_count("tail", args, 1)
    xs = expect_qexpr("tail", args, 0)
    expect_nonempty("tail", args, 0)
    return QExpr(xs[1:])


def init(env: Environment, args: list[LispValue]) -> QExpr:
    """All but the last element: (init {1 2 3}) => {1 2}"""
    expect_count("init", args, 1)
    xs = expect_qexpr("init", args, 0)
    expect_nonempty("init", args, 0)
    return QExpr(xs[:-1])


def length(env: Environment, args: list[LispValue]) -> int:
    expect_count("len", args, 1)
    return len(expect_qexpr("len", args, 0))


def eval_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Evaluate a Q-Expression as code in the caller's environment."""
    expect_count("eval", args, 1)
    return evaluate(expect_qexpr("eval", args, 0).eager(), env)


def join(env: Environment, args: list[LispValue]) -> QExpr:
    expect_at_least("join", args, 1)
    result = QExpr()
    for i in range(len(args)):
        result.extend(expect_qexpr("join", args, i))
    return result


def cons(env: Environment, args: list[LispValue]) -> QExpr:
    """(cons 1 {2 3}) => {1 2 3}"""
    expect_count("cons", args, 2)
    expect_type(
        "cons", args, 0, lambda x: not isinstance(x, (SExpr, QExpr)), "non-list value"
    )
    xs = expect_qexpr("cons", args, 1)
    return QExpr([args[0], *xs])
