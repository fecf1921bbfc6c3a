"""Conditional, definition, lambda and introspection builtins."""

from __future__ import annotations

from typing import Callable

from teddy import LispValue
from teddy.builtin.validate import (
    expect_at_least,
    expect_count,
    expect_number,
    expect_qexpr,
)
from teddy.evaluation.evaluator import evaluate
from teddy.types.environment import Environment
from teddy.types.errors import TeddyArityError, TeddyTypeError
from teddy.types.expr import QExpr, SExpr
from teddy.types.lambda_fn import Lambda
from teddy.types.symbol import Symbol
from teddy.types.values import type_name


def if_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(if cond {then} {else}); only the chosen branch is evaluated."""
    expect_count("if", args, 3)
    cond = expect_number("if", args, 0)
    then_branch = expect_qexpr("if", args, 1)
    else_branch = expect_qexpr("if", args, 2)
    branch = then_branch if cond != 0 else else_branch
    return evaluate(branch.eager(), env)


def _expect_symbols(name: str, xs: QExpr) -> None:
    for x in xs:
        if not isinstance(x, Symbol):
            raise TeddyTypeError(
                f"Function '{name}' cannot define non-symbol. "
                f"Got {type_name(x)}, Expected Symbol."
            )


def _define(
    name: str,
    args: list[LispValue],
    bind: Callable[[Symbol, LispValue], None],
) -> SExpr:
    expect_at_least(name, args, 1)
    syms = expect_qexpr(name, args, 0)
    _expect_symbols(name, syms)
    values = args[1:]
    if len(syms) != len(values):
        raise TeddyArityError(
            f"Function '{name}' passed incorrect number of values for symbols. "
            f"Got {len(values)}, Expected {len(syms)}."
        )
    for sym, value in zip(syms, values):
        bind(sym, value)
    return SExpr()


def define_global(env: Environment, args: list[LispValue]) -> SExpr:
    """(def {a b} 1 2) binds at the root environment."""
    return _define("def", args, env.define_global)


def define_local(env: Environment, args: list[LispValue]) -> SExpr:
    """(= {a b} 1 2) binds in the current environment only."""
    return _define("=", args, env.define)


def lambda_builtin(env: Environment, args: list[LispValue]) -> Lambda:
    """(\\ {formals} {body}) => a Lambda over a fresh, empty environment."""
    expect_count("\\", args, 2)
    formals = expect_qexpr("\\", args, 0)
    body = expect_qexpr("\\", args, 1)
    _expect_symbols("\\", formals)
    return Lambda(formals.copy(), body.copy(), Environment())


def print_env(env: Environment, args: list[LispValue]) -> SExpr:
    """Print the names bound in the current environment chain; returns ().

    A one-element list evaluates to its element without applying it, so the
    call is written (print ()); arguments are ignored.
    """
    print(" ".join(str(name) for name in env.names()))
    return SExpr()
