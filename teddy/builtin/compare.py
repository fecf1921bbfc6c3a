"""Comparison builtins. Results are the Integers 1 (true) and 0 (false)."""

from __future__ import annotations

import operator
from typing import Callable

from teddy import LispValue
from teddy.builtin.validate import expect_count, expect_number
from teddy.types.environment import Environment
from teddy.types.values import is_equal, is_float


def _order(name: str, args: list[LispValue], op: Callable[[float, float], bool]) -> int:
    expect_count(name, args, 2)
    x = expect_number(name, args, 0)
    y = expect_number(name, args, 1)
    # Same widening rule as arithmetic
    if is_float(x) or is_float(y):
        x, y = float(x), float(y)
    return 1 if op(x, y) else 0


def gt(env: Environment, args: list[LispValue]) -> int:
    return _order(">", args, operator.gt)


def lt(env: Environment, args: list[LispValue]) -> int:
    return _order("<", args, operator.lt)


def gte(env: Environment, args: list[LispValue]) -> int:
    return _order(">=", args, operator.ge)


def lte(env: Environment, args: list[LispValue]) -> int:
    return _order("<=", args, operator.le)


def equals(env: Environment, args: list[LispValue]) -> int:
    """Structural equality over any two values; 1 and 1.0 are not equal."""
    expect_count("==", args, 2)
    return 1 if is_equal(args[0], args[1]) else 0


def not_equals(env: Environment, args: list[LispValue]) -> int:
    expect_count("!=", args, 2)
    return 0 if is_equal(args[0], args[1]) else 1
