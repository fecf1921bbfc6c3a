"""Arithmetic builtins: + - * / % ^ min max.

Every operator left-folds over one or more numbers. A step where either
operand is a Float is computed in floating point; otherwise both operands are
Integers and the result must fit in a signed 64-bit integer. Integer division
truncates toward zero and `%` takes the sign of the dividend. A Float result
that is not finite is an overflow error.
"""

from __future__ import annotations

import math

from teddy import LispValue
from teddy.builtin.validate import expect_at_least, expect_number
from teddy.types.environment import Environment
from teddy.types.errors import TeddyDomainError
from teddy.types.values import fits_int64, is_float


def _checked(n: int) -> int:
    if not fits_int64(n):
        raise TeddyDomainError("Integer Overflow!")
    return n


def _trunc_div(x: int, y: int) -> int:
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


def _int_pow(x: int, y: int) -> int:
    if y < 0:
        raise TeddyDomainError("Function '^' passed a negative Integer exponent.")
    # Anything but 0, 1, -1 overflows 64 bits well before exponent 64
    if abs(x) > 1 and y >= 64:
        raise TeddyDomainError("Integer Overflow!")
    return _checked(x**y)


def _finite(x: float) -> float:
    if not math.isfinite(x):
        raise TeddyDomainError("Float Overflow!")
    return x


def _float_step(op: str, x: float, y: float) -> float:
    match op:
        case "+":
            return _finite(x + y)
        case "-":
            return _finite(x - y)
        case "*":
            return _finite(x * y)
        case "/":
            if y == 0.0:
                raise TeddyDomainError("Division By Zero!")
            return _finite(x / y)
        case "%":
            raise TeddyDomainError("Function '%' passed a Float. Expected two Integers.")
        case "^":
            try:
                return _finite(math.pow(x, y))
            except ValueError:
                raise TeddyDomainError(f"Function '^' has no real result for {x} ^ {y}.")
            except OverflowError:
                raise TeddyDomainError("Float Overflow!")
        case "min":
            return min(x, y)
        case "max":
            return max(x, y)
    raise TeddyDomainError(f"Unknown operator '{op}'")


def _int_step(op: str, x: int, y: int) -> int:
    match op:
        case "+":
            return _checked(x + y)
        case "-":
            return _checked(x - y)
        case "*":
            return _checked(x * y)
        case "/":
            if y == 0:
                raise TeddyDomainError("Division By Zero!")
            return _checked(_trunc_div(x, y))
        case "%":
            if y == 0:
                raise TeddyDomainError("Division By Zero!")
            return x - y * _trunc_div(x, y)
        case "^":
            return _int_pow(x, y)
        case "min":
            return min(x, y)
        case "max":
            return max(x, y)
    raise TeddyDomainError(f"Unknown operator '{op}'")


def fold(op: str, args: list[LispValue]) -> LispValue:
    """Left-fold `op` over `args`, widening each step to float as needed."""
    expect_at_least(op, args, 1)
    for i in range(len(args)):
        expect_number(op, args, i)

    x = args[0]
    if op == "-" and len(args) == 1:
        return -x if is_float(x) else _checked(-x)

    for y in args[1:]:
        if is_float(x) or is_float(y):
            x = _float_step(op, float(x), float(y))
        else:
            x = _int_step(op, x, y)
    return x


def add(env: Environment, args: list[LispValue]) -> LispValue:
    return fold("+", args)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    return fold("-", args)


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    return fold("*", args)


def div(env: Environment, args: list[LispValue]) -> LispValue:
    return fold("/", args)


def mod(env: Environment, args: list[LispValue]) -> LispValue:
    """Remainder; defined for Integers only."""
    return fold("%", args)


def power(env: Environment, args: list[LispValue]) -> LispValue:
    return fold("^", args)


def minimum(env: Environment, args: list[LispValue]) -> LispValue:
    return fold("min", args)


def maximum(env: Environment, args: list[LispValue]) -> LispValue:
    return fold("max", args)
