"""Argument checks shared by the builtins.

Each check raises a TeddyError subclass naming the builtin, the argument
index and what was expected; the apply engine turns it into an Error value.
"""

from __future__ import annotations

from typing import Callable

from teddy import LispValue
from teddy.types.errors import TeddyArityError, TeddyEmptyListError, TeddyTypeError
from teddy.types.expr import QExpr
from teddy.types.values import is_number, type_name


def expect_count(name: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        raise TeddyArityError(
            f"Function '{name}' passed incorrect number of arguments. "
            f"Got {len(args)}, Expected {n}."
        )


def expect_at_least(name: str, args: list[LispValue], n: int) -> None:
    if len(args) < n:
        raise TeddyArityError(
            f"Function '{name}' passed too few arguments. "
            f"Got {len(args)}, Expected at least {n}."
        )


def expect_type(
    name: str,
    args: list[LispValue],
    i: int,
    check: Callable[[LispValue], bool],
    expected: str,
) -> None:
    if not check(args[i]):
        raise TeddyTypeError(
            f"Function '{name}' passed incorrect type for argument {i}. "
            f"Got {type_name(args[i])}, Expected {expected}."
        )


def expect_qexpr(name: str, args: list[LispValue], i: int) -> QExpr:
    expect_type(name, args, i, lambda x: isinstance(x, QExpr), "Q-Expression")
    return args[i]


def expect_number(name: str, args: list[LispValue], i: int) -> LispValue:
    expect_type(name, args, i, is_number, "Number")
    return args[i]


def expect_nonempty(name: str, args: list[LispValue], i: int) -> None:
    if not args[i]:
        raise TeddyEmptyListError(f"Function '{name}' passed {{}} for argument {i}.")
