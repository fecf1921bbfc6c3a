"""Helpers shared by every part of the runtime: variant names, numeric
checks, structural equality and value copying."""

from __future__ import annotations

from teddy import LispValue
from teddy.types.builtin import Builtin
from teddy.types.error import Error
from teddy.types.expr import QExpr, SExpr
from teddy.types.lambda_fn import Lambda
from teddy.types.symbol import Symbol

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def is_integer(x: LispValue) -> bool:
    # bool is an int subclass but never a Teddy value
    return isinstance(x, int) and not isinstance(x, bool)


def is_float(x: LispValue) -> bool:
    return isinstance(x, float)


def is_number(x: LispValue) -> bool:
    return is_integer(x) or is_float(x)


def fits_int64(n: int) -> bool:
    return INT64_MIN <= n <= INT64_MAX


def is_function(x: LispValue) -> bool:
    return isinstance(x, (Builtin, Lambda))


def type_name(x: LispValue) -> str:
    """Human-readable variant name used in error messages."""
    match x:
        case bool():
            return "Boolean"
        case int():
            return "Integer"
        case float():
            return "Float"
        case Error():
            return "Error"
        case Symbol():
            return "Symbol"
        case SExpr():
            return "S-Expression"
        case QExpr():
            return "Q-Expression"
        case Builtin() | Lambda():
            return "Function"
    return type(x).__name__


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality; variant tags must match exactly (1 != 1.0)."""
    if a is b:
        return True
    if type(a) != type(b):
        return False
    return a == b


def copy_value(x: LispValue) -> LispValue:
    """Copy a value so the caller cannot mutate the original through it.

    Numbers, symbols and errors are immutable and returned as-is.
    """
    if isinstance(x, (SExpr, QExpr, Lambda)):
        return x.copy()
    return x
