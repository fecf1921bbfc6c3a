"""Textual rendering of Teddy values.

    integers   decimal                  42
    floats     fixed-point              3.500000
    errors     Error: <message>         Error: Division By Zero!
    symbols    verbatim                 head
    eager      ( ... )                  (+ 1 2)
    quoted     { ... }                  {1 2 3}
    functions  <builtin> / (\\ {..} {..})
"""

from __future__ import annotations

from io import StringIO

from teddy import LispValue
from teddy.config import get_float_precision
from teddy.types.expr import QExpr, SExpr
from teddy.types.values import is_float, is_integer


def render(value: LispValue) -> str:
    with StringIO() as buffer:
        _write(buffer, value, get_float_precision())
        return buffer.getvalue()


def _write(buffer: StringIO, value: LispValue, precision: int) -> None:
    if is_integer(value):
        buffer.write(str(value))
    elif is_float(value):
        buffer.write(f"{value:.{precision}f}")
    elif isinstance(value, (SExpr, QExpr)):
        buffer.write(value.OPEN)
        for i, item in enumerate(value):
            if i:
                buffer.write(" ")
            _write(buffer, item, precision)
        buffer.write(value.CLOSE)
    else:
        # Error, Symbol, Builtin and Lambda know their own text form
        buffer.write(str(value))
