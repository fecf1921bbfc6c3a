"""List values for Teddy.

Both list forms are Python lists underneath; the subclass decides how the
evaluator treats them:

- SExpr ( ... ): evaluated as a function application.
- QExpr { ... }: inert data, the language's literal list type.

Slicing a list returns a plain Python list, so callers re-wrap results in
the form they need.
"""

from __future__ import annotations

from teddy import LispValue


class _Expr(list):
    OPEN = ""
    CLOSE = ""

    __hash__ = None

    def __eq__(self, other) -> bool:
        from teddy.types.values import is_equal

        if type(self) is not type(other) or len(self) != len(other):
            return False
        return all(is_equal(a, b) for a, b in zip(self, other))

    def __ne__(self, other) -> bool:
        return not self == other

    def copy(self):
        """Deep copy: a list owns its elements, so nested lists are copied too."""
        from teddy.types.values import copy_value

        return type(self)(copy_value(x) for x in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list.__repr__(self)})"

    def __str__(self) -> str:
        from teddy.printer import render

        return render(self)


class SExpr(_Expr):
    """Eager list: evaluated as (function arg ...)."""

    OPEN = "("
    CLOSE = ")"

    def quoted(self) -> QExpr:
        return QExpr(self)


class QExpr(_Expr):
    """Quoted list: never evaluated unless re-tagged with eager()."""

    OPEN = "{"
    CLOSE = "}"

    def eager(self) -> SExpr:
        return SExpr(self)


def qexpr(*items: LispValue) -> QExpr:
    return QExpr(items)


def sexpr(*items: LispValue) -> SExpr:
    return SExpr(items)
