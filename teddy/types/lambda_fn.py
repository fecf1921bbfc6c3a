"""Lambda (closure) representation for Teddy."""

from __future__ import annotations

from io import StringIO

from teddy.types.environment import Environment
from teddy.types.expr import QExpr


class Lambda:
    """A first-class lambda with formal parameters, body, and closure env.

    Lambdas are never mutated after construction. Partial application builds
    a new Lambda (see teddy.evaluation.apply) so copies that alias the same
    environment stay independent.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: QExpr, body: QExpr, env: Environment | None = None):
        self.formals: QExpr = formals
        self.body: QExpr = body
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()

    def copy(self) -> Lambda:
        """Copy formals and body by value; the captured env is shared."""
        return Lambda(self.formals.copy(), self.body.copy(), self.env)

    def __eq__(self, other) -> bool:
        # The captured environment is deliberately not compared
        return (
            isinstance(other, Lambda)
            and self.formals == other.formals
            and self.body == other.body
        )

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(\\ ")
            buffer.write(str(self.formals))
            buffer.write(" ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)
