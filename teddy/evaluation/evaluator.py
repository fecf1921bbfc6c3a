"""Core evaluator for the Teddy interpreter.

Errors are values: an Error produced anywhere in an S-Expression stops the
evaluation of that list and becomes its result. Nothing raised by the
environment or by a builtin escapes `evaluate`.
"""

from __future__ import annotations

import logging

from teddy import LispValue
from teddy.evaluation.apply import apply
from teddy.types.environment import Environment
from teddy.types.error import Error
from teddy.types.errors import TeddyUnboundSymbol
from teddy.types.expr import SExpr
from teddy.types.symbol import Symbol
from teddy.types.values import is_function, type_name

logger = logging.getLogger(__name__)


def evaluate(expr: LispValue, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`.

    - Symbol: looked up in the environment chain.
    - SExpr: evaluated as an application.
    - Anything else (numbers, errors, Q-Expressions, functions) is
      self-evaluating.
    """
    match expr:
        case Symbol():
            try:
                return env.lookup(expr)
            except TeddyUnboundSymbol as e:
                logger.debug("lookup failed: %s", e)
                return Error(str(e))
        case SExpr():
            return evaluate_sexpr(expr, env)

    # --- Atoms return as-is ---
    return expr


def evaluate_sexpr(expr: SExpr, env: Environment) -> LispValue:
    # Children are evaluated into a new list; `expr` itself is left untouched
    values = SExpr()
    for item in expr:
        value = evaluate(item, env)
        if isinstance(value, Error):
            # First error wins; later siblings are never evaluated
            return value
        values.append(value)

    if not values:
        return values
    if len(values) == 1:
        return values[0]

    head, *args = values
    if not is_function(head):
        return Error(
            f"S-Expression starts with incorrect type. "
            f"Got {type_name(head)}, Expected Function."
        )
    return apply(head, args, env, evaluate)
