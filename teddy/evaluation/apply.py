"""Application engine for Teddy.

This module centralizes function application semantics for the interpreter:
- Builtins are called with the caller's environment and the argument list.
- Lambdas bind their formals positionally; `&` collects the remaining
  arguments into a Q-Expression.
- Supplying fewer arguments than formals is partial application: the result
  is a new Lambda waiting for the rest, never an error.
- TeddyError raised while applying is turned into an Error value here, so
  exceptions never cross the evaluator boundary.
"""

from __future__ import annotations

import logging

from teddy import EvaluatorFn, LispValue
from teddy.types.builtin import Builtin
from teddy.types.environment import Environment
from teddy.types.error import Error
from teddy.types.errors import TeddyArityError, TeddyError, TeddyTypeError
from teddy.types.expr import QExpr
from teddy.types.lambda_fn import Lambda
from teddy.types.symbol import REST_MARKER, Symbol
from teddy.types.values import type_name

logger = logging.getLogger(__name__)


def apply(
    head: Builtin | Lambda,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Builtin or a Lambda to already-evaluated `args`.

    If any argument is an Error, the first one is returned and nothing is
    invoked.
    """
    for arg in args:
        if isinstance(arg, Error):
            return arg

    try:
        if isinstance(head, Builtin):
            logger.debug("apply builtin %s to %d args", head.name, len(args))
            return head.fn(env, list(args))
        if isinstance(head, Lambda):
            return apply_lambda(head, list(args), env, evaluate_fn)
        raise TeddyTypeError(f"Cannot apply non-function. Got {type_name(head)}.")
    except TeddyError as e:
        logger.debug("apply failed: %s", e)
        return Error(str(e))


def bind_arguments(
    fn: Lambda, supplied: list[LispValue]
) -> tuple[dict[Symbol, LispValue], list[Symbol]]:
    """Bind `supplied` to the formals of `fn`.

    Returns the new bindings and the formals still unbound. Raises
    TeddyArityError when there are more arguments than formals and
    TeddyTypeError when `&` is not followed by exactly one formal.
    """
    formals = list(fn.formals)
    given, total = len(supplied), len(formals)
    bindings: dict[Symbol, LispValue] = {}

    while supplied:
        if not formals:
            raise TeddyArityError(
                f"Function passed too many arguments. Got {given}, Expected {total}."
            )
        sym = formals.pop(0)
        if sym == REST_MARKER:
            _check_rest(formals, 1)
            bindings[formals.pop(0)] = QExpr(supplied)
            supplied = []
            break
        bindings[sym] = supplied.pop(0)

    # Arguments exhausted with only `& name` left: name gets the empty list
    if formals and formals[0] == REST_MARKER:
        _check_rest(formals, 2)
        bindings[formals[1]] = QExpr()
        formals = []

    return bindings, formals


def _check_rest(formals: list[Symbol], expected: int) -> None:
    if len(formals) != expected:
        raise TeddyTypeError(
            "Function format invalid. Symbol '&' not followed by single symbol."
        )


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lambda value.

    - Fewer arguments than formals: return a new Lambda over the remaining
      formals whose environment holds the bindings made so far, chained
      under `fn.env`. `fn` itself is not modified.
    - All formals bound: evaluate the body as an S-Expression in a fresh
      environment holding the closure's bindings, whose parent is
      `caller_env`.
    """
    bindings, remaining = bind_arguments(fn, args)

    if remaining:
        partial_env = Environment(outer=fn.env)
        partial_env.update(bindings)
        logger.debug("partial application, %d formals left", len(remaining))
        return Lambda(QExpr(remaining), fn.body.copy(), partial_env)

    call_env = Environment(outer=caller_env)
    call_env.update(fn.env.flatten())
    call_env.update(bindings)
    return evaluate_fn(fn.body.eager(), call_env)
