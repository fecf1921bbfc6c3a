"""Registration of the builtin library into a root environment."""
from __future__ import annotations

from teddy import BuiltinFn
from teddy.builtin import arithmetic, compare, control, lists
from teddy.types.builtin import Builtin
from teddy.types.environment import Environment
from teddy.types.symbol import Symbol

BUILTINS: dict[str, BuiltinFn] = {
    # Arithmetic
    "+": arithmetic.add,
    "-": arithmetic.sub,
    "*": arithmetic.mul,
    "/": arithmetic.div,
    "%": arithmetic.mod,
    "^": arithmetic.power,
    "min": arithmetic.minimum,
    "max": arithmetic.maximum,
    # Lists
    "list": lists.list_builtin,
    "head": lists.head,
    "tail": lists.tail,
    "init": lists.init,
    "len": lists.length,
    "eval": lists.eval_builtin,
    "join": lists.join,
    "cons": lists.cons,
    # Comparison
    ">": compare.gt,
    "<": compare.lt,
    ">=": compare.gte,
    "<=": compare.lte,
    "==": compare.equals,
    "!=": compare.not_equals,
    # Control
    "if": control.if_builtin,
    "def": control.define_global,
    "=": control.define_local,
    "\\": control.lambda_builtin,
    "print": control.print_env,
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
