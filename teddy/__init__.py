# Core type aliases for Teddy's data model.
# Values are plain Python objects: int and float for the two numeric kinds,
# and small classes under teddy.types for errors, symbols, lists and functions.
#
# Naming guidance:
# - LispValue: any evaluated or unevaluated Teddy value (code is data here).
# - BuiltinFn: the native signature every builtin implements.

from typing import Any, Callable

LispValue = Any

# Native builtin signature: (environment, evaluated arguments) -> value
BuiltinFn = Callable[..., LispValue]

# Evaluator function type: passed into the apply engine for closure bodies
EvaluatorFn = Callable[..., LispValue]
