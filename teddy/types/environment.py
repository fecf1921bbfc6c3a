"""Runtime environment for Teddy.

The Environment stores bindings of Symbols to values and supports nested
scopes via an `outer` link. The link is only ever followed for lookups and
global definitions; an Environment never manages the lifetime of its parent.
"""

from __future__ import annotations

from typing import Iterator, Optional

from teddy import LispValue
from teddy.types.errors import TeddyTypeError, TeddyUnboundSymbol
from teddy.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Teddy values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, overwriting any local binding.

        Raises TeddyTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise TeddyTypeError(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def define_global(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` in the outermost environment of the chain."""
        self.root().define(name, value)

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Return a copy of the value bound to `name`.

        Raises TeddyUnboundSymbol if no frame in the chain binds it.
        """
        from teddy.types.values import copy_value

        env = self.find(name)
        if env is None:
            raise TeddyUnboundSymbol(f"Unbound Symbol '{name}'")
        return copy_value(env.vars[name])

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def names(self) -> list[Symbol]:
        """Bound names across the chain, innermost frame first, without repeats."""
        seen: dict[Symbol, None] = {}
        for env in self._chain():
            for k in env.vars:
                seen.setdefault(k, None)
        return list(seen)

    def flatten(self) -> dict[Symbol, LispValue]:
        """All bindings visible from this frame; inner frames shadow outer ones."""
        merged: dict[Symbol, LispValue] = {}
        for env in reversed(list(self._chain())):
            merged.update(env.vars)
        return merged

    def _chain(self) -> Iterator[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None
