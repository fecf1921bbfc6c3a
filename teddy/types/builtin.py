from __future__ import annotations

from teddy import BuiltinFn


class Builtin:
    """A native operation registered under a name.

    Two Builtin values are equal when they wrap the same native function,
    whatever name they were registered under.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn

    def copy(self) -> Builtin:
        return self

    def __eq__(self, other) -> bool:
        return isinstance(other, Builtin) and self.fn is other.fn

    def __hash__(self) -> int:
        return hash(self.fn)

    def __repr__(self):
        return f"Builtin({self.name!r})"

    def __str__(self):
        return "<builtin>"
