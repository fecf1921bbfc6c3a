"""Convert a generic parse tree into Teddy values.

    number leaf        -> int, or float when the text has a '.'
    symbol leaf        -> Symbol
    ( ... ) group      -> SExpr
    { ... } group      -> QExpr
    root group         -> SExpr
    punctuation        -> skipped

A number that cannot be represented becomes Error("bad number") in place;
the rest of the tree is still read.
"""

from __future__ import annotations

import math
import re

from teddy import LispValue
from teddy.reader.node import BracketStyle, Node, NodeKind
from teddy.types.error import Error
from teddy.types.errors import TeddySyntaxError
from teddy.types.expr import QExpr, SExpr
from teddy.types.symbol import Symbol
from teddy.types.values import fits_int64


# Same shape the lexer accepts: ASCII digits, optional sign and fraction
NUMBER_RE = re.compile(r"-?[0-9]+(\.[0-9]+)?")


def read_number(text: str) -> LispValue:
    m = NUMBER_RE.fullmatch(text)
    if m is None:
        return Error("bad number")
    if m.group(1):
        x = float(text)
        return x if math.isfinite(x) else Error("bad number")
    n = int(text, 10)
    return n if fits_int64(n) else Error("bad number")


def read(node: Node) -> LispValue:
    match node.kind:
        case NodeKind.NUMBER:
            return read_number(node.text)
        case NodeKind.SYMBOL:
            return Symbol(node.text)
        case NodeKind.GROUP:
            expr = QExpr() if node.bracket_style is BracketStyle.CURLY else SExpr()
            for child in node.children:
                if child.kind is NodeKind.PUNCT:
                    continue
                expr.append(read(child))
            return expr
    raise TeddySyntaxError(f"Cannot read node of kind {node.kind!r}")
