"""Generic parse-tree nodes handed to the reader.

The reader never looks at source text; it only needs a node's kind, the
literal text of leaves, the ordered children of groups and, for groups, the
bracket style that delimited them. Any front end that can produce this shape
can feed the evaluator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class NodeKind(Enum):
    NUMBER = "number"
    SYMBOL = "symbol"
    GROUP = "group"
    PUNCT = "punct"  # bracket markers kept by the front end


class BracketStyle(Enum):
    ROUND = "()"
    CURLY = "{}"


@dataclass
class Node:
    kind: NodeKind
    text: str = ""
    children: list[Node] = field(default_factory=list)
    # None marks the implicit root group
    bracket_style: Optional[BracketStyle] = None

    @classmethod
    def number(cls, text: str) -> Node:
        return cls(NodeKind.NUMBER, text)

    @classmethod
    def symbol(cls, text: str) -> Node:
        return cls(NodeKind.SYMBOL, text)

    @classmethod
    def group(cls, children: list[Node], bracket_style: Optional[BracketStyle] = None) -> Node:
        return cls(NodeKind.GROUP, "", list(children), bracket_style)
