"""
  Teddy Lexer and Parser

- Streaming, lazy lexing
- Emits generic parse-tree Nodes (see teddy.reader.node), not values;
  teddy.reader.reader turns the tree into values.

    number   : /-?[0-9]+(\\.[0-9]+)?/
    symbol   : /[a-zA-Z0-9_+\\-*\\/\\\\=<>!&%^]+/
    sexpr    : '(' <expr>* ')'
    qexpr    : '{' <expr>* '}'
    expr     : <number> | <symbol> | <sexpr> | <qexpr>
    program  : /^/ <expr>* /$/

Comments start with ';' and run to the end of the line. Bracket tokens are
kept in the tree as PUNCT children, the way the grammar's own parse tree
keeps them; the reader skips them.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from teddy.reader.node import BracketStyle, Node, NodeKind
from teddy.types.errors import TeddySyntaxError

TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r"|(?P<number>-?[0-9]+(?:\.[0-9]+)?(?=[\s(){};]|$))"  # numbers end at a delimiter
    r"|(?P<symbol>[a-zA-Z0-9_+\-*/\\=<>!&%^]+)"  # fallback: symbols
)

OPENERS: dict[str, tuple[str, BracketStyle]] = {
    "lparen": ("rparen", BracketStyle.ROUND),
    "lbrace": ("rbrace", BracketStyle.CURLY),
}

CLOSERS = {"rparen", "rbrace"}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        match = TOKEN_RE.match(source, pos)
        if not match or match.end() == pos:
            raise TeddySyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = match.end()
        kind = match.lastgroup
        if kind == "comment":
            continue
        yield kind, match.group(kind)


class TokenStream:
    """Recursive-descent parser over a token iterator, one token of lookahead."""

    def __init__(self, tokens: Iterable[tuple[str, str]]):
        self.tokens = iter(tokens)
        self.current: Optional[tuple[str, str]] = None
        self.advance()

    def advance(self) -> None:
        self.current = next(self.tokens, None)

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        return self.current if self.current else (None, None)

    def parse_expr(self) -> Optional[Node]:
        """Parse one expression; returns None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "number":
            self.advance()
            return Node.number(tok_val)

        if tok_type == "symbol":
            self.advance()
            return Node.symbol(tok_val)

        if tok_type in OPENERS:
            closer, style = OPENERS[tok_type]
            self.advance()
            children = [Node(NodeKind.PUNCT, tok_val)]
            while True:
                next_type, next_val = self.peek()
                if next_type is None:
                    raise TeddySyntaxError(f"Unmatched '{tok_val}'")
                if next_type == closer:
                    self.advance()
                    children.append(Node(NodeKind.PUNCT, next_val))
                    return Node.group(children, style)
                if next_type in CLOSERS:
                    raise TeddySyntaxError(f"Mismatched '{next_val}' for '{tok_val}'")
                children.append(self.parse_expr())

        if tok_type in CLOSERS:
            raise TeddySyntaxError(f"Unexpected '{tok_val}'")

        raise TeddySyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[Node]:
        while (expr := self.parse_expr()) is not None:
            yield expr

    def parse_program(self) -> Node:
        """Parse the whole input as the implicit root group."""
        return Node.group(list(self.parse_all()))


def parse(source: str) -> Node:
    return TokenStream(lex(source)).parse_program()
