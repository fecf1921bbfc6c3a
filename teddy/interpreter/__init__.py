from __future__ import annotations

import logging
import sys
from typing import Literal

from teddy import LispValue
from teddy.builtin.env_builtin import register
from teddy.evaluation.evaluator import evaluate
from teddy.printer import render
from teddy.reader.node import Node
from teddy.reader.parser import TokenStream, lex, parse
from teddy.reader.reader import read
from teddy.types.environment import Environment
from teddy.types.error import Error

logger = logging.getLogger(__name__)

# Each level of Teddy recursion takes several Python frames
RECURSION_LIMIT = 10000


class Interpreter:
    """
    Ties the front end, reader and evaluator together around one root
    Environment that persists across calls.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        if sys.getrecursionlimit() < RECURSION_LIMIT:
            sys.setrecursionlimit(RECURSION_LIMIT)
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            try:
                # Lazy import to keep the core free of file-system concerns
                from teddy.prelude import load_prelude
                load_prelude(self)
            except FileNotFoundError as e:
                # Be permissive: no prelude found -> proceed
                logger.info("prelude not loaded: %s", e)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for result in self.run(code):
            if isinstance(result, Error):
                logger.warning("prelude: %s", render(result))

    def evaluate(self, value: LispValue) -> LispValue:
        """Evaluate an already-read value in the root environment."""
        try:
            return evaluate(value, self.env)
        except RecursionError:
            logger.warning("evaluation exceeded the Python recursion limit")
            return Error("Maximum recursion depth exceeded.")

    def eval_node(self, node: Node) -> LispValue:
        return self.evaluate(read(node))

    def eval(self, code: str) -> LispValue:
        """Evaluate the whole input as one S-Expression: `+ 1 2` gives 3."""
        return self.eval_node(parse(code))

    def run(self, code: str) -> list[LispValue]:
        """Evaluate each top-level expression in turn and collect the results."""
        stream = TokenStream(lex(code))
        return [self.eval_node(node) for node in stream.parse_all()]

    @staticmethod
    def render(value: LispValue) -> str:
        return render(value)
