import pytest

from teddy.builtin.env_builtin import register
from teddy.evaluation.evaluator import evaluate
from teddy.interpreter import Interpreter
from teddy.reader.parser import parse
from teddy.reader.reader import read
from teddy.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Interpreter without the prelude, so tests only see the builtins."""
    return Interpreter(prelude=None)


@pytest.fixture
def std():
    """Interpreter with the standard prelude loaded."""
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate source text as one root S-Expression in the shared `env`."""
    def _run(source):
        return evaluate(read(parse(source)), env)
    return _run
