import pytest

from lisper.types.environment import Environment
from lisper.interpreter import Interpreter
from lisper.reader.parser import lex, TokenStream
from lisper.evaluation.evaluator import evaluate


@pytest.fixture
def env():
    """Fresh root environment for each test."""
    return Environment()


@pytest.fixture
def interp():
    """Interpreter whose print output goes to sys.stdout (capsys-friendly)."""
    return Interpreter()


@pytest.fixture
def run(env):
    """Parse and evaluate every expression in a source string; return the last result."""
    def _run(source, runtime=None):
        result = None
        for expr in TokenStream(lex(source)).parse_all():
            result = evaluate(expr, env, runtime)
        return result
    return _run
