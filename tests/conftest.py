import io

import pytest

from filipe.builtin.env_builtin import register
from filipe.interpreter import Interpreter
from filipe.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Interpreter writing to in-memory sinks, with a fixed random seed."""
    return Interpreter(output=io.StringIO(), errors=io.StringIO(), seed=1234)


@pytest.fixture
def out(interp):
    """Read back everything `print` has written so far."""
    return lambda: interp.evaluator.output.getvalue()


@pytest.fixture
def err(interp):
    """Read back everything reported to the error sink so far."""
    return lambda: interp.error_handler.sink.getvalue()
