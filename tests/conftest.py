import pytest

from consteval.evaluation.evaluator import evaluate
from consteval.types.context import Context
from consteval.types.function_table import FunctionTable


@pytest.fixture(scope="session")
def functions():
    """Built-in function table, shared read-only like in production."""
    return FunctionTable.default()


@pytest.fixture
def context():
    """Fresh, empty symbol environment."""
    return Context()


@pytest.fixture
def run(functions, context):
    """Evaluate source text against the fixture context and built-ins."""
    def _run(source):
        return evaluate(source, context, functions)
    return _run
