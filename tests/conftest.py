import pytest

from countdown.expression_parser import ExpressionParser
from countdown.node import Operation
from countdown.solver import CountdownSolver


@pytest.fixture
def solver():
    return CountdownSolver()


@pytest.fixture
def checker():
    return ExpressionParser()


def _walk(node):
    yield node
    if isinstance(node, Operation):
        yield from _walk(node.left)
        yield from _walk(node.right)


@pytest.fixture
def walk():
    """Yields every node of an expression tree, root first."""
    return _walk


@pytest.fixture
def rendered():
    return lambda solutions: [node.render() for node in solutions]
