"""
Expression tree nodes for the Countdown Numbers Game.

A node is either a Leaf holding one of the starting numbers, or an Operation
combining two operand nodes. Operands are shared between many candidate
parents during a search, so values and renderings are memoized per node.
"""

import operator
from enum import Enum
from typing import Optional


class InvariantError(AssertionError):
    """Raised when a node is built in a state the solver must never produce."""


class Operator(Enum):
    """The four allowed operations, in the order the solver tries them."""
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'

    @property
    def symbol(self) -> str:
        return self.value

    def apply(self, a: int, b: int) -> int:
        return _FUNCTIONS[self](a, b)


_FUNCTIONS = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    Operator.DIV: operator.floordiv,  # Exactness is checked before a DIV node exists
}

OPERATORS = tuple(Operator)


class Node:
    """Common base for Leaf and Operation."""
    __slots__ = ()

    is_leaf = False

    def evaluate(self) -> int:
        raise NotImplementedError

    def render(self) -> str:
        raise NotImplementedError

    def __str__(self):
        return self.render()


class Leaf(Node):
    """One of the starting numbers."""
    __slots__ = ('value', '_text')

    is_leaf = True

    def __init__(self, value: int):
        self.value = value
        self._text: Optional[str] = None

    def evaluate(self) -> int:
        return self.value

    def render(self) -> str:
        if self._text is None:
            self._text = str(self.value)
        return self._text

    def __repr__(self):
        return f"Leaf({self.value})"


class Operation(Node):
    """
    A binary operation over two shared operand nodes.

    The value is computed on the first call to evaluate() and the rendered
    text on the first call to render(); both are cached afterwards.
    """
    __slots__ = ('op', 'left', 'right', '_value', '_text')

    def __init__(self, op: Operator, left: Node, right: Node):
        self.op = op
        self.left = left
        self.right = right
        self._value: Optional[int] = None
        self._text: Optional[str] = None

    def evaluate(self) -> int:
        if self._value is None:
            a = self.left.evaluate()
            b = self.right.evaluate()
            if self.op is Operator.DIV and (b == 0 or a % b != 0):
                raise InvariantError(f"Inexact division reached evaluation: {a} / {b}")
            self._value = self.op.apply(a, b)
        return self._value

    def render(self) -> str:
        if self._text is None:
            self._text = f"({self.left.render()} {self.op.symbol} {self.right.render()})"
        return self._text

    def __repr__(self):
        return f"Operation({self.render()})"


def make_leaf(value: int) -> Leaf:
    """Create a constant node."""
    return Leaf(value)


def make_operation(op: Operator, left: Node, right: Node) -> Operation:
    """
    Create an operation node over two existing nodes.

    For Operator.DIV the caller guarantees the right operand is nonzero and
    divides the left operand exactly.
    """
    return Operation(op, left, right)
