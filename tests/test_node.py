import pytest

from countdown.node import (
    InvariantError, Leaf, Operation, Operator, make_leaf, make_operation,
)


class CountingLeaf(Leaf):
    __slots__ = ('evaluations', 'renders')

    def __init__(self, value):
        super().__init__(value)
        self.evaluations = 0
        self.renders = 0

    def evaluate(self):
        self.evaluations += 1
        return super().evaluate()

    def render(self):
        self.renders += 1
        return super().render()


def test_operator_order_and_symbols():
    assert list(Operator) == [Operator.ADD, Operator.SUB, Operator.MUL, Operator.DIV]
    assert [op.symbol for op in Operator] == ['+', '-', '*', '/']


def test_operator_apply():
    assert Operator.ADD.apply(7, 3) == 10
    assert Operator.SUB.apply(7, 3) == 4
    assert Operator.MUL.apply(7, 3) == 21
    assert Operator.DIV.apply(21, 3) == 7


def test_leaf():
    leaf = make_leaf(42)
    assert leaf.is_leaf
    assert leaf.evaluate() == 42
    assert leaf.render() == "42"
    assert str(leaf) == "42"


def test_operation_evaluates_and_renders():
    node = make_operation(Operator.ADD, make_leaf(2), make_leaf(1))
    assert isinstance(node, Operation)
    assert not node.is_leaf
    assert node.evaluate() == 3
    assert node.render() == "(2 + 1)"


def test_nested_rendering():
    inner = make_operation(Operator.SUB, make_leaf(9), make_leaf(5))
    node = make_operation(Operator.MUL, make_leaf(100), inner)
    assert node.render() == "(100 * (9 - 5))"
    assert node.evaluate() == 400


def test_division_is_integer():
    node = make_operation(Operator.DIV, make_leaf(100), make_leaf(4))
    assert node.evaluate() == 25
    assert isinstance(node.evaluate(), int)


def test_value_is_memoized():
    left, right = CountingLeaf(6), CountingLeaf(3)
    node = make_operation(Operator.MUL, left, right)
    assert node.evaluate() == 18
    assert node.evaluate() == 18
    assert left.evaluations == 1
    assert right.evaluations == 1


def test_rendering_is_memoized():
    left, right = CountingLeaf(6), CountingLeaf(3)
    node = make_operation(Operator.DIV, left, right)
    text = node.render()
    assert node.render() is text
    assert left.renders == 1
    assert right.renders == 1


def test_shared_operand():
    shared = make_operation(Operator.ADD, make_leaf(2), make_leaf(3))
    a = make_operation(Operator.MUL, shared, make_leaf(4))
    b = make_operation(Operator.SUB, shared, make_leaf(1))
    assert a.left is b.left
    assert a.evaluate() == 20
    assert b.evaluate() == 4


@pytest.mark.parametrize("a, b", [(5, 2), (5, 0)])
def test_inexact_division_fails_fast(a, b):
    node = make_operation(Operator.DIV, make_leaf(a), make_leaf(b))
    with pytest.raises(InvariantError):
        node.evaluate()
    with pytest.raises(AssertionError):
        node.evaluate()
