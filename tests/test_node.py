import pytest
import sympy as sp

from prefix_expression.expression_tree.core.node import (
    Node, VariableNode, ConstantNode, OperationNode
)


class RecordingNode(Node):
    """Leaf that records the order in which it is evaluated."""

    __slots__ = ('label', 'log')

    def __init__(self, label, log):
        super().__init__()
        self.label = label
        self.log = log

    def evaluate(self, x, y, z):
        self.log.append(self.label)
        return float(self.label)

    def prefix(self):
        return str(self.label)

    def to_string(self):
        return str(self.label)

    def copy(self):
        return RecordingNode(self.label, self.log)

    def to_sympy(self):
        return sp.Integer(self.label)

    def _compute_hash(self):
        return hash(('recording', self.label))


def test_variable_resolves_positional_input():
    assert VariableNode('x').evaluate(1, 2, 3) == 1
    assert VariableNode('y').evaluate(1, 2, 3) == 2
    assert VariableNode('z').evaluate(1, 2, 3) == 3
    assert VariableNode('z').index == 2


def test_variable_name_is_restricted():
    with pytest.raises(ValueError):
        VariableNode('w')
    with pytest.raises(ValueError):
        VariableNode('xy')


def test_constant_requires_integer():
    assert ConstantNode(-12).evaluate(0, 0, 0) == -12
    with pytest.raises(TypeError):
        ConstantNode(1.5)
    with pytest.raises(TypeError):
        ConstantNode(True)


def test_operation_arity_is_enforced():
    with pytest.raises(ValueError):
        OperationNode('+', [VariableNode('x')])
    with pytest.raises(ValueError):
        OperationNode('negate', [VariableNode('x'), VariableNode('y')])
    with pytest.raises(ValueError):
        OperationNode('pow', [VariableNode('x'), VariableNode('y')])
    with pytest.raises(TypeError):
        OperationNode('negate', [3])


def test_nodes_are_read_only():
    node = OperationNode('+', [VariableNode('x'), ConstantNode(1)])
    with pytest.raises(AttributeError):
        node.operator = '-'
    with pytest.raises(AttributeError):
        node.operands[0].name = 'y'
    with pytest.raises(AttributeError):
        ConstantNode(1).value = 2


def test_operation_serialization():
    node = OperationNode('-', [
        OperationNode('*', [VariableNode('x'), ConstantNode(2)]),
        OperationNode('negate', [VariableNode('y')]),
    ])
    assert node.prefix() == "(- (* x 2) (negate y))"
    assert node.to_string() == "x 2 * y negate -"
    assert str(node) == node.to_string()
    assert ConstantNode(-3).prefix() == "-3"
    assert str(VariableNode('z')) == "z"


def test_max5_evaluates_every_operand_left_to_right():
    log = []
    operands = [RecordingNode(label, log) for label in (3, 1, 4, 1, 5)]
    assert OperationNode('max5', operands).evaluate(0, 0, 0) == 5
    assert log == [3, 1, 4, 1, 5]


def test_min3_does_not_short_circuit():
    log = []
    operands = [RecordingNode(label, log) for label in (-9, 2, 7)]
    assert OperationNode('min3', operands).evaluate(0, 0, 0) == -9
    assert log == [-9, 2, 7]


def test_nested_evaluation_is_post_order():
    log = []
    inner = OperationNode('+', [RecordingNode(1, log), RecordingNode(2, log)])
    outer = OperationNode('*', [inner, RecordingNode(3, log)])
    assert outer.evaluate(0, 0, 0) == 9
    assert log == [1, 2, 3]


def test_size_depth_and_children():
    node = OperationNode('min3', [
        VariableNode('x'),
        OperationNode('negate', [ConstantNode(4)]),
        VariableNode('z'),
    ])
    assert node.size() == 5
    assert node.depth() == 3
    assert len(node.children) == 3
    assert node.arity == 3
    assert VariableNode('x').children == ()


def test_structural_equality_and_hash():
    a = OperationNode('+', [VariableNode('x'), ConstantNode(1)])
    b = OperationNode('+', [VariableNode('x'), ConstantNode(1)])
    c = OperationNode('+', [ConstantNode(1), VariableNode('x')])
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert ConstantNode(1) != VariableNode('x')
    assert len({a, b, c}) == 2


def test_copy_is_deep_and_equal():
    node = OperationNode('exp', [OperationNode('atan', [VariableNode('y')])])
    clone = node.copy()
    assert clone == node
    assert clone is not node
    assert clone.operands[0] is not node.operands[0]


def test_to_sympy():
    x, y, z = sp.symbols('x y z')
    node = OperationNode('max5', [
        VariableNode('x'), VariableNode('y'), VariableNode('z'),
        OperationNode('negate', [VariableNode('x')]),
        OperationNode('/', [ConstantNode(1), VariableNode('y')]),
    ])
    assert node.to_sympy() == sp.Max(x, y, z, -x, 1 / y)
    assert OperationNode('atan', [OperationNode('exp', [VariableNode('z')])]).to_sympy() == sp.atan(sp.exp(z))
    assert OperationNode('-', [VariableNode('x'), VariableNode('y')]).to_sympy() == x - y
