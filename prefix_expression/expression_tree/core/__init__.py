"""Core expression tree components."""

from .node import Node, VariableNode, ConstantNode, OperationNode
from .operators import (
    NodeType, OperatorSpec, OPERATOR_MAP, VARIABLE_NAMES,
    get_operator, is_operator, operator_arity,
    evaluate_variable, evaluate_constant, evaluate_operation
)

__all__ = [
    'Node', 'VariableNode', 'ConstantNode', 'OperationNode',
    'NodeType', 'OperatorSpec', 'OPERATOR_MAP', 'VARIABLE_NAMES',
    'get_operator', 'is_operator', 'operator_arity',
    'evaluate_variable', 'evaluate_constant', 'evaluate_operation'
]
