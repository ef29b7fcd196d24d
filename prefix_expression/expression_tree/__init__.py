"""Expression Tree Module

Node variants, the operator registry and the Expression wrapper.
"""

from .expression import Expression
from .core.node import (
    Node,
    VariableNode,
    ConstantNode,
    OperationNode
)
from .core.operators import (
    NodeType,
    OperatorSpec,
    OPERATOR_MAP,
    VARIABLE_NAMES,
    get_operator,
    is_operator,
    operator_arity,
    evaluate_variable,
    evaluate_constant,
    evaluate_operation
)

__all__ = [
    "Expression",
    "Node", "VariableNode", "ConstantNode", "OperationNode",
    "NodeType", "OperatorSpec", "OPERATOR_MAP", "VARIABLE_NAMES",
    "get_operator", "is_operator", "operator_arity",
    "evaluate_variable", "evaluate_constant", "evaluate_operation"
]
