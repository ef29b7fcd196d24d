"""
Tree Utility Functions

Traversal and inspection helpers for parsed expression trees.
"""

from typing import List, Dict, Callable, Any, Optional, cast
from collections import Counter

from ..core.node import Node, OperationNode, ConstantNode, VariableNode


def get_all_nodes(node: Node, traversal_order: str = 'depth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'depth_first' (default, pre-order) or 'breadth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    elif traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop(0)  # FIFO for breadth-first
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children)

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Pre-order traversal with an explicit stack, operands left to right"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)
        stack.extend(reversed(current_node.children))

    return all_nodes


def calculate_tree_depth(node: Node) -> int:
    """Maximum depth of the tree (leaf nodes have depth 1)."""
    return node.depth()


def find_nodes_by_type(node: Node, node_type: type) -> List[Node]:
    """Find all nodes of a specific type, in pre-order."""
    return [n for n in get_all_nodes(node) if isinstance(n, node_type)]


def find_nodes_by_operator(node: Node, operator: str) -> List[OperationNode]:
    """Find all operation nodes with a specific operator symbol."""
    return [
        n for n in get_all_nodes(node)
        if isinstance(n, OperationNode) and n.operator == operator
    ]


def get_variable_usage_counts(node: Node) -> Dict[str, int]:
    """
    Count the usage frequency of each variable in the tree.

    Returns:
        Dictionary mapping variable names to their usage counts
    """
    return dict(Counter(var_node.name for var_node in get_variables(node)))


def get_operator_usage_counts(node: Node) -> Dict[str, int]:
    """Count how often each operator symbol occurs in the tree."""
    return dict(Counter(op_node.operator for op_node in get_operations(node)))


def apply_to_all_nodes(node: Node, func: Callable[[Node], Any],
                      filter_type: Optional[type] = None) -> List[Any]:
    """
    Apply a function to all nodes (optionally filtered by type).

    Args:
        node: Root node of the tree
        func: Function to apply to each node
        filter_type: Optional type filter (only apply to nodes of this type)

    Returns:
        List of function results
    """
    all_nodes = get_all_nodes(node)

    if filter_type is not None:
        all_nodes = [n for n in all_nodes if isinstance(n, filter_type)]

    return [func(n) for n in all_nodes]


# Convenience functions for common operations
def get_constants(node: Node) -> List[ConstantNode]:
    """Get all constant nodes in the tree."""
    return cast(List[ConstantNode], find_nodes_by_type(node, ConstantNode))


def get_variables(node: Node) -> List[VariableNode]:
    """Get all variable nodes in the tree."""
    return cast(List[VariableNode], find_nodes_by_type(node, VariableNode))


def get_operations(node: Node) -> List[OperationNode]:
    """Get all operation nodes in the tree."""
    return cast(List[OperationNode], find_nodes_by_type(node, OperationNode))
