"""Utilities for expression trees."""

from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type,
    find_nodes_by_operator, get_variable_usage_counts,
    get_operator_usage_counts, apply_to_all_nodes,
    get_constants, get_variables, get_operations
)

__all__ = [
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type',
    'find_nodes_by_operator', 'get_variable_usage_counts',
    'get_operator_usage_counts', 'apply_to_all_nodes',
    'get_constants', 'get_variables', 'get_operations'
]
