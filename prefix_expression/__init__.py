"""Prefix Expression Package

Parses prefix-notation arithmetic such as "(+ x (* 2 y))" into an expression
tree that can be evaluated against x, y and z and serialized back.
"""

from .expression_tree import (
  Expression, Node, VariableNode, ConstantNode, OperationNode,
  OperatorSpec, OPERATOR_MAP, VARIABLE_NAMES, get_operator, is_operator
)
from .parsing import Cursor, ExpressionValidator, parse_prefix, try_parse_prefix
from .errors import ParseError, ParseErrorKind, ParseResult
from .config import ParserConfig, DEFAULT_CONFIG
from .logging_system import LogLevel, configure_logging, set_log_level, get_logger

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "VariableNode", "ConstantNode", "OperationNode",
  "OperatorSpec", "OPERATOR_MAP", "VARIABLE_NAMES", "get_operator", "is_operator",
  "Cursor", "ExpressionValidator", "parse_prefix", "try_parse_prefix",
  "ParseError", "ParseErrorKind", "ParseResult",
  "ParserConfig", "DEFAULT_CONFIG",
  "LogLevel", "configure_logging", "set_log_level", "get_logger"
]
