"""Prefix-notation parsing: cursor, validation rules and the recursive-descent parser."""

from .cursor import Cursor
from .validator import ExpressionValidator
from .parser import parse_prefix, try_parse_prefix

__all__ = ['Cursor', 'ExpressionValidator', 'parse_prefix', 'try_parse_prefix']
