"""
Recursive-descent parser for prefix-notation expressions.

Every helper receives the Cursor and an explicit half-open range [l, r) and
returns the position it stopped at; there is no shared parse state, so
parse_prefix is safe to call concurrently on different inputs.
"""

from typing import List, Optional, Tuple

from ..config import DEFAULT_CONFIG, ParserConfig
from ..errors import ParseError, ParseErrorKind, ParseResult
from ..expression_tree.core.node import Node, VariableNode, ConstantNode, OperationNode
from ..expression_tree.core.operators import get_operator
from ..expression_tree.expression import Expression
from ..logging_system import log_debug, log_parse_summary
from .cursor import Cursor, OPEN_BRACKET, CLOSE_BRACKET
from .validator import ExpressionValidator


def parse_prefix(text: str, config: Optional[ParserConfig] = None) -> Expression:
  """
  Parse text as exactly one prefix expression, e.g. "(+ x (* 2 y))".

  Raises:
      ParseError: on any malformed input; no partial tree is returned.
      TypeError: if text is not a str.
  """
  if not isinstance(text, str):
    raise TypeError(f"parse_prefix expects a str, got {type(text).__name__}")
  config = config or DEFAULT_CONFIG

  try:
    expression = _parse_source(Cursor(text), config)
  except ParseError as e:
    if config.log_failures:
      log_debug(f"Rejected {text!r}: {e}")
    raise

  log_parse_summary(text, expression)
  return expression


def try_parse_prefix(text: str, config: Optional[ParserConfig] = None) -> ParseResult:
  """Like parse_prefix, but reports a ParseError in the result instead of raising it."""
  try:
    return ParseResult(expression=parse_prefix(text, config))
  except ParseError as e:
    return ParseResult(error=e)


def _parse_source(cursor: Cursor, config: ParserConfig) -> Expression:
  if len(cursor) == 0:
    raise ParseError(ParseErrorKind.EMPTY_INPUT, position=0)
  ExpressionValidator.check_bracket_sequence(cursor)

  # A leading bracket closed by the last non-space character wraps the whole
  # input; anything else is parsed as a bare top-level expression like "+ x y".
  start = cursor.skip_whitespace(0)
  if cursor.char_at(start) == OPEN_BRACKET:
    close = ExpressionValidator.skip_brackets(cursor, start, len(cursor))
    if close == cursor.last_non_whitespace(start):
      return Expression(_parse_group(cursor, start, close, 1, config))

  return Expression(_parse_node(cursor, 0, len(cursor), 0, config))


def _parse_group(cursor: Cursor, open_pos: int, close_pos: int, depth: int, config: ParserConfig) -> Node:
  if depth > config.max_depth:
    raise ParseError(ParseErrorKind.NESTING_TOO_DEEP, position=open_pos,
                     detail=f"more than {config.max_depth} nested brackets")
  return _parse_node(cursor, open_pos + 1, close_pos, depth, config)


def _parse_node(cursor: Cursor, l: int, r: int, depth: int, config: ParserConfig) -> Node:
  """Parse "[operator] operand..." filling [l, r) exactly."""
  pos = cursor.skip_whitespace(l, r)
  token = cursor.raw_token(pos, r)
  spec = get_operator(token) if token else None

  if spec is not None:
    pos = cursor.skip_whitespace(pos + len(token), r)
    arity = spec.arity
  else:
    # No operator: the range holds a single operand
    if token:
      ExpressionValidator.check_unacceptable_symbols(cursor, pos, r)
    arity = 1

  operands: List[Node] = []
  for _ in range(arity):
    operand, pos = _get_arg(cursor, pos, r, depth, config)
    operands.append(operand)

  ExpressionValidator.check_single(cursor, pos, r)
  if spec is None:
    return operands[0]
  return OperationNode(spec.symbol, operands)


def _get_arg(cursor: Cursor, l: int, r: int, depth: int, config: ParserConfig) -> Tuple[Node, int]:
  """Parse one operand starting at l; returns it and the position after it."""
  pos = cursor.skip_whitespace(l, r)
  ch = cursor.char_at(pos) if pos < r else ''

  if ch == '' or ch == CLOSE_BRACKET:
    raise ParseError(ParseErrorKind.UNEXPECTED_END, position=pos, detail="missing operand")

  if ch == OPEN_BRACKET:
    close = ExpressionValidator.skip_brackets(cursor, pos, r)
    operand = _parse_group(cursor, pos, close, depth + 1, config)
    return operand, cursor.skip_whitespace(close + 1, r)

  if ExpressionValidator.is_acceptable_letter(ch):
    ExpressionValidator.check_placeholder(cursor, pos, pos, is_variable=True)
    return VariableNode(ch), cursor.skip_whitespace(pos + 1, r)

  if ExpressionValidator.is_digit(ch) or ch == '-':
    stop = cursor.scan_while(pos, lambda c: ExpressionValidator.is_digit(c) or c == '-', r)
    ExpressionValidator.check_placeholder(cursor, pos, stop - 1)
    value = ExpressionValidator.check_number_format(cursor.source[pos:stop], pos)
    return ConstantNode(value), cursor.skip_whitespace(stop, r)

  ExpressionValidator.raise_unacceptable_symbol(cursor, pos, r)
