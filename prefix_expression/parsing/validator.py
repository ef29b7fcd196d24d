import re
from typing import Optional

from ..errors import ParseError, ParseErrorKind
from ..expression_tree.core.operators import VARIABLE_NAMES, is_operator
from .cursor import Cursor, WHITESPACE, OPEN_BRACKET, CLOSE_BRACKET, BRACKETS

_INTEGER_LITERAL = re.compile(r'-?[0-9]+')
_LITERAL_PREVIEW = 32

# Characters allowed directly before/after a variable or number
_DELIMITERS = (WHITESPACE, OPEN_BRACKET, CLOSE_BRACKET)

# Single-character operator symbols, accepted wherever an operator may start
_OPERATOR_CHARS = frozenset(symbol for symbol in ('+', '-', '*', '/') if is_operator(symbol))


class ExpressionValidator:
  """Source-level checks run by the parser; every failed check raises ParseError."""

  @staticmethod
  def is_letter(ch) -> bool:
    if not isinstance(ch, str) or len(ch) != 1:
      raise ParseError(ParseErrorKind.CHARACTER_CLASSIFICATION, detail=f"expected a single character, got {ch!r}")
    return ch.isalpha()

  @staticmethod
  def is_digit(ch: str) -> bool:
    return len(ch) == 1 and '0' <= ch <= '9'

  @staticmethod
  def is_bracket(ch: str) -> bool:
    return ch in BRACKETS and len(ch) == 1

  @staticmethod
  def is_acceptable_letter(ch: str) -> bool:
    return ch in VARIABLE_NAMES and len(ch) == 1

  @staticmethod
  def skip_brackets(cursor: Cursor, l: int, r: int, strict: bool = False) -> int:
    """
    Scan [l, r) counting bracket depth.

    Non-strict scans stop as soon as the depth is back to zero and return that
    index, so called on an opening bracket they return its match. Strict scans
    cover the whole range and return r - 1.
    """
    open_positions = []
    for pos in range(l, r):
      ch = cursor.char_at(pos)
      if ch == OPEN_BRACKET:
        open_positions.append(pos)
      elif ch == CLOSE_BRACKET:
        if not open_positions:
          raise ParseError(ParseErrorKind.BRACKET_MISMATCH, position=pos, symbol=CLOSE_BRACKET,
                           detail="closing bracket without opening bracket")
        open_positions.pop()
      if not strict and not open_positions:
        return pos

    if open_positions:
      raise ParseError(ParseErrorKind.BRACKET_MISMATCH, position=open_positions[0], symbol=OPEN_BRACKET,
                       detail="bracket is never closed")
    return r - 1

  @staticmethod
  def check_bracket_sequence(cursor: Cursor):
    ExpressionValidator.skip_brackets(cursor, 0, len(cursor), strict=True)

  @staticmethod
  def check_placeholder(cursor: Cursor, start: int, end: int, is_variable: bool = False):
    """Token at [start, end] must be delimited by whitespace, brackets or the input bounds."""
    kind = ParseErrorKind.WRONG_VARIABLE if is_variable else ParseErrorKind.WRONG_NUMBER
    before = cursor.char_at(start - 1)
    after = cursor.char_at(end + 1)

    # '-' may precede a number, never a variable
    if start > 0 and before not in _DELIMITERS and (before != '-' or is_variable):
      raise ParseError(kind, position=start, symbol=cursor.raw_token(start) or cursor.char_at(start),
                       detail=f"unexpected {before!r} before it")
    if end + 1 < len(cursor) and after not in _DELIMITERS:
      raise ParseError(kind, position=start, symbol=cursor.raw_token(start),
                       detail=f"unexpected {after!r} after it")

    ExpressionValidator.check_bare_brackets(cursor, start, end)

  @staticmethod
  def check_bare_brackets(cursor: Cursor, start: int, end: int):
    if cursor.char_at(start - 1) == OPEN_BRACKET and cursor.char_at(end + 1) == CLOSE_BRACKET:
      raise ParseError(ParseErrorKind.BARE_BRACKETS, position=start - 1,
                       symbol=cursor.source[start - 1:end + 2])

  @staticmethod
  def check_unacceptable_symbols(cursor: Cursor, pos: int, end: Optional[int] = None):
    """Reject a token start that can begin neither an operator nor an operand."""
    ch = cursor.char_at(pos)
    if (ExpressionValidator.is_digit(ch) or ExpressionValidator.is_bracket(ch)
        or ExpressionValidator.is_acceptable_letter(ch) or ch == WHITESPACE or ch in _OPERATOR_CHARS):
      return
    if ExpressionValidator.is_letter(ch) and is_operator(cursor.raw_token(pos, end)):
      return
    ExpressionValidator.raise_unacceptable_symbol(cursor, pos, end)

  @staticmethod
  def raise_unacceptable_symbol(cursor: Cursor, pos: int, end: Optional[int] = None):
    ch = cursor.char_at(pos)
    symbol = cursor.raw_token(pos, end) if ExpressionValidator.is_letter(ch) else ch
    raise ParseError(ParseErrorKind.UNACCEPTABLE_SYMBOL, position=pos, symbol=symbol)

  @staticmethod
  def check_single(cursor: Cursor, pos: int, end: int):
    """Only whitespace may follow the last operand of an expression."""
    pos = cursor.skip_whitespace(pos, end)
    if pos < end:
      raise ParseError(ParseErrorKind.TRAILING_OPERANDS, position=pos,
                       symbol=cursor.raw_token(pos, end) or cursor.char_at(pos))

  @staticmethod
  def check_number_format(literal: str, position: int) -> int:
    if not _INTEGER_LITERAL.fullmatch(literal):
      raise ParseError(ParseErrorKind.NUMBER_FORMAT, position=position, symbol=literal)
    try:
      return int(literal)
    except ValueError as e:
      # Interpreter cap on int/str conversion length
      raise ParseError(ParseErrorKind.NUMBER_FORMAT, position=position,
                       symbol=literal[:_LITERAL_PREVIEW] + '...', detail=str(e)) from e
