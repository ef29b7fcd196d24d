"""Parse error hierarchy and result type.

Keep this module small and dependency-free: the parser, the validator and the
tests all import it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
  from .expression_tree.expression import Expression


class ParseErrorKind(Enum):
  EMPTY_INPUT = "empty input"
  BRACKET_MISMATCH = "wrong bracket sequence"
  UNACCEPTABLE_SYMBOL = "unacceptable symbol"
  WRONG_VARIABLE = "wrong variable"
  WRONG_NUMBER = "wrong number"
  BARE_BRACKETS = "bare brackets"
  TRAILING_OPERANDS = "operands without operator"
  NUMBER_FORMAT = "not a number"
  CHARACTER_CLASSIFICATION = "cannot classify character"
  UNEXPECTED_END = "unexpected end of input"
  NESTING_TOO_DEEP = "nesting too deep"


class ParseError(Exception):
  """Raised when the input is not exactly one well-formed prefix expression."""

  def __init__(self, kind: ParseErrorKind, position: Optional[int] = None,
               symbol: Optional[str] = None, detail: Optional[str] = None):
    self.kind = kind
    self.position = position
    self.symbol = symbol
    self.detail = detail
    super().__init__(self._format())

  def _format(self) -> str:
    message = kind_message = self.kind.value.capitalize()
    if self.symbol is not None:
      message = f"{kind_message} {self.symbol!r}"
    if self.position is not None:
      message += f" at position {self.position}"
    if self.detail:
      message += f": {self.detail}"
    return message

  def __reduce__(self):
    return (type(self), (self.kind, self.position, self.symbol, self.detail))


@dataclass(frozen=True)
class ParseResult:
  """Outcome of a parse: exactly one of expression/error is set."""

  expression: Optional['Expression'] = None
  error: Optional[ParseError] = None

  @property
  def ok(self) -> bool:
    return self.error is None

  def unwrap(self) -> 'Expression':
    if self.error is not None:
      raise self.error
    return self.expression
