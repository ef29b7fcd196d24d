from dataclasses import dataclass
from typing import Callable, Optional

WHITESPACE = ' '
OPEN_BRACKET = '('
CLOSE_BRACKET = ')'
BRACKETS = (OPEN_BRACKET, CLOSE_BRACKET)


@dataclass(frozen=True)
class Cursor:
  """
  Read-only view of the source text.

  Positions are plain ints passed in and returned by every method, so a
  cursor carries no parse progress and one instance per parse call is enough.
  """
  source: str

  def __len__(self) -> int:
    return len(self.source)

  def _bound(self, end: Optional[int]) -> int:
    return len(self.source) if end is None else min(end, len(self.source))

  def char_at(self, pos: int) -> str:
    """Character at pos, or '' outside the source."""
    if 0 <= pos < len(self.source):
      return self.source[pos]
    return ''

  def skip_whitespace(self, pos: int, end: Optional[int] = None) -> int:
    return self.scan_while(pos, lambda ch: ch == WHITESPACE, end)

  def scan_while(self, pos: int, predicate: Callable[[str], bool], end: Optional[int] = None) -> int:
    """End of the maximal run of characters matching predicate, starting at pos."""
    end = self._bound(end)
    while pos < end and predicate(self.source[pos]):
      pos += 1
    return pos

  def raw_token(self, pos: int, end: Optional[int] = None) -> str:
    """Maximal run of characters that are neither whitespace nor a bracket."""
    stop = self.scan_while(pos, lambda ch: ch != WHITESPACE and ch not in BRACKETS, end)
    return self.source[pos:stop]

  def last_non_whitespace(self, start: int, end: Optional[int] = None) -> int:
    """Index of the last non-space character in [start, end), or start - 1 if none."""
    pos = self._bound(end) - 1
    while pos >= start and self.source[pos] == WHITESPACE:
      pos -= 1
    return pos
