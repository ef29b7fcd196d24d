"""Parser configuration"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
  """
  Settings for a single parse call.

  Args:
      max_depth: Maximum bracket nesting accepted before NESTING_TOO_DEEP is
          raised. Bounds recursion for pathological inputs.
      log_failures: Emit a debug record for every rejected input.
  """
  max_depth: int = 200
  log_failures: bool = True

  def __post_init__(self):
    if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int) or self.max_depth < 1:
      raise ValueError(f"max_depth must be a positive integer, got {self.max_depth!r}")


DEFAULT_CONFIG = ParserConfig()
