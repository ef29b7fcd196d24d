import numpy as np
import sympy as sp
from typing import Optional, Set, Tuple
from .core.node import Node
from .utils.tree_utils import get_constants, get_variables


class Expression:
  """Parsed expression: wraps the tree root and caches its canonical prefix form"""

  __slots__ = ('root', '_prefix_cache', '_string_cache')

  def __init__(self, root: Node):
    if not isinstance(root, Node):
      raise TypeError(f"Expression root must be a Node, got {type(root).__name__}")
    self.root = root
    self._prefix_cache: Optional[str] = None
    self._string_cache: Optional[str] = None

  @classmethod
  def from_prefix(cls, text: str, config=None) -> 'Expression':
    from ..parsing.parser import parse_prefix
    return parse_prefix(text, config)

  def evaluate(self, x, y, z):
    return self.root.evaluate(x, y, z)

  def evaluate_batch(self, X: np.ndarray) -> np.ndarray:
    """Evaluate over rows of X; columns are x, y, z and missing columns read as 0."""
    X = np.asarray(X, dtype=np.float64)
    if X.ndim != 2 or X.shape[1] > 3:
      raise ValueError(f"Expected an array of shape (n_samples, <=3), got {X.shape}")
    n_samples = X.shape[0]
    columns = [X[:, i] if i < X.shape[1] else np.zeros(n_samples) for i in range(3)]
    result = np.asarray(self.root.evaluate(*columns), dtype=np.float64)
    return np.broadcast_to(result, (n_samples,)).copy()

  def prefix(self) -> str:
    if self._prefix_cache is None:
      self._prefix_cache = self.root.prefix()
    return self._prefix_cache

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def copy(self) -> 'Expression':
    return Expression(self.root.copy())

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return self.root.depth()

  def variables(self) -> Set[str]:
    return {node.name for node in get_variables(self.root)}

  def constants(self) -> Tuple[int, ...]:
    return tuple(node.value for node in get_constants(self.root))

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.prefix()!r})"

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root
