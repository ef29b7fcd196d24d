import numbers
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple
from .operators import (
  NodeType, VARIABLE_NAMES, VARIABLE_INDEX, get_operator,
  evaluate_variable, evaluate_constant, evaluate_operation
)


class Node(ABC):
  """Base node class with size/depth/hash caching. Nodes are read-only once built."""

  __slots__ = ('_hash_cache', '_size_cache', '_depth_cache')

  # Public attributes that may be assigned exactly once, in __init__
  _fields: Tuple[str, ...] = ()

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None
    self._depth_cache: Optional[int] = None

  def __setattr__(self, name, value):
    if name in self._fields and hasattr(self, name):
      raise AttributeError(f"{type(self).__name__}.{name} is read-only")
    object.__setattr__(self, name, value)

  @property
  def children(self) -> Tuple['Node', ...]:
    return ()

  @abstractmethod
  def evaluate(self, x, y, z):
    pass

  @abstractmethod
  def prefix(self) -> str:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def copy(self) -> 'Node':
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = 1 + sum(child.size() for child in self.children)
    return self._size_cache

  def depth(self) -> int:
    """Leaves have depth 1"""
    if self._depth_cache is None:
      self._depth_cache = 1 + max((child.depth() for child in self.children), default=0)
    return self._depth_cache

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    return type(self) is type(other) and self.prefix() == other.prefix()

  def __str__(self) -> str:
    return self.to_string()


class VariableNode(Node):
  __slots__ = ('name',)
  _fields = ('name',)

  def __init__(self, name: str):
    super().__init__()
    if name not in VARIABLE_INDEX:
      raise ValueError(f"Variable name must be one of {VARIABLE_NAMES}, got {name!r}")
    self.name = name

  @property
  def index(self) -> int:
    return VARIABLE_INDEX[self.name]

  def evaluate(self, x, y, z):
    return evaluate_variable(self.name, (x, y, z))

  def prefix(self) -> str:
    return self.name

  def to_string(self) -> str:
    return self.name

  def copy(self) -> 'VariableNode':
    return VariableNode(self.name)

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self.name)

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, self.name))

  def __repr__(self) -> str:
    return f"VariableNode({self.name!r})"


class ConstantNode(Node):
  __slots__ = ('value',)
  _fields = ('value',)

  def __init__(self, value: int):
    super().__init__()
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
      raise TypeError(f"Constant value must be an integer, got {value!r}")
    self.value = int(value)

  def evaluate(self, x, y, z):
    return evaluate_constant(self.value)

  def prefix(self) -> str:
    return str(self.value)

  def to_string(self) -> str:
    return str(self.value)

  def copy(self) -> 'ConstantNode':
    return ConstantNode(self.value)

  def to_sympy(self) -> sp.Expr:
    return sp.Integer(self.value)

  def _compute_hash(self) -> int:
    return hash((NodeType.CONSTANT, self.value))

  def __repr__(self) -> str:
    return f"ConstantNode({self.value})"


class OperationNode(Node):
  """Single operation variant; arity and function come from the operator registry."""

  __slots__ = ('operator', 'operands')
  _fields = ('operator', 'operands')

  def __init__(self, operator: str, operands: Sequence[Node]):
    super().__init__()
    spec = get_operator(operator)
    if spec is None:
      raise ValueError(f"Unknown operator: {operator!r}")
    operands = tuple(operands)
    if len(operands) != spec.arity:
      raise ValueError(f"Operator {operator!r} expects {spec.arity} operands, got {len(operands)}")
    for operand in operands:
      if not isinstance(operand, Node):
        raise TypeError(f"Operand must be a Node, got {type(operand).__name__}")
    self.operator = operator
    self.operands = operands

  @property
  def arity(self) -> int:
    return len(self.operands)

  @property
  def children(self) -> Tuple[Node, ...]:
    return self.operands

  def evaluate(self, x, y, z):
    # Post-order, left to right; every operand is evaluated
    values = [operand.evaluate(x, y, z) for operand in self.operands]
    return evaluate_operation(self.operator, values)

  def prefix(self) -> str:
    return f"({self.operator} {' '.join(operand.prefix() for operand in self.operands)})"

  def to_string(self) -> str:
    return f"{' '.join(operand.to_string() for operand in self.operands)} {self.operator}"

  def copy(self) -> 'OperationNode':
    return OperationNode(self.operator, [operand.copy() for operand in self.operands])

  def _compute_hash(self) -> int:
    return hash((NodeType.OPERATION, self.operator, tuple(hash(operand) for operand in self.operands)))

  def to_sympy(self) -> sp.Expr:
    args = [operand.to_sympy() for operand in self.operands]

    if self.operator == '+':
      return sp.Add(*args)
    elif self.operator == '-':
      return sp.Add(args[0], sp.Mul(-1, args[1]))
    elif self.operator == '*':
      return sp.Mul(*args)
    elif self.operator == '/':
      return sp.Mul(args[0], sp.Pow(args[1], -1))
    elif self.operator == 'negate':
      return -args[0]
    elif self.operator == 'exp':
      return sp.exp(args[0])
    elif self.operator == 'atan':
      return sp.atan(args[0])
    elif self.operator == 'min3':
      return sp.Min(*args)
    elif self.operator == 'max5':
      return sp.Max(*args)
    else:
      raise RuntimeWarning(f"to_sympy reached unexpected operation: {self.operator}")

  def __repr__(self) -> str:
    return f"OperationNode({self.operator!r}, {list(self.operands)!r})"
