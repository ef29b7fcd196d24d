import math
import numbers

import numpy as np
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Sequence

class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  OPERATION = 2

# Positional input order for evaluate(x, y, z)
VARIABLE_NAMES = ('x', 'y', 'z')
VARIABLE_INDEX = {name: index for index, name in enumerate(VARIABLE_NAMES)}


@dataclass(frozen=True)
class OperatorSpec:
  symbol: str
  arity: int
  func: Callable


def _add(a, b):
  return np.add(a, b)

def _subtract(a, b):
  return np.subtract(a, b)

def _multiply(a, b):
  return np.multiply(a, b)

def _divide(a, b):
  # x/0 -> +-inf, 0/0 -> nan
  with np.errstate(divide='ignore', invalid='ignore'):
    return np.true_divide(a, b)

def _negate(a):
  return np.negative(a)

def _exp(a):
  with np.errstate(over='ignore'):
    return np.exp(a)

def _atan(a):
  return np.arctan(a)

def _min3(a, b, c):
  return np.minimum(a, np.minimum(b, c))

def _max5(a, b, c, d, e):
  return np.maximum(a, np.maximum(b, np.maximum(c, np.maximum(d, e))))


_OPERATORS = (
  OperatorSpec('+', 2, _add),
  OperatorSpec('-', 2, _subtract),
  OperatorSpec('*', 2, _multiply),
  OperatorSpec('/', 2, _divide),
  OperatorSpec('negate', 1, _negate),
  OperatorSpec('exp', 1, _exp),
  OperatorSpec('atan', 1, _atan),
  OperatorSpec('min3', 3, _min3),
  OperatorSpec('max5', 5, _max5),
)

# Read-only symbol -> spec table
OPERATOR_MAP: Mapping[str, OperatorSpec] = MappingProxyType({op.symbol: op for op in _OPERATORS})


def get_operator(symbol: str) -> Optional[OperatorSpec]:
  """Exact-match lookup, no case folding."""
  return OPERATOR_MAP.get(symbol)

def is_operator(symbol: str) -> bool:
  return symbol in OPERATOR_MAP

def operator_arity(symbol: str) -> int:
  spec = get_operator(symbol)
  if spec is None:
    raise ValueError(f"Unknown operator: {symbol!r}")
  return spec.arity

def evaluate_operation(symbol: str, values: Sequence):
  spec = get_operator(symbol)
  if spec is None:
    raise ValueError(f"Unknown operator: {symbol!r}")
  if len(values) != spec.arity:
    raise ValueError(f"Operator {symbol!r} expects {spec.arity} operands, got {len(values)}")
  return spec.func(*values)

def _int_to_float(value: int) -> float:
  try:
    return float(value)
  except OverflowError:
    # Beyond double range the sign is all that survives
    return math.inf if value > 0 else -math.inf

def as_float(value):
  """Coerce an input to float64 so integer inputs never hit int64 wraparound."""
  if isinstance(value, numbers.Integral):
    return _int_to_float(int(value))
  if np.ndim(value) == 0:
    return float(value)
  return np.asarray(value, dtype=np.float64)

def evaluate_variable(name: str, inputs: Sequence):
  return as_float(inputs[VARIABLE_INDEX[name]])

def evaluate_constant(value: int) -> float:
  return _int_to_float(value)
