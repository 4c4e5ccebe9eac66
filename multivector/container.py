from __future__ import annotations
import operator
from typing import Any, Iterable, Iterator
from multivector.dtype import DType, dtypes
from multivector.errors import AxisOutOfRange, DimensionMismatch, IndexOutOfRange, InvalidIndexCount, OffsetOutOfRange, RanOutOfDimensions
from multivector.helpers import DEBUG, all_same, fully_flatten, get_shape, prod, tupled
from multivector.view import IndexerType, View, to_indices

class MultiVector:
  """Dense N-dimensional array kept in one linear row-major buffer.

  `dimensions` is fixed at construction, axis 0 being the most significant. Elements are
  initialized to `default_value`, or to the dtype's default when it is not given.
  Indexing returns a `View`; `cube[i][j][k]` and `cube[i, j, k]` select the same element."""
  __slots__ = ["_dimensions", "_dtype", "_buffer"]

  def __init__(self, dimensions:Iterable[int]=(), default_value:Any=None, dtype:DType|None=None):
    dimensions = tuple(map(operator.index, tupled(dimensions)))
    if any(d < 0 for d in dimensions): raise ValueError(f"Dimensions must be non-negative, got {dimensions}")
    if dtype is None: dtype = dtypes.int if default_value is None else dtypes.get_dtype(default_value)
    self._dimensions = dimensions
    self._dtype = dtype
    self._buffer = dtype.allocate(self.buffer_size(), default_value)
    if DEBUG: print(f"ALLOCATE {self!r} buffer_size={self.buffer_size()}")

  @classmethod
  def full(cls, default_value:Any, dimensions:Iterable[int], dtype:DType|None=None) -> MultiVector:
    return cls(dimensions, default_value, dtype)

  @classmethod
  def from_list(cls, data:list) -> MultiVector:
    shape, values = get_shape(data), fully_flatten(data)
    if not shape: raise ValueError(f"Expected a nested list but got {data!r}")
    if values and not all_same([type(v) for v in values]): raise ValueError(f"MultiVector must contain only one type but got {data}")
    ret = cls(shape, dtype=dtypes.get_dtype(values[0]) if values else dtypes.int)
    for offset, value in enumerate(values): ret.set_value_at(offset, value)
    return ret

  @property
  def dimensions(self) -> tuple[int, ...]: return self._dimensions
  @property
  def dtype(self) -> DType: return self._dtype
  def num_dimensions(self) -> int: return len(self._dimensions)
  def dimension_size(self, axis:int) -> int:
    if not 0 <= axis < len(self._dimensions): raise AxisOutOfRange(f"MultiVector has {len(self._dimensions)} dimensions, no axis {axis}")
    return self._dimensions[axis]
  def buffer_size(self) -> int: return prod(self._dimensions)

  def buffer_offset(self, indices:Iterable[int]) -> int:
    indices = to_indices(indices)
    if len(indices) != len(self._dimensions):
      raise DimensionMismatch(f"Expected {len(self._dimensions)} indices for dimensions {self._dimensions} but got {indices}")
    offset, stride = 0, 1
    for axis in reversed(range(len(indices))):
      if not 0 <= indices[axis] < self._dimensions[axis]:
        raise IndexOutOfRange(f"Index {indices[axis]} out of range for axis {axis} of size {self._dimensions[axis]}")
      offset += stride * indices[axis]
      stride *= self._dimensions[axis]
    return offset

  def value_at(self, offset:int) -> Any:
    self._check_offset(offset)
    return self._buffer[offset]
  def set_value_at(self, offset:int, value:Any):
    self._check_offset(offset)
    self._buffer[offset] = value

  def index(self, indices:IndexerType) -> View:
    indices = to_indices(indices)
    if not 0 < len(indices) <= len(self._dimensions):
      raise InvalidIndexCount(f"Expected between 1 and {len(self._dimensions)} indices but got {len(indices)}: {indices}")
    return View(self, indices)

  def __getitem__(self, indices:IndexerType) -> View: return self.index(indices)
  def __setitem__(self, indices:IndexerType, value):
    self.index(indices).set(value.get() if isinstance(value, View) else value)

  def __iter__(self) -> Iterator[View]:
    if not self._dimensions: raise RanOutOfDimensions(f"{self!r} has no dimensions to iterate")
    return (self.index(i) for i in range(self._dimensions[0]))

  def __eq__(self, rhs) -> bool:
    if not isinstance(rhs, MultiVector): return NotImplemented
    return self._dimensions == rhs._dimensions and len(self._buffer) == len(rhs._buffer) \
      and all(a == b for a, b in zip(self._buffer, rhs._buffer))
  __hash__ = None

  def tolist(self): return View(self).tolist()

  def __repr__(self): return f"MultiVector(dimensions={self._dimensions}, dtype={self._dtype})"
  def __str__(self): return str(self.tolist())

  def _check_offset(self, offset:int):
    if not 0 <= offset < len(self._buffer): raise OffsetOutOfRange(f"Offset {offset} out of range for buffer of size {len(self._buffer)}")
