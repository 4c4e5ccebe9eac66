from __future__ import annotations
import operator
from typing import TYPE_CHECKING, Any, Iterator
from multivector.errors import AxisOutOfRange, InvalidIndexCount, NonTerminalAccess, RanOutOfDimensions, ViewConstructionInvariantViolation
from multivector.dtype import dtypes
from multivector.helpers import DEBUG, tupled
from multivector.ops import Ops, execute_alu
from multivector.range import Range, coordinates, full_ranges
if TYPE_CHECKING: from multivector.container import MultiVector

IndexerType = int|tuple[int, ...]|list[int]

def to_indices(indices:IndexerType) -> tuple[int, ...]: return tuple(map(operator.index, tupled(indices)))

class View:
  """Non-owning window into a MultiVector.

  The leading axes are pinned by `indices` and each trailing axis is an open `Range`.
  Indexing pins more leading axes; once none remain open the view denotes a single
  element, read with `get` and written with `set` or the compound assignment operators.
  Every element access goes through the container, so writes alias its buffer."""
  __slots__ = ["_container", "_indices", "_ranges"]

  def __init__(self, container:MultiVector, indices:IndexerType=(), ranges:tuple[Range, ...]|list[Range]|None=None):
    self._container = container
    self._indices = to_indices(indices)
    self._ranges = full_ranges(container.dimensions[len(self._indices):]) if ranges is None else tuple(ranges)
    self._check_constraints()
    if DEBUG >= 2: print(f"VIEW {self!r}")

  @property
  def indices(self) -> tuple[int, ...]: return self._indices
  @property
  def ranges(self) -> tuple[Range, ...]: return self._ranges
  def container(self) -> MultiVector: return self._container
  def num_dimensions(self) -> int: return len(self._ranges)
  def dimension_range(self, axis:int) -> Range:
    if not 0 <= axis < len(self._ranges): raise AxisOutOfRange(f"View has {len(self._ranges)} open ranges, no axis {axis}")
    return self._ranges[axis]

  ### Narrowing ###

  def index(self, indices:IndexerType) -> View:
    if isinstance(indices, int): self._check_remaining_ranges()
    indices = to_indices(indices)
    self._check_num_indices(indices)
    return View(self._container, self._indices + indices, self._ranges[len(indices):])

  def narrow(self, indices:IndexerType) -> View:
    """In-place form of `index`: pins the next axes of this view and returns it."""
    if isinstance(indices, int): self._check_remaining_ranges()
    indices = to_indices(indices)
    self._check_num_indices(indices)
    narrowed = View(self._container, self._indices + indices, self._ranges[len(indices):])
    self._indices, self._ranges = narrowed._indices, narrowed._ranges
    return self

  def __getitem__(self, indices:IndexerType) -> View: return self.index(indices)
  def __setitem__(self, indices:IndexerType, value):
    self.index(indices).set(value.get() if isinstance(value, View) else value)

  def __iter__(self) -> Iterator[View]:
    self._check_remaining_ranges()
    return (self.index(i) for i in self._ranges[0])

  ### Element access ###

  @property
  def offset(self) -> int:
    if self._ranges: raise NonTerminalAccess(f"{self!r} still has {len(self._ranges)} open ranges")
    return self._container.buffer_offset(self._indices)

  def get(self) -> Any: return self._container.value_at(self.offset)
  def set(self, value) -> View:
    self._container.set_value_at(self.offset, value)
    return self

  def apply(self, op:Ops, value) -> View:
    """Applies op to the element in place. Int buffers truncate the result back to int."""
    offset = self.offset
    dtype = self._container.dtype
    result = execute_alu(op, dtype, (self._container.value_at(offset), value))
    if dtype is dtypes.int: result = int(result)
    self._container.set_value_at(offset, result)
    return self

  def __iadd__(self, x): return self.apply(Ops.ADD, x)
  def __isub__(self, x): return self.apply(Ops.SUB, x)
  def __imul__(self, x): return self.apply(Ops.MUL, x)
  def __itruediv__(self, x): return self.apply(Ops.DIV, x)
  def __imod__(self, x): return self.apply(Ops.MOD, x)

  ### Comparison ###

  def coordinates(self) -> Iterator[tuple[int, ...]]:
    return (self._indices + coord for coord in coordinates(self._ranges))

  def __eq__(self, rhs) -> bool:
    if not isinstance(rhs, View): return NotImplemented
    if self._indices != rhs._indices or self._ranges != rhs._ranges: return False
    lhs_container, rhs_container = self._container, rhs._container
    for coord in self.coordinates():
      if lhs_container.value_at(lhs_container.buffer_offset(coord)) != rhs_container.value_at(rhs_container.buffer_offset(coord)): return False
    return True
  __hash__ = None

  def tolist(self):
    if not self._ranges: return self.get()
    return [self.index(i).tolist() for i in self._ranges[0]]

  def __repr__(self): return f"View(indices={self._indices}, ranges={self._ranges})"

  ### Invariants ###

  def _check_constraints(self):
    container = self._container
    if len(self._indices) + len(self._ranges) != container.num_dimensions():
      raise ViewConstructionInvariantViolation(f"check_num_dimensions: {len(self._indices)} indices and {len(self._ranges)} ranges "
                                               f"do not cover {container.num_dimensions()} dimensions")
    # An index equal to the dimension size is a one-past-end marker, it fails once dereferenced
    for axis, i in enumerate(self._indices):
      if not 0 <= i <= container.dimension_size(axis):
        raise ViewConstructionInvariantViolation(f"check_indices: index {i} out of bounds for axis {axis} of size {container.dimension_size(axis)}")
    for axis, r in enumerate(self._ranges, len(self._indices)):
      if r.end > container.dimension_size(axis):
        raise ViewConstructionInvariantViolation(f"check_ranges: {r} exceeds axis {axis} of size {container.dimension_size(axis)}")

  def _check_remaining_ranges(self):
    if not self._ranges: raise RanOutOfDimensions(f"{self!r} has no open ranges left to index")

  def _check_num_indices(self, indices:tuple[int, ...]):
    if not 0 < len(indices) <= len(self._ranges):
      raise InvalidIndexCount(f"Expected between 1 and {len(self._ranges)} indices but got {len(indices)}: {indices}")
