from __future__ import annotations
import itertools, operator
from dataclasses import dataclass
from typing import Iterable, Iterator
from multivector.errors import InvalidRange

@dataclass(frozen=True, init=False)
class Range:
  """Half-open interval [begin, end) over a single axis.

  Range() is the empty range [0, 0) and Range(p) is the single position [p, p+1)."""
  begin:int
  end:int

  def __init__(self, begin:int|None=None, end:int|None=None):
    if begin is None: begin, end = 0, 0 if end is None else end
    elif end is None: end = operator.index(begin) + 1
    begin, end = operator.index(begin), operator.index(end)
    if begin < 0 or begin > end: raise InvalidRange(f"Range must satisfy 0 <= begin <= end: begin={begin}, end={end}")
    object.__setattr__(self, "begin", begin)
    object.__setattr__(self, "end", end)

  def __len__(self): return self.end - self.begin
  def __iter__(self) -> Iterator[int]: return iter(range(self.begin, self.end))
  def __contains__(self, i:int): return self.begin <= i < self.end
  def __repr__(self): return f"Range({self.begin}, {self.end})"

def full_ranges(dimensions:Iterable[int]) -> tuple[Range, ...]: return tuple(Range(0, d) for d in dimensions)

def coordinates(ranges:tuple[Range, ...]) -> Iterator[tuple[int, ...]]:
  """Row-major walk over every coordinate inside ranges, last axis fastest.

  Yields a single empty tuple when there are no ranges and nothing when any range is empty."""
  return itertools.product(*(range(r.begin, r.end) for r in ranges))
