from dataclasses import dataclass
from typing import Any, Literal, Optional
import array

FmtStr = Literal['b', 'B', 'h', 'H', 'i', 'I', 'q', 'Q', 'f', 'd']

@dataclass(frozen=True, eq=False)
class DType:
  name: str
  fmt: Optional[FmtStr]
  default: Any

  def allocate(self, size:int, value:Any=None) -> array.array|list:
    if value is None: value = self.default
    # array.array has no bool or object typecode, those fall back to a list
    if self.fmt is None: return [value] * size
    return array.array(self.fmt, [value]) * size
  def __repr__(self): return self.name

class dtypes:
  int = DType('int', 'q', 0)
  float = DType('float', 'd', 0.0)
  bool = DType('bool', None, False)
  object = DType('object', None, None)

  def get_dtype(value) -> DType: return getattr(dtypes, type(value).__name__.lower(), dtypes.object)
