from typing import Callable
from enum import auto, IntEnum, Enum
from multivector.dtype import DType, dtypes
import operator

class Ops(IntEnum):
  ADD = auto(); SUB = auto(); MUL = auto(); DIV = auto(); MOD = auto()
  def __str__(self): return Enum.__str__(self)

def cdiv(x:int, y:int) -> int:
  if y == 0: raise ZeroDivisionError(f"integer division of {x} by zero")
  return abs(x)//abs(y)*(1,-1)[x*y<0]
def cmod(x:int, y:int) -> int: return x-cdiv(x,y)*y

python_alu: dict[Ops, Callable] = {
  Ops.ADD:operator.add, Ops.SUB:operator.sub, Ops.MUL:operator.mul, Ops.DIV:operator.truediv, Ops.MOD:operator.mod}

# Integer buffers keep C semantics so results stay integral
integer_alu: dict[Ops, Callable] = {**python_alu, Ops.DIV:cdiv, Ops.MOD:cmod}

def alu(op:Ops, dtype:DType) -> Callable: return (integer_alu if dtype is dtypes.int else python_alu)[op]
def execute_alu(op:Ops, dtype:DType, operands): return alu(op, dtype)(*operands)
