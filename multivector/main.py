import sys, os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from multivector.container import MultiVector
from multivector.helpers import DEBUG
from multivector.range import Range
from multivector.view import View
import time

def run(dimensions:tuple[int, ...]=(3, 3, 3)):
  if DEBUG: fill_timer = time.perf_counter()
  cube = MultiVector(dimensions)
  for offset in range(cube.buffer_size()): cube.set_value_at(offset, offset)
  if DEBUG: print(f"Filled\t\t{(time.perf_counter() - fill_timer) * 1000:.1f}ms")

  print(f"cube {cube.dimensions}: {cube}")
  if cube.num_dimensions() == 0: return cube
  if cube.dimensions[0] > 0: print(f"cube[0]: {cube[0].tolist()}")
  if cube.num_dimensions() > 1 and cube.dimensions[0] > 0 and cube.dimensions[1] > 1: print(f"cube[0][1]: {cube[0][1].tolist()}")

  corner = View(cube, (), tuple(Range(0, min(2, d)) for d in cube.dimensions))
  print(f"corner {corner.ranges}: {[cube.value_at(cube.buffer_offset(c)) for c in corner.coordinates()]}")

  last = tuple(d - 1 for d in cube.dimensions)
  if all(i >= 0 for i in last):
    cube[last] *= 2
    print(f"cube{list(last)} *= 2: {cube[last].get()}")
  return cube

def main():
  run(tuple(int(d) for d in sys.argv[1:] if '=' not in d) or (3, 3, 3))

if __name__ == "__main__":
  main()
