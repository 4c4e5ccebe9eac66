class MultiVectorError(Exception):
  """Base class for every contract violation raised by multivector."""

class DimensionMismatch(MultiVectorError, ValueError): pass
class IndexOutOfRange(MultiVectorError, IndexError): pass
class OffsetOutOfRange(MultiVectorError, IndexError): pass
class AxisOutOfRange(MultiVectorError, IndexError): pass
class InvalidIndexCount(MultiVectorError, IndexError): pass
class RanOutOfDimensions(MultiVectorError, IndexError): pass
class ViewConstructionInvariantViolation(MultiVectorError, ValueError): pass
class InvalidRange(MultiVectorError, ValueError): pass

# Raised by element access on a view that still has open ranges
class NonTerminalAccess(MultiVectorError, TypeError): pass
