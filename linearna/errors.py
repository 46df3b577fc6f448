"""Exceptions raised by vector operations.

Each derives from VectorError and from the closest builtin, so code catching IndexError, ValueError or
ZeroDivisionError keeps working.
"""

__all__ = ['VectorError', 'OutOfRange', 'InvalidArgument', 'DimensionMismatch', 'InvalidDimension', 'DivisionByZero']


class VectorError(Exception):
    pass


class OutOfRange(VectorError, IndexError):
    pass


class InvalidArgument(VectorError, ValueError):
    pass


class DimensionMismatch(VectorError, ValueError):
    pass


class InvalidDimension(VectorError, ValueError):
    pass


class DivisionByZero(VectorError, ZeroDivisionError):
    pass
