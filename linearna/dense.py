"""Dense vector backed by a numpy float64 array."""
import numpy as np
from . import vectors
from .base import AbstractVector, check_dimension
from .errors import InvalidArgument
from .types import Vector1D

__all__ = ['Vector']


class Vector(AbstractVector):
    """Dense vector.

    Vector(1, 2, 3) builds from explicit elements. Vector(sequence) with a single one-dimensional sequence, array or
    vector builds from its elements. The elements are always copied, so the new vector owns its storage.

    Note Vector(3) is the one-element vector (3.0). For a zero vector of given dimension use Vector(dimension=3) or
    Vector.zeros(3).
    """

    def __init__(self, *elements, dimension: int = None):
        if dimension is not None:
            if elements:
                raise InvalidArgument('Give either elements or a dimension, not both.')
            self._elements = np.zeros(check_dimension(dimension))
            return
        if len(elements) == 1:
            element = elements[0]
            if isinstance(element, AbstractVector):
                elements = element.to_array()
            elif np.ndim(element) == 1:
                elements = element
        array = np.array(elements, float)
        if array.ndim != 1:
            raise InvalidArgument('Elements must form a one-dimensional sequence, got shape %s.' % (array.shape,))
        if array.size < 1:
            raise InvalidArgument('A vector needs at least one element.')
        self._elements = array

    @classmethod
    def zeros(cls, n: int) -> 'Vector':
        return cls(dimension=n)

    def get_dimension(self) -> int:
        return len(self._elements)

    def _get_element(self, index: int) -> float:
        return float(self._elements[index])

    def _set_element(self, index: int, value: float):
        self._elements[index] = value

    def _new_zero(self, dimension: int) -> 'Vector':
        return type(self).zeros(dimension)

    def _assign(self, array: Vector1D):
        self._elements[:] = array

    def to_array(self) -> Vector1D:
        return self._elements.copy()

    def add(self, other: AbstractVector) -> 'Vector':
        self._check_same_dimension(other)
        self._elements += _as_array(other)
        return self

    def sub(self, other: AbstractVector) -> 'Vector':
        self._check_same_dimension(other)
        self._elements -= _as_array(other)
        return self

    def scalar_multiply(self, scalar: float) -> 'Vector':
        self._elements *= float(scalar)
        return self

    def norm(self) -> float:
        return vectors.norm(self._elements)


def _as_array(vector: AbstractVector) -> Vector1D:
    """Elements of vector as an array, without copying if it is dense."""
    if isinstance(vector, Vector):
        return vector._elements
    return vector.to_array()
