"""Sparse vector storing only its non-zero elements."""
from typing import Mapping, Sequence, List, Tuple
import numpy as np
from .base import AbstractVector, check_dimension
from .errors import InvalidArgument
from .types import Vector1D

__all__ = ['SparseVector']


class SparseVector(AbstractVector):
    """Vector held as a dict from index to non-zero value.

    Setting an element to zero removes it from the dict. Arithmetic is inherited from AbstractVector, so it goes
    through dense arrays - this class saves memory, not time.

    Args:
        dimension: Fixed dimension, at least 1.
        elements: Initial non-zero elements keyed by index.
    """

    def __init__(self, dimension: int, elements: Mapping[int, float] = None):
        self._dimension = check_dimension(dimension)
        self._elements = {}
        if elements is not None:
            for index, value in elements.items():
                self.set(index, value)

    @classmethod
    def from_sequence(cls, sequence: Sequence[float]) -> 'SparseVector':
        array = np.asarray(sequence, float)
        if array.ndim != 1:
            raise InvalidArgument('Elements must form a one-dimensional sequence, got shape %s.' % (array.shape,))
        vector = cls(len(array))
        vector._assign(array)
        return vector

    def get_dimension(self) -> int:
        return self._dimension

    def _get_element(self, index: int) -> float:
        return self._elements.get(index, 0.)

    def _set_element(self, index: int, value: float):
        if value == 0:
            self._elements.pop(index, None)
        else:
            self._elements[index] = value

    def _new_zero(self, dimension: int) -> 'SparseVector':
        return type(self)(dimension)

    def _assign(self, array: Vector1D):
        self._elements = {index: float(value) for index, value in enumerate(array) if value != 0}

    def to_array(self) -> Vector1D:
        array = np.zeros(self._dimension)
        for index, value in self._elements.items():
            array[index] = value
        return array

    def stored_items(self) -> List[Tuple[int, float]]:
        """Stored (index, value) pairs in index order. Zero elements are never stored."""
        return sorted(self._elements.items())

    def __repr__(self):
        return '%s(%d, {%s})' % (type(self).__name__, self._dimension,
            ', '.join('%d: %r' % item for item in self.stored_items()))
