"""Abstract vector with every operation implemented on a handful of primitives.

Concrete representations implement get_dimension, _get_element, _set_element and _new_zero. Everything else - copying,
arithmetic, products, conversions - is built here on top of those and numpy kernels in vectors.py. Representations
override operations where they can do better.

Binary operations come in pairs. The plain form (add, sub, ...) mutates and returns self. The n_ form leaves both
operands alone and returns a new vector of the receiver's class. Subtraction is always self - other.

All checks happen before anything is written, so a call that raises leaves the receiver as it was.
"""
import logging
import numbers
from abc import ABC, abstractmethod
from typing import Iterator
import numpy as np
from . import vectors, _utility
from .errors import OutOfRange, InvalidArgument, DimensionMismatch, InvalidDimension, DivisionByZero
from .types import Vector1D

__all__ = ['AbstractVector', 'check_dimension']

logger = logging.getLogger(__name__)


def check_dimension(n) -> int:
    """Check n is usable as a vector dimension and return it as an int."""
    if not isinstance(n, numbers.Integral) or isinstance(n, bool):
        raise InvalidArgument('Dimension must be an integer, got %r.' % (n,))
    if n < 1:
        raise InvalidArgument('Dimension must be at least 1, got %d.' % n)
    return int(n)


class AbstractVector(ABC):
    # Stop numpy broadcasting over us in expressions like np.float64(2)*v, so our reflected operators run instead.
    __array_ufunc__ = None

    # Mutable.
    __hash__ = None

    @abstractmethod
    def get_dimension(self) -> int:
        pass

    @abstractmethod
    def _get_element(self, index: int) -> float:
        """Return element at index, which has already been checked."""
        pass

    @abstractmethod
    def _set_element(self, index: int, value: float):
        """Store value at index, which has already been checked."""
        pass

    @abstractmethod
    def _new_zero(self, dimension: int) -> 'AbstractVector':
        """Return a zero vector of the same class. dimension has already been checked."""
        pass

    def _assign(self, array: Vector1D):
        """Overwrite all elements from an array of the right length."""
        for index, value in enumerate(array):
            self._set_element(index, float(value))

    def _check_index(self, index) -> int:
        if not isinstance(index, numbers.Integral) or isinstance(index, bool):
            raise OutOfRange('Index must be an integer, got %r.' % (index,))
        if not 0 <= index < self.get_dimension():
            raise OutOfRange('Index %d out of range for dimension %d.' % (index, self.get_dimension()))
        return int(index)

    def _check_same_dimension(self, other: 'AbstractVector'):
        if not isinstance(other, AbstractVector):
            raise TypeError('Expected a vector, got %s.' % type(other).__name__)
        if other.get_dimension() != self.get_dimension():
            raise DimensionMismatch('Dimensions differ: %d and %d.' % (self.get_dimension(), other.get_dimension()))

    @property
    def dimension(self) -> int:
        return self.get_dimension()

    def get(self, index: int) -> float:
        """Return element at index.

        Negative indices are out of range - there is no wrap-around.
        """
        return self._get_element(self._check_index(index))

    def set(self, index: int, value: float) -> 'AbstractVector':
        """Set element at index and return self for chaining."""
        index = self._check_index(index)
        self._set_element(index, float(value))
        return self

    def to_array(self) -> Vector1D:
        """Return a fresh float array of the elements."""
        return np.array([self._get_element(index) for index in range(self.get_dimension())], float)

    def copy(self) -> 'AbstractVector':
        result = self._new_zero(self.get_dimension())
        result._assign(self.to_array())
        return result

    def copy_part(self, n: int) -> 'AbstractVector':
        """Copy the first n elements into a new vector.

        If n exceeds the dimension, the extra elements are zero.

        Args:
            n: Dimension of the result, at least 1.

        Returns:
            New vector of the same class.
        """
        n = check_dimension(n)
        array = np.zeros(n)
        m = min(n, self.get_dimension())
        array[:m] = self.to_array()[:m]
        if n != self.get_dimension():
            logger.debug('Resizing copy from dimension %d to %d.', self.get_dimension(), n)
        result = self._new_zero(n)
        result._assign(array)
        return result

    def new_instance(self, n: int) -> 'AbstractVector':
        """Return a zero vector of dimension n and the same class. The values of self are not used."""
        return self._new_zero(check_dimension(n))

    def add(self, other: 'AbstractVector') -> 'AbstractVector':
        self._check_same_dimension(other)
        self._assign(self.to_array() + other.to_array())
        return self

    def n_add(self, other: 'AbstractVector') -> 'AbstractVector':
        return self.copy().add(other)

    def sub(self, other: 'AbstractVector') -> 'AbstractVector':
        """Subtract other from self in place."""
        self._check_same_dimension(other)
        self._assign(self.to_array() - other.to_array())
        return self

    def n_sub(self, other: 'AbstractVector') -> 'AbstractVector':
        """Return self - other."""
        return self.copy().sub(other)

    def scalar_multiply(self, scalar: float) -> 'AbstractVector':
        self._assign(self.to_array()*float(scalar))
        return self

    def n_scalar_multiply(self, scalar: float) -> 'AbstractVector':
        return self.copy().scalar_multiply(scalar)

    def norm(self) -> float:
        return vectors.norm(self.to_array())

    def normalize(self) -> 'AbstractVector':
        """Scale self to unit norm.

        Raises:
            DivisionByZero: if the norm is zero. self is not modified.
        """
        if self.norm() == 0:
            raise DivisionByZero('Cannot normalize a zero vector.')
        self._assign(vectors.normalize(self.to_array()))
        return self

    def n_normalize(self) -> 'AbstractVector':
        return self.copy().normalize()

    def scalar_product(self, other: 'AbstractVector') -> float:
        self._check_same_dimension(other)
        return float(vectors.dot(self.to_array(), other.to_array()))

    def cosine(self, other: 'AbstractVector') -> float:
        """Cosine of the angle between self and other.

        Raises:
            DimensionMismatch: if the dimensions differ.
            DivisionByZero: if either vector has zero norm.
        """
        self._check_same_dimension(other)
        if self.norm() == 0 or other.norm() == 0:
            raise DivisionByZero('Angle undefined for a zero vector.')
        # Product of unit vectors, so huge or tiny components don't overflow.
        c = float(vectors.dot(vectors.normalize(self.to_array()), vectors.normalize(other.to_array())))
        return max(-1., min(1., c))

    def n_vector_product(self, other: 'AbstractVector') -> 'AbstractVector':
        """Right-handed cross product self x other. Both must be 3D."""
        if not isinstance(other, AbstractVector):
            raise TypeError('Expected a vector, got %s.' % type(other).__name__)
        for dimension in self.get_dimension(), other.get_dimension():
            if dimension != 3:
                raise InvalidDimension('Vector product needs dimension 3, got %d.' % dimension)
        result = self._new_zero(3)
        result._assign(vectors.cross(self.to_array(), other.to_array()))
        return result

    def n_from_homogeneous(self) -> 'AbstractVector':
        """Treat self as homogeneous coordinates and return the Cartesian vector.

        The last element is the divisor w. The result has dimension one less than self.

        Raises:
            InvalidDimension: if the dimension is less than 2.
            DivisionByZero: if w is zero.
        """
        n = self.get_dimension()
        if n < 2:
            raise InvalidDimension('Homogeneous vector needs dimension at least 2, got %d.' % n)
        array = self.to_array()
        if array[-1] == 0:
            raise DivisionByZero('Homogeneous coordinate is zero.')
        logger.debug('Converting from homogeneous coordinates with w = %g.', array[-1])
        result = self._new_zero(n - 1)
        result._assign(vectors.from_homogeneous(array))
        return result

    def is_close(self, other: 'AbstractVector', rtol: float = 1e-9, atol: float = 0.) -> bool:
        """Element-wise comparison within tolerance, as numpy.allclose."""
        self._check_same_dimension(other)
        return bool(np.allclose(self.to_array(), other.to_array(), rtol=rtol, atol=atol))

    def to_string(self, precision: int = None) -> str:
        """Format elements with fixed decimals.

        Args:
            precision: Number of decimals. If None, taken from the configuration file (default 3).
        """
        if precision is None:
            precision = _utility.get_precision()
        return _utility.format_elements(self.to_array(), precision)

    def __len__(self):
        return self.get_dimension()

    def __getitem__(self, index):
        return self.get(index)

    def __setitem__(self, index, value):
        self.set(index, value)

    def __iter__(self) -> Iterator[float]:
        for index in range(self.get_dimension()):
            yield self._get_element(index)

    def __eq__(self, other):
        if not isinstance(other, AbstractVector):
            return NotImplemented
        return other.get_dimension() == self.get_dimension() and np.array_equal(self.to_array(), other.to_array())

    def __add__(self, other):
        if not isinstance(other, AbstractVector):
            return NotImplemented
        return self.n_add(other)

    def __iadd__(self, other):
        if not isinstance(other, AbstractVector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, AbstractVector):
            return NotImplemented
        return self.n_sub(other)

    def __isub__(self, other):
        if not isinstance(other, AbstractVector):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.n_scalar_multiply(scalar)

    __rmul__ = __mul__

    def __imul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.scalar_multiply(scalar)

    def __neg__(self):
        return self.n_scalar_multiply(-1.)

    def __matmul__(self, other):
        if not isinstance(other, AbstractVector):
            return NotImplemented
        return self.scalar_product(other)

    def __repr__(self):
        return '%s(%s)' % (type(self).__name__, ', '.join(repr(float(element)) for element in self.to_array()))

    def __str__(self):
        return self.to_string()
