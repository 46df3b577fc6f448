"""Operations on one-dimensional float arrays.

These are the kernels behind the vector classes. They do no validation beyond what numpy does - callers check
dimensions and divisors first.
"""
from typing import Sequence
import numpy as np
from .types import Vector1D, Vector3, Sequence3

__all__ = ['dot', 'norm_squared', 'norm', 'normalize', 'cross', 'from_homogeneous']

dot = np.dot # for convenience


def norm_squared(x: Sequence[float]) -> float:
    return float(dot(x, x))


def norm(x: Sequence[float]) -> float:
    """Euclidean norm, scaled by the largest magnitude so squaring neither overflows nor underflows."""
    x = np.asarray(x, float)
    scale = np.max(np.abs(x))
    if scale == 0 or not np.isfinite(scale):
        return float(scale)
    return float(scale*norm_squared(x/scale)**0.5)


def normalize(x: Sequence[float]) -> Vector1D:
    """Unit vector along x, which must be nonzero and finite."""
    x = np.asarray(x, float)
    x = x/np.max(np.abs(x))
    return x/norm_squared(x)**0.5


def cross(a: Sequence3, b: Sequence3) -> Vector3:
    """Right-handed cross product of two 3-vectors."""
    return np.array((a[1]*b[2] - a[2]*b[1], a[2]*b[0] - a[0]*b[2], a[0]*b[1] - a[1]*b[0]), float)


def from_homogeneous(x: Sequence[float]) -> Vector1D:
    """Divide all but the last element by the last.

    Args:
        x: Homogeneous coordinates with w as the final element.

    Returns:
        Array one element shorter than x.
    """
    x = np.asarray(x, float)
    return x[:-1]/x[-1]
