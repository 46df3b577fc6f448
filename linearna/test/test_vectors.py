import numpy as np
from numpy import testing
from linearna import vectors

def test_dot_norm():
    assert vectors.dot([1, 2, 3], [1, 2, 3]) == 14
    assert vectors.norm_squared([3, 4]) == 25
    assert vectors.norm([3, 4]) == 5
    assert vectors.norm([0, 0, 0]) == 0

def test_normalize():
    testing.assert_allclose(vectors.normalize([3, 4]), (0.6, 0.8))
    assert np.isclose(vectors.norm(vectors.normalize([1, -1, 2])), 1)

def test_cross():
    testing.assert_array_equal(vectors.cross([1, 0, 0], [0, 1, 0]), [0, 0, 1])
    a = [1, 2, -1]
    b = [1, 1, 2]
    testing.assert_array_equal(vectors.cross(a, b), np.cross(a, b))

def test_from_homogeneous():
    testing.assert_array_equal(vectors.from_homogeneous([2, 4, 2]), [1, 2])
    testing.assert_array_equal(vectors.from_homogeneous([3, -3]), [-1])

def test_norm_extreme_magnitudes():
    assert np.isclose(vectors.norm([1e200, 1e200]), 2**0.5*1e200)
    assert vectors.norm([1e-200, 0]) == 1e-200
    assert np.isclose(vectors.norm([3e-300, 4e-300]), 5e-300)
    assert vectors.norm([np.inf, 1]) == np.inf
    testing.assert_allclose(vectors.normalize([1e200, 1e200]), [2**-0.5, 2**-0.5])
    testing.assert_allclose(vectors.normalize([3e-300, -4e-300]), [0.6, -0.8])
