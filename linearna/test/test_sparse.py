import numpy as np
import pytest
from numpy import testing
from linearna import SparseVector, Vector, OutOfRange, InvalidArgument, DimensionMismatch, InvalidDimension, \
    DivisionByZero

def test_construction():
    v = SparseVector(5, {1: 2., 3: -1.})
    assert v.get_dimension() == 5
    testing.assert_array_equal(v.to_array(), [0, 2, 0, -1, 0])
    assert SparseVector.from_sequence([0, 2, 0, -1, 0]) == v
    assert SparseVector(3) == Vector.zeros(3)
    for n in (0, -1):
        with pytest.raises(InvalidArgument):
            SparseVector(n)
    with pytest.raises(InvalidArgument):
        SparseVector.from_sequence([])
    with pytest.raises(OutOfRange):
        SparseVector(2, {2: 1.})

def test_zeros_not_stored():
    v = SparseVector.from_sequence([0, 1, 0, 2])
    assert v.stored_items() == [(1, 1.), (3, 2.)]
    v.set(1, 0)
    assert v.stored_items() == [(3, 2.)]
    v.sub(SparseVector(4, {3: 2.}))
    assert v.stored_items() == []
    assert v == SparseVector(4)

def test_get_set():
    v = SparseVector(3)
    assert v.get(2) == 0
    assert v.set(2, 4.) is v
    assert v[2] == 4
    for index in (-1, 3):
        with pytest.raises(OutOfRange):
            v.get(index)

def test_copy_and_instances():
    v = SparseVector(3, {0: 1.})
    c = v.copy()
    assert type(c) is SparseVector
    c.set(0, 5)
    assert v.get(0) == 1
    assert v.copy_part(5) == Vector(1, 0, 0, 0, 0)
    assert type(v.copy_part(1)) is SparseVector
    assert type(v.new_instance(2)) is SparseVector
    assert v.new_instance(2) == SparseVector(2)

def test_arithmetic():
    v = SparseVector(3, {0: 1., 2: 2.})
    w = SparseVector(3, {1: 3.})
    assert v.n_add(w) == Vector(1, 3, 2)
    assert v.n_sub(w) == Vector(1, -3, 2)
    assert v == Vector(1, 0, 2)
    assert v.scalar_multiply(2) is v
    assert v == Vector(2, 0, 4)
    assert np.isclose(v.n_normalize().norm(), 1)
    assert v.scalar_product(w) == 0
    with pytest.raises(DimensionMismatch):
        v.add(SparseVector(2))
    with pytest.raises(DivisionByZero):
        SparseVector(3).normalize()

def test_mixed_representations():
    s = SparseVector(3, {0: 1.})
    d = Vector(0, 1, 0)
    result = s.n_add(d)
    assert type(result) is SparseVector
    assert result == Vector(1, 1, 0)
    assert type(d.n_add(s)) is Vector
    assert d + s == s + d
    cross = s.n_vector_product(d)
    assert type(cross) is SparseVector
    assert cross == Vector(0, 0, 1)
    d.add(s)
    assert d == Vector(1, 1, 0)
    assert s == Vector(1, 0, 0)

def test_products_and_conversion():
    v = SparseVector.from_sequence([2, 0, 2])
    assert v.n_from_homogeneous() == Vector(1, 0)
    with pytest.raises(DivisionByZero):
        SparseVector(3, {0: 1.}).n_from_homogeneous()
    with pytest.raises(InvalidDimension):
        SparseVector(2).n_vector_product(SparseVector(2))
    assert np.isclose(v.cosine(Vector(1, 0, 1)), 1)

def test_repr():
    assert repr(SparseVector(4, {2: 1.5})) == 'SparseVector(4, {2: 1.5})'

def test_extreme_magnitudes():
    v = SparseVector(3, {0: 1e-200})
    assert v.norm() == 1e-200
    assert v.n_normalize() == Vector(1, 0, 0)
    w = SparseVector(3, {1: 1e200, 2: 1e200})
    assert np.isclose(w.n_normalize().norm(), 1)
    assert np.isclose(v.cosine(w), 0)
