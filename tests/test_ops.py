"""
Two-operand forms - results match the methods and inputs are left untouched.
"""

import math

import numpy as np
import pytest

from linvec import SizeMismatchError, Vector
from linvec.vector import ops


@pytest.fixture
def a():
    return Vector([1.0, 2.0, 3.0])


@pytest.fixture
def b():
    return Vector([4.0, 5.0, 6.0])


def test_add_and_subtract(a, b):
    """Test the two-operand add and subtract leave the first operand."""
    assert ops.add(a, b).to_list() == [5, 7, 9]
    assert ops.subtract(a, b).to_list() == [-3, -3, -3]
    assert a.to_list() == [1, 2, 3]
    assert b.to_list() == [4, 5, 6]


def test_add_subtract_round_trip(a, b):
    """Test adding then subtracting round-trips."""
    assert ops.subtract(ops.add(a, b), b).equals(a)


def test_bin_op(a, b):
    """Test the two-operand bin_op."""
    result = ops.bin_op(a, b, lambda x, y, i: x * y)

    assert result.to_list() == [4, 10, 18]
    assert result is not a


def test_bin_op_size_mismatch(a):
    """Test the two-operand bin_op rejects unequal lengths."""
    with pytest.raises(SizeMismatchError):
        ops.bin_op(a, Vector([1.0]), lambda x, y, i: x)


def test_scale_and_normalize(a):
    """Test the two-operand scale and normalize."""
    assert ops.scale(a, 2).to_list() == [2, 4, 6]
    assert ops.normalize(Vector([3, 4])).to_list() == pytest.approx([0.6, 0.8])
    assert a.to_list() == [1, 2, 3]


def test_project_leaves_both_inputs(a):
    """Test project leaves both inputs unchanged."""
    onto = Vector([1.0, 0.0, 0.0])
    result = ops.project(a, onto)

    assert result.to_list() == pytest.approx([1.0, 0.0, 0.0])
    assert result is not onto
    assert onto.to_list() == [1, 0, 0]


def test_combine_from_empty_adopts_kind():
    """Test combining onto an empty vector adopts the other's kind."""
    v = Vector(np.array([1, 2], dtype=np.int16))
    result = ops.combine(Vector(), v)

    assert result.equals(v)
    assert result.element_kind == np.int16


def test_read_only_forms(a, b):
    """Test dot, angle and equals as module functions."""
    assert ops.dot(a, b) == pytest.approx(32)
    assert ops.dot(a, b) == pytest.approx(ops.dot(b, a))
    assert ops.angle(Vector([1, 0]), Vector([0, 1])) == pytest.approx(math.pi / 2)
    assert ops.equals(a, Vector([1, 2, 3]))
    assert not ops.equals(a, b)
