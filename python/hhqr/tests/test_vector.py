#!/usr/bin/env python3
# =============================================================================
#     File: test_vector.py
#  Created: 2026-10-15 10:02
#   Author: Bernie Roesler
#
"""Unit tests for the vector primitives and the VectorView class."""
# =============================================================================

import numpy as np
import pytest

from numpy.testing import assert_allclose, assert_array_equal

from hhqr import (
    VectorView,
    partial_copy,
    partial_dot,
    scalar_div,
    sub_dot,
    partial_scalar_sub,
    dot
)


@pytest.fixture
def x():
    return np.arange(1.0, 7.0)  # [1, 2, 3, 4, 5, 6]


# -----------------------------------------------------------------------------
#         Primitives
# -----------------------------------------------------------------------------
def test_partial_copy(x):
    """Test copying a sub-range into the head of another buffer."""
    dst = np.full(5, -1.0)
    partial_copy(x, dst, 3, 2)
    assert_array_equal(dst, [3, 4, 5, -1, -1])


def test_partial_dot(x):
    """Test the dot product over a leading range, with and without head."""
    y = np.ones(6)
    assert partial_dot(x, y, 4) == 10
    assert partial_dot(x, y, 4, skip_head=True) == 9
    assert partial_dot(x, x, 1, skip_head=True) == 0


def test_scalar_div(x):
    """Test in-place and out-of-place division by a scalar."""
    out = np.zeros(6)
    scalar_div(x, 2, 4, out=out)
    assert_array_equal(out, [0.5, 1, 1.5, 2, 0, 0])
    assert_array_equal(x, np.arange(1.0, 7.0))

    scalar_div(x, 2, 2)
    assert_array_equal(x, [0.5, 1, 3, 4, 5, 6])


def test_sub_dot(x):
    """Test the dot product of an offset sub-range with a vector."""
    v = np.r_[1.0, -1.0, 2.0]
    assert sub_dot(x, v, 3, 3) == 4 - 5 + 12


def test_partial_scalar_sub(x):
    """Test the in-place scaled subtraction over an offset sub-range."""
    v = np.r_[1.0, 1.0]
    partial_scalar_sub(v, 2, 2, 1, x)
    assert_array_equal(x, [1, 0, 1, 4, 5, 6])


def test_dot(x):
    """Test the full dot product."""
    assert dot(x, x, 6) == 91
    assert dot(x, x, 2) == 5


# -----------------------------------------------------------------------------
#         VectorView
# -----------------------------------------------------------------------------
def test_view_indexing(x):
    """Test that indices are relative to the window and write through."""
    view = VectorView(x, 2, 3)
    assert len(view) == 3
    assert view[0] == 3
    assert view[-1] == 5

    view[1] = 10
    assert x[3] == 10

    with pytest.raises(IndexError):
        view[3]


def test_view_default_length(x):
    """Test that the window extends to the end of the buffer by default."""
    view = VectorView(x, 4)
    assert_array_equal(view.toarray(), [5, 6])
    assert_array_equal(np.asarray(view), [5, 6])


def test_view_array_copy(x):
    """Test that the array protocol honors the `copy` keyword."""
    view = VectorView(x, 1, 3)

    assert np.shares_memory(view.__array__(), x)
    assert np.shares_memory(view.__array__(copy=False), x)

    y = view.__array__(copy=True)
    assert not np.shares_memory(y, x)
    assert_array_equal(y, [2, 3, 4])

    z = np.asarray(view, dtype=np.float32)
    assert z.dtype == np.float32
    assert_array_equal(z, [2, 3, 4])

    with pytest.raises(ValueError, match="without a copy"):
        view.__array__(dtype=np.float32, copy=False)


@pytest.mark.parametrize(
    "offset, length, expect",
    [
        pytest.param(0, 6, 10.0, id="full"),
        pytest.param(0, 2, 2.0, id="head"),
        pytest.param(3, 3, 6.0, id="tail"),
        pytest.param(3, 0, 0.0, id="empty"),
    ]
)
def test_view_amax(x, offset, length, expect):
    """Test the largest absolute value in a window."""
    x[2] = -10.0
    assert VectorView(x, offset, length).amax() == expect


@pytest.mark.parametrize("offset, length", [(-1, 2), (0, 7), (5, 2)])
def test_view_out_of_bounds(x, offset, length):
    """Test that a window must fit inside its buffer."""
    with pytest.raises(ValueError):
        VectorView(x, offset, length)


def test_view_sub(x):
    """Test narrowing a view."""
    sub = VectorView(x, 1).sub(2)
    assert sub.offset == 3
    assert len(sub) == 3
    assert_array_equal(sub.toarray(), [4, 5, 6])


def test_view_toarray_shares_memory(x):
    """Test that the array of a view is not a copy."""
    view = VectorView(x, 1, 2)
    view.toarray()[:] = 0
    assert_array_equal(x, [1, 0, 0, 4, 5, 6])


def test_view_copy_from(x):
    """Test copying between windows of different buffers."""
    dst = VectorView(np.zeros(4), 1)
    dst.copy_from(VectorView(x, 3))
    assert_array_equal(dst.buffer, [0, 4, 5, 6])

    with pytest.raises(ValueError):
        dst.copy_from(VectorView(x, 2))


def test_view_dot(x):
    """Test the view dot product with and without the head entries."""
    a = VectorView(x, 3)        # [4, 5, 6]
    v = VectorView(np.r_[1.0, 2.0, 3.0])
    assert a.dot(v) == 4 + 10 + 18
    assert a.dot(v, skip_head=True) == 10 + 18
    assert v.dot(v, skip_head=True) == 13


def test_view_norm():
    """Test the 2-norm of a window."""
    view = VectorView(np.r_[7.0, 3.0, 4.0], 1)
    assert_allclose(view.norm(), 5)


def test_view_div_(x):
    """Test in-place division of a window."""
    VectorView(x, 4).div_(2)
    assert_array_equal(x, [1, 2, 3, 4, 2.5, 3])


def test_view_sub_scaled_(x):
    """Test the in-place update ``a -= s * v`` on a window."""
    a = VectorView(x, 3)
    v = VectorView(np.r_[1.0, 0.0, -1.0])
    a.sub_scaled_(2, v)
    assert_array_equal(x, [1, 2, 3, 2, 5, 8])

# =============================================================================
# =============================================================================
