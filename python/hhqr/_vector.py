#!/usr/bin/env python3
# =============================================================================
#     File: _vector.py
#  Created: 2026-10-12 09:41
#   Author: Bernie Roesler
#
"""
Elementary vector operations used by the Householder factorization.

The primitives operate on 1D float arrays with explicit `length` and `offset`
arguments. The `VectorView` class wraps a buffer with a fixed offset and
length so that the factorization never has to do the index arithmetic itself.
"""
# =============================================================================

import numpy as np


# -----------------------------------------------------------------------------
#         Primitives
# -----------------------------------------------------------------------------
def partial_copy(src, dst, length, offset=0):
    """Copy `src[offset:offset+length]` into `dst[:length]`."""
    dst[:length] = src[offset:offset+length]


def partial_dot(x, y, length, skip_head=False):
    """Compute the inner product of `x[:length]` and `y[:length]`.

    Parameters
    ----------
    x, y : (N,) ndarray
        The vectors.
    length : int
        The number of leading entries to use.
    skip_head : bool, optional
        If True, exclude the product `x[0] * y[0]` from the sum.

    Returns
    -------
    result : float
        The inner product.
    """
    start = 1 if skip_head else 0
    return float(np.dot(x[start:length], y[start:length]))


def scalar_div(x, s, length, out=None):
    """Divide `x[:length]` by the scalar `s`, storing the result in `out`.

    If `out` is None, `x` is overwritten.
    """
    if out is None:
        out = x
    np.divide(x[:length], s, out=out[:length])
    return out


def sub_dot(a, v, length, offset=0):
    """Compute the inner product of `a[offset:offset+length]` and `v[:length]`."""
    return float(np.dot(a[offset:offset+length], v[:length]))


def partial_scalar_sub(v, s, length, offset, target):
    """Compute `target[offset:offset+length] -= s * v[:length]` in place."""
    target[offset:offset+length] -= s * v[:length]
    return target


def dot(x, y, length):
    """Compute the inner product of the first `length` entries of `x` and `y`."""
    return partial_dot(x, y, length)


# -----------------------------------------------------------------------------
#         Views
# -----------------------------------------------------------------------------
class VectorView:
    """A read/write window of `length` entries into `buffer`, from `offset`.

    Indices are relative to the window, so that ``view[0]`` is
    ``buffer[offset]``. No data is copied.

    Parameters
    ----------
    buffer : (N,) ndarray
        The underlying 1D array.
    offset : int, optional
        The index of the first entry of the window.
    length : int, optional
        The number of entries in the window. Defaults to the rest of the
        buffer.
    """

    __slots__ = ('buffer', 'offset', 'length')

    def __init__(self, buffer, offset=0, length=None):
        if length is None:
            length = len(buffer) - offset

        if offset < 0 or length < 0 or offset + length > len(buffer):
            raise ValueError(
                f"Window [{offset}, {offset + length}) does not fit in a "
                f"buffer of length {len(buffer)}."
            )

        self.buffer = buffer
        self.offset = offset
        self.length = length

    def __len__(self):
        return self.length

    def __repr__(self):
        return (f"VectorView(offset={self.offset}, length={self.length}, "
                f"values={self.toarray()!r})")

    def __array__(self, dtype=None, copy=None):
        x = self.toarray()
        if dtype is not None and np.dtype(dtype) != x.dtype:
            if copy is False:
                raise ValueError(
                    f"Cannot convert a {x.dtype} view to {np.dtype(dtype)} "
                    "without a copy."
                )
            return x.astype(dtype)
        return x.copy() if copy else x

    def _index(self, k):
        if not -self.length <= k < self.length:
            raise IndexError(f"Index {k} out of range for length {self.length}")
        return self.offset + (k % self.length)

    def __getitem__(self, k):
        return self.buffer[self._index(k)]

    def __setitem__(self, k, value):
        self.buffer[self._index(k)] = value

    def sub(self, start):
        """Return the view of entries `start:` of this view."""
        return VectorView(self.buffer, self.offset + start, self.length - start)

    def toarray(self):
        """Return the window as an ndarray that shares memory with the buffer."""
        return self.buffer[self.offset:self.offset+self.length]

    # ---------- Operations in terms of the primitives
    def copy_from(self, other):
        """Overwrite this window with the entries of `other`."""
        if len(other) != self.length:
            raise ValueError(
                f"Cannot copy a view of length {len(other)} into a view of "
                f"length {self.length}."
            )
        partial_copy(other.buffer, self.toarray(), self.length, other.offset)
        return self

    def dot(self, other, skip_head=False):
        """Inner product with `other`, optionally omitting the head entries."""
        if skip_head:
            return partial_dot(self.toarray(), other.toarray(), self.length,
                               skip_head=True)
        return sub_dot(self.buffer, other.toarray(), self.length, self.offset)

    def norm(self):
        """The 2-norm of the window."""
        return np.sqrt(dot(self.toarray(), self.toarray(), self.length))

    def amax(self):
        """The largest absolute value in the window, or 0 if it is empty."""
        if self.length == 0:
            return 0.0
        return float(np.max(np.abs(self.toarray())))

    def div_(self, s):
        """Divide the window by `s` in place."""
        scalar_div(self.toarray(), s, self.length)
        return self

    def sub_scaled_(self, s, other):
        """Compute ``self -= s * other`` in place."""
        partial_scalar_sub(other.toarray(), s, self.length, self.offset,
                           self.buffer)
        return self


# =============================================================================
# =============================================================================
