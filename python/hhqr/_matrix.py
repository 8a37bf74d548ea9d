#!/usr/bin/env python3
# =============================================================================
#     File: _matrix.py
#  Created: 2026-10-12 10:15
#   Author: Bernie Roesler
#
"""
Column-wise storage for the matrix being factored and for the Householder
reflection vectors.

Each column (or reflector) is its own float64 buffer. The lengths of the
buffers are checked once at construction, so the factorization can rely on
them without further bounds checks.
"""
# =============================================================================

import numpy as np

from ._vector import VectorView


def _as_real_vector(x, name='column'):
    """Copy `x` into a new 1D float64 array, rejecting complex input."""
    x = np.asarray(x)
    if np.iscomplexobj(x):
        raise TypeError(f"Complex {name}s are not supported.")
    x = np.array(x, dtype=np.float64, copy=True).ravel()
    if not np.all(np.isfinite(x)):
        raise ValueError(f"Every {name} entry must be finite.")
    return x


class ColumnMatrix:
    """A dense M-by-N matrix stored as N independent columns of length M.

    Parameters
    ----------
    columns : sequence of (M,) array_like
        The columns of the matrix. The data is copied.

    Examples
    --------
    >>> A = ColumnMatrix([[1, 2, 3], [0, 1, 2]])
    >>> A.shape
    (3, 2)
    """

    def __init__(self, columns):
        cols = [_as_real_vector(c) for c in columns]

        if len(cols) == 0:
            raise ValueError("Matrix must have at least one column.")

        M = cols[0].size

        if M == 0:
            raise ValueError("Matrix must have at least one row.")

        for j, c in enumerate(cols):
            if c.size != M:
                raise ValueError(
                    f"Column {j} has length {c.size}, expected {M}."
                )

        self._cols = cols

    @classmethod
    def from_ndarray(cls, A):
        """Create a matrix from a 2D array_like of shape (M, N)."""
        A = np.asarray(A)
        if A.ndim != 2:
            raise ValueError("Input matrix must be 2-dimensional.")
        return cls(A.T)

    @classmethod
    def zeros(cls, M, N):
        """Create an M-by-N matrix of zeros."""
        return cls(np.zeros((N, M)))

    @property
    def shape(self):
        return (self._cols[0].size, len(self._cols))

    def __len__(self):
        return len(self._cols)

    def __iter__(self):
        return iter(self._cols)

    def __getitem__(self, j):
        return self._cols[j]

    def __repr__(self):
        return f"ColumnMatrix(shape={self.shape})"

    def column(self, j):
        """Return a view of the entire `j`th column."""
        return VectorView(self._cols[j])

    def trailing(self, j, i):
        """Return a view of rows `i:` of column `j`."""
        return self.column(j).sub(i)

    def toarray(self):
        """Return the matrix as an (M, N) ndarray."""
        return np.column_stack(self._cols)

    def copy(self):
        return ColumnMatrix(self._cols)


class ReflectorSet:
    """Storage for the N Householder vectors of an M-by-N factorization.

    The `i`th buffer has length ``M - i``. Buffers are zero until written by
    the factorization.

    Parameters
    ----------
    M, N : int
        The shape of the matrix being factored. Requires ``N <= M``.
    """

    def __init__(self, M, N):
        M, N = int(M), int(N)

        if N < 1 or M < 1:
            raise ValueError(f"Invalid shape {(M, N)}.")

        if N > M:
            raise ValueError(
                f"Householder QR requires N <= M, got shape {(M, N)}."
            )

        self._M = M
        self._vs = [np.zeros(M - i) for i in range(N)]

    @classmethod
    def from_arrays(cls, vs):
        """Create a set from existing reflectors, validating their lengths.

        Parameters
        ----------
        vs : sequence of 1D array_like
            The reflectors, where ``len(vs[i]) == len(vs[0]) - i``.

        Returns
        -------
        V : ReflectorSet
            A set holding copies of the reflectors.
        """
        vs = [_as_real_vector(v, name='reflector') for v in vs]

        if len(vs) == 0:
            raise ValueError("At least one reflector is required.")

        M = vs[0].size
        V = cls(M, len(vs))

        for i, v in enumerate(vs):
            if v.size != M - i:
                raise ValueError(
                    f"Reflector {i} has length {v.size}, expected {M - i}."
                )
            V._vs[i][:] = v

        return V

    @property
    def shape(self):
        return (self._M, len(self._vs))

    def __len__(self):
        return len(self._vs)

    def __getitem__(self, i):
        return VectorView(self._vs[i])

    def __repr__(self):
        return f"ReflectorSet(shape={self.shape})"

    def buffer(self, i):
        """Return the raw buffer of the `i`th reflector."""
        return self._vs[i]

    def toarray(self):
        """Return the reflectors as the columns of an (M, N) ndarray.

        Column `i` holds ``v[i]`` in rows ``i:``, with zeros above.
        """
        M, N = self.shape
        V = np.zeros((M, N))
        for i, v in enumerate(self._vs):
            V[i:, i] = v
        return V

    def norms(self):
        """Return the 2-norm of each reflector."""
        return np.array([self[i].norm() for i in range(len(self))])


# =============================================================================
# =============================================================================
