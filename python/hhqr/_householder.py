#!/usr/bin/env python3
# =============================================================================
#     File: _householder.py
#  Created: 2026-10-12 13:02
#   Author: Bernie Roesler
#
"""
Householder QR factorization of a dense, real, M-by-N matrix with N <= M.

The columns of A are overwritten by the columns of R, and the N reflection
vectors, which represent Q implicitly, are stored unit-normalized.
"""
# =============================================================================

import warnings

import numpy as np

from scipy import linalg as la

from ._matrix import ColumnMatrix, ReflectorSet
from .qr_utils import apply_qtleft


class DegenerateReflectionError(ArithmeticError):
    """Raised when a trailing sub-vector is zero, so no reflector exists.

    Attributes
    ----------
    column : int
        The index of the step (and column) that failed.
    norm : float
        The largest entry of the trailing sub-vector, which is zero.
    """

    def __init__(self, column, norm=0.0):
        self.column = column
        self.norm = norm
        super().__init__(
            f"Degenerate reflection at column {column}: cannot normalize a "
            f"reflector of norm {norm}. The trailing sub-vector is zero, so "
            "the matrix is rank-deficient."
        )


class DegenerateReflectionWarning(RuntimeWarning):
    """Issued when a degenerate step is replaced by the reflector e_1."""


_ON_DEGENERATE = ('raise', 'warn')


def householder(A, V, on_degenerate='raise'):
    r"""Compute the Householder QR factorization of A in place.

    Given a matrix A of shape (M, N) with N <= M, this function computes N
    reflection vectors and the factor R of a full QR decomposition of A, where
    R is an M-by-N upper triangular matrix. The columns of `A` are overwritten
    by the columns of R, and ``V[i]`` receives the `i`th reflection vector.

    Each reflector defines

    .. math:: H_i = I - 2 v_i v_i^T

    acting on rows ``i:`` only, such that

    .. math:: R = H_{N-1} \cdots H_1 H_0 A, \quad Q = H_0 H_1 \cdots H_{N-1}.

    The head of each reflector is shifted by :math:`\text{sign}(x_0) \|x\|`,
    so that no cancellation occurs. The partial dot product of the tail of
    the reflector is computed once and reused to renormalize after the head
    update. The number of flops is :math:`\sim 2 M N^2 - \frac{2}{3} N^3`,
    and the only additional memory is a few scalars.

    Parameters
    ----------
    A : (M, N) ColumnMatrix
        The matrix to factor. Overwritten by R.
    V : ReflectorSet
        Storage for the reflectors, with ``V.shape == A.shape``.
        ``V[i]`` has length ``M - i``.
    on_degenerate : str in {'raise', 'warn'}, optional
        What to do if the trailing sub-vector of a column is zero when it is
        processed. 'raise' (default) raises `DegenerateReflectionError`.
        'warn' issues a `DegenerateReflectionWarning` and uses the first unit
        vector as the reflector, which leaves the zero column unchanged.

    Raises
    ------
    DegenerateReflectionError
        If a degenerate step occurs and ``on_degenerate='raise'``.
    FloatingPointError
        If the entries of a column overflow while the reflectors are applied.

    See also
    --------
    householder_qr : Factor a copy of an array and allocate the reflectors.
    """
    if not isinstance(A, ColumnMatrix):
        raise TypeError(f"A must be a ColumnMatrix, got {type(A)}.")

    if not isinstance(V, ReflectorSet):
        raise TypeError(f"V must be a ReflectorSet, got {type(V)}.")

    if on_degenerate not in _ON_DEGENERATE:
        raise ValueError(
            f"on_degenerate must be one of {_ON_DEGENERATE}, "
            f"got '{on_degenerate}'."
        )

    M, N = A.shape

    if N > M:
        raise ValueError(
            f"Householder QR requires N <= M, got shape {(M, N)}."
        )

    if V.shape != A.shape:
        raise ValueError(
            f"Reflector storage has shape {V.shape}, expected {A.shape}."
        )

    for i in range(N):
        v = V[i]

        # v = A[i:, i]
        v.copy_from(A.trailing(i, i))

        # Scale v to max |v[k]| == 1 so the squares below cannot underflow or
        # overflow. v is normalized afterwards, so the scale cancels.
        vmax = v.amax()

        if vmax == 0:
            if on_degenerate == 'raise':
                raise DegenerateReflectionError(i, vmax)

            warnings.warn(
                f"Column {i} has a zero trailing sub-vector; "
                "using e_1 as the reflector.",
                DegenerateReflectionWarning,
                stacklevel=2
            )
            v[0] = 1.0
        elif not np.isfinite(vmax):
            raise FloatingPointError(
                f"Column {i} overflowed after {i} reflections."
            )
        else:
            v.div_(vmax)

            # vpartdot == ||v||^2 - v[0]^2 is unchanged by the update of v[0],
            # so the norm after the update needs no second pass over v.
            vpartdot = v.dot(v, skip_head=True)

            # v[0] += sign(v[0]) * ||v||, with sign(0) == 1
            if v[0] < 0:
                v[0] -= np.sqrt(v[0] * v[0] + vpartdot)
            else:
                v[0] += np.sqrt(v[0] * v[0] + vpartdot)

            vnorm = np.sqrt(v[0] * v[0] + vpartdot)
            v.div_(vnorm)

        for j in range(i, N):
            # A[i:, j] -= 2 * (v^T A[i:, j]) * v
            a = A.trailing(j, i)
            vTa = a.dot(v)
            a.sub_scaled_(2 * vTa, v)


def householder_qr(A, on_degenerate='raise'):
    """Compute the Householder QR factorization of a copy of A.

    Parameters
    ----------
    A : (M, N) array_like or ColumnMatrix
        The matrix to factor, with N <= M. It is not modified.
    on_degenerate : str in {'raise', 'warn'}, optional
        See `householder`.

    Returns
    -------
    V : ReflectorSet
        The N unit-norm reflection vectors.
    R : (M, N) ColumnMatrix
        The upper triangular factor.

    Examples
    --------
    >>> V, R = householder_qr([[1, 0], [2, 1], [3, 2]])
    >>> R.shape
    (3, 2)
    >>> [len(v) for v in (V[0], V[1])]
    [3, 2]
    """
    if isinstance(A, ColumnMatrix):
        R = A.copy()
    else:
        R = ColumnMatrix.from_ndarray(A)

    M, N = R.shape

    if N > M:
        raise ValueError(
            "For a successful factorization, this implementation requires "
            f"N <= M, got shape {(M, N)}."
        )

    V = ReflectorSet(M, N)
    householder(R, V, on_degenerate=on_degenerate)

    return V, R


def qr_solve(A, b):
    r"""Solve the least-squares problem :math:`\min_x \|Ax - b\|_2`.

    Parameters
    ----------
    A : (M, N) array_like or ColumnMatrix
        The matrix, with N <= M and full column rank.
    b : (M,) or (M, K) array_like
        The right-hand side(s).

    Returns
    -------
    x : (N,) or (N, K) ndarray
        The least-squares solution(s).

    Raises
    ------
    DegenerateReflectionError
        If a column of A is linearly dependent on the previous ones, such
        that its trailing sub-vector vanishes during the factorization.
    """
    V, R = householder_qr(A)
    M, N = R.shape

    b = np.asarray(b, dtype=np.float64)

    if b.shape[0] != M:
        raise ValueError(f"b has {b.shape[0]} rows, expected {M}.")

    y = apply_qtleft(V, b.reshape(M, -1))  # Q^T b
    x = la.solve_triangular(R.toarray()[:N], y[:N], lower=False)

    return x.reshape((N,) + b.shape[1:])


# =============================================================================
# =============================================================================
