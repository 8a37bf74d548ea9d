#!/usr/bin/env python3
# =============================================================================
#     File: utils.py
#  Created: 2026-10-13 14:13
#   Author: Bernie Roesler
#
"""
Utility functions for the hhqr module.
"""
# =============================================================================

import numpy as np

from scipy import linalg as la

from ._matrix import ColumnMatrix, ReflectorSet
from ._vector import dot
from .qr_utils import apply_qleft


__all__ = [
    'example_matrix',
    'to_ndarray',
    'from_ndarray',
    'reflector_norms',
    'is_upper_triangular',
    'reconstruction_error',
    'print_matrix',
    'print_reflectors',
    'print_reflector_norms',
]


def example_matrix(M, N, format='column'):
    r"""Create the M-by-N example matrix with a unit-stepped lower triangle.

    Each entry on or below the diagonal is ``A[r, c] = r - c + 1``, and the
    entries above the diagonal are zero. For example, ``example_matrix(4, 3)``
    is

    .. code-block:: python
        array([[1., 0., 0.],
               [2., 1., 0.],
               [3., 2., 1.],
               [4., 3., 2.]])

    Parameters
    ----------
    M, N : int
        The shape of the matrix.
    format : str in {'column', 'ndarray'}, optional
        The type of the output.

    Returns
    -------
    A : (M, N) ColumnMatrix or ndarray
        The example matrix.
    """
    r, c = np.indices((M, N))
    A = np.where(r >= c, r - c + 1, 0).astype(np.float64)
    return _format_matrix(A, format)


def _format_matrix(A, format):
    """Convert an ndarray to the specified format."""
    match format:
        case 'column':
            return ColumnMatrix.from_ndarray(A)
        case 'ndarray':
            return A
        case _:
            raise ValueError(f"Invalid format '{format}'")


def to_ndarray(A):
    """Convert a ColumnMatrix or ReflectorSet to an (M, N) ndarray.

    Arrays are returned as float64 arrays.
    """
    if isinstance(A, (ColumnMatrix, ReflectorSet)):
        return A.toarray()
    return np.asarray(A, dtype=np.float64)


def from_ndarray(A):
    """Convert an (M, N) array_like to a ColumnMatrix."""
    return ColumnMatrix.from_ndarray(A)


# -----------------------------------------------------------------------------
#         Verification
# -----------------------------------------------------------------------------
def reflector_norms(V):
    """Compute the squared 2-norm of each reflector.

    Parameters
    ----------
    V : ReflectorSet
        The reflectors.

    Returns
    -------
    result : (N,) ndarray
        ``result[i] == v[i] @ v[i]``, which is 1 for a valid factorization.
    """
    return np.array([
        dot(V.buffer(i), V.buffer(i), len(V[i])) for i in range(len(V))
    ])


def is_upper_triangular(R, atol=1e-12):
    """Check that all entries below the diagonal of R are within `atol` of 0."""
    R = to_ndarray(R)
    return bool(np.all(np.abs(np.tril(R, -1)) <= atol))


def reconstruction_error(V, R, A):
    r"""Compute the relative error :math:`\|QR - A\|_F / \|A\|_F`.

    Parameters
    ----------
    V : ReflectorSet or (M, N) ndarray
        The reflectors.
    R : (M, N) ColumnMatrix or ndarray
        The upper triangular factor.
    A : (M, N) ColumnMatrix or ndarray
        The original matrix.

    Returns
    -------
    result : float
        The relative error, or the absolute error if A is zero.
    """
    A = to_ndarray(A)
    QR = apply_qleft(V, to_ndarray(R))
    err = la.norm(QR - A)
    norm_A = la.norm(A)
    return err / norm_A if norm_A > 0 else err


# -----------------------------------------------------------------------------
#         Printing
# -----------------------------------------------------------------------------
def print_matrix(A, name='A'):
    """Print a matrix row by row, as ``%9.6g`` entries."""
    A = to_ndarray(A)
    print(f"{name} = ")
    for row in A:
        print(''.join('%9.6g ' % x for x in row))
    print()


def print_reflectors(V):
    """Print each reflector on its own line."""
    for i in range(len(V)):
        print(f"v[{i}] = " + ''.join('%9.6g ' % x for x in V.buffer(i)))
    print()


def print_reflector_norms(V):
    """Print the squared norm of each reflector, five per line."""
    N = len(V)
    norms = reflector_norms(V)

    print(f"Numerical verification that v[0], ..., v[{N-1}] are normalized:")
    for i, x in enumerate(norms):
        end = '.' if i == N - 1 else ', '
        print(f"||v[{i}]||^2 = {x:g}{end}", end='')
        if (i + 1) % 5 == 0 or i == N - 1:
            print()
    print()


# =============================================================================
# =============================================================================
