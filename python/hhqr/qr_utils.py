#!/usr/bin/env python3
# =============================================================================
#     File: qr_utils.py
#  Created: 2026-10-13 09:26
#   Author: Bernie Roesler
#
"""
Apply the Householder reflectors of a QR factorization to other matrices.

The reflectors are unit vectors, so each :math:`H_i = I - 2 v_i v_i^T` is
applied as a rank-1 update of the trailing rows, without forming `H_i` or `Q`.
"""
# =============================================================================

import numpy as np
from scipy import sparse

from ._matrix import ReflectorSet


__all__ = ['apply_qtleft', 'apply_qleft', 'apply_qright']


def _setup(V, Y, side='left'):
    """Convert `V` and `Y` to dense 2D arrays, defaulting `Y` to the identity.

    Also returns the number of dimensions of `Y`, so that a 1D `Y` can be
    given a 1D result.
    """
    if isinstance(V, ReflectorSet):
        V = V.toarray()

    V = np.asarray(V, dtype=np.float64)
    M, N = V.shape

    if Y is None:
        return V, np.eye(M), 2

    if sparse.issparse(Y):
        Y = Y.toarray()

    X = np.array(Y, dtype=np.float64, copy=True)
    ndim = X.ndim

    if ndim == 1:
        X = X[:, np.newaxis] if side == 'left' else X[np.newaxis, :]

    MY = X.shape[0] if side == 'left' else X.shape[1]
    if MY != M:
        raise ValueError(
            f"Y has {MY} {'rows' if side == 'left' else 'columns'}, "
            f"expected {M}."
        )

    return V, X, ndim


def apply_qtleft(V, Y=None):
    r"""Apply Householder vectors on the left as :math:`Q^T Y`.

    Computes :math:`X = H_{N-1} \dots H_1 H_0 Y = Q^T Y`, where :math:`Q` is
    represented by the unit Householder vectors stored in `V`. To obtain
    :math:`Q^T` itself, omit `Y`.

    Parameters
    ----------
    V : ReflectorSet or (M, N) ndarray
        The Householder vectors. As an array, column `i` holds the `i`th
        vector in rows ``i:``; rows above are ignored.
    Y : (M, K) or (M,) ndarray or sparse array, optional
        The matrix to which the Householder transformations are applied. If not
        given, the identity matrix is used.

    Returns
    -------
    result : (M, K) or (M,) ndarray
        The result of applying the Householder transformations to `Y`, with
        the same number of dimensions as `Y`.

    See also
    --------
    apply_qleft : Apply Householder vectors on the left as :math:`Q Y`.
    apply_qright : Apply Householder vectors on the right as :math:`Y Q`.
    """
    V, X, ndim = _setup(V, Y)
    M, N = V.shape

    for i in range(N):
        v = V[i:, [i]]
        X[i:] -= v @ (2 * v.T @ X[i:])

    return X.ravel() if ndim == 1 else X


def apply_qleft(V, Y=None):
    r"""Apply Householder vectors on the left as :math:`Q Y`.

    Computes :math:`X = H_0 H_1 \dots H_{N-1} Y = Q Y`. In particular,
    ``apply_qleft(V, R)`` reconstructs the original matrix.

    Parameters
    ----------
    V : ReflectorSet or (M, N) ndarray
        The Householder vectors.
    Y : (M, K) or (M,) ndarray or sparse array, optional
        The matrix to which the Householder transformations are applied. If not
        given, the identity matrix is used, resulting in the full `Q` matrix.

    Returns
    -------
    result : (M, K) or (M,) ndarray
        The result of applying the Householder transformations to `Y`, with
        the same number of dimensions as `Y`.
    """
    V, X, ndim = _setup(V, Y)
    M, N = V.shape

    for i in reversed(range(N)):
        v = V[i:, [i]]
        X[i:] -= v @ (2 * v.T @ X[i:])

    return X.ravel() if ndim == 1 else X


def apply_qright(V, Y=None):
    r"""Apply Householder vectors on the right as :math:`Y Q`.

    Computes :math:`X = Y H_0 H_1 \dots H_{N-1} = Y Q`. To obtain :math:`Q`
    itself, omit `Y`.

    Parameters
    ----------
    V : ReflectorSet or (M, N) ndarray
        The Householder vectors.
    Y : (K, M) or (M,) ndarray or sparse array, optional
        The matrix to which the Householder transformations are applied. If not
        given, the identity matrix is used, resulting in the full `Q` matrix.

    Returns
    -------
    result : (K, M) or (M,) ndarray
        The result of applying the Householder transformations to `Y`, with
        the same number of dimensions as `Y`.
    """
    V, X, ndim = _setup(V, Y, side='right')
    M, N = V.shape

    for i in range(N):
        v = V[i:, [i]]
        X[:, i:] -= (X[:, i:] @ (2 * v)) @ v.T

    return X.ravel() if ndim == 1 else X


# =============================================================================
# =============================================================================
