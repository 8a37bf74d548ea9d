#!/usr/bin/env python3
# =============================================================================
#     File: plot.py
#  Created: 2026-10-14 19:44
#   Author: Bernie Roesler
#
"""
Functions for plotting the factors of a Householder QR decomposition.
"""
# =============================================================================

import matplotlib.pyplot as plt
import numpy as np

from matplotlib.ticker import MaxNLocator
from scipy.sparse import issparse

from ._matrix import ColumnMatrix, ReflectorSet


def cspy(A, cmap='viridis_r', colorbar=True, ax=None, **kwargs):
    """Visualize a matrix with markers colored by value.

    This function is similar to `matplotlib.pyplot.spy`, but it colors the
    markers based on the value of the non-zero elements in the matrix.

    Parameters
    ----------
    A : array_like, sparse array, ColumnMatrix, or ReflectorSet
        The 2D matrix to visualize.
    cmap : str or matplotlib.colors.Colormap, optional
        The colormap to use for coloring the markers, by default 'viridis_r'.
    colorbar : bool, optional
        Whether to display a colorbar, by default True.
    ax : matplotlib.axes.Axes, optional
        An existing Axes object to plot on. If None (default), the current axes
        are used.
    **kwargs
        Additional keyword arguments passed directly to
        `matplotlib.pyplot.imshow`.

    Returns
    -------
    ax : matplotlib.axes.Axes
        The Axes object used for plotting.
    cb : matplotlib.colorbar.Colorbar
        The colorbar object, or None.

    See Also
    --------
    matplotlib.pyplot.spy : Plot the sparsity pattern of a 2D array.
    """
    if ax is None:
        ax = plt.gca()

    fig = ax.figure

    if isinstance(A, (ColumnMatrix, ReflectorSet)):
        dense_matrix = A.toarray()
    elif issparse(A):
        dense_matrix = A.toarray().astype(np.float64)
    else:
        try:
            dense_matrix = np.array(A, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise TypeError(
                "Input matrix must be a NumPy array, SciPy sparse matrix, "
                f"or convertible to a 2D NumPy array. Error: {e}"
            )

    if dense_matrix.ndim != 2:
        raise ValueError("Input matrix must be 2-dimensional.")

    M, N = dense_matrix.shape
    nnz = np.count_nonzero(dense_matrix)

    # Set zeros to NaN so they are not drawn
    dense_matrix[dense_matrix == 0] = np.nan

    ax.set_xlim(-0.75, N - 0.25 if N > 0 else 0.75)
    ax.set_ylim(M - 0.25 if M > 0 else 0.75, -0.75)  # inverted y-axis like spy

    ax.xaxis.tick_top()
    ax.xaxis.set_major_locator(MaxNLocator(integer=True))
    ax.yaxis.set_major_locator(MaxNLocator(integer=True))

    if nnz == 0:
        ax.set_xlabel(f"{(M, N)}, nnz = 0, density = 0")
        return ax, None

    ax.set_xlabel(f"{(M, N)}, nnz = {nnz}, density = {nnz / (M * N):.2%}")

    im = ax.imshow(dense_matrix, cmap=cmap, origin='upper', aspect='equal',
                   **kwargs)

    cb = fig.colorbar(im, ax=ax, shrink=0.8) if colorbar else None

    return ax, cb


def qrspy(V, R, ax=None, **kwargs):
    """Plot the storage of a Householder QR factorization as ``V + R``.

    The reflectors fill the diagonal and the lower triangle, and R fills the
    diagonal and the upper triangle.

    Parameters
    ----------
    V : ReflectorSet or (M, N) ndarray
        The reflectors.
    R : (M, N) ColumnMatrix or ndarray
        The upper triangular factor.
    ax : matplotlib.axes.Axes, optional
        Axes object to plot on. If `None`, the current axes are used.
    **kwargs
        Additional keyword arguments passed to `cspy`.

    Returns
    -------
    ax : matplotlib.axes.Axes
        The Axes object used for plotting.
    cb : matplotlib.colorbar.Colorbar
        The colorbar object, or None.
    """
    if ax is None:
        ax = plt.gca()

    V = V.toarray() if isinstance(V, ReflectorSet) else np.asarray(V)
    R = R.toarray() if isinstance(R, ColumnMatrix) else np.asarray(R)

    if V.shape != R.shape:
        raise ValueError(f"Shapes of V {V.shape} and R {R.shape} differ.")

    ax, cb = cspy(V + R, ax=ax, **kwargs)

    M, N = R.shape
    ax.plot([-0.5, N - 0.5], [-0.5, N - 0.5], 'k-', lw=1)  # the diagonal
    ax.set_title(f"V + R, {M}-by-{N}")

    return ax, cb


# =============================================================================
# =============================================================================
