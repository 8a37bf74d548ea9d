#!/usr/bin/env python3
# =============================================================================
#     File: helpers.py
#  Created: 2026-10-15 15:44
#   Author: Bernie Roesler
#
"""Helper functions for the hhqr tests."""
# =============================================================================

import pytest

import matplotlib.pyplot as plt
import numpy as np

from pathlib import Path

import hhqr

from hhqr.plot import cspy, qrspy


# Group the matrices for parameterization
N = 7  # arbitrary matrix size for testing
TEST_MATRICES = [
    ("Identity", np.eye(N)),
    ("Diagonal", np.diag(np.arange(1.0, N + 1))),
    ("Negative Diagonal", -np.diag(np.arange(1.0, N + 1))),
    ("Asymmetric Banded",
        np.diag(np.ones(N - 1), -1) + np.diag(np.arange(1.0, N + 1))),
    ("Laplacian (Symmetric Banded)",
        np.diag(np.ones(N - 1), -1) - 2 * np.eye(N)
        + np.diag(np.ones(N - 1), 1)),
    # See: Strang Linear Algebra p 203.
    ("Strang 3x3", np.array([[1, 1, 2], [0, 0, 1], [1, 0, 0]], dtype=float)),
    ("Example 3x2", np.array([[1, 0], [2, 1], [3, 2]], dtype=float)),
    ("Example 8x5", hhqr.example_matrix(8, 5, format='ndarray')),
    ("Example 6x6", hhqr.example_matrix(6, 6, format='ndarray')),
    ("Single Column", np.c_[[3.0, -4.0, 12.0]]),
    ("Scalar", np.array([[-2.5]])),
    ("Hilbert 6x4", 1 / (np.add.outer(np.arange(6), np.arange(4)) + 1)),
]


def categorize_shape(M, N):
    """Categorize the shape of a matrix based on its dimensions."""
    if M == N:
        return "square"
    else:
        return "over"


def generate_test_matrices(seed=565656, N_runs=5):
    """Generate fixed and random dense matrices with N <= M."""
    # Fixed test matrices
    for case_name, A in TEST_MATRICES:
        M, N = A.shape
        shape_cat = categorize_shape(M, N)
        test_id = f"{shape_cat}::{case_name}"
        yield pytest.param(shape_cat, case_name, A, id=test_id)

    # Random test matrices
    rng = np.random.default_rng(seed)
    Ns = np.r_[2, 7, 10]
    scales = np.r_[1, 1.4, 3]

    for N in Ns:
        for i in range(N_runs):
            for s in scales:
                M = int(s * N)
                A = rng.standard_normal((M, N))

                shape_cat = categorize_shape(M, N)
                case_name = f"Random {M}x{N} ({seed=}, {i=})"
                test_id = f"{shape_cat}::{case_name}"
                yield pytest.param(shape_cat, case_name, A,
                                   id=test_id,
                                   marks=pytest.mark.random)


def save_qr_figure(A, V, R, name, fig_dir='test_qr'):
    """Save a figure of A and the V + R storage of its factorization."""
    fig, axs = plt.subplots(num=1, ncols=2, clear=True)
    fig.suptitle(f"Householder QR for {name}")

    cspy(A, ax=axs[0], colorbar=False)
    axs[0].set_title('A')
    qrspy(V, R, ax=axs[1], colorbar=False)

    fig_dir = Path('test_figures') / fig_dir
    fig_dir.mkdir(parents=True, exist_ok=True)

    figure_path = fig_dir / f"{name.replace('/', '_').replace(' ', '_')}.pdf"
    print(f"Saving figure to {figure_path}")
    fig.savefig(figure_path)

    plt.close(fig)

# =============================================================================
# =============================================================================
