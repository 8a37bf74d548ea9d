#!/usr/bin/env python3
# =============================================================================
#     File: householder_demo.py
#  Created: 2026-10-16 15:02
#   Author: Bernie Roesler
#
"""
Interactive demonstration of the Householder QR factorization.

Prompts for the dimensions of A, factors the example matrix with
``A[r, c] = r - c + 1`` on and below the diagonal, and prints A, R, the
reflection vectors, and numerical evidence that the reflectors are
normalized.
"""
# =============================================================================

import matplotlib.pyplot as plt

import hhqr

from hhqr.plot import cspy, qrspy

SHOW_PLOT = False


def read_dimension(name):
    """Prompt for a positive integer dimension."""
    while True:
        text = input(f"Enter the dimension {name} (where A is a m by n matrix): ")
        try:
            value = int(text)
        except ValueError:
            print(f"'{text}' is not an integer.")
            continue
        if value < 1:
            print(f"The dimension {name} must be positive.")
            continue
        return value


if __name__ == "__main__":
    m = read_dimension('m')
    n = read_dimension('n')

    if m < n:
        print("For a successful factorization, this implementation "
              "requires n <= m.\nTerminating program.")
        raise SystemExit(0)

    A = hhqr.example_matrix(m, n)
    A_orig = A.toarray()
    V = hhqr.ReflectorSet(m, n)

    hhqr.print_matrix(A, name='A')

    hhqr.householder(A, V)

    hhqr.print_matrix(A, name='R')
    hhqr.print_reflectors(V)
    hhqr.print_reflector_norms(V)

    print(f"||QR - A|| / ||A|| = {hhqr.reconstruction_error(V, A, A_orig):.2e}")

    if SHOW_PLOT:
        fig, axs = plt.subplots(num=1, ncols=2, clear=True)
        cspy(A_orig, ax=axs[0])
        axs[0].set_title('A')
        qrspy(V, A, ax=axs[1])
        plt.show()

# =============================================================================
# =============================================================================
