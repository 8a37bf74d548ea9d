#!/usr/bin/env python3
# =============================================================================
#     File: householder_stability.py
#  Created: 2026-10-17 10:20
#   Author: Bernie Roesler
#
r"""
Demonstration of the sign choice in the Householder vector computation.

For an input vector close to the first unit vector,

.. math:: x = [1 + \varepsilon, \varepsilon]^T

with :math:`0 < \varepsilon \ll 1`, the naïve reflector

.. math:: v = x - \|x\| e_1

suffers from cancellation in its first component, so that normalizing it
divides by (nearly) zero. `hhqr.householder` instead uses

.. math:: v = x + \text{sign}(x_1) \|x\| e_1,

whose first component is always at least :math:`|x_1|`, so the unit
reflector and the eliminated entries stay accurate for any
:math:`\varepsilon`.
"""
# =============================================================================

import matplotlib.pyplot as plt
import numpy as np
import scipy.linalg as la

from pathlib import Path

import hhqr

SAVE_FIGS = False
fig_path = Path('../../plots/')


def naive_reflection_error(x):
    """Return the size of the eliminated entries using ``v = x - ||x|| e_1``."""
    v = np.copy(x)
    v[0] -= la.norm(x)  # cancellation occurs!
    with np.errstate(divide='ignore', invalid='ignore'):
        v /= la.norm(v)
    Hx = x - 2 * (v @ x) * v
    return la.norm(Hx[1:])


def signed_reflection_error(x):
    """Return the size of the eliminated entries using `hhqr.householder`."""
    _, R = hhqr.householder_qr(np.c_[x])
    return la.norm(R[0][1:])


if __name__ == "__main__":
    # -------------------------------------------------------------------------
    #         Show numerical *instability* of the naïve method
    # -------------------------------------------------------------------------
    ϵ = 1e-15  # a very small number

    x = np.r_[1 + ϵ, ϵ]  # a vector very close to e_1 == [1, 0]

    v = x - la.norm(x) * np.r_[1, 0]
    with np.errstate(divide='ignore', invalid='ignore'):
        v /= la.norm(v)

    V, R = hhqr.householder_qr(np.c_[x])

    np.set_printoptions(suppress=False)
    print("x:", x)
    print("v:")
    print("   naïve:", v)         # [nan, nan], or far from unit length
    print("  signed:", V.buffer(0))
    print("R:", R[0])

    # -------------------------------------------------------------------------
    #         Numerical experiment of the eliminated entry vs. ϵ
    # -------------------------------------------------------------------------
    N = 100
    epsilons = np.logspace(-15, 3, N)
    xs = np.c_[1 + epsilons, epsilons]  # (N, 2)

    naive_errs = np.array([naive_reflection_error(x) for x in xs])
    signed_errs = np.array([signed_reflection_error(x) for x in xs])

    fig, ax = plt.subplots(num=1, clear=True)
    fig.set_size_inches(6, 5, forward=True)

    ax.plot(epsilons, naive_errs, 'C3', label='$v = x - \\|x\\| e_1$')
    ax.plot(epsilons, signed_errs, 'C0',
            label='$v = x + \\mathrm{sign}(x_1) \\|x\\| e_1$')
    ax.plot(epsilons, np.finfo(float).eps * la.norm(xs, axis=1), 'k-.',
            lw=1, label='$\\epsilon_{mach} \\|x\\|$')

    ax.legend(loc='upper left')
    ax.set(
        title=r'Eliminated entry of $Hx$ for $x = [1 + \epsilon, \epsilon]^T$',
        xscale='log',
        yscale='log',
        xlabel=r'$\epsilon$',
        ylabel=r'$|(Hx)_2|$',
    )
    ax.grid(which='both')

    if SAVE_FIGS:
        fig.savefig(fig_path / 'householder_stability.pdf')

    plt.show()

# =============================================================================
# =============================================================================
