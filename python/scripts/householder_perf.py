#!/usr/bin/env python3
# =============================================================================
#     File: householder_perf.py
#  Created: 2026-10-17 12:49
#   Author: Bernie Roesler
#
"""
Measure the run time and peak memory of `hhqr.householder`.

The run time is compared with the flop count 2 M N^2 - 2/3 N^3, and the peak
memory of the factorization itself (excluding the caller's buffers) is
compared with the size of the matrix.
"""
# =============================================================================

import json

import matplotlib.pyplot as plt
import numpy as np

from collections import defaultdict
from pathlib import Path

import hhqr

from utils import measure_perf, householder_flops


SAVE_FIG = False
SAVE_DATA = False

SEED = 565656

filestem = 'householder_perf'
plot_dir = Path(__file__).resolve().parents[2] / 'plots'

# -----------------------------------------------------------------------------
#         Create the data
# -----------------------------------------------------------------------------
Ns = np.r_[10, 20, 50, 100, 200, 500]
aspects = [1, 2]  # M = aspect * N

N_repeats = 5  # number of timed runs per size

rng = np.random.default_rng(SEED)

results = defaultdict(lambda: defaultdict(list))

for aspect in aspects:
    for N in Ns:
        M = aspect * N
        print(f"---------- M, N = {M:5,d}, {N:5,d} ----------")

        A_dense = rng.standard_normal((M, N))

        def setup():
            return (hhqr.ColumnMatrix.from_ndarray(A_dense),
                    hhqr.ReflectorSet(M, N))

        time, peak_kb = measure_perf(hhqr.householder, setup, N_repeats)

        matrix_kb = A_dense.nbytes / 1024

        results[aspect]['time'].append(time)
        results[aspect]['peak_kb'].append(peak_kb)
        results[aspect]['matrix_kb'].append(matrix_kb)
        results[aspect]['flops'].append(householder_flops(M, N))

        print(f"time: {time:.4g} s, peak: {peak_kb:.4g} kB "
              f"(matrix: {matrix_kb:.4g} kB)")


if SAVE_DATA:
    plot_dir.mkdir(parents=True, exist_ok=True)
    with open(plot_dir / f"{filestem}.json", 'w') as f:
        json.dump(dict(Ns=Ns.tolist(), results=results), f, indent=2)


# -----------------------------------------------------------------------------
#         Plot the data
# -----------------------------------------------------------------------------
fig, axs = plt.subplots(num=1, ncols=2, clear=True)
fig.suptitle('Householder QR')
fig.set_size_inches(10, 4.8, forward=True)

for i, aspect in enumerate(aspects):
    res = results[aspect]
    label = f"M = {aspect} N"

    # Scale the flop model to the largest measured time
    flops = np.array(res['flops'])
    model = flops * res['time'][-1] / flops[-1]

    axs[0].plot(Ns, res['time'], f"C{i}.-", label=label)
    axs[0].plot(Ns, model, f"C{i}--", label=f"{label}, flop model")

    axs[1].plot(Ns, res['peak_kb'], f"C{i}.-", label=f"{label}, peak")
    axs[1].plot(Ns, res['matrix_kb'], f"C{i}:", label=f"{label}, matrix")

axs[0].set(ylabel='Runtime [s]')
axs[1].set(ylabel='Memory [kB]')

for ax in axs:
    ax.set(xscale='log', yscale='log', xlabel='Number of Columns')
    ax.grid(True, which='both')
    ax.legend()

plt.show()

if SAVE_FIG:
    plot_dir.mkdir(parents=True, exist_ok=True)
    fig_fullpath = plot_dir / f"{filestem}.png"
    try:
        fig.savefig(fig_fullpath)
        print(f"Saved figure to {fig_fullpath}.")
    except Exception as e:
        print(f"Could not save figure to {fig_fullpath}: {e}")
        raise e

# =============================================================================
# =============================================================================
