#!/usr/bin/env python3
# =============================================================================
#     File: utils.py
#  Created: 2026-10-17 09:33
#   Author: Bernie Roesler
# =============================================================================

"""Utilities for the hhqr performance scripts."""

import gc
import timeit
import tracemalloc

import numpy as np


def measure_perf(func, setup=None, N_repeats=5):
    """Measure the time and peak memory of a function that mutates its input.

    Parameters
    ----------
    func : callable
        The function to measure. Called with the output of `setup`.
    setup : callable, optional
        Creates fresh arguments for each call of `func`, outside of the
        timed and traced region. Must return a tuple.
    N_repeats : int, optional
        The number of timed runs.

    Returns
    -------
    time : float
        The minimum execution time in seconds.
    peak_kb : float
        The peak traced memory usage of `func` in kilobytes.
    """
    if setup is None:
        setup = tuple

    ts = []
    for _ in range(N_repeats):
        args = setup()
        t0 = timeit.default_timer()
        func(*args)
        ts.append(timeit.default_timer() - t0)

    time = np.min(ts)

    # Measure memory usage (single pass)
    args = setup()
    gc.collect()  # force garbage collection before measuring
    tracemalloc.start()

    try:
        func(*args)
    except Exception:
        tracemalloc.stop()
        raise

    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    peak_kb = peak / 1024

    return time, peak_kb


def householder_flops(M, N):
    """The leading-order flop count of Householder QR, 2 M N^2 - 2/3 N^3."""
    return 2 * M * N**2 - (2 / 3) * N**3


# =============================================================================
# =============================================================================
