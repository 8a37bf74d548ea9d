#!/usr/bin/env python3
# =============================================================================
#     File: conftest.py
#  Created: 2026-10-15 11:58
#   Author: Bernie Roesler
#
"""
Configuration file for pytest to set up the hhqr testing environment.
"""
# =============================================================================

import matplotlib


def pytest_addoption(parser):
    """Add command-line options for pytest."""
    parser.addoption(
        "--make-figures",
        action="store_true",
        default=False,
        help="Save figures of the QR factors to ./test_figures."
    )


def pytest_configure(config):
    """Draw figures off-screen, since tests only ever save them."""
    matplotlib.use('Agg')

# =============================================================================
# =============================================================================
