#!/usr/bin/env python3
# =============================================================================
#     File: __init__.py
#  Created: 2026-10-12 08:59
#   Author: Bernie Roesler
#
"""
hhqr: Householder QR factorization of dense, real matrices.

The factorization overwrites the columns of A with the columns of R, and
stores the unit-normalized Householder vectors that represent Q.

Example usage:
    import hhqr
    A = hhqr.ColumnMatrix([[1, 2, 3], [0, 1, 2]])  # columns of a 3x2 matrix
    V = hhqr.ReflectorSet(*A.shape)
    hhqr.householder(A, V)
    print(A.toarray())      # R
    print(V.toarray())      # reflectors
    print(hhqr.apply_qleft(V, A.toarray()))  # the original matrix

Author: Bernie Roesler
Date: 2026-10-12
Version: 0.1
"""
# =============================================================================

from ._vector import (
    VectorView,
    partial_copy,
    partial_dot,
    scalar_div,
    sub_dot,
    partial_scalar_sub,
    dot
)
from ._matrix import ColumnMatrix, ReflectorSet
from ._householder import (
    DegenerateReflectionError,
    DegenerateReflectionWarning,
    householder,
    householder_qr,
    qr_solve
)
from .qr_utils import *
from .utils import *

__version__ = '0.1.0'

# =============================================================================
# =============================================================================
