################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geometry_kit
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Fixed-dimension dense matrices."""

from __future__ import annotations

from geometry_kit.matrix.matrix_line import LineCursor
from geometry_kit.matrix.matrix_line import MatrixLine
from geometry_kit.matrix.matrix_line import promoted_dtype
from geometry_kit.matrix.rectangular_matrix import RectangularMatrix


__all__ = [
    "LineCursor",
    "MatrixLine",
    "RectangularMatrix",
    "promoted_dtype",
]
