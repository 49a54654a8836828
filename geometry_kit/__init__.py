################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geometry_kit
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Geometry toolkit: dense matrices, vectors, points and labeled polylines."""

from __future__ import annotations

from geometry_kit.config.geometry_params import GeometryParams
from geometry_kit.config.geometry_params import PolylineParams
from geometry_kit.geometry_errors import AllocationFailureError
from geometry_kit.geometry_errors import DimensionMismatchError
from geometry_kit.geometry_errors import GeometryError
from geometry_kit.geometry_errors import InvalidArgumentError
from geometry_kit.geometry_errors import OutOfRangeError
from geometry_kit.matrix import LineCursor
from geometry_kit.matrix import MatrixLine
from geometry_kit.matrix import RectangularMatrix
from geometry_kit.polyline import MergeStrategy
from geometry_kit.polyline import Polyline
from geometry_kit.polyline import choose_merge_strategy
from geometry_kit.vector import Point
from geometry_kit.vector import Vector


__all__ = [
    "AllocationFailureError",
    "DimensionMismatchError",
    "GeometryError",
    "GeometryParams",
    "InvalidArgumentError",
    "LineCursor",
    "MatrixLine",
    "MergeStrategy",
    "OutOfRangeError",
    "Point",
    "Polyline",
    "PolylineParams",
    "RectangularMatrix",
    "Vector",
    "choose_merge_strategy",
]
