################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geometry_kit
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Directions and displacements in N-dimensional space."""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import NDArray

from geometry_kit.matrix.rectangular_matrix import RectangularMatrix
from geometry_kit.vector.point import Point


class Vector(Point):
    """Direction in N-dimensional space, stored as a 1xN matrix.

    A Vector is a Point with directional meaning: it adds a length and a
    normalization on top of the positional type.
    """

    @classmethod
    def between(cls, from_point: Point, to_point: Point) -> Vector:
        """Return the vector ``from_point - to_point``.

        Note the orientation: the result points from ``to_point`` toward
        ``from_point``. Polyline distances and shifts are written against
        this orientation.
        """
        difference: RectangularMatrix = from_point - to_point
        return cls._wrap(difference.to_array())  # type: ignore[return-value]

    def length(self) -> float:
        """Return the Euclidean length, sqrt(v * v^T)."""
        square: Any = (self * self.transposed()).at(0, 0)
        return math.sqrt(square)

    def normalize(self) -> Vector:
        """Return a float64 unit vector, or the zero vector for zero length."""
        magnitude: float = self.length()
        if magnitude == 0.0:
            return Vector.zeros(self.dimension)  # type: ignore[return-value]
        data: NDArray[np.float64] = self._data.astype(np.float64) / magnitude
        return Vector._wrap(data)  # type: ignore[return-value]

    def negated(self) -> Vector:
        """Return the vector pointing the opposite way."""
        return -self  # type: ignore[return-value]
