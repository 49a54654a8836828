################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geometry_kit
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Tests for the Point type."""

from __future__ import annotations

import numpy as np
import pytest

from geometry_kit.geometry_errors import DimensionMismatchError
from geometry_kit.geometry_errors import InvalidArgumentError
from geometry_kit.geometry_errors import OutOfRangeError
from geometry_kit.matrix.rectangular_matrix import RectangularMatrix
from geometry_kit.vector.point import Point
from geometry_kit.vector.point import as_coordinates
from geometry_kit.vector.vector import Vector


def test_point_is_a_row_matrix() -> None:
    """Points are 1xN matrices."""
    point: Point = Point([1.0, 2.0, 3.0])
    assert point.shape == (1, 3)
    assert point.dimension == 3
    assert point.get_coord(2) == 3.0
    assert point.to_tuple() == (1.0, 2.0, 3.0)
    assert isinstance(point, RectangularMatrix)


def test_point_element_type() -> None:
    """The element type follows the coordinates unless given."""
    assert Point([1, 2]).dtype == np.dtype(np.int64)
    assert Point([1, 2], dtype=np.float32).dtype == np.dtype(np.float32)


def test_point_from_row_matrix() -> None:
    """A 1xN matrix converts to a Point, other shapes do not."""
    row: RectangularMatrix = RectangularMatrix.from_values(1, 3, [4, 5, 6])
    assert Point(row).to_tuple() == (4, 5, 6)
    with pytest.raises(DimensionMismatchError):
        Point(RectangularMatrix(2, 3))


def test_point_rejects_bad_coordinates() -> None:
    """Empty or nested coordinates are rejected."""
    with pytest.raises(InvalidArgumentError):
        Point([])
    with pytest.raises(InvalidArgumentError):
        Point(np.zeros((2, 2)))
    with pytest.raises(InvalidArgumentError):
        Point(["a", "b"])


def test_point_coordinate_bounds() -> None:
    """Coordinate access is bounds checked."""
    with pytest.raises(OutOfRangeError):
        Point([1.0, 2.0]).get_coord(2)


def test_zeros() -> None:
    """The origin has the requested dimension."""
    origin: Point = Point.zeros(4)
    assert origin.to_tuple() == (0.0, 0.0, 0.0, 0.0)
    with pytest.raises(InvalidArgumentError):
        Point.zeros(0)


def test_arithmetic_keeps_point_type() -> None:
    """Same-shape results stay Points."""
    point: Point = Point([1.0, 2.0, 3.0])
    moved: RectangularMatrix = point + Vector([1.0, 1.0, 1.0])
    assert isinstance(moved, Point)
    assert moved.to_tuple() == (2.0, 3.0, 4.0)
    assert isinstance(point - point, Point)
    assert isinstance(-point, Point)

    identity: RectangularMatrix = RectangularMatrix.from_values(
        3, 3, [1, 0, 0, 0, 1, 0, 0, 0, 1]
    )
    product: RectangularMatrix = point * identity
    assert isinstance(product, Point)
    assert product == point


def test_shape_changing_results_are_plain_matrices() -> None:
    """Results of another shape are plain matrices."""
    point: Point = Point([1.0, 2.0, 3.0])
    column: RectangularMatrix = point.transposed()
    assert type(column) is RectangularMatrix
    assert column.shape == (3, 1)
    narrowed: RectangularMatrix = point * RectangularMatrix(3, 2)
    assert type(narrowed) is RectangularMatrix
    assert narrowed.shape == (1, 2)


def test_dimension_mismatch() -> None:
    """Points of different dimensions do not add."""
    with pytest.raises(DimensionMismatchError):
        Point([1.0, 2.0, 3.0]) + Point([1.0, 2.0])


def test_as_coordinates() -> None:
    """Coordinates flatten from sequences, arrays and row matrices."""
    assert as_coordinates((1, 2, 3)).tolist() == [1, 2, 3]
    assert as_coordinates(iter([1.5, 2.5])).tolist() == [1.5, 2.5]
    assert as_coordinates(np.array([7, 8])).tolist() == [7, 8]
    assert as_coordinates(Point([9, 10])).tolist() == [9, 10]
