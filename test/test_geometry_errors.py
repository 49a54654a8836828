################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geometry_kit
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Tests for the geometry error hierarchy."""

from __future__ import annotations

import pytest

from geometry_kit.geometry_errors import AllocationFailureError
from geometry_kit.geometry_errors import DimensionMismatchError
from geometry_kit.geometry_errors import GeometryError
from geometry_kit.geometry_errors import InvalidArgumentError
from geometry_kit.geometry_errors import OutOfRangeError
from geometry_kit.matrix.rectangular_matrix import RectangularMatrix


def test_hierarchy() -> None:
    """Every error is a GeometryError and a matching builtin."""
    assert issubclass(OutOfRangeError, IndexError)
    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(DimensionMismatchError, InvalidArgumentError)
    assert issubclass(AllocationFailureError, MemoryError)
    for error in (
        OutOfRangeError,
        InvalidArgumentError,
        DimensionMismatchError,
        AllocationFailureError,
    ):
        assert issubclass(error, GeometryError)


def test_builtin_handlers_catch_geometry_errors() -> None:
    """Callers can catch the builtin category."""
    with pytest.raises(IndexError):
        RectangularMatrix(2, 2).at(2, 0)
    with pytest.raises(ValueError):
        RectangularMatrix(2, 2) + RectangularMatrix(2, 3)


def test_out_of_range_message() -> None:
    """Index errors name the index and the matrix shape."""
    with pytest.raises(OutOfRangeError, match=r"\[1, 4\].*2x3"):
        RectangularMatrix(2, 3).at(1, 4)
