################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geometry_kit
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Error taxonomy shared by matrices, vectors and polylines."""

from __future__ import annotations


class GeometryError(Exception):
    """Base class for errors raised by the geometry core."""


class OutOfRangeError(GeometryError, IndexError):
    """Raised when an element, row, column or point index is out of bounds."""


class InvalidArgumentError(GeometryError, ValueError):
    """Raised when an argument cannot be accepted by an operation."""


class DimensionMismatchError(InvalidArgumentError):
    """Raised when operand dimensions are incompatible for an operation."""


class AllocationFailureError(GeometryError, MemoryError):
    """Raised when backing storage for a capacity change cannot be acquired."""
