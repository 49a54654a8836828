################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geometry_kit
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Positions in N-dimensional space."""

from __future__ import annotations

from typing import Any
from typing import Iterable

import numpy as np
from numpy.typing import DTypeLike
from numpy.typing import NDArray

from geometry_kit.geometry_errors import DimensionMismatchError
from geometry_kit.geometry_errors import InvalidArgumentError
from geometry_kit.matrix.rectangular_matrix import RectangularMatrix
from geometry_kit.matrix.rectangular_matrix import numeric_dtype


class Point(RectangularMatrix):
    """Position in N-dimensional space, stored as a 1xN matrix.

    All matrix operations apply. Adding or subtracting another 1xN matrix,
    or right-multiplying by an NxN matrix, yields a Point again.
    """

    def __init__(self, coords: Iterable[Any], dtype: DTypeLike | None = None) -> None:
        """Create a point from its coordinates."""
        source: NDArray[Any] = as_coordinates(coords)
        if source.size == 0:
            raise InvalidArgumentError(f"{type(self).__name__} needs a coordinate")
        super().__init__(
            1, source.size, source.dtype if dtype is None else dtype
        )
        self._data[0, :] = source

    @classmethod
    def zeros(cls, dimension: int, dtype: DTypeLike = np.float64) -> Point:
        """Return the origin of an N-dimensional space."""
        if dimension <= 0:
            raise InvalidArgumentError("Dimension must be positive")
        data: NDArray[Any] = np.zeros((1, dimension), dtype=numeric_dtype(dtype))
        return cls._wrap(data)  # type: ignore[return-value]

    @classmethod
    def _validate_shape(cls, shape: tuple[int, int]) -> None:
        if shape[0] != 1:
            raise DimensionMismatchError(
                f"{cls.__name__} must be a 1xN matrix, got {shape[0]}x{shape[1]}"
            )

    @property
    def dimension(self) -> int:
        return self.columns

    def get_coord(self, index: int) -> Any:
        """Return one coordinate."""
        return self.at(0, index)

    def to_tuple(self) -> tuple[Any, ...]:
        return tuple(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, dtype={self.dtype})"


def as_coordinates(coords: Iterable[Any]) -> NDArray[Any]:
    """Return coordinates as a flat numpy array.

    Accepts plain sequences, numpy arrays, and 1xN matrices.
    """
    if isinstance(coords, RectangularMatrix):
        if coords.rows != 1:
            raise DimensionMismatchError(
                f"Coordinates must come from a 1xN matrix, "
                f"got {coords.rows}x{coords.columns}"
            )
        return coords.to_array().reshape(-1)
    array: NDArray[Any] = np.asarray(
        coords if isinstance(coords, np.ndarray) else list(coords)
    )
    if array.ndim > 1:
        raise InvalidArgumentError("Coordinates must be a flat sequence")
    return array.reshape(-1)
