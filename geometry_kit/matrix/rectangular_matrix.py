################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geometry_kit
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Dense matrix with fixed dimensions and row-major storage."""

from __future__ import annotations

from typing import Any
from typing import Iterable
from typing import Iterator

import numpy as np
from numpy.typing import DTypeLike
from numpy.typing import NDArray

from geometry_kit.geometry_errors import DimensionMismatchError
from geometry_kit.geometry_errors import InvalidArgumentError
from geometry_kit.geometry_errors import OutOfRangeError
from geometry_kit.matrix.matrix_line import MatrixLine
from geometry_kit.matrix.matrix_line import promoted_dtype


def numeric_dtype(dtype: DTypeLike) -> np.dtype[Any]:
    """Resolve a dtype, rejecting anything but integer and floating types."""
    try:
        resolved: np.dtype[Any] = np.dtype(dtype)
    except TypeError as exc:
        raise InvalidArgumentError(f"Unknown element type {dtype!r}") from exc
    if not (
        np.issubdtype(resolved, np.integer) or np.issubdtype(resolved, np.floating)
    ):
        raise InvalidArgumentError(
            f"Matrix elements must be integer or floating point, got {resolved}"
        )
    return resolved


def _check_dimensions(rows: int, columns: int) -> None:
    if rows <= 0 or columns <= 0:
        raise InvalidArgumentError(
            f"Matrix dimensions must be positive, got {rows}x{columns}"
        )


class RectangularMatrix:
    """Dense ``rows`` x ``columns`` matrix of a numeric element type.

    The dimensions are fixed when the matrix is created and never change.
    Elements are stored contiguously in row-major order. Matrices behave as
    values: arithmetic always produces a new matrix and copies never share
    storage.

    Binary operations check dimensions before touching any element and raise
    DimensionMismatchError when they are incompatible. The element type of a
    result is the numpy promotion of both operand element types, with
    integers narrower than the platform integer widened to it first.
    """

    _data: NDArray[Any]

    def __init__(self, rows: int, columns: int, dtype: DTypeLike = np.float64) -> None:
        """Create a matrix with every element set to zero."""
        _check_dimensions(rows, columns)
        self._data = np.zeros((rows, columns), dtype=numeric_dtype(dtype))

    @classmethod
    def filled(
        cls,
        rows: int,
        columns: int,
        value: Any,
        dtype: DTypeLike | None = None,
    ) -> RectangularMatrix:
        """Create a matrix with every element set to ``value``."""
        _check_dimensions(rows, columns)
        resolved: np.dtype[Any] = numeric_dtype(
            np.asarray(value).dtype if dtype is None else dtype
        )
        return cls._wrap(np.full((rows, columns), value, dtype=resolved))

    @classmethod
    def from_values(
        cls,
        rows: int,
        columns: int,
        values: Iterable[Any],
        dtype: DTypeLike | None = None,
    ) -> RectangularMatrix:
        """Create a matrix from values given in row-major order.

        Missing trailing values are zero-filled. Supplying more values than
        the matrix holds raises InvalidArgumentError.
        """
        _check_dimensions(rows, columns)
        source: NDArray[Any] = _flatten(values)
        if source.size > rows * columns:
            raise InvalidArgumentError(
                f"Invalid range size: {source.size} values do not fit "
                f"a {rows}x{columns} matrix"
            )
        resolved: np.dtype[Any]
        if dtype is None:
            resolved = numeric_dtype(source.dtype if source.size else np.float64)
        else:
            resolved = numeric_dtype(dtype)
        data: NDArray[Any] = np.zeros((rows, columns), dtype=resolved)
        data.reshape(-1)[: source.size] = source
        return cls._wrap(data)

    @classmethod
    def _wrap(cls, data: NDArray[Any]) -> RectangularMatrix:
        """Adopt an existing 2D array without copying it."""
        cls._validate_shape((int(data.shape[0]), int(data.shape[1])))
        matrix: RectangularMatrix = cls.__new__(cls)
        matrix._data = data
        return matrix

    @classmethod
    def _validate_shape(cls, shape: tuple[int, int]) -> None:
        """Hook for subclasses that only admit certain shapes."""

    def _like(self, data: NDArray[Any]) -> RectangularMatrix:
        # Keep the left operand's class only when the shape is unchanged
        if data.shape == self._data.shape:
            return type(self)._wrap(data)
        return RectangularMatrix._wrap(data)

    @property
    def rows(self) -> int:
        return int(self._data.shape[0])

    @property
    def columns(self) -> int:
        return int(self._data.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    @property
    def size(self) -> int:
        """Total number of elements."""
        return self.rows * self.columns

    @property
    def dtype(self) -> np.dtype[Any]:
        return self._data.dtype

    def at(self, row: int, column: int) -> Any:
        """Return the element at (row, column)."""
        self._check_index(row, column)
        return self._data[row, column].item()

    def set_at(self, row: int, column: int, value: Any) -> None:
        """Overwrite the element at (row, column)."""
        self._check_index(row, column)
        self._data[row, column] = value

    def __getitem__(self, key: tuple[int, int]) -> Any:
        row, column = self._split_key(key)
        return self.at(row, column)

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, column = self._split_key(key)
        self.set_at(row, column, value)

    def row(self, index: int) -> MatrixLine:
        """Return a contiguous view of one row."""
        if not 0 <= index < self.rows:
            raise OutOfRangeError(
                f"Matrix row index must be less than {self.rows} "
                f"for matrix {self.rows}x{self.columns}"
            )
        return MatrixLine(self._data[index, :], stride=1)

    def column(self, index: int) -> MatrixLine:
        """Return a strided view of one column."""
        if not 0 <= index < self.columns:
            raise OutOfRangeError(
                f"Matrix column index must be less than {self.columns} "
                f"for matrix {self.rows}x{self.columns}"
            )
        return MatrixLine(self._data[:, index], stride=self.columns)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over all elements in row-major order."""
        for value in self._data.reshape(-1):
            yield value.item()

    def iter_column_major(self) -> Iterator[Any]:
        """Iterate over all elements one column at a time."""
        for index in range(self.columns):
            yield from self.column(index)

    def transposed(self) -> RectangularMatrix:
        """Return the ``columns`` x ``rows`` transpose of this matrix."""
        # Reading column-major yields the row-major order of the transpose
        return RectangularMatrix.from_values(
            self.columns, self.rows, self.iter_column_major(), dtype=self.dtype
        )

    def __add__(self, other: Any) -> RectangularMatrix:
        if not isinstance(other, RectangularMatrix):
            return NotImplemented
        self._require_same_shape(other, "add")
        return self._like(
            np.add(
                self._data, other._data, dtype=promoted_dtype(self.dtype, other.dtype)
            )
        )

    def __sub__(self, other: Any) -> RectangularMatrix:
        if not isinstance(other, RectangularMatrix):
            return NotImplemented
        self._require_same_shape(other, "subtract")
        return self._like(
            np.subtract(
                self._data, other._data, dtype=promoted_dtype(self.dtype, other.dtype)
            )
        )

    def __iadd__(self, other: Any) -> RectangularMatrix:
        if not isinstance(other, RectangularMatrix):
            return NotImplemented
        self._require_same_shape(other, "add")
        # In-place arithmetic keeps this matrix's element type
        np.add(self._data, other._data, out=self._data, casting="unsafe")
        return self

    def __isub__(self, other: Any) -> RectangularMatrix:
        if not isinstance(other, RectangularMatrix):
            return NotImplemented
        self._require_same_shape(other, "subtract")
        np.subtract(self._data, other._data, out=self._data, casting="unsafe")
        return self

    def __neg__(self) -> RectangularMatrix:
        return self._like(np.negative(self._data, dtype=promoted_dtype(self.dtype)))

    def __mul__(self, other: Any) -> RectangularMatrix:
        """Multiply by a matrix whose row count equals our column count."""
        if not isinstance(other, RectangularMatrix):
            return NotImplemented
        if self.columns != other.rows:
            raise DimensionMismatchError(
                f"Cannot multiply a {self.rows}x{self.columns} matrix "
                f"by a {other.rows}x{other.columns} matrix"
            )
        result_dtype: np.dtype[Any] = promoted_dtype(self.dtype, other.dtype)
        result: NDArray[Any] = np.zeros((self.rows, other.columns), dtype=result_dtype)
        for row_index in range(self.rows):
            row: MatrixLine = self.row(row_index)
            for column_index in range(other.columns):
                result[row_index, column_index] = row.dot(other.column(column_index))
        return self._like(result)

    __matmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RectangularMatrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._data, other._data)
        )

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> RectangularMatrix:
        """Return an independent copy of this matrix."""
        return type(self)._wrap(self._data.copy())

    def __copy__(self) -> RectangularMatrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> RectangularMatrix:
        return self.copy()

    def to_array(self) -> NDArray[Any]:
        """Return the elements as a new ``(rows, columns)`` numpy array."""
        return self._data.copy()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.rows}x{self.columns}, "
            f"dtype={self.dtype}, {self._data.tolist()!r})"
        )

    def _check_index(self, row: int, column: int) -> None:
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise OutOfRangeError(
                f"Matrix index [{row}, {column}] is out of bounds "
                f"for matrix {self.rows}x{self.columns}"
            )

    def _require_same_shape(self, other: RectangularMatrix, operation: str) -> None:
        if self.shape != other.shape:
            raise DimensionMismatchError(
                f"Cannot {operation} a {other.rows}x{other.columns} matrix "
                f"and a {self.rows}x{self.columns} matrix"
            )

    @staticmethod
    def _split_key(key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise InvalidArgumentError("Matrix elements are indexed as [row, column]")
        return int(key[0]), int(key[1])


def _flatten(values: Iterable[Any]) -> NDArray[Any]:
    """Return the given values as a flat numpy array in row-major order."""
    if isinstance(values, RectangularMatrix):
        return values.to_array().reshape(-1)
    if isinstance(values, np.ndarray):
        return values.reshape(-1)
    return np.asarray(list(values)).reshape(-1)
