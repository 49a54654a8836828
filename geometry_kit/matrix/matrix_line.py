################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geometry_kit
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Row and column traversal over matrix storage."""

from __future__ import annotations

import functools
from collections.abc import Sequence
from typing import Any
from typing import Iterator

import numpy as np
from numpy.typing import NDArray

from geometry_kit.geometry_errors import DimensionMismatchError
from geometry_kit.geometry_errors import InvalidArgumentError
from geometry_kit.geometry_errors import OutOfRangeError


def promoted_dtype(*dtypes: Any) -> np.dtype[Any]:
    """Return the element type arithmetic on the given types produces.

    Integer types narrower than the platform integer widen to it.
    """
    result: np.dtype[Any] = np.result_type(*dtypes)
    if (
        np.issubdtype(result, np.integer)
        and result.itemsize < np.dtype(np.int_).itemsize
    ):
        result = np.result_type(result, np.int_)
    return result


class MatrixLine(Sequence[Any]):
    """Random-access view over a single row or column of a matrix.

    A row is a contiguous run of elements, a column is a strided run whose
    stride equals the column count of the matrix. Both are exposed through
    this one interface so that multiplication can pair a row of one matrix
    with a column of another without caring which is which.

    Writes through the view update the owning matrix.
    """

    def __init__(self, values: NDArray[Any], *, stride: int) -> None:
        """Wrap a one-dimensional numpy view."""
        if values.ndim != 1:
            raise InvalidArgumentError("A matrix line must be one-dimensional")
        if stride <= 0:
            raise InvalidArgumentError("A matrix line stride must be positive")
        self._values: NDArray[Any] = values
        self._stride: int = stride

    def __len__(self) -> int:
        return int(self._values.shape[0])

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return self._values[index].tolist()
        self._check_index(index)
        return self._values[index].item()

    def __setitem__(self, index: int, value: Any) -> None:
        self._check_index(index)
        self._values[index] = value

    def __iter__(self) -> Iterator[Any]:
        for value in self._values:
            yield value.item()

    def __repr__(self) -> str:
        return f"MatrixLine({self._values.tolist()!r}, stride={self._stride})"

    @property
    def stride(self) -> int:
        """Distance in storage elements between consecutive entries."""
        return self._stride

    @property
    def is_contiguous(self) -> bool:
        """True when the entries are adjacent in storage (rows)."""
        return self._stride == 1 or len(self) <= 1

    @property
    def dtype(self) -> np.dtype[Any]:
        return self._values.dtype

    def cursor(self, offset: int = 0) -> LineCursor:
        """Return a random-access cursor positioned at ``offset``."""
        return LineCursor(self, offset)

    def begin(self) -> LineCursor:
        return LineCursor(self, 0)

    def end(self) -> LineCursor:
        return LineCursor(self, len(self))

    def dot(self, other: MatrixLine) -> Any:
        """Return the sum of pairwise products, traversing both in lockstep.

        The result uses the promoted element type of the two lines.
        """
        if len(self) != len(other):
            raise DimensionMismatchError(
                f"Cannot pair a line of {len(self)} elements "
                f"with a line of {len(other)} elements"
            )
        dtype: np.dtype[Any] = promoted_dtype(self.dtype, other.dtype)
        return np.dot(
            self._values.astype(dtype, copy=False),
            other._values.astype(dtype, copy=False),
        )

    def to_array(self) -> NDArray[Any]:
        """Return a copy of the entries as a numpy array."""
        return self._values.copy()

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self):
            raise OutOfRangeError(
                f"Line index {index} is out of bounds for a line of {len(self)}"
            )


@functools.total_ordering
class LineCursor:
    """Position within a MatrixLine supporting random-access arithmetic.

    Valid offsets run from 0 to ``len(line)`` inclusive, the last one being
    the past-the-end position which cannot be dereferenced.
    """

    __slots__ = ("_line", "_offset")

    def __init__(self, line: MatrixLine, offset: int) -> None:
        if not 0 <= offset <= len(line):
            raise OutOfRangeError(
                f"Cursor offset {offset} is out of bounds for a line of {len(line)}"
            )
        self._line: MatrixLine = line
        self._offset: int = offset

    @property
    def line(self) -> MatrixLine:
        return self._line

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def value(self) -> Any:
        """Return the element under the cursor."""
        return self._line[self._offset]

    def set_value(self, value: Any) -> None:
        """Overwrite the element under the cursor."""
        self._line[self._offset] = value

    def __getitem__(self, n: int) -> Any:
        return self._line[self._offset + n]

    def __add__(self, n: int) -> LineCursor:
        return LineCursor(self._line, self._offset + n)

    def __radd__(self, n: int) -> LineCursor:
        return self + n

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, LineCursor):
            self._check_same_line(other)
            return self._offset - other._offset
        return LineCursor(self._line, self._offset - int(other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineCursor):
            return NotImplemented
        return self._line is other._line and self._offset == other._offset

    def __lt__(self, other: LineCursor) -> bool:
        self._check_same_line(other)
        return self._offset < other._offset

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LineCursor(offset={self._offset}, length={len(self._line)})"

    def _check_same_line(self, other: LineCursor) -> None:
        if self._line is not other._line:
            raise InvalidArgumentError("Cursors belong to different matrix lines")
