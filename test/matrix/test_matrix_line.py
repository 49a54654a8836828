################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geometry_kit
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Tests for row and column traversal."""

from __future__ import annotations

import numpy as np
import pytest

from geometry_kit.geometry_errors import DimensionMismatchError
from geometry_kit.geometry_errors import InvalidArgumentError
from geometry_kit.geometry_errors import OutOfRangeError
from geometry_kit.matrix.matrix_line import LineCursor
from geometry_kit.matrix.matrix_line import MatrixLine
from geometry_kit.matrix.matrix_line import promoted_dtype
from geometry_kit.matrix.rectangular_matrix import RectangularMatrix


def _matrix_2x3() -> RectangularMatrix:
    return RectangularMatrix.from_values(2, 3, [1, 2, 3, 4, 5, 6])


def test_row_is_contiguous() -> None:
    """Rows are contiguous runs of column-count elements."""
    row: MatrixLine = _matrix_2x3().row(1)
    assert list(row) == [4, 5, 6]
    assert len(row) == 3
    assert row.stride == 1
    assert row.is_contiguous


def test_column_is_strided() -> None:
    """Columns step through storage by the column count."""
    column: MatrixLine = _matrix_2x3().column(1)
    assert list(column) == [2, 5]
    assert column.stride == 3
    assert not column.is_contiguous


def test_row_and_column_cursors() -> None:
    """Cursors dereference and offset like random-access iterators."""
    matrix: RectangularMatrix = RectangularMatrix.from_values(2, 2, [1, 2, 3, 4])
    row_cursor: LineCursor = matrix.row(1).begin()
    column_cursor: LineCursor = matrix.column(0).begin()
    assert row_cursor.value == 3
    assert (row_cursor + 1).value == 4
    assert column_cursor.value == 1
    assert (column_cursor + 1).value == 3
    assert column_cursor[1] == 3


def test_cursor_distance_and_ordering() -> None:
    """Cursor subtraction yields distances and cursors are ordered."""
    column: MatrixLine = _matrix_2x3().column(2)
    begin: LineCursor = column.begin()
    end: LineCursor = column.end()
    assert end - begin == 2
    assert begin - end == -2
    assert begin < end
    assert end >= begin
    assert 1 + begin == begin + 1
    assert (end - 1).value == 6
    assert (end - 1).offset == 1
    assert column.cursor(1) == begin + 1


def test_cursor_bounds() -> None:
    """Cursors stay within [begin, end] and never dereference end."""
    column: MatrixLine = _matrix_2x3().column(0)
    with pytest.raises(OutOfRangeError):
        column.end().value
    with pytest.raises(OutOfRangeError):
        column.cursor(3)
    with pytest.raises(OutOfRangeError):
        column.begin() - 1


def test_cursors_of_different_lines_do_not_compare() -> None:
    """Distances only make sense within one line."""
    matrix: RectangularMatrix = _matrix_2x3()
    first: LineCursor = matrix.column(0).begin()
    second: LineCursor = matrix.column(1).begin()
    assert first != second
    with pytest.raises(InvalidArgumentError):
        first - second
    with pytest.raises(InvalidArgumentError):
        first < second


def test_writes_go_through_to_matrix() -> None:
    """Lines are views onto matrix storage."""
    matrix: RectangularMatrix = _matrix_2x3()
    matrix.column(1)[0] = 20
    matrix.row(1).cursor(2).set_value(60)
    assert matrix.at(0, 1) == 20
    assert matrix.at(1, 2) == 60


def test_line_index_bounds() -> None:
    """Line element access is bounds checked."""
    row: MatrixLine = _matrix_2x3().row(0)
    with pytest.raises(OutOfRangeError):
        row[3]
    with pytest.raises(OutOfRangeError):
        row[-1]
    assert row[0:2] == [1, 2]


def test_row_and_column_index_bounds() -> None:
    """Rows and columns past the matrix bounds are rejected."""
    matrix: RectangularMatrix = _matrix_2x3()
    with pytest.raises(OutOfRangeError):
        matrix.row(2)
    with pytest.raises(OutOfRangeError):
        matrix.column(3)


def test_dot_pairs_row_with_column() -> None:
    """A row against a column gives one product element."""
    a: RectangularMatrix = _matrix_2x3()
    b: RectangularMatrix = RectangularMatrix.from_values(
        3, 2, [0.5, 1.0, 1.5, 2.0, 2.5, 3.0]
    )
    assert a.row(0).dot(b.column(1)) == pytest.approx(1 * 1.0 + 2 * 2.0 + 3 * 3.0)


def test_dot_length_mismatch() -> None:
    """Lines of different lengths cannot be paired."""
    matrix: RectangularMatrix = _matrix_2x3()
    with pytest.raises(DimensionMismatchError):
        matrix.row(0).dot(matrix.column(0))


def test_dot_widens_small_integers() -> None:
    """Products of int8 lines are summed without wrapping."""
    a: RectangularMatrix = RectangularMatrix.from_values(
        1, 2, [100, 100], dtype=np.int8
    )
    b: RectangularMatrix = RectangularMatrix.from_values(2, 1, [2, 2], dtype=np.int8)
    assert a.row(0).dot(b.column(0)) == 400


def test_promoted_dtype() -> None:
    """Narrow integers widen, wide and floating types follow numpy."""
    assert promoted_dtype(np.int8, np.int16) == np.dtype(np.int_)
    assert promoted_dtype(np.uint8) == np.dtype(np.int_)
    assert promoted_dtype(np.int64, np.int64) == np.dtype(np.int64)
    assert promoted_dtype(np.int16, np.float32) == np.dtype(np.float32)
    assert promoted_dtype(np.int64, np.float64) == np.dtype(np.float64)
