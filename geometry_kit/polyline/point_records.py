################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geometry_kit
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Record buffers backing a polyline.

Each slot of a buffer is one composite record holding a point's three
coordinates together with its label, so points and labels are always
resized, copied and released as a unit.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import DTypeLike
from numpy.typing import NDArray

from geometry_kit.geometry_errors import AllocationFailureError
from geometry_kit.matrix.rectangular_matrix import numeric_dtype


# Record field holding the point coordinates
POINT_FIELD: str = "point"
# Record field holding the one-character point label
LABEL_FIELD: str = "label"
# Coordinates stored per point
POINT_DIMENSION: int = 3

_LOG: logging.Logger = logging.getLogger(__name__)


def record_dtype(coordinate_dtype: DTypeLike) -> np.dtype[Any]:
    """Return the structured dtype of one labeled point record."""
    return np.dtype(
        [
            (POINT_FIELD, numeric_dtype(coordinate_dtype), (POINT_DIMENSION,)),
            (LABEL_FIELD, "U1"),
        ]
    )


def allocate_records(capacity: int, coordinate_dtype: DTypeLike) -> NDArray[Any]:
    """Allocate a zeroed buffer of ``capacity`` records.

    Raises AllocationFailureError when the memory cannot be acquired. The
    caller's existing buffer is never touched by this function.
    """
    try:
        return np.zeros(capacity, dtype=record_dtype(coordinate_dtype))
    except MemoryError as exc:
        _LOG.error("Unable to allocate %d point records", capacity)
        raise AllocationFailureError(
            f"Cannot allocate storage for {capacity} points"
        ) from exc


def shift_records_right(records: NDArray[Any], count: int, offset: int) -> None:
    """Move the first ``count`` records ``offset`` slots toward the end.

    Records are copied back to front so that overlapping source and
    destination ranges are never corrupted.
    """
    if offset <= 0 or count <= 0:
        return
    for index in range(count - 1, -1, -1):
        records[index + offset] = records[index]


def coordinate_dtype_of(records: NDArray[Any]) -> np.dtype[Any]:
    """Return the coordinate element type of a record buffer."""
    return records.dtype[POINT_FIELD].base
