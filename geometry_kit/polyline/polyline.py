################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geometry_kit
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Labeled 3D polyline with self-managed storage."""

from __future__ import annotations

import logging
import math
from typing import Any
from typing import Iterable
from typing import Iterator

import numpy as np
from numpy.typing import DTypeLike
from numpy.typing import NDArray

from geometry_kit.config.geometry_params import ZERO_AXIS_RAISE
from geometry_kit.config.geometry_params import GeometryParams
from geometry_kit.config.geometry_params import PolylineParams
from geometry_kit.geometry_errors import DimensionMismatchError
from geometry_kit.geometry_errors import InvalidArgumentError
from geometry_kit.geometry_errors import OutOfRangeError
from geometry_kit.matrix.rectangular_matrix import RectangularMatrix
from geometry_kit.matrix.rectangular_matrix import numeric_dtype
from geometry_kit.polyline.merge_strategy import MergeStrategy
from geometry_kit.polyline.merge_strategy import choose_merge_strategy
from geometry_kit.polyline.point_records import LABEL_FIELD
from geometry_kit.polyline.point_records import POINT_DIMENSION
from geometry_kit.polyline.point_records import POINT_FIELD
from geometry_kit.polyline.point_records import allocate_records
from geometry_kit.polyline.point_records import coordinate_dtype_of
from geometry_kit.polyline.point_records import shift_records_right
from geometry_kit.vector.point import Point
from geometry_kit.vector.point import as_coordinates
from geometry_kit.vector.vector import Vector


_LOG: logging.Logger = logging.getLogger(__name__)


class Polyline:
    """Ordered sequence of labeled 3D points.

    Consecutive points define the segments of the line. Every point carries
    a one-character label; labels travel with their points through every
    insertion, merge and removal.

    Storage is a single buffer of (point, label) records. When the buffer
    is full it grows by a fixed increment rather than geometrically. Every
    capacity change allocates the new buffer before anything is copied, so
    an AllocationFailureError leaves the polyline exactly as it was.

    Polylines are not synchronized. Callers sharing one between threads must
    serialize access themselves.
    """

    def __init__(
        self,
        dtype: DTypeLike | None = None,
        *,
        params: PolylineParams | GeometryParams | None = None,
    ) -> None:
        """Create an empty polyline.

        Args:
            dtype: Coordinate element type, overriding params.coordinate_dtype
            params: Storage and transform policies, either the polyline
                namespace or a full parameter tree, defaults when omitted
        """
        if isinstance(params, GeometryParams):
            params = params.polyline
        self._params: PolylineParams = (
            params if params is not None else PolylineParams()
        )
        self._params.validate()
        coordinate_dtype: np.dtype[Any] = numeric_dtype(
            self._params.coordinate_dtype if dtype is None else dtype
        )
        self._records: NDArray[Any] = allocate_records(
            self._params.initial_capacity, coordinate_dtype
        )
        self._size: int = 0

    @classmethod
    def from_points(
        cls,
        points: Iterable[Any],
        labels: Iterable[str],
        dtype: DTypeLike | None = None,
        *,
        params: PolylineParams | GeometryParams | None = None,
    ) -> Polyline:
        """Build a polyline from parallel sequences of points and labels."""
        point_list: list[Any] = list(points)
        label_list: list[str] = list(labels)
        if len(point_list) != len(label_list):
            raise InvalidArgumentError(
                f"Got {len(point_list)} points but {len(label_list)} labels"
            )
        polyline: Polyline = cls(dtype, params=params)
        for point, label in zip(point_list, label_list):
            polyline.add_point(point, label)
        return polyline

    @property
    def size(self) -> int:
        """Number of points in the polyline."""
        return self._size

    @property
    def capacity(self) -> int:
        """Number of points the current buffer can hold."""
        return int(self._records.shape[0])

    @property
    def coordinate_dtype(self) -> np.dtype[Any]:
        return coordinate_dtype_of(self._records)

    @property
    def params(self) -> PolylineParams:
        return self._params

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Point]:
        """Iterate over copies of the points in insertion order."""
        for index in range(self._size):
            yield self._point_at(index)

    def __getitem__(self, index: int) -> Point:
        self._check_index(index)
        return self._point_at(index)

    def get_point_name(self, index: int) -> str:
        """Return the label of the point at ``index``."""
        self._check_index(index)
        return str(self._records[LABEL_FIELD][index])

    def labels(self) -> list[str]:
        """Return the point labels in order."""
        return [str(label) for label in self._records[LABEL_FIELD][: self._size]]

    def items(self) -> Iterator[tuple[Point, str]]:
        """Iterate over (point, label) pairs in order."""
        for index in range(self._size):
            yield self._point_at(index), str(self._records[LABEL_FIELD][index])

    def to_array(self) -> NDArray[Any]:
        """Return the coordinates as a new ``(size, 3)`` numpy array."""
        return self._records[POINT_FIELD][: self._size].copy()

    def add_point(self, point: Any, label: str) -> None:
        """Append a labeled point, growing the buffer when it is full."""
        coords: NDArray[Any] = _point_coordinates(point)
        name: str = _check_label(label)
        if self._size == self.capacity:
            new_capacity: int = self.capacity + self._params.growth_increment
            _LOG.debug(
                "Growing polyline from %d to %d slots", self.capacity, new_capacity
            )
            self._reallocate(new_capacity)
        self._records[POINT_FIELD][self._size] = coords
        self._records[LABEL_FIELD][self._size] = name
        self._size += 1

    def length(self) -> float:
        """Return the summed length of all segments."""
        return math.fsum(self._segment_lengths())

    def shift(self, vector: Any) -> None:
        """Translate every point by ``vector`` in place."""
        displacement: Vector = _as_vector3(vector)
        for index in range(self._size):
            self._store_point(index, self._point_at(index) + displacement)

    def rotate(self, axis: Any, angle_rad: float) -> None:
        """Rotate every point about ``axis`` through the origin, in place.

        The axis is normalized internally and the Rodrigues rotation matrix
        is applied to each point as a row vector (point * R). A zero-length
        axis yields NaN coordinates unless params.zero_axis_policy is
        "raise".
        """
        direction: Vector = _as_vector3(axis)
        magnitude: float = direction.length()
        if magnitude == 0.0:
            if self._params.zero_axis_policy == ZERO_AXIS_RAISE:
                raise InvalidArgumentError("Cannot rotate about a zero-length axis")
            _LOG.warning("Rotating about a zero-length axis, coordinates become NaN")

        with np.errstate(invalid="ignore", divide="ignore"):
            x: np.float64 = np.float64(direction.get_coord(0)) / magnitude
            y: np.float64 = np.float64(direction.get_coord(1)) / magnitude
            z: np.float64 = np.float64(direction.get_coord(2)) / magnitude
            rotation: RectangularMatrix = _rotation_matrix(x, y, z, angle_rad)
            for index in range(self._size):
                self._store_point(index, self._point_at(index) * rotation)

    def merge_line(self, other: Polyline, *, consume: bool = False) -> None:
        """Append all of ``other``'s points and labels after our own.

        With ``consume=False`` the source is only read. With ``consume=True``
        the source's storage may be reused to avoid an allocation; the source
        is left empty but valid afterwards. The resulting order is always our
        points followed by the source's points.
        """
        if not isinstance(other, Polyline):
            raise InvalidArgumentError("Only a Polyline can be merged")
        if other is self and consume:
            raise InvalidArgumentError("A polyline cannot consume itself")
        if other.coordinate_dtype != self.coordinate_dtype:
            raise InvalidArgumentError(
                f"Cannot merge {other.coordinate_dtype} coordinates "
                f"into {self.coordinate_dtype} coordinates"
            )
        if other._size == 0:
            return
        if consume:
            self._merge_consuming(other)
        else:
            self._merge_copy(other)

    def remove_most_isolated_point(self) -> None:
        """Remove the point lying farthest from its nearest neighbor.

        Interior points score the smaller of their two neighbor distances,
        endpoints score the distance to their single neighbor. Interior
        points are scanned first, then the first endpoint, then the last
        one; only a strictly larger score replaces the current choice.
        Polylines of two points or fewer are left alone.
        """
        if self._size <= 2:
            return
        index: int = self._most_isolated_index()
        _LOG.debug(
            "Removing point %d (%s) of %d",
            index,
            self._records[LABEL_FIELD][index],
            self._size,
        )
        self._remove_at(index)

    def isolation_scores(self) -> list[float]:
        """Return each point's isolation score in index order."""
        gaps: list[float] = self._segment_lengths()
        if not gaps:
            return [0.0] * self._size
        scores: list[float] = [gaps[0]]
        for index in range(1, self._size - 1):
            scores.append(min(gaps[index - 1], gaps[index]))
        scores.append(gaps[-1])
        return scores

    def swap(self, other: Polyline) -> None:
        """Exchange storage, sizes and capacities with ``other``."""
        self._records, other._records = other._records, self._records
        self._size, other._size = other._size, self._size

    def copy(self) -> Polyline:
        """Return an independent polyline sized to hold exactly our points."""
        duplicate: Polyline = Polyline(self.coordinate_dtype, params=self._params)
        records: NDArray[Any] = allocate_records(self._size, self.coordinate_dtype)
        records[:] = self._records[: self._size]
        duplicate._records = records
        duplicate._size = self._size
        return duplicate

    def __copy__(self) -> Polyline:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Polyline:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        """Compare point coordinates only, labels are ignored."""
        if not isinstance(other, Polyline):
            return NotImplemented
        return self._size == other._size and bool(
            np.array_equal(
                self._records[POINT_FIELD][: self._size],
                other._records[POINT_FIELD][: other._size],
            )
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Polyline(size={self._size}, capacity={self.capacity}, "
            f"labels={''.join(self.labels())!r})"
        )

    def _merge_copy(self, other: Polyline) -> None:
        incoming: int = other._size
        combined: int = self._size + incoming
        if self.capacity < combined:
            self._reallocate(self.capacity + incoming)
        self._records[self._size : combined] = other._records[:incoming]
        self._size = combined

    def _merge_consuming(self, other: Polyline) -> None:
        own: int = self._size
        incoming: int = other._size
        combined: int = own + incoming
        strategy: MergeStrategy = choose_merge_strategy(
            self_spare=self.capacity - own,
            incoming=incoming,
            other_total_capacity=other.capacity,
            other_needed=combined,
        )
        _LOG.debug(
            "Merging %d points into %d using %s", incoming, own, strategy.value
        )

        if strategy is MergeStrategy.APPEND_IN_PLACE:
            self._records[own:combined] = other._records[:incoming]
        elif strategy is MergeStrategy.ADOPT_OTHER_BUFFER:
            # Open a gap at the front of the source buffer for our points
            shift_records_right(other._records, incoming, own)
            other._records[:own] = self._records[:own]
            self.swap(other)
        else:
            self._reallocate(combined)
            self._records[own:combined] = other._records[:incoming]

        self._size = combined
        other._size = 0

    def _reallocate(self, new_capacity: int) -> None:
        if new_capacity == self.capacity:
            return
        records: NDArray[Any] = allocate_records(new_capacity, self.coordinate_dtype)
        records[: self._size] = self._records[: self._size]
        self._records = records

    def _remove_at(self, index: int) -> None:
        self._records[index : self._size - 1] = self._records[index + 1 : self._size]
        self._size -= 1

    def _most_isolated_index(self) -> int:
        gaps: list[float] = self._segment_lengths()
        best_score: float = 0.0
        best_index: int = 0
        for index in range(1, self._size - 1):
            score: float = min(gaps[index - 1], gaps[index])
            if score > best_score:
                best_score = score
                best_index = index
        if gaps[0] > best_score:
            best_score = gaps[0]
            best_index = 0
        if gaps[-1] > best_score:
            best_index = self._size - 1
        return best_index

    def _segment_lengths(self) -> list[float]:
        lengths: list[float] = []
        for index in range(self._size - 1):
            segment: Vector = Vector.between(
                self._point_at(index), self._point_at(index + 1)
            )
            lengths.append(segment.length())
        return lengths

    def _point_at(self, index: int) -> Point:
        return Point(self._records[POINT_FIELD][index], dtype=self.coordinate_dtype)

    def _store_point(self, index: int, point: RectangularMatrix) -> None:
        self._records[POINT_FIELD][index] = point.to_array().reshape(-1)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise OutOfRangeError(
                f"Point index {index} is out of bounds for a polyline of {self._size}"
            )


def _point_coordinates(point: Any) -> NDArray[Any]:
    coords: NDArray[Any] = as_coordinates(point)
    if coords.size != POINT_DIMENSION:
        raise DimensionMismatchError(
            f"Polyline points need {POINT_DIMENSION} coordinates, got {coords.size}"
        )
    if not (
        np.issubdtype(coords.dtype, np.integer)
        or np.issubdtype(coords.dtype, np.floating)
    ):
        raise InvalidArgumentError("Polyline coordinates must be integer or floating")
    return coords


def _as_vector3(value: Any) -> Vector:
    if isinstance(value, Vector) and value.dimension == POINT_DIMENSION:
        return value
    return Vector(_point_coordinates(value))


def _check_label(label: Any) -> str:
    if not isinstance(label, str) or len(label) != 1 or label == "\0":
        raise InvalidArgumentError(
            f"Point label must be one non-NUL character, got {label!r}"
        )
    return label


def _rotation_matrix(
    x: np.float64, y: np.float64, z: np.float64, angle_rad: float
) -> RectangularMatrix:
    """Return the Rodrigues matrix for a unit axis, acting on row vectors."""
    cos_a: float = math.cos(angle_rad)
    sin_a: float = math.sin(angle_rad)
    one_minus_cos: float = 1.0 - cos_a
    return RectangularMatrix.from_values(
        3,
        3,
        [
            cos_a + x * x * one_minus_cos,
            y * x * one_minus_cos + z * sin_a,
            z * x * one_minus_cos - y * sin_a,
            x * y * one_minus_cos - z * sin_a,
            cos_a + y * y * one_minus_cos,
            z * y * one_minus_cos + x * sin_a,
            x * z * one_minus_cos + y * sin_a,
            y * z * one_minus_cos - x * sin_a,
            cos_a + z * z * one_minus_cos,
        ],
        dtype=np.float64,
    )
