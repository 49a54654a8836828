################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geometry_kit
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Structured configuration schema for the geometry core."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any
from typing import Mapping

import numpy as np


# Number of point slots added when a full polyline grows
POLYLINE_GROWTH_INCREMENT: int = 5
# Number of point slots allocated by a new polyline
POLYLINE_INITIAL_CAPACITY: int = 0
# Element type of polyline coordinates
POLYLINE_COORDINATE_DTYPE: str = "float64"

# Rotation about a zero-length axis yields NaN coordinates
ZERO_AXIS_PROPAGATE_NAN: str = "propagate_nan"
# Rotation about a zero-length axis raises InvalidArgumentError
ZERO_AXIS_RAISE: str = "raise"
# Policy applied when rotating about a zero-length axis
POLYLINE_ZERO_AXIS_POLICY: str = ZERO_AXIS_PROPAGATE_NAN


class GeometryParamsError(Exception):
    """Raised when geometry parameter validation fails."""


@dataclass(frozen=True)
class PolylineParams:
    """Storage and transform policies for polylines."""

    # Point slots added when a full polyline grows
    growth_increment: int = POLYLINE_GROWTH_INCREMENT
    # Point slots allocated up front
    initial_capacity: int = POLYLINE_INITIAL_CAPACITY
    # Coordinate element type name
    coordinate_dtype: str = POLYLINE_COORDINATE_DTYPE
    # Zero-length rotation axis policy
    zero_axis_policy: str = POLYLINE_ZERO_AXIS_POLICY

    def validate(self) -> None:
        """Validate polyline parameter invariants."""
        if not isinstance(self.growth_increment, int) or isinstance(
            self.growth_increment, bool
        ):
            raise GeometryParamsError("polyline.growth_increment must be an int")
        if self.growth_increment <= 0:
            raise GeometryParamsError("polyline.growth_increment must be positive")
        if not isinstance(self.initial_capacity, int) or isinstance(
            self.initial_capacity, bool
        ):
            raise GeometryParamsError("polyline.initial_capacity must be an int")
        if self.initial_capacity < 0:
            raise GeometryParamsError("polyline.initial_capacity must be non-negative")
        try:
            dtype: np.dtype[Any] = np.dtype(self.coordinate_dtype)
        except TypeError as exc:
            raise GeometryParamsError(
                f"polyline.coordinate_dtype {self.coordinate_dtype!r} is unknown"
            ) from exc
        if not (np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)):
            raise GeometryParamsError(
                "polyline.coordinate_dtype must be an integer or floating type"
            )
        if self.zero_axis_policy not in {ZERO_AXIS_PROPAGATE_NAN, ZERO_AXIS_RAISE}:
            raise GeometryParamsError(
                "polyline.zero_axis_policy must be propagate_nan or raise"
            )


@dataclass(frozen=True)
class GeometryParams:
    """Complete configuration tree for the geometry core."""

    polyline: PolylineParams

    @classmethod
    def defaults(cls) -> GeometryParams:
        """Return the default parameter tree."""
        return cls(polyline=PolylineParams())

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> GeometryParams:
        """Build a validated parameter tree from a nested mapping.

        Missing namespaces and keys fall back to defaults. Unknown
        namespaces or keys are rejected.
        """
        unknown: set[str] = set(values) - {"polyline"}
        if unknown:
            raise GeometryParamsError(f"Unknown namespaces: {sorted(unknown)}")
        polyline_values: Mapping[str, Any] = values.get("polyline", {})
        known: set[str] = {field.name for field in fields(PolylineParams)}
        unknown = set(polyline_values) - known
        if unknown:
            raise GeometryParamsError(f"Unknown polyline keys: {sorted(unknown)}")
        params: GeometryParams = cls(polyline=PolylineParams(**polyline_values))
        params.validate()
        return params

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        self.polyline.validate()

    def replace(self, **namespace_overrides: Any) -> GeometryParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value
