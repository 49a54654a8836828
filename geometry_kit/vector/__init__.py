################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geometry_kit
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Points and vectors built on 1xN matrices."""

from __future__ import annotations

from geometry_kit.vector.point import Point
from geometry_kit.vector.vector import Vector


__all__ = [
    "Point",
    "Vector",
]
