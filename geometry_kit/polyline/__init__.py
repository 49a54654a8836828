################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geometry_kit
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Labeled 3D polylines."""

from __future__ import annotations

from geometry_kit.polyline.merge_strategy import MergeStrategy
from geometry_kit.polyline.merge_strategy import choose_merge_strategy
from geometry_kit.polyline.polyline import Polyline


__all__ = [
    "MergeStrategy",
    "Polyline",
    "choose_merge_strategy",
]
