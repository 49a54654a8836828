################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geometry_kit
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Choice of storage strategy when one polyline consumes another."""

from __future__ import annotations

import enum

from geometry_kit.geometry_errors import InvalidArgumentError


class MergeStrategy(enum.Enum):
    """
    Enumerates the ways a consuming merge can place the combined points

    Attributes:
        APPEND_IN_PLACE: The destination has enough spare slots, so the
            incoming records are moved straight into its tail
        ADOPT_OTHER_BUFFER: The source buffer can hold the combined sequence,
            so its records are shifted right, the destination's records are
            moved into the freed front, and the buffers are exchanged
        REALLOCATE: Neither buffer is large enough, so the destination is
            reallocated to exactly the combined size
    """

    APPEND_IN_PLACE = "append_in_place"
    ADOPT_OTHER_BUFFER = "adopt_other_buffer"
    REALLOCATE = "reallocate"


def choose_merge_strategy(
    *,
    self_spare: int,
    incoming: int,
    other_total_capacity: int,
    other_needed: int,
) -> MergeStrategy:
    """Pick the strategy that avoids an allocation whenever possible.

    Args:
        self_spare: Unused slots in the destination buffer
        incoming: Number of records held by the source
        other_total_capacity: Slot count of the source buffer
        other_needed: Slot count the combined sequence requires

    Strategies are tried in priority order: append in place, adopt the
    source buffer, reallocate.
    """
    if min(self_spare, incoming, other_total_capacity, other_needed) < 0:
        raise InvalidArgumentError("Merge sizes must be non-negative")
    if incoming > other_total_capacity:
        raise InvalidArgumentError("Source holds more records than its capacity")
    if self_spare >= incoming:
        return MergeStrategy.APPEND_IN_PLACE
    if other_total_capacity >= other_needed:
        return MergeStrategy.ADOPT_OTHER_BUFFER
    return MergeStrategy.REALLOCATE
