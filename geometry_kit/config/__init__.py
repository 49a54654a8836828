################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geometry_kit
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""
Configuration for the geometry core
"""

from __future__ import annotations
