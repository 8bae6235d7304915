# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Solver inputs: planning configuration and per-solve parameters.
"""

from .configuration import AllocationRule, PacingConfiguration
from .defaults import (
    DEFAULT_ALLOCATION_RULES,
    DEFAULT_CASHFLOW_PROFILES,
    DEFAULT_NAV_PROFILES,
)
from .parameters import (
    DEFAULT_PLANNING_HORIZON,
    DEFAULT_PROJECTION_HORIZON,
    PacingParameters,
)

__all__ = [
    "AllocationRule",
    "PacingConfiguration",
    "PacingParameters",
    "DEFAULT_ALLOCATION_RULES",
    "DEFAULT_CASHFLOW_PROFILES",
    "DEFAULT_NAV_PROFILES",
    "DEFAULT_PLANNING_HORIZON",
    "DEFAULT_PROJECTION_HORIZON",
]
