# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Allocation solver: projection, feasibility search, per-year allocation and
the smoothing relaxation strategy.
"""

from .allocator import (
    YearAllocation,
    allocate_year,
    commitment_bound,
    normalize_ratios,
    search_max_feasible,
    select_phase,
)
from .api import solve
from .commitment import Commitment
from .feasibility import FeasibilityOracle, is_liquid, project_breakdown
from .planner import AllocationResult, plan_with_relaxation, run_allocation, should_relax
from .projection import CommitmentProjection, project_commitment

__all__ = [
    "solve",
    "Commitment",
    "CommitmentProjection",
    "project_commitment",
    "FeasibilityOracle",
    "is_liquid",
    "project_breakdown",
    "YearAllocation",
    "allocate_year",
    "commitment_bound",
    "normalize_ratios",
    "search_max_feasible",
    "select_phase",
    "AllocationResult",
    "plan_with_relaxation",
    "run_allocation",
    "should_relax",
]
