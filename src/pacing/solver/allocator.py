# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Per-year commitment allocation.

For each planning year the allocator picks the phase ratios, pins manual
overrides, bounds the search (smoothing) and binary-searches the largest
additional commitment that keeps the plan liquid.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Collection, Dict, List

from ..config import PacingConfiguration, PacingParameters
from ..core.primitives import (
    CategoryAmounts,
    CategoryEnum,
    PhaseEnum,
    PhaseSchedule,
    SolverSettings,
)
from .commitment import Commitment
from .feasibility import FeasibilityOracle, project_breakdown
from .projection import CommitmentProjection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class YearAllocation:
    """Commitment chosen for a year and its projection over the horizon."""

    commitment: Commitment
    projection: CommitmentProjection


def select_phase(year_number: int, schedule: PhaseSchedule) -> PhaseEnum:
    """Allocation phase of a 1-based planning year."""
    if year_number <= schedule.phase1_end_year:
        return PhaseEnum.PHASE1
    if year_number <= schedule.phase2_end_year:
        return PhaseEnum.PHASE2
    return PhaseEnum.PHASE3


def normalize_ratios(
    ratios: CategoryAmounts, include: Collection[CategoryEnum]
) -> CategoryAmounts:
    """
    Restrict ratios to ``include`` and rescale them to sum to one.

    Returns all-zero ratios when nothing of the included categories remains.
    """
    kept = {
        category: (value if category in include else 0.0)
        for category, value in ratios.items()
    }
    total = sum(kept.values())
    if total <= 0:
        return CategoryAmounts()
    return CategoryAmounts.from_mapping({c: v / total for c, v in kept.items()})


def commitment_bound(
    year_index: int,
    available_capital: float,
    last_year_commitment: float,
    forced_total: float,
    smoothing_enabled: bool,
    max_yearly_change: float,
    first_year_cap: float,
    settings: SolverSettings,
) -> float:
    """
    Upper bound for the additional (non-pinned) commitment of a year.

    With smoothing the total is capped at ``first_year_cap`` of capital in
    the first year and at ``max_yearly_change`` growth afterwards, with a
    restart floor so commitments can resume after an empty year. Pinned
    amounts use up the smoothed allowance. The hard cap always applies.
    """
    bound = available_capital * settings.smoothing.unsmoothed_bound_multiple

    if smoothing_enabled:
        if year_index == 0:
            cap = available_capital * first_year_cap
        else:
            growth_cap = last_year_commitment * (1 + max_yearly_change)
            restart_floor = available_capital * settings.smoothing.restart_floor
            cap = max(growth_cap, restart_floor)
        bound = max(0.0, cap - forced_total)

    return min(bound, available_capital * settings.hard_cap_multiple)


def search_max_feasible(
    is_feasible: Callable[[float], bool],
    upper_bound: float,
    iterations: int = 20,
    rounding_unit: float = 1000.0,
) -> float:
    """
    Largest feasible amount in ``[0, upper_bound]``, floored to ``rounding_unit``.

    Bisects for a fixed number of iterations, so the result is within
    ``upper_bound / 2**iterations`` of the true maximum before rounding.
    """
    low, high = 0.0, upper_bound
    best = 0.0
    for _ in range(iterations):
        mid = (low + high) / 2
        if is_feasible(mid):
            best = mid
            low = mid
        else:
            high = mid
    return math.floor(best / rounding_unit) * rounding_unit


def allocate_year(
    year_index: int,
    parameters: PacingParameters,
    configuration: PacingConfiguration,
    settings: SolverSettings,
    locked: CommitmentProjection,
    last_year_commitment: float,
    smoothing_enabled: bool,
) -> YearAllocation:
    """
    Decide the commitment of one planning year.

    Args:
        year_index: Planning year (0-based)
        parameters: Solve inputs
        configuration: Profiles and allocation rules
        settings: Solver policy
        locked: Combined projection of all earlier commitments
        last_year_commitment: Total committed in the previous planning year
        smoothing_enabled: Whether growth and first-year caps apply

    Returns:
        YearAllocation with the commitment and its projection
    """
    horizon = locked.horizon
    capital = parameters.available_capital
    phase = select_phase(year_index + 1, settings.phases)

    selected = [c for c in CategoryEnum if parameters.is_selected(c)]
    ratios = normalize_ratios(configuration.rule_for(phase).ratios, selected)

    overrides = parameters.overrides_for(year_index)
    forced = CategoryAmounts.from_mapping(overrides)
    active_ratios = normalize_ratios(
        ratios, [c for c in selected if c not in overrides]
    )
    profiles: Dict[CategoryEnum, List[float]] = {
        category: configuration.profile_for(category)
        for category in CategoryEnum
        if category in configuration.profiles
    }

    oracle = FeasibilityOracle(
        available_capital=capital,
        year_index=year_index,
        locked=locked,
        profiles=profiles,
        ratios=active_ratios,
        forced=forced,
    )

    if forced.total > 0 and not oracle.is_feasible(0.0):
        logger.warning(
            f"Manual overrides for {parameters.start_year + year_index} "
            f"({forced.total:,.0f}) exceed projected liquidity"
        )

    if active_ratios.total <= 0:
        # Nothing left for the optimizer: all pinned or nothing selected
        additional = 0.0
        is_manual = bool(overrides)
    else:
        bound = commitment_bound(
            year_index,
            capital,
            last_year_commitment,
            forced.total,
            smoothing_enabled,
            parameters.max_yearly_change,
            parameters.first_year_cap,
            settings,
        )
        additional = search_max_feasible(
            oracle.is_feasible,
            bound,
            iterations=settings.search_iterations,
            rounding_unit=settings.rounding_unit,
        )
        is_manual = False
        logger.debug(
            f"Year {parameters.start_year + year_index} ({phase.value}): "
            f"bound {bound:,.0f}, searched {additional:,.0f}, pinned {forced.total:,.0f}"
        )

    breakdown = oracle.breakdown_for(additional)
    commitment = Commitment(
        year=parameters.start_year + year_index,
        amount=forced.total + additional,
        breakdown=breakdown,
        ratios=ratios,
        phase=phase,
        is_manual=is_manual,
    )
    projection = project_breakdown(breakdown, profiles, year_index, horizon)
    return YearAllocation(commitment=commitment, projection=projection)
