# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Planning loop and smoothing relaxation.

``run_allocation`` walks the planning years in order, threading the locked
projection and the previous year's commitment explicitly. ``plan_with_relaxation``
runs it with smoothing, and when that leaves capital idle, once more without
smoothing, keeping whichever result the relaxation rules select. Both runs are
independent pure computations; nothing is rolled back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config import PacingConfiguration, PacingParameters
from ..core.primitives import SolverSettings
from .allocator import allocate_year
from .commitment import Commitment
from .projection import CommitmentProjection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AllocationResult:
    """
    Outcome of one full pass over the planning horizon.

    Attributes:
        commitments: One commitment per planning year, in order
        projection: Combined projection of all commitments over the total horizon
        smoothing_enabled: Whether smoothing bounds applied during the pass
    """

    commitments: Tuple[Commitment, ...]
    projection: CommitmentProjection
    smoothing_enabled: bool

    @property
    def total_committed(self) -> float:
        return sum(c.amount for c in self.commitments)

    def end_balance(self, available_capital: float, year_index: int) -> float:
        """Projected cash balance at the end of a simulation year."""
        return available_capital + float(self.projection.cashflows[: year_index + 1].sum())


def run_allocation(
    parameters: PacingParameters,
    configuration: PacingConfiguration,
    settings: SolverSettings,
    smoothing_enabled: bool,
) -> AllocationResult:
    """Allocate every planning year in sequence."""
    locked = CommitmentProjection.zeros(parameters.total_horizon)
    commitments: List[Commitment] = []
    last_year_commitment = 0.0

    for year_index in range(parameters.effective_planning_horizon):
        allocation = allocate_year(
            year_index,
            parameters,
            configuration,
            settings,
            locked,
            last_year_commitment,
            smoothing_enabled,
        )
        commitments.append(allocation.commitment)
        locked = locked.combine(allocation.projection)
        last_year_commitment = allocation.commitment.amount

    return AllocationResult(
        commitments=tuple(commitments),
        projection=locked,
        smoothing_enabled=smoothing_enabled,
    )


def should_relax(
    result: AllocationResult, parameters: PacingParameters, settings: SolverSettings
) -> bool:
    """
    Whether a smoothed result leaves enough capital idle to retry unsmoothed.

    Cash is measured at the end of the planning horizon, not the projection.
    """
    capital = parameters.available_capital
    check_index = min(parameters.effective_planning_horizon, parameters.total_horizon) - 1
    balance = result.end_balance(capital, check_index)
    return (
        balance > capital * settings.relaxation.idle_cash_threshold
        and result.total_committed < capital * settings.relaxation.commitment_threshold
    )


def plan_with_relaxation(
    parameters: PacingParameters,
    configuration: PacingConfiguration,
    settings: Optional[SolverSettings] = None,
) -> Tuple[AllocationResult, bool]:
    """
    Smoothed allocation, relaxed when smoothing under-deploys capital.

    Returns:
        The adopted result and whether the unsmoothed (relaxed) result was adopted
    """
    settings = settings or SolverSettings()
    smoothed = run_allocation(parameters, configuration, settings, smoothing_enabled=True)

    if not should_relax(smoothed, parameters, settings):
        return smoothed, False

    relaxed = run_allocation(parameters, configuration, settings, smoothing_enabled=False)
    gain = 1 + settings.relaxation.improvement_threshold
    if relaxed.total_committed > smoothed.total_committed * gain:
        logger.info(
            f"Smoothing left capital idle; adopting unsmoothed plan "
            f"({relaxed.total_committed:,.0f} vs {smoothed.total_committed:,.0f} committed)"
        )
        return relaxed, True

    logger.info(
        f"Unsmoothed plan commits {relaxed.total_committed:,.0f}, not enough over "
        f"{smoothed.total_committed:,.0f}; keeping smoothed plan"
    )
    return smoothed, False
