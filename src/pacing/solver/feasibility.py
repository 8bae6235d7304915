# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Liquidity check for a candidate commitment.

A plan is liquid when, from the commitment year onwards, the projected cash
balance is never negative and always covers the outstanding unfunded
commitments. The running balance starts at the available capital and
accumulates every year's net cashflow in order, including years before the
candidate's commitment year.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

import numpy as np

from ..core.primitives import CategoryAmounts, CategoryEnum
from .projection import CommitmentProjection, project_commitment


def project_breakdown(
    breakdown: CategoryAmounts,
    profiles: Dict[CategoryEnum, List[float]],
    start_index: int,
    horizon: int,
) -> CommitmentProjection:
    """Combined projection of a per-category commitment made in one year."""
    combined = CommitmentProjection.zeros(horizon)
    for category, amount in breakdown.items():
        if amount > 0:
            combined = combined.combine(
                project_commitment(amount, profiles[category], start_index, horizon)
            )
    return combined


def is_liquid(
    available_capital: float,
    projection: CommitmentProjection,
    from_index: int = 0,
) -> bool:
    """
    Check the liquidity condition of a combined projection.

    Years before ``from_index`` accumulate cash but are not checked.
    """
    balance = available_capital + np.cumsum(projection.cashflows)
    checked = slice(from_index, None)
    if np.any(balance[checked] < projection.unfunded[checked]):
        return False
    if np.any(balance[checked] < 0):
        return False
    return True


@dataclass(frozen=True)
class FeasibilityOracle:
    """
    Answers whether an additional commitment in ``year_index`` keeps the plan liquid.

    The candidate total is ``forced + additional * ratios``: pinned override
    amounts plus the searched amount split over the active categories.

    Attributes:
        available_capital: Starting capital pool
        year_index: Planning year (0-based) of the candidate commitment
        locked: Combined projection of all commitments from earlier years
        profiles: Cashflow profile per category
        ratios: Normalized split of the additional amount
        forced: Override amounts pinned for this year
    """

    available_capital: float
    year_index: int
    locked: CommitmentProjection
    profiles: Dict[CategoryEnum, List[float]]
    ratios: CategoryAmounts
    forced: CategoryAmounts

    @property
    def horizon(self) -> int:
        return self.locked.horizon

    def breakdown_for(self, additional_amount: float) -> CategoryAmounts:
        return self.forced.plus(self.ratios.scaled(additional_amount))

    def is_feasible(self, additional_amount: float) -> bool:
        candidate = project_breakdown(
            self.breakdown_for(additional_amount),
            self.profiles,
            self.year_index,
            self.horizon,
        )
        return is_liquid(
            self.available_capital, self.locked.combine(candidate), self.year_index
        )
