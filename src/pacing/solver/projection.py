# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Cashflow projection of a single commitment.

A commitment of ``amount`` made in year ``start_index`` produces
``amount * profile[i]`` in year ``start_index + i``. Negative ratios are
capital calls and reduce the uncalled ("unfunded") balance. Once the profile
is exhausted the unfunded balance stays at its last value for the rest of
the horizon: capital a profile never calls remains an outstanding liability.
Profiles are expected to call their full commitment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class CommitmentProjection:
    """
    Yearly cashflow and unfunded balance over the simulation horizon.

    Attributes:
        cashflows: Net cashflow per year (negative = call, positive = distribution)
        unfunded: Uncalled commitment at the end of each year (0 before the
            commitment year)
    """

    cashflows: np.ndarray
    unfunded: np.ndarray

    @classmethod
    def zeros(cls, horizon: int) -> "CommitmentProjection":
        return cls(cashflows=np.zeros(horizon), unfunded=np.zeros(horizon))

    def combine(self, other: "CommitmentProjection") -> "CommitmentProjection":
        """Element-wise sum of two projections over the same horizon."""
        return CommitmentProjection(
            cashflows=self.cashflows + other.cashflows,
            unfunded=self.unfunded + other.unfunded,
        )

    @property
    def horizon(self) -> int:
        return len(self.cashflows)


def project_commitment(
    amount: float, profile: Sequence[float], start_index: int, horizon: int
) -> CommitmentProjection:
    """
    Project the cashflows and unfunded balance of one commitment.

    Args:
        amount: Committed amount (>= 0)
        profile: Cashflow ratios per year since commitment
        start_index: Simulation year (0-based) of the commitment
        horizon: Number of simulated years

    Returns:
        CommitmentProjection with arrays of length ``horizon``

    Example:
        >>> proj = project_commitment(1_000, [-0.5, -0.5, 1.5], 1, 5)
        >>> proj.cashflows.tolist()
        [0.0, -500.0, -500.0, 1500.0, 0.0]
        >>> proj.unfunded.tolist()
        [0.0, 500.0, 0.0, 0.0, 0.0]
    """
    if horizon <= 0:
        raise ValueError(f"horizon must be positive, got {horizon}")
    if not 0 <= start_index < horizon:
        raise ValueError(f"start_index {start_index} outside horizon of {horizon} years")

    cashflows = np.zeros(horizon)
    unfunded = np.zeros(horizon)

    span = min(len(profile), horizon - start_index)
    ratios = np.asarray(profile[:span], dtype=float)
    flows = amount * ratios
    cashflows[start_index : start_index + span] = flows

    called = np.cumsum(np.where(ratios < 0, np.abs(flows), 0.0))
    unfunded[start_index : start_index + span] = np.maximum(0.0, amount - called)

    # Pinned at the last called position once the profile runs out
    remaining = max(0.0, amount - (called[-1] if span else 0.0))
    unfunded[start_index + span :] = remaining

    return CommitmentProjection(cashflows=cashflows, unfunded=unfunded)
