# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Annual report of a finished commitment plan.

One row per simulated year. Cash figures come from the combined projection;
calls, distributions and NAV are recomputed per commitment from the category
profiles by commitment age (report year minus commitment year).
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from ..config import PacingConfiguration, PacingParameters
from ..core.primitives import CategoryAmounts, ReportModel
from ..solver.commitment import Commitment
from ..solver.projection import CommitmentProjection

logger = logging.getLogger(__name__)


class AnnualReportRow(ReportModel):
    """
    Portfolio position at the end of one simulated year.

    Attributes:
        year: Calendar year
        net_cashflow: Net calls and distributions of the year
        end_balance: Capital plus all net cashflows to date (ledger cash)
        total_committed: New commitments made this year
        unfunded: Committed capital not yet called
        breakdown: This year's new commitments per category
        nav: Exposure from NAV profiles
        cumulative_commitments: Commitments made to date
        cumulative_calls: Capital called to date
        cumulative_distributions: Distributions received to date
        available_cash: Capital still free to commit
            (capital - cumulative commitments + cumulative distributions)
        capital_called: Same as cumulative_calls
        invested_capital: Same as nav
        locked_capital: Same as cumulative_commitments
        total_value: available_cash + cumulative_commitments; stays at or above
            cost basis instead of showing the J-curve dip
        market_value: end_balance + nav (mark-to-market value)
        realized_profit: cumulative_distributions - cumulative_calls
    """

    year: int
    net_cashflow: float
    end_balance: float
    total_committed: float
    unfunded: float
    breakdown: CategoryAmounts
    nav: float
    cumulative_commitments: float
    cumulative_calls: float
    cumulative_distributions: float
    available_cash: float
    capital_called: float
    invested_capital: float
    locked_capital: float
    total_value: float
    market_value: float
    realized_profit: float


def _aged_values(amount: float, ratios: Sequence[float], start: int, horizon: int) -> np.ndarray:
    """``amount * ratios[age]`` placed at ``start + age``, zero outside the profile."""
    values = np.zeros(horizon)
    span = max(0, min(len(ratios), horizon - start))
    if span:
        values[start : start + span] = amount * np.asarray(ratios[:span], dtype=float)
    return values


def build_annual_report(
    commitments: Sequence[Commitment],
    projection: CommitmentProjection,
    parameters: PacingParameters,
    configuration: PacingConfiguration,
) -> List[AnnualReportRow]:
    """
    Build the annual report over the total horizon.

    Args:
        commitments: Adopted commitments, one per planning year
        projection: Combined projection of those commitments
        parameters: Solve inputs
        configuration: Profiles used for calls, distributions and NAV

    Returns:
        One AnnualReportRow per simulated year
    """
    horizon = projection.horizon
    capital = parameters.available_capital
    start_year = parameters.start_year

    calls = np.zeros(horizon)
    distributions = np.zeros(horizon)
    nav = np.zeros(horizon)
    committed = np.zeros(horizon)

    for commitment in commitments:
        start = commitment.year - start_year
        committed[start] += commitment.amount
        for category, amount in commitment.breakdown.items():
            if amount <= 0:
                continue
            flows = _aged_values(amount, configuration.profile_for(category), start, horizon)
            calls += np.where(flows < 0, -flows, 0.0)
            distributions += np.where(flows > 0, flows, 0.0)
            nav += _aged_values(amount, configuration.nav_profile_for(category), start, horizon)

    end_balance = capital + np.cumsum(projection.cashflows)
    cumulative_commitments = np.cumsum(committed)
    cumulative_calls = np.cumsum(calls)
    cumulative_distributions = np.cumsum(distributions)
    available_cash = capital - cumulative_commitments + cumulative_distributions

    by_year = {c.year: c for c in commitments}
    rows: List[AnnualReportRow] = []
    for t in range(horizon):
        year = start_year + t
        commitment = by_year.get(year)
        rows.append(
            AnnualReportRow(
                year=year,
                net_cashflow=float(projection.cashflows[t]),
                end_balance=float(end_balance[t]),
                total_committed=commitment.amount if commitment else 0.0,
                unfunded=float(projection.unfunded[t]),
                breakdown=commitment.breakdown if commitment else CategoryAmounts(),
                nav=float(nav[t]),
                cumulative_commitments=float(cumulative_commitments[t]),
                cumulative_calls=float(cumulative_calls[t]),
                cumulative_distributions=float(cumulative_distributions[t]),
                available_cash=float(available_cash[t]),
                capital_called=float(cumulative_calls[t]),
                invested_capital=float(nav[t]),
                locked_capital=float(cumulative_commitments[t]),
                total_value=float(available_cash[t] + cumulative_commitments[t]),
                market_value=float(end_balance[t] + nav[t]),
                realized_profit=float(cumulative_distributions[t] - cumulative_calls[t]),
            )
        )

    logger.debug(f"Built annual report for {start_year}-{start_year + horizon - 1}")
    return rows
