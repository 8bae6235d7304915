# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Summary metrics of a pacing plan.

Ratios whose denominator is zero (no capital ever called) are reported as
0.0; return rates that cannot be solved are reported as None.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

import pandas as pd

from ..config import PacingConfiguration, PacingParameters
from ..core.calculations import FinancialCalculations
from ..core.primitives import CategoryEnum, ReportModel
from ..solver.commitment import Commitment
from .report import AnnualReportRow


class CategoryMetrics(ReportModel):
    """Return characteristics implied by a category's cashflow profile."""

    moic: float
    irr: Optional[float] = None


class PlanMetrics(ReportModel):
    """Headline figures of a plan."""

    total_committed: float
    min_cash: float
    max_cash: float
    is_smoothed: bool
    relaxed_constraint: bool
    category_metrics: Dict[CategoryEnum, CategoryMetrics]
    total_calls: float
    total_distributions: float
    portfolio_moic: float
    portfolio_irr: Optional[float] = None
    fully_committed_year: Optional[int] = None
    break_even_year: Optional[int] = None
    final_nav: float
    final_cash: float
    final_total_value: float
    final_market_value: float


def category_metrics(configuration: PacingConfiguration) -> Dict[CategoryEnum, CategoryMetrics]:
    """Per-category MOIC and IRR for every configured profile."""
    return {
        category: CategoryMetrics(
            moic=FinancialCalculations.calculate_profile_moic(profile),
            irr=FinancialCalculations.calculate_profile_irr(profile),
        )
        for category, profile in configuration.profiles.items()
    }


def portfolio_cash_flows(annual_report: Sequence[AnnualReportRow]) -> pd.Series:
    """
    Investor cash flows per year: distributions less calls, with the final
    year's NAV added as terminal value.
    """
    index = pd.period_range(
        start=str(annual_report[0].year), periods=len(annual_report), freq="Y"
    )
    realized = pd.Series(
        [row.realized_profit for row in annual_report], index=index, dtype=float
    )
    flows = realized.diff().fillna(realized.iloc[0])
    flows.iloc[-1] += annual_report[-1].nav
    return flows


def compute_metrics(
    commitments: Sequence[Commitment],
    annual_report: Sequence[AnnualReportRow],
    parameters: PacingParameters,
    configuration: PacingConfiguration,
    relaxed: bool,
) -> PlanMetrics:
    """
    Derive summary metrics from a finished plan.

    Args:
        commitments: Adopted commitments
        annual_report: Report rows over the total horizon
        parameters: Solve inputs
        configuration: Profiles for the per-category metrics
        relaxed: Whether the unsmoothed plan was adopted

    Returns:
        PlanMetrics for the plan
    """
    capital = parameters.available_capital
    final = annual_report[-1]
    balances = [row.end_balance for row in annual_report]

    fully_committed_year = None
    if capital > 0:
        fully_committed_year = next(
            (row.year for row in annual_report if row.cumulative_commitments >= capital),
            None,
        )

    break_even_year = next(
        (
            row.year
            for row in annual_report
            if row.cumulative_calls > 0
            and row.cumulative_distributions >= row.cumulative_calls
        ),
        None,
    )

    total_calls = final.cumulative_calls
    total_distributions = final.cumulative_distributions

    return PlanMetrics(
        total_committed=sum(c.amount for c in commitments),
        min_cash=min(balances),
        max_cash=max(balances),
        is_smoothed=not relaxed,
        relaxed_constraint=relaxed,
        category_metrics=category_metrics(configuration),
        total_calls=total_calls,
        total_distributions=total_distributions,
        portfolio_moic=FinancialCalculations.calculate_portfolio_moic(
            total_distributions, final.nav, total_calls
        ),
        portfolio_irr=FinancialCalculations.calculate_irr(portfolio_cash_flows(annual_report)),
        fully_committed_year=fully_committed_year,
        break_even_year=break_even_year,
        final_nav=final.nav,
        final_cash=final.end_balance,
        final_total_value=final.total_value,
        final_market_value=final.market_value,
    )
