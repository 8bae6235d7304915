# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Financial calculation functions.

Contains static methods for the return metrics reported on a pacing plan.
These functions are pure (math-only); reporting code delegates to them so
each metric has a single definition.
"""

from typing import Optional, Sequence

import pandas as pd
from pyxirr import irr, xirr


class FinancialCalculations:
    """
    Pure mathematical functions for return metrics.

    Static methods independent of plan structure or solver state.
    """

    @staticmethod
    def calculate_profile_moic(profile: Sequence[float]) -> float:
        """
        Multiple on invested capital implied by a cashflow profile.

        Args:
            profile: Ratios per year since commitment (negative = call,
                positive = distribution)

        Returns:
            Sum of distributions over sum of calls, or 0.0 when the profile
            never calls capital
        """
        distributions = sum(ratio for ratio in profile if ratio > 0)
        calls = sum(abs(ratio) for ratio in profile if ratio < 0)
        return distributions / calls if calls else 0.0

    @staticmethod
    def calculate_portfolio_moic(
        total_distributions: float, final_nav: float, total_calls: float
    ) -> float:
        """
        Portfolio MOIC: realized distributions plus remaining NAV over calls.

        Returns 0.0 when no capital was ever called.
        """
        if total_calls <= 0:
            return 0.0
        return (total_distributions + final_nav) / total_calls

    @staticmethod
    def calculate_profile_irr(profile: Sequence[float]) -> Optional[float]:
        """
        Periodic (annual) IRR of a cashflow profile.

        Returns:
            IRR as decimal, or None when the profile lacks either calls or
            distributions or has no solution
        """
        values = list(profile)
        if not (any(v < 0 for v in values) and any(v > 0 for v in values)):
            return None
        result = irr(values, silent=True)
        return float(result) if result is not None else None

    @staticmethod
    def calculate_irr(cash_flows: pd.Series) -> Optional[float]:
        """
        Calculate Internal Rate of Return using PyXIRR.

        Args:
            cash_flows: Series of cash flows with an annual PeriodIndex
                       Negative values = capital calls
                       Positive values = distributions (and terminal NAV)

        Returns:
            IRR as decimal (e.g., 0.15 for 15%) or None if cannot calculate

        Example:
            ```python
            flows = pd.Series([-1000, 100, 100, 1200],
                            index=pd.period_range('2026', periods=4, freq='Y'))
            irr = FinancialCalculations.calculate_irr(flows)
            ```
        """
        if cash_flows.empty:
            return None

        has_negative = (cash_flows < 0).any()
        has_positive = (cash_flows > 0).any()
        if not (has_negative and has_positive):
            return None  # Need both investments and returns

        dates = [period.to_timestamp().date() for period in cash_flows.index]
        result = xirr(dates, cash_flows.values, silent=True)
        return float(result) if result is not None else None
