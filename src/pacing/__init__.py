# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Pacing - Capital Commitment Pacing for Private Markets Portfolios

Decides how much new capital to commit each planning year across
secondaries, private equity and venture so that the portfolio can always
meet its future capital calls, commitments grow smoothly, and capital is
deployed as fully as liquidity allows.

Key Entry Points:
- pacing.solve() - Solve a commitment plan
- pacing.config.* - Profiles, allocation rules and solve parameters
- pacing.reporting.* - Annual report, metrics and plan accessors

Example Usage:
    ```python
    from pacing import PacingParameters, solve

    plan = solve(PacingParameters(available_capital=10_000_000, start_year=2026))
    plan.annual_report_df()[["end_balance", "nav", "available_cash"]]
    ```
"""

from .config import AllocationRule, PacingConfiguration, PacingParameters
from .core.primitives import CategoryAmounts, CategoryEnum, PhaseEnum, SolverSettings
from .reporting import AnnualReportRow, PacingPlan, PlanMetrics
from .solver import Commitment, solve

__all__ = [
    "solve",
    "PacingParameters",
    "PacingConfiguration",
    "AllocationRule",
    "SolverSettings",
    "CategoryAmounts",
    "CategoryEnum",
    "PhaseEnum",
    "Commitment",
    "AnnualReportRow",
    "PacingPlan",
    "PlanMetrics",
]
