# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Plan reporting: annual report, summary metrics and the plan result model.
"""

from .metrics import (
    CategoryMetrics,
    PlanMetrics,
    category_metrics,
    compute_metrics,
    portfolio_cash_flows,
)
from .report import AnnualReportRow, build_annual_report
from .results import CommitmentLine, PacingPlan

__all__ = [
    "AnnualReportRow",
    "build_annual_report",
    "CategoryMetrics",
    "PlanMetrics",
    "category_metrics",
    "compute_metrics",
    "portfolio_cash_flows",
    "CommitmentLine",
    "PacingPlan",
]
