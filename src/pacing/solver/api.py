# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Capital Pacing Solver API

Public entry point: turn parameters and a planning configuration into a
commitment plan with its annual report and metrics.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from ..config import PacingConfiguration, PacingParameters
from ..core.primitives import CategoryEnum, SolverSettings
from .planner import plan_with_relaxation

if TYPE_CHECKING:
    from ..reporting import PacingPlan

logger = logging.getLogger(__name__)


def _validate_inputs(
    parameters: PacingParameters, configuration: PacingConfiguration
) -> None:
    """Cross-check parameters against the configuration."""
    for category in CategoryEnum:
        if parameters.is_selected(category) and category not in configuration.profiles:
            raise ValueError(
                f"Category '{category.value}' is selected but has no cashflow profile"
            )
    for year_index, overrides in parameters.manual_overrides.items():
        for category in overrides:
            if category not in configuration.profiles:
                raise ValueError(
                    f"Manual override for '{category.value}' in year index {year_index} "
                    f"has no cashflow profile"
                )


def solve(
    parameters: PacingParameters,
    configuration: Optional[PacingConfiguration] = None,
    settings: Optional[SolverSettings] = None,
) -> "PacingPlan":
    """
    Solve the commitment plan.

    Workflow:
      1) Validate that every selected or overridden category has a profile
      2) Allocate each planning year with smoothing; retry without smoothing
         when capital is left idle and adopt the retry if it commits enough more
      3) Build the annual report over the total horizon
      4) Derive summary metrics

    Args:
        parameters: Capital, horizons, category selection, smoothing limits
            and manual overrides.
        configuration: Profiles and allocation rules; the stock configuration
            when omitted.
        settings: Solver policy; defaults when omitted.

    Returns:
        PacingPlan with commitments, annual report and metrics.

    Raises:
        ValueError: If a selected or overridden category has no cashflow profile.

    Example:
        ```python
        from pacing import PacingParameters, solve

        plan = solve(PacingParameters(available_capital=10_000_000, start_year=2026))
        plan.metrics.total_committed
        ```
    """
    from ..reporting import PacingPlan, build_annual_report, compute_metrics

    configuration = configuration or PacingConfiguration.defaults()
    settings = settings or SolverSettings()
    _validate_inputs(parameters, configuration)

    result, relaxed = plan_with_relaxation(parameters, configuration, settings)

    annual_report = build_annual_report(
        result.commitments, result.projection, parameters, configuration
    )
    metrics = compute_metrics(
        result.commitments, annual_report, parameters, configuration, relaxed
    )

    logger.info(
        f"Solved {parameters.effective_planning_horizon}-year plan from {parameters.start_year}: "
        f"committed {metrics.total_committed:,.0f} of {parameters.available_capital:,.0f}, "
        f"min cash {metrics.min_cash:,.0f}{' (relaxed)' if relaxed else ''}"
    )

    return PacingPlan(
        commitments=list(result.commitments),
        annual_report=annual_report,
        metrics=metrics,
    )
