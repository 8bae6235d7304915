# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for pacing tests.

Provides the stock configuration, a small hand-checkable configuration and
standard solve parameters.
"""

from __future__ import annotations

from typing import Optional

import pytest

from pacing.config import AllocationRule, PacingConfiguration, PacingParameters
from pacing.core.primitives import CategoryAmounts, CategoryEnum, PhaseEnum, SolverSettings

# Calls half the commitment in each of the first two years, returns 1.5x in year three
SIMPLE_PROFILE = [-0.5, -0.5, 1.5]
SIMPLE_NAV_PROFILE = [0.5, 1.0, 0.2]


def simple_configuration(ratios: Optional[CategoryAmounts] = None) -> PacingConfiguration:
    """
    Configuration with the same three-year profile for every category.

    Args:
        ratios: Target ratios used for every phase (default: all secondaries)

    Returns:
        PacingConfiguration ready for testing
    """
    ratios = ratios or CategoryAmounts(secondaries=1.0)
    return PacingConfiguration(
        profiles={category: list(SIMPLE_PROFILE) for category in CategoryEnum},
        nav_profiles={category: list(SIMPLE_NAV_PROFILE) for category in CategoryEnum},
        rules={phase: AllocationRule(ratios=ratios) for phase in PhaseEnum},
    )


def standard_parameters(**overrides) -> PacingParameters:
    """Ten million, 2026 start, 15 planning years, 50 projected years."""
    values = dict(
        available_capital=10_000_000,
        start_year=2026,
        planning_horizon=15,
        projection_horizon=50,
        max_yearly_change=0.20,
        first_year_cap=0.25,
    )
    values.update(overrides)
    return PacingParameters(**values)


@pytest.fixture
def default_configuration() -> PacingConfiguration:
    return PacingConfiguration.defaults()


@pytest.fixture
def simple_config() -> PacingConfiguration:
    return simple_configuration()


@pytest.fixture
def solver_settings() -> SolverSettings:
    return SolverSettings()


@pytest.fixture
def parameters() -> PacingParameters:
    return standard_parameters()
