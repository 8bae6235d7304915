# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fixtures for reporting tests.

A single 1,000 secondaries commitment in 2026 under the simple three-year
profile, with 2,000 of capital and four simulated years:

    year  cashflow  end balance  nav
    2026      -500        1,500  500
    2027      -500        1,000  1,000
    2028     1,500        2,500  200
    2029         0        2,500  0
"""

import pytest

from pacing.core.primitives import CategoryAmounts, PhaseEnum
from pacing.reporting import build_annual_report
from pacing.solver import Commitment, project_breakdown
from tests.conftest import simple_configuration, standard_parameters


@pytest.fixture
def single_commitment_parameters():
    return standard_parameters(
        available_capital=2_000, planning_horizon=1, projection_horizon=4
    )


@pytest.fixture
def single_commitment():
    return Commitment(
        year=2026,
        amount=1_000,
        breakdown=CategoryAmounts(secondaries=1_000),
        ratios=CategoryAmounts(secondaries=1.0),
        phase=PhaseEnum.PHASE1,
    )


@pytest.fixture
def single_commitment_report(single_commitment, single_commitment_parameters):
    configuration = simple_configuration()
    projection = project_breakdown(
        single_commitment.breakdown, configuration.profiles, 0, 4
    )
    return build_annual_report(
        [single_commitment], projection, single_commitment_parameters, configuration
    )
