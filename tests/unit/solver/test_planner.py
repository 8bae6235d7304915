# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the planning loop and the smoothing relaxation."""

import numpy as np
import pytest

from pacing.core.primitives import (
    CategoryAmounts,
    PhaseEnum,
    RelaxationSettings,
    SolverSettings,
)
from pacing.solver import (
    AllocationResult,
    Commitment,
    CommitmentProjection,
    plan_with_relaxation,
    project_breakdown,
    run_allocation,
    should_relax,
)
from tests.conftest import standard_parameters


def _result(amounts, cashflows, smoothing_enabled=True) -> AllocationResult:
    commitments = tuple(
        Commitment(
            year=2026 + i,
            amount=amount,
            breakdown=CategoryAmounts(secondaries=amount),
            ratios=CategoryAmounts(secondaries=1.0),
            phase=PhaseEnum.PHASE1,
        )
        for i, amount in enumerate(amounts)
    )
    projection = CommitmentProjection(
        cashflows=np.asarray(cashflows, dtype=float),
        unfunded=np.zeros(len(cashflows)),
    )
    return AllocationResult(
        commitments=commitments, projection=projection, smoothing_enabled=smoothing_enabled
    )


class TestAllocationResult:
    """Tests for AllocationResult."""

    def test_total_committed(self):
        assert _result([250.0, 300.0], [0, 0, 0, 0]).total_committed == 550.0

    def test_end_balance(self):
        result = _result([250.0], [-100, -50, 400, 0])
        assert result.end_balance(1_000, 0) == 900
        assert result.end_balance(1_000, 1) == 850
        assert result.end_balance(1_000, 3) == 1_250


class TestShouldRelax:
    """Tests for should_relax."""

    def _params(self):
        return standard_parameters(
            available_capital=1_000, planning_horizon=2, projection_horizon=4
        )

    def test_idle_cash_and_low_commitment(self):
        result = _result([250.0, 250.0], [-100, -100, 0, 0])
        assert should_relax(result, self._params(), SolverSettings())

    def test_enough_committed(self):
        result = _result([450.0, 450.0], [-100, -100, 0, 0])
        assert not should_relax(result, self._params(), SolverSettings())

    def test_cash_measured_at_end_of_planning_horizon(self):
        # Little cash left after year two even though distributions follow
        result = _result([250.0, 250.0], [-500, -450, 2_000, 0])
        assert not should_relax(result, self._params(), SolverSettings())

    def test_thresholds_from_settings(self):
        result = _result([450.0, 450.0], [-100, -100, 0, 0])
        settings = SolverSettings(relaxation=RelaxationSettings(commitment_threshold=0.95))
        assert should_relax(result, self._params(), settings)


class TestRunAllocation:
    """Tests for run_allocation."""

    def test_one_commitment_per_planning_year(self, default_configuration, solver_settings):
        result = run_allocation(
            standard_parameters(), default_configuration, solver_settings, True
        )
        assert [c.year for c in result.commitments] == list(range(2026, 2041))
        assert result.projection.horizon == 50
        assert result.smoothing_enabled

    def test_smoothing_limits_growth(self, default_configuration, solver_settings):
        result = run_allocation(
            standard_parameters(), default_configuration, solver_settings, True
        )
        amounts = [c.amount for c in result.commitments]

        assert amounts[0] <= 2_500_000
        for previous, current in zip(amounts, amounts[1:]):
            assert current <= max(previous * 1.2, 500_000) + 1e-6

    def test_projection_is_sum_of_commitments(self, default_configuration, solver_settings):
        params = standard_parameters()
        result = run_allocation(params, default_configuration, solver_settings, True)

        expected = CommitmentProjection.zeros(params.total_horizon)
        for index, commitment in enumerate(result.commitments):
            expected = expected.combine(
                project_breakdown(
                    commitment.breakdown,
                    default_configuration.profiles,
                    index,
                    params.total_horizon,
                )
            )
        np.testing.assert_allclose(result.projection.cashflows, expected.cashflows)
        np.testing.assert_allclose(result.projection.unfunded, expected.unfunded)

    def test_liquidity_blocks_second_year(self, simple_config):
        params = standard_parameters(
            available_capital=1_000,
            planning_horizon=2,
            projection_horizon=4,
            first_year_cap=1.0,
        )
        settings = SolverSettings(rounding_unit=1.0)
        result = run_allocation(params, simple_config, settings, True)

        # Year one uses nearly all capital; one unit of headroom remains for year two
        assert [c.amount for c in result.commitments] == [999.0, 0.0]


class TestPlanWithRelaxation:
    """Tests for plan_with_relaxation."""

    def _tight_parameters(self):
        return standard_parameters(
            planning_horizon=5, first_year_cap=0.01, max_yearly_change=0.0
        )

    def test_tight_smoothing_is_relaxed(self, default_configuration):
        result, relaxed = plan_with_relaxation(self._tight_parameters(), default_configuration)

        assert relaxed
        assert not result.smoothing_enabled
        # Smoothed plan: 99k, then the 500k restart floor each year
        assert result.total_committed > 2_095_000 * 1.2

    def test_relaxation_rejected_without_enough_gain(self, default_configuration):
        settings = SolverSettings(relaxation=RelaxationSettings(improvement_threshold=1000.0))
        result, relaxed = plan_with_relaxation(
            self._tight_parameters(), default_configuration, settings
        )

        assert not relaxed
        assert result.smoothing_enabled
        assert [c.amount for c in result.commitments] == [
            99_000,
            499_000,
            499_000,
            499_000,
            499_000,
        ]

    def test_no_relaxation_when_nothing_committed(self, default_configuration):
        params = standard_parameters(
            selected_categories={"secondaries": False, "pe": False, "vc": False}
        )
        result, relaxed = plan_with_relaxation(params, default_configuration)

        # Idle cash but the unsmoothed run commits nothing either
        assert not relaxed
        assert result.total_committed == 0

    def test_default_settings(self, default_configuration):
        result, _ = plan_with_relaxation(standard_parameters(), default_configuration)
        assert len(result.commitments) == 15

    def test_deterministic(self, default_configuration):
        first, _ = plan_with_relaxation(standard_parameters(), default_configuration)
        second, _ = plan_with_relaxation(standard_parameters(), default_configuration)
        assert first.commitments == second.commitments
        np.testing.assert_array_equal(first.projection.cashflows, second.projection.cashflows)
