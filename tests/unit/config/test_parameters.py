# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for solve parameters."""

import math

import pytest
from pydantic import ValidationError

from pacing.config import PacingParameters
from pacing.core.primitives import CategoryEnum


class TestHorizons:
    """Tests for planning and projection horizon resolution."""

    def test_defaults(self):
        params = PacingParameters(available_capital=1_000_000, start_year=2026)
        assert params.effective_planning_horizon == 15
        assert params.projection_horizon == 50
        assert params.total_horizon == 50
        assert params.max_yearly_change == 0.20
        assert params.first_year_cap == 0.25
        assert all(params.is_selected(c) for c in CategoryEnum)

    def test_legacy_horizon_fallback(self):
        params = PacingParameters(available_capital=1_000_000, start_year=2026, horizon=10)
        assert params.effective_planning_horizon == 10

    def test_planning_horizon_takes_precedence(self):
        params = PacingParameters(
            available_capital=1_000_000, start_year=2026, horizon=10, planning_horizon=12
        )
        assert params.effective_planning_horizon == 12

    def test_total_horizon_covers_planning_horizon(self):
        params = PacingParameters(
            available_capital=1_000_000,
            start_year=2026,
            planning_horizon=60,
            projection_horizon=50,
        )
        assert params.total_horizon == 60

    def test_zero_horizon_falls_back(self):
        params = PacingParameters(
            available_capital=1_000_000, start_year=2026, planning_horizon=0, horizon=8
        )
        assert params.effective_planning_horizon == 8
        params = PacingParameters(
            available_capital=1_000_000, start_year=2026, planning_horizon=0, horizon=0
        )
        assert params.effective_planning_horizon == 15

    def test_negative_horizon_rejected(self):
        with pytest.raises(ValidationError):
            PacingParameters(available_capital=1_000_000, start_year=2026, planning_horizon=-1)
        with pytest.raises(ValidationError):
            PacingParameters(available_capital=1_000_000, start_year=2026, projection_horizon=-5)


class TestCapital:
    """Tests for available capital validation."""

    def test_zero_capital_allowed(self):
        assert PacingParameters(available_capital=0, start_year=2026).available_capital == 0

    @pytest.mark.parametrize("capital", [-1.0, math.nan, math.inf])
    def test_invalid_capital_rejected(self, capital):
        with pytest.raises(ValidationError):
            PacingParameters(available_capital=capital, start_year=2026)


class TestSelection:
    """Tests for category selection."""

    def test_missing_category_is_unselected(self):
        params = PacingParameters(
            available_capital=1_000_000,
            start_year=2026,
            selected_categories={"secondaries": True, "pe": False},
        )
        assert params.is_selected(CategoryEnum.SECONDARIES)
        assert not params.is_selected(CategoryEnum.PE)
        assert not params.is_selected(CategoryEnum.VC)


class TestManualOverrides:
    """Tests for manual override validation."""

    def test_overrides_keyed_by_year_index(self):
        params = PacingParameters(
            available_capital=1_000_000,
            start_year=2026,
            manual_overrides={0: {"pe": 500_000}},
        )
        assert params.overrides_for(0) == {CategoryEnum.PE: 500_000}
        assert params.overrides_for(1) == {}

    def test_unset_cells_dropped(self):
        params = PacingParameters(
            available_capital=1_000_000,
            start_year=2026,
            manual_overrides={2: {"pe": None, "vc": 0.0}},
        )
        assert params.overrides_for(2) == {CategoryEnum.VC: 0.0}

    def test_unset_year_dropped(self):
        params = PacingParameters(
            available_capital=1_000_000,
            start_year=2026,
            manual_overrides={0: None, 1: {"pe": 250_000}},
        )
        assert params.manual_overrides == {1: {CategoryEnum.PE: 250_000}}
        assert params.overrides_for(0) == {}

    def test_negative_override_rejected(self):
        with pytest.raises(ValidationError):
            PacingParameters(
                available_capital=1_000_000,
                start_year=2026,
                manual_overrides={0: {"pe": -1.0}},
            )

    def test_override_outside_planning_horizon_rejected(self):
        with pytest.raises(ValidationError, match="outside the planning horizon"):
            PacingParameters(
                available_capital=1_000_000,
                start_year=2026,
                planning_horizon=5,
                manual_overrides={5: {"pe": 100_000}},
            )
