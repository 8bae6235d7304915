# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field, model_validator

from .model import Model
from .types import FloatBetween0And1, PositiveFloat, PositiveIntGt0


class SmoothingSettings(Model):
    """Bounds applied to the per-year commitment search."""

    restart_floor: FloatBetween0And1 = Field(
        default=0.05,
        description=(
            "Minimum smoothed bound as a fraction of available capital. "
            "Lets commitments resume after a zero-commitment year."
        ),
    )
    unsmoothed_bound_multiple: PositiveFloat = Field(
        default=2.0,
        description="Search bound as a multiple of available capital when smoothing is disabled.",
    )


class RelaxationSettings(Model):
    """Thresholds for re-solving without smoothing."""

    idle_cash_threshold: FloatBetween0And1 = Field(
        default=0.10,
        description="Retry when end-of-planning cash exceeds this fraction of available capital...",
    )
    commitment_threshold: FloatBetween0And1 = Field(
        default=0.80,
        description="...and total commitments stay below this fraction of available capital.",
    )
    improvement_threshold: PositiveFloat = Field(
        default=0.20,
        description="Adopt the unsmoothed plan only if it commits more than this fraction extra.",
    )


class PhaseSchedule(Model):
    """Last planning year (1-based) of each allocation phase."""

    phase1_end_year: PositiveIntGt0 = 5
    phase2_end_year: PositiveIntGt0 = 10

    @model_validator(mode="after")
    def check_phase_order(self) -> "PhaseSchedule":
        """Ensure phase 2 does not end before phase 1."""
        if self.phase2_end_year < self.phase1_end_year:
            raise ValueError("phase2_end_year must not be before phase1_end_year")
        return self


class SolverSettings(Model):
    """
    Numeric policy of the allocation solver.

    The defaults reproduce the standard planning policy; every value is
    exposed so scenarios and tests can reason about it explicitly.

    Usage Examples:
        # Standard policy
        settings = SolverSettings()

        # Coarser search for quick what-if runs
        settings = SolverSettings(search_iterations=12, rounding_unit=10_000.0)
    """

    rounding_unit: PositiveFloat = Field(
        default=1000.0,
        gt=0,
        description="Searched commitments are floored to a multiple of this unit.",
    )
    search_iterations: PositiveIntGt0 = Field(
        default=20,
        description=(
            "Binary search iterations per planning year. Precision is roughly "
            "bound / 2**search_iterations."
        ),
    )
    hard_cap_multiple: PositiveFloat = Field(
        default=5.0,
        description="Absolute search bound as a multiple of available capital.",
    )
    smoothing: SmoothingSettings = Field(default_factory=SmoothingSettings)
    relaxation: RelaxationSettings = Field(default_factory=RelaxationSettings)
    phases: PhaseSchedule = Field(default_factory=PhaseSchedule)
