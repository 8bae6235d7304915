# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Dict, Optional

from pydantic import Field, computed_field, field_validator, model_validator
from typing_extensions import Annotated

from ..core.primitives import CategoryEnum, FloatBetween0And1, Model, PositiveFloat

DEFAULT_PLANNING_HORIZON = 15
DEFAULT_PROJECTION_HORIZON = 50

OverrideAmount = Annotated[float, Field(ge=0, allow_inf_nan=False)]


def _all_categories() -> Dict[CategoryEnum, bool]:
    return {category: True for category in CategoryEnum}


class PacingParameters(Model):
    """
    Inputs of a single solve.

    Attributes:
        available_capital: Starting capital pool (finite, >= 0)
        start_year: Calendar year of the first planning year
        planning_horizon: Years in which new commitments are made (0 or None
            falls back to horizon, then 15)
        horizon: Legacy name for planning_horizon, used when it is not given
        projection_horizon: Years simulated; the effective horizon is at least
            the planning horizon
        selected_categories: Categories taking part in the allocation
        max_yearly_change: Maximum year-over-year growth of the total commitment
        first_year_cap: First-year commitment cap as a fraction of capital
        manual_overrides: Planning-year index -> category -> pinned amount
    """

    available_capital: float = Field(ge=0, allow_inf_nan=False)
    start_year: int
    planning_horizon: Optional[int] = Field(default=None, gt=0)
    horizon: Optional[int] = Field(default=None, gt=0)
    projection_horizon: int = Field(default=DEFAULT_PROJECTION_HORIZON, gt=0)
    selected_categories: Dict[CategoryEnum, bool] = Field(default_factory=_all_categories)
    max_yearly_change: PositiveFloat = 0.20
    first_year_cap: FloatBetween0And1 = 0.25
    manual_overrides: Dict[int, Dict[CategoryEnum, OverrideAmount]] = Field(
        default_factory=dict
    )

    @field_validator("planning_horizon", "horizon", mode="before")
    @classmethod
    def zero_horizon_is_unset(cls, v):
        """A horizon of 0 falls back like an omitted one."""
        return None if v == 0 else v

    @field_validator("manual_overrides", mode="before")
    @classmethod
    def drop_empty_overrides(cls, v):
        """Unset years and cells (None) are not overrides."""
        if not v:
            return {}
        return {
            year: {cat: amount for cat, amount in cells.items() if amount is not None}
            for year, cells in v.items()
            if cells is not None
        }

    @model_validator(mode="after")
    def validate_override_years(self) -> "PacingParameters":
        """Overrides must target a planning year."""
        for year_index in self.manual_overrides:
            if not 0 <= year_index < self.effective_planning_horizon:
                raise ValueError(
                    f"Manual override for year index {year_index} is outside the "
                    f"planning horizon of {self.effective_planning_horizon} years"
                )
        return self

    @computed_field
    @property
    def effective_planning_horizon(self) -> int:
        return self.planning_horizon or self.horizon or DEFAULT_PLANNING_HORIZON

    @computed_field
    @property
    def total_horizon(self) -> int:
        return max(self.effective_planning_horizon, self.projection_horizon)

    def is_selected(self, category: CategoryEnum) -> bool:
        return bool(self.selected_categories.get(category, False))

    def overrides_for(self, year_index: int) -> Dict[CategoryEnum, float]:
        return self.manual_overrides.get(year_index, {})
