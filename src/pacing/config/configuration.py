# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Planning configuration: cashflow profiles, NAV profiles and allocation rules.

The configuration is an explicit, immutable input to every solve. Where it
comes from (a settings store, an imported workbook, test fixtures) is the
caller's concern.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Tuple, Union

from pydantic import Field, FiniteFloat, field_validator, model_validator

from ..core.primitives import CategoryAmounts, CategoryEnum, Model, PhaseEnum
from .defaults import (
    DEFAULT_ALLOCATION_RULES,
    DEFAULT_CASHFLOW_PROFILES,
    DEFAULT_NAV_PROFILES,
)

logger = logging.getLogger(__name__)

RATIO_TOLERANCE = 1e-9

Profile = List[FiniteFloat]


def _default_profiles() -> Dict[CategoryEnum, List[float]]:
    return {category: list(values) for category, values in DEFAULT_CASHFLOW_PROFILES.items()}


def _default_nav_profiles() -> Dict[CategoryEnum, List[float]]:
    return {category: list(values) for category, values in DEFAULT_NAV_PROFILES.items()}


def _default_rules() -> Dict[PhaseEnum, "AllocationRule"]:
    return {
        phase: AllocationRule.model_validate(rule)
        for phase, rule in DEFAULT_ALLOCATION_RULES.items()
    }


class AllocationRule(Model):
    """
    Target category split for one allocation phase.

    Attributes:
        ratios: Target fraction of a year's commitment per category (sum <= 1)
        years: Planning years (1-based) the phase is meant to cover; informational
        ranges: Advisory (low, high) band per category; informational
    """

    ratios: CategoryAmounts
    years: List[int] = Field(default_factory=list)
    ranges: Dict[CategoryEnum, Tuple[float, float]] = Field(default_factory=dict)

    @field_validator("ratios")
    @classmethod
    def validate_ratios(cls, v: CategoryAmounts) -> CategoryAmounts:
        """Ratios must be fractions that together do not exceed one."""
        for category, ratio in v.items():
            if not 0.0 <= ratio <= 1.0:
                raise ValueError(
                    f"Ratio for {category.value} must be between 0 and 1, got {ratio}"
                )
        if v.total > 1.0 + RATIO_TOLERANCE:
            raise ValueError(f"Allocation ratios sum to {v.total:.4f}, which exceeds 1")
        return v

    @field_validator("ranges")
    @classmethod
    def validate_ranges(
        cls, v: Dict[CategoryEnum, Tuple[float, float]]
    ) -> Dict[CategoryEnum, Tuple[float, float]]:
        for category, (low, high) in v.items():
            if not (0.0 <= low <= high <= 1.0):
                raise ValueError(
                    f"Range for {category.value} must satisfy 0 <= low <= high <= 1, got ({low}, {high})"
                )
        return v

    def ratios_within_ranges(self) -> bool:
        """True when every target ratio sits inside its advisory band."""
        return all(
            low - RATIO_TOLERANCE <= self.ratios.get(category) <= high + RATIO_TOLERANCE
            for category, (low, high) in self.ranges.items()
        )


class PacingConfiguration(Model):
    """
    Profiles and rules consumed by the solver.

    Each mapping defaults to the stock assumptions in
    :mod:`pacing.config.defaults`. A supplied mapping replaces the default
    mapping as a whole; use :meth:`with_profiles` to replace individual
    category profiles.

    Example:
        ```python
        config = PacingConfiguration.defaults().with_profiles(
            {CategoryEnum.PE: [-0.4, -0.3, -0.3, 0.5, 0.6, 0.5]}
        )
        ```
    """

    profiles: Dict[CategoryEnum, Profile] = Field(default_factory=_default_profiles)
    nav_profiles: Dict[CategoryEnum, Profile] = Field(default_factory=_default_nav_profiles)
    rules: Dict[PhaseEnum, AllocationRule] = Field(default_factory=_default_rules)

    @model_validator(mode="after")
    def validate_rules_cover_phases(self) -> "PacingConfiguration":
        """Every allocation phase needs a rule."""
        missing = [phase.value for phase in PhaseEnum if phase not in self.rules]
        if missing:
            raise ValueError(f"Allocation rules missing for phases: {', '.join(missing)}")
        return self

    @classmethod
    def defaults(cls) -> "PacingConfiguration":
        return cls()

    def profile_for(self, category: Union[CategoryEnum, str]) -> List[float]:
        """
        Cashflow profile for a category.

        Raises:
            ValueError: If the configuration has no profile for the category
        """
        category = CategoryEnum(category)
        if category not in self.profiles:
            raise ValueError(f"No cashflow profile configured for category '{category.value}'")
        return self.profiles[category]

    def nav_profile_for(self, category: Union[CategoryEnum, str]) -> List[float]:
        """NAV profile for a category; empty (zero exposure) when not configured."""
        category = CategoryEnum(category)
        if category not in self.nav_profiles:
            logger.warning(
                f"No NAV profile configured for category '{category.value}'; reporting zero exposure"
            )
            return []
        return self.nav_profiles[category]

    def rule_for(self, phase: PhaseEnum) -> AllocationRule:
        return self.rules[phase]

    def with_profiles(
        self,
        profiles: Mapping[Union[CategoryEnum, str], Optional[List[float]]],
        nav_profiles: Optional[Mapping[Union[CategoryEnum, str], Optional[List[float]]]] = None,
    ) -> "PacingConfiguration":
        """
        Return a copy with some category profiles replaced.

        Entries that are None are ignored, so the result of a partial profile
        import can be merged directly.
        """
        merged = dict(self.profiles)
        merged.update(
            {CategoryEnum(k): list(v) for k, v in profiles.items() if v is not None}
        )
        merged_nav = dict(self.nav_profiles)
        if nav_profiles:
            merged_nav.update(
                {CategoryEnum(k): list(v) for k, v in nav_profiles.items() if v is not None}
            )
        return PacingConfiguration(profiles=merged, nav_profiles=merged_nav, rules=self.rules)
