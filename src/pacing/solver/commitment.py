# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from ..core.primitives import CategoryAmounts, PhaseEnum, ReportModel


class Commitment(ReportModel):
    """
    New capital committed in one planning year.

    Attributes:
        year: Calendar year of the commitment
        amount: Total committed across categories
        breakdown: Amount per category
        ratios: Phase ratios normalized over the selected categories
        phase: Allocation phase of the year
        is_manual: True when every active category was pinned by overrides
    """

    year: int
    amount: float = Field(ge=0)
    breakdown: CategoryAmounts
    ratios: CategoryAmounts
    phase: PhaseEnum
    is_manual: bool = False
