# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import List


class CategoryEnum(str, Enum):
    """
    Investment categories that receive commitments.

    Declaration order is the canonical ordering used for breakdowns,
    reports and export lines (secondaries first, venture last).
    """

    SECONDARIES = "secondaries"
    PE = "pe"
    VC = "vc"

    @classmethod
    def ordered(cls) -> List["CategoryEnum"]:
        return list(cls)


class PhaseEnum(str, Enum):
    """
    Allocation phases of the planning horizon.

    Each phase covers a contiguous range of planning years that share the
    same target category ratios.
    """

    PHASE1 = "phase1"  # Years 1-5
    PHASE2 = "phase2"  # Years 6-10
    PHASE3 = "phase3"  # Years 11+
