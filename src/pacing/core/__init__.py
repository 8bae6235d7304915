# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Pacing Core Framework

Foundational building blocks shared by the solver and reporting layers.
"""

from . import primitives
from .calculations import FinancialCalculations
from .primitives import (
    CategoryAmounts,
    CategoryEnum,
    FloatBetween0And1,
    Model,
    PhaseEnum,
    PhaseSchedule,
    PositiveFloat,
    PositiveInt,
    PositiveIntGt0,
    RelaxationSettings,
    ReportModel,
    SmoothingSettings,
    SolverSettings,
)

__all__ = [
    "primitives",
    "FinancialCalculations",
    "CategoryAmounts",
    "CategoryEnum",
    "FloatBetween0And1",
    "Model",
    "PhaseEnum",
    "PhaseSchedule",
    "PositiveFloat",
    "PositiveInt",
    "PositiveIntGt0",
    "RelaxationSettings",
    "ReportModel",
    "SmoothingSettings",
    "SolverSettings",
]
