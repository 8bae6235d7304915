# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Pacing Core Primitives

Building blocks shared by configuration, solver and reporting: the immutable
model base, category and phase enums, constrained numeric types, the
per-category value triple and solver settings.
"""

from .breakdown import CategoryAmounts
from .enums import CategoryEnum, PhaseEnum
from .model import Model, ReportModel
from .settings import (
    PhaseSchedule,
    RelaxationSettings,
    SmoothingSettings,
    SolverSettings,
)
from .types import FloatBetween0And1, PositiveFloat, PositiveInt, PositiveIntGt0

__all__ = [
    # Core models
    "Model",
    "ReportModel",
    "CategoryAmounts",
    # Enums
    "CategoryEnum",
    "PhaseEnum",
    # Settings
    "SolverSettings",
    "SmoothingSettings",
    "RelaxationSettings",
    "PhaseSchedule",
    # Types
    "PositiveFloat",
    "PositiveInt",
    "PositiveIntGt0",
    "FloatBetween0And1",
]
