# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Per-category value triple.

Used both for commitment breakdowns (currency amounts) and for allocation
ratios (fractions). The field names are part of the export contract
(``breakdown.secondaries``, ``breakdown.pe``, ``breakdown.vc``).
"""

from __future__ import annotations

from typing import Dict, Iterator, Mapping, Optional, Tuple, Union

from .enums import CategoryEnum
from .model import Model


class CategoryAmounts(Model):
    """Values for each investment category, zero when not set."""

    secondaries: float = 0.0
    pe: float = 0.0
    vc: float = 0.0

    @classmethod
    def from_mapping(
        cls, values: Optional[Mapping[Union[CategoryEnum, str], float]]
    ) -> "CategoryAmounts":
        """Build from a (possibly partial) category mapping."""
        if not values:
            return cls()
        return cls(
            **{CategoryEnum(category).value: float(value) for category, value in values.items()}
        )

    def get(self, category: Union[CategoryEnum, str]) -> float:
        return getattr(self, CategoryEnum(category).value)

    def __getitem__(self, category: Union[CategoryEnum, str]) -> float:
        return self.get(category)

    def items(self) -> Iterator[Tuple[CategoryEnum, float]]:
        for category in CategoryEnum.ordered():
            yield category, self.get(category)

    def to_mapping(self) -> Dict[CategoryEnum, float]:
        return dict(self.items())

    @property
    def total(self) -> float:
        return self.secondaries + self.pe + self.vc

    def scaled(self, factor: float) -> "CategoryAmounts":
        return CategoryAmounts(
            secondaries=self.secondaries * factor,
            pe=self.pe * factor,
            vc=self.vc * factor,
        )

    def plus(self, other: "CategoryAmounts") -> "CategoryAmounts":
        return CategoryAmounts(
            secondaries=self.secondaries + other.secondaries,
            pe=self.pe + other.pe,
            vc=self.vc + other.vc,
        )
