# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Pacing plan result model.

The plan is the single output of a solve: the adopted commitments, the
annual report over the total horizon and the summary metrics. DataFrame
accessors are computed on demand from those rows.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Sequence

import pandas as pd

from ..core.primitives import CategoryEnum, ReportModel
from ..solver.commitment import Commitment
from .metrics import PlanMetrics
from .report import AnnualReportRow


class CommitmentLine(NamedTuple):
    """One category commitment of one year, as fed to spreadsheet exports."""

    year: int
    category: CategoryEnum
    amount: int


class PacingPlan(ReportModel):
    """
    Results of a capital pacing solve.

    Attributes:
        commitments: One commitment per planning year
        annual_report: One row per simulated year
        metrics: Summary metrics
    """

    commitments: List[Commitment]
    annual_report: List[AnnualReportRow]
    metrics: PlanMetrics

    def to_dict(self) -> Dict[str, Any]:
        """Nested plain-data form using the export field names (camelCase)."""
        return self.model_dump(mode="json", by_alias=True)

    def annual_report_df(self) -> pd.DataFrame:
        """
        Annual report as a DataFrame indexed by year.

        The per-category breakdown is flattened into ``breakdown_<category>``
        columns.
        """
        records = []
        for row in self.annual_report:
            record = row.model_dump(exclude={"breakdown"})
            record.update(
                {f"breakdown_{c.value}": amount for c, amount in row.breakdown.items()}
            )
            records.append(record)
        return pd.DataFrame.from_records(records).set_index("year")

    def commitments_df(self) -> pd.DataFrame:
        """Commitments as a DataFrame indexed by year."""
        records = [
            {
                "year": c.year,
                "amount": c.amount,
                **{cat.value: amount for cat, amount in c.breakdown.items()},
                "phase": c.phase.value,
                "is_manual": c.is_manual,
            }
            for c in self.commitments
        ]
        return pd.DataFrame.from_records(records).set_index("year")

    def cashflow_matrix(
        self,
        profiles: Mapping[CategoryEnum, Sequence[float]],
        horizon: Optional[int] = None,
    ) -> pd.DataFrame:
        """
        Cashflow of every category commitment in every report year.

        Rows are (commitment year, category) for positive breakdown amounts;
        columns are report years (the first ``horizon`` of them when given);
        values are ``amount * profile[age]``, zero outside the profile.
        """
        years = [row.year for row in self.annual_report]
        if horizon is not None:
            years = years[:horizon]

        rows: Dict[tuple, List[float]] = {}
        for commitment in self.commitments:
            for category, amount in commitment.breakdown.items():
                if amount <= 0:
                    continue
                profile = profiles.get(category, [])
                rows[(commitment.year, category.value)] = [
                    amount * profile[year - commitment.year]
                    if 0 <= year - commitment.year < len(profile)
                    else 0.0
                    for year in years
                ]

        index = pd.MultiIndex.from_tuples(list(rows), names=["commitment_year", "category"])
        return pd.DataFrame(list(rows.values()), index=index, columns=years, dtype=float)

    def commitment_lines(self) -> List[CommitmentLine]:
        """
        Positive category commitments rounded to whole units, ordered by year
        then category (secondaries, pe, vc).
        """
        lines = [
            CommitmentLine(commitment.year, category, round(amount))
            for commitment in self.commitments
            for category, amount in commitment.breakdown.items()
        ]
        order = {category: i for i, category in enumerate(CategoryEnum.ordered())}
        return sorted(
            (line for line in lines if line.amount > 0),
            key=lambda line: (line.year, order[line.category]),
        )
