# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field
from typing_extensions import Annotated

# constrained types
PositiveInt = Annotated[int, Field(strict=True, ge=0)]
PositiveIntGt0 = Annotated[int, Field(strict=True, gt=0)]
PositiveFloat = Annotated[float, Field(strict=True, ge=0, allow_inf_nan=False)]
FloatBetween0And1 = Annotated[float, Field(strict=True, ge=0, le=1)]
