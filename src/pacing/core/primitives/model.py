# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models; running solver state is threaded through function
    arguments and never stored on a model.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        extra="forbid",  # Catches typos and missing field definitions immediately
    )


class ReportModel(Model):
    """Immutable output model serialized with camelCase keys.

    Export consumers key off field names such as ``totalCommitted`` and
    ``endBalance``; ``model_dump(by_alias=True)`` produces those names while
    Python code keeps snake_case attributes.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )
