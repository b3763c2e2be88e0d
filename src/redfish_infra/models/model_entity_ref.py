# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Entity resolution models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelEntityMatch(BaseModel):
    """Where and how to find the entity a mutation created or altered.

    Attributes:
        collection_uri: Parent collection scanned after the job completes
        match_value: Value the entity must carry (the configured display name)
        match_key: Member attribute compared against match_value
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    collection_uri: str = Field(min_length=1)
    match_value: str = Field(min_length=1)
    match_key: str = Field(default="Name", min_length=1)


class ModelEntityRef(BaseModel):
    """Stable reference to an entity on the controller."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    uri: str = Field(min_length=1, description="Entity @odata.id")
    name: str = Field(description="Value of the matched attribute")


__all__ = ["ModelEntityMatch", "ModelEntityRef"]
