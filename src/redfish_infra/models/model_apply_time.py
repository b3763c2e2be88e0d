# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Apply Time Variant Models.

The apply time of a mutation is a tagged variant discriminated on ``policy``.
Each variant carries only the fields relevant to it: an immediate mutation
carries nothing else, an OnReset mutation carries the reset to drive.

Example:
    >>> from pydantic import TypeAdapter
    >>> adapter = TypeAdapter(ApplyTime)
    >>> adapter.validate_python({"policy": "Immediate"})
    ModelApplyImmediate(policy=<EnumApplyTimePolicy.IMMEDIATE: 'Immediate'>)
    >>> adapter.validate_python(
    ...     {"policy": "OnReset", "reset": {"reset_type": "PowerCycle"}}
    ... ).reset.reset_type
    <EnumResetType.POWER_CYCLE: 'PowerCycle'>
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from redfish_infra.enums import EnumApplyTimePolicy
from redfish_infra.models.model_reset_request import ModelResetRequest


class ModelApplyImmediate(BaseModel):
    """Controller commits the change as soon as it accepts it."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    policy: Literal[EnumApplyTimePolicy.IMMEDIATE] = EnumApplyTimePolicy.IMMEDIATE


class ModelApplyOnReset(BaseModel):
    """Controller stages the change until the host is reset."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    policy: Literal[EnumApplyTimePolicy.ON_RESET] = EnumApplyTimePolicy.ON_RESET
    reset: ModelResetRequest = Field(
        default_factory=ModelResetRequest,
        description="Reset driven after submission to commit the staged change",
    )


ApplyTime = Annotated[
    Union[ModelApplyImmediate, ModelApplyOnReset],
    Field(discriminator="policy"),
]


__all__ = ["ApplyTime", "ModelApplyImmediate", "ModelApplyOnReset"]
