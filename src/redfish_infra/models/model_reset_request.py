# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Host Reset Request Model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from redfish_infra.enums import EnumResetType

DEFAULT_RESET_TIMEOUT_SECONDS: float = 120.0
DEFAULT_RESET_POLL_INTERVAL_SECONDS: float = 10.0


class ModelResetRequest(BaseModel):
    """Reset to drive when a mutation is staged with OnReset.

    Scoped to a single mutation and discarded once the reset phase ends.

    Attributes:
        reset_type: ForceRestart, GracefulRestart or PowerCycle
        reset_timeout_seconds: Wall-clock budget for the host to come back On
        poll_interval_seconds: Delay between power state reads
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    reset_type: EnumResetType = Field(
        default=EnumResetType.FORCE_RESTART,
        description="Reset type applied to the host",
    )
    reset_timeout_seconds: float = Field(
        default=DEFAULT_RESET_TIMEOUT_SECONDS,
        gt=0.0,
        description="Seconds to wait for the host to report the expected power state",
    )
    poll_interval_seconds: float = Field(
        default=DEFAULT_RESET_POLL_INTERVAL_SECONDS,
        gt=0.0,
        description="Seconds between power state reads",
    )

    @field_validator("reset_type")
    @classmethod
    def _reject_power_on(cls, value: EnumResetType) -> EnumResetType:
        if value is EnumResetType.ON:
            raise ValueError(
                "reset_type must be ForceRestart, GracefulRestart or PowerCycle"
            )
        return value


__all__ = [
    "DEFAULT_RESET_POLL_INTERVAL_SECONDS",
    "DEFAULT_RESET_TIMEOUT_SECONDS",
    "ModelResetRequest",
]
