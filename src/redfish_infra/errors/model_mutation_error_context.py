# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mutation Error Context Configuration Model.

This module defines the configuration model for mutation error context,
bundling the structured fields every mutation error carries so that error
constructors stay small while keeping strong typing.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from redfish_infra.enums import EnumMutationPhase


class ModelMutationErrorContext(BaseModel):
    """Configuration model for mutation error context.

    Attributes:
        endpoint: Controller endpoint identity the mutation targeted
        phase: Mutation phase in which the error occurred
        operation: Operation being performed (submit, poll_job, get_power_state, etc.)
        target_name: Resource identifier (URI, job id, entity name)
        correlation_id: Mutation correlation ID for tracing

    Example:
        >>> context = ModelMutationErrorContext(
        ...     endpoint="https://bmc-01.example.com",
        ...     phase=EnumMutationPhase.JOB_POLL,
        ...     operation="poll_job",
        ...     target_name="/redfish/v1/TaskService/Tasks/JID_1",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise JobTimedOutError("Job did not finish", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    endpoint: Optional[str] = Field(
        default=None,
        description="Controller endpoint identity (host or base URL)",
    )
    phase: Optional[EnumMutationPhase] = Field(
        default=None,
        description="Mutation phase in which the error occurred",
    )
    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (submit, poll_job, reset, etc.)",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Target resource identifier (URI, job id, entity name)",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Mutation correlation ID for tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: Optional[UUID] = None,
        **kwargs: object,
    ) -> ModelMutationErrorContext:
        """Build a context, generating a correlation ID when none is given."""
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)  # type: ignore[arg-type]


__all__ = ["ModelMutationErrorContext"]
