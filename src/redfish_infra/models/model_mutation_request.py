# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mutation Request and Result Models.

A mutation request is the single input of ``run_mutation``: the resource
collaborator (storage volume, firmware, BIOS, user account) builds the body
and target URL, the orchestration core drives it to completion.
"""

from __future__ import annotations

from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from redfish_infra.enums import EnumApplyTimePolicy, EnumMutationMethod
from redfish_infra.models.model_apply_time import ApplyTime, ModelApplyImmediate
from redfish_infra.models.model_entity_ref import ModelEntityMatch, ModelEntityRef
from redfish_infra.models.model_job_handle import (
    DEFAULT_JOB_POLL_INTERVAL_SECONDS,
    DEFAULT_JOB_TIMEOUT_SECONDS,
)
from redfish_infra.models.model_job_status import ModelJobStatus
from redfish_infra.runtime.registry_endpoint_mutex import normalise_endpoint


class ModelMutationRequest(BaseModel):
    """Input of one mutation against one controller endpoint.

    Attributes:
        endpoint: Controller endpoint identity; the lock key
        target_url: URI the mutation is submitted to
        method: POST (create), PATCH (update) or DELETE (delete)
        body: Request body built by the resource collaborator (None for DELETE)
        capability_uri: Sub-resource queried for supported apply times
        apply_time: Immediate or OnReset (with its reset request)
        system_uri: ComputerSystem reset for OnReset mutations
        job_timeout_seconds: Job poll budget, measured from submission or,
            for OnReset, from the end of the host reset
        job_poll_interval_seconds: Fixed delay between job polls
        resolve: Entity to resolve once the job completes, if any
        correlation_id: Propagated into every log record and error
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    endpoint: str = Field(min_length=1)
    target_url: str = Field(min_length=1)
    method: EnumMutationMethod
    body: Optional[dict[str, Any]] = None
    capability_uri: str = Field(min_length=1)
    apply_time: ApplyTime = Field(default_factory=ModelApplyImmediate)
    system_uri: Optional[str] = None
    job_timeout_seconds: float = Field(default=DEFAULT_JOB_TIMEOUT_SECONDS, gt=0.0)
    job_poll_interval_seconds: float = Field(
        default=DEFAULT_JOB_POLL_INTERVAL_SECONDS, gt=0.0
    )
    resolve: Optional[ModelEntityMatch] = None
    correlation_id: UUID = Field(default_factory=uuid4)

    @field_validator("endpoint")
    @classmethod
    def _normalise_endpoint(cls, value: str) -> str:
        return normalise_endpoint(value)

    @model_validator(mode="after")
    def _check_reset_target(self) -> ModelMutationRequest:
        if self.apply_time.policy is EnumApplyTimePolicy.ON_RESET and not self.system_uri:
            raise ValueError("system_uri is required when apply_time is OnReset")
        return self


class ModelMutationResult(BaseModel):
    """Outcome of a completed mutation.

    ``entity`` is set when the request asked for entity resolution.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    job_id: str
    job_status: ModelJobStatus
    entity: Optional[ModelEntityRef] = None
    elapsed_seconds: float = Field(ge=0.0)
    correlation_id: UUID


__all__ = ["ModelMutationRequest", "ModelMutationResult"]
