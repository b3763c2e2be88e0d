# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Redfish Infrastructure Models.

This module exports the Pydantic models of the mutation core.
"""

from redfish_infra.models.model_apply_time import (
    ApplyTime,
    ModelApplyImmediate,
    ModelApplyOnReset,
)
from redfish_infra.models.model_entity_ref import ModelEntityMatch, ModelEntityRef
from redfish_infra.models.model_job_handle import ModelJobHandle
from redfish_infra.models.model_job_status import ModelJobStatus
from redfish_infra.models.model_mutation_request import (
    ModelMutationRequest,
    ModelMutationResult,
)
from redfish_infra.models.model_orchestrator_config import ModelOrchestratorConfig
from redfish_infra.models.model_reset_request import ModelResetRequest
from redfish_infra.models.model_service_response import ModelServiceResponse

__all__: list[str] = [
    # Apply time variants
    "ApplyTime",
    "ModelApplyImmediate",
    "ModelApplyOnReset",
    # Entity resolution
    "ModelEntityMatch",
    "ModelEntityRef",
    # Jobs
    "ModelJobHandle",
    "ModelJobStatus",
    # Mutations
    "ModelMutationRequest",
    "ModelMutationResult",
    "ModelOrchestratorConfig",
    "ModelResetRequest",
    # Transport
    "ModelServiceResponse",
]
