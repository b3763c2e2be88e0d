# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mutation orchestration core.

Exports:
    ServiceMutationOrchestrator: Runs one mutation end to end under the endpoint lock
    MutationSession: Runs mutations under a lock the caller already holds
    ServiceCapabilityValidator: Apply time check before submission
    ServiceMutationSubmitter: Single submission, 202 + Location to job handle
    ServicePowerReset: Host reset and power state wait for OnReset mutations
    ServiceJobPoller: Fixed-interval job monitor polling
    ServiceEntityResolver: Collection scan for a uniquely named member
"""

from redfish_infra.services.mutation.service_capability_validator import (
    ServiceCapabilityValidator,
    is_apply_time_supported,
)
from redfish_infra.services.mutation.service_entity_resolver import (
    ServiceEntityResolver,
    resolve_entity,
)
from redfish_infra.services.mutation.service_job_poller import ServiceJobPoller
from redfish_infra.services.mutation.service_mutation_orchestrator import (
    MutationSession,
    ServiceMutationOrchestrator,
)
from redfish_infra.services.mutation.service_mutation_submitter import (
    ServiceMutationSubmitter,
)
from redfish_infra.services.mutation.service_power_reset import ServicePowerReset

__all__ = [
    "MutationSession",
    "ServiceCapabilityValidator",
    "ServiceEntityResolver",
    "ServiceJobPoller",
    "ServiceMutationOrchestrator",
    "ServiceMutationSubmitter",
    "ServicePowerReset",
    "is_apply_time_supported",
    "resolve_entity",
]
