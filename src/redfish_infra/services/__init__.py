# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Redfish Infrastructure Services Module.

Exports:
    ServiceMutationOrchestrator: Mutate-then-converge orchestration
    MutationSession: Handle on a held endpoint lock
    ServiceStorageVolume: Virtual disk lifecycle built on the orchestrator
"""

from redfish_infra.services.mutation import (
    MutationSession,
    ServiceMutationOrchestrator,
)
from redfish_infra.services.storage_volume import ServiceStorageVolume

__all__ = [
    "MutationSession",
    "ServiceMutationOrchestrator",
    "ServiceStorageVolume",
]
