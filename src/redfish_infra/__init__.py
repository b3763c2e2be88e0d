# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Redfish Infrastructure Layer - Mutation orchestration for management controllers.

This package drives create, update and delete operations against Redfish
baseboard management controllers to completion:

- Endpoint lock registry: one mutation in flight per controller
- Capability check, submission, host reset and job polling
- Entity resolution for newly created resources
- httpx management client and storage volume collaborator

Key Components:
    - ServiceMutationOrchestrator: run_mutation, the single mutation entry point
    - RegistryEndpointMutex: Per-endpoint serialisation
    - HandlerRedfishClient: Management API client
    - MutationError hierarchy with ModelMutationErrorContext
"""

__all__: list[str] = []
