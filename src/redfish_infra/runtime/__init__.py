# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Runtime state shared across mutations.

Exports:
    RegistryEndpointMutex: Per-endpoint lock table (the only shared mutable state)
    normalise_endpoint: Endpoint identity to registry key
"""

from redfish_infra.runtime.registry_endpoint_mutex import (
    RegistryEndpointMutex,
    normalise_endpoint,
)

__all__: list[str] = ["RegistryEndpointMutex", "normalise_endpoint"]
