# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Management API client handlers.

Exports:
    HandlerRedfishClient: httpx async implementation of ProtocolManagementClient
    ModelRedfishClientConfig: Endpoint, credentials, TLS and timeout settings
"""

from redfish_infra.handlers.handler_redfish import HandlerRedfishClient
from redfish_infra.handlers.model_redfish_client_config import (
    ModelRedfishClientConfig,
)

__all__: list[str] = [
    "HandlerRedfishClient",
    "ModelRedfishClientConfig",
]
