# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocols consumed by the mutation core.

Exports:
    ProtocolClock: Monotonic clock with awaitable sleep
    ProtocolManagementClient: Management API client (verbs + typed helpers)
"""

from redfish_infra.protocols.protocol_clock import ProtocolClock
from redfish_infra.protocols.protocol_management_client import (
    ProtocolManagementClient,
)

__all__: list[str] = [
    "ProtocolClock",
    "ProtocolManagementClient",
]
