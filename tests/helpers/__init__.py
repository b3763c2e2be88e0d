# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for redfish_infra unit tests.

Available Utilities:
    Deterministic:
        - ManualClock: Virtual clock whose sleep advances time instantly
        - DeterministicIdGenerator: Fixed ID generator for reproducible tests

    Mocks:
        - FakeManagementClient: Scripted ProtocolManagementClient
        - json_response, accepted, redfish_error: Response builders
"""

from tests.helpers.deterministic import DeterministicIdGenerator, ManualClock
from tests.helpers.mock_helpers import (
    ENDPOINT,
    JOB_URI,
    STORAGE_URI,
    SYSTEM_URI,
    VOLUMES_URI,
    FakeManagementClient,
    accepted,
    json_response,
    redfish_error,
)

__all__ = [
    "ENDPOINT",
    "JOB_URI",
    "STORAGE_URI",
    "SYSTEM_URI",
    "VOLUMES_URI",
    "DeterministicIdGenerator",
    "FakeManagementClient",
    "ManualClock",
    "accepted",
    "json_response",
    "redfish_error",
]
