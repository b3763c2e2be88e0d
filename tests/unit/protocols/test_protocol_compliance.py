# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol conformance for the management client and clock implementations.

Conformance is checked by duck typing: required methods must exist, be
callable and, for I/O methods, be coroutine functions.
"""

from __future__ import annotations

import inspect

import pytest

from redfish_infra.handlers import HandlerRedfishClient, ModelRedfishClientConfig
from redfish_infra.protocols import ProtocolClock, ProtocolManagementClient
from redfish_infra.utils import MonotonicClock
from tests.helpers import ENDPOINT, FakeManagementClient, ManualClock

CLIENT_METHODS = [
    "get",
    "post",
    "patch",
    "delete",
    "get_operation_apply_time_values",
    "get_power_state",
    "set_power_state",
]


@pytest.mark.unit
class TestProtocolManagementClientCompliance:
    @pytest.mark.parametrize(
        "client",
        [
            HandlerRedfishClient(ModelRedfishClientConfig(endpoint=ENDPOINT)),
            FakeManagementClient(),
        ],
        ids=["httpx", "fake"],
    )
    def test_client_implements_protocol(self, client: object) -> None:
        assert isinstance(client, ProtocolManagementClient)
        for name in CLIENT_METHODS:
            method = getattr(client, name)
            assert inspect.iscoroutinefunction(method), f"{name} must be async"


@pytest.mark.unit
class TestProtocolClockCompliance:
    @pytest.mark.parametrize("clock", [MonotonicClock(), ManualClock()], ids=["wall", "manual"])
    def test_clock_implements_protocol(self, clock: object) -> None:
        assert isinstance(clock, ProtocolClock)
        assert not inspect.iscoroutinefunction(clock.monotonic)  # type: ignore[attr-defined]
        assert inspect.iscoroutinefunction(clock.sleep)  # type: ignore[attr-defined]
