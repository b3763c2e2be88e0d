"""Pytest configuration and shared fixtures for redfish_infra tests."""

from __future__ import annotations

import pytest

from redfish_infra.enums import EnumApplyTimePolicy
from redfish_infra.runtime import RegistryEndpointMutex
from redfish_infra.services.mutation import ServiceMutationOrchestrator
from tests.helpers import VOLUMES_URI, FakeManagementClient, ManualClock


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def client() -> FakeManagementClient:
    """Client advertising both apply times on the volume collection."""
    return FakeManagementClient(
        apply_times={
            VOLUMES_URI: {EnumApplyTimePolicy.IMMEDIATE, EnumApplyTimePolicy.ON_RESET}
        },
    )


@pytest.fixture
def registry() -> RegistryEndpointMutex:
    return RegistryEndpointMutex()


@pytest.fixture
def orchestrator(
    client: FakeManagementClient,
    registry: RegistryEndpointMutex,
    clock: ManualClock,
) -> ServiceMutationOrchestrator:
    return ServiceMutationOrchestrator(client, registry=registry, clock=clock)
