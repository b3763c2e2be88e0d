# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definition for the management API client.

The mutation core does not implement the management protocol itself. It
consumes a client able to issue authenticated GET/POST/PATCH/DELETE calls and
three typed helper queries. ``HandlerRedfishClient`` is the httpx-backed
implementation; tests use a scripted fake.

Error Handling:
    - Transport failures (connection refused, request timeout) raise
      TransportError
    - HTTP error statuses on the raw verbs are NOT raised: the response is
      returned and the caller decides
    - HTTP error statuses on the typed helpers raise UnexpectedResponseError
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from redfish_infra.enums import EnumApplyTimePolicy, EnumPowerState, EnumResetType
    from redfish_infra.models.model_service_response import ModelServiceResponse

__all__ = ["ProtocolManagementClient"]


@runtime_checkable
class ProtocolManagementClient(Protocol):
    """Authenticated client for one management controller.

    Concurrency Safety:
        Implementations must be coroutine-safe. The mutation core serialises
        mutations per endpoint, but reads from other collaborators may run
        concurrently against the same client.
    """

    async def get(self, url: str) -> ModelServiceResponse:
        """Issue a GET and return the response."""
        ...

    async def post(
        self, url: str, body: Optional[dict[str, Any]] = None
    ) -> ModelServiceResponse:
        """Issue a POST with a JSON body and return the response."""
        ...

    async def patch(
        self, url: str, body: Optional[dict[str, Any]] = None
    ) -> ModelServiceResponse:
        """Issue a PATCH with a JSON body and return the response."""
        ...

    async def delete(
        self, url: str, body: Optional[dict[str, Any]] = None
    ) -> ModelServiceResponse:
        """Issue a DELETE and return the response."""
        ...

    async def get_operation_apply_time_values(
        self, uri: str
    ) -> frozenset[EnumApplyTimePolicy]:
        """Return the apply times the sub-resource at ``uri`` advertises."""
        ...

    async def get_power_state(self, system_uri: str) -> EnumPowerState:
        """Return the power state of the ComputerSystem at ``system_uri``."""
        ...

    async def set_power_state(
        self, system_uri: str, reset_type: EnumResetType
    ) -> bool:
        """Request a reset of the ComputerSystem; return True when accepted."""
        ...
