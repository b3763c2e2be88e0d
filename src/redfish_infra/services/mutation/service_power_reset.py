# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Power Reset Coordinator.

Drives a host reset for mutations staged with OnReset and waits for the host
to report power state On again.

Flow:
    1. Read the current power state. A host that is Off is powered On
       instead of restarted.
    2. Request the reset. A refused request raises ResetRejectedError.
    3. Sleep one interval, read the power state, repeat until it is On or
       the reset deadline passes (ResetTimeoutError).

The deadline is measured from the start of this phase and is independent of
the job timeout. A failed reset leaves the already-submitted job outstanding
on the controller; the error carries its job id.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional
from uuid import UUID

from redfish_infra.enums import EnumMutationPhase, EnumPowerState, EnumResetType
from redfish_infra.errors import (
    ModelMutationErrorContext,
    MutationCancelledError,
    ResetRejectedError,
    ResetTimeoutError,
)
from redfish_infra.models import ModelResetRequest
from redfish_infra.protocols import ProtocolClock, ProtocolManagementClient
from redfish_infra.utils.util_clock import sleep_or_cancel

logger = logging.getLogger(__name__)

_TARGET_POWER_STATE: EnumPowerState = EnumPowerState.ON


class ServicePowerReset:
    """Reset a host and wait for it to come back On."""

    def __init__(self, client: ProtocolManagementClient, clock: ProtocolClock) -> None:
        self._client = client
        self._clock = clock

    async def reset(
        self,
        system_uri: str,
        request: ModelResetRequest,
        *,
        endpoint: Optional[str] = None,
        job_id: Optional[str] = None,
        correlation_id: Optional[UUID] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> EnumPowerState:
        """Reset the host at ``system_uri`` and block until it reports On.

        Args:
            system_uri: ComputerSystem resource to reset
            request: Reset type, timeout and poll cadence
            endpoint: Controller endpoint for logs and error context
            job_id: Outstanding job, recorded in errors raised by this phase
            correlation_id: Mutation correlation ID
            cancel_event: Observed between polls

        Returns:
            The final power state (always On).

        Raises:
            ResetRejectedError: If the controller refuses the reset request.
            ResetTimeoutError: If the host is not On when the deadline passes.
            MutationCancelledError: If cancel_event is set between polls.
            TransportError: If a power request cannot reach the controller.
        """
        context = ModelMutationErrorContext(
            endpoint=endpoint,
            phase=EnumMutationPhase.POWER_RESET,
            operation="reset_host",
            target_name=system_uri,
            correlation_id=correlation_id,
        )
        deadline = self._clock.monotonic() + request.reset_timeout_seconds

        reset_type = request.reset_type
        current = await self._client.get_power_state(system_uri)
        if current is EnumPowerState.OFF:
            logger.info(
                "Host is powered off, powering on instead of restarting",
                extra={
                    "endpoint": endpoint,
                    "system_uri": system_uri,
                    "requested_reset_type": reset_type.value,
                },
            )
            reset_type = EnumResetType.ON

        accepted = await self._client.set_power_state(system_uri, reset_type)
        if not accepted:
            raise ResetRejectedError(
                f"Controller refused reset {reset_type.value} of {system_uri}",
                context=context,
                reset_type=reset_type.value,
                job_id=job_id,
            )
        logger.info(
            "Host reset requested",
            extra={
                "endpoint": endpoint,
                "system_uri": system_uri,
                "reset_type": reset_type.value,
                "reset_timeout_seconds": request.reset_timeout_seconds,
                "correlation_id": str(correlation_id) if correlation_id else None,
            },
        )

        last_state: Optional[EnumPowerState] = current
        while True:
            remaining = deadline - self._clock.monotonic()
            if remaining <= 0:
                raise ResetTimeoutError(
                    f"Host {system_uri} did not report power state "
                    f"{_TARGET_POWER_STATE.value} within {request.reset_timeout_seconds}s",
                    context=context,
                    reset_type=reset_type.value,
                    reset_timeout_seconds=request.reset_timeout_seconds,
                    last_power_state=last_state.value if last_state else None,
                    job_id=job_id,
                )

            cancelled = await sleep_or_cancel(
                self._clock,
                min(request.poll_interval_seconds, remaining),
                cancel_event,
            )
            if cancelled:
                raise MutationCancelledError(
                    f"Reset wait for {system_uri} cancelled",
                    context=context,
                    job_id=job_id,
                )

            last_state = await self._client.get_power_state(system_uri)
            logger.debug(
                "Polled host power state",
                extra={
                    "endpoint": endpoint,
                    "system_uri": system_uri,
                    "power_state": last_state.value,
                },
            )
            if last_state is _TARGET_POWER_STATE:
                return last_state


__all__ = ["ServicePowerReset"]
