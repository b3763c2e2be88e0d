# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Job Poller.

Polls a job monitor URI at a fixed interval until the job reaches a terminal
state or its timeout elapses.

State Machine:
    RUNNING -> COMPLETED: status field reports success; returned to the caller
    RUNNING -> FAILED: status field reports failure; JobFailedError carrying
        the controller message verbatim
    RUNNING -> TIMED_OUT: elapsed time since the handle was anchored reaches
        the job timeout after at least one poll; JobTimedOutError

Timing:
    Each iteration sleeps first, bounded by the time left before the
    deadline, then issues a single blocking GET. The first poll therefore
    happens one interval after the handle was anchored (submission, or the
    end of a host reset), and the loop ends no later than the deadline plus
    one GET. A handle whose deadline has already passed is still polled once
    without sleeping. There is no back-off.

Cancellation:
    The optional cancel event is raced against every sleep so a cancelled
    mutation stops without waiting out the interval. Task cancellation
    propagates as asyncio.CancelledError.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional
from uuid import UUID

from redfish_infra.enums import EnumJobState, EnumMutationPhase
from redfish_infra.errors import (
    JobFailedError,
    JobTimedOutError,
    ModelMutationErrorContext,
    MutationCancelledError,
)
from redfish_infra.models import ModelJobHandle, ModelJobStatus
from redfish_infra.protocols import ProtocolClock, ProtocolManagementClient
from redfish_infra.utils.util_clock import sleep_or_cancel

logger = logging.getLogger(__name__)

# Job monitors answer 202 while the job is still running.
_STILL_RUNNING: int = 202


class ServiceJobPoller:
    """Wait for a controller job to finish."""

    def __init__(self, client: ProtocolManagementClient, clock: ProtocolClock) -> None:
        self._client = client
        self._clock = clock

    async def wait(
        self,
        handle: ModelJobHandle,
        *,
        endpoint: Optional[str] = None,
        correlation_id: Optional[UUID] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> ModelJobStatus:
        """Poll ``handle`` until it completes.

        Returns:
            The Completed status.

        Raises:
            JobFailedError: If the job reports failure.
            JobTimedOutError: If the job is still running at its deadline.
            MutationCancelledError: If cancel_event is set between polls.
            TransportError: If a poll cannot reach the controller.
        """
        context = ModelMutationErrorContext(
            endpoint=endpoint,
            phase=EnumMutationPhase.JOB_POLL,
            operation="poll_job",
            target_name=handle.job_id,
            correlation_id=correlation_id,
        )
        polls = 0
        last_status: Optional[ModelJobStatus] = None

        while True:
            remaining = handle.deadline - self._clock.monotonic()
            if remaining <= 0 and polls > 0:
                raise JobTimedOutError(
                    f"Job {handle.job_id} did not finish within {handle.timeout_seconds}s",
                    context=context,
                    job_id=handle.job_id,
                    timeout_seconds=handle.timeout_seconds,
                    polls=polls,
                    last_state=last_status.raw_state if last_status else None,
                )
            # A job is always read at least once before it can time out.
            remaining = max(remaining, 0.0)

            cancelled = await sleep_or_cancel(
                self._clock,
                min(handle.poll_interval_seconds, remaining),
                cancel_event,
            )
            if cancelled:
                raise MutationCancelledError(
                    f"Polling of job {handle.job_id} cancelled",
                    context=context,
                    job_id=handle.job_id,
                    polls=polls,
                )

            last_status = await self.fetch_status(handle.job_id, context)
            polls += 1
            logger.debug(
                "Polled job status",
                extra={
                    "endpoint": endpoint,
                    "job_id": handle.job_id,
                    "job_state": last_status.state.value,
                    "raw_state": last_status.raw_state,
                    "percent_complete": last_status.percent_complete,
                    "poll": polls,
                },
            )

            if last_status.state is EnumJobState.COMPLETED:
                logger.info(
                    "Job completed",
                    extra={
                        "endpoint": endpoint,
                        "job_id": handle.job_id,
                        "polls": polls,
                        "elapsed_seconds": round(
                            self._clock.monotonic() - handle.submitted_at, 3
                        ),
                        "correlation_id": str(correlation_id) if correlation_id else None,
                    },
                )
                return last_status

            if last_status.state is EnumJobState.FAILED:
                raise JobFailedError(
                    f"Job {handle.job_id} failed: {last_status.message or last_status.raw_state}",
                    controller_message=last_status.message,
                    context=context,
                    job_id=handle.job_id,
                    raw_state=last_status.raw_state,
                )

    async def fetch_status(
        self, job_id: str, context: ModelMutationErrorContext
    ) -> ModelJobStatus:
        """Issue one GET on the job monitor and normalise the answer.

        A 202 answer means running. Other 2xx answers are parsed; a 2xx body
        without a recognised status field means the operation finished. Any
        other status is reported as a job failure.
        """
        response = await self._client.get(job_id)
        payload = response.json_object()

        if response.status_code == _STILL_RUNNING:
            return ModelJobStatus.from_payload(payload) or ModelJobStatus(
                state=EnumJobState.RUNNING
            )

        if response.is_success:
            return ModelJobStatus.from_payload(payload) or ModelJobStatus(
                state=EnumJobState.COMPLETED
            )

        controller_message = response.error_message()
        raise JobFailedError(
            f"Job {job_id} status request returned HTTP {response.status_code}"
            + (f": {controller_message}" if controller_message else ""),
            controller_message=controller_message,
            context=context,
            job_id=job_id,
            status_code=response.status_code,
        )


__all__ = ["ServiceJobPoller"]
