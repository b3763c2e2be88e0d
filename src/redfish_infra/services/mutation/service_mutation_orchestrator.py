# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mutation Orchestrator.

Drives one mutation from submission to convergence against one controller
endpoint. This is the single operation exposed to resource collaborators.

Flow (all bracketed by the endpoint lock):
    1. Capability check: the requested apply time must be advertised
    2. Submission: exactly one request, 202 + Location gives the job handle
    3. Power reset: only for OnReset mutations
    4. Job poll: until Completed, Failed or timed out
    5. Entity resolution: only when the request asks for it

Every error aborts the mutation at the phase it occurred in, carries
endpoint/phase/resource context and propagates unchanged. Nothing is retried
and nothing is rolled back. The endpoint lock is released on every path.

Known Gap:
    When the reset of an OnReset mutation fails or times out, the job
    submitted in step 2 is left outstanding on the controller. The error
    carries its job id and a warning is logged; no cleanup is attempted.

Usage:
    ```python
    orchestrator = ServiceMutationOrchestrator(client)
    result = await orchestrator.run_mutation(
        ModelMutationRequest(
            endpoint="https://bmc-01.example.com",
            target_url=f"{storage_uri}/Volumes",
            method=EnumMutationMethod.POST,
            body=volume_body,
            capability_uri=f"{storage_uri}/Volumes",
            resolve=ModelEntityMatch(
                collection_uri=f"{storage_uri}/Volumes", match_value="data01"
            ),
        )
    )
    result.entity.uri
    ```

    Collaborators that must serialise their own discovery reads with the
    mutation hold the lock themselves:

    ```python
    async with orchestrator.locked(endpoint) as session:
        storage = await discover(session.client)
        result = await session.run(build_request(storage))
    ```
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from redfish_infra.enums import EnumMutationPhase
from redfish_infra.errors import (
    ModelMutationErrorContext,
    MutationCancelledError,
    MutationError,
    ProtocolConfigurationError,
)
from redfish_infra.models import (
    ModelApplyOnReset,
    ModelEntityRef,
    ModelMutationRequest,
    ModelMutationResult,
)
from redfish_infra.protocols import ProtocolClock, ProtocolManagementClient
from redfish_infra.runtime import RegistryEndpointMutex, normalise_endpoint
from redfish_infra.services.mutation.service_capability_validator import (
    ServiceCapabilityValidator,
)
from redfish_infra.services.mutation.service_entity_resolver import (
    ServiceEntityResolver,
)
from redfish_infra.services.mutation.service_job_poller import ServiceJobPoller
from redfish_infra.services.mutation.service_mutation_submitter import (
    ServiceMutationSubmitter,
)
from redfish_infra.services.mutation.service_power_reset import ServicePowerReset
from redfish_infra.utils.util_clock import MonotonicClock

logger = logging.getLogger(__name__)


class MutationSession:
    """Handle on a held endpoint lock.

    Valid only inside the ``async with orchestrator.locked(...)`` block that
    produced it.
    """

    def __init__(self, orchestrator: ServiceMutationOrchestrator, endpoint: str) -> None:
        self._orchestrator = orchestrator
        self._endpoint = endpoint
        self._active = True

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def client(self) -> ProtocolManagementClient:
        return self._orchestrator.client

    async def run(
        self,
        request: ModelMutationRequest,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> ModelMutationResult:
        """Run a mutation under the already-held lock.

        Raises:
            ProtocolConfigurationError: If the session is closed or the
                request targets another endpoint.
        """
        if not self._active or request.endpoint != self._endpoint:
            context = ModelMutationErrorContext(
                endpoint=request.endpoint,
                operation="run_mutation",
                correlation_id=request.correlation_id,
            )
            reason = (
                "session is closed"
                if not self._active
                else f"session holds the lock for {self._endpoint}"
            )
            raise ProtocolConfigurationError(
                f"Cannot run mutation for {request.endpoint}: {reason}",
                context=context,
            )
        return await self._orchestrator._run_phases(request, cancel_event)

    def _close(self) -> None:
        self._active = False


class ServiceMutationOrchestrator:
    """Mutate-then-converge orchestration for one management client.

    Args:
        client: Management API client
        registry: Endpoint lock table; pass the same instance to every
            orchestrator that can reach the same controllers
        clock: Clock used by both poll loops
    """

    def __init__(
        self,
        client: ProtocolManagementClient,
        registry: Optional[RegistryEndpointMutex] = None,
        clock: Optional[ProtocolClock] = None,
    ) -> None:
        self._client = client
        self._registry = registry if registry is not None else RegistryEndpointMutex()
        self._clock = clock if clock is not None else MonotonicClock()
        self._validator = ServiceCapabilityValidator(client)
        self._submitter = ServiceMutationSubmitter(client, self._clock)
        self._power = ServicePowerReset(client, self._clock)
        self._poller = ServiceJobPoller(client, self._clock)
        self._resolver = ServiceEntityResolver(client)

    @property
    def client(self) -> ProtocolManagementClient:
        return self._client

    @property
    def registry(self) -> RegistryEndpointMutex:
        return self._registry

    @asynccontextmanager
    async def locked(self, endpoint: str) -> AsyncIterator[MutationSession]:
        """Hold the endpoint lock and yield a session bound to it."""
        async with self._registry.acquire(endpoint) as key:
            session = MutationSession(self, key)
            try:
                yield session
            finally:
                session._close()

    async def run_mutation(
        self,
        request: ModelMutationRequest,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> ModelMutationResult:
        """Run one mutation end to end under the endpoint lock.

        Args:
            request: What to submit, where, and how to converge
            cancel_event: Set externally to stop the mutation between polls

        Returns:
            Job id, completed job status, resolved entity (when requested)
            and elapsed time.

        Raises:
            CapabilityUnsupportedError: Apply time not advertised; nothing submitted.
            SubmissionRejectedError: Submission not answered with 202.
            MissingJobLocationError: 202 without a Location header.
            TransportError: A request could not reach the controller.
            ResetRejectedError: Reset refused; job left outstanding.
            ResetTimeoutError: Host not back On in time; job left outstanding.
            JobFailedError: Controller reported the job failed.
            JobTimedOutError: Job still running at its deadline.
            EntityNotFoundError: No collection member matched.
            AmbiguousMatchError: Several collection members matched.
            MutationCancelledError: cancel_event observed.
        """
        async with self.locked(request.endpoint) as session:
            return await session.run(request, cancel_event)

    async def _run_phases(
        self,
        request: ModelMutationRequest,
        cancel_event: Optional[asyncio.Event],
    ) -> ModelMutationResult:
        endpoint = normalise_endpoint(request.endpoint)
        correlation_id = request.correlation_id
        started = self._clock.monotonic()
        phase = EnumMutationPhase.CAPABILITY_CHECK
        job_id: Optional[str] = None

        logger.info(
            "Mutation started",
            extra={
                "endpoint": endpoint,
                "method": request.method.value,
                "target_url": request.target_url,
                "apply_time": request.apply_time.policy.value,
                "correlation_id": str(correlation_id),
            },
        )

        try:
            await self._validator.validate(
                request.apply_time.policy,
                request.capability_uri,
                endpoint=endpoint,
                correlation_id=correlation_id,
            )

            if cancel_event is not None and cancel_event.is_set():
                raise MutationCancelledError(
                    "Mutation cancelled before submission",
                    context=ModelMutationErrorContext(
                        endpoint=endpoint,
                        phase=phase,
                        operation="run_mutation",
                        target_name=request.target_url,
                        correlation_id=correlation_id,
                    ),
                )

            phase = EnumMutationPhase.SUBMISSION
            handle = await self._submitter.submit(
                request.method,
                request.target_url,
                request.body,
                poll_interval_seconds=request.job_poll_interval_seconds,
                timeout_seconds=request.job_timeout_seconds,
                endpoint=endpoint,
                correlation_id=correlation_id,
            )
            job_id = handle.job_id

            apply_time = request.apply_time
            if isinstance(apply_time, ModelApplyOnReset):
                phase = EnumMutationPhase.POWER_RESET
                try:
                    await self._power.reset(
                        request.system_uri or "",
                        apply_time.reset,
                        endpoint=endpoint,
                        job_id=job_id,
                        correlation_id=correlation_id,
                        cancel_event=cancel_event,
                    )
                except MutationError as e:
                    logger.warning(
                        "Host reset failed, job left outstanding on controller",
                        extra={
                            "endpoint": endpoint,
                            "job_id": job_id,
                            "error_code": e.mutation_code.value,
                            "correlation_id": str(correlation_id),
                        },
                    )
                    raise
                # The job budget starts once the host is back up.
                handle = handle.anchored_at(self._clock.monotonic())

            phase = EnumMutationPhase.JOB_POLL
            status = await self._poller.wait(
                handle,
                endpoint=endpoint,
                correlation_id=correlation_id,
                cancel_event=cancel_event,
            )

            entity: Optional[ModelEntityRef] = None
            if request.resolve is not None:
                phase = EnumMutationPhase.ENTITY_RESOLUTION
                entity = await self._resolver.resolve(
                    request.resolve,
                    endpoint=endpoint,
                    correlation_id=correlation_id,
                )
        except MutationError as e:
            e.bind(
                endpoint=endpoint,
                phase=phase,
                correlation_id=correlation_id,
                job_id=job_id,
            )
            logger.error(
                f"Mutation failed during {phase.value}: {e.message}",
                extra={
                    "endpoint": endpoint,
                    "phase": phase.value,
                    "error_code": e.mutation_code.value,
                    "job_id": job_id,
                    "correlation_id": str(correlation_id),
                },
            )
            raise

        elapsed = self._clock.monotonic() - started
        logger.info(
            "Mutation completed",
            extra={
                "endpoint": endpoint,
                "job_id": handle.job_id,
                "entity_uri": entity.uri if entity else None,
                "elapsed_seconds": round(elapsed, 3),
                "correlation_id": str(correlation_id),
            },
        )
        return ModelMutationResult(
            job_id=handle.job_id,
            job_status=status,
            entity=entity,
            elapsed_seconds=max(elapsed, 0.0),
            correlation_id=correlation_id,
        )


__all__ = ["MutationSession", "ServiceMutationOrchestrator"]
