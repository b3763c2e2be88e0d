# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mutation Submitter.

Issues the create/update/delete request and turns the controller's answer
into a job handle. A submission succeeds only when the controller answers
``202 Accepted`` with a ``Location`` header naming the job monitor.

Submission is attempted exactly once. Retrying is a caller decision.
"""

from __future__ import annotations

import logging
from typing import Any, Optional
from uuid import UUID

from redfish_infra.enums import EnumMutationMethod, EnumMutationPhase
from redfish_infra.errors import (
    MissingJobLocationError,
    ModelMutationErrorContext,
    SubmissionRejectedError,
)
from redfish_infra.models import ModelJobHandle, ModelServiceResponse
from redfish_infra.models.model_job_handle import (
    DEFAULT_JOB_POLL_INTERVAL_SECONDS,
    DEFAULT_JOB_TIMEOUT_SECONDS,
)
from redfish_infra.protocols import ProtocolClock, ProtocolManagementClient

logger = logging.getLogger(__name__)

_ACCEPTED: int = 202


class ServiceMutationSubmitter:
    """Submit a mutation and extract its job handle."""

    def __init__(self, client: ProtocolManagementClient, clock: ProtocolClock) -> None:
        self._client = client
        self._clock = clock

    async def submit(
        self,
        method: EnumMutationMethod,
        url: str,
        body: Optional[dict[str, Any]] = None,
        *,
        poll_interval_seconds: float = DEFAULT_JOB_POLL_INTERVAL_SECONDS,
        timeout_seconds: float = DEFAULT_JOB_TIMEOUT_SECONDS,
        endpoint: Optional[str] = None,
        correlation_id: Optional[UUID] = None,
    ) -> ModelJobHandle:
        """Issue the mutation request once.

        Args:
            method: POST, PATCH or DELETE
            url: Target URI
            body: Request body built by the resource collaborator
            poll_interval_seconds: Poll cadence recorded in the handle
            timeout_seconds: Job timeout recorded in the handle
            endpoint: Controller endpoint for error context
            correlation_id: Mutation correlation ID

        Returns:
            Job handle whose submitted_at is read right after acceptance.

        Raises:
            SubmissionRejectedError: If the status is anything but 202.
            MissingJobLocationError: If a 202 carries no Location header.
            TransportError: If the request cannot reach the controller.
        """
        context = ModelMutationErrorContext(
            endpoint=endpoint,
            phase=EnumMutationPhase.SUBMISSION,
            operation=f"submit.{method.value.lower()}",
            target_name=url,
            correlation_id=correlation_id,
        )

        response = await self._send(method, url, body)

        if response.status_code != _ACCEPTED:
            controller_message = response.error_message()
            detail = f": {controller_message}" if controller_message else ""
            raise SubmissionRejectedError(
                f"{method.value} {url} was answered with HTTP {response.status_code}, "
                f"expected 202 Accepted{detail}",
                context=context,
                status_code=response.status_code,
                controller_message=controller_message,
            )

        location = (response.header("Location") or "").strip()
        if not location:
            raise MissingJobLocationError(
                f"{method.value} {url} was accepted but carried no Location header",
                context=context,
                status_code=response.status_code,
            )

        handle = ModelJobHandle(
            job_id=location,
            submitted_at=self._clock.monotonic(),
            poll_interval_seconds=poll_interval_seconds,
            timeout_seconds=timeout_seconds,
        )
        logger.info(
            "Mutation accepted by controller",
            extra={
                "endpoint": endpoint,
                "method": method.value,
                "url": url,
                "job_id": handle.job_id,
                "correlation_id": str(correlation_id) if correlation_id else None,
            },
        )
        return handle

    async def _send(
        self,
        method: EnumMutationMethod,
        url: str,
        body: Optional[dict[str, Any]],
    ) -> ModelServiceResponse:
        if method is EnumMutationMethod.POST:
            return await self._client.post(url, body)
        if method is EnumMutationMethod.PATCH:
            return await self._client.patch(url, body)
        return await self._client.delete(url, body)


__all__ = ["ServiceMutationSubmitter"]
