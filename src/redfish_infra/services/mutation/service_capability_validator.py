# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Capability Validator.

Checks a requested apply time against the set the controller advertises for
the targeted sub-resource. Runs before submission: on failure no mutation
request is issued.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional
from uuid import UUID

from redfish_infra.enums import EnumApplyTimePolicy, EnumMutationPhase
from redfish_infra.errors import CapabilityUnsupportedError, ModelMutationErrorContext
from redfish_infra.protocols import ProtocolManagementClient

logger = logging.getLogger(__name__)


def is_apply_time_supported(
    policy: EnumApplyTimePolicy, supported: Iterable[EnumApplyTimePolicy]
) -> bool:
    """Return True if ``policy`` is a member of the advertised set."""
    return policy in frozenset(supported)


class ServiceCapabilityValidator:
    """Fail-fast apply time check against a controller sub-resource."""

    def __init__(self, client: ProtocolManagementClient) -> None:
        self._client = client

    async def validate(
        self,
        policy: EnumApplyTimePolicy,
        capability_uri: str,
        *,
        endpoint: Optional[str] = None,
        correlation_id: Optional[UUID] = None,
    ) -> frozenset[EnumApplyTimePolicy]:
        """Query the advertised apply times and check ``policy`` against them.

        Args:
            policy: Requested apply time
            capability_uri: Sub-resource advertising OperationApplyTimeSupport
            endpoint: Controller endpoint for error context
            correlation_id: Mutation correlation ID

        Returns:
            The advertised set.

        Raises:
            CapabilityUnsupportedError: If ``policy`` is not advertised.
            TransportError: If the capability query cannot reach the controller.
            UnexpectedResponseError: If the capability query is answered with an error.
        """
        supported = await self._client.get_operation_apply_time_values(capability_uri)

        if not is_apply_time_supported(policy, supported):
            context = ModelMutationErrorContext(
                endpoint=endpoint,
                phase=EnumMutationPhase.CAPABILITY_CHECK,
                operation="validate_apply_time",
                target_name=capability_uri,
                correlation_id=correlation_id,
            )
            raise CapabilityUnsupportedError(
                f"Controller {capability_uri} does not support apply time {policy.value}",
                context=context,
                controller=capability_uri,
                apply_time=policy.value,
                supported=sorted(value.value for value in supported),
            )

        logger.debug(
            "Apply time supported by controller",
            extra={
                "endpoint": endpoint,
                "controller": capability_uri,
                "apply_time": policy.value,
                "correlation_id": str(correlation_id) if correlation_id else None,
            },
        )
        return supported


__all__ = ["ServiceCapabilityValidator", "is_apply_time_supported"]
