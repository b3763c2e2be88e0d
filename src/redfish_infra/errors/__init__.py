# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Redfish Mutation Errors Module.

This module provides the error classes raised by the mutation core.

Exports:
    ModelMutationErrorContext: Configuration model for bundled error context
    MutationError: Base mutation error class
    ProtocolConfigurationError: Invalid request or configuration
    CapabilityUnsupportedError: Apply time not advertised by the controller
    SubmissionRejectedError: Submission not answered with 202 Accepted
    MissingJobLocationError: 202 Accepted without a Location header
    TransportError: Connection failure, request timeout, protocol error
    UnexpectedResponseError: Unusable status or body on a read/query
    ResetRejectedError: Controller refused the host reset
    ResetTimeoutError: Host did not reach the expected power state in time
    JobFailedError: Controller reported job failure (message kept verbatim)
    JobTimedOutError: Job still running when its timeout elapsed
    EntityNotFoundError: No entity matched the requested key
    AmbiguousMatchError: More than one entity matched the requested key
    MutationCancelledError: Cancel event observed between polls

Propagation Policy:
    Every error aborts the current mutation immediately. None is retried by
    the core and none triggers a rollback: on JobFailedError or
    JobTimedOutError the remote change may already be partially applied.
    Errors are scoped to one mutation; the endpoint lock is always released.

Correlation ID Assignment:
    - Propagate ModelMutationRequest.correlation_id into every error context
    - If the caller did not supply one, a uuid4() is generated per mutation

    Example::

        from redfish_infra.enums import EnumMutationPhase
        from redfish_infra.errors import ModelMutationErrorContext, TransportError

        context = ModelMutationErrorContext(
            endpoint=request.endpoint,
            phase=EnumMutationPhase.SUBMISSION,
            operation="submit",
            target_name=request.target_url,
            correlation_id=request.correlation_id,
        )
        raise TransportError("Failed to reach controller", context=context) from e

Error Sanitization Guidelines:
    NEVER include credentials, session tokens or request bodies carrying
    secrets (user account passwords) in messages or context. Endpoint
    hostnames, resource URIs, job ids, status codes and timeout values are
    safe to include.
"""

from redfish_infra.errors.model_mutation_error_context import (
    ModelMutationErrorContext,
)
from redfish_infra.errors.mutation_errors import (
    AmbiguousMatchError,
    CapabilityUnsupportedError,
    EntityNotFoundError,
    JobFailedError,
    JobTimedOutError,
    MissingJobLocationError,
    MutationCancelledError,
    MutationError,
    ProtocolConfigurationError,
    ResetRejectedError,
    ResetTimeoutError,
    SubmissionRejectedError,
    TransportError,
    UnexpectedResponseError,
)

__all__: list[str] = [
    "AmbiguousMatchError",
    "CapabilityUnsupportedError",
    "EntityNotFoundError",
    "JobFailedError",
    "JobTimedOutError",
    "MissingJobLocationError",
    "ModelMutationErrorContext",
    "MutationCancelledError",
    "MutationError",
    "ProtocolConfigurationError",
    "ResetRejectedError",
    "ResetTimeoutError",
    "SubmissionRejectedError",
    "TransportError",
    "UnexpectedResponseError",
]
