# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mutation Error Classes.

This module defines the error taxonomy of the mutation core. All error
classes extend ModelOnexError (from omnibase_core). Every error aborts the
current mutation and is surfaced to the caller unchanged; none is retried
and none triggers a rollback on the controller.

Error Hierarchy:
    ModelOnexError (from omnibase_core)
    └── MutationError (base mutation error)
        ├── ProtocolConfigurationError
        ├── CapabilityUnsupportedError
        ├── SubmissionRejectedError
        ├── MissingJobLocationError
        ├── TransportError
        ├── UnexpectedResponseError
        ├── ResetRejectedError
        ├── ResetTimeoutError
        ├── JobFailedError
        ├── JobTimedOutError
        ├── EntityNotFoundError
        ├── AmbiguousMatchError
        └── MutationCancelledError

All errors:
    - Extend ModelOnexError from omnibase_core
    - Use EnumCoreErrorCode for error classification
    - Carry an EnumMutationErrorCode (``mutation_code``) that tells apart
      failures sharing a core code, e.g. RESET_TIMEOUT and JOB_TIMED_OUT
    - Support proper error chaining with `raise ... from e`
    - Include structured context (endpoint, phase, resource) for debugging
    - Support correlation IDs for request tracking
    - Accept ModelMutationErrorContext for bundled context parameters
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from omnibase_core.enums.enum_core_error_code import EnumCoreErrorCode
from omnibase_core.models.errors.model_onex_error import ModelOnexError

from redfish_infra.enums import EnumMutationErrorCode, EnumMutationPhase
from redfish_infra.errors.model_mutation_error_context import (
    ModelMutationErrorContext,
)


class MutationError(ModelOnexError):
    """Base error class for mutation orchestration failures.

    Structured Fields (via ModelMutationErrorContext):
        endpoint: Controller endpoint identity
        phase: Mutation phase in which the failure happened
        operation: Operation being performed
        target_name: Resource identifier (URI, job id, entity name)
        correlation_id: Mutation correlation ID

    The fields land in ``error.model.context`` together with any extra
    keyword context and the ``mutation_code``.

    Example:
        >>> context = ModelMutationErrorContext(
        ...     endpoint="https://bmc-01.example.com",
        ...     phase=EnumMutationPhase.SUBMISSION,
        ...     operation="submit",
        ... )
        >>> raise MutationError("Operation failed", context=context, status_code=500)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumCoreErrorCode] = None,
        context: Optional[ModelMutationErrorContext] = None,
        mutation_code: Optional[EnumMutationErrorCode] = None,
        **extra_context: object,
    ) -> None:
        """Initialize MutationError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Core error code (defaults to OPERATION_FAILED)
            context: Bundled mutation context (endpoint, phase, operation, etc.)
            mutation_code: Mutation error code (defaults to OPERATION_FAILED)
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id: Optional[UUID] = None
        if context is not None:
            if context.endpoint is not None:
                structured_context["endpoint"] = context.endpoint
            if context.phase is not None:
                structured_context["phase"] = context.phase
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            correlation_id = context.correlation_id

        self.mutation_code = mutation_code or EnumMutationErrorCode.OPERATION_FAILED
        structured_context["mutation_code"] = self.mutation_code
        self._mutation_message = message
        self._core_code = error_code or EnumCoreErrorCode.OPERATION_FAILED
        self._structured_context = structured_context
        self._bound_correlation_id = correlation_id

        super().__init__(
            message=message,
            error_code=self._core_code,
            correlation_id=correlation_id,
            **structured_context,
        )

    def bind(
        self,
        *,
        endpoint: str,
        phase: EnumMutationPhase,
        correlation_id: UUID,
        job_id: Optional[str] = None,
    ) -> None:
        """Fill in context a lower layer (e.g. the transport) could not know.

        Fields already present are kept. The error model is rebuilt so that
        ``error.model`` reflects the merged context.
        """
        context = self._structured_context
        context.setdefault("endpoint", endpoint)
        context.setdefault("phase", phase)
        if job_id is not None:
            context.setdefault("job_id", job_id)
        if self._bound_correlation_id is None:
            self._bound_correlation_id = correlation_id

        ModelOnexError.__init__(
            self,
            message=self._mutation_message,
            error_code=self._core_code,
            correlation_id=self._bound_correlation_id,
            **context,
        )



class ProtocolConfigurationError(MutationError):
    """Raised when a mutation request or configuration value is invalid.

    Used before any request is issued: missing system URI for an OnReset
    mutation, unparseable environment values, an endpoint mismatch between
    a locked session and a request.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelMutationErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.INVALID_CONFIGURATION,
            context=context,
            mutation_code=EnumMutationErrorCode.INVALID_CONFIGURATION,
            **extra_context,
        )


class CapabilityUnsupportedError(MutationError):
    """Raised when the controller does not advertise the requested apply time.

    No mutation request is issued when this error is raised.

    Example:
        >>> raise CapabilityUnsupportedError(
        ...     "Storage controller RAID.Integrated.1-1 does not support apply time OnReset",
        ...     context=context,
        ...     controller="/redfish/v1/Systems/1/Storage/RAID.Integrated.1-1/Volumes",
        ...     apply_time="OnReset",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelMutationErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.INVALID_PARAMETER,
            context=context,
            mutation_code=EnumMutationErrorCode.CAPABILITY_UNSUPPORTED,
            **extra_context,
        )


class SubmissionRejectedError(MutationError):
    """Raised when a mutation submission is not answered with 202 Accepted."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelMutationErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.OPERATION_FAILED,
            context=context,
            mutation_code=EnumMutationErrorCode.SUBMISSION_REJECTED,
            **extra_context,
        )


class MissingJobLocationError(MutationError):
    """Raised when a 202 Accepted response carries no Location header."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelMutationErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.CONTRACT_VIOLATION,
            context=context,
            mutation_code=EnumMutationErrorCode.MISSING_JOB_LOCATION,
            **extra_context,
        )


class TransportError(MutationError):
    """Raised when a request to the controller fails at the transport level.

    Used for connection failures, request timeouts and protocol errors raised
    by the HTTP client. The response, if any, was never received.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelMutationErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.NETWORK_ERROR,
            context=context,
            mutation_code=EnumMutationErrorCode.TRANSPORT_ERROR,
            **extra_context,
        )


class UnexpectedResponseError(MutationError):
    """Raised when a read or query returns a status or body that cannot be used."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelMutationErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.CONTRACT_VIOLATION,
            context=context,
            mutation_code=EnumMutationErrorCode.UNEXPECTED_RESPONSE,
            **extra_context,
        )


class ResetRejectedError(MutationError):
    """Raised when the controller refuses a host reset request.

    The job submitted before the reset is left outstanding on the controller.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelMutationErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.OPERATION_FAILED,
            context=context,
            mutation_code=EnumMutationErrorCode.RESET_REJECTED,
            **extra_context,
        )


class ResetTimeoutError(MutationError):
    """Raised when the host does not report the expected power state in time.

    The job submitted before the reset is left outstanding on the controller.

    Example:
        >>> raise ResetTimeoutError(
        ...     "Host did not power on within 120s",
        ...     context=context,
        ...     reset_timeout_seconds=120,
        ...     job_id="/redfish/v1/TaskService/Tasks/JID_1",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelMutationErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.TIMEOUT_ERROR,
            context=context,
            mutation_code=EnumMutationErrorCode.RESET_TIMEOUT,
            **extra_context,
        )


class JobFailedError(MutationError):
    """Raised when the controller reports that a job failed.

    The controller's failure message is kept verbatim in ``controller_message``.
    The remote change may be partially applied.
    """

    def __init__(
        self,
        message: str,
        controller_message: Optional[str] = None,
        context: Optional[ModelMutationErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.EXECUTION_ERROR,
            context=context,
            mutation_code=EnumMutationErrorCode.JOB_FAILED,
            controller_message=controller_message,
            **extra_context,
        )
        self.controller_message = controller_message


class JobTimedOutError(MutationError):
    """Raised when a job is still running after its timeout elapsed."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelMutationErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.TIMEOUT_ERROR,
            context=context,
            mutation_code=EnumMutationErrorCode.JOB_TIMED_OUT,
            **extra_context,
        )


class EntityNotFoundError(MutationError):
    """Raised when no entity in a collection matches the requested key."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelMutationErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.RESOURCE_NOT_FOUND,
            context=context,
            mutation_code=EnumMutationErrorCode.ENTITY_NOT_FOUND,
            **extra_context,
        )


class AmbiguousMatchError(MutationError):
    """Raised when more than one entity in a collection matches the requested key."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelMutationErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.INVALID_STATE,
            context=context,
            mutation_code=EnumMutationErrorCode.AMBIGUOUS_MATCH,
            **extra_context,
        )


class MutationCancelledError(MutationError):
    """Raised when a mutation observes its cancel event between polls."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelMutationErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.OPERATION_FAILED,
            context=context,
            mutation_code=EnumMutationErrorCode.CANCELLED,
            **extra_context,
        )


__all__ = [
    "AmbiguousMatchError",
    "CapabilityUnsupportedError",
    "EntityNotFoundError",
    "JobFailedError",
    "JobTimedOutError",
    "MissingJobLocationError",
    "MutationCancelledError",
    "MutationError",
    "ProtocolConfigurationError",
    "ResetRejectedError",
    "ResetTimeoutError",
    "SubmissionRejectedError",
    "TransportError",
    "UnexpectedResponseError",
]
