# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Redfish Management Client - httpx async implementation.

Implements ProtocolManagementClient for one controller endpoint: the four raw
verbs plus the typed helpers the mutation core consumes (advertised apply
times, power state read, host reset).

Raw verbs return every HTTP status to the caller; only transport failures
raise. Typed helpers raise UnexpectedResponseError on error statuses or
unusable bodies. Nothing is retried at this layer.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional
from uuid import uuid4

import httpx

from redfish_infra.enums import EnumApplyTimePolicy, EnumPowerState, EnumResetType
from redfish_infra.errors import (
    ModelMutationErrorContext,
    ProtocolConfigurationError,
    TransportError,
    UnexpectedResponseError,
)
from redfish_infra.handlers.model_redfish_client_config import (
    ModelRedfishClientConfig,
)
from redfish_infra.models import ModelServiceResponse

logger = logging.getLogger(__name__)

_APPLY_TIME_ANNOTATION: str = "@Redfish.OperationApplyTimeSupport"
_RESET_ACTION: str = "Actions/ComputerSystem.Reset"
_RESET_ACCEPTED_STATUSES: frozenset[int] = frozenset({200, 202, 204})


class HandlerRedfishClient:
    """Async management API client for one controller.

    Usage:
        ```python
        config = ModelRedfishClientConfig(endpoint="https://bmc-01.example.com")
        async with HandlerRedfishClient(config) as client:
            state = await client.get_power_state("/redfish/v1/Systems/System.Embedded.1")
        ```

    Relative URIs (every ``@odata.id`` and most ``Location`` headers) are
    resolved against the configured endpoint.
    """

    def __init__(
        self,
        config: ModelRedfishClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Create the client in uninitialized state.

        Args:
            config: Endpoint, credentials, TLS and timeout settings
            transport: Optional httpx transport override (tests use MockTransport)
        """
        self._config = config
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def endpoint(self) -> str:
        return self._config.endpoint

    @property
    def is_initialized(self) -> bool:
        return self._client is not None

    async def initialize(self) -> None:
        """Create the underlying httpx client."""
        if self._client is not None:
            return
        auth: Optional[httpx.BasicAuth] = None
        if self._config.username is not None:
            password = (
                self._config.password.get_secret_value()
                if self._config.password is not None
                else ""
            )
            auth = httpx.BasicAuth(self._config.username, password)

        self._client = httpx.AsyncClient(
            base_url=self._config.endpoint,
            auth=auth,
            verify=self._config.verify_ssl,
            timeout=httpx.Timeout(self._config.timeout_seconds),
            headers={"Accept": "application/json"},
            transport=self._transport,
        )
        logger.info(
            "HandlerRedfishClient initialized",
            extra={
                "endpoint": self._config.endpoint,
                "verify_ssl": self._config.verify_ssl,
                "timeout_seconds": self._config.timeout_seconds,
            },
        )

    async def shutdown(self) -> None:
        """Close the HTTP client and release connections."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        logger.info(
            "HandlerRedfishClient shutdown complete",
            extra={"endpoint": self._config.endpoint},
        )

    async def __aenter__(self) -> HandlerRedfishClient:
        await self.initialize()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.shutdown()

    # -- raw verbs ---------------------------------------------------------

    async def get(self, url: str) -> ModelServiceResponse:
        return await self._request("GET", url)

    async def post(
        self, url: str, body: Optional[dict[str, Any]] = None
    ) -> ModelServiceResponse:
        return await self._request("POST", url, body)

    async def patch(
        self, url: str, body: Optional[dict[str, Any]] = None
    ) -> ModelServiceResponse:
        return await self._request("PATCH", url, body)

    async def delete(
        self, url: str, body: Optional[dict[str, Any]] = None
    ) -> ModelServiceResponse:
        return await self._request("DELETE", url, body)

    # -- typed helpers -----------------------------------------------------

    async def get_operation_apply_time_values(
        self, uri: str
    ) -> frozenset[EnumApplyTimePolicy]:
        """Read ``@Redfish.OperationApplyTimeSupport.SupportedValues`` from ``uri``.

        Values outside EnumApplyTimePolicy are ignored. A resource without the
        annotation advertises nothing.
        """
        response = await self._expect_success(uri, "get_operation_apply_time_values")
        support = response.json_object().get(_APPLY_TIME_ANNOTATION)
        raw_values = support.get("SupportedValues") if isinstance(support, dict) else None
        if not isinstance(raw_values, list):
            logger.debug(
                "Resource advertises no operation apply times",
                extra={"endpoint": self._config.endpoint, "uri": uri},
            )
            return frozenset()

        supported: set[EnumApplyTimePolicy] = set()
        for raw in raw_values:
            try:
                supported.add(EnumApplyTimePolicy(raw))
            except ValueError:
                logger.debug(
                    "Ignoring unsupported apply time value",
                    extra={"endpoint": self._config.endpoint, "uri": uri, "value": raw},
                )
        return frozenset(supported)

    async def get_power_state(self, system_uri: str) -> EnumPowerState:
        """Read ``PowerState`` from the ComputerSystem at ``system_uri``."""
        response = await self._expect_success(system_uri, "get_power_state")
        raw = response.json_object().get("PowerState")
        try:
            return EnumPowerState(raw)
        except ValueError as e:
            raise UnexpectedResponseError(
                f"ComputerSystem {system_uri} reported unknown power state {raw!r}",
                context=self._context("get_power_state", system_uri),
                power_state=raw,
            ) from e

    async def set_power_state(
        self, system_uri: str, reset_type: EnumResetType
    ) -> bool:
        """POST ``ComputerSystem.Reset``; True when the controller accepts it."""
        action_uri = f"{system_uri.rstrip('/')}/{_RESET_ACTION}"
        response = await self.post(action_uri, {"ResetType": reset_type.value})
        accepted = response.status_code in _RESET_ACCEPTED_STATUSES
        if not accepted:
            logger.warning(
                "Controller refused host reset",
                extra={
                    "endpoint": self._config.endpoint,
                    "system_uri": system_uri,
                    "reset_type": reset_type.value,
                    "status_code": response.status_code,
                    "controller_message": response.error_message(),
                },
            )
        return accepted

    # -- internals ---------------------------------------------------------

    def _context(self, operation: str, target: str) -> ModelMutationErrorContext:
        return ModelMutationErrorContext(
            endpoint=self._config.endpoint,
            operation=operation,
            target_name=target,
        )

    async def _expect_success(self, uri: str, operation: str) -> ModelServiceResponse:
        response = await self.get(uri)
        if not response.is_success:
            raise UnexpectedResponseError(
                f"GET {uri} returned HTTP {response.status_code}",
                context=self._context(operation, uri),
                status_code=response.status_code,
                controller_message=response.error_message(),
            )
        return response

    async def _request(
        self,
        method: str,
        url: str,
        body: Optional[dict[str, Any]] = None,
    ) -> ModelServiceResponse:
        ctx = self._context(f"http.{method.lower()}", url)
        if self._client is None:
            raise ProtocolConfigurationError(
                "HandlerRedfishClient not initialized. Call initialize() first.",
                context=ctx.model_copy(update={"correlation_id": uuid4()}),
            )

        try:
            response = await self._client.request(method, url, json=body)
        except httpx.TimeoutException as e:
            raise TransportError(
                f"HTTP {method} {url} timed out after {self._config.timeout_seconds}s",
                context=ctx,
                timeout_seconds=self._config.timeout_seconds,
            ) from e
        except httpx.ConnectError as e:
            raise TransportError(
                f"Failed to connect to {self._config.endpoint}", context=ctx
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(
                f"HTTP error during {method} {url}: {type(e).__name__}", context=ctx
            ) from e

        logger.debug(
            "Controller response received",
            extra={
                "endpoint": self._config.endpoint,
                "method": method,
                "url": url,
                "status_code": response.status_code,
            },
        )
        return ModelServiceResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=_decode_body(response),
        )


def _decode_body(response: httpx.Response) -> object:
    """Decode a response body: JSON when declared, text otherwise, None when empty."""
    if not response.content:
        return None
    try:
        text = response.content.decode("utf-8")
    except UnicodeDecodeError:
        text = response.content.decode("latin-1")

    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return text
    return text


__all__: list[str] = ["HandlerRedfishClient"]
