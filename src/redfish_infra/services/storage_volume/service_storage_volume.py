# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Storage Volume Service.

Creates, updates, deletes and reads virtual disks on a storage controller by
building Redfish request bodies and handing them to the mutation
orchestrator. Discovery reads that precede a mutation (system, controller,
drives) run under the same endpoint lock as the mutation itself.

Request Shapes:
    create: POST   <storage>/Volumes          @Redfish.OperationApplyTime
    update: PATCH  <volume>/Settings          @Redfish.SettingsApplyTime.ApplyTime
    delete: DELETE <volume>

The apply time capability of create is read from ``<storage>/Volumes``; for
update and delete it is read from the volume's parent collection.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional
from uuid import UUID, uuid4

from redfish_infra.enums import (
    EnumApplyTimePolicy,
    EnumMutationMethod,
    EnumMutationPhase,
    EnumResetType,
)
from redfish_infra.errors import (
    ModelMutationErrorContext,
    UnexpectedResponseError,
)
from redfish_infra.models import (
    ApplyTime,
    ModelApplyImmediate,
    ModelApplyOnReset,
    ModelEntityMatch,
    ModelEntityRef,
    ModelMutationRequest,
    ModelMutationResult,
    ModelOrchestratorConfig,
    ModelResetRequest,
)
from redfish_infra.protocols import ProtocolManagementClient
from redfish_infra.runtime import normalise_endpoint
from redfish_infra.services.mutation.service_entity_resolver import (
    ServiceEntityResolver,
    resolve_entity,
)
from redfish_infra.services.mutation.service_mutation_orchestrator import (
    ServiceMutationOrchestrator,
)
from redfish_infra.services.storage_volume.model_storage_volume import (
    ModelStorageVolumeSettings,
    ModelStorageVolumeSpec,
    ModelStorageVolumeState,
)

logger = logging.getLogger(__name__)

SYSTEMS_URI: str = "/redfish/v1/Systems"
_NOT_FOUND: int = 404


def build_create_volume_body(
    spec: ModelStorageVolumeSpec,
    drive_uris: list[str],
    policy: EnumApplyTimePolicy,
) -> dict[str, Any]:
    """Build the POST body creating a volume on ``drive_uris``."""
    body: dict[str, Any] = {
        "VolumeType": spec.volume_type,
        "DisplayName": spec.volume_name,
        "Name": spec.volume_name,
        "ReadCachePolicy": spec.read_cache_policy,
        "WriteCachePolicy": spec.write_cache_policy,
        "Oem": {"Dell": {"DellVolume": {"DiskCachePolicy": spec.disk_cache_policy}}},
        "@Redfish.OperationApplyTime": policy.value,
        "Drives": [{"@odata.id": uri} for uri in drive_uris],
    }
    if spec.capacity_bytes is not None:
        body["CapacityBytes"] = spec.capacity_bytes
    if spec.optimum_io_size_bytes is not None:
        body["OptimumIOSizeBytes"] = spec.optimum_io_size_bytes
    return body


def build_update_volume_body(
    settings: ModelStorageVolumeSettings,
    policy: EnumApplyTimePolicy,
) -> dict[str, Any]:
    """Build the PATCH body applied to ``<volume>/Settings``."""
    return {
        "ReadCachePolicy": settings.read_cache_policy,
        "WriteCachePolicy": settings.write_cache_policy,
        "DisplayName": settings.volume_name,
        "Name": settings.volume_name,
        "Oem": {"Dell": {"DellVolume": {"DiskCachePolicy": settings.disk_cache_policy}}},
        "@Redfish.SettingsApplyTime": {"ApplyTime": policy.value},
    }


def parent_collection(uri: str) -> str:
    """Return the collection URI an entity URI belongs to."""
    parent = uri.rstrip("/").rsplit("/", 1)[0]
    if not parent:
        raise ValueError(f"{uri!r} has no parent collection")
    return parent


class ServiceStorageVolume:
    """Virtual disk lifecycle on a storage controller."""

    def __init__(
        self,
        orchestrator: ServiceMutationOrchestrator,
        config: Optional[ModelOrchestratorConfig] = None,
    ) -> None:
        self._orchestrator = orchestrator
        self._config = config if config is not None else ModelOrchestratorConfig()

    def apply_time(
        self,
        policy: EnumApplyTimePolicy = EnumApplyTimePolicy.IMMEDIATE,
        reset_type: EnumResetType = EnumResetType.FORCE_RESTART,
    ) -> ApplyTime:
        """Build an apply time variant using the configured reset defaults."""
        if policy is EnumApplyTimePolicy.IMMEDIATE:
            return ModelApplyImmediate()
        return ModelApplyOnReset(
            reset=ModelResetRequest(
                reset_type=reset_type,
                reset_timeout_seconds=self._config.reset_timeout_seconds,
                poll_interval_seconds=self._config.reset_poll_interval_seconds,
            )
        )

    async def create(
        self,
        endpoint: str,
        spec: ModelStorageVolumeSpec,
        apply_time: Optional[ApplyTime] = None,
        *,
        job_timeout_seconds: Optional[float] = None,
        correlation_id: Optional[UUID] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> ModelMutationResult:
        """Create a volume and return it resolved by name.

        Raises:
            EntityNotFoundError: Unknown controller or drive, or the created
                volume is not found by name after the job completes.
            AmbiguousMatchError: Several drives or volumes share a name.
            MutationError: Any error raised by the orchestrator.
        """
        apply_time = apply_time or ModelApplyImmediate()
        correlation_id = correlation_id or uuid4()

        async with self._orchestrator.locked(endpoint) as session:
            context = ModelMutationErrorContext(
                endpoint=session.endpoint,
                phase=EnumMutationPhase.READ,
                operation="discover_storage",
                target_name=spec.storage_controller_id,
                correlation_id=correlation_id,
            )
            system_uri = await self._first_system(session.client, context)
            storage = await self._storage_controller(
                session.client, system_uri, spec.storage_controller_id, context
            )
            drive_uris = await self._drive_uris(session.client, storage, spec.drives, context)

            volumes_uri = f"{storage.uri}/Volumes"
            request = ModelMutationRequest(
                endpoint=session.endpoint,
                target_url=volumes_uri,
                method=EnumMutationMethod.POST,
                body=build_create_volume_body(spec, drive_uris, apply_time.policy),
                capability_uri=volumes_uri,
                apply_time=apply_time,
                system_uri=system_uri,
                job_timeout_seconds=job_timeout_seconds or self._config.job_timeout_seconds,
                job_poll_interval_seconds=self._config.job_poll_interval_seconds,
                resolve=ModelEntityMatch(
                    collection_uri=volumes_uri, match_value=spec.volume_name
                ),
                correlation_id=correlation_id,
            )
            return await session.run(request, cancel_event)

    async def update(
        self,
        endpoint: str,
        volume_uri: str,
        settings: ModelStorageVolumeSettings,
        apply_time: Optional[ApplyTime] = None,
        *,
        job_timeout_seconds: Optional[float] = None,
        correlation_id: Optional[UUID] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> ModelMutationResult:
        """Change the cache policies and name of an existing volume."""
        apply_time = apply_time or ModelApplyImmediate()
        body = build_update_volume_body(settings, apply_time.policy)
        return await self._mutate_volume(
            endpoint,
            volume_uri,
            f"{volume_uri.rstrip('/')}/Settings",
            EnumMutationMethod.PATCH,
            body,
            apply_time,
            job_timeout_seconds=job_timeout_seconds,
            correlation_id=correlation_id,
            cancel_event=cancel_event,
        )

    async def delete(
        self,
        endpoint: str,
        volume_uri: str,
        apply_time: Optional[ApplyTime] = None,
        *,
        job_timeout_seconds: Optional[float] = None,
        correlation_id: Optional[UUID] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> ModelMutationResult:
        """Delete a volume."""
        return await self._mutate_volume(
            endpoint,
            volume_uri,
            volume_uri,
            EnumMutationMethod.DELETE,
            None,
            apply_time or ModelApplyImmediate(),
            job_timeout_seconds=job_timeout_seconds,
            correlation_id=correlation_id,
            cancel_event=cancel_event,
        )

    async def read(
        self,
        endpoint: str,
        volume_uri: str,
        client: Optional[ProtocolManagementClient] = None,
    ) -> Optional[ModelStorageVolumeState]:
        """Read a volume; None when the controller no longer has it.

        Reads run outside the endpoint lock. ``client`` defaults to the
        orchestrator's client.

        Raises:
            UnexpectedResponseError: For error statuses other than 404.
        """
        endpoint = normalise_endpoint(endpoint)
        client = client if client is not None else self._orchestrator.client
        response = await client.get(volume_uri)
        if response.status_code == _NOT_FOUND:
            logger.info(
                "Volume no longer exists",
                extra={"endpoint": endpoint, "volume_uri": volume_uri},
            )
            return None
        if not response.is_success:
            raise UnexpectedResponseError(
                f"GET {volume_uri} returned HTTP {response.status_code}",
                context=ModelMutationErrorContext(
                    endpoint=endpoint,
                    phase=EnumMutationPhase.READ,
                    operation="read_volume",
                    target_name=volume_uri,
                ),
                status_code=response.status_code,
                controller_message=response.error_message(),
            )
        return ModelStorageVolumeState.from_payload(volume_uri, response.json_object())

    async def _mutate_volume(
        self,
        endpoint: str,
        volume_uri: str,
        target_url: str,
        method: EnumMutationMethod,
        body: Optional[dict[str, Any]],
        apply_time: ApplyTime,
        *,
        job_timeout_seconds: Optional[float],
        correlation_id: Optional[UUID],
        cancel_event: Optional[asyncio.Event],
    ) -> ModelMutationResult:
        correlation_id = correlation_id or uuid4()
        async with self._orchestrator.locked(endpoint) as session:
            system_uri: Optional[str] = None
            if apply_time.policy is EnumApplyTimePolicy.ON_RESET:
                system_uri = await self._first_system(
                    session.client,
                    ModelMutationErrorContext(
                        endpoint=session.endpoint,
                        phase=EnumMutationPhase.READ,
                        operation="discover_system",
                        target_name=volume_uri,
                        correlation_id=correlation_id,
                    ),
                )
            request = ModelMutationRequest(
                endpoint=session.endpoint,
                target_url=target_url,
                method=method,
                body=body,
                capability_uri=parent_collection(volume_uri),
                apply_time=apply_time,
                system_uri=system_uri,
                job_timeout_seconds=job_timeout_seconds or self._config.job_timeout_seconds,
                job_poll_interval_seconds=self._config.job_poll_interval_seconds,
                correlation_id=correlation_id,
            )
            return await session.run(request, cancel_event)

    async def _first_system(
        self, client: ProtocolManagementClient, context: ModelMutationErrorContext
    ) -> str:
        collection = await _get_object(client, SYSTEMS_URI, context)
        members = collection.get("Members")
        if isinstance(members, list):
            for member in members:
                if isinstance(member, dict) and isinstance(member.get("@odata.id"), str):
                    return member["@odata.id"]
        raise UnexpectedResponseError(
            "Controller reports no ComputerSystem",
            context=context,
        )

    async def _storage_controller(
        self,
        client: ProtocolManagementClient,
        system_uri: str,
        controller_id: str,
        context: ModelMutationErrorContext,
    ) -> ModelEntityRef:
        system = await _get_object(client, system_uri, context)
        storage_link = system.get("Storage")
        storage_uri = (
            storage_link.get("@odata.id") if isinstance(storage_link, dict) else None
        )
        if not isinstance(storage_uri, str):
            storage_uri = f"{system_uri.rstrip('/')}/Storage"
        controllers = await ServiceEntityResolver(client).list_members(
            storage_uri, match_key="Id", context=context
        )
        return resolve_entity(controllers, controller_id, context)

    async def _drive_uris(
        self,
        client: ProtocolManagementClient,
        storage: ModelEntityRef,
        drive_names: list[str],
        context: ModelMutationErrorContext,
    ) -> list[str]:
        controller = await _get_object(client, storage.uri, context)
        links = controller.get("Drives")
        drives: list[ModelEntityRef] = []
        if isinstance(links, list):
            for link in links:
                uri = link.get("@odata.id") if isinstance(link, dict) else None
                if not isinstance(uri, str):
                    continue
                drive = await _get_object(client, uri, context)
                name = drive.get("Name")
                if isinstance(name, str):
                    drives.append(ModelEntityRef(uri=uri, name=name))
        return [resolve_entity(drives, name, context).uri for name in drive_names]


async def _get_object(
    client: ProtocolManagementClient, uri: str, context: ModelMutationErrorContext
) -> dict[str, Any]:
    response = await client.get(uri)
    if not response.is_success:
        raise UnexpectedResponseError(
            f"GET {uri} returned HTTP {response.status_code}",
            context=context,
            status_code=response.status_code,
            controller_message=response.error_message(),
        )
    return response.json_object()


__all__ = [
    "SYSTEMS_URI",
    "ServiceStorageVolume",
    "build_create_volume_body",
    "build_update_volume_body",
    "parent_collection",
]
