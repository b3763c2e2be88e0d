# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Storage volume collaborator."""

from redfish_infra.services.storage_volume.model_storage_volume import (
    ModelStorageVolumeSettings,
    ModelStorageVolumeSpec,
    ModelStorageVolumeState,
)
from redfish_infra.services.storage_volume.service_storage_volume import (
    ServiceStorageVolume,
    build_create_volume_body,
    build_update_volume_body,
    parent_collection,
)

__all__ = [
    "ModelStorageVolumeSettings",
    "ModelStorageVolumeSpec",
    "ModelStorageVolumeState",
    "ServiceStorageVolume",
    "build_create_volume_body",
    "build_update_volume_body",
    "parent_collection",
]
