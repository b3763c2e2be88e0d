# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Storage Volume Models."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

VolumeType = Literal[
    "NonRedundant",
    "Mirrored",
    "StripedWithParity",
    "SpannedMirrors",
    "SpannedStripesWithParity",
]
ReadCachePolicy = Literal["ReadAhead", "AdaptiveReadAhead", "Off"]
WriteCachePolicy = Literal["WriteThrough", "ProtectedWriteBack", "UnprotectedWriteBack"]
DiskCachePolicy = Literal["Enabled", "Disabled"]


class ModelStorageVolumeSettings(BaseModel):
    """Volume settings that can be changed after creation.

    Attributes:
        volume_name: Display name, also used to resolve the created volume
        read_cache_policy: ReadAhead, AdaptiveReadAhead or Off
        write_cache_policy: WriteThrough, ProtectedWriteBack or UnprotectedWriteBack
        disk_cache_policy: Enabled or Disabled (Dell OEM)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    volume_name: str = Field(min_length=1, max_length=15)
    read_cache_policy: ReadCachePolicy = "Off"
    write_cache_policy: WriteCachePolicy = "UnprotectedWriteBack"
    disk_cache_policy: DiskCachePolicy = "Enabled"


class ModelStorageVolumeSpec(ModelStorageVolumeSettings):
    """Desired virtual disk on a storage controller.

    Attributes:
        storage_controller_id: Controller Id, e.g. "RAID.Integrated.1-1"
        volume_type: RAID level expressed as a Redfish VolumeType
        drives: Physical drive names the volume spans
        capacity_bytes: Volume size (at least 1 GB) or None for the maximum
        optimum_io_size_bytes: Stripe size hint
    """

    storage_controller_id: str = Field(min_length=1)
    volume_type: VolumeType
    drives: list[str] = Field(min_length=1)
    capacity_bytes: Optional[int] = Field(default=None, ge=1_000_000_000)
    optimum_io_size_bytes: Optional[int] = Field(default=None, gt=0)

    @field_validator("drives")
    @classmethod
    def _validate_drive_names(cls, value: list[str]) -> list[str]:
        if any(not name.strip() for name in value):
            raise ValueError("drive name cannot be blank")
        # Each name resolves to one drive; a repeat would list a drive twice.
        duplicates = sorted({name for name in value if value.count(name) > 1})
        if duplicates:
            raise ValueError(f"drive names must be unique, repeated: {duplicates}")
        return value


class ModelStorageVolumeState(BaseModel):
    """Volume as currently reported by the controller."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    uri: str
    name: Optional[str] = None
    volume_type: Optional[str] = None
    capacity_bytes: Optional[int] = None
    read_cache_policy: Optional[str] = None
    write_cache_policy: Optional[str] = None

    @classmethod
    def from_payload(cls, uri: str, payload: dict[str, Any]) -> ModelStorageVolumeState:
        capacity = payload.get("CapacityBytes")
        return cls(
            uri=uri,
            name=payload.get("Name"),
            volume_type=payload.get("VolumeType"),
            capacity_bytes=capacity if isinstance(capacity, int) else None,
            read_cache_policy=payload.get("ReadCachePolicy"),
            write_cache_policy=payload.get("WriteCachePolicy"),
        )


__all__ = [
    "ModelStorageVolumeSettings",
    "ModelStorageVolumeSpec",
    "ModelStorageVolumeState",
]
