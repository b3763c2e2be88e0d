# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Job Status Model.

Parses a job resource fetched from the job monitor URI. Two payload shapes
are recognised:

- Redfish Task: ``TaskState`` plus ``Messages[]`` and ``PercentComplete``
- Dell job: ``JobState`` plus ``Message`` and ``PercentComplete``
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from redfish_infra.enums import EnumJobState

_STATE_FIELDS: tuple[str, ...] = ("TaskState", "JobState")
_COMPLETED_STATES: frozenset[str] = frozenset({"Completed"})
_FAILED_STATES: frozenset[str] = frozenset(
    {"Exception", "Killed", "Cancelled", "Failed", "CompletedWithErrors"}
)


class ModelJobStatus(BaseModel):
    """Observed status of a controller job.

    Attributes:
        state: Normalised job state
        message: Controller message, kept verbatim
        raw_state: Status field value as reported by the controller
        percent_complete: Progress when the controller reports it
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    state: EnumJobState
    message: Optional[str] = None
    raw_state: Optional[str] = None
    percent_complete: Optional[int] = Field(default=None, ge=0, le=100)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Optional[ModelJobStatus]:
        """Build a status from a job payload.

        Returns:
            The parsed status, or None when the payload carries no recognised
            status field.
        """
        raw_state: Optional[str] = None
        for field in _STATE_FIELDS:
            value = payload.get(field)
            if isinstance(value, str) and value:
                raw_state = value
                break
        if raw_state is None:
            return None

        if raw_state in _COMPLETED_STATES:
            state = EnumJobState.COMPLETED
        elif raw_state in _FAILED_STATES:
            state = EnumJobState.FAILED
        else:
            state = EnumJobState.RUNNING

        percent = payload.get("PercentComplete")
        if not isinstance(percent, int) or isinstance(percent, bool):
            percent = None
        elif not 0 <= percent <= 100:
            percent = None

        return cls(
            state=state,
            message=_extract_message(payload),
            raw_state=raw_state,
            percent_complete=percent,
        )


def _extract_message(payload: dict[str, Any]) -> Optional[str]:
    message = payload.get("Message")
    if isinstance(message, str) and message:
        return message
    messages = payload.get("Messages")
    if isinstance(messages, list):
        for entry in messages:
            if isinstance(entry, dict) and isinstance(entry.get("Message"), str):
                return entry["Message"]
    return None


__all__ = ["ModelJobStatus"]
