# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Management API response model."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ModelServiceResponse(BaseModel):
    """Status code, headers and decoded body of one management API call.

    Header names are stored lower-cased; use ``header()`` for lookups.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    status_code: int = Field(ge=100, le=599)
    headers: dict[str, str] = Field(default_factory=dict)
    body: Any = None

    @field_validator("headers")
    @classmethod
    def _lower_header_names(cls, value: dict[str, str]) -> dict[str, str]:
        return {name.lower(): header for name, header in value.items()}

    def header(self, name: str) -> Optional[str]:
        """Return a header value by case-insensitive name."""
        return self.headers.get(name.lower())

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def json_object(self) -> dict[str, Any]:
        """Return the body when it is a JSON object, else an empty dict."""
        return self.body if isinstance(self.body, dict) else {}

    def error_message(self) -> Optional[str]:
        """Extract the Redfish ``error.message`` (or first extended message)."""
        error = self.json_object().get("error")
        if not isinstance(error, dict):
            return None
        message = error.get("message")
        extended = error.get("@Message.ExtendedInfo")
        if isinstance(extended, list) and extended:
            first = extended[0]
            if isinstance(first, dict) and isinstance(first.get("Message"), str):
                return first["Message"]
        return message if isinstance(message, str) else None


__all__ = ["ModelServiceResponse"]
