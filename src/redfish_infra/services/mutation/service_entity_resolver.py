# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Entity Resolver.

Job completion does not return the identity the controller assigned to a new
entity. The resolver recovers it by scanning the parent collection for the
single member whose identifying attribute (the configured display name)
matches. Zero or several matches are hard failures: this layer never guesses.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Optional
from uuid import UUID

from redfish_infra.enums import EnumMutationPhase
from redfish_infra.errors import (
    AmbiguousMatchError,
    EntityNotFoundError,
    ModelMutationErrorContext,
    UnexpectedResponseError,
)
from redfish_infra.models import ModelEntityMatch, ModelEntityRef
from redfish_infra.protocols import ProtocolManagementClient

logger = logging.getLogger(__name__)


def resolve_entity(
    candidates: Sequence[ModelEntityRef],
    match_value: str,
    context: Optional[ModelMutationErrorContext] = None,
) -> ModelEntityRef:
    """Return the single candidate whose name equals ``match_value``.

    Raises:
        EntityNotFoundError: If no candidate matches.
        AmbiguousMatchError: If more than one candidate matches.
    """
    matches = [candidate for candidate in candidates if candidate.name == match_value]
    if not matches:
        raise EntityNotFoundError(
            f"No entity named {match_value!r} found",
            context=context,
            match_value=match_value,
            candidates=len(candidates),
        )
    if len(matches) > 1:
        raise AmbiguousMatchError(
            f"{len(matches)} entities named {match_value!r} found",
            context=context,
            match_value=match_value,
            matches=[match.uri for match in matches],
        )
    return matches[0]


class ServiceEntityResolver:
    """Fetch a collection and resolve one member by attribute."""

    def __init__(self, client: ProtocolManagementClient) -> None:
        self._client = client

    async def list_members(
        self,
        collection_uri: str,
        match_key: str = "Name",
        context: Optional[ModelMutationErrorContext] = None,
    ) -> list[ModelEntityRef]:
        """Return every member of the collection carrying ``match_key``.

        Expanded members are read in place; reference-only members are
        fetched one by one. Members without the attribute are skipped.

        Raises:
            UnexpectedResponseError: If the collection or a member cannot be read.
        """
        collection = await self._get_object(collection_uri, context)
        members = collection.get("Members")
        if not isinstance(members, list):
            members = []

        refs: list[ModelEntityRef] = []
        for member in members:
            if not isinstance(member, dict):
                continue
            uri = member.get("@odata.id")
            if not isinstance(uri, str) or not uri:
                continue
            if match_key not in member:
                member = await self._get_object(uri, context)
            value = member.get(match_key)
            if isinstance(value, str):
                refs.append(ModelEntityRef(uri=uri, name=value))
        return refs

    async def resolve(
        self,
        match: ModelEntityMatch,
        *,
        endpoint: Optional[str] = None,
        correlation_id: Optional[UUID] = None,
    ) -> ModelEntityRef:
        """Resolve the entity described by ``match``.

        Raises:
            EntityNotFoundError: If no member matches.
            AmbiguousMatchError: If several members match.
            UnexpectedResponseError: If the collection cannot be read.
        """
        context = ModelMutationErrorContext(
            endpoint=endpoint,
            phase=EnumMutationPhase.ENTITY_RESOLUTION,
            operation="resolve_entity",
            target_name=match.collection_uri,
            correlation_id=correlation_id,
        )
        candidates = await self.list_members(match.collection_uri, match.match_key, context)
        entity = resolve_entity(candidates, match.match_value, context)
        logger.info(
            "Resolved entity",
            extra={
                "endpoint": endpoint,
                "collection_uri": match.collection_uri,
                "match_value": match.match_value,
                "entity_uri": entity.uri,
            },
        )
        return entity

    async def _get_object(
        self, uri: str, context: Optional[ModelMutationErrorContext]
    ) -> dict[str, Any]:
        response = await self._client.get(uri)
        if not response.is_success:
            raise UnexpectedResponseError(
                f"GET {uri} returned HTTP {response.status_code}",
                context=context,
                status_code=response.status_code,
                controller_message=response.error_message(),
            )
        return response.json_object()


__all__ = ["ServiceEntityResolver", "resolve_entity"]
