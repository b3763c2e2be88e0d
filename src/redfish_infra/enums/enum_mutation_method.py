# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mutation HTTP Method Enumeration."""

from enum import Enum


class EnumMutationMethod(str, Enum):
    """HTTP methods used to submit a mutation.

    Attributes:
        POST: Create an entity in a collection
        PATCH: Update an existing entity (or its settings object)
        DELETE: Remove an entity
    """

    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


__all__ = ["EnumMutationMethod"]
