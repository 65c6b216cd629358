"""Identifier generation for engine-owned entities.

Rooms, section lines and guides get a readable prefix plus a 22-character
IFC-style compressed GUID, so ids stay stable if a collaborator later
exports the plan to IFC.
"""

from __future__ import annotations

import uuid

import ifcopenshell.guid


def generate_id(prefix: str) -> str:
    """Generate a new id such as ``room-2VkBZ3c6L0Fhg7LmwhtzYh``."""
    return f"{prefix}-{ifcopenshell.guid.compress(uuid.uuid4().hex)}"


def is_valid_id(value: str, prefix: str) -> bool:
    """Check that ``value`` looks like an id produced by :func:`generate_id`."""
    if not isinstance(value, str) or not value.startswith(f"{prefix}-"):
        return False
    return len(value) == len(prefix) + 1 + 22
