"""Room validators.

Minimum room sizes follow common US residential guidance. Room areas are
kept in square inches and converted to square feet for the check.
"""

from __future__ import annotations

from floorplan_engine.models.geometry import polygon_area, vertex_centroid
from floorplan_engine.models.objects import PlanObject
from floorplan_engine.models.rooms import RoomBoundary
from floorplan_engine.validators.issues import (
    IssueCategory,
    IssueKind,
    Severity,
    ValidationIssue,
)

SQ_INCHES_PER_SQ_FOOT = 144.0

# Minimum room areas by type (sq ft). Matched against the room's name.
MIN_ROOM_AREAS: dict[str, float] = {
    "bedroom": 70.0,
    "bathroom": 30.0,
    "kitchen": 70.0,
    "living room": 120.0,
    "dining room": 100.0,
}


def match_room_type(name: str) -> str | None:
    """First room type whose name occurs in ``name``.

    Case-insensitive, spaces ignored on both sides, so "Living Room" and
    "livingroom" both match "living room". Names containing several types
    (e.g. "Kitchen / Dining Room") take the first in table order.
    """
    haystack = name.lower().replace(" ", "")
    return next(
        (room_type for room_type in MIN_ROOM_AREAS if room_type.replace(" ", "") in haystack),
        None,
    )


def room_area_sq_ft(room: RoomBoundary) -> float:
    area = room.attributes.area or polygon_area(room.points)
    return area / SQ_INCHES_PER_SQ_FOOT


def check_room_sizes(
    objects: list[PlanObject],
    rooms: list[RoomBoundary],
) -> list[ValidationIssue]:
    """Closed rooms of a known type must meet the minimum area."""
    issues: list[ValidationIssue] = []

    for room in rooms:
        if not room.closed:
            continue
        room_type = match_room_type(room.name)
        if room_type is None:
            continue

        minimum = MIN_ROOM_AREAS[room_type]
        area = room_area_sq_ft(room)
        if area < minimum:
            issues.append(
                ValidationIssue(
                    id=f"room-too-small-{room.id}",
                    kind=IssueKind.WARNING,
                    category=IssueCategory.ARCHITECTURE,
                    title="Room Below Minimum Size",
                    description=(
                        f"{room.name} ({round(area)} sq ft) is below minimum "
                        f"recommended size ({minimum:g} sq ft)"
                    ),
                    severity=Severity.MEDIUM,
                    related_object_ids=[room.id],
                    position=vertex_centroid(room.points),
                    suggestion=f"Expand room to at least {minimum:g} sq ft",
                )
            )

    return issues
