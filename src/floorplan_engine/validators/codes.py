"""Building code validators: egress.

Every habitable room needs at least one door. A door counts for a room
when the center of its bounding box falls inside the room's outline.
Closets are exempt.
"""

from __future__ import annotations

from floorplan_engine.models.geometry import point_in_polygon, vertex_centroid
from floorplan_engine.models.objects import PlanObject, objects_of_type
from floorplan_engine.models.rooms import RoomBoundary
from floorplan_engine.validators.issues import (
    IssueCategory,
    IssueKind,
    Severity,
    ValidationIssue,
)

EGRESS_EXEMPT_KEYWORDS = ("closet",)


def is_egress_exempt(room: RoomBoundary) -> bool:
    name = room.name.lower()
    return any(keyword in name for keyword in EGRESS_EXEMPT_KEYWORDS)


def check_egress(
    objects: list[PlanObject],
    rooms: list[RoomBoundary],
) -> list[ValidationIssue]:
    """Each closed, non-exempt room must contain a door center."""
    issues: list[ValidationIssue] = []
    door_centers = [door.center() for door in objects_of_type(objects, "door")]

    for room in rooms:
        if not room.closed or is_egress_exempt(room):
            continue
        if any(point_in_polygon(c, room.points) for c in door_centers):
            continue
        issues.append(
            ValidationIssue(
                id=f"no-egress-{room.id}",
                kind=IssueKind.ERROR,
                category=IssueCategory.BUILDING_CODE,
                title="No Egress Door",
                description=f"{room.name} has no door for egress",
                severity=Severity.CRITICAL,
                related_object_ids=[room.id],
                position=vertex_centroid(room.points),
                suggestion="Add at least one door to provide egress from the room",
            )
        )

    return issues
