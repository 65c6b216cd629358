"""Accessibility validators: door swing clearance."""

from __future__ import annotations

from floorplan_engine.models.geometry import BoundingBox
from floorplan_engine.models.objects import PlanObject, objects_of_type
from floorplan_engine.models.rooms import RoomBoundary
from floorplan_engine.validators.issues import (
    IssueCategory,
    IssueKind,
    Severity,
    ValidationIssue,
)
from floorplan_engine.validators.openings import door_width


def swing_area(door: PlanObject) -> BoundingBox:
    """Rectangle swept by the door leaf.

    One door width beyond the door box vertically, and one width to the
    left (inward swing, the default) or to the right (outward swing).
    """
    box = door.bounds()
    width = door_width(door)
    if (door.properties.swing_direction or "inward") == "inward":
        return BoundingBox(
            left=box.left - width,
            top=box.top - width,
            right=box.right,
            bottom=box.bottom + width,
        )
    return BoundingBox(
        left=box.left,
        top=box.top - width,
        right=box.right + width,
        bottom=box.bottom + width,
    )


def check_door_clearance(
    objects: list[PlanObject],
    rooms: list[RoomBoundary],
) -> list[ValidationIssue]:
    """Nothing but walls and other doors may sit in a door's swing."""
    issues: list[ValidationIssue] = []
    obstacles = [obj for obj in objects if obj.type not in ("door", "wall")]

    for door in objects_of_type(objects, "door"):
        swing = swing_area(door)
        center = door.center()
        for obj in obstacles:
            if not swing.overlaps(obj.bounds()):
                continue
            issues.append(
                ValidationIssue(
                    id=f"door-clearance-{door.id}-{obj.id}",
                    kind=IssueKind.WARNING,
                    category=IssueCategory.ACCESSIBILITY,
                    title="Door Swing Obstruction",
                    description=f"{obj.type} may obstruct door swing",
                    severity=Severity.MEDIUM,
                    related_object_ids=[door.id, obj.id],
                    position=center,
                    suggestion="Ensure clear swing path for door operation",
                )
            )

    return issues
