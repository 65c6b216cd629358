"""Opening validation: doors and windows must sit in a wall.

A door or window is "in" a wall when their bounding boxes overlap.
Door widths are checked against residential norms (inches).
"""

from __future__ import annotations

from floorplan_engine.models.objects import PlanObject, objects_of_type
from floorplan_engine.models.rooms import RoomBoundary
from floorplan_engine.models.geometry import Point2D
from floorplan_engine.validators.issues import (
    IssueCategory,
    IssueKind,
    Severity,
    ValidationIssue,
)

DEFAULT_DOOR_WIDTH = 36.0
MIN_DOOR_WIDTH = 24.0
MAX_DOOR_WIDTH = 48.0
MIN_WINDOW_CORNER_DISTANCE = 12.0


def door_width(door: PlanObject) -> float:
    width = door.properties.width
    return DEFAULT_DOOR_WIDTH if width is None else width


def check_door_placement(
    objects: list[PlanObject],
    rooms: list[RoomBoundary],
) -> list[ValidationIssue]:
    """Doors must overlap a wall and have a sensible width."""
    issues: list[ValidationIssue] = []
    walls = objects_of_type(objects, "wall")

    for door in objects_of_type(objects, "door"):
        box = door.bounds()
        center = box.center

        if not any(box.overlaps(wall.bounds()) for wall in walls):
            issues.append(
                ValidationIssue(
                    id=f"door-no-wall-{door.id}",
                    kind=IssueKind.ERROR,
                    category=IssueCategory.ARCHITECTURE,
                    title="Door Not on Wall",
                    description="Door must be placed on a wall",
                    severity=Severity.HIGH,
                    related_object_ids=[door.id],
                    position=center,
                    suggestion="Move door to intersect with a wall",
                )
            )

        width = door_width(door)
        if width < MIN_DOOR_WIDTH:
            issues.append(
                ValidationIssue(
                    id=f"door-too-narrow-{door.id}",
                    kind=IssueKind.WARNING,
                    category=IssueCategory.ARCHITECTURE,
                    title="Door Too Narrow",
                    description=(
                        f'Door width ({width:g}") is below minimum '
                        f'recommended ({MIN_DOOR_WIDTH:g}")'
                    ),
                    severity=Severity.MEDIUM,
                    related_object_ids=[door.id],
                    position=center,
                    suggestion=f'Increase door width to at least {MIN_DOOR_WIDTH:g}" for accessibility',
                )
            )
        elif width > MAX_DOOR_WIDTH:
            issues.append(
                ValidationIssue(
                    id=f"door-too-wide-{door.id}",
                    kind=IssueKind.INFO,
                    category=IssueCategory.ARCHITECTURE,
                    title="Very Wide Door",
                    description=f'Door width ({width:g}") is unusually wide',
                    severity=Severity.LOW,
                    related_object_ids=[door.id],
                    position=center,
                    suggestion="Consider if this door width is intentional",
                )
            )

    return issues


def check_window_placement(
    objects: list[PlanObject],
    rooms: list[RoomBoundary],
) -> list[ValidationIssue]:
    """Windows must overlap a wall and keep clear of the wall's corners.

    The corner test measures from the window's center to the host wall
    box's top-left and bottom-right corners.
    """
    issues: list[ValidationIssue] = []
    walls = objects_of_type(objects, "wall")

    for window in objects_of_type(objects, "window"):
        box = window.bounds()
        center = box.center
        hosts = [wall for wall in walls if box.overlaps(wall.bounds())]

        if not hosts:
            issues.append(
                ValidationIssue(
                    id=f"window-no-wall-{window.id}",
                    kind=IssueKind.ERROR,
                    category=IssueCategory.ARCHITECTURE,
                    title="Window Not on Wall",
                    description="Window must be placed on a wall",
                    severity=Severity.HIGH,
                    related_object_ids=[window.id],
                    position=center,
                    suggestion="Move window to intersect with a wall",
                )
            )
            continue

        for wall in hosts:
            wall_box = wall.bounds()
            near_start = center.distance_to(Point2D(x=wall_box.left, y=wall_box.top))
            near_end = center.distance_to(Point2D(x=wall_box.right, y=wall_box.bottom))
            if min(near_start, near_end) < MIN_WINDOW_CORNER_DISTANCE:
                issues.append(
                    ValidationIssue(
                        id=f"window-corner-{window.id}-{wall.id}",
                        kind=IssueKind.WARNING,
                        category=IssueCategory.ARCHITECTURE,
                        title="Window Too Close to Corner",
                        description="Window is very close to wall corner",
                        severity=Severity.MEDIUM,
                        related_object_ids=[window.id, wall.id],
                        position=center,
                        suggestion=(
                            f'Move window at least {MIN_WINDOW_CORNER_DISTANCE:g}" '
                            f"from wall corners for structural integrity"
                        ),
                    )
                )

    return issues
