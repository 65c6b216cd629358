"""Geometry validation: overlapping objects."""

from __future__ import annotations

from floorplan_engine.models.geometry import Point2D
from floorplan_engine.models.objects import PlanObject
from floorplan_engine.models.rooms import RoomBoundary
from floorplan_engine.validators.issues import (
    IssueCategory,
    IssueKind,
    Severity,
    ValidationIssue,
)

# Types that may legitimately sit on top of other objects
OVERLAY_TYPES = frozenset({"text", "room"})


def check_overlaps(
    objects: list[PlanObject],
    rooms: list[RoomBoundary],
) -> list[ValidationIssue]:
    """Flag every pair of objects whose bounding boxes overlap.

    Text labels and room objects are skipped. Doors and windows sitting in
    their wall are reported too; the panel lets users dismiss those.
    """
    issues: list[ValidationIssue] = []
    candidates = [obj for obj in objects if obj.type not in OVERLAY_TYPES]

    for i, a in enumerate(candidates):
        box_a = a.bounds()
        for b in candidates[i + 1 :]:
            box_b = b.bounds()
            if not box_a.overlaps(box_b):
                continue
            ca, cb = box_a.center, box_b.center
            issues.append(
                ValidationIssue(
                    id=f"overlap-{a.id}-{b.id}",
                    kind=IssueKind.WARNING,
                    category=IssueCategory.GEOMETRY,
                    title="Overlapping Objects",
                    description=f"{a.type} and {b.type} are overlapping",
                    severity=Severity.MEDIUM,
                    related_object_ids=[a.id, b.id],
                    position=Point2D(x=(ca.x + cb.x) / 2, y=(ca.y + cb.y) / 2),
                    suggestion="Move objects to prevent overlap or check if this is intentional",
                )
            )

    return issues
