"""Snap features per shape kind.

One pure function per :class:`ShapeKind`. Degenerate shapes (zero-size
box, zero radius, zero-length segment) collapse to a single point feature.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from floorplan_engine.models.geometry import Point2D
from floorplan_engine.models.objects import PlanObject, ShapeKind

DEGENERATE_EPSILON = 1e-9


class CandidateKind(str, Enum):
    """Where a snap candidate came from."""

    GRID = "grid"
    OBJECT_EDGE = "object-edge"
    OBJECT_CENTER = "object-center"
    OBJECT_CORNER = "object-corner"
    INTERSECTION = "intersection"
    GUIDE = "guide"


@dataclass
class Feature:
    """A snappable point on an object."""

    point: Point2D
    kind: CandidateKind
    label: str
    object_id: Optional[str] = None


def rectangle_features(obj: PlanObject) -> list[Feature]:
    """Corners, edge midpoints and center of the object's box."""
    box = obj.bounds()
    center = box.center
    if box.width < DEGENERATE_EPSILON and box.height < DEGENERATE_EPSILON:
        return [Feature(center, CandidateKind.OBJECT_CENTER, "Center", obj.id)]

    left, top, right, bottom = box.left, box.top, box.right, box.bottom
    mid_x, mid_y = center.x, center.y
    specs = [
        (left, top, CandidateKind.OBJECT_CORNER, "Top-left corner"),
        (right, top, CandidateKind.OBJECT_CORNER, "Top-right corner"),
        (left, bottom, CandidateKind.OBJECT_CORNER, "Bottom-left corner"),
        (right, bottom, CandidateKind.OBJECT_CORNER, "Bottom-right corner"),
        (mid_x, mid_y, CandidateKind.OBJECT_CENTER, "Center"),
        (mid_x, top, CandidateKind.OBJECT_EDGE, "Top edge center"),
        (mid_x, bottom, CandidateKind.OBJECT_EDGE, "Bottom edge center"),
        (left, mid_y, CandidateKind.OBJECT_EDGE, "Left edge center"),
        (right, mid_y, CandidateKind.OBJECT_EDGE, "Right edge center"),
    ]
    return [Feature(Point2D(x=x, y=y), kind, label, obj.id) for x, y, kind, label in specs]


def circle_features(obj: PlanObject) -> list[Feature]:
    """Center plus the four cardinal points. ``position`` is the center."""
    cx, cy = obj.position.x, obj.position.y
    r = abs(obj.properties.radius or 0.0)
    center = Feature(Point2D(x=cx, y=cy), CandidateKind.OBJECT_CENTER, "Center", obj.id)
    if r < DEGENERATE_EPSILON:
        return [center]
    return [
        center,
        Feature(Point2D(x=cx + r, y=cy), CandidateKind.OBJECT_EDGE, "Right edge", obj.id),
        Feature(Point2D(x=cx - r, y=cy), CandidateKind.OBJECT_EDGE, "Left edge", obj.id),
        Feature(Point2D(x=cx, y=cy + r), CandidateKind.OBJECT_EDGE, "Bottom edge", obj.id),
        Feature(Point2D(x=cx, y=cy - r), CandidateKind.OBJECT_EDGE, "Top edge", obj.id),
    ]


def linear_features(obj: PlanObject) -> list[Feature]:
    """Both endpoints and the midpoint of a wall or line."""
    start, end = obj.segment()
    if start.distance_to(end) < DEGENERATE_EPSILON:
        return [Feature(start, CandidateKind.OBJECT_CORNER, "Line point", obj.id)]
    mid = Point2D(x=(start.x + end.x) / 2, y=(start.y + end.y) / 2)
    return [
        Feature(start, CandidateKind.OBJECT_CORNER, "Line start", obj.id),
        Feature(end, CandidateKind.OBJECT_CORNER, "Line end", obj.id),
        Feature(mid, CandidateKind.OBJECT_CENTER, "Line midpoint", obj.id),
    ]


FEATURE_EXTRACTORS: dict[ShapeKind, Callable[[PlanObject], list[Feature]]] = {
    ShapeKind.RECTANGLE: rectangle_features,
    ShapeKind.CIRCLE: circle_features,
    ShapeKind.LINEAR: linear_features,
}


def object_features(obj: PlanObject) -> list[Feature]:
    """Snap features of any plan object."""
    return FEATURE_EXTRACTORS[obj.kind](obj)
