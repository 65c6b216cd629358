"""Geometric primitives for floor-plan interaction.

Coordinates are plan units (inches in the editor's default setup). The
y axis grows downward, matching screen space: "top" is the smaller y.
"""

from __future__ import annotations

import math

from pydantic import BaseModel

# Determinant magnitude below which two segments are treated as parallel
PARALLEL_EPSILON = 1e-10


class Point2D(BaseModel):
    """2D point in plan coordinates."""

    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        """Euclidean distance to another point."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return math.isclose(self.x, other.x, abs_tol=1e-6) and math.isclose(
            self.y, other.y, abs_tol=1e-6
        )

    def __hash__(self) -> int:
        return hash((round(self.x, 6), round(self.y, 6)))


class BoundingBox(BaseModel):
    """Axis-aligned box. ``top`` <= ``bottom`` in screen space."""

    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Point2D:
        return Point2D(x=(self.left + self.right) / 2, y=(self.top + self.bottom) / 2)

    def overlaps(self, other: BoundingBox) -> bool:
        """Interval overlap on both axes. Touching boxes count as overlapping."""
        return not (
            self.right < other.left
            or other.right < self.left
            or self.bottom < other.top
            or other.bottom < self.top
        )

    def contains(self, point: Point2D) -> bool:
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

    def distance_to(self, point: Point2D) -> float:
        """Distance from ``point`` to the nearest point of the box (0 inside)."""
        dx = max(self.left - point.x, 0.0, point.x - self.right)
        dy = max(self.top - point.y, 0.0, point.y - self.bottom)
        return math.hypot(dx, dy)

    def expanded(self, dx: float, dy: float) -> BoundingBox:
        return BoundingBox(
            left=self.left - dx,
            top=self.top - dy,
            right=self.right + dx,
            bottom=self.bottom + dy,
        )

    @classmethod
    def from_points(cls, points: list[Point2D]) -> BoundingBox:
        """Smallest box containing all points. Requires at least one point."""
        return cls(
            left=min(p.x for p in points),
            top=min(p.y for p in points),
            right=max(p.x for p in points),
            bottom=max(p.y for p in points),
        )


def polygon_area(points: list[Point2D]) -> float:
    """Shoelace area of the closed cycle through ``points``.

    Independent of winding order. Fewer than 3 points → 0.
    """
    n = len(points)
    if n < 3:
        return 0.0
    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y
    return abs(area) / 2.0


def polygon_perimeter(points: list[Point2D], closed: bool = True) -> float:
    """Total edge length; ``closed`` adds the edge back to the first point."""
    n = len(points)
    if n < 2:
        return 0.0
    total = sum(points[i].distance_to(points[i + 1]) for i in range(n - 1))
    if closed and n > 2:
        total += points[-1].distance_to(points[0])
    return total


def vertex_centroid(points: list[Point2D]) -> Point2D:
    """Average of the vertices (not the area centroid)."""
    if not points:
        return Point2D(x=0.0, y=0.0)
    return Point2D(
        x=sum(p.x for p in points) / len(points),
        y=sum(p.y for p in points) / len(points),
    )


def point_in_polygon(point: Point2D, vertices: list[Point2D]) -> bool:
    """Ray-casting parity test with a horizontal ray toward +x.

    Points exactly on an edge are not special-cased: for an axis-aligned
    rectangle, points on the left edge and the smaller-y edge report
    inside, points on the right edge and the larger-y edge report outside.
    """
    n = len(vertices)
    if n < 3:
        return False
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = vertices[i].x, vertices[i].y
        xj, yj = vertices[j].x, vertices[j].y
        if ((yi > point.y) != (yj > point.y)) and (
            point.x < (xj - xi) * (point.y - yi) / (yj - yi) + xi
        ):
            inside = not inside
        j = i
    return inside


def segment_intersection(
    p1: Point2D,
    p2: Point2D,
    p3: Point2D,
    p4: Point2D,
) -> Point2D | None:
    """Intersection of segments p1-p2 and p3-p4.

    Returns None for parallel (or degenerate) pairs and when the crossing
    falls outside either segment (t, u outside [0, 1]).
    """
    denom = (p1.x - p2.x) * (p3.y - p4.y) - (p1.y - p2.y) * (p3.x - p4.x)
    if abs(denom) < PARALLEL_EPSILON:
        return None

    t = ((p1.x - p3.x) * (p3.y - p4.y) - (p1.y - p3.y) * (p3.x - p4.x)) / denom
    u = -((p1.x - p2.x) * (p1.y - p3.y) - (p1.y - p2.y) * (p1.x - p3.x)) / denom

    if 0 <= t <= 1 and 0 <= u <= 1:
        return Point2D(x=p1.x + t * (p2.x - p1.x), y=p1.y + t * (p2.y - p1.y))
    return None
