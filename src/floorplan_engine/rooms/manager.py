"""Room boundary drawing: the polygon-under-construction state machine.

States::

    IDLE ──start──▶ DEFINING ──complete──▶ CLOSED
      ▲               │  ▲                    │
      └────cancel─────┘  └───start_editing────┘

Only one boundary is in progress per manager. Completed boundaries are
appended to ``rooms`` (the committed set); ``start_editing`` pulls a room
back out of that set until it is completed again.
"""

from __future__ import annotations

import logging
import random
from enum import Enum

from floorplan_engine.models.geometry import Point2D, point_in_polygon
from floorplan_engine.models.rooms import DEFAULT_WALL_HEIGHT, RoomAttributes, RoomBoundary
from floorplan_engine.snapping.guides import GuideSet

logger = logging.getLogger(__name__)

# Clicking within this distance of the first point closes the room
CLOSE_DISTANCE = 20.0
MIN_POINTS = 3


class RoomDrawState(str, Enum):
    IDLE = "idle"
    DEFINING = "defining"
    CLOSED = "closed"


def random_pastel() -> str:
    """Random light color for room fills."""
    return f"hsl({random.uniform(0, 360):.0f}, 70%, 85%)"


def point_in_boundary(point: Point2D, boundary: RoomBoundary) -> bool:
    """Ray-casting test against the boundary's polygon."""
    return point_in_polygon(point, boundary.points)


def boundary_path(boundary: RoomBoundary) -> list[Point2D]:
    """Points in drawing order; closed boundaries return to the start."""
    points = list(boundary.points)
    if boundary.closed and points:
        points.append(points[0])
    return points


def boundary_svg_path(boundary: RoomBoundary) -> str:
    """SVG path data for overlays, e.g. ``M 0 0 L 10 0 L 10 10 Z``."""
    if len(boundary.points) < 2:
        return ""
    parts = [f"M {boundary.points[0].x:g} {boundary.points[0].y:g}"]
    parts.extend(f"L {p.x:g} {p.y:g}" for p in boundary.points[1:])
    if boundary.closed:
        parts.append("Z")
    return " ".join(parts)


class RoomBoundaryManager:
    """Owns the working boundary and the committed rooms of one session."""

    def __init__(
        self,
        rooms: list[RoomBoundary] | None = None,
        guides: GuideSet | None = None,
        enabled: bool = True,
    ) -> None:
        self.rooms: list[RoomBoundary] = list(rooms or [])
        self.guides = guides
        self.enabled = enabled
        self.state = RoomDrawState.IDLE
        self.current: RoomBoundary | None = None
        self.editing_id: str | None = None

    @property
    def is_defining(self) -> bool:
        return self.state == RoomDrawState.DEFINING

    def get_room(self, room_id: str) -> RoomBoundary | None:
        return next((r for r in self.rooms if r.id == room_id), None)

    # ── Drawing ───────────────────────────────────────────────────────

    def start(self, name: str | None = None) -> RoomBoundary | None:
        """Begin a new, empty boundary. Replaces any boundary in progress."""
        if not self.enabled:
            return None
        self.current = RoomBoundary(
            name=name or f"Room {len(self.rooms) + 1}",
            attributes=RoomAttributes(wall_height=DEFAULT_WALL_HEIGHT),
            color=random_pastel(),
        )
        self.editing_id = None
        self.state = RoomDrawState.DEFINING
        return self.current

    def add_point(self, point: Point2D) -> RoomBoundary | None:
        """Add a clicked point, or close the room if it lands near the start.

        Returns the completed boundary when the click closed the room.
        """
        if not self.is_defining or self.current is None:
            return None

        point = self._guide_snap(point)
        points = self.current.points
        if len(points) >= MIN_POINTS and point.distance_to(points[0]) < CLOSE_DISTANCE:
            return self.complete()

        self.current.append_point(point)
        return None

    def complete(self) -> RoomBoundary | None:
        """Seal the working boundary and commit it. No-op below 3 points."""
        if self.current is None or len(self.current.points) < MIN_POINTS:
            return None

        room = self.current
        room.refresh_area()
        room.closed = True
        self.rooms.append(room)
        logger.debug("Room '%s' closed: %d points, area %.1f", room.name, len(room.points), room.area)

        self.current = None
        self.editing_id = None
        self.state = RoomDrawState.CLOSED
        return room

    def cancel(self) -> None:
        """Discard the working boundary.

        A room pulled out by ``start_editing`` is dropped with it: it only
        returns to the committed set when re-closed.
        """
        if self.current is not None:
            logger.debug("Room '%s' discarded", self.current.name)
        self.current = None
        self.editing_id = None
        self.state = RoomDrawState.IDLE

    # ── Editing ───────────────────────────────────────────────────────

    def start_editing(self, room_id: str) -> RoomBoundary | None:
        """Re-open a committed room for point editing."""
        room = self.get_room(room_id)
        if room is None:
            logger.debug("start_editing: no room %s", room_id)
            return None
        self.rooms = [r for r in self.rooms if r.id != room_id]
        room.closed = False
        self.current = room
        self.editing_id = room_id
        self.state = RoomDrawState.DEFINING
        return room

    def move_point(self, index: int, position: Point2D) -> None:
        """Move a point of the working boundary (guide-snapped)."""
        if self.current is None or not 0 <= index < len(self.current.points):
            return
        self.current.replace_point(index, self._guide_snap(position))

    def remove_point(self, index: int) -> None:
        """Remove a point of the working boundary, keeping at least 3."""
        if self.current is None or len(self.current.points) <= MIN_POINTS:
            return
        if not 0 <= index < len(self.current.points):
            return
        self.current.delete_point(index)

    # ── Committed rooms ───────────────────────────────────────────────

    def remove_room(self, room_id: str) -> None:
        self.rooms = [r for r in self.rooms if r.id != room_id]

    def rename(self, room_id: str, name: str) -> None:
        room = self.get_room(room_id)
        if room is not None:
            room.name = name

    def update_attributes(self, room_id: str, **attributes: object) -> None:
        """Merge attribute changes into a committed room.

        ``area`` is derived from the points and cannot be set here.
        """
        room = self.get_room(room_id)
        if room is None:
            logger.debug("update_attributes: no room %s", room_id)
            return
        attributes.pop("area", None)
        merged = room.attributes.model_dump() | attributes
        room.attributes = RoomAttributes.model_validate(merged)

    def room_at(self, point: Point2D) -> RoomBoundary | None:
        """First committed room containing ``point``."""
        return next((r for r in self.rooms if point_in_boundary(point, r)), None)

    # ── Geometry helpers ──────────────────────────────────────────────

    point_in_boundary = staticmethod(point_in_boundary)
    path = staticmethod(boundary_path)
    svg_path = staticmethod(boundary_svg_path)

    def _guide_snap(self, point: Point2D) -> Point2D:
        if self.guides is None:
            return point
        snap = self.guides.snap(point)
        return snap.point if snap.snapped else point
