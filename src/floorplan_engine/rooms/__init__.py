"""Hand-drawn room boundaries."""

from floorplan_engine.rooms.manager import (
    CLOSE_DISTANCE,
    RoomBoundaryManager,
    RoomDrawState,
    boundary_path,
    boundary_svg_path,
    point_in_boundary,
)

__all__ = [
    "CLOSE_DISTANCE",
    "RoomBoundaryManager",
    "RoomDrawState",
    "boundary_path",
    "boundary_svg_path",
    "point_in_boundary",
]
