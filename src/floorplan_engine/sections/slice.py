"""Section slice: collect the walls, doors and windows a cut line crosses.

The crossing test is a box/box interval overlap between the cut line's
bounding box and each element's bounding box. The reported position of a
crossed element is the center of its box, not the exact point where the
line enters it, so elements near a box edge can be attributed loosely.
"""

from __future__ import annotations

from floorplan_engine.models.geometry import BoundingBox, Point2D
from floorplan_engine.models.objects import PlanObject, objects_of_type
from floorplan_engine.models.sections import (
    SectionLine,
    SectionSlice,
    SectionView,
    SlicedDoor,
    SlicedWall,
    SlicedWindow,
)

# Element defaults, in inches
DEFAULT_WALL_HEIGHT = 96.0
DEFAULT_WALL_THICKNESS = 6.0
DEFAULT_WALL_MATERIAL = "Drywall"
DEFAULT_DOOR_WIDTH = 36.0
DEFAULT_DOOR_HEIGHT = 80.0
DEFAULT_DOOR_TYPE = "single"
DEFAULT_WINDOW_WIDTH = 48.0
DEFAULT_WINDOW_HEIGHT = 36.0
DEFAULT_SILL_HEIGHT = 30.0


def _or(value: float | str | None, default: float | str) -> float | str:
    return default if value is None else value


def line_box_crossing(start: Point2D, end: Point2D, box: BoundingBox) -> Point2D | None:
    """Approximate crossing of a segment with a box.

    Rejects when the segment's x- or y-interval misses the box; otherwise
    returns the box center.
    """
    line_box = BoundingBox.from_points([start, end])
    if not line_box.overlaps(box):
        return None
    return box.center


def slice_objects(line: SectionLine, objects: list[PlanObject]) -> SectionSlice:
    """Collect the elements crossed by ``line``."""
    result = SectionSlice(max_height=DEFAULT_WALL_HEIGHT)

    for wall in objects_of_type(objects, "wall"):
        position = line_box_crossing(line.start, line.end, wall.bounds())
        if position is None:
            continue
        props = wall.properties
        sliced = SlicedWall(
            id=wall.id,
            position=position,
            height=_or(props.height, DEFAULT_WALL_HEIGHT),
            thickness=_or(props.thickness, DEFAULT_WALL_THICKNESS),
            material=_or(props.material, DEFAULT_WALL_MATERIAL),
        )
        result.walls.append(sliced)
        result.max_height = max(result.max_height, sliced.height)

    for door in objects_of_type(objects, "door"):
        position = line_box_crossing(line.start, line.end, door.bounds())
        if position is None:
            continue
        props = door.properties
        sliced = SlicedDoor(
            id=door.id,
            position=position,
            width=_or(props.width, DEFAULT_DOOR_WIDTH),
            height=_or(props.height, DEFAULT_DOOR_HEIGHT),
            type=_or(props.door_type, DEFAULT_DOOR_TYPE),
        )
        result.doors.append(sliced)
        result.max_height = max(result.max_height, sliced.height)

    for window in objects_of_type(objects, "window"):
        position = line_box_crossing(line.start, line.end, window.bounds())
        if position is None:
            continue
        props = window.properties
        sliced = SlicedWindow(
            id=window.id,
            position=position,
            width=_or(props.width, DEFAULT_WINDOW_WIDTH),
            height=_or(props.height, DEFAULT_WINDOW_HEIGHT),
            sill_height=_or(props.sill_height, DEFAULT_SILL_HEIGHT),
        )
        result.windows.append(sliced)
        result.max_height = max(result.max_height, sliced.top)

    return result


def derive_view(line: SectionLine, objects: list[PlanObject]) -> SectionView:
    """Build the section view for a committed line."""
    return SectionView(
        id=f"view-{line.id}",
        section_line_id=line.id,
        name=f"{line.name} View",
        slice=slice_objects(line, objects),
    )
