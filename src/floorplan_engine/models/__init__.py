"""Floor-plan data models."""

from floorplan_engine.models.ids import generate_id
from floorplan_engine.models.geometry import (
    BoundingBox,
    Point2D,
    point_in_polygon,
    polygon_area,
    polygon_perimeter,
    segment_intersection,
    vertex_centroid,
)
from floorplan_engine.models.objects import ObjectProperties, PlanObject, ShapeKind
from floorplan_engine.models.guides import Guide, GuideOrientation
from floorplan_engine.models.rooms import RoomAttributes, RoomBoundary
from floorplan_engine.models.sections import (
    SectionDirection,
    SectionLine,
    SectionSlice,
    SectionStyle,
    SectionView,
    SlicedDoor,
    SlicedWall,
    SlicedWindow,
)
from floorplan_engine.models.snapshot import PlanSnapshot

__all__ = [
    "generate_id",
    "BoundingBox",
    "Point2D",
    "point_in_polygon",
    "polygon_area",
    "polygon_perimeter",
    "segment_intersection",
    "vertex_centroid",
    "ObjectProperties",
    "PlanObject",
    "ShapeKind",
    "Guide",
    "GuideOrientation",
    "RoomAttributes",
    "RoomBoundary",
    "SectionDirection",
    "SectionLine",
    "SectionSlice",
    "SectionStyle",
    "SectionView",
    "SlicedDoor",
    "SlicedWall",
    "SlicedWindow",
    "PlanSnapshot",
]
