"""Plan objects: the flat object graph the engine reads.

Objects come from the editor as ``{id, type, position, properties}``.
The engine never mutates them. Shape-specific geometry is selected through
:class:`ShapeKind`, derived from the object's ``type``.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from floorplan_engine.models.geometry import BoundingBox, Point2D

# Footprint used when a boxed object carries no width/height
DEFAULT_FOOTPRINT = 50.0

LINEAR_TYPES = frozenset({"wall", "line"})


class ShapeKind(str, Enum):
    """Geometric family of a plan object."""

    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    LINEAR = "linear"


class ObjectProperties(BaseModel):
    """Known object properties. Unknown keys are kept as extras."""

    model_config = ConfigDict(extra="allow")

    width: Optional[float] = None
    height: Optional[float] = None
    radius: Optional[float] = None
    points: Optional[list[float]] = Field(
        default=None,
        description="Flat [x1, y1, x2, y2] for linear objects, relative to position",
    )
    thickness: Optional[float] = None
    material: Optional[str] = None
    sill_height: Optional[float] = None
    swing_direction: Optional[str] = Field(
        default=None, description="'inward' (default) or 'outward'"
    )
    door_type: Optional[str] = None


class PlanObject(BaseModel):
    """A placed object: wall, door, window, furniture, text, etc."""

    id: str
    type: str
    position: Point2D = Field(default_factory=lambda: Point2D(x=0.0, y=0.0))
    properties: ObjectProperties = Field(default_factory=ObjectProperties)

    @property
    def kind(self) -> ShapeKind:
        if self.type in LINEAR_TYPES:
            return ShapeKind.LINEAR
        if self.type == "circle":
            return ShapeKind.CIRCLE
        return ShapeKind.RECTANGLE

    def segment(self) -> tuple[Point2D, Point2D]:
        """Absolute endpoints of a linear object.

        Missing or short ``points`` lists are padded with zeros, so an object
        without points is a zero-length segment at its position.
        """
        raw = list(self.properties.points or [])[:4]
        raw += [0.0] * (4 - len(raw))
        ox, oy = self.position.x, self.position.y
        return (
            Point2D(x=ox + raw[0], y=oy + raw[1]),
            Point2D(x=ox + raw[2], y=oy + raw[3]),
        )

    def bounds(self) -> BoundingBox:
        """Plan-space bounding box, per shape kind."""
        props = self.properties
        if self.kind == ShapeKind.LINEAR and props.points:
            return BoundingBox.from_points(list(self.segment()))
        if self.kind == ShapeKind.CIRCLE:
            r = abs(props.radius or 0.0)
            return BoundingBox(
                left=self.position.x - r,
                top=self.position.y - r,
                right=self.position.x + r,
                bottom=self.position.y + r,
            )
        width = props.width if props.width is not None else DEFAULT_FOOTPRINT
        height = props.height if props.height is not None else DEFAULT_FOOTPRINT
        # Negative sizes (objects dragged up/left) still give a normalized box
        return BoundingBox.from_points([
            self.position,
            Point2D(x=self.position.x + width, y=self.position.y + height),
        ])

    def center(self) -> Point2D:
        return self.bounds().center


def objects_of_type(objects: list[PlanObject], *types: str) -> list[PlanObject]:
    """Filter objects by ``type``, preserving input order."""
    wanted = set(types)
    return [obj for obj in objects if obj.type in wanted]
