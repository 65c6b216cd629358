"""Room boundaries: hand-drawn floor outlines.

A boundary is open while it is being drawn and closed once committed.
Area lives in ``attributes.area`` and is refreshed by every point mutation
made through the methods below, so it is never stale or negative.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from floorplan_engine.models.geometry import Point2D, polygon_area, polygon_perimeter
from floorplan_engine.models.ids import generate_id

# Default 8 ft ceiling, in inches
DEFAULT_WALL_HEIGHT = 96.0


class RoomAttributes(BaseModel):
    """Descriptive room attributes edited from the room panel."""

    floor_material: Optional[str] = None
    ceiling_material: Optional[str] = None
    wall_height: float = Field(default=DEFAULT_WALL_HEIGHT, gt=0)
    area: float = Field(default=0.0, ge=0, description="Shoelace area in square plan units")


class RoomBoundary(BaseModel):
    """An ordered polygon describing a room's floor outline."""

    id: str = Field(default_factory=lambda: generate_id("room"))
    name: str = ""
    points: list[Point2D] = Field(default_factory=list)
    closed: bool = False
    attributes: RoomAttributes = Field(default_factory=RoomAttributes)
    color: str = "hsl(210, 70%, 85%)"

    @model_validator(mode="after")
    def closed_needs_three_points(self) -> RoomBoundary:
        if self.closed and len(self.points) < 3:
            raise ValueError("A closed room boundary needs at least 3 points")
        self.attributes.area = polygon_area(self.points)
        return self

    @property
    def area(self) -> float:
        return self.attributes.area

    @property
    def perimeter(self) -> float:
        """Outline length; open boundaries don't count the closing edge."""
        return polygon_perimeter(self.points, closed=self.closed)

    def refresh_area(self) -> float:
        self.attributes.area = polygon_area(self.points)
        return self.attributes.area

    def append_point(self, point: Point2D) -> None:
        self.points.append(point)
        self.refresh_area()

    def replace_point(self, index: int, point: Point2D) -> None:
        self.points[index] = point
        self.refresh_area()

    def delete_point(self, index: int) -> None:
        del self.points[index]
        self.refresh_area()
