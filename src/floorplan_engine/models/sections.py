"""Section (cut) lines and the elevation slices derived from them."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from floorplan_engine.models.geometry import Point2D
from floorplan_engine.models.ids import generate_id


class SectionDirection(str, Enum):
    """Which end of the cut line carries the view arrow."""

    LEFT_TO_RIGHT = "left-to-right"
    RIGHT_TO_LEFT = "right-to-left"


class SectionStyle(BaseModel):
    weight: float = Field(default=2.0, gt=0, description="Line weight")
    arrow_size: float = Field(default=12.0, ge=0)
    label_offset: float = 20.0
    show_dimensions: bool = True


class SectionLine(BaseModel):
    """A user-drawn cut line across the plan."""

    id: str = Field(default_factory=lambda: generate_id("section"))
    name: str = ""
    start: Point2D
    end: Point2D
    color: str = "#FF6B6B"
    visible: bool = True
    direction: SectionDirection = SectionDirection.LEFT_TO_RIGHT
    style: SectionStyle = Field(default_factory=SectionStyle)

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


class SlicedWall(BaseModel):
    id: str
    position: Point2D
    height: float
    thickness: float
    material: str


class SlicedDoor(BaseModel):
    id: str
    position: Point2D
    width: float
    height: float
    type: str


class SlicedWindow(BaseModel):
    id: str
    position: Point2D
    width: float
    height: float
    sill_height: float

    @property
    def top(self) -> float:
        return self.sill_height + self.height


class SectionSlice(BaseModel):
    """Elements cut by a section line, with the tallest element height."""

    walls: list[SlicedWall] = Field(default_factory=list)
    doors: list[SlicedDoor] = Field(default_factory=list)
    windows: list[SlicedWindow] = Field(default_factory=list)
    max_height: float = 96.0

    @property
    def element_count(self) -> int:
        return len(self.walls) + len(self.doors) + len(self.windows)


class SectionView(BaseModel):
    """Derived elevation view for one committed section line."""

    id: str
    section_line_id: str
    name: str = ""
    scale: float = Field(default=1.0, gt=0)
    show_materials: bool = True
    show_dimensions: bool = True
    slice: SectionSlice = Field(default_factory=SectionSlice)
