"""Alignment guides: infinite horizontal or vertical reference lines."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from floorplan_engine.models.ids import generate_id


class GuideOrientation(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Guide(BaseModel):
    """A guide line.

    ``offset`` is the y coordinate of a horizontal guide and the x
    coordinate of a vertical one.
    """

    id: str = Field(default_factory=lambda: generate_id("guide"))
    orientation: GuideOrientation
    offset: float
    is_temporary: bool = False
    label: Optional[str] = None

    @property
    def color(self) -> str:
        return "#FF6B6B" if self.is_temporary else "#3B82F6"
