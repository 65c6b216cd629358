"""The read-only input bundle handed to the engine by the editor."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from floorplan_engine.config import SnapConfig
from floorplan_engine.models.guides import Guide
from floorplan_engine.models.objects import PlanObject
from floorplan_engine.models.rooms import RoomBoundary


class PlanSnapshot(BaseModel):
    """Objects, committed rooms, guides and snap settings at one instant."""

    objects: list[PlanObject] = Field(default_factory=list)
    rooms: list[RoomBoundary] = Field(default_factory=list)
    guides: list[Guide] = Field(default_factory=list)
    snap: SnapConfig = Field(default_factory=SnapConfig)

    @classmethod
    def load(cls, path: str | Path) -> PlanSnapshot:
        """Read a snapshot dumped by the editor as JSON."""
        path = Path(path)
        return cls.model_validate_json(path.read_text())

    def get_object(self, object_id: str) -> PlanObject | None:
        return next((o for o in self.objects if o.id == object_id), None)

    def closed_rooms(self) -> list[RoomBoundary]:
        return [r for r in self.rooms if r.closed]
