"""Engine configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SnapConfig(BaseModel):
    """Snap settings from the editor's grid/snap panel.

    Each candidate source has its own switch. ``tolerance`` is the
    acceptance radius around the pointer; ``grid_size`` is the grid pitch.
    """

    snap_to_grid: bool = True
    snap_to_objects: bool = True
    snap_to_guides: bool = True
    tolerance: float = Field(default=10.0, ge=0, description="Acceptance radius in plan units")
    grid_size: float = Field(default=20.0, gt=0, description="Grid pitch in plan units")

    def with_overrides(self, **overrides: object) -> SnapConfig:
        """Copy with the given non-None values replaced (re-validated)."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return SnapConfig.model_validate(data)
