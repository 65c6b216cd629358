"""Section (cut) lines and derived elevation slices."""

from floorplan_engine.sections.engine import (
    MIN_SECTION_LENGTH,
    SectionDrawState,
    SectionEngine,
    arrow_points,
)
from floorplan_engine.sections.slice import derive_view, line_box_crossing, slice_objects

__all__ = [
    "MIN_SECTION_LENGTH",
    "SectionDrawState",
    "SectionEngine",
    "arrow_points",
    "derive_view",
    "line_box_crossing",
    "slice_objects",
]
