"""Section line drawing and view derivation.

States per line::

    IDLE ──begin──▶ DRAWING ──commit (length >= 20)──▶ COMMITTED
                      │
                      └──commit (too short) / cancel──▶ IDLE

Each committed line owns exactly one derived :class:`SectionView`, rebuilt
whenever the line's endpoints change or the object snapshot is refreshed.
"""

from __future__ import annotations

import logging
from enum import Enum

from floorplan_engine.models.geometry import Point2D
from floorplan_engine.models.objects import PlanObject
from floorplan_engine.models.sections import SectionDirection, SectionLine, SectionView
from floorplan_engine.sections.slice import derive_view

logger = logging.getLogger(__name__)

# Shorter cut lines are treated as stray clicks
MIN_SECTION_LENGTH = 20.0


class SectionDrawState(str, Enum):
    IDLE = "idle"
    DRAWING = "drawing"
    COMMITTED = "committed"


def arrow_points(line: SectionLine) -> list[Point2D]:
    """Arrow tip and its two barbs for the view-direction marker.

    Left-to-right lines carry the arrow at ``end``, right-to-left ones at
    ``start``. Zero-length lines have no arrow.
    """
    dx = line.end.x - line.start.x
    dy = line.end.y - line.start.y
    length = line.length
    if length == 0:
        return []

    ux, uy = dx / length, dy / length
    px, py = -uy, ux
    size = line.style.arrow_size
    tip = line.end if line.direction == SectionDirection.LEFT_TO_RIGHT else line.start

    return [
        tip,
        Point2D(x=tip.x - ux * size + px * size * 0.5, y=tip.y - uy * size + py * size * 0.5),
        Point2D(x=tip.x - ux * size - px * size * 0.5, y=tip.y - uy * size - py * size * 0.5),
    ]


class SectionEngine:
    """Cut lines and section views of one editing session."""

    def __init__(self, objects: list[PlanObject] | None = None, enabled: bool = True) -> None:
        self.objects: list[PlanObject] = list(objects or [])
        self.enabled = enabled
        self.lines: list[SectionLine] = []
        self.views: list[SectionView] = []
        self.state = SectionDrawState.IDLE
        self.current: SectionLine | None = None
        self._sequence = 0

    def get_line(self, line_id: str) -> SectionLine | None:
        return next((line for line in self.lines if line.id == line_id), None)

    def get_view(self, line_id: str) -> SectionView | None:
        return next((v for v in self.views if v.section_line_id == line_id), None)

    # ── Drawing ───────────────────────────────────────────────────────

    def begin(self, point: Point2D) -> SectionLine | None:
        """Start a line at ``point``. Replaces any line still being drawn."""
        if not self.enabled:
            return None
        self.current = SectionLine(start=point, end=point)
        self.state = SectionDrawState.DRAWING
        return self.current

    def update(self, point: Point2D) -> None:
        """Move the free end while drawing (live preview)."""
        if self.state != SectionDrawState.DRAWING or self.current is None:
            return
        self.current.end = point

    def commit(self) -> SectionView | None:
        """Freeze the line and derive its view.

        Lines shorter than :data:`MIN_SECTION_LENGTH` are discarded and the
        engine returns to IDLE.
        """
        if self.state != SectionDrawState.DRAWING or self.current is None:
            return None

        line = self.current
        if line.length < MIN_SECTION_LENGTH:
            logger.debug("Section discarded: length %.1f < %.1f", line.length, MIN_SECTION_LENGTH)
            self.cancel()
            return None

        self._sequence += 1
        line.name = f"Section {self._sequence}"
        self.lines.append(line)
        view = derive_view(line, self.objects)
        self.views.append(view)
        logger.debug("%s committed: %d elements cut", line.name, view.slice.element_count)

        self.current = None
        self.state = SectionDrawState.COMMITTED
        return view

    def cancel(self) -> None:
        self.current = None
        self.state = SectionDrawState.IDLE

    # ── Committed lines ───────────────────────────────────────────────

    def update_line(
        self,
        line_id: str,
        start: Point2D | None = None,
        end: Point2D | None = None,
        **changes: object,
    ) -> SectionView | None:
        """Edit a committed line; endpoint edits rebuild its view, renames retitle it.

        ``changes`` may set ``name``, ``color``, ``visible``, ``direction``
        or ``style``. Returns the (possibly rebuilt) view.
        """
        line = self.get_line(line_id)
        if line is None:
            logger.debug("update_line: no section %s", line_id)
            return None

        changes.pop("id", None)
        updated = line.model_copy(update=changes)
        updated = SectionLine.model_validate(updated.model_dump())
        if start is not None:
            updated.start = start
        if end is not None:
            updated.end = end
        self.lines = [updated if item.id == line_id else item for item in self.lines]

        if start is not None or end is not None:
            return self._rebuild_view(updated)

        view = self.get_view(line_id)
        if view is not None and "name" in changes:
            view = view.model_copy(update={"name": f"{updated.name} View"})
            self.views = [view if v.section_line_id == line_id else v for v in self.views]
        return view

    def remove_line(self, line_id: str) -> None:
        self.lines = [line for line in self.lines if line.id != line_id]
        self.views = [v for v in self.views if v.section_line_id != line_id]

    def refresh(self, objects: list[PlanObject]) -> list[SectionView]:
        """Swap in a new object snapshot and rebuild every view."""
        self.objects = list(objects)
        for line in self.lines:
            self._rebuild_view(line)
        return self.views

    def _rebuild_view(self, line: SectionLine) -> SectionView:
        existing = self.get_view(line.id)
        view = derive_view(line, self.objects)
        if existing is not None:
            view = existing.model_copy(update={"name": view.name, "slice": view.slice})
            self.views = [view if v.section_line_id == line.id else v for v in self.views]
        else:
            self.views.append(view)
        return view

    arrow_points = staticmethod(arrow_points)
